import os
from unittest import mock

import moto
import pytest

# moto wants credentials to exist, make sure we never touch a real account
os.environ.setdefault('AWS_ACCESS_KEY_ID', 'testing')
os.environ.setdefault('AWS_SECRET_ACCESS_KEY', 'testing')
os.environ.setdefault('AWS_DEFAULT_REGION', 'sa-east-1')

from desafia import clients, models  # noqa: E402

from .dynamodb.table_schema import main_table_schema  # noqa: E402


@pytest.fixture
def dynamo_client():
    with moto.mock_aws():
        yield clients.DynamoClient(table_name='main-table', create_table_schema=main_table_schema)


@pytest.fixture
def google_client():
    yield mock.Mock(clients.GoogleClient(token_info_url='https://tokeninfo.test'))


@pytest.fixture
def user_manager(dynamo_client, google_client):
    yield models.UserManager({'dynamo': dynamo_client, 'google': google_client})


@pytest.fixture
def challenge_manager(dynamo_client):
    yield models.ChallengeManager({'dynamo': dynamo_client})


@pytest.fixture
def solution_manager(dynamo_client, google_client):
    yield models.SolutionManager({'dynamo': dynamo_client, 'google': google_client})


@pytest.fixture
def comment_manager(dynamo_client, google_client):
    yield models.CommentManager({'dynamo': dynamo_client, 'google': google_client})


@pytest.fixture
def acceptance_manager(dynamo_client, google_client):
    yield models.AcceptanceManager({'dynamo': dynamo_client, 'google': google_client})

