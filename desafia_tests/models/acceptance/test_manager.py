import pendulum
import pytest

from desafia.models.challenge.exceptions import ChallengeDoesNotExist


@pytest.fixture
def challenge(challenge_manager, user_manager):
    user_manager.dynamo.set_user('gid', 'dev@desafia.ai', name='Dev')
    yield challenge_manager.add_challenge('creator', challenge_id='cid', name='Todo App')


def test_accept_then_unaccept(acceptance_manager, challenge, dynamo_client):
    assert acceptance_manager.is_accepted('gid', 'cid') is False

    now = pendulum.now('utc')
    assert acceptance_manager.accept_challenge('gid', 'cid', now=now).id == 'cid'
    assert acceptance_manager.is_accepted('gid', 'cid') is True
    assert dynamo_client.get_item({'PK': 'USER#gid', 'SK': 'CHALLENGE#cid'}) == {
        'PK': 'USER#gid',
        'SK': 'CHALLENGE#cid',
        'userGoogleId': 'gid',
        'challengeId': 'cid',
        'date': now.to_iso8601_string(),
    }

    acceptance_manager.unaccept_challenge('gid', 'cid')
    assert acceptance_manager.is_accepted('gid', 'cid') is False
    assert dynamo_client.get_item({'PK': 'USER#gid', 'SK': 'CHALLENGE#cid'}) is None


def test_accept_twice_overwrites(acceptance_manager, challenge):
    first = pendulum.now('utc')
    acceptance_manager.accept_challenge('gid', 'cid', now=first)
    acceptance_manager.accept_challenge('gid', 'cid', now=first.add(days=1))
    assert acceptance_manager.dynamo.get_acceptance('gid', 'cid')['date'] == first.add(days=1).to_iso8601_string()

    # a single unaccept removes it
    acceptance_manager.unaccept_challenge('gid', 'cid')
    assert acceptance_manager.is_accepted('gid', 'cid') is False


def test_accept_counts_as_interaction(acceptance_manager, challenge):
    acceptance_manager.accept_challenge('gid', 'cid')
    assert acceptance_manager.user_manager.get_user('gid').interactions == 1

    # accepting again is not another interaction, unaccepting takes it back
    acceptance_manager.accept_challenge('gid', 'cid')
    assert acceptance_manager.user_manager.get_user('gid').interactions == 1
    acceptance_manager.unaccept_challenge('gid', 'cid')
    assert acceptance_manager.user_manager.get_user('gid').interactions == 0


def test_accept_unaccept_cycles_do_not_add_up(acceptance_manager, challenge):
    for _ in range(3):
        acceptance_manager.accept_challenge('gid', 'cid')
        acceptance_manager.unaccept_challenge('gid', 'cid')
    assert acceptance_manager.user_manager.get_user('gid').interactions == 0

    # nothing to take back when nothing was accepted
    acceptance_manager.user_manager.increment_interactions('gid')
    acceptance_manager.unaccept_challenge('gid', 'cid')
    assert acceptance_manager.user_manager.get_user('gid').interactions == 1


def test_acceptance_is_not_mistaken_for_user(acceptance_manager, challenge):
    acceptance_manager.accept_challenge('gid', 'cid')
    user = acceptance_manager.user_manager.get_user('gid')
    assert user.email == 'dev@desafia.ai'


def test_unaccept_not_accepted_is_noop(acceptance_manager, challenge):
    acceptance_manager.unaccept_challenge('gid', 'cid')
    assert acceptance_manager.is_accepted('gid', 'cid') is False


def test_challenge_does_not_exist(acceptance_manager):
    with pytest.raises(ChallengeDoesNotExist):
        acceptance_manager.accept_challenge('gid', 'nope')
    with pytest.raises(ChallengeDoesNotExist):
        acceptance_manager.unaccept_challenge('gid', 'nope')


def test_is_accepted_without_user(acceptance_manager):
    assert acceptance_manager.is_accepted(None, 'cid') is False
