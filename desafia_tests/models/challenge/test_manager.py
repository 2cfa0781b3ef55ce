import uuid

import pendulum
import pytest

from desafia.models.challenge.exceptions import ChallengeAlreadyExists, ChallengeDoesNotExist
from desafia.models.challenge.images import CATEGORY_IMAGES


def test_add_challenge_with_id(challenge_manager):
    now = pendulum.now('utc')
    challenge = challenge_manager.add_challenge(
        'gid',
        challenge_id='cid',
        name='Todo App',
        description='Build a todo app',
        tags=['react', 'css'],
        categories=['Desenvolvimento Web'],
        details='## Requirements',
        now=now,
    )
    assert challenge.id == 'cid'
    assert challenge.user_google_id == 'gid'
    assert challenge.item == {
        'PK': 'CHALLENGE#Todo App',
        'SK': 'USER#gid',
        'id': 'cid',
        'userGoogleId': 'gid',
        'name': 'Todo App',
        'description': 'Build a todo app',
        'tags': ['react', 'css'],
        'categories': ['Desenvolvimento Web'],
        'imageUrl': CATEGORY_IMAGES['Desenvolvimento Web'],
        'details': '## Requirements',
        'the_one': False,
        'createdAt': now.to_iso8601_string(),
    }
    assert challenge_manager.get_challenge('cid').item == challenge.item


def test_add_challenge_generates_id(challenge_manager):
    challenge1 = challenge_manager.add_challenge('gid', name='One')
    challenge2 = challenge_manager.add_challenge('gid', name='Two')
    assert uuid.UUID(challenge1.id)
    assert uuid.UUID(challenge2.id)
    assert challenge1.id != challenge2.id
    assert challenge_manager.get_challenge(challenge1.id).item['name'] == 'One'


def test_add_challenge_without_name_keyed_by_id(challenge_manager):
    challenge = challenge_manager.add_challenge('gid', challenge_id='cid')
    assert challenge.item['PK'] == 'CHALLENGE#cid'
    assert 'imageUrl' not in challenge.item


def test_add_challenge_same_name_same_creator(challenge_manager):
    challenge_manager.add_challenge('gid', name='Todo App')
    with pytest.raises(ChallengeAlreadyExists):
        challenge_manager.add_challenge('gid', name='Todo App')


def test_get_challenge_does_not_exist(challenge_manager):
    assert challenge_manager.get_challenge('nope') is None


def test_list_challenges_filters(challenge_manager):
    challenge_manager.add_challenge('gid', challenge_id='c1', name='Todo App', tags=['react'], categories=['Web'])
    challenge_manager.add_challenge(
        'gid', challenge_id='c2', name='Todo API', tags=['python', 'react'], categories=['Web', 'Backend']
    )
    challenge_manager.add_challenge('gid', challenge_id='c3', name='Chat', tags=['python'], categories=['Backend'])

    def ids(**kwargs):
        resp = challenge_manager.list_challenges(**kwargs)
        assert resp['count'] == len(resp['challenges'])
        return sorted(challenge.id for challenge in resp['challenges'])

    assert ids() == ['c1', 'c2', 'c3']
    assert ids(search='Todo') == ['c1', 'c2']
    assert ids(search='Nothing') == []
    assert ids(categories=['Web']) == ['c1', 'c2']
    assert ids(categories=['Web', 'Backend']) == ['c2']
    assert ids(tags=['python']) == ['c2', 'c3']
    assert ids(tags=['python', 'react']) == ['c2']
    assert ids(search='Todo', tags=['python'], categories=['Backend']) == ['c2']


def test_list_challenges_ignores_other_rows(challenge_manager, dynamo_client):
    challenge_manager.add_challenge('gid', challenge_id='c1', name='Todo App')
    dynamo_client.put_item({'PK': 'SOLUTION#s1', 'SK': 'CHALLENGE#c1', 'name': 'Todo App'})
    dynamo_client.put_item({'PK': 'USER#gid', 'SK': 'CHALLENGE#c1'})
    resp = challenge_manager.list_challenges()
    assert resp['count'] == 1
    assert resp['challenges'][0].id == 'c1'


def test_list_challenges_pagination(challenge_manager):
    for i in range(12):
        challenge_manager.add_challenge('gid', challenge_id=f'c{i}', name=f'Challenge {i}')
    scan_order = [challenge.id for challenge in challenge_manager.list_challenges(page=0)['challenges']]
    everything = [item['id'] for item in challenge_manager.dynamo.generate_challenges()]
    assert scan_order == everything[0:5]

    for page in range(4):
        resp = challenge_manager.list_challenges(page=page)
        assert resp['count'] == 12
        assert [challenge.id for challenge in resp['challenges']] == everything[5 * page : 5 * page + 5]

    assert len(challenge_manager.list_challenges(page=2)['challenges']) == 2
    assert challenge_manager.list_challenges(page=3)['challenges'] == []


def test_the_one(challenge_manager):
    assert challenge_manager.get_the_one() is None
    challenge_manager.add_challenge('gid', challenge_id='c1', name='One')
    challenge_manager.add_challenge('gid', challenge_id='c2', name='Two')
    assert challenge_manager.get_the_one() is None

    assert challenge_manager.set_the_one('c1').is_the_one
    assert challenge_manager.get_the_one().id == 'c1'

    # featuring another one un-features the first
    challenge_manager.set_the_one('c2')
    assert challenge_manager.get_the_one().id == 'c2'
    assert challenge_manager.get_challenge('c1').is_the_one is False


def test_set_the_one_does_not_exist(challenge_manager):
    with pytest.raises(ChallengeDoesNotExist):
        challenge_manager.set_the_one('nope')


def test_serialize(challenge_manager):
    challenge = challenge_manager.add_challenge('gid', challenge_id='cid', name='Chat', categories=['Redes'])
    assert challenge.serialize() == {
        'id': 'cid',
        'name': 'Chat',
        'description': None,
        'details': None,
        'tags': [],
        'categories': ['Redes'],
        'imageUrl': CATEGORY_IMAGES['Redes'],
        'the_one': False,
        'userGoogleId': 'gid',
    }
    assert challenge.serialize(accepted=True)['accepted'] is True
