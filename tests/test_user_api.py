import uuid

import pytest

from tracker_user.models import Person

pytestmark = pytest.mark.django_db


def test_list_users_sorted_by_name(client, make_person):
    make_person(name='Zara', role=Person.ROLE_PROJECT_MANAGER)
    make_person(name='Aryan')
    response = client.get('/api/users')
    assert response.status_code == 200
    body = response.json()
    assert body['count'] == 2
    assert 'message' not in body
    assert [p['name'] for p in body['data']] == ['Aryan', 'Zara']
    assert set(body['data'][0]) == {'id', 'name', 'role'}


def test_list_users_empty_suggests_seeding(client):
    body = client.get('/api/users/').json()
    assert body['success'] is True
    assert body['count'] == 0
    assert body['data'] == []
    assert 'seed' in body['message']


def test_get_user(client, make_person):
    person = make_person(name='Indresh', email='  Indresh.U@Example.com ')
    response = client.get(f'/api/users/{person.id}')
    assert response.status_code == 200
    data = response.json()['data']
    assert data['email'] == 'indresh.u@example.com'
    assert data['role'] == 'learner'


@pytest.mark.parametrize('user_id', [uuid.uuid4(), 'nobody'])
def test_get_missing_user(client, user_id):
    response = client.get(f'/api/users/{user_id}')
    assert response.status_code == 404
    assert response.json() == {'success': False, 'message': 'User not found'}


def test_seed_check_on_empty_database(client):
    data = client.get('/api/users/check').json()['data']
    assert data['users'] == 0
    assert data['tasks'] == 0
    assert data['needsSeeding'] is True
    assert data['message'].startswith('No users found')


def test_seed_check_with_data(client, make_task):
    make_task()
    data = client.get('/api/users/check').json()['data']
    assert data == {
        'users': 1,
        'tasks': 1,
        'needsSeeding': False,
        'message': 'Found 1 users and 1 tasks',
    }
