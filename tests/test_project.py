from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.commands.runserver import Command as BaseRunserverCommand
from django.db import OperationalError
from django.utils import timezone

from tracker_app.management.commands.runserver import Command as RunserverCommand
from tracker_app.models import Task
from tracker_project.config import TrackerConfig
from tracker_project.startup import ensure_database
from tracker_user.models import Person


def test_config_defaults():
    config = TrackerConfig.from_env({})
    assert config.port == 5001
    assert config.debug is False
    assert config.database_engine == 'django.db.backends.sqlite3'
    assert config.address == '127.0.0.1:5001'


def test_config_from_env():
    config = TrackerConfig.from_env({
        'TRACKER_DEBUG': 'yes',
        'TRACKER_PORT': '8080',
        'TRACKER_HOST': '0.0.0.0',
        'TRACKER_ALLOWED_HOSTS': 'tracker.local, api.tracker.local',
        'TRACKER_LOG_LEVEL': 'debug',
    })
    assert config.debug is True
    assert config.address == '0.0.0.0:8080'
    assert config.allowed_hosts == ['tracker.local', 'api.tracker.local']
    assert config.log_level == 'DEBUG'


def test_sqlite_name_is_resolved_against_base_dir(tmp_path):
    database = TrackerConfig.from_env({'TRACKER_DATABASE_NAME': 'db.sqlite3'}).database(str(tmp_path))
    assert database['NAME'] == str(tmp_path / 'db.sqlite3')


def test_unreachable_database_exits():
    with patch('tracker_project.startup.connections') as connections:
        connections.__getitem__.return_value.ensure_connection.side_effect = OperationalError('refused')
        with pytest.raises(SystemExit) as exc:
            ensure_database()
    assert exc.value.code == 1


@pytest.mark.django_db
def test_index_and_health(client):
    index = client.get('/').json()
    assert index['success'] is True
    assert index['endpoints']['risk'] == '/api/risk/project'
    health = client.get('/api/health').json()
    assert health['message'] == 'Server is running'
    assert 'timestamp' in health


@pytest.mark.django_db
def test_unknown_route_returns_json_404(client):
    response = client.get('/api/nothing/here')
    assert response.status_code == 404
    assert response.json()['success'] is False


@pytest.mark.django_db
def test_seed_data_creates_sample_project():
    call_command('seed_data')
    assert Person.objects.count() == 4
    assert Task.objects.count() == 5
    assert Task.objects.get(title='Design Database Schema').deadline < timezone.now()
    assert Task.objects.filter(status=Task.STATUS_NOT_STARTED).count() == 1


@pytest.mark.django_db
def test_seed_data_skips_when_people_exist(capsys):
    Person.objects.create(name='Existing', email='existing@example.com')
    call_command('seed_data')
    assert Person.objects.count() == 1
    assert 'Use --force' in capsys.readouterr().out


@pytest.mark.django_db
def test_seed_data_force_replaces_data():
    call_command('seed_data')
    call_command('seed_data', '--force')
    assert Person.objects.count() == 4
    assert Task.objects.count() == 5


@pytest.fixture
def configured_address(settings):
    settings.CONFIG = TrackerConfig(host='0.0.0.0', port=8123)
    with patch('tracker_app.management.commands.runserver.ensure_database') as ensure, \
            patch.object(BaseRunserverCommand, 'run') as run:
        yield ensure, run


@pytest.mark.parametrize('args', [
    [],
    ['--verbosity', '2'],
    ['--noreload'],
    ['--verbosity', '2', '--noreload'],
])
def test_runserver_defaults_to_configured_address(configured_address, args):
    ensure, run = configured_address
    command = RunserverCommand()
    call_command(command, *args)
    assert (command.addr, command.port) == ('0.0.0.0', '8123')
    ensure.assert_called_once_with()
    run.assert_called_once()


def test_runserver_explicit_address_wins(configured_address):
    command = RunserverCommand()
    call_command(command, '10.0.0.5:9000', '--verbosity', '2')
    assert (command.addr, command.port) == ('10.0.0.5', '9000')
