import os
from dataclasses import dataclass, field


def _as_bool(value):
    return str(value).strip().lower() in ('1', 'true', 'yes', 'on')


def _as_list(value):
    return [item.strip() for item in value.split(',') if item.strip()]


@dataclass(frozen=True)
class TrackerConfig:
    """
    Process-wide settings, read once at startup and handed to Django settings.

    Every value comes from a TRACKER_* environment variable (a .env file next to
    manage.py is loaded first by the entry points).
    """
    secret_key: str = 'dev-secret-change-me'
    debug: bool = False
    allowed_hosts: list = field(default_factory=lambda: ['localhost', '127.0.0.1'])
    database_engine: str = 'django.db.backends.sqlite3'
    database_name: str = 'tracker.sqlite3'
    database_host: str = ''
    database_port: str = ''
    database_user: str = ''
    database_password: str = ''
    host: str = '127.0.0.1'
    port: int = 5001
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            secret_key=env.get('TRACKER_SECRET_KEY', defaults.secret_key),
            debug=_as_bool(env.get('TRACKER_DEBUG', 'false')),
            allowed_hosts=_as_list(env['TRACKER_ALLOWED_HOSTS']) if 'TRACKER_ALLOWED_HOSTS' in env else defaults.allowed_hosts,
            database_engine=env.get('TRACKER_DATABASE_ENGINE', defaults.database_engine),
            database_name=env.get('TRACKER_DATABASE_NAME', defaults.database_name),
            database_host=env.get('TRACKER_DATABASE_HOST', ''),
            database_port=env.get('TRACKER_DATABASE_PORT', ''),
            database_user=env.get('TRACKER_DATABASE_USER', ''),
            database_password=env.get('TRACKER_DATABASE_PASSWORD', ''),
            host=env.get('TRACKER_HOST', defaults.host),
            port=int(env.get('TRACKER_PORT', defaults.port)),
            log_level=env.get('TRACKER_LOG_LEVEL', defaults.log_level).upper(),
        )

    @property
    def address(self):
        return f'{self.host}:{self.port}'

    def database(self, base_dir):
        name = self.database_name
        if self.database_engine.endswith('sqlite3') and not os.path.isabs(name):
            name = os.path.join(base_dir, name)
        return {
            'ENGINE': self.database_engine,
            'NAME': name,
            'HOST': self.database_host,
            'PORT': self.database_port,
            'USER': self.database_user,
            'PASSWORD': self.database_password,
        }
