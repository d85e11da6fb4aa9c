import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'tracker_project.settings')

application = get_wsgi_application()

from .startup import ensure_database  # noqa: E402

ensure_database()
