from django.conf import settings
from django.core.management.commands.runserver import Command as BaseRunserverCommand

from tracker_project.startup import ensure_database


class Command(BaseRunserverCommand):
    help = "Check the database, then serve on the configured host and port unless an address is given."

    def handle(self, *args, **options):
        config = settings.CONFIG
        # Used by the parent only when no addrport argument was parsed.
        self.default_addr = config.host
        self.default_port = str(config.port)
        ensure_database()
        super().handle(*args, **options)
