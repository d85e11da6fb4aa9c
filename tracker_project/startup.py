import logging
import sys

from django.db import OperationalError, connections

logger = logging.getLogger(__name__)


def ensure_database(alias='default'):
    """Open a connection to the configured database or stop the process."""
    connection = connections[alias]
    try:
        connection.ensure_connection()
    except OperationalError as e:
        logger.error("Database connection error (%s): %s", connection.settings_dict.get('NAME'), e)
        sys.exit(1)
    logger.info("Connected to database %s", connection.settings_dict.get('NAME'))
