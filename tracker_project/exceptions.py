import logging

from rest_framework.views import exception_handler

from .responses import failure

logger = logging.getLogger(__name__)


def envelope_exception_handler(exc, context):
    """
    Reshape errors DRF raises before a view body runs (unknown method, bad
    media type) into the ``{success, message, error}`` envelope.
    """
    response = exception_handler(exc, context)
    if response is None:
        logger.exception("Unhandled error in %s", context.get('view').__class__.__name__)
        return failure('Internal server error', 500, error=str(exc))

    detail = response.data.get('detail') if isinstance(response.data, dict) else None
    message = str(detail) if detail is not None else 'Request failed'
    envelope = failure(message, response.status_code, error=None if detail is not None else response.data)
    for header in ('Allow', 'Retry-After'):
        if response.has_header(header):
            envelope[header] = response[header]
    return envelope
