from rest_framework import status
from rest_framework.response import Response


def success(data=None, status_code=status.HTTP_200_OK, **extra):
    body = {'success': True}
    body.update({key: value for key, value in extra.items() if value is not None})
    if data is not None:
        body['data'] = data
    return Response(body, status=status_code)


def failure(message, status_code, error=None):
    body = {'success': False, 'message': message}
    if error is not None:
        body['error'] = error
    return Response(body, status=status_code)


def not_found(message):
    return failure(message, status.HTTP_404_NOT_FOUND)


def invalid(message, error):
    return failure(message, status.HTTP_400_BAD_REQUEST, error=error)


def server_error(message, exc):
    return failure(message, status.HTTP_500_INTERNAL_SERVER_ERROR, error=str(exc))
