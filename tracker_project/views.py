from django.http import JsonResponse
from django.utils import timezone
from rest_framework.views import APIView

from .responses import success

SERVICE_NAME = 'Student Project Tracker API'
SERVICE_VERSION = '1.0.0'


class IndexView(APIView):
    def get(self, request):
        return success(
            message=SERVICE_NAME,
            version=SERVICE_VERSION,
            endpoints={
                'tasks': '/api/tasks',
                'users': '/api/users',
                'risk': '/api/risk/project',
                'dashboard': '/api/dashboard',
                'health': '/api/health',
            },
        )


class HealthView(APIView):
    def get(self, request):
        return success(message='Server is running', timestamp=timezone.now().isoformat())


def route_not_found(request, exception=None):
    return JsonResponse({'success': False, 'message': 'Route not found'}, status=404)


def internal_error(request):
    return JsonResponse({'success': False, 'message': 'Internal server error'}, status=500)
