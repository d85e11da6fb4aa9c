# tracker_user/views.py
import logging

from django.core.exceptions import ValidationError
from rest_framework.views import APIView

from tracker_app.models import Task
from tracker_project.responses import not_found, server_error, success
from .models import Person
from .serializers import PersonSerializer, PersonSummarySerializer

logger = logging.getLogger(__name__)


class PersonListView(APIView):
    """
    Lists everyone who can be assigned a task, sorted by name.
    Only id, name and role are returned; this feeds the assignee picker.
    """

    def get(self, request):
        """
        List people for the assignee picker.

        Returns:
            Response: {"success": true, "count": n, "data": [{id, name, role}, ...]},
            plus a message suggesting seeding when nobody exists yet.
        """
        try:
            people = Person.objects.order_by('name')
            data = PersonSummarySerializer(people, many=True).data
            logger.info("Listed %d people", len(data))
            if not data:
                logger.warning("No people found; run `manage.py seed_data` to add sample data")
            return success(
                data,
                count=len(data),
                message='No users found. Please seed the database.' if not data else None,
            )
        except Exception as e:
            logger.exception("Error fetching users")
            return server_error('Error fetching users', e)


class PersonDetailView(APIView):
    """A single person, including email and timestamps."""

    def get(self, request, pk):
        """
        Fetch one person.

        Args:
            pk (str): Person id. Ids that are not UUIDs are reported as not found.

        Returns:
            Response: the full person record, or 404.
        """
        try:
            person = Person.objects.get(id=pk)
            return success(PersonSerializer(person).data)
        except (Person.DoesNotExist, ValidationError):
            return not_found('User not found')
        except Exception as e:
            logger.exception("Error fetching user %s", pk)
            return server_error('Error fetching user', e)


class SeedCheckView(APIView):
    """Reports whether the database still needs sample data."""

    def get(self, request):
        """
        Returns:
            Response: user and task counts, needsSeeding (true when there are no
            people) and a human-readable hint.
        """
        try:
            people = Person.objects.count()
            tasks = Task.objects.count()
            if people == 0:
                message = 'No users found. Run: python manage.py seed_data'
            else:
                message = f"Found {people} users and {tasks} tasks"
            return success({
                'users': people,
                'tasks': tasks,
                'needsSeeding': people == 0,
                'message': message,
            })
        except Exception as e:
            logger.exception("Error checking database")
            return server_error('Error checking database', e)
