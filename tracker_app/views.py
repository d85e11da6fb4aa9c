# tracker_app/views.py
import logging
from collections.abc import Mapping

from django.core.exceptions import ValidationError
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import APIView

from tracker_project.responses import invalid, not_found, server_error, success
from tracker_user.models import Person
from .dashboard import build_dashboard
from .models import Task
from .risk import calculate_project_risk
from .serializers import ScoredTaskSerializer, TaskSerializer

logger = logging.getLogger(__name__)

NOT_A_DICT = {'non_field_errors': ['Invalid data. Expected a dictionary.']}


def all_tasks():
    # prefetch rather than join so tasks whose assignee was removed still load
    return Task.objects.prefetch_related('assigned_to')


class TaskListView(APIView):
    """
    Collection endpoint for tasks.

    GET returns every task with its assignee's name and role.
    POST checks that the assignee exists before validating and saving the task.
    """

    def get(self, request):
        """
        List every task, oldest first.

        Returns:
            Response: {"success": true, "count": n, "data": [task, ...]} where each
            task's assignedTo holds the assignee's id, name and role.
        """
        try:
            tasks = list(all_tasks())
            logger.info("Fetched %d tasks", len(tasks))
            return success(TaskSerializer(tasks, many=True).data, count=len(tasks))
        except Exception as e:
            logger.exception("Error fetching tasks")
            return server_error('Error fetching tasks', e)

    def post(self, request):
        """
        Create a task for an existing person.

        Request Body:
            title (str), deadline (ISO datetime or YYYY-MM-DD) and assignedTo (person id)
            are required; description, status and progress are optional.

        Returns:
            Response: 201 with the created task, its assignee including email.
            404 when assignedTo names no person, 400 on any other invalid input.
        """
        try:
            if not isinstance(request.data, Mapping):
                return invalid('Error creating task', NOT_A_DICT)
            assignee_id = request.data.get('assignedTo')
            if assignee_id in (None, ''):
                return invalid('Error creating task', {'assignedTo': ['This field is required.']})
            if not Person.objects.filter(id=assignee_id).exists():
                return not_found('User not found')

            serializer = TaskSerializer(data=request.data, context={'assignee': 'contact'})
            if not serializer.is_valid():
                return invalid('Error creating task', serializer.errors)
            task = serializer.save()
            logger.info("Created task %s for %s", task.pk, assignee_id)
            return success(serializer.data, status_code=status.HTTP_201_CREATED)
        except ValidationError:
            # assignedTo was not a well-formed id, so no such person
            return not_found('User not found')
        except APIException as e:
            return invalid('Error creating task', str(e.detail))
        except Exception as e:
            logger.exception("Error creating task")
            return server_error('Error creating task', e)


class TaskDetailView(APIView):
    """Single task: fetch, partial update or delete by id."""

    def get(self, request, pk):
        """
        Fetch one task.

        Args:
            pk (str): Task id. Ids that are not UUIDs are reported as not found.

        Returns:
            Response: the task with its assignee's id, name, email and role, or 404.
        """
        try:
            task = all_tasks().get(id=pk)
            return success(TaskSerializer(task, context={'assignee': 'contact'}).data)
        except (Task.DoesNotExist, ValidationError):
            return not_found('Task not found')
        except Exception as e:
            logger.exception("Error fetching task %s", pk)
            return server_error('Error fetching task', e)

    def put(self, request, pk):
        """
        Update the fields present in the body; PATCH behaves the same.

        Args:
            pk (str): Task id.

        Returns:
            Response: 200 with the updated task, 404 if missing, 400 if a sent
            field fails validation.
        """
        try:
            task = Task.objects.get(id=pk)
        except (Task.DoesNotExist, ValidationError):
            return not_found('Task not found')
        except Exception as e:
            logger.exception("Error loading task %s", pk)
            return server_error('Error updating task', e)

        try:
            # Only the fields sent are validated and replaced.
            serializer = TaskSerializer(task, data=request.data, partial=True, context={'assignee': 'contact'})
            if not serializer.is_valid():
                return invalid('Error updating task', serializer.errors)
            serializer.save()
            logger.info("Updated task %s", pk)
            return success(serializer.data)
        except APIException as e:
            return invalid('Error updating task', str(e.detail))
        except Exception as e:
            logger.exception("Error updating task %s", pk)
            return server_error('Error updating task', e)

    patch = put

    def delete(self, request, pk):
        """
        Delete a task outright.

        Args:
            pk (str): Task id.

        Returns:
            Response: 200 with the deleted task and a confirmation message, or 404.
        """
        try:
            task = all_tasks().get(id=pk)
            data = TaskSerializer(task).data
            task.delete()
            logger.info("Deleted task %s", pk)
            return success(data, message='Task deleted successfully')
        except (Task.DoesNotExist, ValidationError):
            return not_found('Task not found')
        except Exception as e:
            logger.exception("Error deleting task %s", pk)
            return server_error('Error deleting task', e)


class ProjectRiskView(APIView):
    """Overall delay risk for the project plus the tasks driving it."""

    def get(self, request):
        """
        Score every task and summarise the project.

        Returns:
            Response: {"overallRisk": int, "highRiskTasks": [task + riskScore, ...],
            "message": str}. High-risk tasks score 60 or more, highest first.
        """
        try:
            tasks = list(all_tasks())
            risk = calculate_project_risk(tasks, timezone.now())
            scores = {item.task.pk: item.risk_score for item in risk.high_risk_tasks}
            high_risk = ScoredTaskSerializer(
                [item.task for item in risk.high_risk_tasks],
                many=True,
                context={'scores': scores},
            ).data
            return success({
                'overallRisk': risk.overall_risk,
                'highRiskTasks': high_risk,
                'message': risk.message,
            })
        except Exception as e:
            logger.exception("Error calculating project risk")
            return server_error('Error calculating project risk', e)


class DashboardView(APIView):
    """Summary figures for the home screen."""

    def get(self, request):
        """
        Count tasks, average their progress and list what is due this week.

        Returns:
            Response: totalTasks, completedTasks, pendingTasks, overallProgress,
            upcomingDeadlines (at most five open tasks due within seven days,
            earliest first) and riskScore.
        """
        try:
            summary = build_dashboard(all_tasks(), timezone.now())
            return success({
                'totalTasks': summary.total_tasks,
                'completedTasks': summary.completed_tasks,
                'pendingTasks': summary.pending_tasks,
                'overallProgress': summary.overall_progress,
                'upcomingDeadlines': TaskSerializer(summary.upcoming_deadlines, many=True).data,
                'riskScore': summary.risk_score,
            })
        except Exception as e:
            logger.exception("Error fetching dashboard data")
            return server_error('Error fetching dashboard data', e)
