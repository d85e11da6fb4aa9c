import uuid

from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils import timezone

from tracker_user.models import Person


class Task(models.Model):
    STATUS_NOT_STARTED = 'not-started'
    STATUS_IN_PROGRESS = 'in-progress'
    STATUS_COMPLETED = 'completed'
    STATUS_CHOICES = [
        (STATUS_NOT_STARTED, 'Not started'),
        (STATUS_IN_PROGRESS, 'In progress'),
        (STATUS_COMPLETED, 'Completed'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True, default='')
    # People can be removed without touching the tasks that point at them.
    assigned_to = models.ForeignKey(
        Person, on_delete=models.DO_NOTHING, db_constraint=False, related_name='tasks'
    )
    deadline = models.DateTimeField()
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=STATUS_NOT_STARTED)
    progress = models.PositiveSmallIntegerField(
        default=0, validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['created_at']

    def save(self, *args, **kwargs):
        self.title = (self.title or '').strip()
        self.description = (self.description or '').strip()
        super().save(*args, **kwargs)

    def __str__(self):
        return self.title


class RiskLog(models.Model):
    """Historical record of a project risk calculation. Not written by the API."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    overall_risk = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    high_risk_tasks = models.ManyToManyField(Task, blank=True, related_name='risk_logs')
    calculated_at = models.DateTimeField(default=timezone.now)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-calculated_at']
