import uuid

from django.db import models


class Person(models.Model):
    ROLE_LEARNER = 'learner'
    ROLE_TEAM_LEADER = 'team-leader'
    ROLE_PROJECT_MANAGER = 'project-manager'
    ROLE_CHOICES = [
        (ROLE_LEARNER, 'Learner'),
        (ROLE_TEAM_LEADER, 'Team leader'),
        (ROLE_PROJECT_MANAGER, 'Project manager'),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES, default=ROLE_LEARNER)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def save(self, *args, **kwargs):
        self.name = (self.name or '').strip()
        self.email = (self.email or '').strip().lower()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} ({self.role})"
