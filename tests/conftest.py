"""Shared fixtures for the tracker test suite."""
from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from tracker_app.models import Task
from tracker_user.models import Person


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def make_person(db):
    counter = {'n': 0}

    def _make(name=None, role=Person.ROLE_LEARNER, email=None):
        counter['n'] += 1
        n = counter['n']
        return Person.objects.create(
            name=name or f"Person {n}",
            email=email or f"person{n}@example.com",
            role=role,
        )
    return _make


@pytest.fixture
def person(make_person):
    return make_person(name='Shivani', role=Person.ROLE_TEAM_LEADER)


@pytest.fixture
def make_task(db, person):
    def _make(days=10, status=Task.STATUS_IN_PROGRESS, progress=50, title='Task', assignee=None, **extra):
        return Task.objects.create(
            title=title,
            assigned_to=assignee or person,
            deadline=timezone.now() + timedelta(days=days),
            status=status,
            progress=progress,
            **extra,
        )
    return _make
