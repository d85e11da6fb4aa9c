from datetime import timedelta

from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from tracker_app.models import Task
from tracker_user.models import Person

SAMPLE_PEOPLE = [
    {'name': 'Aryan Chaturvedi', 'email': 'aryan.chaturvedi@example.com', 'role': Person.ROLE_LEARNER},
    {'name': 'Shivani', 'email': 'shivani.tiwari@example.com', 'role': Person.ROLE_TEAM_LEADER},
    {'name': 'Indresh', 'email': 'indresh.upadhyay@example.com', 'role': Person.ROLE_PROJECT_MANAGER},
    {'name': 'Abhishek', 'email': 'abhishek@example.com', 'role': Person.ROLE_LEARNER},
]


class Command(BaseCommand):
    help = "Populate the database with sample people and tasks covering each risk rule."

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help="Delete existing people and tasks before seeding.",
        )

    def handle(self, *args, **options):
        existing = list(Person.objects.order_by('name'))
        if existing and not options['force']:
            self.stdout.write(f"Found {len(existing)} existing users in database.")
            for index, person in enumerate(existing, start=1):
                self.stdout.write(f"  {index}. {person.name} ({person.email}) - {person.role}")
            self.stdout.write("Skipping seeding. Use --force to re-seed.")
            return

        with transaction.atomic():
            if existing:
                Task.objects.all().delete()
                Person.objects.all().delete()
                self.stdout.write("Cleared existing data")

            people = [Person.objects.create(**fields) for fields in SAMPLE_PEOPLE]
            tasks = self._create_tasks(people)

        self.stdout.write(self.style.SUCCESS(
            f"Database seeded: {len(people)} users, {len(tasks)} tasks"
        ))

    def _create_tasks(self, people):
        learner, leader, manager = people[:3]
        now = timezone.now()
        day = timedelta(days=1)
        samples = [
            # overdue
            ('Design Database Schema', 'Create ER diagram and design database tables',
             learner, now - day, Task.STATUS_IN_PROGRESS, 60),
            # low progress, due tomorrow
            ('Implement User Authentication', 'Build login and registration system',
             leader, now + day, Task.STATUS_IN_PROGRESS, 30),
            ('Create API Endpoints', 'Develop REST API for task management',
             manager, now + 3 * day, Task.STATUS_IN_PROGRESS, 45),
            ('Write Unit Tests', 'Create test cases for all modules',
             learner, now + 7 * day, Task.STATUS_IN_PROGRESS, 70),
            ('Deploy Application', 'Deploy to production server',
             leader, now + 14 * day, Task.STATUS_NOT_STARTED, 0),
        ]
        return [
            Task.objects.create(
                title=title,
                description=description,
                assigned_to=assignee,
                deadline=deadline,
                status=task_status,
                progress=progress,
            )
            for title, description, assignee, deadline, task_status, progress in samples
        ]
