"""
Rule-based delay risk for tasks and for a whole project.

Nothing here touches the database: callers pass in already loaded tasks (model
instances or any object exposing ``deadline``, ``status`` and ``progress``)
and an optional ``now`` so results are reproducible.
"""
import math
from dataclasses import dataclass
from datetime import datetime, timezone

COMPLETED = 'completed'
HIGH_RISK_THRESHOLD = 60
SECONDS_PER_DAY = 24 * 60 * 60

NO_TASKS_MESSAGE = 'No tasks found'
CRITICAL_MESSAGE = '⚠️ Critical Warning: Project is at high risk of delay!'
EARLY_WARNING_MESSAGE = '⚠️ Early Warning: Project may be delayed. Take action now.'
MODERATE_MESSAGE = '⚠️ Moderate Risk: Monitor tasks closely.'
ON_TRACK_MESSAGE = '✅ Project is on track.'


@dataclass(frozen=True)
class TaskSnapshot:
    deadline: datetime
    status: str
    progress: int

    @classmethod
    def of(cls, task):
        return cls(deadline=task.deadline, status=task.status, progress=int(task.progress))

    @property
    def is_done(self):
        # A full progress bar counts as done even if the status lags behind.
        return self.status == COMPLETED or self.progress == 100


@dataclass(frozen=True)
class ScoredTask:
    task: object
    risk_score: int


@dataclass(frozen=True)
class ProjectRisk:
    overall_risk: int
    high_risk_tasks: list
    message: str


def utcnow():
    return datetime.now(timezone.utc)


def as_aware(moment):
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def round_half_up(value):
    return int(math.floor(value + 0.5))


def days_until_deadline(deadline, now=None):
    """Whole days left before ``deadline``; partial days round up."""
    now = as_aware(now or utcnow())
    remaining = (as_aware(deadline) - now).total_seconds()
    return math.ceil(remaining / SECONDS_PER_DAY)


def calculate_task_risk(task, now=None):
    """
    Score a single task from 0 (no risk) to 90 (overdue).

    Rules are checked in order and the first match wins. Being overdue beats
    being completed, so a finished task past its deadline still scores 90.
    """
    snapshot = task if isinstance(task, TaskSnapshot) else TaskSnapshot.of(task)
    days = days_until_deadline(snapshot.deadline, now)
    progress = snapshot.progress

    if days < 0:
        return 90
    if snapshot.is_done:
        return 0
    if progress < 50 and days < 3:
        return 75
    if progress < 30 and days < 7:
        return 60
    if 30 <= progress < 50 and days < 5:
        return 50
    if progress >= 50 and days < 2:
        return 40
    return 20


def risk_message(overall_risk):
    if overall_risk >= 70:
        return CRITICAL_MESSAGE
    if overall_risk >= 50:
        return EARLY_WARNING_MESSAGE
    if overall_risk >= 30:
        return MODERATE_MESSAGE
    return ON_TRACK_MESSAGE


def calculate_project_risk(tasks, now=None):
    """
    Average the per-task scores and pick out the tasks scoring 60 or more.

    High-risk tasks are ordered by score, highest first; equal scores keep
    the order they were given in.
    """
    tasks = list(tasks or [])
    if not tasks:
        return ProjectRisk(overall_risk=0, high_risk_tasks=[], message=NO_TASKS_MESSAGE)

    now = now or utcnow()
    scored = [ScoredTask(task=task, risk_score=calculate_task_risk(task, now)) for task in tasks]
    overall = round_half_up(sum(item.risk_score for item in scored) / len(scored))
    high_risk = sorted(
        (item for item in scored if item.risk_score >= HIGH_RISK_THRESHOLD),
        key=lambda item: item.risk_score,
        reverse=True,
    )
    return ProjectRisk(overall_risk=overall, high_risk_tasks=high_risk, message=risk_message(overall))
