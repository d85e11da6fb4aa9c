from dataclasses import dataclass
from datetime import timedelta

from .risk import COMPLETED, as_aware, calculate_project_risk, round_half_up, utcnow

UPCOMING_WINDOW = timedelta(days=7)
UPCOMING_LIMIT = 5


@dataclass(frozen=True)
class DashboardSummary:
    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    overall_progress: int
    upcoming_deadlines: list
    risk_score: int


def upcoming_deadlines(tasks, now=None, window=UPCOMING_WINDOW, limit=UPCOMING_LIMIT):
    """Open tasks due within ``window`` from ``now``, earliest first."""
    now = as_aware(now or utcnow())
    horizon = now + window
    due = [
        task for task in tasks
        if task.status != COMPLETED and now <= as_aware(task.deadline) <= horizon
    ]
    due.sort(key=lambda task: as_aware(task.deadline))
    return due[:limit]


def build_dashboard(tasks, now=None):
    tasks = list(tasks)
    now = now or utcnow()
    total = len(tasks)
    completed = sum(1 for task in tasks if task.status == COMPLETED)
    progress = round_half_up(sum(task.progress for task in tasks) / total) if total else 0

    return DashboardSummary(
        total_tasks=total,
        completed_tasks=completed,
        pending_tasks=total - completed,
        overall_progress=progress,
        upcoming_deadlines=upcoming_deadlines(tasks, now),
        risk_score=calculate_project_risk(tasks, now).overall_risk,
    )
