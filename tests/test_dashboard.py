from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

from tracker_app.dashboard import build_dashboard, upcoming_deadlines

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


def task(name, days, status='in-progress', progress=0):
    return SimpleNamespace(name=name, deadline=NOW + timedelta(days=days), status=status, progress=progress)


def test_empty_dashboard():
    summary = build_dashboard([], NOW)
    assert summary.total_tasks == 0
    assert summary.completed_tasks == 0
    assert summary.pending_tasks == 0
    assert summary.overall_progress == 0
    assert summary.upcoming_deadlines == []
    assert summary.risk_score == 0


def test_counts_and_average_progress():
    tasks = [
        task('a', 3, 'completed', 100),
        task('b', 10, 'in-progress', 45),
        task('c', 20, 'not-started', 0),
        task('d', 2, 'completed', 60),
    ]
    summary = build_dashboard(tasks, NOW)
    assert summary.total_tasks == 4
    assert summary.completed_tasks == 2
    assert summary.pending_tasks == 2
    # 205 / 4 = 51.25
    assert summary.overall_progress == 51


def test_average_progress_rounds_half_up():
    summary = build_dashboard([task('a', 10, progress=50), task('b', 10, progress=55)], NOW)
    assert summary.overall_progress == 53


def test_risk_score_matches_project_risk():
    tasks = [task('late', -3), task('fine', 30, progress=80)]
    assert build_dashboard(tasks, NOW).risk_score == 55


def test_upcoming_deadlines_window_and_order():
    tasks = [
        task('past', -0.5),
        task('done', 1, 'completed', 100),
        task('far', 7.5),
        task('edge', 7),
        task('soon', 0.25),
        task('mid', 3),
    ]
    names = [t.name for t in upcoming_deadlines(tasks, NOW)]
    assert names == ['soon', 'mid', 'edge']


def test_upcoming_deadlines_capped_at_five():
    tasks = [task(f"t{i}", 6 - i) for i in range(7)]
    upcoming = upcoming_deadlines(tasks, NOW)
    assert len(upcoming) == 5
    deadlines = [t.deadline for t in upcoming]
    assert deadlines == sorted(deadlines)
    assert [t.name for t in upcoming] == ['t6', 't5', 't4', 't3', 't2']
