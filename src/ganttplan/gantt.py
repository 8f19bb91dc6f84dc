"""Gantt projection: display fields derived from scheduled dates."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from pydantic import BaseModel, Field

from .models import GanttTask, ScheduledTask, TaskStatus

DAYS_PER_WEEK = 7

# Bar colors by difficulty rank
DEFAULT_DIFFICULTY_COLORS: dict[int, str] = {
    1: "#10b981",  # emerald - easy
    2: "#3b82f6",  # blue - medium
    3: "#f59e0b",  # amber - hard
    4: "#f97316",  # orange - very hard
    5: "#ef4444",  # red - expert
}


class GanttConfig(BaseModel):
    """Configuration for the Gantt projection."""

    week_epoch: date | None = None  # Week 0 starts here; defaults to the project start
    difficulty_colors: dict[int, str] = Field(
        default_factory=lambda: dict(DEFAULT_DIFFICULTY_COLORS)
    )


def week_number(start_date: date, epoch: date) -> int:
    """Whole weeks from the epoch to ``start_date`` (0-based, negative before it)."""
    return (start_date - epoch).days // DAYS_PER_WEEK


def task_status(start_date: date, end_date: date, today: date) -> TaskStatus:
    """Classify a date range against today.

    Both ends count as current. Since ``end_date`` is exclusive, a task is
    still current on the day its successors start.
    """
    if end_date < today:
        return TaskStatus.PAST
    if start_date > today:
        return TaskStatus.FUTURE
    return TaskStatus.CURRENT


class GanttProjector:
    """Turns scheduled tasks into display records for the Gantt chart.

    This is the only place that reads the wall clock: ``status`` depends on
    ``today``, which defaults to the current date. Everything else is a pure
    function of the scheduled dates and the epoch.

    Status compares ``today`` with the half-open ``[start_date, end_date)``
    range inclusively at both ends, so on a task's ``end_date`` it and the
    tasks starting that day are all reported ``current``.
    """

    def __init__(
        self,
        week_epoch: date,
        *,
        today: date | None = None,
        config: GanttConfig | None = None,
    ):
        self.week_epoch = week_epoch
        self.today = today or date.today()  # noqa: DTZ011
        self.config = config or GanttConfig()

    def project(self, scheduled: Sequence[ScheduledTask]) -> list[GanttTask]:
        """Project scheduled tasks, preserving their order."""
        return [self.project_task(task) for task in scheduled]

    def project_task(self, scheduled: ScheduledTask) -> GanttTask:
        colors = self.config.difficulty_colors
        return GanttTask(
            task=scheduled.task,
            start_date=scheduled.start_date,
            end_date=scheduled.end_date,
            duration_days=scheduled.duration_days,
            critical_path=scheduled.critical_path,
            slack_days=scheduled.slack_days,
            free_slack_days=scheduled.free_slack_days,
            successors=scheduled.successors,
            week_number=week_number(scheduled.start_date, self.week_epoch),
            status=task_status(scheduled.start_date, scheduled.end_date, self.today),
            color=colors.get(scheduled.difficulty, DEFAULT_DIFFICULTY_COLORS[1]),
        )
