"""Core dataclasses for the scheduling system."""

import math
from dataclasses import dataclass, field
from datetime import date, timedelta

from ganttplan.models import ScheduledTask, Task

from .config import DurationConfig, SchedulingMode


def _default_str_list() -> list[str]:
    return []


@dataclass(frozen=True)
class TaskWindow:
    """CPM values for one task, as day offsets from the project start.

    Finish offsets are exclusive: a task with ``earliest_start=2`` and a
    duration of 3 days has ``earliest_finish=5``.
    """

    duration: int
    earliest_start: int
    earliest_finish: int
    latest_start: int | None = None  # Filled in by the backward pass
    latest_finish: int | None = None

    @property
    def slack(self) -> int | None:
        if self.latest_start is None:
            return None
        return self.latest_start - self.earliest_start


@dataclass
class AlgorithmResult:
    """Result from a scheduling algorithm."""

    scheduled_tasks: list[ScheduledTask]
    project_end: date
    critical_chain: list[str] = field(default_factory=_default_str_list)


@dataclass
class SchedulingResult:
    """Complete result of a scheduling call."""

    scheduled_tasks: list[ScheduledTask]
    mode: SchedulingMode
    project_start: date
    project_end: date
    show_critical_path: bool = False
    critical_chain: list[str] = field(default_factory=_default_str_list)
    warnings: list[str] = field(default_factory=_default_str_list)

    @property
    def duration_days(self) -> int:
        return (self.project_end - self.project_start).days


def compute_duration_days(task: Task, config: DurationConfig | None = None) -> int:
    """Convert a task's effort hours into whole calendar days.

    ``ceil(hours / hours_per_day)``, optionally stretched by the difficulty
    multiplier and rounded up again. Never less than one day; effort must
    already have been validated as positive.

    Args:
        task: Task whose ``hours`` to convert
        config: Conversion settings (defaults to 8 hours per day, no multiplier)

    Returns:
        Duration in calendar days
    """
    config = config or DurationConfig()
    days = math.ceil(task.hours / config.hours_per_day)
    if config.apply_difficulty_multiplier:
        multiplier = config.difficulty_multipliers.get(task.difficulty, 1.0)
        # 5 * 1.2 is 6.000000000000001 in floats; round it before taking the ceiling
        days = math.ceil(round(days * multiplier, 6))
    return max(1, days)


def offset_to_date(project_start: date, offset: int) -> date:
    """Calendar date for a day offset from the project start."""
    return project_start + timedelta(days=offset)
