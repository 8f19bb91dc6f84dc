"""Data models for ganttplan."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 5

_DIGITS = re.compile(r"(\d+)")


def natural_key(value: str) -> tuple[tuple[int, int | str], ...]:
    """Sort key that orders embedded numbers numerically ("1.2" < "1.10")."""
    parts: list[tuple[int, int | str]] = []
    for chunk in _DIGITS.split(value):
        if not chunk:
            continue
        if chunk.isdigit():
            parts.append((0, int(chunk)))
        else:
            parts.append((1, chunk))
    return tuple(parts)


class TaskStatus(str, Enum):
    """Where a task sits relative to today."""

    PAST = "past"
    CURRENT = "current"
    FUTURE = "future"


@dataclass(frozen=True)
class Task:
    """A unit of work to be placed on the timeline.

    Tasks are immutable snapshots; every scheduling call derives new records
    from them and never writes back.
    """

    id: str
    name: str
    hours: float
    difficulty: int = 1
    phase: int = 1
    section: str = ""
    assignee: str = "Unassigned"
    dependencies: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of ids but always store a tuple
        if not isinstance(self.dependencies, tuple):
            object.__setattr__(self, "dependencies", tuple(self.dependencies))

    def order_key(self) -> tuple[int, str, tuple[tuple[int, int | str], ...]]:
        """Phase, then section, then natural id order."""
        return (self.phase, self.section, natural_key(self.id))


@dataclass(frozen=True)
class ScheduledTask:
    """A task with computed dates.

    ``end_date`` is exclusive: it is the first day dependents may start, so a
    one-day task starting on the 4th ends on the 5th.
    """

    task: Task
    start_date: date
    end_date: date
    duration_days: int
    critical_path: bool = False
    slack_days: int | None = None  # None when no backward pass ran (manual mode)
    free_slack_days: int | None = None
    successors: tuple[str, ...] = ()

    @property
    def task_id(self) -> str:
        return self.task.id

    @property
    def name(self) -> str:
        return self.task.name

    @property
    def assignee(self) -> str:
        return self.task.assignee

    @property
    def hours(self) -> float:
        return self.task.hours

    @property
    def difficulty(self) -> int:
        return self.task.difficulty

    @property
    def phase(self) -> int:
        return self.task.phase

    @property
    def section(self) -> str:
        return self.task.section

    @property
    def dependencies(self) -> tuple[str, ...]:
        return self.task.dependencies


@dataclass(frozen=True)
class GanttTask(ScheduledTask):
    """A scheduled task projected for display."""

    week_number: int = 0
    status: TaskStatus = TaskStatus.FUTURE
    color: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Flatten to plain values (ISO dates) for JSON/CSV export."""
        return {
            "id": self.task_id,
            "name": self.name,
            "assignee": self.assignee,
            "hours": self.hours,
            "difficulty": self.difficulty,
            "phase": self.phase,
            "section": self.section,
            "dependencies": list(self.dependencies),
            "successors": list(self.successors),
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "duration_days": self.duration_days,
            "week_number": self.week_number,
            "critical_path": self.critical_path,
            "slack_days": self.slack_days,
            "free_slack_days": self.free_slack_days,
            "status": self.status.value,
            "color": self.color,
        }
