"""Pytest configuration and fixtures for ganttplan tests."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import pytest

from ganttplan import context
from ganttplan.logger import reset_logger
from ganttplan.models import ScheduledTask, Task
from ganttplan.scheduler.config import HOURS_PER_DAY, SchedulingMode

PROJECT_START = date(2025, 1, 6)  # A Monday

MODES: list[SchedulingMode] = [SchedulingMode.AUTO, SchedulingMode.MANUAL]
MODE_IDS = ["auto", "manual"]


@pytest.fixture(params=MODES, ids=MODE_IDS)
def scheduling_mode(request: pytest.FixtureRequest) -> SchedulingMode:
    """Current scheduling mode being tested."""
    return request.param  # type: ignore[return-value]


@pytest.fixture(autouse=True)
def clean_logger() -> None:
    """Reset the ganttplan logger before each test for isolation."""
    reset_logger()


@pytest.fixture(autouse=True)
def clean_context() -> None:
    """Forget any --config path left behind by a CLI test."""
    context.set_config_path(None)


def make_task(  # noqa: PLR0913 - test helper mirrors Task fields
    task_id: str,
    days: float = 1,
    *deps: str,
    phase: int = 1,
    section: str = "",
    difficulty: int = 1,
    assignee: str = "Unassigned",
) -> Task:
    """Create a Task whose effort is ``days`` full working days.

    Example:
        make_task("B", 3, "A")  # 24h task depending on A
    """
    return Task(
        id=task_id,
        name=f"Task {task_id}",
        hours=days * HOURS_PER_DAY,
        difficulty=difficulty,
        phase=phase,
        section=section,
        assignee=assignee,
        dependencies=deps,
    )


@pytest.fixture
def abc_tasks() -> list[Task]:
    """A (2d), B (3d, after A), C (1d, after A)."""
    return [
        make_task("A", 2),
        make_task("B", 3, "A"),
        make_task("C", 1, "A"),
    ]


def day(offset: int) -> date:
    """Project start plus ``offset`` days."""
    return date.fromordinal(PROJECT_START.toordinal() + offset)


def assert_valid_schedule(
    scheduled: Sequence[ScheduledTask],
    tasks: Sequence[Task],
    *,
    check_dependencies: bool = True,
) -> None:
    """Assert invariants every schedule must satisfy.

    Every task appears exactly once, no task ends before it starts, and (for
    automatic scheduling) no task starts before a known prerequisite ends.
    """
    by_id = {record.task_id: record for record in scheduled}
    assert len(by_id) == len(scheduled), "Task scheduled more than once"
    assert set(by_id) == {task.id for task in tasks}

    for record in scheduled:
        assert record.end_date >= record.start_date, f"{record.task_id} ends before it starts"

    if check_dependencies:
        for record in scheduled:
            for dep_id in record.dependencies:
                if dep_id in by_id:
                    assert record.start_date >= by_id[dep_id].end_date, (
                        f"{record.task_id} starts before prerequisite {dep_id} ends"
                    )
