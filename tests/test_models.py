"""Tests for data models."""

import pytest

from ganttplan.models import ScheduledTask, Task, natural_key
from tests.conftest import PROJECT_START, day


class TestNaturalKey:
    """Ordering of ids with embedded numbers."""

    def test_numbers_compare_numerically(self) -> None:
        ids = ["1.10", "1.2", "10.1", "2.1", "1.1"]
        assert sorted(ids, key=natural_key) == ["1.1", "1.2", "1.10", "2.1", "10.1"]

    def test_text_ids(self) -> None:
        ids = ["task-b", "task-a10", "task-a2"]
        assert sorted(ids, key=natural_key) == ["task-a2", "task-a10", "task-b"]

    def test_numbers_before_text(self) -> None:
        assert natural_key("1") < natural_key("a")

    def test_mixed_ids_do_not_raise(self) -> None:
        ids = ["a1", "1a", "", "a", "1"]
        assert sorted(ids, key=natural_key)[0] == ""


class TestTask:
    """Test the Task model."""

    def test_defaults(self) -> None:
        task = Task(id="A", name="Alpha", hours=4)

        assert task.difficulty == 1
        assert task.phase == 1
        assert task.section == ""
        assert task.assignee == "Unassigned"
        assert task.dependencies == ()

    def test_dependencies_stored_as_tuple(self) -> None:
        task = Task(id="B", name="Beta", hours=4, dependencies=["A", "C"])  # type: ignore[arg-type]

        assert task.dependencies == ("A", "C")

    def test_immutable(self) -> None:
        task = Task(id="A", name="Alpha", hours=4)

        with pytest.raises(AttributeError):
            task.hours = 8  # type: ignore[misc]

    def test_order_key(self) -> None:
        tasks = [
            Task(id="1.10", name="", hours=1, phase=1, section="B"),
            Task(id="1.2", name="", hours=1, phase=1, section="B"),
            Task(id="0.1", name="", hours=1, phase=2, section="A"),
            Task(id="9.9", name="", hours=1, phase=1, section="A"),
        ]

        assert [t.id for t in sorted(tasks, key=Task.order_key)] == ["9.9", "1.2", "1.10", "0.1"]


class TestScheduledTask:
    """Test the ScheduledTask model."""

    def test_task_fields_exposed(self) -> None:
        task = Task(
            id="A",
            name="Alpha",
            hours=12,
            difficulty=3,
            phase=2,
            section="API",
            assignee="sam",
            dependencies=("X",),
        )
        record = ScheduledTask(
            task=task, start_date=PROJECT_START, end_date=day(2), duration_days=2
        )

        assert record.task_id == "A"
        assert record.name == "Alpha"
        assert record.hours == 12
        assert record.difficulty == 3
        assert record.phase == 2
        assert record.section == "API"
        assert record.assignee == "sam"
        assert record.dependencies == ("X",)
        assert record.critical_path is False
        assert record.slack_days is None
        assert record.successors == ()
