"""Tests for scheduler input validation."""

import pytest

from ganttplan.exceptions import InvalidEffortError, ValidationError
from ganttplan.models import Task
from ganttplan.scheduler.validator import SchedulerInputValidator
from tests.conftest import make_task


@pytest.fixture
def validator() -> SchedulerInputValidator:
    return SchedulerInputValidator()


class TestEffort:
    """Effort hours must be finite and positive."""

    @pytest.mark.parametrize("hours", [0.25, 1, 8, 1000.5])
    def test_accepts_positive(self, validator: SchedulerInputValidator, hours: float) -> None:
        validator.check_effort(Task(id="A", name="A", hours=hours))

    @pytest.mark.parametrize("hours", [0, -0.5, float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_positive_or_non_finite(
        self, validator: SchedulerInputValidator, hours: float
    ) -> None:
        with pytest.raises(InvalidEffortError, match="positive, finite"):
            validator.check_effort(Task(id="A", name="A", hours=hours))

    @pytest.mark.parametrize("hours", ["8", None, True])
    def test_rejects_non_numeric(self, validator: SchedulerInputValidator, hours: object) -> None:
        with pytest.raises(InvalidEffortError, match="non-numeric"):
            validator.check_effort(Task(id="A", name="A", hours=hours))  # type: ignore[arg-type]


class TestDifficulty:
    """Difficulty is an integer rank from 1 to 5."""

    @pytest.mark.parametrize("difficulty", [1, 3, 5])
    def test_accepts_range(self, validator: SchedulerInputValidator, difficulty: int) -> None:
        validator.check_difficulty(make_task("A", difficulty=difficulty))

    @pytest.mark.parametrize("difficulty", [0, 6, -1, 2.5, True])
    def test_rejects_outside_range(
        self, validator: SchedulerInputValidator, difficulty: object
    ) -> None:
        task = make_task("A", difficulty=difficulty)  # type: ignore[arg-type]
        with pytest.raises(ValidationError, match="difficulty"):
            validator.check_difficulty(task)


class TestValidate:
    """Whole-list validation."""

    def test_clean_input_has_no_warnings(self, validator: SchedulerInputValidator) -> None:
        tasks = [make_task("A"), make_task("B", 1, "A")]

        assert validator.validate(tasks) == []

    def test_duplicate_id(self, validator: SchedulerInputValidator) -> None:
        with pytest.raises(ValidationError, match="Duplicate task id: A"):
            validator.validate([make_task("A"), make_task("B"), make_task("A")])

    def test_first_bad_task_reported(self, validator: SchedulerInputValidator) -> None:
        tasks = [
            make_task("A"),
            Task(id="B", name="B", hours=0),
            Task(id="C", name="C", hours=-1),
        ]

        with pytest.raises(InvalidEffortError, match="'B'"):
            validator.validate(tasks)

    def test_dangling_references_reported_once(self, validator: SchedulerInputValidator) -> None:
        tasks = [make_task("A", 1, "X", "X", "Y"), make_task("B", 1, "X")]
        warnings = validator.validate(tasks)

        assert len(warnings) == 3
        assert "'A'" in warnings[0] and "'X'" in warnings[0]
        assert "'A'" in warnings[1] and "'Y'" in warnings[1]
        assert "'B'" in warnings[2] and "'X'" in warnings[2]

    def test_cycles_not_checked(self, validator: SchedulerInputValidator) -> None:
        """Cycle detection belongs to the graph builder."""
        assert validator.validate([make_task("A", 1, "B"), make_task("B", 1, "A")]) == []
