"""Input validation run before any date math."""

import math
from collections.abc import Sequence
from numbers import Real

from ganttplan.exceptions import InvalidEffortError, ValidationError
from ganttplan.logger import get_logger
from ganttplan.models import MAX_DIFFICULTY, MIN_DIFFICULTY, Task

logger = get_logger()


class SchedulerInputValidator:
    """Checks the preconditions both scheduling modes rely on.

    Hard failures (bad effort, bad difficulty, duplicate ids) raise. Dangling
    dependency references are soft: they are returned as warnings so the
    caller can surface them, and the schedulers treat them as no constraint.
    """

    def validate(self, tasks: Sequence[Task]) -> list[str]:
        """Validate a task list.

        Args:
            tasks: Tasks to validate

        Returns:
            Warning messages for dangling dependency references

        Raises:
            InvalidEffortError: If any task's hours are not finite and positive
            ValidationError: If ids repeat or a difficulty is out of range
        """
        seen: set[str] = set()
        for task in tasks:
            if task.id in seen:
                raise ValidationError(f"Duplicate task id: {task.id}")
            seen.add(task.id)
            self.check_effort(task)
            self.check_difficulty(task)

        warnings = self.dangling_references(tasks, seen)
        logger.checks(f"Validated {len(tasks)} tasks ({len(warnings)} warnings)")
        return warnings

    def check_effort(self, task: Task) -> None:
        """Effort must be a finite number of hours greater than zero."""
        hours = task.hours
        if isinstance(hours, bool) or not isinstance(hours, Real):
            raise InvalidEffortError(f"Task '{task.id}' has non-numeric effort: {hours!r}")
        if not math.isfinite(hours) or hours <= 0:
            raise InvalidEffortError(
                f"Task '{task.id}' must have positive, finite effort hours (got {hours})"
            )

    def check_difficulty(self, task: Task) -> None:
        difficulty = task.difficulty
        if (
            isinstance(difficulty, bool)
            or not isinstance(difficulty, int)
            or not MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY
        ):
            raise ValidationError(
                f"Task '{task.id}' has difficulty {difficulty!r}; "
                f"expected an integer from {MIN_DIFFICULTY} to {MAX_DIFFICULTY}"
            )

    def dangling_references(self, tasks: Sequence[Task], known_ids: set[str]) -> list[str]:
        """Warnings for dependency ids that match no task in the set."""
        warnings: list[str] = []
        for task in tasks:
            for dep_id in dict.fromkeys(task.dependencies):
                if dep_id not in known_ids:
                    message = (
                        f"Task '{task.id}' depends on unknown task '{dep_id}' - "
                        "ignored as a scheduling constraint"
                    )
                    logger.changes(message)
                    warnings.append(message)
        return warnings
