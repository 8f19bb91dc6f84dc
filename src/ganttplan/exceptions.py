"""Custom exceptions for ganttplan."""

from __future__ import annotations


class GanttplanError(Exception):
    """Base exception for all ganttplan errors."""

    pass


class ValidationError(GanttplanError):
    """Raised when task input fails validation."""

    pass


class InvalidEffortError(ValidationError):
    """Raised when a task's effort is not a finite positive number of hours."""

    pass


class CircularDependencyError(ValidationError):
    """Raised when a circular dependency is detected.

    The offending cycle is available as ``cycle``, listed in dependency order
    with the first task repeated at the end (e.g. ``["A", "B", "A"]``).
    """

    def __init__(self, cycle: list[str]):
        self.cycle = list(cycle)
        super().__init__(f"Circular dependency detected: {' -> '.join(self.cycle)}")


class ParseError(GanttplanError):
    """Raised when a task file cannot be parsed."""

    pass
