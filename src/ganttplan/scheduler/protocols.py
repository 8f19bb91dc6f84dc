"""Protocol definitions for the scheduling system."""

from typing import Protocol

from .core import AlgorithmResult


class SchedulingAlgorithm(Protocol):
    """Protocol for scheduling algorithms."""

    def schedule(self) -> AlgorithmResult:
        """Place every task on the timeline.

        Returns:
            AlgorithmResult with scheduled tasks, project end and critical chain
        """
        ...
