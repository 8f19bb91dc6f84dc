"""Algorithm factory and exports."""

from collections.abc import Sequence
from datetime import date

from ganttplan.models import Task

from ..config import SchedulingConfig, SchedulingMode
from ..protocols import SchedulingAlgorithm
from .dependency import DependencyScheduler
from .manual import ManualScheduler


def create_algorithm(
    mode: SchedulingMode,
    tasks: Sequence[Task],
    start_date: date,
    *,
    config: SchedulingConfig | None = None,
) -> SchedulingAlgorithm:
    """Create a scheduling algorithm instance.

    Args:
        mode: Which algorithm to create
        tasks: Tasks to schedule
        start_date: Project start date
        config: Optional scheduling configuration

    Returns:
        Algorithm instance ready to schedule
    """
    if mode == SchedulingMode.AUTO:
        return DependencyScheduler(tasks, start_date, config=config)

    if mode == SchedulingMode.MANUAL:
        return ManualScheduler(tasks, start_date, config=config)

    msg = f"Unknown scheduling mode: {mode}"
    raise ValueError(msg)


__all__ = ["DependencyScheduler", "ManualScheduler", "create_algorithm"]
