"""High-level scheduling service and public entry points."""

from collections.abc import Sequence
from datetime import date

from ganttplan.gantt import GanttConfig, GanttProjector
from ganttplan.logger import get_logger
from ganttplan.models import GanttTask, ScheduledTask, Task

from .algorithms import create_algorithm
from .config import SchedulingConfig, SchedulingMode
from .core import SchedulingResult
from .validator import SchedulerInputValidator

logger = get_logger()


class SchedulingService:
    """Coordinates validation and the configured scheduling algorithm.

    The service is stateless between calls: every ``schedule()`` starts from
    the task snapshot it was given and returns freshly built records.
    Invalid input raises; no partial schedule is ever returned.
    """

    def __init__(
        self,
        tasks: Sequence[Task],
        start_date: date,
        config: SchedulingConfig | None = None,
    ):
        """Initialize scheduling service.

        Args:
            tasks: Tasks to schedule (not modified)
            start_date: Project start date (day 0)
            config: Optional scheduling configuration (mode, durations, display hint)
        """
        self.tasks = tuple(tasks)
        self.start_date = start_date
        self.config = config or SchedulingConfig()
        self.validator = SchedulerInputValidator()

    def schedule(self) -> SchedulingResult:
        """Validate the tasks and schedule them in the configured mode.

        Returns:
            SchedulingResult with scheduled tasks, project span and warnings

        Raises:
            InvalidEffortError: If a task has non-positive or non-finite effort
            ValidationError: If ids repeat or a difficulty is out of range
            CircularDependencyError: If automatic mode finds a dependency cycle
        """
        mode = self.config.mode
        logger.changes(
            f"Scheduling {len(self.tasks)} tasks ({mode.value}) from {self.start_date}"
        )
        warnings = self.validator.validate(self.tasks)

        algorithm = create_algorithm(mode, self.tasks, self.start_date, config=self.config)
        result = algorithm.schedule()

        return SchedulingResult(
            scheduled_tasks=result.scheduled_tasks,
            mode=mode,
            project_start=self.start_date,
            project_end=result.project_end,
            show_critical_path=self.config.show_critical_path,
            critical_chain=result.critical_chain,
            warnings=warnings,
        )


def schedule_project(  # noqa: PLR0913 - keyword-only projection options
    tasks: Sequence[Task],
    start_date: date,
    show_critical_path: bool = False,
    *,
    config: SchedulingConfig | None = None,
    week_epoch: date | None = None,
    today: date | None = None,
    gantt_config: GanttConfig | None = None,
) -> list[GanttTask]:
    """Schedule tasks automatically from their dependencies.

    ``show_critical_path`` is a display hint only; the critical-path flag is
    computed either way and dates never depend on it.

    Args:
        tasks: Tasks to schedule
        start_date: Project start date
        show_critical_path: Whether the caller intends to highlight the critical path
        config: Optional scheduling configuration (its mode is overridden to auto)
        week_epoch: Date of week 0 (defaults to gantt_config.week_epoch, then start_date)
        today: Reference date for status (defaults to today)
        gantt_config: Optional projection configuration

    Returns:
        Gantt records in topological order
    """
    base = config or SchedulingConfig()
    effective = base.model_copy(
        update={"mode": SchedulingMode.AUTO, "show_critical_path": show_critical_path}
    )
    result = SchedulingService(tasks, start_date, effective).schedule()
    return _project(result.scheduled_tasks, start_date, week_epoch, today, gantt_config)


def manual_schedule_project(
    tasks: Sequence[Task],
    start_date: date,
    *,
    config: SchedulingConfig | None = None,
    week_epoch: date | None = None,
    today: date | None = None,
    gantt_config: GanttConfig | None = None,
) -> list[GanttTask]:
    """Lay tasks out end to end in phase/section order, ignoring dependencies.

    Args:
        tasks: Tasks to schedule
        start_date: Project start date
        config: Optional scheduling configuration (its mode is overridden to manual)
        week_epoch: Date of week 0 (defaults to gantt_config.week_epoch, then start_date)
        today: Reference date for status (defaults to today)
        gantt_config: Optional projection configuration

    Returns:
        Gantt records in phase/section/id order
    """
    base = config or SchedulingConfig()
    effective = base.model_copy(update={"mode": SchedulingMode.MANUAL})
    result = SchedulingService(tasks, start_date, effective).schedule()
    return _project(result.scheduled_tasks, start_date, week_epoch, today, gantt_config)


def _project(
    scheduled: Sequence[ScheduledTask],
    start_date: date,
    week_epoch: date | None,
    today: date | None,
    gantt_config: GanttConfig | None,
) -> list[GanttTask]:
    gantt_config = gantt_config or GanttConfig()
    epoch = week_epoch or gantt_config.week_epoch or start_date
    projector = GanttProjector(epoch, today=today, config=gantt_config)
    return projector.project(scheduled)
