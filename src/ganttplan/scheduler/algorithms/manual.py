"""Manual scheduling: tasks laid end to end in phase/section order."""

from collections.abc import Sequence
from datetime import date, timedelta

from ganttplan.logger import get_logger
from ganttplan.models import ScheduledTask, Task

from ..config import SchedulingConfig
from ..core import AlgorithmResult, compute_duration_days

logger = get_logger()


class ManualScheduler:
    """Places tasks sequentially without looking at dependency edges.

    Tasks are sorted by phase, section and natural id order, and each one
    starts the day the previous one ends. A task that "depends on" a later
    task is still placed first; dependencies only ride along on the output
    records for arrow drawing. There is no critical path in this mode.
    """

    def __init__(
        self,
        tasks: Sequence[Task],
        start_date: date,
        *,
        config: SchedulingConfig | None = None,
    ):
        self.tasks = list(tasks)
        self.start_date = start_date
        self.config = config or SchedulingConfig()

    def schedule(self) -> AlgorithmResult:
        successors = self._successors()
        cursor = self.start_date
        scheduled: list[ScheduledTask] = []

        for task in sorted(self.tasks, key=Task.order_key):
            duration = compute_duration_days(task, self.config.duration)
            end = cursor + timedelta(days=duration)
            scheduled.append(
                ScheduledTask(
                    task=task,
                    start_date=cursor,
                    end_date=end,
                    duration_days=duration,
                    critical_path=False,
                    successors=tuple(successors[task.id]),
                )
            )
            logger.changes(f"  {task.id}: {cursor} -> {end}")
            cursor = end

        return AlgorithmResult(scheduled_tasks=scheduled, project_end=cursor)

    def _successors(self) -> dict[str, list[str]]:
        """Reverse of each task's dependency list, for display only."""
        successors: dict[str, list[str]] = {task.id: [] for task in self.tasks}
        for task in self.tasks:
            for dep_id in dict.fromkeys(task.dependencies):
                if dep_id in successors:
                    successors[dep_id].append(task.id)
        return successors
