"""Forward pass: earliest start and finish for every task."""

from dataclasses import dataclass
from datetime import date

from ganttplan.logger import debug_enabled, get_logger

from .config import DurationConfig
from .core import TaskWindow, compute_duration_days, offset_to_date
from .graph import TaskGraph

logger = get_logger()


@dataclass(frozen=True)
class ForwardPassResult:
    """Earliest-date windows keyed by task id."""

    project_start: date
    windows: dict[str, TaskWindow]

    @property
    def project_finish(self) -> int:
        """Latest earliest-finish offset (0 for an empty project)."""
        return max((w.earliest_finish for w in self.windows.values()), default=0)

    def start_date(self, task_id: str) -> date:
        return offset_to_date(self.project_start, self.windows[task_id].earliest_start)

    def end_date(self, task_id: str) -> date:
        return offset_to_date(self.project_start, self.windows[task_id].earliest_finish)


class ForwardPass:
    """Propagates earliest dates through the graph in topological order.

    A task with no prerequisites starts on the project start date; any other
    task starts when its last prerequisite finishes. Calendar days are
    uniform (no weekend or holiday skipping).
    """

    def __init__(self, project_start: date, duration_config: DurationConfig | None = None):
        self.project_start = project_start
        self.duration_config = duration_config or DurationConfig()

    def run(self, graph: TaskGraph) -> ForwardPassResult:
        windows: dict[str, TaskWindow] = {}
        for task_id in graph.order:
            task = graph.tasks[task_id]
            duration = compute_duration_days(task, self.duration_config)
            earliest_start = max(
                (windows[dep_id].earliest_finish for dep_id in graph.prerequisites[task_id]),
                default=0,
            )
            windows[task_id] = TaskWindow(
                duration=duration,
                earliest_start=earliest_start,
                earliest_finish=earliest_start + duration,
            )
            if debug_enabled():
                logger.debug(
                    f"  forward {task_id}: ES={earliest_start} EF={earliest_start + duration} "
                    f"({task.hours}h -> {duration}d)"
                )

        return ForwardPassResult(project_start=self.project_start, windows=windows)
