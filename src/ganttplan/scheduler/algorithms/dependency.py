"""Automatic, dependency-driven scheduling (forward pass plus critical path)."""

from collections.abc import Sequence
from datetime import date

from ganttplan.logger import changes_enabled, get_logger
from ganttplan.models import ScheduledTask, Task

from ..backward_pass import CriticalPathAnalyzer
from ..config import SchedulingConfig
from ..core import AlgorithmResult, offset_to_date
from ..forward_pass import ForwardPass
from ..graph import build_task_graph

logger = get_logger()


class DependencyScheduler:
    """Schedules tasks as early as their prerequisites allow.

    Runs the graph builder, the forward pass and the critical path analyzer
    in that order. The critical-path flag is always computed; whether to show
    it is up to the caller.
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
        graph = build_task_graph(self.tasks)
        forward = ForwardPass(self.start_date, self.config.duration).run(graph)
        cpm = CriticalPathAnalyzer().run(graph, forward)

        scheduled: list[ScheduledTask] = []
        for task_id in graph.order:
            window = cpm.windows[task_id]
            record = ScheduledTask(
                task=graph.tasks[task_id],
                start_date=offset_to_date(self.start_date, window.earliest_start),
                end_date=offset_to_date(self.start_date, window.earliest_finish),
                duration_days=window.duration,
                critical_path=window.slack == 0,
                slack_days=window.slack,
                free_slack_days=cpm.free_slack[task_id],
                successors=graph.dependents[task_id],
            )
            if changes_enabled():
                marker = " (critical)" if record.critical_path else ""
                logger.changes(f"  {task_id}: {record.start_date} -> {record.end_date}{marker}")
            scheduled.append(record)

        return AlgorithmResult(
            scheduled_tasks=scheduled,
            project_end=offset_to_date(self.start_date, cpm.project_finish),
            critical_chain=cpm.critical_chain(),
        )
