"""Backward pass: latest dates, slack and the critical path."""

from dataclasses import dataclass, replace

from ganttplan.logger import debug_enabled, get_logger

from .core import TaskWindow
from .forward_pass import ForwardPassResult
from .graph import TaskGraph

logger = get_logger()


@dataclass(frozen=True)
class CriticalPathResult:
    """Full CPM windows plus the derived critical set."""

    windows: dict[str, TaskWindow]
    free_slack: dict[str, int]
    project_finish: int
    order: tuple[str, ...]
    dependents: dict[str, tuple[str, ...]]

    @property
    def critical_ids(self) -> set[str]:
        return {task_id for task_id, window in self.windows.items() if window.slack == 0}

    def is_critical(self, task_id: str) -> bool:
        return self.windows[task_id].slack == 0

    def critical_chain(self) -> list[str]:
        """One zero-slack chain from project start to completion.

        At each step the earliest critical candidate in topological order is
        taken, so the chain is deterministic when several critical paths tie.
        The durations along the chain sum to the project length.
        """
        if not self.windows:
            return []

        position = {task_id: index for index, task_id in enumerate(self.order)}
        current = next(
            (
                task_id
                for task_id in self.order
                if self.is_critical(task_id) and self.windows[task_id].earliest_start == 0
            ),
            None,
        )
        chain: list[str] = []
        while current is not None:
            chain.append(current)
            finish = self.windows[current].earliest_finish
            if finish == self.project_finish:
                break
            candidates = [
                dep_id
                for dep_id in self.dependents[current]
                if self.is_critical(dep_id) and self.windows[dep_id].earliest_start == finish
            ]
            current = min(candidates, key=position.__getitem__) if candidates else None
        return chain


class CriticalPathAnalyzer:
    """Classic CPM backward pass over forward-pass results.

    Sinks must finish by the project completion date; every other task must
    finish before the latest start of its earliest-needed dependent. Tasks
    whose latest and earliest starts coincide have zero slack and form the
    critical path.
    """

    def run(self, graph: TaskGraph, forward: ForwardPassResult) -> CriticalPathResult:
        project_finish = forward.project_finish
        windows: dict[str, TaskWindow] = {}
        latest_start: dict[str, int] = {}
        free_slack: dict[str, int] = {}

        for task_id in reversed(graph.order):
            window = forward.windows[task_id]
            dependents = graph.dependents[task_id]
            if dependents:
                latest_finish = min(latest_start[dep_id] for dep_id in dependents)
                next_start = min(forward.windows[dep_id].earliest_start for dep_id in dependents)
            else:
                latest_finish = project_finish
                next_start = project_finish

            latest_start[task_id] = latest_finish - window.duration
            windows[task_id] = replace(
                window,
                latest_start=latest_start[task_id],
                latest_finish=latest_finish,
            )
            free_slack[task_id] = next_start - window.earliest_finish

            if debug_enabled():
                logger.debug(
                    f"  backward {task_id}: LS={latest_start[task_id]} "
                    f"LF={latest_finish} slack={windows[task_id].slack}"
                )

        # Keep topological order in the mapping
        ordered = {task_id: windows[task_id] for task_id in graph.order}
        return CriticalPathResult(
            windows=ordered,
            free_slack=free_slack,
            project_finish=project_finish,
            order=graph.order,
            dependents=graph.dependents,
        )
