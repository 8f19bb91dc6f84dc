"""Dependency graph construction and topological ordering."""

import heapq
from collections.abc import Sequence
from dataclasses import dataclass

from ganttplan.exceptions import CircularDependencyError, ValidationError
from ganttplan.logger import checks_enabled, get_logger
from ganttplan.models import Task

logger = get_logger()


@dataclass(frozen=True)
class DanglingReference:
    """A dependency id that matches no task in the set."""

    task_id: str
    missing_id: str


@dataclass(frozen=True)
class TaskGraph:
    """Indexed, acyclic view of a task set.

    Edges point from a prerequisite to its dependents. Only references that
    resolve to a task in the set become edges; the rest are kept in
    ``dangling`` for reporting.
    """

    tasks: dict[str, Task]
    prerequisites: dict[str, tuple[str, ...]]
    dependents: dict[str, tuple[str, ...]]
    order: tuple[str, ...]
    dangling: tuple[DanglingReference, ...] = ()

    @property
    def sinks(self) -> list[str]:
        """Tasks nothing depends on, in topological order."""
        return [task_id for task_id in self.order if not self.dependents[task_id]]

    @property
    def roots(self) -> list[str]:
        """Tasks with no resolved prerequisites, in topological order."""
        return [task_id for task_id in self.order if not self.prerequisites[task_id]]


def build_task_graph(tasks: Sequence[Task]) -> TaskGraph:
    """Index tasks into a dependency graph and order them topologically.

    Uses Kahn's algorithm. When several tasks are ready at once they are
    released by phase, section and natural id order, so identical input always
    yields the same order.

    Args:
        tasks: Tasks to index

    Returns:
        TaskGraph with both adjacency directions and a topological order

    Raises:
        ValidationError: If two tasks share an id
        CircularDependencyError: If the dependencies contain a cycle
    """
    by_id: dict[str, Task] = {}
    for task in tasks:
        if task.id in by_id:
            raise ValidationError(f"Duplicate task id: {task.id}")
        by_id[task.id] = task

    prerequisites: dict[str, tuple[str, ...]] = {}
    dependents: dict[str, list[str]] = {task_id: [] for task_id in by_id}
    dangling: list[DanglingReference] = []

    for task in tasks:
        resolved: list[str] = []
        for dep_id in dict.fromkeys(task.dependencies):
            if dep_id in by_id:
                resolved.append(dep_id)
                dependents[dep_id].append(task.id)
            else:
                dangling.append(DanglingReference(task.id, dep_id))
        prerequisites[task.id] = tuple(resolved)

    in_degree = {task_id: len(prereqs) for task_id, prereqs in prerequisites.items()}
    ready = [
        (by_id[task_id].order_key(), task_id) for task_id, deg in in_degree.items() if deg == 0
    ]
    heapq.heapify(ready)

    order: list[str] = []
    while ready:
        _, task_id = heapq.heappop(ready)
        order.append(task_id)
        for dependent_id in dependents[task_id]:
            in_degree[dependent_id] -= 1
            if in_degree[dependent_id] == 0:
                heapq.heappush(ready, (by_id[dependent_id].order_key(), dependent_id))

    if len(order) != len(by_id):
        remaining = {task_id for task_id, deg in in_degree.items() if deg > 0}
        cycle = _find_cycle(remaining, prerequisites, by_id)
        logger.checks(f"Cycle found among {len(remaining)} unordered tasks")
        raise CircularDependencyError(cycle)

    if checks_enabled():
        logger.checks(f"Topological order: {', '.join(order)}")

    return TaskGraph(
        tasks=by_id,
        prerequisites=prerequisites,
        dependents={task_id: tuple(ids) for task_id, ids in dependents.items()},
        order=tuple(order),
        dangling=tuple(dangling),
    )


def _find_cycle(
    remaining: set[str],
    prerequisites: dict[str, tuple[str, ...]],
    by_id: dict[str, Task],
) -> list[str]:
    """Extract one concrete cycle from the tasks Kahn's algorithm could not order.

    Every remaining task still has at least one remaining prerequisite, so
    walking prerequisites from any of them must revisit a task.
    """
    current = min(remaining, key=lambda task_id: by_id[task_id].order_key())
    path: list[str] = []
    position: dict[str, int] = {}
    while current not in position:
        position[current] = len(path)
        path.append(current)
        candidates = [dep_id for dep_id in prerequisites[current] if dep_id in remaining]
        current = min(candidates, key=lambda task_id: by_id[task_id].order_key())

    # path walks dependent -> prerequisite; report prerequisite -> dependent
    loop = path[position[current] :]
    loop.reverse()
    return [*loop, loop[0]]
