"""Scheduler package - dependency-driven and manual project scheduling.

Pipeline (automatic mode):
- SchedulerInputValidator: effort/difficulty/id checks, dangling reference warnings
- build_task_graph: Kahn ordering with a phase/section/id tie-break, cycle detection
- ForwardPass: earliest start/finish per task
- CriticalPathAnalyzer: latest start/finish, slack and the critical path

Manual mode replaces the last three with ManualScheduler, which lays tasks
end to end in phase/section order.

Main entry points:
- schedule_project / manual_schedule_project: schedule and project for the Gantt chart
- SchedulingService: lower-level service returning a SchedulingResult
"""

from .algorithms import DependencyScheduler, ManualScheduler, create_algorithm
from .backward_pass import CriticalPathAnalyzer, CriticalPathResult
from .config import HOURS_PER_DAY, DurationConfig, SchedulingConfig, SchedulingMode
from .core import AlgorithmResult, SchedulingResult, TaskWindow, compute_duration_days
from .forward_pass import ForwardPass, ForwardPassResult
from .graph import DanglingReference, TaskGraph, build_task_graph
from .protocols import SchedulingAlgorithm
from .service import SchedulingService, manual_schedule_project, schedule_project
from .validator import SchedulerInputValidator

__all__ = [
    # Core dataclasses
    "TaskWindow",
    "AlgorithmResult",
    "SchedulingResult",
    "compute_duration_days",
    # Configuration
    "HOURS_PER_DAY",
    "DurationConfig",
    "SchedulingConfig",
    "SchedulingMode",
    # Graph
    "DanglingReference",
    "TaskGraph",
    "build_task_graph",
    # Passes
    "ForwardPass",
    "ForwardPassResult",
    "CriticalPathAnalyzer",
    "CriticalPathResult",
    # Algorithms
    "SchedulingAlgorithm",
    "DependencyScheduler",
    "ManualScheduler",
    "create_algorithm",
    # Service
    "SchedulingService",
    "SchedulerInputValidator",
    "schedule_project",
    "manual_schedule_project",
]
