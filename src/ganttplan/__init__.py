"""ganttplan - dependency-driven scheduling and critical path analysis for Gantt timelines."""

from .exceptions import (
    CircularDependencyError,
    GanttplanError,
    InvalidEffortError,
    ParseError,
    ValidationError,
)
from .models import GanttTask, ScheduledTask, Task, TaskStatus
from .scheduler import (
    SchedulingConfig,
    SchedulingMode,
    SchedulingResult,
    SchedulingService,
    manual_schedule_project,
    schedule_project,
)

__version__ = "0.1.0"

__all__ = [
    "CircularDependencyError",
    "GanttTask",
    "GanttplanError",
    "InvalidEffortError",
    "ParseError",
    "ScheduledTask",
    "SchedulingConfig",
    "SchedulingMode",
    "SchedulingResult",
    "SchedulingService",
    "Task",
    "TaskStatus",
    "ValidationError",
    "manual_schedule_project",
    "schedule_project",
]
