"""Configuration classes for the scheduling system."""

from enum import Enum

from pydantic import BaseModel, Field

# Working hours that make up one calendar day of effort. Partial days round up.
HOURS_PER_DAY = 8.0

DEFAULT_DIFFICULTY_MULTIPLIERS: dict[int, float] = {
    1: 1.0,  # Easy
    2: 1.2,  # Medium
    3: 1.5,  # Hard
    4: 2.0,  # Very hard
    5: 2.5,  # Expert
}


class SchedulingMode(str, Enum):
    """How tasks are placed on the timeline."""

    AUTO = "auto"  # Dependency-driven forward pass plus critical path
    MANUAL = "manual"  # Sequential by phase/section, dependencies ignored


class DurationConfig(BaseModel):
    """Conversion of effort hours into calendar days."""

    hours_per_day: float = Field(default=HOURS_PER_DAY, gt=0, allow_inf_nan=False)
    # Stretch durations by difficulty rank (off unless asked for)
    apply_difficulty_multiplier: bool = False
    difficulty_multipliers: dict[int, float] = Field(
        default_factory=lambda: dict(DEFAULT_DIFFICULTY_MULTIPLIERS)
    )


class SchedulingConfig(BaseModel):
    """Configuration for scheduling mode and duration conversion."""

    mode: SchedulingMode = SchedulingMode.AUTO
    # Display hint only: never changes dates or the computed critical_path flag
    show_critical_path: bool = False
    duration: DurationConfig = DurationConfig()
