"""Unified configuration loader for scheduling and Gantt settings.

A single file (ganttplan_config.yaml) holds the project start date, the
scheduler settings and the Gantt projection settings.
"""

from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .gantt import GanttConfig
from .scheduler.config import SchedulingConfig

CONFIG_FILENAME = "ganttplan_config.yaml"


class UnifiedConfig(BaseModel):
    """Unified configuration for a project."""

    start_date: date | None = None  # Overrides the task file's metadata.start_date
    scheduler: SchedulingConfig = Field(default_factory=SchedulingConfig)
    gantt: GanttConfig = Field(default_factory=GanttConfig)


def load_unified_config(config_path: Path | str) -> UnifiedConfig:
    """Load unified configuration from a YAML file.

    Args:
        config_path: Path to ganttplan_config.yaml

    Returns:
        UnifiedConfig with defaults for any missing section

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is empty or invalid
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open(encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if not data:
        raise ValueError("Empty configuration file")
    if not isinstance(data, dict):
        raise ValueError("Configuration must be a mapping at the root level")

    # pydantic's ValidationError is a ValueError
    return UnifiedConfig.model_validate(data)
