"""Task file and configuration loading."""

from __future__ import annotations

from pathlib import Path

from . import context
from .parser import TaskFile, TaskFileParser
from .unified_config import CONFIG_FILENAME, UnifiedConfig, load_unified_config


def discover_config(
    task_file_path: Path | str,
    config_path: Path | None = None,
) -> UnifiedConfig | None:
    """Find and load the unified config for a task file.

    Search order:
    1. Explicit config_path argument
    2. Global context (set via CLI --config)
    3. Task file directory / ganttplan_config.yaml
    4. Current directory / ganttplan_config.yaml
    """
    if config_path is not None:
        return load_unified_config(config_path)

    ctx_config = context.get_config_path()
    if ctx_config is not None:
        return load_unified_config(ctx_config)

    dir_config = Path(task_file_path).parent / CONFIG_FILENAME
    if dir_config.exists():
        return load_unified_config(dir_config)

    cwd_config = Path(CONFIG_FILENAME)
    if cwd_config.exists():
        return load_unified_config(cwd_config)

    return None


def load_task_file(path: Path | str) -> TaskFile:
    """Parse a task file into Task objects.

    Raises:
        ParseError: If the file is missing, not valid YAML, or fails the schema
    """
    return TaskFileParser().parse_file(path)
