"""Write computed schedule dates back into a task file."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.resolver import VersionedResolver

from .exceptions import ParseError
from .logger import get_logger
from .models import ScheduledTask

logger = get_logger()

_FLOAT_TAG = "tag:yaml.org,2002:float"


class _FloatAsTextResolver(VersionedResolver):
    """Leave float-looking plain scalars as text.

    Otherwise ids such as 1.1 and 1.10 resolve to the same float key and the
    round-trip loader rejects them as duplicates. The text is written back
    verbatim, so other float values in the file are unaffected.
    """

    @property
    def versioned_resolver(self) -> Any:
        return {
            first: [(tag, regexp) for tag, regexp in entries if tag != _FLOAT_TAG]
            for first, entries in super().versioned_resolver.items()
        }


def write_schedule_annotations(file_path: Path, scheduled: Sequence[ScheduledTask]) -> int:
    """Add estimated_start/estimated_end/critical_path to each task entry.

    Uses ruamel.yaml round-tripping so comments, key order and quoting in the
    original file survive. Values are only touched when they changed.

    Args:
        file_path: Task file to update in place
        scheduled: Scheduled tasks whose dates to record

    Returns:
        Number of task entries updated

    Raises:
        ParseError: If the file has no ``tasks`` mapping
    """
    yaml_rt = YAML()
    yaml_rt.preserve_quotes = True  # type: ignore[assignment]
    yaml_rt.Resolver = _FloatAsTextResolver

    with file_path.open(encoding="utf-8") as f:
        data: Any = yaml_rt.load(f)  # type: ignore[no-untyped-call]

    if not isinstance(data, dict) or not isinstance(data.get("tasks"), dict):  # type: ignore[union-attr]
        raise ParseError(f"No 'tasks' mapping found in {file_path}")

    # Integer ids still load as ints
    entries: dict[str, Any] = {str(key): value for key, value in data["tasks"].items()}
    updated = 0
    for record in scheduled:
        entry = entries.get(record.task_id)
        if entry is None:
            logger.changes(f"Task '{record.task_id}' not found in {file_path}; skipped")
            continue

        values = {
            "estimated_start": record.start_date.isoformat(),
            "estimated_end": record.end_date.isoformat(),
            "critical_path": record.critical_path,
        }
        for key, value in values.items():
            if entry.get(key) != value:
                entry[key] = value
        updated += 1

    with file_path.open("w", encoding="utf-8") as f:
        yaml_rt.dump(data, f)  # type: ignore[no-untyped-call]

    return updated
