"""YAML parser for task files."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ParseError
from .models import Task
from .schemas import TaskFileSchema, TaskSchema


_NULL_TAG = "tag:yaml.org,2002:null"


class TaskFileLoader(yaml.SafeLoader):
    """SafeLoader that keeps task ids exactly as written.

    Plain scalars such as ``1.10`` would otherwise resolve to the float 1.1,
    renaming the task (and silently merging it with a ``1.1`` sibling). Mapping
    keys and ``dependencies`` entries are therefore taken from the source text;
    every other value resolves normally.
    """


def _scalar_text(loader: TaskFileLoader, node: yaml.Node) -> Any:
    if isinstance(node, yaml.ScalarNode) and node.tag != _NULL_TAG:
        return node.value
    return loader.construct_object(node, deep=True)


def _construct_mapping(loader: TaskFileLoader, node: yaml.MappingNode) -> dict[Any, Any]:
    loader.flatten_mapping(node)
    mapping: dict[Any, Any] = {}
    for key_node, value_node in node.value:
        key = _scalar_text(loader, key_node)
        if key in mapping:
            raise yaml.constructor.ConstructorError(
                "while constructing a mapping",
                node.start_mark,
                f"found duplicate key {key!r}",
                key_node.start_mark,
            )
        if key == "dependencies" and isinstance(value_node, yaml.SequenceNode):
            mapping[key] = [_scalar_text(loader, item) for item in value_node.value]
        elif key == "dependencies":
            mapping[key] = _scalar_text(loader, value_node)
        else:
            mapping[key] = loader.construct_object(value_node, deep=True)
    return mapping


TaskFileLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG,
    _construct_mapping,  # type: ignore[arg-type]
)


def load_yaml(file_path: Path | str) -> Any:
    """Load a task file's YAML with ids kept as text.

    Raises:
        ParseError: If the file is missing or is not valid YAML
    """
    path = Path(file_path)
    if not path.exists():
        raise ParseError(f"File not found: {file_path}")

    try:
        with path.open(encoding="utf-8") as f:
            return yaml.load(f, Loader=TaskFileLoader)  # noqa: S506 - SafeLoader subclass
    except yaml.YAMLError as e:
        raise ParseError(f"Failed to parse YAML: {e}") from e


@dataclass
class TaskFile:
    """Tasks plus the file-level metadata they came with."""

    tasks: list[Task] = field(default_factory=list[Task])
    project: str | None = None
    start_date: date | None = None


class TaskFileParser:
    """Parser for task YAML files.

    Only turns YAML into ``Task`` objects; scheduling preconditions (effort,
    cycles, references) are checked by the scheduler itself.
    """

    def parse_file(self, file_path: Path | str) -> TaskFile:
        """Parse a YAML file into a TaskFile."""
        return self.parse_data(load_yaml(file_path))

    def parse_data(self, data: Any) -> TaskFile:
        """Parse already-loaded YAML data."""
        if not isinstance(data, dict):
            raise ParseError("YAML must contain a dictionary at the root level")

        raw_tasks = data.get("tasks") or {}
        if not isinstance(raw_tasks, dict):
            raise ParseError("'tasks' must be a mapping of task id to task fields")
        # Ids may arrive as numbers when data was loaded by another YAML loader
        data = {**data, "tasks": {str(key): value for key, value in raw_tasks.items()}}  # type: ignore[misc]

        try:
            schema = TaskFileSchema.model_validate(data)
        except PydanticValidationError as e:
            raise ParseError(f"Invalid task file: {e}") from e

        return TaskFile(
            tasks=[self._build_task(task_id, entry) for task_id, entry in schema.tasks.items()],
            project=schema.metadata.project,
            start_date=schema.metadata.start_date,
        )

    def _build_task(self, task_id: str, entry: TaskSchema) -> Task:
        return Task(
            id=task_id,
            name=entry.name,
            hours=entry.hours,
            difficulty=entry.difficulty,
            phase=entry.phase,
            section=entry.section,
            assignee=entry.assignee,
            dependencies=tuple(entry.dependencies),
        )
