"""Pydantic schemas for task file validation."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator


class TaskSchema(BaseModel):
    """Schema for a single task entry."""

    name: str
    hours: float
    difficulty: int = 1
    phase: int = 1
    section: str = ""
    assignee: str = "Unassigned"
    dependencies: list[str] = Field(default_factory=list)

    @field_validator("dependencies", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        """Accept a single id or a list; ids are always strings."""
        if v is None:
            return []
        if isinstance(v, list):
            return [str(item) for item in v]  # type: ignore[misc]
        return [str(v)]

    @field_validator("section", "assignee", mode="before")
    @classmethod
    def coerce_label(cls, v: Any) -> Any:
        if v is None:
            return ""
        if isinstance(v, (int, float)):
            return str(v)
        return v


class MetadataSchema(BaseModel):
    """Schema for the task file's metadata block."""

    project: str | None = None
    start_date: date | None = None
    version: str = "1.0"

    @field_validator("version", mode="before")
    @classmethod
    def coerce_version_to_string(cls, v: Any) -> str:
        return str(v)


class TaskFileSchema(BaseModel):
    """Schema for the entire task file."""

    metadata: MetadataSchema = Field(default_factory=MetadataSchema)
    tasks: dict[str, TaskSchema] = Field(default_factory=dict)
