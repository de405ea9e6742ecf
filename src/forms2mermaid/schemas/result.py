"""Extraction output model."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ResultStatus(str, Enum):
    """Outcome of one extraction."""

    SUCCESS = "Success"
    ERROR = "Error"


class DiagramResult(BaseModel):
    """Record handed to the host that displays the diagram.

    Exactly one of ``error`` and ``diagram_text`` is meaningful: errors carry
    no diagram, successes carry no error.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    status: ResultStatus
    error: str = ""
    diagram_title: str = ""
    diagram_text: str = ""
    theme_primary_color: str | None = None

    @classmethod
    def failure(cls, message: str) -> "DiagramResult":
        return cls(status=ResultStatus.ERROR, error=message)

    @classmethod
    def success(
        cls, *, title: str, text: str, theme_primary_color: str | None = None
    ) -> "DiagramResult":
        return cls(
            status=ResultStatus.SUCCESS,
            diagram_title=title,
            diagram_text=text,
            theme_primary_color=theme_primary_color,
        )

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def to_record(self) -> dict[str, Any]:
        """Return the camelCase record, omitting an absent theme color."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
