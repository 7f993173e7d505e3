"""Configuration schema tree and generated heading models."""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, field_validator

# Default or example values as they appear in the schema source.
ScalarValue = Union[str, int, float, bool]


class ConfigNode(BaseModel):
    """One entry in a nested configuration schema.

    Array elements and the document root have no ``key``. ``value`` and
    ``comment`` are carried for rendering and ignored by heading generation.
    """

    key: str | None = None
    value: ScalarValue | None = None
    comment: str | None = None
    children: list["ConfigNode"] = Field(default_factory=list)

    @field_validator("children", mode="before")
    @classmethod
    def null_children_as_empty(cls, v: Any) -> Any:
        """Treat an explicit ``null`` like absent children."""
        return [] if v is None else v


class HeadingEntry(BaseModel):
    """A documentation heading derived from a keyed ``ConfigNode``."""

    slug: str
    depth: int = Field(..., ge=2)
    text: str
