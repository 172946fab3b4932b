"""Structured field reference records extracted from documentation pages."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PropertyEntry(BaseModel):
    """One row of a property/method table or one definition-list term."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    type: str | None = None
    default: str | None = None
    required: bool = False


class ExampleEntry(BaseModel):
    """A code block together with its nearest preceding heading."""

    model_config = ConfigDict(frozen=True)

    title: str
    code: str
    description: str | None = None


class FieldRecord(BaseModel):
    """Field reference for one subject.

    `properties` and `examples` are None rather than empty when nothing was
    found, so the serialized payload omits them entirely.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    description: str = ""
    usage: str | None = None
    properties: tuple[PropertyEntry, ...] | None = Field(default=None)
    examples: tuple[ExampleEntry, ...] | None = Field(default=None)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
