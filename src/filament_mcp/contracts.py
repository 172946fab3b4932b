"""Response envelopes shared by every Filament MCP tool.

A tool returns `{"ok": true, "data": ...}` or `{"ok": false, "error": ...}`.
The field tool puts a serialized FieldRecord in `data`; the documentation
tools put a DocsData payload there.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

DocsSource = Literal["filament", "laravel", "livewire"]
DocsAction = Literal["list", "read", "search"]


class ToolError(BaseModel):
    code: str = Field(description="Error code from the DocsError taxonomy, e.g. 'not_found'")
    message: str = Field(description="Human-readable failure summary")
    details: dict[str, Any] | None = Field(
        default=None, description="Operation name, arguments and failure context"
    )


class ToolEnvelope(BaseModel):
    """Either data or an error, never both."""

    ok: bool
    data: Any | None = None
    error: ToolError | None = None

    @model_validator(mode="after")
    def _validate_coherence(self) -> "ToolEnvelope":
        if self.ok and self.error is not None:
            raise ValueError("successful responses cannot carry an error")
        if not self.ok and self.error is None:
            raise ValueError("failed responses must carry an error")
        return self


class DocsData(BaseModel):
    """Payload of the list/read/search documentation tools.

    `entries` are listing rows, documents or search hits depending on
    `action`; `summary` always carries at least a `count`.
    """

    source: DocsSource
    action: DocsAction
    entries: list[dict[str, Any]]
    summary: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _fill_count(self) -> "DocsData":
        self.summary.setdefault("count", len(self.entries))
        return self


def build_ok(data: Any) -> dict[str, Any]:
    return ToolEnvelope(ok=True, data=data).model_dump(exclude_none=True)


def build_error(code: str, message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    return ToolEnvelope(
        ok=False,
        error=ToolError(code=code, message=message, details=details),
    ).model_dump(exclude_none=True)


def build_docs_data(
    *,
    source: DocsSource,
    action: DocsAction,
    entries: list[dict[str, Any]],
    summary: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Validate a documentation payload and dump it for build_ok."""
    return DocsData(
        source=source,
        action=action,
        entries=entries,
        summary=summary or {},
    ).model_dump(exclude_none=True)
