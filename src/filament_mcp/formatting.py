"""Error rendering helpers for MCP tool outputs."""

from __future__ import annotations

import logging
from typing import Any

from filament_mcp.contracts import build_error
from filament_mcp.errors import DocsError


def build_docs_error(
    exc: DocsError,
    *,
    operation: str,
    logger: logging.Logger,
    **context: Any,
) -> dict[str, Any]:
    """Log a DocsError with its context and wrap it in an error envelope."""
    level = logging.WARNING if exc.code == "invalid_argument" else logging.ERROR
    logger.log(level, "%s failed (%s): %s | context=%s", operation, exc.code, exc.message, context)

    details: dict[str, Any] = {"operation": operation}
    details.update({k: v for k, v in context.items() if v is not None})
    if exc.details:
        details.update(exc.details)
    return build_error(exc.code, exc.message, details)
