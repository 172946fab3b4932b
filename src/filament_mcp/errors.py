"""Error taxonomy shared by local documentation and remote field tools."""

from __future__ import annotations

from typing import Any


class DocsError(Exception):
    """Base error carrying a stable machine-readable code."""

    code = "docs_error"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class InvalidArgumentError(DocsError):
    """Required argument missing or malformed. Raised before any I/O."""

    code = "invalid_argument"


class NotFoundError(DocsError):
    """Requested subject does not exist at its documentation URL."""

    code = "not_found"


class PackageNotFoundError(NotFoundError):
    code = "package_not_found"


class DocumentNotFoundError(NotFoundError):
    code = "document_not_found"


class FetchFailedError(DocsError):
    """Network failure or non-2xx response other than 404."""

    code = "fetch_failed"

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        merged = dict(details or {})
        merged["status"] = status
        super().__init__(message, details=merged)
        self.status = status


class DocsIOError(DocsError):
    """Local documentation file or directory could not be read."""

    code = "io_error"
