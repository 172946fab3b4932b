"""Shared list/read/search handlers for single-tree documentation sources."""

import logging
from pathlib import Path
from typing import Any, Optional

from filament_mcp.contracts import DocsSource, build_docs_data, build_ok
from filament_mcp.docs import get_store
from filament_mcp.docs.markdown import extract_title
from filament_mcp.docs.store import MARKDOWN_SUFFIX
from filament_mcp.errors import DocsError, InvalidArgumentError
from filament_mcp.formatting import build_docs_error


def list_docs(
    source: DocsSource, base_dir: Path, path: Optional[str], logger: logging.Logger
) -> dict[str, Any]:
    sub_path = (path or "").strip().strip("/")
    try:
        names = get_store(base_dir).list_entries(sub_path)
    except DocsError as exc:
        return build_docs_error(exc, operation=f"list_{source}_docs", logger=logger, path=sub_path)

    entries = [
        {"name": name, "path": f"{sub_path}/{name}" if sub_path else name}
        for name in names
        if not name.startswith(".")
    ]
    return build_ok(
        build_docs_data(
            source=source,
            action="list",
            entries=entries,
            summary={"count": len(entries), "path": sub_path},
        )
    )


def read_doc(source: DocsSource, base_dir: Path, path: str, logger: logging.Logger) -> dict[str, Any]:
    doc_path = path.strip().strip("/")
    try:
        content = get_store(base_dir).read_file(doc_path)
    except DocsError as exc:
        return build_docs_error(exc, operation=f"get_{source}_doc", logger=logger, path=doc_path)

    if doc_path.endswith(MARKDOWN_SUFFIX):
        doc_path = doc_path[: -len(MARKDOWN_SUFFIX)]
    return build_ok(
        build_docs_data(
            source=source,
            action="read",
            entries=[{"title": extract_title(content), "path": doc_path, "content": content}],
            summary={"count": 1},
        )
    )


def search_docs(source: DocsSource, base_dir: Path, query: str, logger: logging.Logger) -> dict[str, Any]:
    needle = query.strip()
    try:
        if not needle:
            raise InvalidArgumentError(
                "Search term cannot be empty",
                details={"query": query},
            )
        paths = get_store(base_dir).search_content(needle)
    except DocsError as exc:
        return build_docs_error(exc, operation=f"search_{source}_docs", logger=logger, query=query)

    return build_ok(
        build_docs_data(
            source=source,
            action="search",
            entries=[{"path": p} for p in paths],
            summary={"count": len(paths), "query": needle},
        )
    )
