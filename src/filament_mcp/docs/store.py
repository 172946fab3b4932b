"""File-system access to a local Markdown documentation tree.

Responsibilities:
- List entries of a directory inside the tree
- Read documents (with or without the ".md" extension), cached per process
- Recursive case-insensitive substring search across ".md" files
"""

import logging
from pathlib import Path
from threading import Lock
from typing import Dict, Iterator

from filament_mcp.errors import DocsIOError, DocumentNotFoundError, InvalidArgumentError

MARKDOWN_SUFFIX = ".md"

logger = logging.getLogger("filament-mcp.docs")


class DocumentationStore:
    """Read-only view over one documentation base directory."""

    def __init__(self, base_dir: Path) -> None:
        self.base_dir = Path(base_dir)
        self._content_cache: Dict[str, str] = {}
        self._lock = Lock()

    def resolve(self, relative: str = "") -> Path:
        """Resolve `relative` inside the base directory, rejecting escapes."""
        base = self.base_dir.resolve()
        target = (base / relative.strip().strip("/")).resolve() if relative else base
        if target != base and base not in target.parents:
            raise InvalidArgumentError(
                f"Path escapes the documentation root: {relative}",
                details={"path": relative},
            )
        return target

    def list_entries(self, sub_path: str = "") -> list[str]:
        directory = self.resolve(sub_path)
        if not directory.is_dir():
            raise DocumentNotFoundError(
                f"Directory not found: {sub_path or '.'}",
                details={"path": sub_path},
            )
        try:
            return sorted(entry.name for entry in directory.iterdir())
        except OSError as exc:
            raise DocsIOError(f"Failed to list files in {sub_path or '.'}") from exc

    def read_file(self, file_path: str) -> str:
        """Read a document, trying `file_path` then `file_path` + ".md"."""
        key = file_path.strip().strip("/")
        with self._lock:
            cached = self._content_cache.get(key)
        if cached is not None:
            return cached

        path = self.resolve(key)
        if not path.is_file():
            path = self.resolve(key + MARKDOWN_SUFFIX)
        if not path.is_file():
            raise DocumentNotFoundError(f"File not found: {file_path}", details={"path": file_path})

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocsIOError(f"Failed to read file {file_path}") from exc

        with self._lock:
            self._content_cache[key] = content
        return content

    def iter_markdown(self, sub_path: str = "") -> Iterator[Path]:
        """Yield every visible ".md" file below `sub_path`, depth-first in name order."""
        root = self.resolve(sub_path)
        if not root.is_dir():
            raise DocumentNotFoundError(
                f"Directory not found: {sub_path or '.'}",
                details={"path": sub_path},
            )
        yield from self._walk(root)

    def _walk(self, directory: Path) -> Iterator[Path]:
        for entry in sorted(directory.iterdir()):
            if entry.name.startswith("."):
                continue
            if entry.is_dir():
                yield from self._walk(entry)
            elif entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX):
                yield entry

    def relative_key(self, path: Path) -> str:
        return path.resolve().relative_to(self.base_dir.resolve()).as_posix()

    def search_content(self, query: str, sub_path: str = "") -> list[str]:
        """Return relative paths (without ".md") of documents containing `query`."""
        needle = query.lower()
        results: list[str] = []
        for path in self.iter_markdown(sub_path):
            key = self.relative_key(path)
            try:
                content = self.read_file(key)
            except DocsIOError as exc:
                logger.warning("Skipping unreadable file %s: %s", key, exc)
                continue
            if needle in content.lower():
                results.append(key[: -len(MARKDOWN_SUFFIX)])
        return results
