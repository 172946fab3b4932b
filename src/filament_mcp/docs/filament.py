"""Filament documentation catalog.

Filament ships one documentation tree per package, laid out as
`packages/<package>/docs/**.md`. This module adds package discovery,
titled file listings and ranked search on top of DocumentationStore.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from threading import Lock
from typing import Any, Optional

from filament_mcp.docs.markdown import (
    clean_item_name,
    extract_title,
    first_paragraph,
    make_excerpt,
    path_to_title,
    score_relevance,
)
from filament_mcp.docs.store import MARKDOWN_SUFFIX, DocumentationStore, logger
from filament_mcp.errors import (
    DocsIOError,
    DocumentNotFoundError,
    InvalidArgumentError,
    PackageNotFoundError,
)
from filament_mcp.utils import MIN_QUERY_LENGTH

PACKAGES_DIR = "packages"
OVERVIEW_FILE = "01-overview.md"


@dataclass
class DocPackage:
    name: str
    path: str
    description: str


@dataclass
class DocFile:
    name: str
    path: str
    is_directory: bool
    title: Optional[str] = None


@dataclass
class DocSearchResult:
    title: str
    path: str
    package: str
    excerpt: str
    relevance: int


class FilamentCatalog:
    """Package-aware access to the local Filament documentation."""

    def __init__(self, store: DocumentationStore) -> None:
        self.store = store
        self._packages: list[DocPackage] | None = None
        self._lock = Lock()

    @staticmethod
    def _docs_root(package: str) -> str:
        return f"{PACKAGES_DIR}/{package}/docs"

    def list_packages(self) -> list[DocPackage]:
        """Packages that ship a docs/ directory, sorted by name. Cached."""
        with self._lock:
            if self._packages is not None:
                return list(self._packages)

        packages_dir = self.store.resolve(PACKAGES_DIR)
        if not packages_dir.is_dir():
            raise DocumentNotFoundError(
                "Filament packages directory not found",
                details={"path": PACKAGES_DIR},
            )

        packages: list[DocPackage] = []
        for entry in sorted(packages_dir.iterdir()):
            if not entry.is_dir() or not (entry / "docs").is_dir():
                continue
            packages.append(
                DocPackage(
                    name=entry.name,
                    path=f"{PACKAGES_DIR}/{entry.name}",
                    description=self._package_description(entry.name),
                )
            )

        with self._lock:
            self._packages = packages
        return list(packages)

    def _package_description(self, package: str) -> str:
        default = f"Documentation for the {package} package"
        try:
            content = self.store.read_file(f"{self._docs_root(package)}/{OVERVIEW_FILE}")
        except (DocumentNotFoundError, DocsIOError):
            return default
        return first_paragraph(content) or default

    def _require_package(self, package: str) -> DocPackage:
        for pkg in self.list_packages():
            if pkg.name == package:
                return pkg
        raise PackageNotFoundError(
            f"Package not found: {package}",
            details={"available_packages": [p.name for p in self.list_packages()]},
        )

    def list_docs(self, package: str, path: str | None = None) -> dict[str, Any]:
        package = package.strip()
        sub_path = (path or "").strip().strip("/")
        directory_key = self._docs_root(package) + (f"/{sub_path}" if sub_path else "")
        directory = self.store.resolve(directory_key)
        if not directory.is_dir():
            raise DocumentNotFoundError(
                f"Package or path does not exist: {package}{'/' + sub_path if sub_path else ''}",
                details={"package": package, "path": sub_path},
            )

        files: list[DocFile] = []
        for entry in directory.iterdir():
            if entry.name.startswith("."):
                continue
            is_dir = entry.is_dir()
            doc_file = DocFile(
                name=clean_item_name(entry.name),
                path=f"{sub_path}/{entry.name}" if sub_path else entry.name,
                is_directory=is_dir,
            )
            if is_dir:
                doc_file.title = path_to_title(entry.name)
            elif entry.name.endswith(MARKDOWN_SUFFIX):
                try:
                    doc_file.title = extract_title(self.store.read_file(f"{directory_key}/{entry.name}"))
                except DocsIOError:
                    doc_file.title = path_to_title(entry.name)
            files.append(doc_file)

        # Directories first, then by path
        files.sort(key=lambda f: (not f.is_directory, f.path))
        return {
            "package": package,
            "path": sub_path,
            "files": [asdict(f) for f in files],
        }

    def get_doc(self, package: str, path: str) -> dict[str, Any]:
        package = package.strip()
        doc_path = path.strip().strip("/")
        if doc_path.endswith(MARKDOWN_SUFFIX):
            doc_path = doc_path[: -len(MARKDOWN_SUFFIX)]
        try:
            content = self.store.read_file(f"{self._docs_root(package)}/{doc_path}{MARKDOWN_SUFFIX}")
        except DocumentNotFoundError as exc:
            raise DocumentNotFoundError(
                f"Requested file does not exist: {package}/{doc_path}",
                details={"package": package, "path": doc_path},
            ) from exc
        return {
            "title": extract_title(content),
            "content": content,
            "package": package,
            "path": doc_path,
        }

    def search(self, query: str, package: str | None = None) -> list[DocSearchResult]:
        """Ranked substring search across one or all packages."""
        needle = query.strip().lower()
        if len(needle) < MIN_QUERY_LENGTH:
            raise InvalidArgumentError(
                f"Search term must be at least {MIN_QUERY_LENGTH} characters",
                details={"query": query},
            )

        target = (package or "").strip()
        packages = [self._require_package(target)] if target else self.list_packages()

        results: list[DocSearchResult] = []
        for pkg in packages:
            docs_root = self._docs_root(pkg.name)
            for file_path in self.store.iter_markdown(docs_root):
                key = self.store.relative_key(file_path)
                try:
                    content = self.store.read_file(key)
                except DocsIOError as exc:
                    logger.warning("Skipping unreadable file %s: %s", key, exc)
                    continue
                if needle not in content.lower():
                    continue
                relative = key[len(docs_root) + 1 : -len(MARKDOWN_SUFFIX)]
                results.append(
                    DocSearchResult(
                        title=extract_title(content),
                        path=relative,
                        package=pkg.name,
                        excerpt=make_excerpt(content, needle),
                        relevance=score_relevance(content, needle),
                    )
                )

        results.sort(key=lambda r: r.relevance, reverse=True)
        return results
