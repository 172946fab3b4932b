"""Filament Docs Tools - Browse and search the local Filament documentation."""

import logging
from dataclasses import asdict
from typing import Any, Optional

from fastmcp import FastMCP
from pydantic import Field

from filament_mcp.contracts import build_docs_data, build_ok
from filament_mcp.docs import get_filament_catalog
from filament_mcp.errors import DocsError
from filament_mcp.formatting import build_docs_error
from filament_mcp.utils import DocPath, OptionalDocPath, PackageName, SearchQuery

logger = logging.getLogger("filament-mcp.tools.filament")


def register(mcp: FastMCP) -> None:
    """Register Filament documentation tools with the MCP server."""

    @mcp.tool()
    def list_filament_packages() -> dict[str, Any]:
        """List the packages available in the local Filament documentation.

        Each entry has the package name, its path and a short description
        taken from the package overview page.
        """
        try:
            packages = get_filament_catalog().list_packages()
        except DocsError as exc:
            return build_docs_error(exc, operation="list_filament_packages", logger=logger)

        return build_ok(
            build_docs_data(
                source="filament",
                action="list",
                entries=[asdict(pkg) for pkg in packages],
                summary={"count": len(packages)},
            )
        )

    @mcp.tool()
    def list_filament_docs(
        package: PackageName,
        path: OptionalDocPath = None,
    ) -> dict[str, Any]:
        """List documentation files in a Filament package (like ls).

        Directories are listed first. Markdown files carry the title of
        their first heading.

        Related tools:
        - get_filament_doc: Read one of the listed files
        """
        try:
            listing = get_filament_catalog().list_docs(package, path)
        except DocsError as exc:
            return build_docs_error(
                exc, operation="list_filament_docs", logger=logger, package=package, path=path
            )

        return build_ok(
            build_docs_data(
                source="filament",
                action="list",
                entries=listing["files"],
                summary={
                    "count": len(listing["files"]),
                    "package": listing["package"],
                    "path": listing["path"],
                },
            )
        )

    @mcp.tool()
    def get_filament_doc(package: PackageName, path: DocPath) -> dict[str, Any]:
        """Get the content of a file from the local Filament documentation (like cat)."""
        try:
            doc = get_filament_catalog().get_doc(package, path)
        except DocsError as exc:
            return build_docs_error(
                exc, operation="get_filament_doc", logger=logger, package=package, path=path
            )

        return build_ok(
            build_docs_data(source="filament", action="read", entries=[doc], summary={"count": 1})
        )

    @mcp.tool()
    def search_filament_docs(
        query: SearchQuery,
        package: Optional[str] = Field(
            None,
            description="Optional package to limit the search (e.g., 'forms', 'tables')",
        ),
    ) -> dict[str, Any]:
        """Search the local Filament documentation for a term (like grep).

        Results are ranked by relevance: number of occurrences, a bonus when
        the term appears in a heading, and how early the first match occurs.
        """
        try:
            results = get_filament_catalog().search(query, package)
        except DocsError as exc:
            return build_docs_error(
                exc, operation="search_filament_docs", logger=logger, query=query, package=package
            )

        return build_ok(
            build_docs_data(
                source="filament",
                action="search",
                entries=[asdict(result) for result in results],
                summary={
                    "count": len(results),
                    "query": query.strip().lower(),
                    "package": (package or "").strip() or "all",
                },
            )
        )
