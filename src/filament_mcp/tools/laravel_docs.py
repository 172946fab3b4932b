"""Laravel Docs Tools - Browse and search the local Laravel documentation."""

import logging
from typing import Any

from fastmcp import FastMCP

from filament_mcp.config import get_docs_config
from filament_mcp.tools import local_docs
from filament_mcp.utils import DocPath, OptionalDocPath, SearchQuery

logger = logging.getLogger("filament-mcp.tools.laravel")


def register(mcp: FastMCP) -> None:
    """Register Laravel documentation tools with the MCP server."""

    @mcp.tool()
    def list_laravel_docs(path: OptionalDocPath = None) -> dict[str, Any]:
        """List the files in the local Laravel documentation (like ls)."""
        return local_docs.list_docs("laravel", get_docs_config().laravel_dir, path, logger)

    @mcp.tool()
    def get_laravel_doc(path: DocPath) -> dict[str, Any]:
        """Get the content of a Laravel documentation file (like cat).

        Examples of paths: 'installation', 'routing', 'eloquent'. The ".md" extension is optional.
        """
        return local_docs.read_doc("laravel", get_docs_config().laravel_dir, path, logger)

    @mcp.tool()
    def search_laravel_docs(query: SearchQuery) -> dict[str, Any]:
        """Search the local Laravel documentation for a term (like grep -l).

        Returns the paths of matching files, e.g. for 'route', 'middleware', 'config'.
        Use get_laravel_doc to read a match.
        """
        return local_docs.search_docs("laravel", get_docs_config().laravel_dir, query, logger)
