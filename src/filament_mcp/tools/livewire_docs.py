"""Livewire Docs Tools - Browse and search the local Livewire documentation."""

import logging
from typing import Any

from fastmcp import FastMCP

from filament_mcp.config import get_docs_config
from filament_mcp.tools import local_docs
from filament_mcp.utils import DocPath, OptionalDocPath, SearchQuery

logger = logging.getLogger("filament-mcp.tools.livewire")


def register(mcp: FastMCP) -> None:
    """Register Livewire documentation tools with the MCP server."""

    @mcp.tool()
    def list_livewire_docs(path: OptionalDocPath = None) -> dict[str, Any]:
        """List the files in the local Livewire documentation (like ls)."""
        return local_docs.list_docs("livewire", get_docs_config().livewire_dir, path, logger)

    @mcp.tool()
    def get_livewire_doc(path: DocPath) -> dict[str, Any]:
        """Get the content of a Livewire documentation file (like cat).

        Examples of paths: 'quickstart', 'components', 'forms'. The ".md" extension is optional.
        """
        return local_docs.read_doc("livewire", get_docs_config().livewire_dir, path, logger)

    @mcp.tool()
    def search_livewire_docs(query: SearchQuery) -> dict[str, Any]:
        """Search the local Livewire documentation for a term (like grep -l).

        Returns the paths of matching files, e.g. for 'wire:model', 'lifecycle', 'validation'.
        Use get_livewire_doc to read a match.
        """
        return local_docs.search_docs("livewire", get_docs_config().livewire_dir, query, logger)
