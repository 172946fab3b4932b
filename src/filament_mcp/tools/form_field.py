"""Filament Form Field Tool - Structured reference scraped from the docs site."""

import logging
from typing import Any

from fastmcp import FastMCP

from filament_mcp.contracts import build_ok
from filament_mcp.errors import DocsError
from filament_mcp.formatting import build_docs_error
from filament_mcp.remote.service import get_field_service
from filament_mcp.utils import FieldName

logger = logging.getLogger("filament-mcp.tools.form_field")


def register(mcp: FastMCP) -> None:
    """Register get_filament_form_field tool with the MCP server."""

    @mcp.tool()
    async def get_filament_form_field(field_name: FieldName) -> dict[str, Any]:
        """Get detailed information about a specific Filament form field.

        Fetches the field's page from the Filament documentation site and
        extracts its title, description, basic usage snippet, code examples
        and property/method tables. Results are cached for the server's lifetime.

        When to use:
        - You need the API of a form field (e.g., "text-input", "select", "repeater")
        - Local docs are missing or out of date for a field

        Related tools:
        - search_filament_docs: Search the local Filament documentation
        - get_filament_doc: Read a local Filament documentation file
        """
        try:
            record = await get_field_service().get_field(field_name)
        except DocsError as exc:
            return build_docs_error(
                exc,
                operation="get_filament_form_field",
                logger=logger,
                field_name=field_name,
            )
        return build_ok(record.to_payload())
