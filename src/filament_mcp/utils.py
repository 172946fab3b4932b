"""Validation models and utilities for Filament MCP tools."""

from typing import Annotated, Optional

from pydantic import Field
from pydantic.functional_validators import AfterValidator

# Local search requires at least this many characters
MIN_QUERY_LENGTH = 3


def normalize_subject(value: Optional[str]) -> str:
    """Normalize a field identifier for URL building and cache keys."""
    return (value or "").strip().lower()


def validate_non_empty_string(value: str) -> str:
    """Validate that a string is not empty after stripping whitespace."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("Value cannot be empty or whitespace only")
    return stripped


FieldName = Annotated[
    str,
    Field(
        ...,
        description=(
            "Name of the Filament form field (e.g., 'text-input', 'select', "
            "'repeater'). Case-insensitive."
        ),
    ),
]

PackageName = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(..., description="Name of the package (e.g., 'forms', 'tables', 'panels')"),
]

DocPath = Annotated[
    str,
    AfterValidator(validate_non_empty_string),
    Field(
        ...,
        description=(
            "Path of the file within the documentation, with or without '.md' "
            "(e.g., 'fields/text-input', 'installation')"
        ),
    ),
]

OptionalDocPath = Annotated[
    Optional[str],
    Field(description="Optional sub-directory within the documentation"),
]

SearchQuery = Annotated[
    str,
    Field(
        ...,
        description=(
            "Search term (e.g., 'input', 'validation', 'table'). Case-insensitive."
        ),
    ),
]
