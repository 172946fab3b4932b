"""Filament MCP tool implementations."""

from . import (
    filament_docs,
    form_field,
    laravel_docs,
    livewire_docs,
)

__all__ = [
    "filament_docs",
    "form_field",
    "laravel_docs",
    "livewire_docs",
]
