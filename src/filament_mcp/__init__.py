"""Filament MCP Server - Filament, Laravel and Livewire documentation over MCP."""

__version__ = "0.1.0"
