"""Shared fixtures: a local documentation tree and a fake documentation site."""

import logging
from pathlib import Path
from typing import Callable

import httpx
import pytest

from filament_mcp.config import RemoteConfig
from filament_mcp.remote.service import FieldReferenceService

TEXT_INPUT_PAGE = """
<html><body><main>
<h1>Text input</h1>
<p>The text input allows you to interact with a string.</p>
<h2>Basic usage</h2>
<pre><code>use Filament\\Forms\\Components\\TextInput;

TextInput::make('name')</code></pre>
<h2>Available methods</h2>
<table>
  <thead><tr><th>Method</th><th>Description</th><th>Type</th></tr></thead>
  <tbody>
    <tr><td>email()</td><td>Validates an email address</td><td>bool</td></tr>
    <tr><td>maxLength()</td><td>The value is required to be shorter</td><td>int</td></tr>
  </tbody>
</table>
</main></body></html>
"""


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture()
def docs_tree(tmp_path, monkeypatch) -> Path:
    """Build a small data/ directory and point the server at it."""
    data = tmp_path / "data"
    forms = data / "filament-docs" / "packages" / "forms" / "docs"
    _write(forms / "01-overview.md", "# Overview\n\nFilament's form builder package.\n\n## Next\n")
    _write(
        forms / "02-getting-started.md",
        "# Getting started\n\nInstall the package, then add validation to fields.\n",
    )
    _write(
        forms / "03-fields" / "01-text-input.md",
        "# Text input\n\nThe text input allows you to interact with a string.\n\n"
        "## Validation\n\nAdd validation rules with `rules()`. Validation runs on submit.\n",
    )
    _write(forms / "03-fields" / "02-select.md", "# Select\n\nPick one option.\n")
    _write(forms / ".hidden.md", "# Hidden\n\nvalidation\n")

    tables = data / "filament-docs" / "packages" / "tables" / "docs"
    _write(tables / "01-overview.md", "Tables without a heading.\n")
    _write(tables / "02-columns.md", "# Columns\n\nColumns support validation messages too.\n")

    # A package without docs/ is not listed
    (data / "filament-docs" / "packages" / "support" / "src").mkdir(parents=True)

    laravel = data / "laravel-docs"
    _write(laravel / "routing.md", "# Routing\n\nDefine routes with middleware groups.\n")
    _write(laravel / "middleware.md", "# Middleware\n\nMiddleware filters HTTP requests.\n")
    _write(laravel / "database" / "eloquent.md", "# Eloquent\n\nThe ORM.\n")

    livewire = data / "livewire-docs"
    _write(livewire / "components.md", "# Components\n\nUse wire:model to bind data.\n")

    monkeypatch.setenv("FILAMENT_MCP_DATA_DIR", str(data))
    return data


@pytest.fixture()
def text_input_page() -> str:
    return TEXT_INPUT_PAGE


@pytest.fixture()
def remote_config() -> RemoteConfig:
    return RemoteConfig(
        base_url="https://docs.test/3.x",
        field_path="forms/fields",
        timeout_s=15.0,
        user_agent="filament-mcp-tests",
    )


@pytest.fixture()
def make_service(remote_config) -> Callable[..., FieldReferenceService]:
    """Factory for services whose HTTP traffic goes to `handler`."""

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> FieldReferenceService:
        client = httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)
        return FieldReferenceService(client, remote_config, logging.getLogger("filament-mcp.tests"))

    return _factory
