"""Runtime configuration for Filament MCP server."""

from dataclasses import dataclass
from pathlib import Path
import os
import tempfile

from filament_mcp import __version__

# Repository-level data directory holding the bundled Markdown trees
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class DocsConfig:
    data_dir: Path

    @property
    def filament_dir(self) -> Path:
        return self.data_dir / "filament-docs"

    @property
    def laravel_dir(self) -> Path:
        return self.data_dir / "laravel-docs"

    @property
    def livewire_dir(self) -> Path:
        return self.data_dir / "livewire-docs"


@dataclass(frozen=True)
class RemoteConfig:
    base_url: str
    field_path: str
    timeout_s: float
    user_agent: str

    def field_url(self, subject: str) -> str:
        return f"{self.base_url}/{self.field_path}/{subject}"


@dataclass(frozen=True)
class LogConfig:
    enabled: bool
    file_path: Path
    max_bytes: int
    level: str


def get_docs_config() -> DocsConfig:
    """Load local documentation paths from environment variables."""
    data_dir = os.getenv("FILAMENT_MCP_DATA_DIR")
    return DocsConfig(data_dir=Path(data_dir) if data_dir else _DEFAULT_DATA_DIR)


def get_remote_config() -> RemoteConfig:
    """Load remote documentation site settings from environment variables."""
    return RemoteConfig(
        base_url=os.getenv("FILAMENT_MCP_DOCS_URL", "https://filamentphp.com/docs/3.x").rstrip("/"),
        field_path="forms/fields",
        timeout_s=max(1.0, _env_float("FILAMENT_MCP_TIMEOUT_S", 15.0)),
        user_agent=f"Mozilla/5.0 (compatible; FilamentMcpServer/{__version__})",
    )


def get_log_config() -> LogConfig:
    """Load logging settings from environment variables."""
    file_path = os.getenv("FILAMENT_MCP_LOG_FILE")
    return LogConfig(
        enabled=_env_bool("FILAMENT_MCP_LOG_ENABLED", True),
        file_path=Path(file_path) if file_path else Path(tempfile.gettempdir()) / "filament-mcp-server.log",
        max_bytes=max(1024, _env_int("FILAMENT_MCP_LOG_MAX_BYTES", 5 * 1024 * 1024)),
        level=os.getenv("FILAMENT_MCP_LOG_LEVEL", "INFO").upper(),
    )
