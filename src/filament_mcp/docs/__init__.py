"""Local documentation access.

Components:
    - DocumentationStore: list/read/search one Markdown documentation tree
    - FilamentCatalog: package discovery and ranked search for Filament docs
    - get_store / get_filament_catalog: per-directory shared instances
"""

from pathlib import Path
from threading import Lock
from typing import Dict

from filament_mcp.config import get_docs_config
from filament_mcp.docs.filament import DocFile, DocPackage, DocSearchResult, FilamentCatalog
from filament_mcp.docs.store import DocumentationStore

_stores: Dict[Path, DocumentationStore] = {}
_catalogs: Dict[Path, FilamentCatalog] = {}
_lock = Lock()


def get_store(base_dir: Path) -> DocumentationStore:
    """Return the shared store for `base_dir`, so its content cache is reused."""
    key = Path(base_dir).resolve()
    with _lock:
        store = _stores.get(key)
        if store is None:
            store = DocumentationStore(key)
            _stores[key] = store
        return store


def get_filament_catalog() -> FilamentCatalog:
    base_dir = get_docs_config().filament_dir.resolve()
    store = get_store(base_dir)
    with _lock:
        catalog = _catalogs.get(base_dir)
        if catalog is None:
            catalog = FilamentCatalog(store)
            _catalogs[base_dir] = catalog
        return catalog


__all__ = [
    "DocFile",
    "DocPackage",
    "DocSearchResult",
    "DocumentationStore",
    "FilamentCatalog",
    "get_filament_catalog",
    "get_store",
]
