"""Remote Filament field reference extraction.

Components:
    - FieldReferenceService: cache-first lookup of a form field page
    - PageFetcher: single-attempt HTTP retrieval with error classification
    - extract_field_record: heuristic extraction over the parsed page
"""

from filament_mcp.remote.cache import FieldCache
from filament_mcp.remote.extractor import extract_field_record
from filament_mcp.remote.fetcher import PageFetcher, build_http_client
from filament_mcp.remote.models import ExampleEntry, FieldRecord, PropertyEntry
from filament_mcp.remote.service import FieldReferenceService

__all__ = [
    "ExampleEntry",
    "FieldCache",
    "FieldRecord",
    "FieldReferenceService",
    "PageFetcher",
    "PropertyEntry",
    "build_http_client",
    "extract_field_record",
]
