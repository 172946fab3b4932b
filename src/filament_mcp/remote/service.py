"""Remote field reference lookup: cache, fetch, parse, extract."""

import logging
from threading import Lock

import httpx

from filament_mcp.config import RemoteConfig, get_remote_config
from filament_mcp.errors import DocsError, InvalidArgumentError
from filament_mcp.remote.cache import FieldCache
from filament_mcp.remote.extractor import extract_field_record
from filament_mcp.remote.fetcher import PageFetcher, build_http_client
from filament_mcp.remote.models import FieldRecord
from filament_mcp.utils import normalize_subject


class FieldReferenceService:
    """Resolves a form field name to a FieldRecord, caching successes."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        config: RemoteConfig,
        logger: logging.Logger,
        cache: FieldCache | None = None,
    ) -> None:
        self.client = client
        self.config = config
        self.logger = logger
        self.cache = cache if cache is not None else FieldCache()
        self.fetcher = PageFetcher(client, config, logger)

    async def get_field(self, field_name: str) -> FieldRecord:
        if not isinstance(field_name, str):
            raise InvalidArgumentError("Field name is required and must be a string")
        subject = normalize_subject(field_name)
        if not subject:
            raise InvalidArgumentError("Field name is required and must be a string")
        if not subject.isprintable():
            raise InvalidArgumentError(
                "Field name must not contain control characters",
                details={"field_name": field_name},
            )

        cached = self.cache.get(subject)
        if cached is not None:
            self.logger.debug("Cache hit for field %s", subject)
            return cached

        url = self.fetcher.url_for(subject)
        try:
            html = await self.fetcher.fetch(url)
        except DocsError as exc:
            self.logger.error(
                "Fetching details for field %r failed (%s): %s",
                subject,
                exc.code,
                exc.message,
            )
            raise

        record = extract_field_record(html, subject, url)
        self.cache.put(subject, record)
        self.logger.info(
            "Extracted field %s: %d properties, %d examples",
            subject,
            len(record.properties or ()),
            len(record.examples or ()),
        )
        return record

    async def aclose(self) -> None:
        await self.client.aclose()


_service: FieldReferenceService | None = None
_service_lock = Lock()


def get_field_service() -> FieldReferenceService:
    """Return the shared service instance with lazy initialization."""
    global _service
    with _service_lock:
        if _service is None:
            config = get_remote_config()
            _service = FieldReferenceService(
                client=build_http_client(config),
                config=config,
                logger=logging.getLogger("filament-mcp.remote"),
            )
        return _service


async def close_field_service() -> None:
    """Close the shared service's HTTP client."""
    global _service
    with _service_lock:
        if _service is None:
            return
        service = _service
        _service = None
    await service.aclose()
