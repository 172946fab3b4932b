"""HTTP retrieval of documentation pages with failure classification."""

import logging

import httpx

from filament_mcp.config import RemoteConfig
from filament_mcp.errors import FetchFailedError, InvalidArgumentError, NotFoundError


def build_http_client(config: RemoteConfig, **kwargs) -> httpx.AsyncClient:
    """Create the shared AsyncClient used for documentation pages."""
    return httpx.AsyncClient(
        timeout=config.timeout_s,
        follow_redirects=True,
        headers={"User-Agent": config.user_agent},
        **kwargs,
    )


class PageFetcher:
    """Single-attempt page fetcher. Retrying is left to the caller."""

    def __init__(self, client: httpx.AsyncClient, config: RemoteConfig, logger: logging.Logger) -> None:
        self.client = client
        self.config = config
        self.logger = logger

    def url_for(self, subject: str) -> str:
        return self.config.field_url(subject)

    async def fetch(self, url: str) -> str:
        """Return the page markup or raise NotFoundError, FetchFailedError or InvalidArgumentError."""
        try:
            response = await self.client.get(url, timeout=self.config.timeout_s)
        except httpx.InvalidURL as exc:
            raise InvalidArgumentError(f"Cannot build a request URL: {exc}", details={"url": url}) from exc
        except httpx.TimeoutException as exc:
            self.logger.warning("Timed out fetching %s after %.1fs", url, self.config.timeout_s)
            raise FetchFailedError(
                f"Request timed out after {self.config.timeout_s:.0f}s: {str(exc) or type(exc).__name__}",
                details={"url": url},
            ) from exc
        except httpx.HTTPError as exc:
            self.logger.warning("Network error fetching %s: %s", url, exc)
            raise FetchFailedError(str(exc) or type(exc).__name__, details={"url": url}) from exc

        status = response.status_code
        if status == 404:
            raise NotFoundError(f"Resource not found (404): {url}", details={"url": url})
        if not response.is_success:
            raise FetchFailedError(
                f"Unexpected HTTP status {status}",
                status=status,
                details={"url": url},
            )
        return response.text
