"""aiohttp-backed HTTP fetcher."""
import asyncio
import logging
import ssl

import aiohttp
import certifi

from ..config import DataSourceConfig
from ..models import FetchResponse

logger = logging.getLogger(__name__)


class AiohttpFetcher:
    """Fetch URLs over HTTPS; transport failures become non-ok responses."""

    def __init__(self, config: DataSourceConfig) -> None:
        self.timeout = config.timeout_seconds
        self.default_headers = dict(config.headers)

    async def fetch(self, url: str, headers: dict[str, str] | None = None) -> FetchResponse:
        """GET ``url`` and return status and body."""
        request_headers = {**self.default_headers, **(headers or {})}

        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.get(
                    url,
                    headers=request_headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    body = await response.read()
                    return FetchResponse(
                        ok=200 <= response.status < 300,
                        status=response.status,
                        body=body,
                    )
        except (aiohttp.ClientError, asyncio.TimeoutError, OSError) as e:
            logger.error("Error fetching %s: %s", url, e)
            return FetchResponse(ok=False, status=0, body=str(e).encode("utf-8"))
