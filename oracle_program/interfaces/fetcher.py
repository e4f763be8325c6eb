"""HTTP fetcher protocol — network transport abstraction."""
from __future__ import annotations

from typing import Protocol

from ..models import FetchResponse


class HttpFetcher(Protocol):
    """Abstract interface for fetching a URL.

    Implementations never raise for transport problems; they return a
    response with ``ok=False`` instead.
    """

    async def fetch(
        self, url: str, headers: dict[str, str] | None = None
    ) -> FetchResponse: ...
