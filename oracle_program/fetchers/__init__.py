"""HTTP fetcher implementations."""
from .http import AiohttpFetcher

__all__ = ["AiohttpFetcher"]
