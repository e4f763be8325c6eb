"""Pure parsing functions for the multi-asset query string — no I/O.

The task input is a comma-separated list of ``category:symbol[:quote]``
segments, e.g. ``equity:AAPL,fx:EUR,cfd:XAU:USD``.
"""
from __future__ import annotations

import logging

from ..errors import InputDecodeError, NoQueriesError
from ..models import AssetQuery

logger = logging.getLogger(__name__)


def decode_input(raw: bytes) -> str:
    """Decode the raw task input buffer as UTF-8."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InputDecodeError(f"Input is not valid UTF-8: {e}") from e


def split_queries(raw: str) -> list[str]:
    """Split the input into trimmed, non-empty query segments.

    Raises:
        NoQueriesError: if no segment is left.
    """
    segments = [s.strip() for s in raw.split(",")]
    segments = [s for s in segments if s]
    if not segments:
        raise NoQueriesError("No asset queries provided")
    return segments


def parse_query(segment: str) -> AssetQuery | None:
    """Parse one ``category:symbol[:quote]`` segment.

    Returns None (and logs a warning) for malformed segments.

    Examples:
        "fx:EUR"      → AssetQuery("fx", "EUR")
        "cfd:XAU:USD" → AssetQuery("cfd", "XAU", "USD")
    """
    parts = segment.split(":")
    if len(parts) < 2:
        logger.warning("Invalid input format for query: %s", segment)
        return None

    category, symbol = parts[0], parts[1]
    if not category or not symbol:
        logger.warning("Query is missing a category or symbol: %s", segment)
        return None

    quote_currency = parts[2] if len(parts) > 2 and parts[2] else None
    return AssetQuery(category=category, symbol=symbol, quote_currency=quote_currency)
