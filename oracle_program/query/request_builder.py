"""Map asset queries to data-source requests.

The source uses one symbol convention in the request URL and another in the
response body, so the URL symbol and the expected response key are derived
from two separate tables.
"""
from __future__ import annotations

import logging

from ..models import AssetQuery, RequestDescriptor

logger = logging.getLogger(__name__)

# Request symbol per category.
_URL_SYMBOL_FORMATS: dict[str, str] = {
    "equity": "{symbol}USD",
    "uslf_q": "{symbol}USD",
    "uslf_t": "{symbol}USD",
    "fx": "{symbol}USD",
    "fx_r": "USD{symbol}",
    "cfd": "{symbol}{quote}",
}

# Response key per category; categories not listed use the bare symbol.
_EXPECTED_KEY_FORMATS: dict[str, str] = {
    "fx": "{symbol}/USD",
    "fx_r": "USD/{symbol}",
    "cfd": "{symbol}/{quote}:BFX",
    "uslf_q": "{symbol}:USLF24",
}

_QUOTED_CATEGORIES = frozenset({"cfd"})

SUPPORTED_CATEGORIES = frozenset(_URL_SYMBOL_FORMATS)


def url_symbol(query: AssetQuery) -> str | None:
    """Return the symbol parameter for the request URL, or None if unbuildable."""
    fmt = _URL_SYMBOL_FORMATS.get(query.category)
    if fmt is None:
        logger.warning("Invalid data type: %s", query.category)
        return None

    if query.category in _QUOTED_CATEGORIES and not query.quote_currency:
        logger.warning(
            "%s requires both asset and quote currency: %s:ASSET:QUOTE",
            query.category.upper(),
            query.category,
        )
        return None

    return fmt.format(symbol=query.symbol, quote=query.quote_currency)


def expected_key(query: AssetQuery) -> str:
    """Return the key under which the response carries this query's data."""
    fmt = _EXPECTED_KEY_FORMATS.get(query.category)
    if fmt is None:
        return query.symbol
    if query.category in _QUOTED_CATEGORIES and not query.quote_currency:
        return query.symbol
    return fmt.format(symbol=query.symbol, quote=query.quote_currency)


def build_request(query: AssetQuery, base_url: str) -> RequestDescriptor | None:
    """Build the request descriptor for a query, or None to skip it."""
    symbol_param = url_symbol(query)
    if symbol_param is None:
        return None
    return RequestDescriptor(
        url=f"{base_url}?symbol={symbol_param}",
        expected_key=expected_key(query),
    )
