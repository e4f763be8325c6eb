"""Derive a single price from a data-source response (no I/O).

Responses come in one of two shapes::

    {"Trade": {"<key>": {"price": 1.0821}}}
    {"Quote": {"<key>": {"bidPrice": 1950.1, "askPrice": 1950.5}}}

``Trade`` takes precedence when present; ``Quote`` prices are the bid/ask
midpoint, or whichever side is available.
"""
from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..models import FetchResponse
from .assembler import loads_strict

logger = logging.getLogger(__name__)

PRICE_DECIMALS = 2


def decode_payload(body: bytes) -> Any | None:
    """Decode a JSON response body, returning None if it is not valid JSON."""
    try:
        return loads_strict(body)
    except ValueError as e:
        logger.debug("JSON decode failed: %s", e)
        return None


def _field(node: Any, key: str) -> Any | None:
    """Look up ``key`` in a JSON object; None if node is not an object or key is absent."""
    if not isinstance(node, dict):
        return None
    return node.get(key)


def _number(node: Any, key: str) -> float | None:
    """Read a finite numeric field; booleans and strings do not count as numbers."""
    value = _field(node, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except OverflowError:
        return None
    return number if math.isfinite(number) else None


def _trade_price(trade: Any, key: str) -> float | None:
    return _number(_field(trade, key), "price")


def _quote_price(quote: Any, key: str) -> float | None:
    entry = _field(quote, key)
    bid = _number(entry, "bidPrice")
    ask = _number(entry, "askPrice")
    if bid is not None and ask is not None:
        return (bid + ask) / 2
    if bid is not None:
        return bid
    return ask


def derive_price(payload: Any, expected_key: str) -> float | None:
    """Derive the unrounded price for ``expected_key``.

    A ``Trade`` section wins even if it has no entry for the key; ``Quote``
    is only consulted when there is no ``Trade`` section at all.
    """
    if not isinstance(payload, dict):
        return None
    if "Trade" in payload:
        return _trade_price(payload["Trade"], expected_key)
    if "Quote" in payload:
        return _quote_price(payload["Quote"], expected_key)
    return None


def round_price(value: float, places: int = PRICE_DECIMALS) -> float:
    """Round to ``places`` decimals, halves away from zero.

    The value is scaled as a float first and the exact binary value of the
    scaled float is rounded, so every executor agrees on the result:
    ``round_price(0.125) == 0.13`` whereas ``round(0.125, 2) == 0.12``.
    """
    scale = 10**places
    scaled = value * scale
    # From 2**52 up every float is already integral.
    if not math.isfinite(scaled) or abs(scaled) >= 2**52:
        return scaled / scale
    rounded = Decimal(scaled).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return float(rounded) / scale


def interpret_response(response: FetchResponse, expected_key: str) -> float | None:
    """Turn a fetch response into a rounded price, or None to skip the query."""
    if not response.ok:
        logger.warning(
            "HTTP Response was rejected: %s - %s",
            response.status,
            response.body.decode("utf-8", errors="replace"),
        )
        return None

    logger.debug(
        "Raw response bytes: %s", response.body.decode("utf-8", errors="replace")
    )

    payload = decode_payload(response.body)
    if payload is None:
        logger.warning("Failed to parse JSON response for key %s", expected_key)
        return None

    price = derive_price(payload, expected_key)
    if price is None:
        logger.warning("No price found for key %s", expected_key)
        return None

    rounded = round_price(price)
    if not math.isfinite(rounded):
        logger.warning("Price for key %s is not finite: %s", expected_key, price)
        return None

    return rounded
