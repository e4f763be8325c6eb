"""Canonical result encoding.

The encoded bytes are compared across executors, so ordering and formatting
must be fully deterministic: results sorted by symbol, compact separators.
"""
from __future__ import annotations

import json
import math
from collections.abc import Iterable
from typing import Any

from ..models import PriceResult


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def loads_strict(body: bytes) -> Any:
    """Decode JSON, rejecting NaN and Infinity which cannot be re-encoded as JSON."""
    return json.loads(body, parse_constant=_reject_constant)


def assemble_results(results: Iterable[PriceResult]) -> list[PriceResult]:
    """Sort results ascending by symbol key."""
    return sorted(results, key=lambda r: r.symbol_key)


def encode_results(results: Iterable[PriceResult]) -> bytes:
    """Encode results as a compact JSON array of ``{"symbol", "price"}`` objects."""
    items = [{"symbol": r.symbol_key, "price": r.price} for r in results]
    return json.dumps(
        items, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


def decode_results(body: bytes) -> list[PriceResult]:
    """Decode a canonical result array.

    Raises:
        ValueError: if the body is not a JSON array of objects that each hold
            a string ``symbol`` and a finite numeric ``price``.
    """
    # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
    items = loads_strict(body)
    if not isinstance(items, list):
        raise ValueError(f"Expected a JSON array, got {type(items).__name__}")

    results: list[PriceResult] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Element {index} is not an object")
        symbol = item.get("symbol")
        price = item.get("price")
        if not isinstance(symbol, str):
            raise ValueError(f"Element {index} has no string 'symbol'")
        if isinstance(price, bool) or not isinstance(price, (int, float)):
            raise ValueError(f"Element {index} has no numeric 'price'")
        try:
            value = float(price)
        except OverflowError as e:
            raise ValueError(f"Element {index} price is out of range") from e
        if not math.isfinite(value):
            raise ValueError(f"Element {index} price is not finite")
        results.append(PriceResult(symbol_key=symbol, price=value))
    return results
