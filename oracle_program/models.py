"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class AssetQuery:
    """One parsed ``category:symbol[:quote]`` segment of the task input."""

    category: str
    symbol: str
    quote_currency: str | None = None


@dataclass(frozen=True)
class RequestDescriptor:
    """Where to fetch a query from and which response key holds its data."""

    url: str
    expected_key: str


@dataclass(frozen=True)
class PriceResult:
    """Single derived price, keyed by the response symbol it was read from."""

    symbol_key: str
    price: float


@dataclass(frozen=True)
class FetchResponse:
    """Transport-level result of one HTTP fetch."""

    ok: bool
    status: int
    body: bytes = b""


@dataclass(frozen=True)
class RevealRecord:
    """Raw result payload revealed by one executor."""

    body: bytes


@dataclass(frozen=True)
class DecodedReveal:
    """Reveal that decoded as a result array."""

    results: tuple[PriceResult, ...]


@dataclass(frozen=True)
class UndecodableReveal:
    """Reveal that could not be decoded, with the reason."""

    reason: str


RevealOutcome = Union[DecodedReveal, UndecodableReveal]
