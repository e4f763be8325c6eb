"""Query parsing and request building."""
from .parser import decode_input, parse_query, split_queries
from .request_builder import SUPPORTED_CATEGORIES, build_request, expected_key, url_symbol

__all__ = [
    "SUPPORTED_CATEGORIES",
    "build_request",
    "decode_input",
    "expected_key",
    "parse_query",
    "split_queries",
    "url_symbol",
]
