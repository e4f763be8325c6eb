"""Price derivation and result encoding."""
from .assembler import assemble_results, decode_results, encode_results
from .interpreter import decode_payload, derive_price, interpret_response, round_price

__all__ = [
    "assemble_results",
    "decode_payload",
    "decode_results",
    "derive_price",
    "encode_results",
    "interpret_response",
    "round_price",
]
