"""Strip byte-order marks left behind by raw decoding."""

from __future__ import annotations

from bomb.enums import EncodingFamily
from bomb.signatures import MAX_SIGNATURE_LENGTH, SIGNATURES, BomSignature
from bomb.stripper import decode_raw, find_signature, has_bom, trim, trim_bytes

__version__ = "1.0.0"
__all__ = [
    "MAX_SIGNATURE_LENGTH",
    "SIGNATURES",
    "BomSignature",
    "EncodingFamily",
    "decode_raw",
    "find_signature",
    "has_bom",
    "trim",
    "trim_bytes",
]
