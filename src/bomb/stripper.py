"""Strip a leading byte-order mark from raw-decoded text."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TypeVar, overload

from bomb.signatures import SIGNATURES, BomSignature

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def decode_raw(data: bytes | bytearray | memoryview) -> str:
    """Decode *data* one byte per character.

    This is the decode :func:`trim` expects its input to have gone through:
    every byte value 0-255 becomes the character with the same code point,
    so a BOM survives as individual characters.
    """
    return bytes(data).decode("latin-1")


def _longest_match(
    data: str | bytes, candidates: Iterable[tuple[str | bytes, BomSignature]]
) -> BomSignature | None:
    """Return the longest candidate signature that *data* starts with."""
    best: BomSignature | None = None
    for marks, sig in candidates:
        if data.startswith(marks) and (best is None or len(sig) > len(best)):  # type: ignore[arg-type]
            best = sig
    return best


def find_signature(text: object) -> BomSignature | None:
    """Return the longest signature that *text* starts with, or ``None``.

    Every table entry is tested and the longest match wins, so a UTF-32-LE
    mark is never mistaken for the UTF-16-LE mark it begins with.
    Non-``str`` values never match.
    """
    if not isinstance(text, str):
        return None
    return _longest_match(text, ((sig.marks, sig) for sig in SIGNATURES))


def has_bom(text: object) -> bool:
    """Return ``True`` if *text* starts with a recognized signature."""
    return find_signature(text) is not None


@overload
def trim() -> None: ...
@overload
def trim(value: _T) -> _T: ...
def trim(value=None):
    """Remove a leading byte-order mark from *value*.

    Strings starting with a recognized signature are returned without
    exactly that signature; the remainder is not rescanned.  Any other
    string, and any value that is not a ``str`` at all (including no value),
    is returned unchanged.  Never raises.

    >>> trim("\\xef\\xbb\\xbfstring")
    'string'
    >>> trim(12)
    12
    """
    sig = find_signature(value)
    if sig is None:
        return value
    logger.debug("stripping %s byte-order mark", sig.family.value)
    return value[len(sig) :]


@overload
def trim_bytes(data: bytes | bytearray | memoryview) -> bytes: ...
@overload
def trim_bytes(data: _T) -> _T: ...
def trim_bytes(data):
    """Byte-sequence counterpart of :func:`trim`.

    ``bytes``, ``bytearray`` and ``memoryview`` input is compared against
    the raw signature bytes and returned as ``bytes``.  Other values pass
    through unchanged.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        return data
    raw = bytes(data)
    sig = _longest_match(raw, ((sig.as_bytes(), sig) for sig in SIGNATURES))
    if sig is None:
        return raw
    logger.debug("stripping %s byte-order mark", sig.family.value)
    return raw[len(sig) :]
