"""Byte-order mark signatures recognized by :func:`bomb.trim`."""

from __future__ import annotations

import dataclasses

from bomb.enums import EncodingFamily


@dataclasses.dataclass(frozen=True, slots=True)
class BomSignature:
    """A single byte-order mark.

    *marks* holds the signature bytes decoded one byte per character
    (code points 0-255), which is how a BOM surfaces in text read through
    a raw ``latin-1`` decode.
    """

    marks: str
    family: EncodingFamily

    def __len__(self) -> int:
        return len(self.marks)

    def as_bytes(self) -> bytes:
        """Return the signature as raw bytes."""
        return self.marks.encode("latin-1")


# Ordered longest-first so UTF-32 is checked before UTF-16
# (UTF-32-LE BOM starts with the same bytes as UTF-16-LE BOM)
SIGNATURES: tuple[BomSignature, ...] = (
    BomSignature("\x00\x00\xfe\xff", EncodingFamily.UTF_32_BE),
    BomSignature("\xff\xfe\x00\x00", EncodingFamily.UTF_32_LE),
    BomSignature("\xef\xbb\xbf", EncodingFamily.UTF_8),
    BomSignature("\xfe\xff", EncodingFamily.UTF_16_BE),
    BomSignature("\xff\xfe", EncodingFamily.UTF_16_LE),
)

#: Length of the longest signature in :data:`SIGNATURES`.
MAX_SIGNATURE_LENGTH: int = max(len(sig) for sig in SIGNATURES)
