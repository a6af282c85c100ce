"""Enumerations for bomb."""

import enum


class EncodingFamily(enum.Enum):
    """Unicode encoding family a byte-order mark belongs to.

    Values are Python codec names.  The family is a label only; matching
    never depends on it.
    """

    UTF_8 = "utf-8"
    UTF_16_BE = "utf-16-be"
    UTF_16_LE = "utf-16-le"
    UTF_32_BE = "utf-32-be"
    UTF_32_LE = "utf-32-le"
