"""Deterministic numbers from hex digests.

Every visual engine draws its "random" parameters from these helpers.  They
only read the digest they are given, so the same arguments always produce
the same value and golden outputs stay stable.
"""

from __future__ import annotations

import hashlib
import math

# Hex digits read by value_from_hash (16 bits).
_VALUE_WIDTH = 4
_VALUE_MAX = 0xFFFF


def hex_value(digest: str, offset: int, width: int) -> int:
    """Return the integer value of ``digest[offset:offset + width]``."""
    chunk = digest[offset:offset + width]
    if len(chunk) != width:
        raise ValueError(
            f"Cannot read {width} hex digits at offset {offset} of a {len(digest)}-digit digest"
        )
    return int(chunk, 16)


def value_from_hash(digest: str, index: int, minimum: float, maximum: float) -> float:
    """Map *index* to a float in ``[minimum, maximum]``.

    Two 16-bit windows are read at prime-strided offsets and XOR-ed so that
    neighbouring indices do not share a window.
    """
    span = len(digest) - _VALUE_WIDTH
    offset1 = (index * 11) % span
    offset2 = (index * 17 + 7) % span
    value = hex_value(digest, offset1, _VALUE_WIDTH) ^ hex_value(digest, offset2, _VALUE_WIDTH)
    normalized = min(1.0, max(0.0, value / _VALUE_MAX))
    return minimum + normalized * (maximum - minimum)


def hex_stream(digest: str, length: int) -> str:
    """Return at least *length* hex digits starting with *digest*.

    Further digits come from chained SHA-256 digests of the previous block,
    so large grids never run out of bits.
    """
    stream = digest
    block = digest
    while len(stream) < length:
        block = hashlib.sha256(block.encode("ascii")).hexdigest()
        stream += block
    return stream


def hex_digit_to_bool(char: str) -> bool:
    """Half-up rounding of ``digit / 10``: digits 5 and above are truthy."""
    return math.floor(int(char, 16) / 10 + 0.5) != 0
