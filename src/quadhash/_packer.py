"""Digit packer: collapse a byte string into one 64-bit decimal accumulator."""

from __future__ import annotations

import logging
from typing import Union

from ._errors import QuadHashDomainError, QuadHashTypeError

logger = logging.getLogger(__name__)

MASK64: int = 0xFFFFFFFFFFFFFFFF

# (upper bound exclusive, accumulator multiplier) per byte value.
# A byte below 10 gets a 1-digit slot, below 100 a 2-digit slot, else 3 digits.
SLOT_THRESHOLDS: tuple[tuple[int, int], ...] = (
    (10, 10),
    (100, 100),
    (256, 1000),
)

Hashable = Union[str, bytes, bytearray, memoryview]


def to_bytes(text: Hashable) -> bytes:
    """Coerce input to the byte sequence that gets packed.

    Text is encoded as UTF-8; bytes-like objects are taken as is.
    """
    if isinstance(text, str):
        return text.encode("utf-8")
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    raise QuadHashTypeError(
        f"Expected str or bytes-like input, got {type(text).__name__}"
    )


def slot_multiplier(ch: int) -> int:
    """Accumulator multiplier for a byte value 0-255."""
    for bound, mult in SLOT_THRESHOLDS:
        if ch < bound:
            return mult
    raise QuadHashDomainError(f"Byte value out of range: {ch}")


def pack_digits(data: bytes) -> int:
    """Append each byte's decimal value into its own slot of the accumulator.

    Arithmetic is unsigned 64-bit with wraparound. Once the accumulator
    wraps, leading bytes are gradually shifted out of the low 64 bits.
    """
    num = 0
    wrapped = False
    for i, ch in enumerate(data):
        num = num * slot_multiplier(ch) + ch
        if num > MASK64:
            if not wrapped:
                logger.debug("Accumulator wrapped at byte %d of %d", i, len(data))
                wrapped = True
            num &= MASK64
    return num
