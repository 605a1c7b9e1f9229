"""Data structures for quadhash."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Chunks:
    a: int     # leading chunk, quadratic coefficient
    b: int     # middle chunk, linear coefficient
    c: int     # trailing chunk, constant term
    div: int   # width of the middle and trailing chunks
    rem: int   # width reserved for the leading chunk (div + remainder)


@dataclass(slots=True, frozen=True)
class HashTrace:
    data: bytes
    packed: int      # u64 digit-packed accumulator
    digits: int      # decimal digits of packed (1 for zero)
    chunks: Chunks
    scrambled: int   # abs(low) * 1_000_000 + abs(high)
    mixed: int       # u64 finalizer output
    digest: str      # 16 lowercase hex characters
