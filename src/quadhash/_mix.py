"""Avalanche finalizer (MurmurHash3 fmix64) over the packed and scrambled values."""

from __future__ import annotations

MASK64: int = 0xFFFFFFFFFFFFFFFF

# 2**64 / golden ratio, odd; salts the scrambled value before mixing.
GOLDEN_GAMMA: int = 0x9E3779B97F4A7C15
# MurmurHash3 64-bit finalizer multipliers (public domain).
FMIX_C1: int = 0xFF51AFD7ED558CCD
FMIX_C2: int = 0xC4CEB9FE1A85EC53


def fmix64(h: int) -> int:
    """MurmurHash3 64-bit finalizer."""
    h &= MASK64
    h ^= h >> 33
    h = (h * FMIX_C1) & MASK64
    h ^= h >> 33
    h = (h * FMIX_C2) & MASK64
    h ^= h >> 33
    return h


def mix64(packed: int, scrambled: int) -> int:
    """Combine both stage outputs into one well-mixed u64."""
    h = (packed ^ (scrambled * GOLDEN_GAMMA)) & MASK64
    return fmix64(h)
