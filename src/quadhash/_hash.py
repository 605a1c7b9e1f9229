"""quadhash: digit packing, quadratic scrambling, fmix64, hex digest."""

from __future__ import annotations

import re
from collections.abc import Iterable

from ._digits import digit_count
from ._errors import QuadHashDomainError
from ._mix import MASK64, mix64
from ._packer import Hashable, pack_digits, to_bytes
from ._quadratic import quadratic_roots, split_chunks
from ._types import HashTrace

DIGEST_WIDTH: int = 16

_DIGEST_RE = re.compile(r"[0-9a-f]{16}")


def format_digest(value: int) -> str:
    """Render a u64 as 16 zero-padded lowercase hex characters."""
    if not 0 <= value <= MASK64:
        raise QuadHashDomainError(f"Digest value out of u64 range: {value}")
    return f"{value:0{DIGEST_WIDTH}x}"


def parse_digest(digest: str) -> int:
    """Inverse of format_digest."""
    if not _DIGEST_RE.fullmatch(digest):
        raise QuadHashDomainError(f"Not a 16-character lowercase hex digest: {digest!r}")
    return int(digest, 16)


def quadhash_trace(text: Hashable) -> HashTrace:
    """Run every stage and keep the intermediate values."""
    data = to_bytes(text)
    packed = pack_digits(data)
    digits = digit_count(packed)
    chunks = split_chunks(packed, digits)
    scrambled = quadratic_roots(chunks.a, chunks.b, chunks.c)
    mixed = mix64(packed, scrambled)
    return HashTrace(
        data=data,
        packed=packed,
        digits=digits,
        chunks=chunks,
        scrambled=scrambled,
        mixed=mixed,
        digest=format_digest(mixed),
    )


def quadhash_u64(text: Hashable) -> int:
    """64-bit fingerprint of text (str is hashed as UTF-8 bytes)."""
    data = to_bytes(text)
    packed = pack_digits(data)
    chunks = split_chunks(packed)
    return mix64(packed, quadratic_roots(chunks.a, chunks.b, chunks.c))


def quadhash(text: Hashable) -> str:
    """16-character lowercase hex fingerprint of text.

    Non-cryptographic: fine for cache keys and dedup tags, not for anything
    an adversary can choose inputs for.
    """
    return format_digest(quadhash_u64(text))


def quadhash_batch(texts: Iterable[Hashable]) -> list[str]:
    """Hash multiple texts."""
    return [quadhash(t) for t in texts]
