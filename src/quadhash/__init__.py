"""quadhash: deterministic, non-cryptographic 64-bit text fingerprints."""

from __future__ import annotations

import logging

from ._digits import digit_count, isqrt, pow10
from ._errors import QuadHashDomainError, QuadHashError, QuadHashTypeError
from ._hash import (
    format_digest,
    parse_digest,
    quadhash,
    quadhash_batch,
    quadhash_trace,
    quadhash_u64,
)
from ._mix import fmix64, mix64
from ._packer import pack_digits
from ._quadratic import quadratic_division, quadratic_roots, split_chunks, split_widths
from ._types import Chunks, HashTrace

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "quadhash",
    "quadhash_batch",
    "quadhash_trace",
    "quadhash_u64",
    "Chunks",
    "HashTrace",
    "QuadHashDomainError",
    "QuadHashError",
    "QuadHashTypeError",
    "digit_count",
    "fmix64",
    "format_digest",
    "isqrt",
    "mix64",
    "pack_digits",
    "parse_digest",
    "pow10",
    "quadratic_division",
    "quadratic_roots",
    "split_chunks",
    "split_widths",
]
