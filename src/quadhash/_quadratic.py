"""Quadratic scrambler: fold the roots of a digit-chunk quadratic into one int.

The packed integer's decimal digits are cut into three chunks that become
the coefficients of ``a*x**2 + b*x + c = 0``. The two roots (real, or the
real and imaginary parts of a complex pair) are made non-negative and packed
as ``low * ROOT_PACK_BASE + high``. All divisions truncate toward zero.
"""

from __future__ import annotations

import logging

from ._digits import digit_count, div_trunc, isqrt, pow10
from ._types import Chunks

logger = logging.getLogger(__name__)

ROOT_PACK_BASE: int = 1_000_000


def split_widths(digits: int) -> tuple[int, int]:
    """Return (div, rem) with rem + 2*div == digits and rem >= div."""
    div = digits // 3
    rem = digits - 2 * div  # leading chunk absorbs the remainder
    return div, rem


def split_chunks(num: int, digits: int | None = None) -> Chunks:
    """Cut num into leading, middle and trailing decimal chunks."""
    if digits is None:
        digits = digit_count(num)
    div, rem = split_widths(digits)
    p1 = pow10(div)
    p2 = pow10(div + rem)
    return Chunks(
        a=num // p2,
        b=(num // p1) % p1,
        c=num % p1,
        div=div,
        rem=rem,
    )


def _linear_root(b: int, c: int) -> tuple[int, int]:
    # a == 0: b*x + c = 0, or nothing to solve when b is zero as well.
    if b == 0:
        return 0, 0
    return div_trunc(-c, b), 0


def quadratic_roots(a: int, b: int, c: int) -> int:
    """Pack the roots of a*x**2 + b*x + c into a non-negative integer.

    Complex roots contribute (real part, imaginary part); real roots
    contribute (smaller, larger). A zero leading coefficient falls back to
    the linear equation.
    """
    if a == 0:
        logger.debug("Degenerate quadratic a=0 (b=%d, c=%d)", b, c)
        low, high = _linear_root(b, c)
    else:
        discriminant = b * b - 4 * a * c
        base = div_trunc(-b, 2 * a)
        if discriminant < 0:
            low = base
            high = isqrt(-discriminant)
        else:
            spread = div_trunc(isqrt(discriminant), 2 * a)
            low, high = sorted((base + spread, base - spread))
    return abs(low) * ROOT_PACK_BASE + abs(high)


def quadratic_division(num: int, digits: int | None = None) -> int:
    """Scramble a packed integer through the quadratic gadget."""
    chunks = split_chunks(num, digits)
    return quadratic_roots(chunks.a, chunks.b, chunks.c)
