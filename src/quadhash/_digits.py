"""Integer helpers: decimal digit count, powers of ten, integer square root."""

from __future__ import annotations

from ._errors import QuadHashDomainError


def digit_count(num: int) -> int:
    """Number of decimal digits in a non-negative integer (1 for zero)."""
    if num < 0:
        raise QuadHashDomainError(f"digit_count expects num >= 0, got {num}")
    return len(str(num))


def pow10(n: int) -> int:
    if n < 0:
        raise QuadHashDomainError(f"pow10 expects n >= 0, got {n}")
    return 10 ** n


def isqrt(n: int) -> int:
    """Floor of the square root of n, by Newton's method on integers.

    Starts from x = n and stops once the next estimate no longer decreases.
    Zero is returned directly so the loop never divides by x = 0.
    """
    if n < 0:
        raise QuadHashDomainError(f"isqrt expects n >= 0, got {n}")
    if n == 0:
        return 0
    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def div_trunc(n: int, d: int) -> int:
    """Integer division rounding toward zero.

    Python's ``//`` floors; the scrambler needs truncation so that
    ``-7 / 4`` is ``-1``, not ``-2``.
    """
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q
