"""Expected number of different characters in a random password."""
from __future__ import annotations

FIXED_BITS = 15
_ONE = 1 << FIXED_BITS


def expected_different(charset: int, length: int) -> int:
    """Estimate the distinct characters of a random ``length`` password.

    The password is assumed to be drawn uniformly from ``charset`` symbols.
    The estimate is ``charset * (1 - ((charset - 1) / charset) ** length)``
    computed in 15-bit fixed point and rounded down, reproducing the
    truncation of the reference integer arithmetic exactly.  It is meant to
    be called with the *requested* minimum length, so that longer passwords
    need not meet this bar for their own length.
    """
    if length <= 0 or charset <= 0:
        return 0

    x = ((charset - 1) << FIXED_BITS) // charset
    y = x
    length -= 1
    # y only shrinks; once it reaches zero further rounds change nothing,
    # which keeps huge (disabled) lengths cheap.
    while length > 0 and y:
        y = (y * x) >> FIXED_BITS
        length -= 1
    z = charset * (_ONE - y)
    return z >> FIXED_BITS
