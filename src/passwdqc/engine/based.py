"""Detection of passwords based on another string via common substrings."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from passwdqc.engine.simple import is_alpha, is_simple

if TYPE_CHECKING:
    from passwdqc.params import Policy

# Low byte of ``mode``: what to do with a common substring.
MODE_REMOVE = 0x0000
MODE_WORD = 0x0001
MODE_SEQUENCE = 0x0002
# ``needle`` is the reversed form of ``original``.
MODE_REVERSED = 0x0100

_KIND_MASK = 0x00FF


class Step(enum.Enum):
    """Outcome of testing one substring of the needle against the haystack."""

    NEXT_LENGTH = "next-length"
    NEXT_OFFSET = "next-offset"
    MATCHED = "matched"


def _span(length: int, start: int, size: int, reversed_: bool) -> tuple[int, int]:
    """Map ``needle[start:start + size]`` onto positions in the original."""
    if reversed_:
        return length - (start + size), length - start
    return start, start + size


def _remove_step(policy: Policy, original: bytes, length: int, start: int, size: int, mode: int) -> Step:
    pos, end = _span(length, start, size, bool(mode & MODE_REVERSED))
    remainder = original[:pos] + original[end:]
    # Credit the removed substring with match - 1 characters.
    bias = policy.match - 1
    if is_simple(policy, remainder, bias, bias):
        return Step.MATCHED
    return Step.NEXT_LENGTH if bias else Step.NEXT_OFFSET


def _discount(policy: Policy, original: bytes, length: int, start: int, size: int, mode: int) -> int | None:
    """Return the length discount for a match, or None to skip this length.

    Substrings containing anything but letters need a one character longer
    match against dictionary words, as they are likely leetspeak.
    """
    bias = -1
    if mode & _KIND_MASK == MODE_WORD:
        pos, end = _span(length, start, size, bool(mode & MODE_REVERSED))
        if not all(is_alpha(byte) for byte in original[pos:end]):
            if size == policy.match:
                return None
            bias = 0
    return bias + policy.match - size


def is_based(
    policy: Policy,
    haystack: bytes,
    needle: bytes,
    original: bytes,
    mode: int = MODE_REMOVE,
) -> bool:
    """Return True if ``needle`` is based on ``haystack``.

    Both ``haystack`` and ``needle`` are unified; ``original`` is the password
    as typed (``needle`` before unification, possibly reversed as flagged by
    ``MODE_REVERSED``).  The needle is based on the haystack when they share a
    substring of at least ``policy.match`` characters and the original would
    be too simple with that substring either removed (``MODE_REMOVE``, with
    ``match - 1`` characters of length credit) or discounted from its length
    (``MODE_WORD`` and ``MODE_SEQUENCE``).
    """
    match = policy.match
    if not match:
        return False
    if match < 0:
        return True

    length = len(needle)
    kind = mode & _KIND_MASK
    worst_bias = 0

    for start in range(length - match + 1):
        for size in range(match, length - start + 1):
            if needle[start:start + size] not in haystack:
                # No match at this length means none at any longer length.
                break

            if kind == MODE_REMOVE:
                step = _remove_step(policy, original, length, start, size, mode)
            else:
                bias = _discount(policy, original, length, start, size, mode)
                step = Step.NEXT_LENGTH
                if bias is not None and bias < worst_bias:
                    passphrase_bias = 0 if kind == MODE_WORD else bias
                    if is_simple(policy, original, bias, passphrase_bias):
                        step = Step.MATCHED
                    worst_bias = bias

            if step is Step.MATCHED:
                return True
            if step is Step.NEXT_OFFSET:
                break
    return False
