"""Dictionary word, keyboard sequence and birth year detection."""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from passwdqc.engine.based import MODE_REVERSED, MODE_SEQUENCE, MODE_WORD, is_based
from passwdqc.engine.unify import unify
from passwdqc.models import RejectionReason

if TYPE_CHECKING:
    from passwdqc.params import Policy

SEQUENCES: tuple[bytes, ...] = (
    b"0123456789",
    b"`1234567890-=",
    b"~!@#$%^&*()_+",
    b"abcdefghijklmnopqrstuvwxyz",
    b"a1b2c3d4e5f6g7h8i9j0",
    b"1a2b3c4d5e6f7g8h9i0j",
    b"abc123",
    b"qwertyuiop[]\\asdfghjkl;'zxcvbnm,./",
    b'qwertyuiop{}|asdfghjkl:"zxcvbnm<>?',
    b"qwertyuiopasdfghjklzxcvbnm",
    b"1qaz2wsx3edc4rfv5tgb6yhn7ujm8ik,9ol.0p;/-['=]\\",
    b'!qaz@wsx#edc$rfv%tgb^yhn&ujm*ik<(ol>)p:?_{"+}|',
    b"qazwsxedcrfvtgbyhnujmikolp",
    b"1q2w3e4r5t6y7u8i9o0p-[=]",
    b"q1w2e3r4t5y6u7i8o9p0[-]=\\",
    b"1qaz1qaz",
    b"1qaz!qaz",  # '1' and '!' stay distinct after unify()
    b"1qazzaq1",
    b"zaq!1qaz",
    b"zaq!2wsx",
)

_UNIFIED_SEQUENCES = tuple(unify(sequence) for sequence in SEQUENCES)

FIRST_BIRTH_YEAR = 1900
LAST_BIRTH_YEAR = 2039
# Years are only searched when a four digit match is enough.
_YEAR_MATCH_LIMIT = 4


def _birth_years() -> Iterable[bytes]:
    for year in range(FIRST_BIRTH_YEAR, LAST_BIRTH_YEAR + 1):
        yield str(year).encode("ascii")


def find_pattern(
    policy: Policy,
    needle: bytes,
    original: bytes,
    words: Iterable[str | bytes],
    *,
    reversed_: bool = False,
) -> RejectionReason | None:
    """Return the reason ``needle`` is pattern based, or None.

    ``needle`` is the unified password (reversed when ``reversed_``) and
    ``original`` the password as typed.  Dictionary words are tried first,
    then keyboard and alphabet sequences, then birth years.
    """
    if not policy.match:
        return None

    flag = MODE_REVERSED if reversed_ else 0

    mode = MODE_WORD | flag
    for word in words:
        if isinstance(word, str):
            word = word.encode("utf-8")
        if len(word) < policy.match:
            continue
        if is_based(policy, unify(word), needle, original, mode):
            return RejectionReason.WORD

    mode = MODE_SEQUENCE | flag
    for sequence in _UNIFIED_SEQUENCES:
        if is_based(policy, sequence, needle, original, mode):
            return RejectionReason.SEQUENCE

    if policy.match <= _YEAR_MATCH_LIMIT:
        for year in _birth_years():
            if is_based(policy, year, needle, original, mode):
                return RejectionReason.SEQUENCE
    return None


def is_pattern_based(
    policy: Policy,
    needle: bytes,
    original: bytes,
    words: Iterable[str | bytes],
    *,
    reversed_: bool = False,
) -> bool:
    """Return True if ``needle`` is based on a word, sequence or year."""
    return find_pattern(policy, needle, original, words, reversed_=reversed_) is not None
