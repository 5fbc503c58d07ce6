"""Case folding and leetspeak canonicalization for substring comparison."""
from __future__ import annotations

from typing import TypeVar

AnyStr_ = TypeVar("AnyStr_", str, bytes)

# 'i' and 'l' must not share a token: translating both to '1' would make
# "mile" match "MLLE".
_LEET = {
    "a": "4",
    "@": "4",
    "e": "3",
    "i": "!",
    "|": "!",
    "l": "1",
    "o": "0",
    "s": "5",
    "$": "5",
    "t": "7",
    "+": "7",
}


def _build_table() -> dict[int, str]:
    table: dict[int, str] = {}
    for code in range(128):
        char = chr(code).lower()
        table[code] = _LEET.get(char, char)
    return table


_STR_TABLE = _build_table()
_BYTES_TABLE = bytes(ord(_STR_TABLE[code]) for code in range(128)) + bytes(range(128, 256))


def unify(value: AnyStr_) -> AnyStr_:
    """Lowercase ASCII letters and replace common leetspeak characters.

    Bytes and code points outside ASCII pass through unchanged. Every output
    character maps to itself, so ``unify(unify(s)) == unify(s)``.
    """
    if isinstance(value, bytes):
        return value.translate(_BYTES_TABLE)
    return value.translate(_STR_TABLE)
