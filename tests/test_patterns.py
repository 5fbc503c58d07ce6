"""Tests for dictionary word, sequence and birth year detection."""
from __future__ import annotations

from passwdqc.engine.patterns import SEQUENCES, find_pattern, is_pattern_based
from passwdqc.engine.unify import unify
from passwdqc.models import RejectionReason
from passwdqc.params import Policy


def _find(original: bytes, words: list[str], policy: Policy | None = None, reversed_: bool = False):
    needle = unify(original)
    if reversed_:
        needle = needle[::-1]
    return find_pattern(policy or Policy(), needle, original, words, reversed_=reversed_)


def test_sequence_table_is_fixed() -> None:
    assert len(SEQUENCES) == 20
    assert SEQUENCES[0] == b"0123456789"


def test_dictionary_word_is_reported_first() -> None:
    assert _find(b"Dr4g0n123", ["dragon"]) is RejectionReason.WORD


def test_words_are_unified_before_matching() -> None:
    assert _find(b"Dr4g0n123", ["DRAGON"]) is RejectionReason.WORD


def test_short_words_are_skipped() -> None:
    assert _find(b"Dr4g0n123", ["dra", "gon"]) is None


def test_keyboard_sequence() -> None:
    assert _find(b"Qwerty#7z", []) is RejectionReason.SEQUENCE


def test_birth_year() -> None:
    assert _find(b"Zb#1987", []) is RejectionReason.SEQUENCE


def test_birth_years_skipped_for_longer_matches() -> None:
    assert _find(b"Zb#1987", [], policy=Policy().with_match(5)) is None


def test_disabled_match_finds_nothing() -> None:
    assert _find(b"Qwerty#7z", ["qwerty"], policy=Policy().with_match(0)) is None


def test_is_pattern_based_wraps_find_pattern() -> None:
    assert is_pattern_based(Policy(), unify(b"Qwerty#7z"), b"Qwerty#7z", [])
    assert is_pattern_based(Policy(), unify(b"Zb#1987"), b"Zb#1987", [], reversed_=True)
    reversed_needle = unify(b"hX7#pQ2m!!")[::-1]
    assert not is_pattern_based(Policy(), reversed_needle, b"hX7#pQ2m!!", [], reversed_=True)
