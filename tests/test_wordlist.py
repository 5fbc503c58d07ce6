"""Tests for word list loading."""
from __future__ import annotations

from pathlib import Path

import pytest

from passwdqc.errors import WordListError
from passwdqc.wordlist import DEFAULT_WORDS, load_wordlist


def test_default_words_are_lowercase() -> None:
    assert "dragon" in DEFAULT_WORDS
    assert all(word == word.lower() for word in DEFAULT_WORDS)


def test_load_wordlist(tmp_path: Path) -> None:
    path = tmp_path / "words.txt"
    path.write_text("# comment\nDragon\n\n  monkey  \ndragon\n", encoding="utf-8")
    assert load_wordlist(path) == ("dragon", "monkey")


def test_missing_wordlist(tmp_path: Path) -> None:
    with pytest.raises(WordListError):
        load_wordlist(tmp_path / "absent.txt")
