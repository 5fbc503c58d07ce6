"""Word corpora used for dictionary based rejection."""
from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

from passwdqc.errors import WordListError

logger = logging.getLogger(__name__)


class WordCorpus(Protocol):
    """Any re-iterable source of lowercase words."""

    def __iter__(self) -> Iterator[str]: ...


# Common English words and frequently chosen password bases.
DEFAULT_WORDS: tuple[str, ...] = (
    "access", "account", "admin", "administrator", "angel", "animal", "apple",
    "april", "august", "autumn", "baby", "banana", "baseball", "basketball",
    "batman", "beach", "bear", "beauty", "bird", "birthday", "black", "blessed",
    "blue", "brandon", "brother", "buster", "butter", "butterfly", "charlie",
    "cheese", "chelsea", "chicken", "chocolate", "christmas", "computer",
    "cookie", "corvette", "cowboy", "dakota", "dallas", "daniel", "december",
    "diamond", "doctor", "dolphin", "donald", "dragon", "dream", "eagle",
    "england", "enter", "family", "father", "february", "ferrari", "flower",
    "football", "forever", "freedom", "friday", "friend", "garden", "george",
    "ginger", "golden", "golf", "google", "green", "guitar", "hammer", "happy",
    "harley", "heart", "heaven", "hello", "hockey", "honey", "horse", "house",
    "hunter", "iloveyou", "internet", "january", "jennifer", "jesus", "jordan",
    "joshua", "july", "june", "killer", "knight", "letmein", "liberty", "lion",
    "london", "love", "lovely", "lucky", "maggie", "march", "master", "matrix",
    "maverick", "mercedes", "merlin", "michael", "michelle", "mickey", "money",
    "monday", "monkey", "monster", "morgan", "mother", "mustang", "orange",
    "november", "october", "oliver", "parker", "passport", "password",
    "pepper", "phoenix", "pirate", "player", "princess", "purple", "qwerty",
    "rabbit", "rainbow", "ranger", "robert", "rocket", "samsung", "saturday",
    "secret", "september", "shadow", "silver", "sister", "soccer", "spider",
    "spring", "starwars", "summer", "sunday", "sunshine", "superman", "taylor",
    "thomas", "thunder", "thursday", "tiger", "tigger", "trustno", "tuesday",
    "welcome", "wednesday", "whatever", "william", "window", "winter", "wizard",
    "yankees", "yellow", "zombie",
)


def load_wordlist(path: str | Path) -> tuple[str, ...]:
    """Read one word per line, skipping blank lines and ``#`` comments.

    Words are lowercased and de-duplicated in file order.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"Cannot read word list {path}: {exc}") from exc

    words = dict.fromkeys(
        line.strip().lower()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    )
    logger.debug("Loaded %d word(s) from %s", len(words), path)
    return tuple(words)
