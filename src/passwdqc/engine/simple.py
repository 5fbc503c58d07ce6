"""Character class, length and word-count based simplicity test."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from passwdqc.engine.estimate import expected_different

if TYPE_CHECKING:
    from passwdqc.params import Policy

# Fixed ASCII classification, independent of the process locale.
_DIGITS = frozenset(b"0123456789")
_LOWERS = frozenset(b"abcdefghijklmnopqrstuvwxyz")
_UPPERS = frozenset(b"ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LETTERS = _LOWERS | _UPPERS
_SPACES = frozenset(b" \t\n\v\f\r")

# Alphabet sizes used for the distinct-character requirement of each tier.
CHARSET_ONE_CLASS = 10
CHARSET_TWO_CLASSES = 36
CHARSET_PASSPHRASE = 27
CHARSET_THREE_CLASSES = 62
CHARSET_FOUR_CLASSES = 95


def is_ascii(byte: int) -> bool:
    return byte < 0x80


def is_alpha(byte: int) -> bool:
    return byte in _LETTERS


@dataclass(frozen=True)
class CharStats:
    """Per-class counters collected in a single pass over a password."""

    length: int
    digits: int
    lowers: int
    uppers: int
    others: int
    unknowns: int
    words: int
    chars: int

    @classmethod
    def collect(cls, password: bytes) -> CharStats:
        digits = lowers = uppers = others = unknowns = 0
        words = 0
        previous = ord(" ")
        for byte in password:
            if not is_ascii(byte):
                unknowns += 1
            elif byte in _DIGITS:
                digits += 1
            elif byte in _LOWERS:
                lowers += 1
            elif byte in _UPPERS:
                uppers += 1
            else:
                others += 1

            # A word starts when a letter follows a non-letter, or when a
            # non-ASCII byte follows a space.  Non-ASCII bytes never count
            # as spaces themselves.
            if is_ascii(previous):
                if is_ascii(byte):
                    if is_alpha(byte) and not is_alpha(previous):
                        words += 1
                elif previous in _SPACES:
                    words += 1
            previous = byte

        return cls(
            length=len(password),
            digits=digits,
            lowers=lowers,
            uppers=uppers,
            others=others,
            unknowns=unknowns,
            words=words,
            chars=len(set(password)),
        )

    @property
    def classes(self) -> int:
        classes = sum(1 for count in (self.digits, self.lowers, self.uppers, self.others) if count)
        # Non-ASCII bytes only add a class to otherwise unstructured input.
        if self.unknowns and classes <= 1 and (not classes or self.digits or self.words >= 2):
            classes += 1
        return classes


def _meets(stats: CharStats, length: int, minimum: int, charset: int) -> bool:
    # Length first: a disabled tier must not reach the estimator.
    return length >= minimum and stats.chars >= expected_different(charset, minimum - 1)


def is_simple(policy: Policy, password: bytes, bias: int = 0, passphrase_bias: int = 0) -> bool:
    """Return True if ``password`` is too weak for ``policy``.

    A password is too simple if it is too short for its number of character
    classes, does not contain enough different characters for its class, or
    does not contain enough words to qualify as a passphrase.

    ``bias`` is added to the length for the class checks and
    ``passphrase_bias`` for the passphrase check, so that a dictionary word
    (normal in a passphrase) can be discounted from one but not the other.
    Neither bias affects class, word or distinct-character counts.
    """
    if not password:
        return True

    stats = CharStats.collect(password)
    biased = stats.length + bias

    for classes in range(stats.classes, 0, -1):
        if classes == 4:
            if _meets(stats, biased, policy.min[4], CHARSET_FOUR_CLASSES):
                return False
        elif classes == 3:
            if _meets(stats, biased, policy.min[3], CHARSET_THREE_CLASSES):
                return False
        elif classes == 2:
            if _meets(stats, biased, policy.min[1], CHARSET_TWO_CLASSES):
                return False
            if policy.passphrase and stats.words >= policy.passphrase:
                if _meets(stats, stats.length + passphrase_bias, policy.min[2], CHARSET_PASSPHRASE):
                    return False
        else:
            return not _meets(stats, biased, policy.min[0], CHARSET_ONE_CLASS)
    return True
