"""Decision engine: unification, estimation, simplicity and similarity tests."""
from __future__ import annotations

from passwdqc.engine.based import MODE_REMOVE, MODE_REVERSED, MODE_SEQUENCE, MODE_WORD, Step, is_based
from passwdqc.engine.estimate import expected_different
from passwdqc.engine.patterns import SEQUENCES, find_pattern, is_pattern_based
from passwdqc.engine.simple import CharStats, is_simple
from passwdqc.engine.unify import unify

__all__ = [
    "CharStats",
    "MODE_REMOVE",
    "MODE_REVERSED",
    "MODE_SEQUENCE",
    "MODE_WORD",
    "SEQUENCES",
    "Step",
    "expected_different",
    "find_pattern",
    "is_based",
    "is_pattern_based",
    "is_simple",
    "unify",
]
