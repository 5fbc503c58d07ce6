"""Password policy parameters and passwdqc option parsing.

Options use the passwdqc syntax, for example::

    min=disabled,24,11,8,7 max=40 passphrase=3 match=4 similar=deny

``min`` holds the minimum lengths for, in order: passwords of a single
character class, passwords of two classes, passphrases, passwords of three
classes and passwords of all four classes.  Each value must be no larger
than the one before it.
"""
from __future__ import annotations

import enum
import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from passwdqc.errors import ConfigFileError, PolicyError

logger = logging.getLogger(__name__)

DISABLED = sys.maxsize
DEFAULT_MIN: tuple[int, int, int, int, int] = (DISABLED, 24, 11, 8, 7)
DEFAULT_MAX = 40
DEFAULT_PASSPHRASE = 3
DEFAULT_MATCH = 4
MIN_TIERS = 5
MAX_CONFIG_DEPTH = 5

# Accepted for compatibility with PAM configurations; they have no effect here.
_IGNORED_OPTIONS = frozenset(
    {
        "enforce",
        "retry",
        "random",
        "ask_oldauthtok",
        "check_oldauthtok",
        "use_first_pass",
        "use_authtok",
        "non-unix",
    }
)


class Similar(str, enum.Enum):
    PERMIT = "permit"
    DENY = "deny"


def _coerce_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise PolicyError(f"{what} must be an integer, got {value!r}")
    if value < 0:
        raise PolicyError(f"{what} must be a non-negative integer, got {value}")
    return value


def _coerce_min(values: Iterable[int | None]) -> tuple[int, int, int, int, int]:
    if isinstance(values, (str, bytes)):
        raise PolicyError(f"min must contain exactly {MIN_TIERS} values")
    try:
        values = tuple(values)
    except TypeError:
        raise PolicyError(f"min must be a sequence of {MIN_TIERS} values") from None
    if len(values) != MIN_TIERS:
        raise PolicyError(f"min must contain exactly {MIN_TIERS} values")
    result: list[int] = []
    for offset, value in enumerate(values):
        value = DISABLED if value is None else _coerce_int(value, f"min[{offset}]")
        if result and value > result[-1]:
            raise PolicyError("Each min value must be no larger than the preceding one")
        result.append(value)
    return tuple(result)  # type: ignore[return-value]


def _coerce_similar(value: Similar | str) -> Similar:
    try:
        return Similar(value)
    except ValueError:
        raise PolicyError(f"similar must be 'permit' or 'deny', got {value!r}") from None


@dataclass(frozen=True)
class Policy:
    """Validated password policy; use the ``with_*`` methods to change it."""

    min: tuple[int, int, int, int, int] = DEFAULT_MIN
    max: int = DEFAULT_MAX
    passphrase: int = DEFAULT_PASSPHRASE
    match: int = DEFAULT_MATCH
    similar: Similar = Similar.DENY

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _coerce_min(self.min))
        object.__setattr__(self, "max", _coerce_int(self.max, "max"))
        object.__setattr__(self, "passphrase", _coerce_int(self.passphrase, "passphrase"))
        object.__setattr__(self, "match", _coerce_int(self.match, "match"))
        object.__setattr__(self, "similar", _coerce_similar(self.similar))

    @property
    def similar_deny(self) -> bool:
        return self.similar is Similar.DENY

    def min_for(self, offset: int) -> int:
        if not 0 <= offset < MIN_TIERS:
            raise PolicyError(f"min offset must be between 0 and {MIN_TIERS - 1}, got {offset}")
        return self.min[offset]

    def with_min(self, values: Sequence[int | None]) -> Policy:
        return replace(self, min=tuple(values))

    def with_min_value(self, value: int | None, offset: int) -> Policy:
        self.min_for(offset)
        values = list(self.min)
        values[offset] = value
        return self.with_min(values)

    def with_max(self, value: int) -> Policy:
        return replace(self, max=value)

    def with_passphrase(self, value: int) -> Policy:
        return replace(self, passphrase=value)

    def with_match(self, value: int) -> Policy:
        return replace(self, match=value)

    def with_similar(self, value: Similar | str) -> Policy:
        return replace(self, similar=value)

    def describe(self) -> list[str]:
        """Return the policy as passwdqc option strings."""
        mins = ",".join("disabled" if value == DISABLED else str(value) for value in self.min)
        return [
            f"min={mins}",
            f"max={self.max}",
            f"passphrase={self.passphrase}",
            f"match={self.match}",
            f"similar={self.similar.value}",
        ]

    @classmethod
    def from_options(cls, options: Iterable[str], base: Policy | None = None) -> Policy:
        """Apply passwdqc ``name=value`` options on top of ``base``."""
        return _apply_options(base or cls(), options, depth=0)


def _parse_number(text: str, what: str) -> int:
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise PolicyError(f"Invalid value for {what}: {text!r}")
    return int(text)


def _parse_min(text: str) -> list[int | None]:
    values: list[int | None] = []
    for part in text.split(","):
        part = part.strip()
        values.append(None if part == "disabled" else _parse_number(part, "min"))
    return values


def _apply_options(policy: Policy, options: Iterable[str], depth: int) -> Policy:
    for option in options:
        name, sep, value = option.strip().partition("=")
        if name in _IGNORED_OPTIONS:
            logger.debug("Ignoring PAM-only option %s", name)
            continue
        if not sep:
            raise PolicyError(f"Invalid option: {option!r}")
        if name == "min":
            policy = policy.with_min(_parse_min(value))
        elif name == "max":
            policy = policy.with_max(_parse_number(value, name))
        elif name == "passphrase":
            policy = policy.with_passphrase(_parse_number(value, name))
        elif name == "match":
            policy = policy.with_match(_parse_number(value, name))
        elif name == "similar":
            policy = policy.with_similar(value.strip())
        elif name == "config":
            policy = _load_config(Path(value.strip()), policy, depth + 1)
        else:
            raise PolicyError(f"Unknown option: {name!r}")
    return policy


def _load_config(path: Path, policy: Policy, depth: int) -> Policy:
    if depth > MAX_CONFIG_DEPTH:
        raise PolicyError(f"Config files nested too deeply at {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigFileError(f"Cannot read config file {path}: {exc}") from exc

    options = []
    for line in text.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            options.append(line)
    logger.debug("Loaded %d option(s) from %s", len(options), path)
    return _apply_options(policy, options, depth)


def load_config(path: str | Path, base: Policy | None = None) -> Policy:
    """Read a passwdqc.conf style file: one option per line, ``#`` comments."""
    return _load_config(Path(path), base or Policy(), depth=1)
