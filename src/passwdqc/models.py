"""Result and user information types shared by the checker and the CLI."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class RejectionReason(enum.Enum):
    """Why a password was rejected; the value is the user-facing message."""

    ERROR = "check failed"
    SAME = "is the same as the old one"
    SIMILAR = "is based on the old one"
    SHORT = "too short"
    LONG = "too long"
    SIMPLE_SHORT = "not enough different characters or classes for this length"
    SIMPLE = "not enough different characters or classes"
    PERSONAL = "based on personal login information"
    WORD = "based on a dictionary word and not a passphrase"
    SEQUENCE = "based on a common sequence of characters and not a passphrase"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class CheckResult:
    """Outcome of a single check; ``reason`` is None when accepted."""

    reason: RejectionReason | None = None

    @classmethod
    def accept(cls) -> CheckResult:
        return cls()

    @classmethod
    def reject(cls, reason: RejectionReason) -> CheckResult:
        return cls(reason=reason)

    @property
    def accepted(self) -> bool:
        return self.reason is None

    @property
    def message(self) -> str:
        return "OK" if self.reason is None else self.reason.message

    def __bool__(self) -> bool:
        return self.accepted


@dataclass(frozen=True)
class UserIdentity:
    """Login information a password must not be based on."""

    name: str
    gecos: str = ""
    home_directory: str = ""

    @classmethod
    def from_passwd(cls, entry: Any) -> UserIdentity:
        """Build from a ``pwd.struct_passwd`` or anything with the same fields."""
        return cls(name=entry.pw_name, gecos=entry.pw_gecos or "", home_directory=entry.pw_dir or "")

    def fields(self) -> tuple[str, str, str]:
        return self.name, self.gecos, self.home_directory
