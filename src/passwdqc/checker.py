"""Password strength check combining all rejection gates."""
from __future__ import annotations

import hmac
import logging
from collections.abc import Collection, Iterable

from passwdqc.engine.based import MODE_REMOVE, MODE_REVERSED, is_based
from passwdqc.engine.patterns import find_pattern
from passwdqc.engine.simple import is_simple
from passwdqc.engine.unify import unify
from passwdqc.models import CheckResult, RejectionReason, UserIdentity
from passwdqc.params import Policy
from passwdqc.wordlist import DEFAULT_WORDS

logger = logging.getLogger(__name__)

MAX_PASSWORD_LEN = 10000
# Traditional DES-based crypt() only uses the first 8 characters.
LEGACY_MAX = 8


def _to_bytes(value: str | bytes, what: str) -> bytes:
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"{what} must be str or bytes, not {type(value).__name__}")


def _reject(reason: RejectionReason) -> CheckResult:
    logger.debug("Password rejected: %s", reason.name)
    return CheckResult.reject(reason)


def _is_related(policy: Policy, other: bytes, unified: bytes, reversed_: bytes, original: bytes) -> bool:
    haystack = unify(other)
    return is_based(policy, haystack, unified, original, MODE_REMOVE) or is_based(
        policy, haystack, reversed_, original, MODE_REMOVE | MODE_REVERSED
    )


def check(
    policy: Policy,
    new_password: str | bytes,
    old_password: str | bytes | None = None,
    identity: UserIdentity | None = None,
    *,
    words: Iterable[str | bytes] | None = None,
) -> CheckResult:
    """Check ``new_password`` against ``policy``.

    An empty or missing ``old_password`` means there is no old password.
    ``words`` is the dictionary corpus; the built-in list is used when it is
    omitted.  Rejection is reported through the returned result, never by
    raising.
    """
    new = _to_bytes(new_password, "new_password")
    old = _to_bytes(old_password, "old_password") if old_password is not None else b""
    if words is None:
        words = DEFAULT_WORDS
    elif not isinstance(words, Collection):
        # Both dictionary passes need to iterate the corpus.
        words = tuple(words)

    length = len(new)
    if length < policy.min[4]:
        return _reject(RejectionReason.SHORT)
    if length > MAX_PASSWORD_LEN:
        return _reject(RejectionReason.LONG)

    if length > policy.max:
        if policy.max != LEGACY_MAX:
            return _reject(RejectionReason.LONG)
        new = new[:LEGACY_MAX]
        length = LEGACY_MAX
        if old and hmac.compare_digest(old[:LEGACY_MAX], new):
            return _reject(RejectionReason.SAME)

    if old and hmac.compare_digest(old, new):
        return _reject(RejectionReason.SAME)

    if is_simple(policy, new):
        if length < policy.min[1] <= policy.max:
            return _reject(RejectionReason.SIMPLE_SHORT)
        return _reject(RejectionReason.SIMPLE)

    unified = unify(new)
    reversed_ = unified[::-1]

    if old and policy.similar_deny and _is_related(policy, old, unified, reversed_, new):
        return _reject(RejectionReason.SIMILAR)

    if identity is not None:
        for value in identity.fields():
            if _is_related(policy, _to_bytes(value, "identity"), unified, reversed_, new):
                return _reject(RejectionReason.PERSONAL)

    reason = find_pattern(policy, unified, new, words)
    if reason is None:
        reason = find_pattern(policy, reversed_, new, words, reversed_=True)
    if reason is not None:
        return _reject(reason)

    return CheckResult.accept()


class PasswordChecker:
    """A policy and word corpus bound together for repeated checks.

    Instances hold no per-call state and may be shared between threads.
    """

    def __init__(self, policy: Policy | None = None, words: Iterable[str | bytes] | None = None) -> None:
        self.policy = policy or Policy()
        self.words = DEFAULT_WORDS if words is None else tuple(words)

    def check(
        self,
        new_password: str | bytes,
        old_password: str | bytes | None = None,
        identity: UserIdentity | None = None,
    ) -> CheckResult:
        return check(self.policy, new_password, old_password, identity, words=self.words)
