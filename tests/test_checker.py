"""Tests for the full password check."""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from passwdqc.checker import PasswordChecker, check
from passwdqc.models import CheckResult, RejectionReason, UserIdentity
from passwdqc.params import Policy

STRONG = "o/IiJ/OI/110dA6KMN8m10pk7ff0UDR0rcJIAYhY"


def test_strong_password_accepted() -> None:
    result = check(Policy(), STRONG)
    assert result.accepted
    assert result.reason is None
    assert result.message == "OK"
    assert result


def test_short_numeric_password_rejected() -> None:
    result = check(Policy(), "123456")
    assert not result
    assert result.reason is RejectionReason.SHORT
    assert result.message == "too short"


def test_too_long_rejected() -> None:
    assert check(Policy(), STRONG + "x").reason is RejectionReason.LONG


def test_hard_ceiling_applies_regardless_of_max() -> None:
    policy = Policy().with_max(20_000)
    assert check(policy, "Ab1#" * 2501).reason is RejectionReason.LONG


def test_same_as_old_password() -> None:
    assert check(Policy(), STRONG, STRONG).reason is RejectionReason.SAME


def test_empty_old_password_means_absent() -> None:
    assert check(Policy(), STRONG, "").accepted
    assert check(Policy(), STRONG, None).accepted


def test_simple_short_and_simple() -> None:
    assert check(Policy(), "aaaaaaaa").reason is RejectionReason.SIMPLE_SHORT
    assert check(Policy().with_max(20), "aaaaaaaa").reason is RejectionReason.SIMPLE


def test_non_ascii_is_measured_in_bytes() -> None:
    # 6 characters, 12 UTF-8 bytes, all of the "unknown" class.
    assert check(Policy(), "пароль").reason is RejectionReason.SIMPLE_SHORT


def test_similar_to_old_password() -> None:
    assert check(Policy(), "hX7#pQ2m!!", "hX7#pQ2m").reason is RejectionReason.SIMILAR


def test_similar_permitted() -> None:
    result = check(Policy().with_similar("permit"), "hX7#pQ2m!!", "hX7#pQ2m")
    assert result.reason is not RejectionReason.SIMILAR


@pytest.mark.parametrize(
    "identity",
    [
        UserIdentity(name="alexander"),
        UserIdentity(name="bob", gecos="Alexander Smith"),
        UserIdentity(name="bob", home_directory="/home/alexander"),
    ],
)
def test_personal_information(identity: UserIdentity) -> None:
    assert check(Policy(), "Alexander#1", identity=identity).reason is RejectionReason.PERSONAL


def test_personal_information_reversed() -> None:
    identity = UserIdentity(name="alexander")
    assert check(Policy(), "rednaxelA#1", identity=identity).reason is RejectionReason.PERSONAL


def test_dictionary_word_with_leetspeak() -> None:
    assert check(Policy(), "Dr4g0n123", words=["dragon"]).reason is RejectionReason.WORD


def test_dictionary_word_uses_builtin_list() -> None:
    assert check(Policy(), "Dr4g0n123").reason is RejectionReason.WORD


def test_without_word_no_dictionary_rejection() -> None:
    assert check(Policy(), "Dr4g0n123", words=[]).reason is not RejectionReason.WORD


def test_generator_corpus_is_accepted() -> None:
    words = (word for word in ["zzzz", "dragon"])
    assert check(Policy(), "Dr4g0n123", words=words).reason is RejectionReason.WORD


def test_keyboard_sequence() -> None:
    assert check(Policy(), "Qwerty#7z", words=[]).reason is RejectionReason.SEQUENCE


def test_birth_year() -> None:
    assert check(Policy(), "Zb#1987", words=[]).reason is RejectionReason.SEQUENCE


def test_disabled_match_turns_off_similarity_checks() -> None:
    policy = Policy().with_match(0)
    assert check(policy, "hX7#pQ2m!!", "hX7#pQ2m").accepted
    assert check(policy, "Alexander#1", identity=UserIdentity(name="alexander")).accepted
    assert check(policy, "Dr4g0n123", words=["dragon"]).accepted
    assert check(policy, "Qwerty#7z").accepted


def test_legacy_max_truncates() -> None:
    policy = Policy().with_max(8)
    assert check(policy, "Xk9#mQ2!vLongtail", "Xk9#mQ2!different").reason is RejectionReason.SAME
    assert check(policy, "Xk9#mQ2!vLongtail", "Pp7&zzWq").accepted


def test_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        check(Policy(), 12345678)  # type: ignore[arg-type]


def test_checker_binds_policy_and_words() -> None:
    checker = PasswordChecker(words=["dragon"])
    assert checker.policy == Policy()
    assert checker.check("Dr4g0n123").reason is RejectionReason.WORD
    assert checker.check(STRONG).accepted


def test_concurrent_checks_keep_their_own_reasons() -> None:
    checker = PasswordChecker()
    candidates = [STRONG, "123456", "aaaaaaaa", "Qwerty#7z"] * 8
    expected = [checker.check(candidate) for candidate in candidates]
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(checker.check, candidates))
    assert results == expected
    assert CheckResult.reject(RejectionReason.SHORT) in results
