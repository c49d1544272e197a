"""Tests for validation.harness: assert_consistent and consistency_checks.

Mirrors how a project wires its own key sets into a test suite: one test per
(key set, resource file, options) triple, with resource files on disk.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from i18nkeys import (
    CheckOption,
    ConsistencyError,
    ConsistencyReport,
    I18nKeys,
    ViolationKind,
    assert_consistent,
    reconcile,
)
from i18nkeys.loading import PathResourceLoader
from i18nkeys.validation import consistency_checks

RESOURCES = Path(__file__).parent / "resources"


class SingleKeys(I18nKeys):
    FOR_TEST = "forTest"


class PairKeys(I18nKeys):
    FOR_TEST = "forTest"
    FOR_TEST_2 = "forTest2"


@pytest.fixture
def loader() -> PathResourceLoader:
    return PathResourceLoader(str(RESOURCES / "{locale}"))


class TestResourceFiles:
    """Each resource file passes under the options written for it."""

    @pytest.mark.parametrize(
        ("key_set", "resource_id", "options"),
        [
            (SingleKeys, "correct.json", CheckOption.CORRECT),
            (SingleKeys, "empty.json", CheckOption.EMPTY_FILE),
            (SingleKeys, "unused.json", CheckOption.CORRECT & ~CheckOption.UNUSED_FILE_KEYS),
            (PairKeys, "undefined.json", CheckOption.CORRECT & ~CheckOption.UNUSED_APP_KEYS),
        ],
        ids=["correct", "empty", "unused", "undefined"],
    )
    def test_passes(
        self,
        loader: PathResourceLoader,
        key_set: type[I18nKeys],
        resource_id: str,
        options: CheckOption,
    ) -> None:
        report = assert_consistent(key_set, loader.load("en", resource_id), options)
        assert isinstance(report, ConsistencyReport)
        assert report.is_valid

    @pytest.mark.parametrize(
        ("key_set", "resource_id", "kind", "keys"),
        [
            (SingleKeys, "unused.json", ViolationKind.UNUSED_FILE_KEYS, ("unused",)),
            (PairKeys, "undefined.json", ViolationKind.UNUSED_APP_KEYS, ("forTest2",)),
            (SingleKeys, "empty.json", ViolationKind.FILE_EMPTY, ()),
            (SingleKeys, "duplicated.json", ViolationKind.DUPLICATE_FILE_KEYS, ("forTest",)),
        ],
        ids=["unused", "undefined", "empty", "duplicated"],
    )
    def test_fails_under_correct_profile(
        self,
        loader: PathResourceLoader,
        key_set: type[I18nKeys],
        resource_id: str,
        kind: ViolationKind,
        keys: tuple[str, ...],
    ) -> None:
        with pytest.raises(ConsistencyError) as exc_info:
            assert_consistent(key_set, loader.load("en", resource_id))
        violation = exc_info.value.report.violation(kind)
        assert violation is not None
        assert violation.keys == keys

    def test_correct_file_fails_when_empty_expected(self, loader: PathResourceLoader) -> None:
        with pytest.raises(ConsistencyError) as exc_info:
            assert_consistent(SingleKeys, loader.load("en", "correct.json"), CheckOption.EMPTY_FILE)
        assert [v.kind for v in exc_info.value.violations] == [ViolationKind.EMPTY_FILE_EXPECTED]


class TestConsistencyErrorMessage:
    """Failures name the key set and every offending key."""

    def test_message_lists_keys(self) -> None:
        with pytest.raises(ConsistencyError) as exc_info:
            assert_consistent(PairKeys, {"forTest": "v", "legacy.a": "x", "legacy.b": "y"})
        message = str(exc_info.value)
        assert message.startswith("PairKeys: ")
        assert "legacy.a, legacy.b" in message
        assert "forTest2" in message
        assert "[unused-file-keys]" in message
        assert "[unused-app-keys]" in message

    def test_is_assertion_error(self) -> None:
        with pytest.raises(AssertionError):
            assert_consistent(["a"], {})

    def test_iterable_key_set_has_no_prefix(self) -> None:
        with pytest.raises(ConsistencyError) as exc_info:
            assert_consistent(["a"], {"b": "x"})
        assert str(exc_info.value).startswith("Consistency violations (2):")

    def test_violations_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING), pytest.raises(ConsistencyError):
            assert_consistent(["a", "b"], {"c": "x"})
        assert "unused-app-keys: a, b" in caplog.text


class TestConsistencyChecks:
    """consistency_checks names the checks an option set judges."""

    def test_empty_file(self) -> None:
        assert consistency_checks(CheckOption.EMPTY_FILE | CheckOption.CORRECT) == (
            ViolationKind.EMPTY_FILE_EXPECTED,
        )

    def test_correct(self) -> None:
        assert consistency_checks(CheckOption.CORRECT) == (
            ViolationKind.FILE_EMPTY,
            ViolationKind.DUPLICATE_APP_KEYS,
            ViolationKind.DUPLICATE_FILE_KEYS,
            ViolationKind.UNUSED_FILE_KEYS,
            ViolationKind.UNUSED_APP_KEYS,
        )

    def test_none_runs_structural_checks_only(self) -> None:
        assert consistency_checks(CheckOption.NONE) == (
            ViolationKind.FILE_EMPTY,
            ViolationKind.DUPLICATE_APP_KEYS,
            ViolationKind.DUPLICATE_FILE_KEYS,
        )

    @pytest.mark.parametrize("options", [CheckOption.NONE, CheckOption.CORRECT, CheckOption.EMPTY_FILE])
    def test_violations_are_subset_of_checks(self, options: CheckOption) -> None:
        judged = set(consistency_checks(options))
        found = reconcile(["a", "a"], [("b", "1"), ("b", "2")], options)
        assert {v.kind for v in found.violations} <= judged
