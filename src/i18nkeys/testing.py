"""Test doubles and assertions for code that depends on translations.

    assert_consistent - fail a test when a key set drifts from its resource
    FakeTranslator    - spy standing in for Translator in unit tests

Example:
    >>> fake = FakeTranslator()
    >>> fake.stub(Checkout.TITLE, "Checkout")
    >>> screen = CheckoutScreen(translator=fake)
    >>> screen.render()
    >>> fake.calls
    [TranslateCall(key='checkout.title', args=(), mode='text')]

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from i18nkeys.diagnostics import ErrorTemplate, MissingTranslationError
from i18nkeys.enums import RenderMode
from i18nkeys.keys import KeyLike, raw_key_of
from i18nkeys.runtime.value_types import FormatArgument, TranslatedValue
from i18nkeys.validation.harness import assert_consistent, consistency_checks

__all__ = [
    "FakeTranslator",
    "TranslateCall",
    "assert_consistent",
    "consistency_checks",
]


@dataclass(frozen=True, slots=True)
class TranslateCall:
    """One recorded call on a FakeTranslator.

    Attributes:
        key: Raw key requested
        args: Arguments passed
        mode: "text" for translate_text, "value" for translate_value
    """

    key: str
    args: tuple[FormatArgument, ...]
    mode: Literal["text", "value"]


class FakeTranslator:
    """Spy with the Translator call surface.

    Stubbed results are returned as-is: no table lookup and no argument
    substitution happen, so tests assert on the recorded arguments instead.
    Calling an unstubbed key raises MissingTranslationError.
    """

    def __init__(self) -> None:
        self._stubs: dict[str, str] = {}
        self.calls: list[TranslateCall] = []

    def stub(self, key: KeyLike | Enum, result: str) -> None:
        """Return result for every later call with key."""
        self._stubs[raw_key_of(key)] = result

    def reset(self) -> None:
        """Forget stubs and recorded calls."""
        self._stubs.clear()
        self.calls.clear()

    def calls_for(self, key: KeyLike | Enum) -> list[TranslateCall]:
        """Recorded calls for one key, oldest first."""
        raw_key = raw_key_of(key)
        return [call for call in self.calls if call.key == raw_key]

    def was_called(self, key: KeyLike | Enum, args: Sequence[FormatArgument] | None = None) -> bool:
        """True if key was requested (with exactly args, when given)."""
        calls = self.calls_for(key)
        if args is None:
            return bool(calls)
        expected = tuple(args)
        return any(call.args == expected for call in calls)

    def has_key(self, key: KeyLike | Enum) -> bool:
        return raw_key_of(key) in self._stubs

    def translate_text(self, key: KeyLike | Enum, args: Sequence[FormatArgument] = ()) -> str:
        return self._record(key, args, "text")

    def translate_value(
        self, key: KeyLike | Enum, args: Sequence[FormatArgument] = ()
    ) -> TranslatedValue:
        raw_key = raw_key_of(key)
        text = self._record(key, args, "value")
        return TranslatedValue(
            key=raw_key, template=text, args=tuple(args), text=text, mode=RenderMode.PLAIN
        )

    def _record(
        self, key: KeyLike | Enum, args: Sequence[FormatArgument], mode: Literal["text", "value"]
    ) -> str:
        raw_key = raw_key_of(key)
        self.calls.append(TranslateCall(raw_key, tuple(args), mode))
        try:
            return self._stubs[raw_key]
        except KeyError:
            raise MissingTranslationError(
                ErrorTemplate.translation_not_found(raw_key), key=raw_key
            ) from None
