"""Conversion errors raised by the kana and romaji renderers."""
from __future__ import annotations


class TransliterationError(ValueError):
    """Base class for lookup failures during a conversion."""


class SyllableLookupError(TransliterationError):
    """Raised when a segmented token has no kana in the target script."""

    def __init__(self, token: str, script: str) -> None:
        super().__init__(f"no {script} kana for syllable {token!r}")
        self.token = token
        self.script = script


class KanaLookupError(TransliterationError):
    """Raised when a kana character cannot be romanised."""

    def __init__(self, char: str, script: str) -> None:
        super().__init__(f"cannot romanise {script} character {char!r}")
        self.char = char
        self.script = script
