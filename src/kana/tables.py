"""Syllable ↔ kana lookup tables for hiragana and katakana."""
from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .syllabary import LONG_VOWEL, build_syllabary

LOGGER = logging.getLogger(__name__)


class Script(str, Enum):
    hiragana = "hiragana"
    katakana = "katakana"


# Parallel to build_syllabary(); None marks a slot with no kana (yi, ye, wu).
HIRAGANA_KANA: tuple[str | None, ...] = (
    # vowels
    "あ", "い", "う", "え", "お",
    # voiceless velar stops
    "か", "き", "く", "け", "こ",
    # voiced velar stops
    "が", "ぎ", "ぐ", "げ", "ご",
    # voiceless alveolar sibilants
    "さ", "し", "す", "せ", "そ",
    # voiced alveolar sibilants
    "ざ", "じ", "ず", "ぜ", "ぞ",
    # voiceless alveolar stops
    "た", "ち", "つ", "て", "と",
    # voiced alveolar stops
    "だ", "ぢ", "づ", "で", "ど",
    # alveolar nasal
    "な", "に", "ぬ", "ね", "の",
    # glottal fricative
    "は", "ひ", "ふ", "へ", "ほ",
    # voiced bilabial stop
    "ば", "び", "ぶ", "べ", "ぼ",
    # voiceless bilabial stop
    "ぱ", "ぴ", "ぷ", "ぺ", "ぽ",
    # bilabial nasal
    "ま", "み", "む", "め", "も",
    # palatal approximant
    "や", None, "ゆ", None, "よ",
    # flap
    "ら", "り", "る", "れ", "ろ",
    # labial approximant
    "わ", "ゐ", None, "ゑ", "を",
    # digraphs: ky sh ch nq hy my ry gy j by py
    "きゃ", "きゅ", "きょ",
    "しゃ", "しゅ", "しょ",
    "ちゃ", "ちゅ", "ちょ",
    "にゃ", "にゅ", "にょ",
    "ひゃ", "ひゅ", "ひょ",
    "みゃ", "みゅ", "みょ",
    "りゃ", "りゅ", "りょ",
    "ぎゃ", "ぎゅ", "ぎょ",
    "じゃ", "じゅ", "じょ",
    "びゃ", "びゅ", "びょ",
    "ぴゃ", "ぴゅ", "ぴょ",
    # final nasal, small tsu, foreign digraph
    "ん", "っ", "じぇ",
)

KATAKANA_OFFSET = ord("ァ") - ord("ぁ")
CHOONPU = "ー"


def _shift_to_katakana(kana: str | None) -> str | None:
    if kana is None:
        return None
    return "".join(chr(ord(char) + KATAKANA_OFFSET) for char in kana)


KATAKANA_KANA: tuple[str | None, ...] = tuple(_shift_to_katakana(kana) for kana in HIRAGANA_KANA) + (
    CHOONPU,
)

# Landing targets for english-path consonants that never met a vowel.
HIRAGANA_FALLBACKS: dict[str, str] = {
    "b": "ぶ",
    "ch": "ち",
    "d": "ど",
    "z": "じ",
    "f": "ふ",
    "g": "ぐ",
    "h": "ふ",
    "j": "じ",
    "k": "く",
    "r": "る",
    "p": "ぽ",
    "s": "す",
    "sh": "し",
    "t": "と",
    "si": "し",
    "ti": "ち",
    "tu": "つ",
    "hu": "ふ",
    "zi": "じ",
    "m": "む",
}
KATAKANA_FALLBACKS: dict[str, str] = {
    token: _shift_to_katakana(kana) for token, kana in HIRAGANA_FALLBACKS.items()  # type: ignore[misc]
}

_KANA_BY_SCRIPT = {
    Script.hiragana: (HIRAGANA_KANA, HIRAGANA_FALLBACKS),
    Script.katakana: (KATAKANA_KANA, KATAKANA_FALLBACKS),
}


@dataclass(frozen=True, slots=True)
class ScriptTables:
    """Forward and inverse lookups for one script."""

    script: Script
    kana: Mapping[str, str]
    roomaji: Mapping[str, str]


@dataclass(frozen=True, slots=True)
class KanaTables:
    """Both scripts' tables, built once and shared read-only."""

    hiragana: ScriptTables
    katakana: ScriptTables

    def for_script(self, script: Script | str) -> ScriptTables:
        return self.katakana if Script(script) is Script.katakana else self.hiragana


def build_script_tables(script: Script | str) -> ScriptTables:
    """Zip the syllabary against the script's kana and add the fallbacks."""

    script = Script(script)
    kana_points, fallbacks = _KANA_BY_SCRIPT[script]
    syllabary = build_syllabary()
    if script is Script.katakana:
        syllabary += (LONG_VOWEL,)
    if len(syllabary) != len(kana_points):
        raise ValueError(
            f"{script.value} kana list has {len(kana_points)} entries for {len(syllabary)} syllables"
        )

    forward: dict[str, str] = {}
    inverse: dict[str, str] = {}
    for token, kana in zip(syllabary, kana_points, strict=True):
        if kana is None:
            continue
        forward[token] = kana
        inverse[kana] = token
    forward.update(fallbacks)

    return ScriptTables(
        script=script,
        kana=MappingProxyType(forward),
        roomaji=MappingProxyType(inverse),
    )


def build_kana_tables() -> KanaTables:
    return KanaTables(
        hiragana=build_script_tables(Script.hiragana),
        katakana=build_script_tables(Script.katakana),
    )


_TABLES: KanaTables | None = None
_TABLES_LOCK = threading.Lock()


def get_kana_tables() -> KanaTables:
    """Return the process-wide tables, building them on first use."""

    global _TABLES
    tables = _TABLES
    if tables is not None:
        return tables

    with _TABLES_LOCK:
        if _TABLES is None:
            _TABLES = build_kana_tables()
            LOGGER.info(
                "kana_tables_built hiragana=%d katakana=%d",
                len(_TABLES.hiragana.kana),
                len(_TABLES.katakana.kana),
            )
        return _TABLES


__all__ = [
    "Script",
    "ScriptTables",
    "KanaTables",
    "HIRAGANA_KANA",
    "KATAKANA_KANA",
    "HIRAGANA_FALLBACKS",
    "KATAKANA_FALLBACKS",
    "CHOONPU",
    "build_script_tables",
    "build_kana_tables",
    "get_kana_tables",
]
