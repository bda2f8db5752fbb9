"""English word → CMU phones → kana."""
from __future__ import annotations

import logging

from kana.mapping import KanaConversionResult, to_kana_sequence
from kana.segment import SegmentationMode
from kana.tables import KanaTables, Script

from .dictionary import PhoneMaps, get_phone_maps

LOGGER = logging.getLogger(__name__)


def english_to_phonetic(word: str, maps: PhoneMaps) -> list[str]:
    """Map each phone of ``word`` to its japanese-ready token, e.g. AARON → E R A N."""

    return [maps.phone_to_token(phone, word=word) for phone in maps.lookup_phones(word)]


def cmu_to_kana(
    word: str,
    *,
    script: Script | str,
    maps: PhoneMaps | None = None,
    tables: KanaTables | None = None,
) -> KanaConversionResult:
    maps = maps or get_phone_maps()
    phonetic = "".join(english_to_phonetic(word, maps))
    LOGGER.debug("cmu_phonetic word=%s phonetic=%s", word, phonetic)
    return to_kana_sequence(phonetic, script=script, mode=SegmentationMode.english, tables=tables)


def cmu_hiragana(
    word: str,
    *,
    maps: PhoneMaps | None = None,
    tables: KanaTables | None = None,
) -> str:
    return cmu_to_kana(word, script=Script.hiragana, maps=maps, tables=tables).text


def cmu_katakana(
    word: str,
    *,
    maps: PhoneMaps | None = None,
    tables: KanaTables | None = None,
) -> str:
    return cmu_to_kana(word, script=Script.katakana, maps=maps, tables=tables).text


__all__ = ["english_to_phonetic", "cmu_to_kana", "cmu_hiragana", "cmu_katakana"]
