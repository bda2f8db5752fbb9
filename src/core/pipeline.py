"""Mode dispatch shared by the CLI and the HTTP API."""
from __future__ import annotations

import logging
from enum import Enum

from cmu.bridge import cmu_to_kana
from cmu.dictionary import PhoneMaps
from kana.mapping import KanaConversionResult, to_kana_sequence
from kana.render import render_roomaji
from kana.tables import KanaTables, Script

LOGGER = logging.getLogger(__name__)


class ConversionMode(str, Enum):
    hiragana = "hiragana"
    katakana = "katakana"
    roomaji_hiragana = "roomaji_hiragana"
    roomaji_katakana = "roomaji_katakana"
    cmu_hiragana = "cmu_hiragana"
    cmu_katakana = "cmu_katakana"

    @property
    def script(self) -> Script:
        return Script.katakana if self.value.endswith("katakana") else Script.hiragana

    @property
    def uses_dictionary(self) -> bool:
        return self.value.startswith("cmu_")


def transliterate(
    text: str,
    mode: ConversionMode | str,
    *,
    tables: KanaTables | None = None,
    maps: PhoneMaps | None = None,
) -> KanaConversionResult:
    """Run one conversion.

    Lookup failures propagate as :class:`kana.errors.TransliterationError`
    or :class:`cmu.dictionary.CMUBridgeError`; nothing partial is returned.
    Romaji modes carry no tokens in the result.
    """

    mode = ConversionMode(mode)
    LOGGER.debug("transliterate mode=%s text=%s", mode.value, text)

    if mode in {ConversionMode.hiragana, ConversionMode.katakana}:
        return to_kana_sequence(text, script=mode.script, tables=tables)
    if mode in {ConversionMode.roomaji_hiragana, ConversionMode.roomaji_katakana}:
        return KanaConversionResult(text=render_roomaji(text, mode.script, tables))
    return cmu_to_kana(text, script=mode.script, maps=maps, tables=tables)


__all__ = ["ConversionMode", "transliterate"]
