"""Kana conversion public exports."""
from .errors import KanaLookupError, SyllableLookupError, TransliterationError
from .mapping import (
    KanaConversionResult,
    to_hiragana,
    to_kana_sequence,
    to_katakana,
    to_roomaji_hiragana,
    to_roomaji_katakana,
)
from .segment import SegmentationMode, segment
from .tables import KanaTables, Script, build_kana_tables, get_kana_tables

__all__ = [
    "KanaConversionResult",
    "KanaLookupError",
    "KanaTables",
    "Script",
    "SegmentationMode",
    "SyllableLookupError",
    "TransliterationError",
    "build_kana_tables",
    "get_kana_tables",
    "segment",
    "to_hiragana",
    "to_kana_sequence",
    "to_katakana",
    "to_roomaji_hiragana",
    "to_roomaji_katakana",
]
