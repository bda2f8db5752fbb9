"""Latin ↔ kana conversions built on the segmenter and the renderers."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .render import render_kana, render_roomaji
from .segment import SegmentationMode, segment
from .tables import KanaTables, Script

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class KanaConversionResult:
    """変換結果。"""

    text: str
    tokens: list[str] = field(default_factory=list)


def to_kana_sequence(
    text: str,
    *,
    script: Script | str,
    mode: SegmentationMode | str = SegmentationMode.native,
    tables: KanaTables | None = None,
) -> KanaConversionResult:
    """Segment ``text`` and render the tokens in ``script``."""

    tokens = segment(text, mode)
    LOGGER.debug("segmented text=%s mode=%s tokens=%s", text, SegmentationMode(mode).value, tokens)
    return KanaConversionResult(text=render_kana(tokens, script, tables), tokens=tokens)


def to_hiragana(
    text: str,
    *,
    mode: SegmentationMode | str = SegmentationMode.native,
    tables: KanaTables | None = None,
) -> str:
    """ローマ字をひらがなへ変換する。

    >>> to_hiragana("kitsune")
    'きつね'
    """

    return to_kana_sequence(text, script=Script.hiragana, mode=mode, tables=tables).text


def to_katakana(
    text: str,
    *,
    mode: SegmentationMode | str = SegmentationMode.native,
    tables: KanaTables | None = None,
) -> str:
    """ローマ字をカタカナへ変換する。長母音は「ー」になる。"""

    return to_kana_sequence(text, script=Script.katakana, mode=mode, tables=tables).text


def to_roomaji_hiragana(text: str, *, tables: KanaTables | None = None) -> str:
    return render_roomaji(text, Script.hiragana, tables)


def to_roomaji_katakana(text: str, *, tables: KanaTables | None = None) -> str:
    return render_roomaji(text, Script.katakana, tables)


__all__ = [
    "KanaConversionResult",
    "to_kana_sequence",
    "to_hiragana",
    "to_katakana",
    "to_roomaji_hiragana",
    "to_roomaji_katakana",
]
