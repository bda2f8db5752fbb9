"""Syllabary and kana table construction tests."""
from __future__ import annotations

import threading

import pytest

from kana import tables as tables_module
from kana.syllabary import build_syllabary
from kana.tables import (
    HIRAGANA_KANA,
    KATAKANA_KANA,
    Script,
    build_kana_tables,
    build_script_tables,
    get_kana_tables,
)


def test_syllabary_order_and_size() -> None:
    syllabary = build_syllabary()
    assert syllabary[:5] == ("a", "i", "u", "e", "o")
    assert syllabary[5:10] == ("ka", "ki", "ku", "ke", "ko")
    assert syllabary[-3:] == ("n", "G", "je")
    assert len(syllabary) == 5 + 14 * 5 + 11 * 3 + 3
    assert len(set(syllabary)) == len(syllabary)


def test_syllabary_uses_conventional_spellings() -> None:
    syllabary = build_syllabary()
    for phonemic, conventional in {
        "si": "shi",
        "ti": "chi",
        "tu": "tsu",
        "hu": "fu",
        "zi": "ji",
    }.items():
        assert phonemic not in syllabary
        assert conventional in syllabary


def test_kana_lists_parallel_syllabary() -> None:
    assert len(HIRAGANA_KANA) == len(build_syllabary())
    assert len(KATAKANA_KANA) == len(build_syllabary()) + 1
    assert KATAKANA_KANA[-1] == "ー"


def test_absent_syllables_removed() -> None:
    hiragana = build_script_tables(Script.hiragana)
    katakana = build_script_tables(Script.katakana)
    for token in ("yi", "ye", "wu"):
        assert token not in hiragana.kana
        assert token not in katakana.kana


def test_forward_entries() -> None:
    hiragana = build_script_tables("hiragana").kana
    katakana = build_script_tables("katakana").kana
    assert hiragana["shi"] == "し"
    assert hiragana["tsu"] == "つ"
    assert hiragana["kyo"] == "きょ"
    assert hiragana["nqa"] == "にゃ"
    assert hiragana["G"] == "っ"
    assert hiragana["n"] == "ん"
    assert hiragana["wo"] == "を"
    assert katakana["je"] == "ジェ"
    assert katakana["L"] == "ー"
    assert "L" not in hiragana


def test_consonant_fallbacks() -> None:
    hiragana = build_script_tables(Script.hiragana).kana
    katakana = build_script_tables(Script.katakana).kana
    assert hiragana["k"] == "く"
    assert hiragana["t"] == "と"
    assert hiragana["b"] == "ぶ"
    assert hiragana["si"] == "し"
    assert katakana["d"] == "ド"
    assert katakana["m"] == "ム"
    assert katakana["sh"] == "シ"


def test_inverse_matches_forward() -> None:
    for script in Script:
        tables = build_script_tables(script)
        for kana, token in tables.roomaji.items():
            assert tables.kana[token] == kana
        assert tables.roomaji[tables.kana["ki"]] == "ki"


def test_tables_are_read_only() -> None:
    tables = build_kana_tables()
    with pytest.raises(TypeError):
        tables.hiragana.kana["ka"] = "x"  # type: ignore[index]
    assert tables.for_script("katakana") is tables.katakana
    assert tables.for_script(Script.hiragana) is tables.hiragana


def test_length_mismatch_is_rejected(monkeypatch) -> None:
    monkeypatch.setitem(
        tables_module._KANA_BY_SCRIPT,
        Script.hiragana,
        (HIRAGANA_KANA[:-1], {}),
    )
    with pytest.raises(ValueError):
        build_script_tables(Script.hiragana)


def test_shared_tables_built_once_across_threads() -> None:
    seen = []

    def worker() -> None:
        seen.append(get_kana_tables())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(seen) == 8
    assert all(item is seen[0] for item in seen)
    assert get_kana_tables() is seen[0]
