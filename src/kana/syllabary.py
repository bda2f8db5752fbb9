"""Canonical Japanese syllabary used to key the kana tables."""
from __future__ import annotations

VOWELS = ("a", "i", "u", "e", "o")
CONSONANTS = ("k", "g", "s", "z", "t", "d", "n", "h", "b", "p", "m", "y", "r", "w")
DIGRAPH_VOWELS = ("a", "u", "o")
# "nq" keeps the palatal nasal apart from the syllable-final n.
DIGRAPH_CONSONANTS = ("ky", "sh", "ch", "nq", "hy", "my", "ry", "gy", "j", "by", "py")

CODA = "n"
GEMINATE = "G"
LONG_VOWEL = "L"
FOREIGN_DIGRAPH = "je"

CONVENTIONAL_SPELLINGS = {
    "si": "shi",
    "ti": "chi",
    "tu": "tsu",
    "hu": "fu",
    "zi": "ji",
}


def build_syllabary() -> tuple[str, ...]:
    """Return the ordered syllable tokens.

    The order is significant only for zipping against the kana code point
    lists in :mod:`kana.tables`.
    """

    syllabary: list[str] = list(VOWELS)
    syllabary.extend(consonant + vowel for consonant in CONSONANTS for vowel in VOWELS)
    syllabary.extend(prefix + vowel for prefix in DIGRAPH_CONSONANTS for vowel in DIGRAPH_VOWELS)
    syllabary.extend((CODA, GEMINATE, FOREIGN_DIGRAPH))

    for phonemic, conventional in CONVENTIONAL_SPELLINGS.items():
        syllabary[syllabary.index(phonemic)] = conventional
    return tuple(syllabary)


__all__ = [
    "VOWELS",
    "CONSONANTS",
    "DIGRAPH_VOWELS",
    "DIGRAPH_CONSONANTS",
    "CODA",
    "GEMINATE",
    "LONG_VOWEL",
    "FOREIGN_DIGRAPH",
    "CONVENTIONAL_SPELLINGS",
    "build_syllabary",
]
