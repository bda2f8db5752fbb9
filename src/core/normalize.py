"""Normalization utilities for ARPAbet phone tokens."""
from __future__ import annotations


ARPABET_VOWELS = frozenset(
    {
        "AA",
        "AE",
        "AH",
        "AO",
        "AW",
        "AY",
        "EH",
        "ER",
        "EY",
        "IH",
        "IY",
        "OW",
        "OY",
        "UH",
        "UW",
    }
)

ARPABET_CONSONANTS = frozenset(
    {
        "B",
        "CH",
        "D",
        "DH",
        "F",
        "G",
        "HH",
        "JH",
        "K",
        "L",
        "M",
        "N",
        "NG",
        "P",
        "R",
        "S",
        "SH",
        "T",
        "TH",
        "V",
        "W",
        "Y",
        "Z",
        "ZH",
    }
)

ARPABET_PHONES = frozenset(ARPABET_VOWELS | ARPABET_CONSONANTS)


def normalize_word(word: str) -> str:
    """Return the dictionary key for ``word`` (cmudict keys are upper case)."""

    return word.strip().upper()


def strip_stress(phone: str) -> str:
    """Drop a trailing stress digit, e.g. ``EH1`` → ``EH``.

    Stress only ever appears as the last character of a vowel phone, so at
    most one character is removed.
    """

    if phone and not phone[-1].isalpha():
        return phone[:-1]
    return phone


def split_phones(pronunciation: str) -> list[str]:
    """Split a cmudict pronunciation into stress-free phones."""

    return [strip_stress(phone) for phone in pronunciation.split()]


__all__ = [
    "ARPABET_VOWELS",
    "ARPABET_CONSONANTS",
    "ARPABET_PHONES",
    "normalize_word",
    "strip_stress",
    "split_phones",
]
