"""English → kana bridge over the CMU pronouncing dictionary."""
from .bridge import cmu_hiragana, cmu_katakana, cmu_to_kana, english_to_phonetic
from .dictionary import (
    CMUBridgeError,
    DictionaryUnavailableError,
    PhoneMaps,
    PhoneNotMappedError,
    WordNotFoundError,
    get_phone_maps,
    load_phone_maps,
)

__all__ = [
    "CMUBridgeError",
    "DictionaryUnavailableError",
    "PhoneMaps",
    "PhoneNotMappedError",
    "WordNotFoundError",
    "cmu_hiragana",
    "cmu_katakana",
    "cmu_to_kana",
    "english_to_phonetic",
    "get_phone_maps",
    "load_phone_maps",
]
