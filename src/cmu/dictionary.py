"""Loading and lookups for the CMU pronouncing dictionary and the phone map.

Two line-oriented files back the bridge:

* the phone map, ``<ARPAbet phone> <phonetic token> [...]``; only the first
  two fields are read;
* cmudict itself, ``<WORD>  <phone> <phone> ...``; split on the first run of
  whitespace so the value keeps the whole pronunciation.

Without a configured dictionary path the pronunciations come from the
``cmudict`` distribution, first pronunciation per word.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType

import cmudict

from common.config import Settings, get_settings
from core.normalize import normalize_word, split_phones, strip_stress

LOGGER = logging.getLogger(__name__)

COMMENT_PREFIX = ";;;"
# cmudict-0.7b is published as latin-1
CMUDICT_ENCODING = "latin-1"
PHONE_MAP_ENCODING = "utf-8"
BUNDLED_DICT_NAME = "cmudict"


class CMUBridgeError(LookupError):
    """Base class for failures of the English → kana bridge."""


class DictionaryUnavailableError(CMUBridgeError):
    """Raised when a dictionary cannot be opened or decoded."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"dictionary unavailable: {path} ({reason})")
        self.path = Path(path)
        self.reason = reason


class WordNotFoundError(CMUBridgeError):
    """Raised when a word has no pronunciation."""

    def __init__(self, word: str) -> None:
        super().__init__(f"not found in CMU dictionary: {word!r}")
        self.word = word


class PhoneNotMappedError(CMUBridgeError):
    """Raised when an ARPAbet phone has no phonetic token."""

    def __init__(self, phone: str, word: str | None = None) -> None:
        detail = f" (in {word!r})" if word else ""
        super().__init__(f"phone {phone!r} has no phonetic token{detail}")
        self.phone = phone
        self.word = word


@dataclass(frozen=True, slots=True)
class PhoneMaps:
    """Word → phones and phone → phonetic token mappings."""

    pronunciations: Mapping[str, str]
    phone_tokens: Mapping[str, str]

    def lookup_phones(self, word: str) -> list[str]:
        """Return the stress-free ARPAbet phones of ``word``."""

        pronunciation = self.pronunciations.get(normalize_word(word))
        if pronunciation is None:
            LOGGER.warning("word_not_found word=%s", word)
            raise WordNotFoundError(word)
        return split_phones(pronunciation)

    def phone_to_token(self, phone: str, *, word: str | None = None) -> str:
        stripped = strip_stress(phone)
        token = self.phone_tokens.get(stripped)
        if token is None:
            LOGGER.warning("phone_not_mapped phone=%s word=%s", stripped, word)
            raise PhoneNotMappedError(stripped, word)
        return token


def _read_entries(path: Path, *, encoding: str) -> Iterator[str]:
    try:
        with path.open(encoding=encoding) as handle:
            for line in handle:
                stripped = line.strip()
                if not stripped or stripped.startswith(COMMENT_PREFIX):
                    continue
                yield stripped
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("dictionary_unavailable path=%s error=%s", path, exc)
        raise DictionaryUnavailableError(path, str(exc)) from exc


def load_phone_tokens(path: Path | str) -> dict[str, str]:
    """Read the ARPAbet phone → phonetic token map."""

    path = Path(path)
    tokens: dict[str, str] = {}
    for line in _read_entries(path, encoding=PHONE_MAP_ENCODING):
        fields = line.split()[:2]
        if len(fields) < 2:
            LOGGER.warning("phone_map_line_skipped path=%s line=%s", path, line)
            continue
        tokens[fields[0]] = fields[1]
    return tokens


def load_pronunciations(path: Path | str) -> dict[str, str]:
    """Read cmudict into a word → pronunciation string mapping."""

    path = Path(path)
    pronunciations: dict[str, str] = {}
    for line in _read_entries(path, encoding=CMUDICT_ENCODING):
        fields = line.split(maxsplit=1)
        if len(fields) < 2:
            LOGGER.warning("cmudict_line_skipped path=%s line=%s", path, line)
            continue
        pronunciations[fields[0]] = fields[1]
    return pronunciations


def load_bundled_pronunciations() -> dict[str, str]:
    """Read the pronunciations shipped with the ``cmudict`` distribution."""

    try:
        entries = cmudict.dict()
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.error("dictionary_unavailable path=%s error=%s", BUNDLED_DICT_NAME, exc)
        raise DictionaryUnavailableError(BUNDLED_DICT_NAME, str(exc)) from exc

    pronunciations: dict[str, str] = {}
    for word, variants in entries.items():
        if variants:
            # a few entries carry a trailing "# foreign" style note
            pronunciations[normalize_word(word)] = " ".join(variants[0]).split(" #", 1)[0]
    return pronunciations


def load_phone_maps(dict_path: Path | str | None, phones_path: Path | str) -> PhoneMaps:
    """Load both maps; ``dict_path=None`` selects the ``cmudict`` distribution."""

    if dict_path is None:
        pronunciations = load_bundled_pronunciations()
    else:
        pronunciations = load_pronunciations(dict_path)
    phone_tokens = load_phone_tokens(phones_path)
    LOGGER.info(
        "phone_maps_loaded words=%d phones=%d dict=%s",
        len(pronunciations),
        len(phone_tokens),
        dict_path or BUNDLED_DICT_NAME,
    )
    return PhoneMaps(
        pronunciations=MappingProxyType(pronunciations),
        phone_tokens=MappingProxyType(phone_tokens),
    )


@lru_cache(maxsize=4)
def _cached_phone_maps(dict_path: str | None, phones_path: str) -> PhoneMaps:
    return load_phone_maps(dict_path, phones_path)


def get_phone_maps(settings: Settings | None = None) -> PhoneMaps:
    """Return the phone maps configured in ``settings``.

    Maps are cached per path pair unless ``cache_phone_maps`` is off, in
    which case both sources are re-read on every call.
    """

    settings = settings or get_settings()
    if not settings.cache_phone_maps:
        return load_phone_maps(settings.cmu_dict_path, settings.cmu_phones_path)
    dict_path = str(settings.cmu_dict_path) if settings.cmu_dict_path else None
    return _cached_phone_maps(dict_path, str(settings.cmu_phones_path))


__all__ = [
    "CMUBridgeError",
    "DictionaryUnavailableError",
    "WordNotFoundError",
    "PhoneNotMappedError",
    "PhoneMaps",
    "load_phone_tokens",
    "load_pronunciations",
    "load_bundled_pronunciations",
    "load_phone_maps",
    "get_phone_maps",
]
