"""Token → kana and kana → romaji rendering."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from .errors import KanaLookupError, SyllableLookupError
from .segment import VOWEL_CHARS
from .syllabary import GEMINATE, LONG_VOWEL
from .tables import CHOONPU, KanaTables, Script, get_kana_tables

LOGGER = logging.getLogger(__name__)

SMALL_GLIDES: dict[Script, dict[str, str]] = {
    Script.hiragana: {"ゃ": "a", "ゅ": "u", "ょ": "o", "ぇ": "e"},
    Script.katakana: {"ャ": "a", "ュ": "u", "ョ": "o", "ェ": "e"},
}
# shi/ji/chi already carry the glide in their spelling
SIBILANT_BASES: dict[Script, frozenset[str]] = {
    Script.hiragana: frozenset("しじち"),
    Script.katakana: frozenset("シジチ"),
}


def render_kana(
    tokens: Sequence[str],
    script: Script | str,
    tables: KanaTables | None = None,
) -> str:
    """Render syllable tokens as kana.

    Tokens starting with a non-alphabetic character are copied verbatim. In
    katakana a vowel repeating the previous token's final letter becomes ー.
    Raises :class:`SyllableLookupError` on the first token without kana.
    """

    script = Script(script)
    lookup = (tables or get_kana_tables()).for_script(script).kana
    output: list[str] = []
    last_letter = ""

    for token in tokens:
        if not token[:1].isalpha():
            output.append(token)
        else:
            key = token
            if script is Script.katakana and token in VOWEL_CHARS and token == last_letter:
                key = LONG_VOWEL
            kana = lookup.get(key)
            if kana is None:
                LOGGER.warning("syllable_lookup_failed token=%s script=%s", token, script.value)
                raise SyllableLookupError(token, script.value)
            output.append(kana)
        last_letter = token[-1:]

    return "".join(output)


def _drop_dangling_geminate(output: list[str]) -> None:
    if output and output[-1] == GEMINATE:
        output.pop()


def render_roomaji(
    text: str,
    script: Script | str,
    tables: KanaTables | None = None,
) -> str:
    """Romanise a kana string, rebuilding glides, geminates and long vowels.

    A small tsu with no kana after it is dropped. Raises
    :class:`KanaLookupError` on the first character that cannot be romanised.
    """

    script = Script(script)
    lookup = (tables or get_kana_tables()).for_script(script).roomaji
    glides = SMALL_GLIDES[script]
    sibilants = SIBILANT_BASES[script]
    output: list[str] = []
    last_kana = ""

    for char in text:
        if not char.isalpha():
            _drop_dangling_geminate(output)
            output.append(char)
        elif char in glides:
            if output:
                output.pop()
            if last_kana not in sibilants:
                output.append("y")
            output.append(glides[char])
        elif script is Script.katakana and char == CHOONPU:
            if not output or output[-1] == GEMINATE:
                LOGGER.warning("orphan_choonpu text=%s", text)
                raise KanaLookupError(char, script.value)
            output.append(output[-1])
        else:
            token = lookup.get(char)
            if token is None:
                LOGGER.warning("kana_lookup_failed char=%s script=%s", char, script.value)
                raise KanaLookupError(char, script.value)
            if output and output[-1] == GEMINATE:
                # small tsu placeholder becomes the doubled onset
                output.pop()
                if token != GEMINATE:
                    output.append(token[0])
            output.extend(token)
            last_kana = char

    _drop_dangling_geminate(output)
    return "".join(output)


__all__ = [
    "SMALL_GLIDES",
    "SIBILANT_BASES",
    "render_kana",
    "render_roomaji",
]
