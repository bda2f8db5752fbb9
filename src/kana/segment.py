"""Latin text → syllable token segmentation.

One state machine serves two modes. ``native`` applies the full Japanese
phonotactic rules (digraphs, gemination, syllable-final n). ``english``
only recombines consonant + vowel pairs, which is all that phone strings
produced by the CMU bridge need.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from .syllabary import CODA, GEMINATE, VOWELS


class SegmentationMode(str, Enum):
    native = "native"
    english = "english"


VOWEL_CHARS = frozenset(VOWELS)
GEMINATE_CANDIDATES = frozenset("ktpgdbszc")
# "j" is a single-letter onset and never needs the two-letter window.
DIGRAPH_PREFIXES = frozenset({"ky", "sh", "ch", "nq", "hy", "my", "ry", "gy", "by", "py"})


@dataclass(slots=True)
class _SegmenterState:
    tokens: list[str] = field(default_factory=list)
    pending: str = ""
    window: str = ""
    prev_nasal: bool = False
    prev_geminate: bool = False
    # english mode treats the start of input like a preceding vowel
    prev_char: str = "a"

    def retract(self) -> str | None:
        return self.tokens.pop() if self.tokens else None


def _step_native(state: _SegmenterState, char: str) -> None:
    state.pending += char
    state.window += char
    is_vowel = char in VOWEL_CHARS

    if not char.isalpha():
        state.prev_nasal = False
        state.tokens.append(char)
        state.pending = ""

    # A digraph supersedes a provisional geminate or coda token.
    if state.window in DIGRAPH_PREFIXES:
        if state.prev_geminate:
            state.retract()
        if state.prev_nasal:
            state.retract()
        state.pending = state.window
        state.prev_geminate = False
        state.prev_nasal = False

    if char == CODA:
        state.prev_nasal = True
        state.tokens.append(char)
    elif not is_vowel and state.prev_nasal:
        state.prev_nasal = False
        state.pending = char

    if not is_vowel and state.prev_geminate:
        provisional = state.retract()
        if provisional == char:
            state.tokens.append(GEMINATE)
            state.pending = char
            state.prev_geminate = False
            return

    if char in GEMINATE_CANDIDATES:
        state.prev_geminate = True
        state.tokens.append(char)

    if is_vowel:
        if state.prev_geminate:
            state.retract()
        if state.prev_nasal:
            state.retract()
            state.prev_nasal = False
        state.prev_geminate = False
        state.tokens.append(state.pending)
        state.pending = ""

    if len(state.window) >= 2:
        state.window = char


def _step_english(state: _SegmenterState, char: str) -> None:
    token = char
    if char in VOWEL_CHARS and state.prev_char not in VOWEL_CHARS:
        state.retract()
        token = state.prev_char + char
    state.tokens.append(token)
    state.prev_char = char


_STEPS: dict[SegmentationMode, Callable[[_SegmenterState, str], None]] = {
    SegmentationMode.native: _step_native,
    SegmentationMode.english: _step_english,
}


def segment(text: str, mode: SegmentationMode | str = SegmentationMode.native) -> list[str]:
    """Split ``text`` into syllable tokens.

    Input is lower-cased first. In native mode a trailing consonant that
    never met a vowel, a coda or a geminate context yields no token.

    >>> segment("gakkou")
    ['ga', 'G', 'ko', 'u']
    >>> segment("grab", SegmentationMode.english)
    ['g', 'ra', 'b']
    """

    step = _STEPS[SegmentationMode(mode)]
    state = _SegmenterState()
    for char in text.lower():
        step(state, char)
    return state.tokens


__all__ = [
    "SegmentationMode",
    "VOWEL_CHARS",
    "GEMINATE_CANDIDATES",
    "DIGRAPH_PREFIXES",
    "segment",
]
