"""Locale-aware word segmentation and word equality.

Thai (and other space-free scripts) cannot be split on whitespace, so words are
found with ICU's word BreakIterator (dictionary-based for Thai, UAX #29 rules
elsewhere). Latin words keep their accented letters and combining marks. Each
segment keeps its character offset so callers can map a word back into its
line.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

from icu import BreakIterator, Locale

DEFAULT_LOCALE = "th"


@dataclass(frozen=True)
class WordSegment:
    text: str
    is_word_like: bool
    offset: int


SegmentWordsFn = Callable[[str], list[WordSegment]]


def is_word_like(segment: str) -> bool:
    """A segment is word-like when it contains at least one letter or digit."""
    return any(unicodedata.category(ch)[0] in ("L", "N") for ch in segment)


def _utf16_to_index(text: str) -> dict[int, int]:
    # ICU boundaries are UTF-16 offsets; astral characters take two units.
    out: dict[int, int] = {}
    unit = 0
    for index, ch in enumerate(text):
        out[unit] = index
        unit += 2 if ord(ch) > 0xFFFF else 1
    out[unit] = len(text)
    return out


def segment_words(text: str, *, locale: str = DEFAULT_LOCALE) -> list[WordSegment]:
    """Split `text` into segments (including punctuation and whitespace ones)."""
    if not text:
        return []
    breaker = BreakIterator.createWordInstance(Locale(locale))
    breaker.setText(text)
    to_index = _utf16_to_index(text)

    out: list[WordSegment] = []
    start = to_index[breaker.first()]
    for boundary in breaker:
        end = to_index[boundary]
        piece = text[start:end]
        if piece:
            out.append(WordSegment(text=piece, is_word_like=is_word_like(piece), offset=start))
        start = end
    return out


def word_like_segments(text: str, segmenter: SegmentWordsFn = segment_words) -> list[WordSegment]:
    return [seg for seg in segmenter(text) if seg.is_word_like and seg.text.strip()]


@lru_cache(maxsize=65536)
def comparison_key(word: str) -> str:
    """Case- and diacritic-insensitive key.

    Only marks that come out of canonical decomposition (e.g. the accent of
    `é`) are dropped. Standalone combining marks such as Thai vowel and tone
    signs do not decompose and stay significant.
    """
    base: list[str] = []
    for ch in unicodedata.normalize("NFC", word.strip()):
        decomposed = unicodedata.normalize("NFD", ch)
        if len(decomposed) > 1 and all(unicodedata.combining(c) for c in decomposed[1:]):
            base.append(decomposed[0])
        else:
            base.append(ch)
    return "".join(base).casefold()


def words_equal(a: str, b: str) -> bool:
    return comparison_key(a) == comparison_key(b)
