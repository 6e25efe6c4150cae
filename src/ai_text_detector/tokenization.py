from __future__ import annotations

import re
from typing import List

from .models import TokenStream

SENTENCE_TERMINALS = frozenset(".!?")
LINE_BREAKS = frozenset("\n\r\u2028\u2029")

# Abbreviations whose trailing period does not end a sentence.
ABBREVIATIONS = frozenset(
    {
        "mr",
        "mrs",
        "ms",
        "dr",
        "prof",
        "sr",
        "jr",
        "st",
        "mt",
        "vs",
        "e.g",
        "i.e",
        "cf",
        "approx",
    }
)

# A word is a run of letters or digits, optionally joined by internal
# apostrophes or hyphens ("don't", "well-known"). Every other character,
# including sentence terminals, separates words.
WORD_PATTERN = re.compile(r"[^\W_]+(?:['’\-][^\W_]+)*", re.UNICODE)
TRAILING_ABBREV_RE = re.compile(r"([^\W\d_][^\W\d_.]*(?:\.[^\W\d_]+)*)$", re.UNICODE)


def split_into_sentences(text: str) -> List[str]:
    """
    Split text into raw sentence strings.

    Boundaries are runs of ``.``, ``!`` or ``?`` and line breaks. A terminal
    run directly followed by a lowercase letter or digit (``3.14``, ``e.g``)
    is not a boundary, and neither is the period after a known abbreviation.
    """
    sentences: list[str] = []
    start = 0
    idx = 0
    length = len(text)

    while idx < length:
        ch = text[idx]
        if ch in LINE_BREAKS:
            _append_sentence(sentences, text[start:idx])
            start = idx + 1
            idx += 1
            continue
        if ch in SENTENCE_TERMINALS:
            end = idx
            while end + 1 < length and text[end + 1] in SENTENCE_TERMINALS:
                end += 1
            following = text[end + 1] if end + 1 < length else ""
            if following and (following.islower() or following.isdigit()):
                idx = end + 1
                continue
            if ch == "." and end == idx and _ends_with_abbreviation(text[start:idx]):
                idx = end + 1
                continue
            _append_sentence(sentences, text[start : end + 1])
            start = end + 1
            idx = end + 1
            continue
        idx += 1

    _append_sentence(sentences, text[start:])
    return sentences


def split_words(sentence: str) -> List[str]:
    """Return the words of a sentence in order."""
    return WORD_PATTERN.findall(sentence)


def tokenize(text: str) -> TokenStream:
    """Tokenize text into sentences of words; sentences without words are dropped."""
    sentences = []
    for sentence in split_into_sentences(text):
        words = split_words(sentence)
        if words:
            sentences.append(tuple(words))
    return TokenStream(text=text, sentences=tuple(sentences))


def _append_sentence(sentences: list[str], candidate: str) -> None:
    stripped = candidate.strip()
    if stripped:
        sentences.append(stripped)


def _ends_with_abbreviation(prefix: str) -> bool:
    match = TRAILING_ABBREV_RE.search(prefix)
    if match is None:
        return False
    return match.group(1).lower() in ABBREVIATIONS
