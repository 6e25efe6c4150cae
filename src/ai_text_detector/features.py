from __future__ import annotations

import math
import statistics
from typing import List, Sequence

from .errors import ComputationFault, InsufficientDataError
from .lexicon import (
    BE_AUXILIARIES,
    IRREGULAR_PARTICIPLES,
    MAX_TRANSITION_LENGTH,
    NON_PARTICIPLE_ED,
    PASSIVE_INTERVENERS,
    TRANSITION_SET,
    rarity_weight,
)
from .models import FeatureVector, TokenStream

MIN_SENTENCES = 2
MIN_WORDS = 10
REPETITION_WINDOW = 20

PUNCTUATION_MARKS = frozenset(".,;:!?…—–")
# Coefficient of variation reported when a text has too few punctuation gaps to
# measure spacing; sits on the human side of the regularity curve.
UNMEASURED_PUNCTUATION_CV = 0.75
# Intervening words tolerated between a "be" auxiliary and its participle.
MAX_PASSIVE_GAP = 2


def extract(
    stream: TokenStream,
    *,
    min_sentences: int = MIN_SENTENCES,
    min_words: int = MIN_WORDS,
    repetition_window: int = REPETITION_WINDOW,
) -> FeatureVector:
    """
    Compute the feature vector for a token stream.

    Raises
    ------
    InsufficientDataError
        When the stream has fewer than ``min_sentences`` sentences or fewer
        than ``min_words`` words.
    ComputationFault
        When any feature comes out non-finite.
    """
    if stream.sentence_count < min_sentences or stream.word_count < min_words:
        raise InsufficientDataError(
            f"At least {min_sentences} sentences and {min_words} words are required "
            f"(got {stream.sentence_count} sentences, {stream.word_count} words)"
        )

    features = FeatureVector(
        avg_sentence_length=average_sentence_length(stream),
        sentence_length_variance=sentence_length_variance(stream),
        vocabulary_diversity=vocabulary_diversity(stream),
        word_repetition_rate=word_repetition_rate(stream, window=repetition_window),
        avg_word_rarity=average_word_rarity(stream),
        transition_word_density=transition_word_density(stream),
        punctuation_regularity=punctuation_regularity(stream),
        passive_voice_density=passive_voice_density(stream),
    )
    for name, value in features.items():
        if not math.isfinite(value):
            raise ComputationFault(f"Feature {name} is not finite: {value!r}", feature=name)
    return features


def average_sentence_length(stream: TokenStream) -> float:
    lengths = stream.sentence_lengths
    return float(statistics.mean(lengths)) if lengths else 0.0


def sentence_length_variance(stream: TokenStream) -> float:
    """Population variance of words per sentence."""
    lengths = stream.sentence_lengths
    return float(statistics.pvariance(lengths)) if lengths else 0.0


def vocabulary_diversity(stream: TokenStream) -> float:
    words = _normalized_words(stream)
    if not words:
        return 0.0
    return len(set(words)) / len(words)


def word_repetition_rate(stream: TokenStream, window: int = REPETITION_WINDOW) -> float:
    """Fraction of words already used within the preceding ``window`` words."""
    words = _normalized_words(stream)
    if not words:
        return 0.0
    window = max(1, window)
    last_seen: dict[str, int] = {}
    repeats = 0
    for idx, word in enumerate(words):
        previous = last_seen.get(word)
        if previous is not None and idx - previous <= window:
            repeats += 1
        last_seen[word] = idx
    return repeats / len(words)


def average_word_rarity(stream: TokenStream) -> float:
    """Mean rarity weight over all words; the perplexity proxy."""
    words = _normalized_words(stream)
    if not words:
        return 0.0
    return float(statistics.mean(rarity_weight(word) for word in words))


def transition_word_density(stream: TokenStream) -> float:
    """Listed transition phrases per word, matched greedily within sentences."""
    total_words = stream.word_count
    if not total_words:
        return 0.0
    occurrences = 0
    for sentence in stream.sentences:
        occurrences += count_transition_phrases([_normalize(word) for word in sentence])
    return occurrences / total_words


def count_transition_phrases(words: Sequence[str]) -> int:
    """Count non-overlapping transition phrases, preferring the longest match."""
    count = 0
    idx = 0
    while idx < len(words):
        matched = 0
        longest = min(MAX_TRANSITION_LENGTH, len(words) - idx)
        for size in range(longest, 0, -1):
            if tuple(words[idx : idx + size]) in TRANSITION_SET:
                matched = size
                break
        if matched:
            count += 1
            idx += matched
        else:
            idx += 1
    return count


def punctuation_regularity(stream: TokenStream) -> float:
    """
    Coefficient of variation of the number of characters between successive
    punctuation marks, counting the first gap from the start of the text.
    """
    gaps = punctuation_gaps(stream.text)
    if len(gaps) < 2:
        return UNMEASURED_PUNCTUATION_CV
    mean_gap = statistics.mean(gaps)
    if mean_gap == 0:
        return 0.0
    return float(statistics.pstdev(gaps) / mean_gap)


def punctuation_gaps(text: str) -> List[int]:
    gaps: list[int] = []
    previous = -1
    for idx, ch in enumerate(text):
        if ch in PUNCTUATION_MARKS:
            gaps.append(idx - previous - 1)
            previous = idx
    return gaps


def passive_voice_density(stream: TokenStream) -> float:
    """Share of sentences containing a "be" auxiliary followed by a past participle."""
    if not stream.sentences:
        return 0.0
    passive = sum(
        1
        for sentence in stream.sentences
        if is_passive_sentence([_normalize(word) for word in sentence])
    )
    return passive / stream.sentence_count


def is_passive_sentence(words: Sequence[str]) -> bool:
    for idx, word in enumerate(words):
        if word not in BE_AUXILIARIES:
            continue
        cursor = idx + 1
        skipped = 0
        while (
            cursor < len(words)
            and skipped < MAX_PASSIVE_GAP
            and (words[cursor] in PASSIVE_INTERVENERS or words[cursor].endswith("ly"))
        ):
            cursor += 1
            skipped += 1
        if cursor < len(words) and _is_past_participle(words[cursor]):
            return True
    return False


def _is_past_participle(word: str) -> bool:
    if word in IRREGULAR_PARTICIPLES:
        return True
    return len(word) > 3 and word.endswith("ed") and word not in NON_PARTICIPLE_ED


def _normalized_words(stream: TokenStream) -> list[str]:
    return [_normalize(word) for word in stream.words]


def _normalize(word: str) -> str:
    return word.lower().replace("’", "'")
