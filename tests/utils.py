from __future__ import annotations

from typing import Sequence

from ai_text_detector.models import FeatureVector, TokenStream

# Two uniform six-word sentences carrying three listed transition phrases.
UNIFORM_TRANSITION_TEXT = (
    "Furthermore, the approach is highly effective. "
    "Moreover, the results are therefore consistent."
)

# Sentence lengths 3, 18, 5 and 22 with no listed transition phrases.
BURSTY_HUMAN_TEXT = (
    "I missed it. My sister called twice while I was out walking the dog along "
    "the river near our old school. Nobody answered the phone anyway. So tonight "
    "I'll bake bread, put the kettle on, and wait for her to ring again before "
    "the whole house falls asleep."
)


def make_stream(lengths: Sequence[int], text: str = "") -> TokenStream:
    """Build a token stream of unique words with the given sentence lengths."""
    sentences = []
    counter = 0
    for length in lengths:
        words = []
        for _ in range(length):
            words.append(f"word{counter}")
            counter += 1
        sentences.append(tuple(words))
    return TokenStream(text=text, sentences=tuple(sentences))


def make_features(**overrides: float) -> FeatureVector:
    """Feature vector with neutral-looking defaults, overridden per test."""
    values = {
        "avg_sentence_length": 12.0,
        "sentence_length_variance": 25.0,
        "vocabulary_diversity": 0.55,
        "word_repetition_rate": 0.2,
        "avg_word_rarity": 0.55,
        "transition_word_density": 0.02,
        "punctuation_regularity": 0.5,
        "passive_voice_density": 0.3,
    }
    values.update(overrides)
    return FeatureVector(**values)
