from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping, Tuple

from .models import FeatureVector
from .scoring import DECISION_THRESHOLD, FEATURE_RULES, sub_scores

NOTABLE_THRESHOLD = 0.65

# feature -> (sentence when the feature points to AI, sentence when it points to a human)
REASON_TEMPLATES: Mapping[str, Tuple[str, str]] = MappingProxyType(
    {
        "sentence_length_variance": (
            "Sentence length is unusually uniform, a pattern common in AI-generated text.",
            "Sentence lengths vary widely (high burstiness), a hallmark of human writing.",
        ),
        "transition_word_density": (
            "Formal transition phrases such as 'furthermore' or 'moreover' appear unusually often.",
            "The text relies on few formal transition phrases.",
        ),
        "avg_word_rarity": (
            "Word choice leans on common, predictable vocabulary (low perplexity).",
            "Word choice is idiosyncratic and hard to predict (high perplexity).",
        ),
        "vocabulary_diversity": (
            "Vocabulary is narrow, with the same words recurring in template-like phrasing.",
            "Vocabulary is varied, with few repeated words.",
        ),
        "punctuation_regularity": (
            "Punctuation is spaced with mechanical regularity.",
            "Punctuation spacing is irregular, as in natural human writing.",
        ),
        "word_repetition_rate": (
            "Words are frequently repeated within short spans of text.",
            "Little short-range word repetition was found.",
        ),
        "passive_voice_density": (
            "Passive constructions are frequent, a stylistic tendency of AI-generated text.",
            "Sentences mostly use the active voice.",
        ),
        "avg_sentence_length": (
            "Sentences are consistently long and fully developed, typical of generated prose.",
            "Sentences are short and conversational, typical of human writing.",
        ),
    }
)

GENERIC_AI_REASON = (
    "No single signal dominated; the combined linguistic features lean toward "
    "AI-generated text."
)
GENERIC_HUMAN_REASON = (
    "No single signal dominated; the combined linguistic features lean toward "
    "human-written text."
)


def rank_evidence(
    features: FeatureVector,
    score: float,
    notable_threshold: float = NOTABLE_THRESHOLD,
) -> List[Tuple[str, float]]:
    """
    Return ``(feature, strength)`` pairs that support the verdict, strongest first.

    Strength is the sub-score itself for an AI verdict and its complement for a
    human verdict; ties keep rule-table order.
    """
    is_ai = score >= DECISION_THRESHOLD
    scores = sub_scores(features)
    evidence: list[tuple[str, float]] = []
    for rule in FEATURE_RULES:
        value = scores[rule.feature]
        strength = value if is_ai else 1.0 - value
        if strength >= notable_threshold:
            evidence.append((rule.feature, strength))
    evidence.sort(key=lambda item: item[1], reverse=True)
    return evidence


def explain(
    features: FeatureVector,
    score: float,
    notable_threshold: float = NOTABLE_THRESHOLD,
) -> List[str]:
    """Human-readable justifications for the verdict implied by ``score``."""
    is_ai = score >= DECISION_THRESHOLD
    reasons = [
        REASON_TEMPLATES[feature][0 if is_ai else 1]
        for feature, _ in rank_evidence(features, score, notable_threshold)
    ]
    if not reasons:
        reasons.append(GENERIC_AI_REASON if is_ai else GENERIC_HUMAN_REASON)
    return reasons
