from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple

# Python attribute name -> external (camelCase) feature name.
FEATURE_NAMES: Dict[str, str] = {
    "avg_sentence_length": "avgSentenceLength",
    "sentence_length_variance": "sentenceLengthVariance",
    "vocabulary_diversity": "vocabularyDiversity",
    "word_repetition_rate": "wordRepetitionRate",
    "avg_word_rarity": "avgWordRarity",
    "transition_word_density": "transitionWordDensity",
    "punctuation_regularity": "punctuationRegularity",
    "passive_voice_density": "passiveVoiceDensity",
}


@dataclass(frozen=True, slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class TokenStream:
    """Sentences of words derived from one text sample."""

    text: str
    sentences: Tuple[Tuple[str, ...], ...] = ()

    @property
    def words(self) -> list[str]:
        return [word for sentence in self.sentences for word in sentence]

    @property
    def lower_words(self) -> list[str]:
        return [word.lower() for sentence in self.sentences for word in sentence]

    @property
    def sentence_lengths(self) -> list[int]:
        return [len(sentence) for sentence in self.sentences]

    @property
    def word_count(self) -> int:
        return sum(len(sentence) for sentence in self.sentences)

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    def is_empty(self) -> bool:
        return not self.sentences


@dataclass(frozen=True, slots=True)
class FeatureVector:
    """The fixed set of linguistic features measured for one text sample."""

    avg_sentence_length: float
    sentence_length_variance: float
    vocabulary_diversity: float
    word_repetition_rate: float
    avg_word_rarity: float
    transition_word_density: float
    punctuation_regularity: float
    passive_voice_density: float

    def get(self, name: str) -> float:
        """Return a feature by attribute name or camelCase name."""
        for attr, external in FEATURE_NAMES.items():
            if name in (attr, external):
                return float(getattr(self, attr))
        raise KeyError(name)

    def items(self) -> list[tuple[str, float]]:
        return [(field.name, float(getattr(self, field.name))) for field in fields(self)]

    def to_dict(self) -> dict[str, float]:
        """Serialize using the camelCase feature names."""
        return {FEATURE_NAMES[name]: value for name, value in self.items()}


@dataclass(frozen=True, slots=True)
class Aggregate:
    """Aggregated anomaly score and the verdict derived from it."""

    score: float
    confidence: float
    is_ai_generated: bool


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Verdict returned by the detection engine for a single text sample."""

    is_ai_generated: bool
    confidence: float
    score: float
    perplexity_score: float
    burstiness_score: float
    reasons: Tuple[str, ...]
    error: str | None = None
    features: FeatureVector | None = None
    sub_scores: Tuple[Tuple[str, float], ...] = ()

    @classmethod
    def degenerate(cls, reason: str, error: str) -> "AnalysisResult":
        """Conservative result used whenever analysis could not be completed."""
        return cls(
            is_ai_generated=False,
            confidence=0.0,
            score=0.0,
            perplexity_score=0.0,
            burstiness_score=0.0,
            reasons=(reason,),
            error=error,
        )

    @property
    def is_degenerate(self) -> bool:
        """True when the result carries an error instead of a real verdict."""
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the camelCase shape consumed by presentation layers."""
        payload: dict[str, Any] = {
            "isAIGenerated": self.is_ai_generated,
            "confidence": self.confidence,
            "score": self.score,
            "perplexityScore": self.perplexity_score,
            "burstinessScore": self.burstiness_score,
            "reasons": list(self.reasons),
        }
        if self.error is not None:
            payload["error"] = self.error
        if self.features is not None:
            payload["features"] = self.features.to_dict()
        if self.sub_scores:
            payload["subScores"] = {
                FEATURE_NAMES.get(name, name): value for name, value in self.sub_scores
            }
        return payload
