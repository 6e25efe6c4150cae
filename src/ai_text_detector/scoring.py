"""
Feature normalization and score aggregation.

Every feature is mapped onto a ``[0, 1]`` AI-likelihood sub-score through a
curve described by one row of ``FEATURE_RULES``:

* ``direction`` says which end of the raw feature looks machine-generated
  (``HIGHER_IS_AI`` or ``LOWER_IS_AI``);
* ``midpoint`` is the raw value that maps to a sub-score of exactly 0.5;
* ``steepness`` controls how quickly a logistic curve saturates around the
  midpoint;
* ``curve`` is ``LOGISTIC`` for bounded features or ``RATIONAL`` for
  unbounded non-negative ones, where ``midpoint / (midpoint + value)`` decays
  toward zero without ever reaching it;
* ``weight`` is the feature's share of the aggregate score.

Both curves are strictly monotonic, so moving a feature further in the
AI-like direction always raises its sub-score.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .errors import ComputationFault
from .models import FEATURE_NAMES, Aggregate, FeatureVector

HIGHER_IS_AI = "higher"
LOWER_IS_AI = "lower"

LOGISTIC = "logistic"
RATIONAL = "rational"

DECISION_THRESHOLD = 0.5
MAX_RULE_WEIGHT = 0.25


@dataclass(frozen=True, slots=True)
class FeatureRule:
    feature: str
    direction: str
    midpoint: float
    steepness: float
    weight: float
    curve: str = LOGISTIC

    def normalize(self, value: float) -> float:
        """Map a raw feature value onto its AI-likelihood sub-score."""
        if self.curve == RATIONAL:
            decay = self.midpoint / (self.midpoint + max(0.0, value))
            return 1.0 - decay if self.direction == HIGHER_IS_AI else decay
        if self.direction == HIGHER_IS_AI:
            return _logistic(self.steepness * (value - self.midpoint))
        return _logistic(self.steepness * (self.midpoint - value))


FEATURE_RULES: Tuple[FeatureRule, ...] = (
    FeatureRule(
        "sentence_length_variance", LOWER_IS_AI, midpoint=25.0, steepness=1.0, weight=0.24, curve=RATIONAL
    ),
    FeatureRule("transition_word_density", HIGHER_IS_AI, midpoint=0.02, steepness=150.0, weight=0.22),
    FeatureRule("avg_word_rarity", LOWER_IS_AI, midpoint=0.55, steepness=8.0, weight=0.12),
    FeatureRule("vocabulary_diversity", LOWER_IS_AI, midpoint=0.55, steepness=10.0, weight=0.10),
    FeatureRule("punctuation_regularity", LOWER_IS_AI, midpoint=0.5, steepness=5.0, weight=0.10),
    FeatureRule("word_repetition_rate", HIGHER_IS_AI, midpoint=0.2, steepness=15.0, weight=0.08),
    FeatureRule("passive_voice_density", HIGHER_IS_AI, midpoint=0.3, steepness=6.0, weight=0.08),
    FeatureRule("avg_sentence_length", HIGHER_IS_AI, midpoint=12.0, steepness=0.15, weight=0.06),
)


def validate_rules(rules: Tuple[FeatureRule, ...]) -> None:
    """Raise ValueError unless the rule table covers every feature with sane weights."""
    names = [rule.feature for rule in rules]
    if sorted(names) != sorted(FEATURE_NAMES):
        raise ValueError(f"Rule table must cover exactly {sorted(FEATURE_NAMES)}, got {names}.")
    for rule in rules:
        if rule.direction not in (HIGHER_IS_AI, LOWER_IS_AI):
            raise ValueError(f"Unknown direction '{rule.direction}' for {rule.feature}.")
        if rule.curve not in (LOGISTIC, RATIONAL):
            raise ValueError(f"Unknown curve '{rule.curve}' for {rule.feature}.")
        if rule.curve == RATIONAL and rule.midpoint <= 0:
            raise ValueError(f"Midpoint for {rule.feature} must be positive on a rational curve.")
        if not 0.0 <= rule.weight <= MAX_RULE_WEIGHT:
            raise ValueError(f"Weight for {rule.feature} must lie in [0, {MAX_RULE_WEIGHT}].")
        if rule.steepness <= 0:
            raise ValueError(f"Steepness for {rule.feature} must be positive.")
    total = sum(rule.weight for rule in rules)
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise ValueError(f"Rule weights must sum to 1.0 (got {total}).")


validate_rules(FEATURE_RULES)

RULES_BY_FEATURE: Mapping[str, FeatureRule] = MappingProxyType(
    {rule.feature: rule for rule in FEATURE_RULES}
)


def sub_scores(features: FeatureVector) -> Dict[str, float]:
    """Normalized sub-score per feature, in rule-table order."""
    return {rule.feature: rule.normalize(getattr(features, rule.feature)) for rule in FEATURE_RULES}


def aggregate(features: FeatureVector) -> Aggregate:
    """Combine the feature vector into a score, a confidence and a verdict."""
    scores = sub_scores(features)
    raw = sum(RULES_BY_FEATURE[name].weight * value for name, value in scores.items())
    if not math.isfinite(raw):
        raise ComputationFault(f"Aggregate score is not finite: {raw!r}")
    score = min(1.0, max(0.0, raw))
    return Aggregate(
        score=score,
        confidence=confidence_for(score),
        is_ai_generated=score >= DECISION_THRESHOLD,
    )


def confidence_for(score: float) -> float:
    """Distance from the decision threshold rescaled to [0, 1]."""
    return min(1.0, 2.0 * abs(score - DECISION_THRESHOLD))


def _logistic(z: float) -> float:
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    exp_z = math.exp(z)
    return exp_z / (1.0 + exp_z)
