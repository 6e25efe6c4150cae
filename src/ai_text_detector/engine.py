from __future__ import annotations

import logging
import math

from .config import DetectorConfig
from .errors import ComputationFault, InsufficientDataError, TooShortInputError
from .features import extract
from .models import AnalysisResult
from .reasons import explain
from .scoring import aggregate, sub_scores
from .tokenization import tokenize

logger = logging.getLogger(__name__)

MIN_LENGTH_ERROR = "Minimum {min_length} characters required"
UNEXPECTED_REASON = "Error analyzing text"


class DetectionEngine:
    """Runs tokenize -> extract -> aggregate/explain and never raises to its caller."""

    def __init__(self, config: DetectorConfig | None = None) -> None:
        self._config = config or DetectorConfig()

    @property
    def config(self) -> DetectorConfig:
        return self._config

    def detect(self, text: str) -> AnalysisResult:
        """Classify ``text``; failures come back as degenerate results with ``error`` set."""
        try:
            return self._analyze(text)
        except TooShortInputError as exc:
            logger.info("Rejected short input: %s", exc)
            return AnalysisResult.degenerate(exc.reason, str(exc))
        except InsufficientDataError as exc:
            logger.info("Insufficient data for analysis: %s", exc)
            return AnalysisResult.degenerate(exc.reason, str(exc))
        except ComputationFault as exc:
            logger.warning("Computation fault during analysis: %s", exc)
            return AnalysisResult.degenerate(exc.reason, str(exc))
        except Exception as exc:  # engine boundary: no fault may escape detect()
            logger.exception("Unexpected failure during analysis")
            return AnalysisResult.degenerate(UNEXPECTED_REASON, str(exc) or "Unknown error")

    def _analyze(self, text: str) -> AnalysisResult:
        cfg = self._config
        if len(text.strip()) < cfg.min_text_length:
            raise TooShortInputError(MIN_LENGTH_ERROR.format(min_length=cfg.min_text_length))

        stream = tokenize(text)
        features = extract(
            stream,
            min_sentences=cfg.min_sentences,
            min_words=cfg.min_words,
            repetition_window=cfg.repetition_window,
        )
        verdict = aggregate(features)
        reasons = explain(features, verdict.score, cfg.notable_threshold)

        perplexity_score = verdict.score * cfg.perplexity_scale
        burstiness_score = (1 - verdict.confidence) * cfg.burstiness_scale
        for name, value in (
            ("score", verdict.score),
            ("confidence", verdict.confidence),
            ("perplexity_score", perplexity_score),
            ("burstiness_score", burstiness_score),
        ):
            if not math.isfinite(value):
                raise ComputationFault(f"Result field {name} is not finite: {value!r}")

        logger.debug(
            "Verdict ai=%s score=%.4f confidence=%.4f over %d sentences / %d words",
            verdict.is_ai_generated,
            verdict.score,
            verdict.confidence,
            stream.sentence_count,
            stream.word_count,
        )
        return AnalysisResult(
            is_ai_generated=verdict.is_ai_generated,
            confidence=verdict.confidence,
            score=verdict.score,
            perplexity_score=perplexity_score,
            burstiness_score=burstiness_score,
            reasons=tuple(reasons),
            features=features if cfg.include_features else None,
            sub_scores=tuple(sub_scores(features).items()) if cfg.include_features else (),
        )


_DEFAULT_ENGINE = DetectionEngine()


def detect_ai_text(text: str, config: DetectorConfig | None = None) -> AnalysisResult:
    """Classify ``text`` with a default-configured engine unless ``config`` is given."""
    engine = _DEFAULT_ENGINE if config is None else DetectionEngine(config)
    return engine.detect(text)
