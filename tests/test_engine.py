from concurrent.futures import ThreadPoolExecutor

import pytest

import ai_text_detector.engine as engine_module
from ai_text_detector import DetectionEngine, DetectorConfig, detect_ai_text
from ai_text_detector.models import FeatureVector
from ai_text_detector.reasons import rank_evidence
from ai_text_detector.samples import SAMPLES
from tests.utils import BURSTY_HUMAN_TEXT, UNIFORM_TRANSITION_TEXT

VALID_TEXTS = [UNIFORM_TRANSITION_TEXT, BURSTY_HUMAN_TEXT, *SAMPLES.values()]


@pytest.mark.parametrize("text", ["", "short text", " " * 80, "x" * 49, "  " + "y" * 49 + "\n"])
def test_short_input_returns_degenerate_result(text):
    result = detect_ai_text(text)

    assert result.error == "Minimum 50 characters required"
    assert result.reasons == ("Text too short for reliable analysis",)
    assert result.is_ai_generated is False
    assert result.confidence == 0
    assert result.score == 0
    assert result.perplexity_score == 0
    assert result.burstiness_score == 0
    assert result.is_degenerate


def test_insufficient_data_has_distinct_error():
    text = "This single sentence is comfortably long enough to pass the length check"

    result = detect_ai_text(text)

    assert result.is_degenerate
    assert result.error is not None
    assert "sentences" in result.error
    assert result.error != "Minimum 50 characters required"
    assert result.is_ai_generated is False
    assert result.score == 0 and result.confidence == 0


@pytest.mark.parametrize("text", VALID_TEXTS)
def test_valid_text_properties(text):
    result = detect_ai_text(text)

    assert result.error is None
    assert 0.0 <= result.score <= 1.0
    assert 0.0 <= result.confidence <= 1.0
    assert result.is_ai_generated == (result.score >= 0.5)
    assert result.confidence == min(1.0, 2 * abs(result.score - 0.5))
    assert result.perplexity_score == result.score * 10
    assert result.burstiness_score == (1 - result.confidence) * 10
    assert result.reasons


@pytest.mark.parametrize("text", VALID_TEXTS)
def test_reasons_are_sorted_by_evidence(text):
    result = detect_ai_text(text)
    assert result.features is not None
    evidence = rank_evidence(result.features, result.score)

    strengths = [strength for _, strength in evidence]
    assert strengths == sorted(strengths, reverse=True)
    if evidence:
        assert len(result.reasons) == len(evidence)


def test_detect_is_idempotent():
    engine = DetectionEngine()
    for text in VALID_TEXTS:
        assert engine.detect(text) == engine.detect(text)


def test_concurrent_calls_match_sequential_results():
    expected = [detect_ai_text(text) for text in VALID_TEXTS]
    with ThreadPoolExecutor(max_workers=4) as pool:
        actual = list(pool.map(detect_ai_text, VALID_TEXTS * 3))

    assert actual == expected * 3


def test_uniform_transition_text_is_ai_generated():
    result = detect_ai_text(UNIFORM_TRANSITION_TEXT)

    assert result.is_ai_generated
    assert result.score > 0.5
    assert any("Sentence length is unusually uniform" in reason for reason in result.reasons)


def test_bursty_text_is_human():
    result = detect_ai_text(BURSTY_HUMAN_TEXT)

    assert result.features is not None
    assert result.features.sentence_length_variance == 66.5
    assert result.features.transition_word_density == 0.0
    assert result.is_ai_generated is False


def test_non_finite_feature_becomes_degenerate(monkeypatch):
    nan = float("nan")
    monkeypatch.setattr(
        engine_module,
        "extract",
        lambda stream, **_: FeatureVector(nan, nan, nan, nan, nan, nan, nan, nan),
    )

    result = DetectionEngine().detect(BURSTY_HUMAN_TEXT)

    assert result.is_degenerate
    assert result.error is not None and "not finite" in result.error
    assert result.is_ai_generated is False
    assert result.confidence == 0


def test_unexpected_failure_never_escapes(monkeypatch):
    def boom(_text):
        raise RuntimeError("tokenizer exploded")

    monkeypatch.setattr(engine_module, "tokenize", boom)

    result = DetectionEngine().detect(BURSTY_HUMAN_TEXT)

    assert result.error == "tokenizer exploded"
    assert result.reasons == ("Error analyzing text",)
    assert result.is_ai_generated is False


def test_non_string_input_is_recovered():
    result = DetectionEngine().detect(None)  # type: ignore[arg-type]

    assert result.is_degenerate
    assert result.is_ai_generated is False


def test_config_controls_preconditions_and_payload():
    config = DetectorConfig(min_text_length=10, include_features=False)
    engine = DetectionEngine(config)

    short_result = engine.detect("A short one. Two.")
    full_result = engine.detect(BURSTY_HUMAN_TEXT)

    assert short_result.error is not None
    assert "Minimum" not in short_result.error
    assert full_result.features is None
    assert "features" not in full_result.to_dict()
    assert "subScores" not in full_result.to_dict()


def test_to_dict_uses_wire_names():
    payload = detect_ai_text(UNIFORM_TRANSITION_TEXT).to_dict()

    assert payload["isAIGenerated"] is True
    assert set(payload) >= {
        "isAIGenerated",
        "confidence",
        "score",
        "perplexityScore",
        "burstinessScore",
        "reasons",
        "features",
        "subScores",
    }
    assert "error" not in payload
    assert payload["features"]["sentenceLengthVariance"] == 0.0

    degenerate = detect_ai_text("").to_dict()
    assert degenerate["error"] == "Minimum 50 characters required"
    assert "features" not in degenerate
