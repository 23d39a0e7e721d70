from typing import Any

import pytest

from tests.utils import AI_SAMPLE, HUMAN_SAMPLE
from writing_signals.calibration import InMemoryProfileStore, calibrate
from writing_signals.config import SignalsConfig
from writing_signals.models import features_to_dict
from writing_signals.pipeline import analyze_document
from writing_signals.report import InvalidRequestError, build_report


@pytest.mark.parametrize(
    "payload",
    [{}, {"text": 5}, {"text": ""}, {"text": "   \n"}, "raw text", None],
)
def test_invalid_requests_are_rejected(payload: Any):
    with pytest.raises(InvalidRequestError):
        build_report(payload)


def test_report_shape_for_short_plain_text():
    report = build_report({"text": HUMAN_SAMPLE})

    assert report["plagiarism"] == []
    assert report["overall"] == {
        "originalityRisk": "low",
        "citationQuality": "high",
        "aiLikelihood": "low",
    }
    assert report["aiSentenceSignals"] == []
    assert report["aiModel"]["sentenceCount"] == 1
    assert set(report["aiModel"]["features"]) == {
        "avgRepetition",
        "avgVocabDiversity",
        "genericRate",
        "transitionRate",
        "uniformity",
    }
    assert report["aiSignals"][0]["name"] == "ai_model_score"
    assert report["aiSignals"][0]["value"] == report["aiModel"]["overallAiScore"]
    assert "calibration" not in report


def test_report_flags_generic_text():
    report = build_report({"text": AI_SAMPLE})

    assert report["overall"]["aiLikelihood"] == "high"
    signals = report["aiSentenceSignals"]
    assert len(signals) == 3
    assert AI_SAMPLE[signals[1]["start"] : signals[1]["end"]] == signals[1]["sentence"]
    assert "Generic filler phrasing" in signals[0]["reasons"]


def test_report_includes_citation_issues():
    report = build_report({"text": "In 2020, 75% of students reported stress."})
    messages = [issue["message"] for issue in report["citations"]]
    assert "No Works Cited / References section detected." in messages
    assert "A statistic or year appears without a citation." in messages
    assert all("suggestion" in issue for issue in report["citations"])


def test_long_text_raises_originality_and_citation_levels():
    report = build_report({"text": "word " * 151})
    assert report["overall"]["originalityRisk"] == "medium"
    assert report["overall"]["citationQuality"] == "medium"


def test_likelihood_bands_come_from_config():
    config = SignalsConfig(ai_likelihood_high=0.1, ai_likelihood_medium=0.05)
    report = build_report({"text": HUMAN_SAMPLE}, config)
    assert report["overall"]["aiLikelihood"] == "high"


def test_threshold_comes_from_config():
    report = build_report({"text": HUMAN_SAMPLE}, SignalsConfig(threshold=0.0))
    assert report["aiModel"]["threshold"] == 0.0
    assert len(report["aiSentenceSignals"]) == 1


def test_report_includes_calibration_when_store_given():
    store = InMemoryProfileStore()
    missing = build_report({"text": AI_SAMPLE}, store=store)["calibration"]
    assert missing["label"] == "uncertain"
    assert missing["confidence"] == 0.0
    assert missing["dHuman"] is None and missing["dAI"] is None

    calibrate(store, "human", HUMAN_SAMPLE)
    calibrate(store, "ai", AI_SAMPLE)
    verdict = build_report({"text": AI_SAMPLE}, store=store)["calibration"]
    assert verdict["label"] == "ai"
    assert verdict["dAI"] == pytest.approx(0.0)


def test_report_features_use_model_serialization():
    report = build_report({"text": AI_SAMPLE})
    expected = features_to_dict(analyze_document(AI_SAMPLE).features)
    assert report["aiModel"]["features"] == expected
