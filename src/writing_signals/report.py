from __future__ import annotations

import logging
from typing import Any, List, Literal, Mapping, TypedDict

from .calibration import ProfileStore, classify_with_store
from .citations import find_citation_issues
from .config import SignalsConfig
from .models import (
    CitationIssue,
    ClassificationResult,
    DocumentResult,
    SentenceScore,
    features_to_dict,
)
from .pipeline import analyze_document

LOGGER = logging.getLogger(__name__)

AI_SCORE_EXPLANATION = (
    "Pattern-based score using repetition, vocabulary diversity, sentence "
    "uniformity, and generic phrasing. Not proof."
)

Level = Literal["low", "medium", "high"]


class InvalidRequestError(ValueError):
    """Raised when a report request does not carry usable text."""


class OverallPayload(TypedDict):
    originalityRisk: Level
    citationQuality: Level
    aiLikelihood: Level


class CitationPayload(TypedDict, total=False):
    type: str
    message: str
    suggestion: str


class AISignalPayload(TypedDict):
    name: str
    value: float
    explanation: str


class SentenceSignalPayload(TypedDict):
    sentence: str
    start: int
    end: int
    score: float
    reasons: List[str]


class AIModelPayload(TypedDict):
    overallAiScore: float
    threshold: float
    avgSentenceLength: float
    sentenceCount: int
    features: dict[str, float]


class ClassificationPayload(TypedDict):
    label: str
    confidence: float
    dHuman: float | None
    dAI: float | None
    note: str


class ReportPayload(TypedDict, total=False):
    overall: OverallPayload
    plagiarism: List[Any]
    citations: List[CitationPayload]
    aiSignals: List[AISignalPayload]
    aiSentenceSignals: List[SentenceSignalPayload]
    aiModel: AIModelPayload
    calibration: ClassificationPayload


def validate_request(payload: Any) -> str:
    """Return the request text, raising InvalidRequestError when it is unusable."""
    if not isinstance(payload, Mapping):
        raise InvalidRequestError("No text provided")
    text = payload.get("text")
    if not isinstance(text, str) or not text.strip():
        raise InvalidRequestError("No text provided")
    return text


def build_report(
    payload: Any,
    config: SignalsConfig | None = None,
    store: ProfileStore | None = None,
) -> ReportPayload:
    """Validate a {"text": ...} request and build the merged signal report."""
    cfg = config or SignalsConfig()
    text = validate_request(payload)
    word_count = len(text.split())
    result = analyze_document(text, cfg.threshold)
    long_text = word_count > cfg.long_text_word_count

    report: ReportPayload = {
        "overall": {
            "originalityRisk": "medium" if long_text else "low",
            "citationQuality": "medium" if long_text else "high",
            "aiLikelihood": ai_likelihood_level(result.overall_score, cfg),
        },
        # Source matching is not performed; the list is always empty.
        "plagiarism": [],
        "citations": [citation_dict(issue) for issue in find_citation_issues(text)],
        "aiSignals": [
            {
                "name": "ai_model_score",
                "value": result.overall_score,
                "explanation": AI_SCORE_EXPLANATION,
            }
        ],
        "aiSentenceSignals": [
            sentence_signal_dict(sentence) for sentence in result.flagged_sentences
        ],
        "aiModel": ai_model_dict(result),
    }
    if store is not None:
        report["calibration"] = classification_dict(
            classify_with_store(result.features, store)
        )
    LOGGER.info(
        "Built report: words=%d sentences=%d ai_score=%.3f citations=%d",
        word_count,
        result.sentence_count,
        result.overall_score,
        len(report["citations"]),
    )
    return report


def ai_likelihood_level(score: float, config: SignalsConfig) -> Level:
    if score > config.ai_likelihood_high:
        return "high"
    if score > config.ai_likelihood_medium:
        return "medium"
    return "low"


def citation_dict(issue: CitationIssue) -> CitationPayload:
    payload: CitationPayload = {"type": issue.type, "message": issue.message}
    if issue.suggestion is not None:
        payload["suggestion"] = issue.suggestion
    return payload


def sentence_signal_dict(sentence: SentenceScore) -> SentenceSignalPayload:
    return {
        "sentence": sentence.span.text,
        "start": sentence.span.start,
        "end": sentence.span.end,
        "score": sentence.score,
        "reasons": list(sentence.reasons),
    }


def ai_model_dict(result: DocumentResult) -> AIModelPayload:
    return {
        "overallAiScore": result.overall_score,
        "threshold": result.threshold,
        "avgSentenceLength": result.avg_sentence_length,
        "sentenceCount": result.sentence_count,
        "features": features_to_dict(result.features),
    }


def classification_dict(result: ClassificationResult) -> ClassificationPayload:
    return {
        "label": result.label,
        "confidence": result.confidence,
        "dHuman": result.distance_to_human,
        "dAI": result.distance_to_ai,
        "note": result.note,
    }
