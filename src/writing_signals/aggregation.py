from __future__ import annotations

from statistics import fmean
from typing import Callable, Sequence

from .models import DocumentResult, FeatureVector, SentenceFeatures, SentenceScore
from .scoring import explain_flagged
from .tokenization import clamp01

DEFAULT_THRESHOLD = 0.35

# Blend of average sentence intensity and breadth of flagged sentences.
AVERAGE_SCORE_WEIGHT = 0.65
FLAGGED_RATIO_WEIGHT = 0.35


def aggregate(
    sentence_scores: Sequence[SentenceScore],
    threshold: float = DEFAULT_THRESHOLD,
    avg_sentence_length: float = 0.0,
) -> DocumentResult:
    """Combine sentence scores into a document-level result."""
    if not sentence_scores:
        return DocumentResult(
            overall_score=0.0,
            threshold=threshold,
            avg_sentence_length=avg_sentence_length,
            sentence_count=0,
            features=FeatureVector(),
        )

    flagged = tuple(
        explain_flagged(sentence)
        for sentence in sentence_scores
        if sentence.score >= threshold
    )
    avg_score = fmean(sentence.score for sentence in sentence_scores)
    flagged_ratio = len(flagged) / len(sentence_scores)
    overall = clamp01(
        AVERAGE_SCORE_WEIGHT * avg_score + FLAGGED_RATIO_WEIGHT * flagged_ratio
    )

    return DocumentResult(
        overall_score=overall,
        threshold=threshold,
        avg_sentence_length=avg_sentence_length,
        sentence_count=len(sentence_scores),
        features=document_features([s.features for s in sentence_scores]),
        flagged_sentences=flagged,
        sentence_scores=tuple(sentence_scores),
    )


def document_features(features: Sequence[SentenceFeatures]) -> FeatureVector:
    """Average each sentence sub-feature into a clamped document feature vector."""
    if not features:
        return FeatureVector()

    def _mean(getter: Callable[[SentenceFeatures], float]) -> float:
        return clamp01(fmean(getter(item) for item in features))

    return FeatureVector(
        avg_repetition=_mean(lambda f: f.rep),
        avg_vocab_diversity=_mean(lambda f: f.vocab_diversity),
        generic_rate=_mean(lambda f: f.generic_flag),
        transition_rate=_mean(lambda f: f.transition_density),
        uniformity=_mean(lambda f: f.length_uniformity),
    )
