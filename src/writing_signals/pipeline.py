from __future__ import annotations

import logging
from statistics import fmean
from typing import List

from .aggregation import DEFAULT_THRESHOLD, aggregate
from .features import extract
from .models import DocumentResult, SentenceScore, SentenceSpan
from .scoring import score_sentence
from .segmentation import segment

LOGGER = logging.getLogger(__name__)


def analyze_document(text: str, threshold: float = DEFAULT_THRESHOLD) -> DocumentResult:
    """Run segmentation, feature extraction, scoring and aggregation over text."""
    spans = segment(text)
    avg_length = average_sentence_length(spans)
    scores = score_spans(spans, avg_length)
    result = aggregate(scores, threshold, avg_sentence_length=avg_length)
    LOGGER.debug(
        "Analyzed %d sentences: overall=%.3f flagged=%d threshold=%.2f",
        result.sentence_count,
        result.overall_score,
        len(result.flagged_sentences),
        threshold,
    )
    return result


def average_sentence_length(spans: List[SentenceSpan]) -> float:
    """Mean character length of the trimmed sentences (0.0 when empty)."""
    if not spans:
        return 0.0
    return fmean(len(span.text) for span in spans)


def score_spans(spans: List[SentenceSpan], avg_length: float) -> List[SentenceScore]:
    """Extract features for each span and score it."""
    scores: List[SentenceScore] = []
    for span in spans:
        features = extract(span.text, avg_length)
        scores.append(score_sentence(span, features))
    return scores
