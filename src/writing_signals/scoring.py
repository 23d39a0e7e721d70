from __future__ import annotations

from typing import List, Tuple

from .models import SentenceFeatures, SentenceScore, SentenceSpan
from .tokenization import clamp01

# Linear weights over the sentence sub-features. They are provisional
# calibration values, preserved exactly so scores stay comparable across runs.
REPETITION_WEIGHT = 1.25
LOW_DIVERSITY_WEIGHT = 1.10
UNIFORMITY_WEIGHT = 0.80
GENERIC_WEIGHT = 0.90
TRANSITION_WEIGHT = 0.70

# Sum of the weights, so a sentence maxing every sub-feature scores 1.0.
SCORE_NORMALIZER = 4.5

REPETITION_REASON_THRESHOLD = 0.35
DIVERSITY_REASON_THRESHOLD = 0.55
UNIFORMITY_REASON_THRESHOLD = 0.8
TRANSITION_REASON_THRESHOLD = 0.5

REASON_REPETITION = "Repetitive word patterns"
REASON_LOW_DIVERSITY = "Low vocabulary diversity"
REASON_UNIFORM_LENGTH = "Sentence length looks very uniform"
REASON_GENERIC = "Generic filler phrasing"
REASON_TRANSITIONS = "Heavy transition-word use"
FALLBACK_REASON = "Pattern-based AI signal"


def score(features: SentenceFeatures) -> Tuple[float, List[str]]:
    """Combine sentence sub-features into an AI-likelihood score and reasons."""
    raw = (
        REPETITION_WEIGHT * features.rep
        + LOW_DIVERSITY_WEIGHT * (1.0 - features.vocab_diversity)
        + UNIFORMITY_WEIGHT * features.length_uniformity
        + GENERIC_WEIGHT * features.generic_flag
        + TRANSITION_WEIGHT * features.transition_density
    )

    reasons: List[str] = []
    if features.rep > REPETITION_REASON_THRESHOLD:
        reasons.append(REASON_REPETITION)
    if features.vocab_diversity < DIVERSITY_REASON_THRESHOLD:
        reasons.append(REASON_LOW_DIVERSITY)
    if features.length_uniformity > UNIFORMITY_REASON_THRESHOLD:
        reasons.append(REASON_UNIFORM_LENGTH)
    if features.generic_flag > 0:
        reasons.append(REASON_GENERIC)
    if features.transition_density > TRANSITION_REASON_THRESHOLD:
        reasons.append(REASON_TRANSITIONS)

    return clamp01(raw / SCORE_NORMALIZER), reasons


def score_sentence(span: SentenceSpan, features: SentenceFeatures) -> SentenceScore:
    """Score a sentence span given its pre-computed features."""
    value, reasons = score(features)
    return SentenceScore(
        span=span, score=value, reasons=tuple(reasons), features=features
    )


def explain_flagged(sentence: SentenceScore) -> SentenceScore:
    """Return the sentence with the fallback reason when no threshold fired."""
    if sentence.reasons:
        return sentence
    return SentenceScore(
        span=sentence.span,
        score=sentence.score,
        reasons=(FALLBACK_REASON,),
        features=sentence.features,
    )
