from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ProfileLabel = Literal["human", "ai"]
ClassificationLabel = Literal["human", "ai", "uncertain"]
CitationIssueType = Literal["missing_citation", "needs_quote"]

PROFILE_LABELS: tuple[ProfileLabel, ...] = ("human", "ai")

# Attribute name to the camelCase key used in reports and stored profiles.
FEATURE_KEYS: dict[str, str] = {
    "avg_repetition": "avgRepetition",
    "avg_vocab_diversity": "avgVocabDiversity",
    "generic_rate": "genericRate",
    "transition_rate": "transitionRate",
    "uniformity": "uniformity",
}


@dataclass(slots=True, frozen=True)
class SentenceSpan:
    """A sentence and its inclusive-exclusive character offsets in the document."""

    text: str
    start: int
    end: int


@dataclass(slots=True, frozen=True)
class SentenceFeatures:
    """Stylistic sub-features of a single sentence, each in [0, 1]."""

    rep: float
    vocab_diversity: float
    generic_flag: float
    transition_density: float
    length_uniformity: float


@dataclass(slots=True, frozen=True)
class FeatureVector:
    """Document-level aggregate of sentence features, each in [0, 1]."""

    avg_repetition: float = 0.0
    avg_vocab_diversity: float = 0.0
    generic_rate: float = 0.0
    transition_rate: float = 0.0
    uniformity: float = 0.0

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return (
            self.avg_repetition,
            self.avg_vocab_diversity,
            self.generic_rate,
            self.transition_rate,
            self.uniformity,
        )


@dataclass(slots=True, frozen=True)
class SentenceScore:
    """AI-likelihood score for one sentence plus the reasons behind it."""

    span: SentenceSpan
    score: float
    reasons: tuple[str, ...]
    features: SentenceFeatures


@dataclass(slots=True, frozen=True)
class DocumentResult:
    """Aggregated AI-likelihood statistics for a full document."""

    overall_score: float
    threshold: float
    avg_sentence_length: float
    sentence_count: int
    features: FeatureVector
    flagged_sentences: tuple[SentenceScore, ...] = ()
    sentence_scores: tuple[SentenceScore, ...] = ()


@dataclass(slots=True, frozen=True)
class ReferenceProfile:
    """Feature vector captured from a known-human or known-AI sample."""

    label: ProfileLabel
    features: FeatureVector
    created_at: int


@dataclass(slots=True, frozen=True)
class ClassificationResult:
    """Outcome of comparing a document against the two reference profiles."""

    label: ClassificationLabel
    confidence: float
    distance_to_human: float | None
    distance_to_ai: float | None
    note: str


@dataclass(slots=True, frozen=True)
class CitationIssue:
    """A missing-citation hint raised for the submitted text."""

    type: CitationIssueType
    message: str
    suggestion: str | None = None


def features_to_dict(features: FeatureVector) -> dict[str, float]:
    """Serialize a feature vector with camelCase keys."""
    return {
        json_key: float(getattr(features, attr))
        for attr, json_key in FEATURE_KEYS.items()
    }
