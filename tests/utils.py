from __future__ import annotations

from writing_signals.models import FeatureVector, ReferenceProfile

HUMAN_SAMPLE = "The cat sat on the mat."
AI_SENTENCE = "Moreover, this shows that this shows that this is important."
AI_SAMPLE = " ".join([AI_SENTENCE] * 3)

MIXED_TEXT = (
    "The storm clouds rolled over the bay. "
    "Moreover, this shows that this shows that this is important. "
    "Sailors watched the winds shift while gulls wheeled overhead. "
    "Overall, it is important to note that various factors play a role. "
    "Nobody slept"
)


def make_vector(value: float = 0.5, **overrides: float) -> FeatureVector:
    """Build a FeatureVector with every component set to value unless overridden."""
    components = {
        "avg_repetition": value,
        "avg_vocab_diversity": value,
        "generic_rate": value,
        "transition_rate": value,
        "uniformity": value,
    }
    components.update(overrides)
    return FeatureVector(**components)


def make_profile(label: str, features: FeatureVector, created_at: int = 0) -> ReferenceProfile:
    return ReferenceProfile(label=label, features=features, created_at=created_at)  # type: ignore[arg-type]
