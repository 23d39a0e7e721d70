from __future__ import annotations

from typing import Any, cast

import numpy as np

from .models import ClassificationResult, FeatureVector, ReferenceProfile
from .tokenization import clamp01

np = cast(Any, np)

# Margin magnitude treated as fully confident; larger margins saturate at 1.
CONFIDENCE_SCALE = 0.25
# Margins smaller than this are too close to call either way.
UNCERTAINTY_BAND = 0.06

NOTE_MISSING = "Missing calibration profiles. Save a human and an AI profile first."
NOTE_UNCERTAIN = "Close to both profiles (uncertain)."
NOTE_PROXIMITY = "Closer to one reference profile (not proof)."


def distance(a: FeatureVector, b: FeatureVector) -> float:
    """Euclidean distance between two feature vectors in 5-D feature space."""
    diff = np.asarray(a.as_tuple(), dtype=float) - np.asarray(b.as_tuple(), dtype=float)
    return float(np.sqrt(np.sum(diff**2)))


def classify(
    features: FeatureVector,
    human: ReferenceProfile | None,
    ai: ReferenceProfile | None,
) -> ClassificationResult:
    """Label a document by its proximity to the human and AI reference profiles."""
    if human is None or ai is None:
        return ClassificationResult(
            label="uncertain",
            confidence=0.0,
            distance_to_human=None,
            distance_to_ai=None,
            note=NOTE_MISSING,
        )

    d_human = distance(features, human.features)
    d_ai = distance(features, ai.features)
    # Positive margin means the document sits closer to the human profile.
    margin = d_ai - d_human
    confidence = clamp01(abs(margin) / CONFIDENCE_SCALE)

    if abs(margin) < UNCERTAINTY_BAND:
        return ClassificationResult(
            label="uncertain",
            confidence=confidence,
            distance_to_human=d_human,
            distance_to_ai=d_ai,
            note=NOTE_UNCERTAIN,
        )

    return ClassificationResult(
        label="human" if margin > 0 else "ai",
        confidence=confidence,
        distance_to_human=d_human,
        distance_to_ai=d_ai,
        note=NOTE_PROXIMITY,
    )
