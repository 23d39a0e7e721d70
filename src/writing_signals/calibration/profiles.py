from __future__ import annotations

import logging
import time

from ..aggregation import DEFAULT_THRESHOLD
from ..classifier import classify
from ..models import ClassificationResult, FeatureVector, ProfileLabel, ReferenceProfile
from ..pipeline import analyze_document
from .profile_store import ProfileStore, profile_key

LOGGER = logging.getLogger(__name__)


def build_reference_profile(
    text: str,
    label: ProfileLabel,
    threshold: float = DEFAULT_THRESHOLD,
    created_at: int | None = None,
) -> ReferenceProfile:
    """Capture the document feature vector of a calibration sample."""
    profile_key(label)
    if not text or not text.strip():
        raise ValueError("Calibration sample text must not be empty.")
    result = analyze_document(text, threshold)
    if created_at is None:
        created_at = int(time.time() * 1000)
    return ReferenceProfile(label=label, features=result.features, created_at=created_at)


def calibrate(
    store: ProfileStore,
    label: ProfileLabel,
    text: str,
    threshold: float = DEFAULT_THRESHOLD,
) -> ReferenceProfile:
    """Build a reference profile from text and save it, replacing the old one."""
    profile = build_reference_profile(text, label, threshold)
    store.save(profile)
    LOGGER.info(
        "Captured %s profile from %d characters of sample text", label, len(text)
    )
    return profile


def classify_with_store(
    features: FeatureVector, store: ProfileStore
) -> ClassificationResult:
    """Classify features against whichever reference profiles the store holds."""
    return classify(features, store.load("human"), store.load("ai"))
