import math

import pytest

from tests.utils import make_profile, make_vector
from writing_signals.classifier import (
    NOTE_MISSING,
    NOTE_PROXIMITY,
    NOTE_UNCERTAIN,
    classify,
    distance,
)


def test_distance_is_euclidean_over_five_components():
    assert distance(make_vector(0.0), make_vector(1.0)) == pytest.approx(math.sqrt(5))
    assert distance(make_vector(0.3), make_vector(0.3)) == 0.0


@pytest.mark.parametrize("missing", ["human", "ai"])
def test_missing_profile_yields_uncertain_with_zero_confidence(missing: str):
    features = make_vector(0.5)
    human = None if missing == "human" else make_profile("human", make_vector(0.2))
    ai = None if missing == "ai" else make_profile("ai", make_vector(0.8))

    result = classify(features, human, ai)

    assert result.label == "uncertain"
    assert result.confidence == 0.0
    assert result.distance_to_human is None
    assert result.distance_to_ai is None
    assert result.note == NOTE_MISSING


def test_closer_profile_wins_outside_uncertainty_band():
    probe = make_vector(0.5)
    human = make_profile("human", make_vector(0.5))
    ai = make_profile("ai", make_vector(0.5, uniformity=0.6))

    result = classify(probe, human, ai)

    assert result.label == "human"
    assert result.distance_to_human == pytest.approx(0.0)
    assert result.distance_to_ai == pytest.approx(0.1)
    assert result.confidence == pytest.approx(0.4)
    assert result.note == NOTE_PROXIMITY


def test_swapping_profiles_flips_label_and_keeps_confidence():
    probe = make_vector(0.5)
    near = make_vector(0.5, avg_repetition=0.45)
    far = make_vector(0.5, avg_repetition=0.65)

    straight = classify(probe, make_profile("human", near), make_profile("ai", far))
    swapped = classify(probe, make_profile("human", far), make_profile("ai", near))

    assert straight.label == "human"
    assert swapped.label == "ai"
    assert straight.confidence == pytest.approx(swapped.confidence)
    assert straight.distance_to_human == pytest.approx(swapped.distance_to_ai)


def test_margin_inside_band_is_uncertain():
    probe = make_vector(0.5)
    human = make_profile("human", make_vector(0.5, generic_rate=0.52))
    ai = make_profile("ai", make_vector(0.5, generic_rate=0.55))

    result = classify(probe, human, ai)

    assert result.label == "uncertain"
    assert result.note == NOTE_UNCERTAIN
    assert result.confidence == pytest.approx(0.03 / 0.25)
    assert result.distance_to_human is not None


def test_large_margin_saturates_confidence():
    probe = make_vector(0.0)
    result = classify(
        probe, make_profile("human", make_vector(1.0)), make_profile("ai", make_vector(0.0))
    )
    assert result.label == "ai"
    assert result.confidence == 1.0
