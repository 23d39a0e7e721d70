from __future__ import annotations

import json
import logging
import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping

from ..models import (
    FEATURE_KEYS,
    PROFILE_LABELS,
    FeatureVector,
    ProfileLabel,
    ReferenceProfile,
    features_to_dict,
)
from ..tokenization import clamp01

LOGGER = logging.getLogger(__name__)

# Storage keys carry a schema version so older layouts can be ignored.
PROFILE_KEYS: Dict[str, str] = {
    "human": "calibration_human_v1",
    "ai": "calibration_ai_v1",
}


class ProfileStore(ABC):
    """Key-value storage for calibration reference profiles, keyed by label."""

    @abstractmethod
    def save(self, profile: ReferenceProfile) -> None:
        """Persist a profile, replacing any profile with the same label."""
        raise NotImplementedError

    @abstractmethod
    def load(self, label: ProfileLabel) -> ReferenceProfile | None:
        """Return the stored profile for label, or None when absent or unreadable."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored profile."""
        raise NotImplementedError


class InMemoryProfileStore(ProfileStore):
    """Profile store held in process memory."""

    def __init__(self) -> None:
        self._profiles: Dict[str, ReferenceProfile] = {}

    def save(self, profile: ReferenceProfile) -> None:
        self._profiles[profile_key(profile.label)] = profile

    def load(self, label: ProfileLabel) -> ReferenceProfile | None:
        return self._profiles.get(profile_key(label))

    def clear(self) -> None:
        self._profiles.clear()


class JsonProfileStore(ProfileStore):
    """Profile store backed by a single JSON document on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def save(self, profile: ReferenceProfile) -> None:
        entries = self._read_entries()
        entries[profile_key(profile.label)] = profile_to_dict(profile)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        LOGGER.info("Saved %s calibration profile to %s", profile.label, self.path)

    def load(self, label: ProfileLabel) -> ReferenceProfile | None:
        key = profile_key(label)
        raw = self._read_entries().get(key)
        if raw is None:
            return None
        try:
            profile = profile_from_dict(raw)
        except (KeyError, TypeError, ValueError, OverflowError) as exc:
            LOGGER.warning("Ignoring malformed %s profile in %s: %s", label, self.path, exc)
            return None
        if profile.label != label:
            LOGGER.warning(
                "Ignoring %s profile stored under the %s key in %s",
                profile.label,
                label,
                self.path,
            )
            return None
        return profile

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            LOGGER.info("Cleared calibration profiles at %s", self.path)

    def _read_entries(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            parsed = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("Unable to read calibration profiles at %s: %s", self.path, exc)
            return {}
        if not isinstance(parsed, dict):
            LOGGER.warning("Calibration store %s does not hold a JSON object.", self.path)
            return {}
        return parsed


def profile_key(label: str) -> str:
    if label not in PROFILE_LABELS:
        raise ValueError(f"Unknown profile label '{label}'. Expected 'human' or 'ai'.")
    return PROFILE_KEYS[label]


def features_from_dict(data: Mapping[str, Any]) -> FeatureVector:
    values = {
        attr: clamp01(_finite(data[json_key], json_key))
        for attr, json_key in FEATURE_KEYS.items()
    }
    return FeatureVector(**values)


def _finite(value: Any, name: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"Stored {name} must be a finite number, got {value!r}.")
    return number


def profile_to_dict(profile: ReferenceProfile) -> dict[str, Any]:
    return {
        "label": profile.label,
        "features": features_to_dict(profile.features),
        "createdAt": profile.created_at,
    }


def profile_from_dict(data: Mapping[str, Any]) -> ReferenceProfile:
    """Rebuild a profile from its stored mapping, validating the label."""
    if not isinstance(data, Mapping):
        raise TypeError("Stored profile must be a JSON object.")
    label = data["label"]
    profile_key(label)
    features = data["features"]
    if not isinstance(features, Mapping):
        raise TypeError("Stored profile features must be a JSON object.")
    return ReferenceProfile(
        label=label,
        features=features_from_dict(features),
        created_at=int(_finite(data["createdAt"], "createdAt")),
    )
