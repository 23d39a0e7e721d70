from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml


@dataclass(slots=True)
class SignalsConfig:
    """Thresholds and paths shared by the report, the CLI and calibration.

    ``threshold`` is the sentence score at or above which a sentence is
    flagged. ``ai_likelihood_medium`` / ``ai_likelihood_high`` bucket the
    document score into low/medium/high, and ``long_text_word_count`` is the
    word count above which originality and citation levels drop to medium.
    """

    threshold: float = 0.35
    profile_store_path: str = "data/calibration/profiles.json"
    ai_likelihood_high: float = 0.68
    ai_likelihood_medium: float = 0.52
    long_text_word_count: int = 150

    def validate(self) -> "SignalsConfig":
        """Raise ValueError when a value is out of range; return self otherwise."""
        for name in ("threshold", "ai_likelihood_medium", "ai_likelihood_high"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must lie in [0, 1], got {value}.")
        if self.ai_likelihood_medium > self.ai_likelihood_high:
            raise ValueError("ai_likelihood_medium must not exceed ai_likelihood_high.")
        if self.long_text_word_count < 0:
            raise ValueError("long_text_word_count must not be negative.")
        if not self.profile_store_path:
            raise ValueError("profile_store_path must not be empty.")
        return self

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# YAML scalars are coerced to the field's type; unknown keys are dropped.
_COERCE = {
    "threshold": float,
    "profile_store_path": str,
    "ai_likelihood_high": float,
    "ai_likelihood_medium": float,
    "long_text_word_count": int,
}


def config_from_dict(data: Mapping[str, Any] | None) -> SignalsConfig:
    """Build a validated SignalsConfig from a dictionary-like input."""
    if not data:
        return SignalsConfig()
    known = {field.name for field in fields(SignalsConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            continue
        try:
            kwargs[key] = _COERCE[key](value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid value for {key}: {value!r}") from exc
    return SignalsConfig(**kwargs).validate()


def config_from_yaml(path: str | Path) -> SignalsConfig:
    """Load configuration from a YAML file."""
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if parsed is None:
        return SignalsConfig()
    if not isinstance(parsed, Mapping):
        raise ValueError(f"Configuration YAML in {path} must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> SignalsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    return SignalsConfig() if path is None else config_from_yaml(path)
