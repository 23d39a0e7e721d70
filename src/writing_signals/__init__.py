"""
writing_signals package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .calibration import (
    InMemoryProfileStore,
    JsonProfileStore,
    ProfileStore,
    build_reference_profile,
    calibrate,
)
from .citations import find_citation_issues
from .classifier import classify
from .config import SignalsConfig, config_from_dict, config_from_yaml, load_config
from .pipeline import analyze_document
from .report import InvalidRequestError, build_report
from .segmentation import segment

__all__ = [
    "SignalsConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "analyze_document",
    "segment",
    "classify",
    "find_citation_issues",
    "ProfileStore",
    "InMemoryProfileStore",
    "JsonProfileStore",
    "build_reference_profile",
    "calibrate",
    "build_report",
    "InvalidRequestError",
]

__version__ = "0.1.0"
