from __future__ import annotations

from .profile_store import InMemoryProfileStore, JsonProfileStore, ProfileStore
from .profiles import build_reference_profile, calibrate, classify_with_store

__all__ = [
    "ProfileStore",
    "InMemoryProfileStore",
    "JsonProfileStore",
    "build_reference_profile",
    "calibrate",
    "classify_with_store",
]
