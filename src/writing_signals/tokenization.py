from __future__ import annotations

import re
from typing import List

TOKEN_SPLIT_PATTERN = re.compile(r"[^a-z0-9']+", re.IGNORECASE)


def tokenize_words(text: str) -> List[str]:
    """Lower-case text and split it into word tokens, dropping empties."""
    return [token for token in TOKEN_SPLIT_PATTERN.split(text.lower()) if token]


def clamp01(value: float) -> float:
    """Clamp a value into the closed interval [0, 1]."""
    return max(0.0, min(1.0, value))
