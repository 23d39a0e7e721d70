from __future__ import annotations

import re
from typing import List

from .models import SentenceSpan

# A run of non-terminators closed by one or more of . ! ?, or a trailing
# unterminated fragment at the end of the text.
SENTENCE_PATTERN = re.compile(r"[^.!?]+[.!?]+|\s*[^.!?]+\Z")


def segment(text: str) -> List[SentenceSpan]:
    """Split text into sentence spans whose offsets index the original text."""
    spans: List[SentenceSpan] = []
    if not text:
        return spans

    for match in SENTENCE_PATTERN.finditer(text):
        raw = match.group()
        sentence = raw.strip()
        if not sentence:
            continue
        start = match.start() + (len(raw) - len(raw.lstrip()))
        spans.append(SentenceSpan(text=sentence, start=start, end=start + len(sentence)))
    return spans
