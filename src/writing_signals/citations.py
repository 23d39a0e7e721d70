from __future__ import annotations

import re
from typing import List

from .models import CitationIssue

REFERENCE_SECTION_RE = re.compile(r"\b(works cited|references|bibliography)\b", re.IGNORECASE)

# (Smith 2020), (Smith), [3]
INLINE_CITATION_RE = re.compile(
    r"\([^)]+\d{2,4}[^)]*\)|\([A-Z][a-zA-Z-]+[^)]*\)|\[\d+\]"
)

YEAR_RE = re.compile(r"\b(19|20)\d{2}\b")
NUMBER_RE = re.compile(r"\b\d+(\.\d+)?%?\b")
QUANTITY_WORD_RE = re.compile(r"\b(million|billion|percent|%)\b", re.IGNORECASE)
QUOTE_RE = re.compile(r'"[^"]{10,}"')
LINE_SPLIT_RE = re.compile(r"\r?\n")

MIN_STATISTIC_LINE_LENGTH = 10

MISSING_SECTION = CitationIssue(
    type="missing_citation",
    message="No Works Cited / References section detected.",
    suggestion="Add a Works Cited (MLA) or References (APA) section.",
)
UNCITED_STATISTIC = CitationIssue(
    type="missing_citation",
    message="A statistic or year appears without a citation.",
    suggestion="Add an in-text citation after this sentence.",
)
UNCITED_QUOTE = CitationIssue(
    type="needs_quote",
    message="A direct quote appears without a citation.",
    suggestion="Add an in-text citation immediately after the quote.",
)


def has_reference_section(text: str) -> bool:
    return REFERENCE_SECTION_RE.search(text) is not None


def has_inline_citation(line: str) -> bool:
    return INLINE_CITATION_RE.search(line) is not None


def split_lines(text: str) -> List[str]:
    """Split text into trimmed, non-blank lines."""
    return [line.strip() for line in LINE_SPLIT_RE.split(text) if line.strip()]


def has_statistic(line: str) -> bool:
    return bool(
        YEAR_RE.search(line) or NUMBER_RE.search(line) or QUANTITY_WORD_RE.search(line)
    )


def find_citation_issues(text: str) -> List[CitationIssue]:
    """Return citation hints for the text, de-duplicated by message in first-seen order."""
    issues: List[CitationIssue] = []
    if not has_reference_section(text):
        issues.append(MISSING_SECTION)

    for line in split_lines(text):
        cited = has_inline_citation(line)
        if (
            has_statistic(line)
            and not cited
            and len(line) >= MIN_STATISTIC_LINE_LENGTH
        ):
            issues.append(UNCITED_STATISTIC)
        if QUOTE_RE.search(line) and not cited:
            issues.append(UNCITED_QUOTE)

    seen: set[str] = set()
    unique: List[CitationIssue] = []
    for issue in issues:
        if issue.message in seen:
            continue
        seen.add(issue.message)
        unique.append(issue)
    return unique
