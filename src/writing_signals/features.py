from __future__ import annotations

from typing import Iterable, Sequence

from .models import SentenceFeatures
from .tokenization import clamp01, tokenize_words

# Boilerplate phrasing commonly produced by text generators. Matched as
# case-insensitive substrings.
GENERIC_PHRASES: tuple[str, ...] = (
    "in today's world",
    "it is important to note",
    "this shows that",
    "overall",
    "in conclusion",
    "a wide range of",
    "plays a crucial role",
    "significantly",
    "various",
    "moreover",
    "furthermore",
)

# Each transition word counts at most once per sentence.
TRANSITION_WORDS: tuple[str, ...] = (
    "moreover",
    "furthermore",
    "additionally",
    "therefore",
    "however",
    "overall",
)

# Number of distinct transition words that saturates the density at 1.
TRANSITION_SATURATION = 2


def repetition(tokens: Sequence[str]) -> float:
    """Fraction of tokens that repeat an earlier token."""
    return 1.0 - len(set(tokens)) / max(len(tokens), 1)


def vocab_diversity(tokens: Sequence[str]) -> float:
    """Unique-to-total token ratio."""
    return len(set(tokens)) / max(len(tokens), 1)


def has_generic_phrase(sentence: str, phrases: Iterable[str] = GENERIC_PHRASES) -> bool:
    lowered = sentence.lower()
    return any(phrase in lowered for phrase in phrases)


def transition_density(
    sentence: str, transitions: Iterable[str] = TRANSITION_WORDS
) -> float:
    lowered = sentence.lower()
    count = sum(1 for word in transitions if word in lowered)
    return min(count / TRANSITION_SATURATION, 1.0)


def length_uniformity(sentence_length: int, avg_length: float) -> float:
    """
    Closeness of a sentence's character length to the document mean.

    Returns 1.0 when the length matches the mean exactly and falls to 0.0 once
    the deviation reaches the mean itself.
    """
    deviation = abs(sentence_length - avg_length) / max(avg_length, 1.0)
    return 1.0 - clamp01(deviation)


def extract(
    sentence: str,
    avg_sentence_length: float,
    *,
    generic_phrases: Iterable[str] = GENERIC_PHRASES,
    transition_words: Iterable[str] = TRANSITION_WORDS,
) -> SentenceFeatures:
    """Compute the five stylistic sub-features for a single sentence."""
    tokens = tokenize_words(sentence)
    return SentenceFeatures(
        rep=clamp01(repetition(tokens)),
        vocab_diversity=clamp01(vocab_diversity(tokens)),
        generic_flag=1.0 if has_generic_phrase(sentence, generic_phrases) else 0.0,
        transition_density=clamp01(transition_density(sentence, transition_words)),
        length_uniformity=length_uniformity(len(sentence), avg_sentence_length),
    )
