"""Deterministic word tokenizer for coverage matching.

No stemming, no synonyms: text is lower-cased, punctuation becomes a word
separator, and a fixed list of stop words is dropped.
"""

from __future__ import annotations

import re
from typing import Optional

STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "a", "an", "for", "to", "of", "in", "on", "by", "with",
    "as", "that", "are", "is", "be", "or", "at", "from", "this", "it",
    "into", "over", "under", "up", "down", "across", "about", "between",
    "their", "your", "you", "we", "our", "they",
})

# Punctuation separates words rather than merging them ("lock-out" -> "lock out")
_NON_WORD = re.compile(r"[^a-z0-9\s]")


def word_tokens(text: Optional[str]) -> list[str]:
    """Return the significant tokens of *text* in order, duplicates kept."""
    if not text:
        return []
    normalised = _NON_WORD.sub(" ", text.lower())
    return [w for w in normalised.split() if w not in STOP_WORDS]


def tokenize(text: Optional[str]) -> set[str]:
    """Return the set of significant tokens in *text*."""
    return set(word_tokens(text))
