"""Bag-of-words vectors over a per-document vocabulary."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence

from pdf_rag.models import Vector, Vocabulary

_TOKEN_RE = re.compile(r"\w+")


def tokenize(text: str) -> list[str]:
    """Lower-case *text* and return its maximal runs of word characters."""
    return _TOKEN_RE.findall(text.lower())


def build_vocabulary(texts: Iterable[str], max_terms: int = 500) -> Vocabulary:
    """Build the ordered term basis for a document.

    Terms are taken in first-occurrence order across *texts* (iterated in
    segment order) and the result is truncated to *max_terms*.  Terms
    past the cap are dropped, so very long documents lose recall on
    their later vocabulary.
    """
    seen: dict[str, None] = {}
    for text in texts:
        for token in tokenize(text):
            if token in seen:
                continue
            if len(seen) >= max_terms:
                return tuple(seen)
            seen[token] = None
    return tuple(seen)


def vectorize(text: str, vocabulary: Sequence[str]) -> Vector:
    """Return the raw count of each vocabulary term in *text*.

    Tokens outside *vocabulary* are ignored; the result always has
    ``len(vocabulary)`` entries.
    """
    counts = Counter(tokenize(text))
    return tuple(counts.get(term, 0) for term in vocabulary)
