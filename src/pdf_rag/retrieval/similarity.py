"""Cosine similarity and top-*k* ranking of indexed segments."""

from __future__ import annotations

import math
from collections.abc import Sequence

from pdf_rag.models import IndexedSegment, ScoredSegment


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the cosine of the angle between *a* and *b*.

    A zero-norm vector has no direction; its similarity to anything is
    defined as ``0.0`` so that NaN never reaches a sort comparator.
    """
    if len(a) != len(b):
        raise ValueError(f"vector length mismatch: {len(a)} != {len(b)}")

    dot = sum(x * y for x, y in zip(a, b))
    norm_a = sum(x * x for x in a)
    norm_b = sum(y * y for y in b)
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return dot / math.sqrt(norm_a * norm_b)


def rank(
    query: Sequence[float],
    candidates: Sequence[IndexedSegment],
    top_k: int = 3,
) -> list[ScoredSegment]:
    """Score every candidate against *query* and return the best *top_k*.

    Ordering is by descending score; equal scores keep their original
    document order (Python's sort is stable, including with ``reverse``).
    """
    scored = [ScoredSegment(segment=seg, score=cosine_similarity(query, seg.vector)) for seg in candidates]
    scored.sort(key=lambda s: s.score, reverse=True)
    return scored[: max(top_k, 0)]
