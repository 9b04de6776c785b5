"""Unit tests for cosine similarity and ranking."""

from __future__ import annotations

import math

import pytest

from pdf_rag.models import IndexedSegment
from pdf_rag.retrieval.similarity import cosine_similarity, rank


def _seg(index: int, vector: tuple[int, ...]) -> IndexedSegment:
    return IndexedSegment(index=index, text=f"segment {index}", vector=vector)


class TestCosineSimilarity:
    @pytest.mark.parametrize("vector", [(1, 2, 3), (5,), (0, 7, 0, 1)])
    def test_self_similarity_is_one(self, vector: tuple[int, ...]) -> None:
        assert cosine_similarity(vector, vector) == pytest.approx(1.0)

    def test_orthogonal_vectors(self) -> None:
        assert cosine_similarity((1, 0), (0, 1)) == 0.0

    def test_opposite_vectors(self) -> None:
        assert cosine_similarity((1, 2), (-1, -2)) == pytest.approx(-1.0)

    def test_scale_invariant(self) -> None:
        assert cosine_similarity((2, 0), (1, 0)) == pytest.approx(1.0)

    def test_zero_norm_query_scores_zero(self) -> None:
        score = cosine_similarity((0, 0, 0), (1, 2, 3))
        assert score == 0.0
        assert not math.isnan(score)

    def test_zero_norm_candidate_scores_zero(self) -> None:
        assert cosine_similarity((1, 2), (0, 0)) == 0.0

    def test_empty_vectors_score_zero(self) -> None:
        assert cosine_similarity((), ()) == 0.0

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="length mismatch"):
            cosine_similarity((1, 2), (1, 2, 3))


class TestRank:
    def test_same_direction_keeps_original_order(self) -> None:
        a, b = _seg(0, (2, 0)), _seg(1, (1, 0))
        ranked = rank((1, 0), [a, b], top_k=3)
        assert [r.segment for r in ranked] == [a, b]

    def test_sorted_by_descending_score(self) -> None:
        segs = [_seg(0, (0, 1)), _seg(1, (1, 1)), _seg(2, (1, 0))]
        ranked = rank((1, 0), segs, top_k=3)
        assert [r.segment.index for r in ranked] == [2, 1, 0]
        scores = [r.score for r in ranked]
        assert scores == sorted(scores, reverse=True)

    def test_truncated_to_top_k(self) -> None:
        segs = [_seg(i, (i + 1, 1)) for i in range(6)]
        assert len(rank((1, 0), segs, top_k=3)) == 3

    def test_fewer_candidates_than_top_k(self) -> None:
        assert len(rank((1, 0), [_seg(0, (1, 0))], top_k=3)) == 1

    def test_zero_query_keeps_document_order(self) -> None:
        segs = [_seg(i, (i, 1)) for i in range(4)]
        ranked = rank((0, 0), segs, top_k=4)
        assert [r.segment.index for r in ranked] == [0, 1, 2, 3]
        assert all(r.score == 0.0 for r in ranked)

    def test_no_candidates(self) -> None:
        assert rank((1, 0), [], top_k=3) == []
