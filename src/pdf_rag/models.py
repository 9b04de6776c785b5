"""Domain models for segments, indexed documents, and ranking results.

All models are frozen: a stored record never changes after ingest.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator

Vector = tuple[int, ...]
Vocabulary = tuple[str, ...]

# Hard upper bound on the number of terms in any document vocabulary.
MAX_VOCABULARY = 500


class Segment(BaseModel):
    """A bounded span of document text treated as one retrieval unit.

    Attributes
    ----------
    index:
        0-based position of the segment within its document.
    text:
        The whitespace-trimmed segment text.
    """

    model_config = ConfigDict(frozen=True)

    index: int
    text: str


class IndexedSegment(Segment):
    """A :class:`Segment` together with its term-count vector."""

    vector: Vector


class ScoredSegment(BaseModel):
    """An indexed segment paired with its similarity to a query."""

    model_config = ConfigDict(frozen=True)

    segment: IndexedSegment
    score: float


class DocumentRecord(BaseModel):
    """The immutable, queryable bundle produced by one ingest.

    Attributes
    ----------
    document_id:
        Lookup key, unique for the lifetime of the store.
    segments:
        Indexed segments in document order.
    vocabulary:
        Ordered term basis shared by every segment vector and every query.
    total_segments:
        Number of segments (always ``len(segments)``).
    page_count:
        Number of pages reported by the extractor.
    """

    model_config = ConfigDict(frozen=True)

    document_id: str
    segments: tuple[IndexedSegment, ...] = ()
    vocabulary: Vocabulary = ()
    total_segments: int = 0
    page_count: int = 0

    @model_validator(mode="after")
    def _check_dimensions(self) -> DocumentRecord:
        dim = len(self.vocabulary)
        if dim > MAX_VOCABULARY:
            raise ValueError(f"vocabulary has {dim} terms, limit is {MAX_VOCABULARY}")
        for seg in self.segments:
            if len(seg.vector) != dim:
                raise ValueError(
                    f"segment {seg.index} has {len(seg.vector)} dimensions, vocabulary has {dim}"
                )
        if self.total_segments != len(self.segments):
            raise ValueError(
                f"total_segments={self.total_segments} but {len(self.segments)} segments given"
            )
        return self


class ExtractedDocument(BaseModel):
    """Plain text pulled out of an uploaded document."""

    model_config = ConfigDict(frozen=True)

    text: str
    page_count: int
