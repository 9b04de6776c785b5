"""Per-document index — ingest text once, look it up on every question.

Usage::

    from pdf_rag.retrieval.index import DocumentIndex

    index = DocumentIndex()
    doc_id = index.ingest("Cats are mammals.\\n\\nDogs are mammals too.", page_count=1)
    record = index.get(doc_id)
    print(record.total_segments, len(record.vocabulary))
"""

from __future__ import annotations

import itertools
import logging
import threading
from collections.abc import Callable
from uuid import uuid4

from pdf_rag.errors import DocumentNotFoundError
from pdf_rag.ingestion.chunker import chunk_text
from pdf_rag.models import MAX_VOCABULARY, DocumentRecord, IndexedSegment
from pdf_rag.retrieval.base import DocumentStoreBase
from pdf_rag.retrieval.memory_store import InMemoryDocumentStore
from pdf_rag.retrieval.vectorizer import build_vocabulary, vectorize

logger = logging.getLogger(__name__)

IdFactory = Callable[[], str]


def random_ids() -> str:
    """Default identifier generator: 32 hex chars from :func:`uuid.uuid4`."""
    return uuid4().hex


def sequential_ids(prefix: str = "doc-", start: int = 1) -> IdFactory:
    """Return a generator of ``prefix1``, ``prefix2``, … identifiers."""
    counter = itertools.count(start)
    return lambda: f"{prefix}{next(counter)}"


class DocumentIndex:
    """Owns the lifecycle of :class:`DocumentRecord` objects.

    Parameters
    ----------
    store:
        Where records live.  Defaults to a fresh
        :class:`~pdf_rag.retrieval.memory_store.InMemoryDocumentStore`.
    id_factory:
        Zero-argument callable producing document identifiers.
    chunk_size:
        Target segment size in characters.
    chunk_overlap:
        Overlap budget in characters between consecutive segments.
    max_vocabulary:
        Cap on the number of terms in a document's vocabulary, at most
        :data:`~pdf_rag.models.MAX_VOCABULARY`.
    """

    def __init__(
        self,
        store: DocumentStoreBase | None = None,
        *,
        id_factory: IdFactory = random_ids,
        chunk_size: int = 800,
        chunk_overlap: int = 150,
        max_vocabulary: int = MAX_VOCABULARY,
    ) -> None:
        if not 0 <= max_vocabulary <= MAX_VOCABULARY:
            raise ValueError(f"max_vocabulary must be between 0 and {MAX_VOCABULARY}, got {max_vocabulary}")
        self._store = store if store is not None else InMemoryDocumentStore()
        self._id_factory = id_factory
        self._id_lock = threading.Lock()
        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.max_vocabulary = max_vocabulary

    # -- public API -----------------------------------------------------------

    def build_record(self, document_id: str, raw_text: str, page_count: int = 0) -> DocumentRecord:
        """Chunk and vectorize *raw_text* without registering the result."""
        segments = chunk_text(raw_text, self.chunk_size, self.chunk_overlap)
        vocabulary = build_vocabulary((s.text for s in segments), self.max_vocabulary)
        indexed = tuple(
            IndexedSegment(index=s.index, text=s.text, vector=vectorize(s.text, vocabulary))
            for s in segments
        )
        return DocumentRecord(
            document_id=document_id,
            segments=indexed,
            vocabulary=vocabulary,
            total_segments=len(indexed),
            page_count=page_count,
        )

    def ingest(self, raw_text: str, page_count: int = 0) -> str:
        """Index *raw_text* and return the new document identifier.

        The record is built completely before it is stored, so a failure
        part-way through leaves the store untouched.  Text that yields no
        segments is still registered, with an empty segment list.
        """
        with self._id_lock:
            document_id = self._id_factory()
        record = self.build_record(document_id, raw_text, page_count)
        self._store.add(record)

        logger.info(
            "Ingested document %s: %d page(s), %d segment(s), %d vocabulary term(s)",
            document_id,
            page_count,
            record.total_segments,
            len(record.vocabulary),
        )
        return document_id

    def lookup(self, document_id: str) -> DocumentRecord | None:
        """Return the record for *document_id*, or ``None`` when unknown."""
        return self._store.get(document_id)

    def get(self, document_id: str) -> DocumentRecord:
        """Like :meth:`lookup` but raises :class:`DocumentNotFoundError`."""
        record = self._store.get(document_id)
        if record is None:
            raise DocumentNotFoundError(document_id)
        return record

    def __len__(self) -> int:
        return len(self._store)
