"""
Retrieval — lexical vectors, similarity ranking, and the document index.

Public surface
--------------
- :class:`DocumentIndex` — ingest text into records and look them up.
- :class:`DocumentStoreBase` — abstract record store (subclass for Redis, etc.).
- :class:`InMemoryDocumentStore` — default process-local store.
- :func:`build_vocabulary`, :func:`vectorize` — bag-of-words vectors.
- :func:`cosine_similarity`, :func:`rank` — scoring and top-*k* selection.
- :class:`Segment`, :class:`IndexedSegment`, :class:`ScoredSegment`,
  :class:`DocumentRecord` — data models.
"""

from pdf_rag.models import DocumentRecord, IndexedSegment, ScoredSegment, Segment
from pdf_rag.retrieval.base import DocumentStoreBase
from pdf_rag.retrieval.index import DocumentIndex, random_ids, sequential_ids
from pdf_rag.retrieval.memory_store import InMemoryDocumentStore
from pdf_rag.retrieval.similarity import cosine_similarity, rank
from pdf_rag.retrieval.vectorizer import build_vocabulary, tokenize, vectorize

__all__ = [
    "DocumentIndex",
    "DocumentRecord",
    "DocumentStoreBase",
    "IndexedSegment",
    "InMemoryDocumentStore",
    "ScoredSegment",
    "Segment",
    "build_vocabulary",
    "cosine_similarity",
    "random_ids",
    "rank",
    "sequential_ids",
    "tokenize",
    "vectorize",
]
