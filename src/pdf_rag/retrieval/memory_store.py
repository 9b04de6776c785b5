"""Process-local implementation of the document-store abstraction."""

from __future__ import annotations

import logging
import threading

from pdf_rag.models import DocumentRecord
from pdf_rag.retrieval.base import DocumentStoreBase

logger = logging.getLogger(__name__)


class InMemoryDocumentStore(DocumentStoreBase):
    """Dict-backed store that lives as long as the process.

    Writes are serialized by a lock; reads go straight to the dict since
    stored records are immutable and never replaced.
    """

    def __init__(self) -> None:
        self._records: dict[str, DocumentRecord] = {}
        self._lock = threading.Lock()

    def add(self, record: DocumentRecord) -> None:
        with self._lock:
            if record.document_id in self._records:
                raise ValueError(f"Document id already registered: {record.document_id!r}")
            self._records[record.document_id] = record
        logger.debug("Stored document %s (%d total)", record.document_id, len(self._records))

    def get(self, document_id: str) -> DocumentRecord | None:
        return self._records.get(document_id)

    def __len__(self) -> int:
        return len(self._records)
