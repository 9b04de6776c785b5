"""Abstract base class for document-record stores.

Adding a new backend (Redis, a SQL table, ...) only requires subclassing
:class:`DocumentStoreBase` and implementing the abstract methods.  The
index and answer layers never touch a concrete store.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pdf_rag.models import DocumentRecord


class DocumentStoreBase(ABC):
    """Backend-agnostic mapping of ``document_id`` → :class:`DocumentRecord`.

    Stores only grow: records are inserted fully formed and are never
    updated or removed while the process runs.
    """

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def add(self, record: DocumentRecord) -> None:
        """Insert *record* under ``record.document_id``.

        Implementations **must** raise ``ValueError`` when the identifier
        is already taken rather than replacing the existing record.
        """
        ...

    @abstractmethod
    def get(self, document_id: str) -> DocumentRecord | None:
        """Return the record stored under *document_id*, or ``None``."""
        ...

    @abstractmethod
    def __len__(self) -> int: ...

    # -- optional overrides ---------------------------------------------------

    def __contains__(self, document_id: object) -> bool:
        return isinstance(document_id, str) and self.get(document_id) is not None

    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        return True
