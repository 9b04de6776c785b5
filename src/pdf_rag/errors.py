"""Error taxonomy shared by the core and the serving layer.

The core only ever *raises* these; mapping them to HTTP status codes is
the job of :mod:`pdf_rag.serving.app`.  None of them are retried.
"""

from __future__ import annotations


class RagError(Exception):
    """Base class for every failure reported to a caller."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NoFileProvidedError(RagError):
    """Raised when an ingest request carries no document."""

    def __init__(self, message: str = "No file uploaded") -> None:
        super().__init__(message)


class ExtractionError(RagError):
    """Raised when the source document cannot be turned into text."""


class MissingInputError(RagError):
    """Raised when a question or document identifier is absent."""

    def __init__(self, message: str = "Missing question or document ID") -> None:
        super().__init__(message)


class DocumentNotFoundError(RagError):
    """Raised when no document is registered under the given identifier."""

    def __init__(self, document_id: str, message: str = "Document not found. Please re-upload.") -> None:
        self.document_id = document_id
        super().__init__(message)


class CompletionError(RagError):
    """Raised when the external completion capability fails."""
