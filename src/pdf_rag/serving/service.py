"""The two operations exposed to transport layers: ingest and ask."""

from __future__ import annotations

import logging
from collections.abc import Callable

from pydantic import BaseModel

from pdf_rag.config import settings
from pdf_rag.errors import MissingInputError, NoFileProvidedError
from pdf_rag.generation.composer import AnswerComposer
from pdf_rag.generation.llm import ChatCompletionClient, CompletionClient
from pdf_rag.ingestion.loader import extract_text
from pdf_rag.models import ExtractedDocument
from pdf_rag.retrieval.index import DocumentIndex

logger = logging.getLogger(__name__)

Extractor = Callable[[bytes], ExtractedDocument]


class IngestResult(BaseModel):
    document_id: str
    page_count: int
    segment_count: int


class AskResult(BaseModel):
    answer: str
    segments_used: int
    context_chars: int


class RagService:
    """Wires extraction, indexing and answering behind two calls.

    Parameters
    ----------
    index:
        Document index shared by ingest and ask.
    client:
        Completion capability used to write answers.
    extractor:
        Callable turning uploaded bytes into text (PDF by default).
    top_k:
        Number of segments forwarded to the LLM per question.
    """

    def __init__(
        self,
        index: DocumentIndex,
        client: CompletionClient,
        *,
        extractor: Extractor = extract_text,
        top_k: int = 3,
    ) -> None:
        self.index = index
        self.composer = AnswerComposer(index, client, top_k=top_k)
        self._extractor = extractor

    def ingest_document(self, data: bytes | None) -> IngestResult:
        """Extract, chunk and index an uploaded document.

        Zero bytes count as no file: browsers send an empty part when the
        file input is left blank.
        """
        if not data:
            raise NoFileProvidedError()

        extracted = self._extractor(data)
        document_id = self.index.ingest(extracted.text, extracted.page_count)
        record = self.index.get(document_id)
        return IngestResult(
            document_id=document_id,
            page_count=record.page_count,
            segment_count=record.total_segments,
        )

    async def ask_question(self, document_id: str | None, question: str | None) -> AskResult:
        """Answer *question* using the document registered as *document_id*."""
        if not question or not document_id:
            raise MissingInputError()

        logger.info("Question for %s: %s", document_id, question)
        result = await self.composer.answer(document_id, question)
        return AskResult(
            answer=result.answer,
            segments_used=result.segments_used,
            context_chars=result.context_chars,
        )


def build_service() -> RagService:
    """Build a :class:`RagService` from the global settings."""
    index = DocumentIndex(
        chunk_size=settings.chunk_size,
        chunk_overlap=settings.chunk_overlap,
        max_vocabulary=settings.max_vocabulary,
    )
    return RagService(index, ChatCompletionClient(), top_k=settings.top_k)
