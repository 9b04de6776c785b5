"""Answer composer — retrieve the best segments and ask the LLM.

The composer owns no state of its own: every call looks the document up
in the :class:`~pdf_rag.retrieval.index.DocumentIndex`, ranks its
segments against the question, and forwards a prompt to the
:class:`~pdf_rag.generation.llm.CompletionClient`.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from pdf_rag.generation.llm import CompletionClient
from pdf_rag.generation.prompts import build_answer_prompt, build_context
from pdf_rag.models import ScoredSegment
from pdf_rag.retrieval.index import DocumentIndex
from pdf_rag.retrieval.similarity import rank
from pdf_rag.retrieval.vectorizer import vectorize

logger = logging.getLogger(__name__)

NO_CONTEXT_ANSWER = "No relevant context found: this document has no searchable text."


class Answer(BaseModel):
    """Generated answer plus what was retrieved to produce it."""

    answer: str
    segments_used: int
    context_chars: int
    retrieved: list[ScoredSegment] = Field(default_factory=list)


class AnswerComposer:
    """Question answering over one indexed document at a time.

    Parameters
    ----------
    index:
        Where document records are looked up.
    client:
        The completion capability that writes the final answer.
    top_k:
        Number of segments placed in the prompt.
    """

    def __init__(self, index: DocumentIndex, client: CompletionClient, *, top_k: int = 3) -> None:
        self._index = index
        self._client = client
        self.top_k = top_k

    def retrieve(self, document_id: str, question: str) -> list[ScoredSegment]:
        """Return the *top_k* segments of *document_id* most similar to *question*.

        Raises :class:`~pdf_rag.errors.DocumentNotFoundError` for unknown ids.
        """
        record = self._index.get(document_id)
        query = vectorize(question, record.vocabulary)
        return rank(query, record.segments, self.top_k)

    async def answer(self, document_id: str, question: str) -> Answer:
        """Answer *question* from the best-matching segments of *document_id*."""
        retrieved = self.retrieve(document_id, question)
        if not retrieved:
            logger.info("Document %s has no segments; skipping completion", document_id)
            return Answer(answer=NO_CONTEXT_ANSWER, segments_used=0, context_chars=0)

        logger.debug("Top similarities: %s", ", ".join(f"{r.score:.3f}" for r in retrieved))

        context = build_context(retrieved)
        prompt = build_answer_prompt(context, question)
        logger.info("Sending %d characters of context to the LLM", len(context))

        text = await self._client.generate(prompt)
        return Answer(
            answer=text,
            segments_used=len(retrieved),
            context_chars=len(context),
            retrieved=retrieved,
        )
