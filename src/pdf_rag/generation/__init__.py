"""
Generation — prompt assembly and the call to the completion model.

Public API
----------
- :class:`AnswerComposer` — retrieve the best segments and ask the LLM.
- :class:`CompletionClient` — protocol for anything that turns a prompt into text.
- :class:`ChatCompletionClient` — adapter over a LangChain chat model.
- :func:`get_llm` — the configured chat model.
"""

from pdf_rag.generation.composer import Answer, AnswerComposer
from pdf_rag.generation.llm import ChatCompletionClient, CompletionClient, get_llm

__all__ = [
    "Answer",
    "AnswerComposer",
    "ChatCompletionClient",
    "CompletionClient",
    "get_llm",
]
