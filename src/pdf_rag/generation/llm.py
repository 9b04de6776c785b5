"""LLM initialisation — single place to swap providers.

Supports two modes:

1. **OpenAI cloud** (default) — set ``OPENAI_API_KEY``.
2. **OpenAI-compatible endpoint** — set ``LLM_BASE_URL`` to a vLLM or
   proxy server exposing ``/v1/chat/completions``; ``ChatOpenAI`` works
   unchanged against it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from langchain_core.messages import HumanMessage
from langchain_openai import ChatOpenAI

from pdf_rag.config import settings
from pdf_rag.errors import CompletionError

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Anything that can turn a prompt into generated text."""

    async def generate(self, prompt: str) -> str: ...


def get_llm(temperature: float | None = None) -> ChatOpenAI:
    """Return the configured chat model.

    When ``settings.llm_base_url`` is set the client is pointed at that
    endpoint instead of the OpenAI cloud API.  A dummy API key
    (``"EMPTY"``) is used because self-hosted servers usually do not
    require authentication.
    """
    kwargs: dict = {
        "model": settings.llm_model_name,
        "temperature": settings.llm_temperature if temperature is None else temperature,
        "max_tokens": settings.llm_max_tokens,
    }

    if settings.llm_base_url:
        logger.info("Using OpenAI-compatible endpoint: %s", settings.llm_base_url)
        kwargs["base_url"] = settings.llm_base_url
        # Self-hosted servers don't need a real key; LangChain requires a non-empty value.
        kwargs["api_key"] = settings.openai_api_key or "EMPTY"
    else:
        kwargs["api_key"] = settings.openai_api_key

    return ChatOpenAI(**kwargs)


class ChatCompletionClient:
    """:class:`CompletionClient` backed by a LangChain chat model.

    Any failure of the underlying model (transport, auth, rate limit,
    malformed response) is re-raised as :class:`CompletionError`.
    """

    def __init__(self, llm: BaseChatModel | None = None) -> None:
        self._llm = llm if llm is not None else get_llm()

    async def generate(self, prompt: str) -> str:
        try:
            response = await self._llm.ainvoke([HumanMessage(content=prompt)])
        except Exception as exc:
            raise CompletionError(str(exc) or "Failed to get answer from AI") from exc

        content = response.content
        if not isinstance(content, str):
            # Some providers return a list of content blocks.
            content = "".join(
                block.get("text", "") if isinstance(block, dict) else str(block) for block in content
            )
        return content
