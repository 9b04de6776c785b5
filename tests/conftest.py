"""Shared pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from pdf_rag.retrieval.index import DocumentIndex, sequential_ids


class FakeCompletionClient:
    """Records every prompt and returns a canned answer."""

    def __init__(self, reply: str = "Cats and dogs are mammals.", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


@pytest.fixture()
def index() -> DocumentIndex:
    return DocumentIndex(id_factory=sequential_ids())


@pytest.fixture()
def fake_client() -> FakeCompletionClient:
    return FakeCompletionClient()
