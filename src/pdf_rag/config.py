"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from pdf_rag.models import MAX_VOCABULARY


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # LLM
    openai_api_key: str = Field(default="", description="OpenAI API key (or dummy value for local vLLM)")
    llm_model_name: str = Field(default="gpt-4o-mini", description="LLM model identifier")
    llm_base_url: str = Field(
        default="",
        description=(
            "Base URL for the LLM API. Leave empty to use OpenAI cloud. "
            "Set to any OpenAI-compatible endpoint (vLLM, LiteLLM proxy, ...) "
            "to serve answers from a self-hosted model."
        ),
    )
    llm_temperature: float = 0.0
    llm_max_tokens: int = 1024

    # Ingestion
    chunk_size: int = Field(default=800, description="Target segment size in characters")
    chunk_overlap: int = Field(
        default=150,
        description="Overlap budget in characters; carried forward as chunk_overlap // 5 words",
    )
    max_vocabulary: int = Field(
        default=MAX_VOCABULARY,
        ge=0,
        le=MAX_VOCABULARY,
        description="Maximum number of terms per document vocabulary",
    )

    # Retrieval
    top_k: int = Field(default=3, description="Number of segments forwarded to the LLM")

    # Serving
    frontend_url: str = Field(default="*", description="Allowed CORS origin")
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import `settings` wherever needed.
settings = Settings()
