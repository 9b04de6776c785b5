"""FastAPI application exposing document upload and question answering."""

from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends, FastAPI, File, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from pdf_rag.config import settings
from pdf_rag.errors import (
    CompletionError,
    DocumentNotFoundError,
    ExtractionError,
    MissingInputError,
    NoFileProvidedError,
    RagError,
)
from pdf_rag.serving.service import RagService, build_service

logger = logging.getLogger(__name__)

app = FastAPI(
    title="PDF RAG API",
    version="0.1.0",
    description="Upload a PDF, then ask questions answered from its most relevant sections.",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_url],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_service() -> RagService:
    """Process-wide service; built lazily so importing the app needs no API key."""
    return build_service()


# ── Request / Response schemas ────────────────────────────────────────
class AskRequest(BaseModel):
    """Question about a previously uploaded document."""

    model_config = ConfigDict(populate_by_name=True)

    question: str | None = None
    doc_id: str | None = Field(default=None, alias="docId")


class UploadResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    doc_id: str = Field(alias="docId")
    pages: int
    chunks: int
    message: str


class AskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    answer: str
    chunks_used: int = Field(alias="chunksUsed")
    context_size: int = Field(alias="contextSize")


# ── Error mapping ─────────────────────────────────────────────────────
_STATUS_BY_ERROR: dict[type[RagError], int] = {
    NoFileProvidedError: status.HTTP_400_BAD_REQUEST,
    MissingInputError: status.HTTP_400_BAD_REQUEST,
    DocumentNotFoundError: status.HTTP_404_NOT_FOUND,
    ExtractionError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    CompletionError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


@app.exception_handler(RagError)
async def rag_error_handler(request: Request, exc: RagError) -> JSONResponse:
    """Render every :class:`RagError` as ``{"success": false, "error": ...}``."""
    status_code = _STATUS_BY_ERROR.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    message = exc.message
    if isinstance(exc, ExtractionError):
        message = f"Failed to process PDF: {message}"

    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, message, exc_info=exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return _error_response(status_code, message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed uploads and ask bodies are reported like missing input."""
    error: RagError = NoFileProvidedError() if request.url.path == "/upload" else MissingInputError()
    logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.errors())
    return _error_response(status.HTTP_400_BAD_REQUEST, error.message)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("%s %s failed unexpectedly", request.method, request.url.path, exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or "Internal server error")


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/")
async def root() -> dict[str, str]:
    return {"status": "RAG-powered PDF Chatbot Server Running"}


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/upload", response_model=UploadResponse, response_model_by_alias=True)
async def upload(
    pdf: UploadFile | None = File(default=None),
    service: RagService = Depends(get_service),
) -> UploadResponse:
    """Extract, chunk and index an uploaded PDF."""
    data = await pdf.read() if pdf is not None else None
    # Extraction and indexing are CPU-bound; keep them off the event loop.
    result = await run_in_threadpool(service.ingest_document, data)
    return UploadResponse(
        doc_id=result.document_id,
        pages=result.page_count,
        chunks=result.segment_count,
        message=f"Processed {result.page_count} pages into {result.segment_count} searchable chunks",
    )


@app.post("/ask", response_model=AskResponse, response_model_by_alias=True)
async def ask(request: AskRequest, service: RagService = Depends(get_service)) -> AskResponse:
    """Answer a question from the most relevant sections of a document."""
    result = await service.ask_question(request.doc_id, request.question)
    return AskResponse(
        answer=result.answer,
        chunks_used=result.segments_used,
        context_size=result.context_chars,
    )


def main() -> None:
    """Run the API under uvicorn (``pdf-rag-server``)."""
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("API key configured: %s", bool(settings.openai_api_key))
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
