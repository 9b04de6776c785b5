"""Document loaders — thin wrappers around LangChain document loaders."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from langchain_community.document_loaders import PyPDFLoader

from pdf_rag.errors import ExtractionError
from pdf_rag.models import ExtractedDocument

if TYPE_CHECKING:
    from langchain_core.documents import Document

logger = logging.getLogger(__name__)

# Pages are joined with a blank line so every page break is also a
# paragraph break for the chunker.
PAGE_SEPARATOR = "\n\n"


def load_pdf(path: str | Path) -> list[Document]:
    """Load a single PDF file, one ``Document`` per page."""
    return PyPDFLoader(str(path)).load()


def extract_text(data: bytes) -> ExtractedDocument:
    """Extract the text and page count of an in-memory PDF.

    Parameters
    ----------
    data:
        Raw bytes of the uploaded file.

    Returns
    -------
    ExtractedDocument
        Page texts joined by :data:`PAGE_SEPARATOR` and the page count.

    Raises
    ------
    ExtractionError
        If *data* is empty, cannot be staged to a temporary file, or is
        not a readable PDF.
    """
    if not data:
        raise ExtractionError("Uploaded file is empty")

    tmp_path: str | None = None
    try:
        with tempfile.NamedTemporaryFile(delete=False, suffix=".pdf") as tmp_file:
            tmp_path = tmp_file.name
            tmp_file.write(data)
        pages = load_pdf(tmp_path)
    except Exception as exc:
        raise ExtractionError(str(exc) or type(exc).__name__) from exc
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)

    text = PAGE_SEPARATOR.join(page.page_content for page in pages)
    logger.info("Extracted %d page(s), %d characters", len(pages), len(text))
    return ExtractedDocument(text=text, page_count=len(pages))
