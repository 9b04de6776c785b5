"""Unit tests for PDF text extraction."""

from __future__ import annotations

import io
import tempfile

import pytest
from pypdf import PdfWriter

from pdf_rag.errors import ExtractionError
from pdf_rag.ingestion.loader import extract_text


def _blank_pdf(pages: int) -> bytes:
    writer = PdfWriter()
    for _ in range(pages):
        writer.add_blank_page(width=612, height=792)
    buf = io.BytesIO()
    writer.write(buf)
    return buf.getvalue()


def test_page_count_reported() -> None:
    extracted = extract_text(_blank_pdf(3))
    assert extracted.page_count == 3
    assert extracted.text.strip() == ""


def test_malformed_pdf_raises_extraction_error() -> None:
    with pytest.raises(ExtractionError):
        extract_text(b"this is definitely not a pdf")


def test_empty_bytes_raise_extraction_error() -> None:
    with pytest.raises(ExtractionError, match="empty"):
        extract_text(b"")


@pytest.fixture()
def isolated_tmpdir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Point :mod:`tempfile` at an empty directory we can inspect."""
    monkeypatch.setattr(tempfile, "tempdir", str(tmp_path))
    return tmp_path


def test_temp_file_removed_after_success(isolated_tmpdir) -> None:
    extract_text(_blank_pdf(1))
    assert list(isolated_tmpdir.iterdir()) == []


def test_temp_file_removed_after_parse_failure(isolated_tmpdir) -> None:
    with pytest.raises(ExtractionError):
        extract_text(b"not a pdf either")
    assert list(isolated_tmpdir.iterdir()) == []


def test_write_failure_raises_extraction_error_and_cleans_up(
    isolated_tmpdir, monkeypatch: pytest.MonkeyPatch
) -> None:
    data = _blank_pdf(1)
    real_named_temporary_file = tempfile.NamedTemporaryFile

    class _DiskFullFile:
        def __init__(self, **kwargs) -> None:
            self._file = real_named_temporary_file(**kwargs)
            self.name = self._file.name

        def __enter__(self) -> _DiskFullFile:
            return self

        def __exit__(self, *exc_info) -> bool:
            self._file.close()
            return False

        def write(self, data: bytes) -> int:
            raise OSError("No space left on device")

    monkeypatch.setattr(tempfile, "NamedTemporaryFile", _DiskFullFile)

    with pytest.raises(ExtractionError, match="No space left on device") as excinfo:
        extract_text(data)
    assert isinstance(excinfo.value.__cause__, OSError)
    assert list(isolated_tmpdir.iterdir()) == []
