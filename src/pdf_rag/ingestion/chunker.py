"""Paragraph-based text chunking with word overlap."""

from __future__ import annotations

import re

from pdf_rag.models import Segment

_PARAGRAPH_BREAK = re.compile(r"\n\n+")
PARAGRAPH_JOINER = "\n\n"

# The overlap budget is expressed in characters and converted to a word
# count assuming ~5 characters per word.
CHARS_PER_WORD = 5


def chunk_text(
    text: str,
    chunk_size: int = 800,
    chunk_overlap: int = 150,
) -> list[Segment]:
    """Split *text* into overlapping segments along paragraph boundaries.

    Paragraphs are accumulated until adding the next one would push the
    buffer past *chunk_size*.  The buffer is then emitted and a new one is
    started from the last ``chunk_overlap // 5`` words of the emitted
    buffer followed by the paragraph that triggered the split.

    Paragraphs are never split, so a single paragraph longer than
    *chunk_size* produces an oversized segment.

    Parameters
    ----------
    text:
        Raw extracted document text.
    chunk_size:
        Target maximum number of characters per segment.
    chunk_overlap:
        Overlap budget in characters carried into the next segment.

    Returns
    -------
    list[Segment]
        Segments numbered from 0 in emission order.  Empty or
        whitespace-only input yields an empty list.
    """
    overlap_words = chunk_overlap // CHARS_PER_WORD
    segments: list[Segment] = []
    buffer = ""

    for paragraph in _PARAGRAPH_BREAK.split(text):
        if buffer.strip() and len(buffer) + len(PARAGRAPH_JOINER) + len(paragraph) > chunk_size:
            segments.append(Segment(index=len(segments), text=buffer.strip()))
            carried = buffer.split()[-overlap_words:] if overlap_words > 0 else []
            buffer = " ".join(carried) + " " + paragraph if carried else paragraph
        else:
            buffer += (PARAGRAPH_JOINER if buffer else "") + paragraph

    if buffer.strip():
        segments.append(Segment(index=len(segments), text=buffer.strip()))

    return segments
