"""
Ingestion — text extraction and chunking.

This module turns an uploaded document into overlapping text segments
ready for indexing by :mod:`pdf_rag.retrieval`.
"""
