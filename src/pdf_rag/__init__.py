"""
pdf_rag — minimal Retrieval-Augmented Generation over uploaded documents.

A document is split into overlapping segments, each segment gets a
bag-of-words vector over a per-document vocabulary, and questions are
answered by forwarding the most similar segments to an LLM.
"""

__version__ = "0.1.0"
