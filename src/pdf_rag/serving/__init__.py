"""
Serving — FastAPI application and the ingest / ask service behind it.

This module exposes the pipeline over HTTP so a browser front end can
upload a PDF and ask questions about it.
"""
