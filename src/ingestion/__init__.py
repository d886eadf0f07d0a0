"""Ingestion components for shareholder letters."""

from .sample_data import SAMPLE_DOCUMENTS, load_sample_data

__all__ = ["SAMPLE_DOCUMENTS", "load_sample_data"]
