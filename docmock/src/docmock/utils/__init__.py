"""Utility functions for common operations."""

from .schema_io import load_schema_from_json, documents_to_json, save_documents_to_json

__all__ = [
    "load_schema_from_json",
    "documents_to_json",
    "save_documents_to_json",
]
