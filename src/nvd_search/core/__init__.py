"""Parameter registry, translation and use cases (no I/O)."""

from .services.query_translator import build_query_string, translate

__all__ = ["translate", "build_query_string"]
