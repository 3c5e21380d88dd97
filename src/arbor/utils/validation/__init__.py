"""
Validation package for arbor.

This package provides schema validation for graph documents read by the
loader.
"""

from .schema import GRAPH_DOCUMENT_SCHEMA, SchemaValidator, ValidationResult

__all__ = [
    "GRAPH_DOCUMENT_SCHEMA",
    "SchemaValidator",
    "ValidationResult",
]
