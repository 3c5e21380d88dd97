"""
Schema Validation Components for arbor graph documents

This module provides JSON schema-based validation of the documents the
loader accepts as an alternative to adjacency matrices:

    {
        "nodes": [{"label": "a", "payload": ...}, ...],
        "edges": [{"from": "a", "to": "b", "weight": 3, "undirected": false}, ...]
    }

Edge weights may be any JSON value; only numbers take part in costs and
algorithms.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from jsonschema import ValidationError as JsonSchemaError
from jsonschema import validate as json_validate

# A label needs at least one non-whitespace character
LABEL_PATTERN = r"\S"

GRAPH_DOCUMENT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "label": {"type": "string", "pattern": LABEL_PATTERN},
                    "payload": {},
                },
                "required": ["label"],
                "additionalProperties": False,
            },
        },
        "edges": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "from": {"type": "string", "pattern": LABEL_PATTERN},
                    "to": {"type": "string", "pattern": LABEL_PATTERN},
                    "weight": {},
                    "undirected": {"type": "boolean"},
                },
                "required": ["from", "to", "weight"],
                "additionalProperties": False,
            },
        },
    },
    "required": ["nodes"],
    "additionalProperties": False,
}


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid (bool): Whether the validation passed successfully
        errors (List[str]): List of validation error messages
        context (Optional[Dict[str, Any]]): Additional context about the validation
    """

    is_valid: bool
    errors: List[str] = field(default_factory=list)
    context: Optional[Dict[str, Any]] = None


class SchemaValidator:
    """
    JSON Schema-based validator for graph documents.

    Attributes:
        schema (Dict[str, Any]): JSON schema documents are checked against
    """

    def __init__(self, schema: Optional[Dict[str, Any]] = None):
        self.schema = schema if schema is not None else GRAPH_DOCUMENT_SCHEMA

    def validate_document(self, document: Any) -> ValidationResult:
        """
        Validate a decoded graph document.

        Args:
            document: Decoded JSON value

        Returns:
            ValidationResult describing the outcome

        Example:
            >>> validator = SchemaValidator()
            >>> validator.validate_document({"nodes": [{"label": "a"}]}).is_valid
            True
        """
        try:
            json_validate(instance=document, schema=self.schema)
        except JsonSchemaError as e:
            path = "/".join(str(part) for part in e.absolute_path)
            return ValidationResult(
                is_valid=False,
                errors=[e.message],
                context={"path": path or "<root>"},
            )
        return ValidationResult(is_valid=True)
