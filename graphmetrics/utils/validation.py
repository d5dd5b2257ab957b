"""
Module for JSON Schema validation of graph documents and graph invariants.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema

__all__ = [
    "ValidationError",
    "GraphInvariantError",
    "validate_json",
    "validate_graph_invariants",
]


class ValidationError(Exception):
    """Data validation error."""

    pass


class GraphInvariantError(ValidationError):
    """Graph invariant error."""

    pass


# Cache for loaded schemas
_SCHEMA_CACHE: Dict[str, Dict] = {}


def _load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Loads JSON Schema from file.

    Args:
        schema_name: Schema name without extension (e.g., 'Graph')

    Returns:
        Dictionary with JSON Schema

    Raises:
        FileNotFoundError: If schema file is not found
        ValidationError: If schema is invalid
    """
    if schema_name in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[schema_name]

    schema_path = Path(__file__).parent.parent / "schemas" / f"{schema_name}.schema.json"

    if not schema_path.exists():
        raise FileNotFoundError(f"JSON Schema not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        jsonschema.Draft202012Validator.check_schema(schema)

        _SCHEMA_CACHE[schema_name] = schema
        return schema

    except json.JSONDecodeError as e:
        raise ValidationError(f"Invalid JSON in schema {schema_name}: {e}")
    except jsonschema.SchemaError as e:
        raise ValidationError(f"Invalid JSON Schema {schema_name}: {e}")


def validate_json(data: Dict[str, Any], schema_name: str) -> None:
    """
    Validates data against JSON Schema.

    Args:
        data: Data to validate
        schema_name: Schema name without extension

    Raises:
        ValidationError: If data does not match the schema
    """
    schema = _load_schema(schema_name)

    try:
        jsonschema.validate(data, schema, cls=jsonschema.Draft202012Validator)
    except jsonschema.ValidationError as e:
        error_path = " -> ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        raise ValidationError(
            f"Schema validation error '{schema_name}' in field '{error_path}': {e.message}"
        )


def validate_graph_invariants(graph_data: Dict[str, Any]) -> None:
    """
    Checks graph document invariants beyond the schema.

    Every edge endpoint must lie in 0..node_count-1.

    Args:
        graph_data: Graph document

    Raises:
        ValidationError: If the document does not match the schema
        GraphInvariantError: If graph invariants are violated
    """
    validate_json(graph_data, "Graph")

    node_count = graph_data["node_count"]
    for position, (u, v) in enumerate(graph_data["edges"]):
        if u >= node_count or v >= node_count:
            raise GraphInvariantError(
                f"Edge #{position} ({u}, {v}) references a node outside 0..{node_count - 1}"
            )
