"""JSON Schema validation utilities."""

from typing import Any

from jsonschema import Draft7Validator


def validate_schema(data: Any, schema: dict[str, Any]) -> tuple[bool, list[str]]:
    """
    Validate data against a JSON Schema.

    Args:
        data: The data to validate
        schema: JSON Schema to validate against

    Returns:
        Tuple of (is_valid, list of error messages)
    """
    if not schema:
        return True, []

    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])

    if not errors:
        return True, []

    error_messages = [
        f"{'.'.join(str(p) for p in e.path)}: {e.message}" if e.path else e.message
        for e in errors
    ]

    return False, error_messages


def strict_object_schema(
    properties: dict[str, dict[str, Any]] | None = None,
    required: list[str] | None = None
) -> dict[str, Any]:
    """
    Build an object schema that rejects unknown fields.

    Args:
        properties: Mapping of field name to its JSON Schema
        required: Names of fields that may not be omitted; defaults to all

    Returns:
        JSON Schema dictionary
    """
    properties = properties or {}
    if required is None:
        required = list(properties)

    schema: dict[str, Any] = {
        "type": "object",
        "properties": properties,
        "additionalProperties": False,
    }
    if required:
        schema["required"] = required
    return schema


def string_field(description: str) -> dict[str, Any]:
    """Schema for a plain string field."""
    return {"type": "string", "description": description}


def boolean_field(description: str) -> dict[str, Any]:
    """Schema for a boolean field."""
    return {"type": "boolean", "description": description}
