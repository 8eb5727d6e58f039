"""ArchGuard JSON Schema definitions and validation utilities.

Schemas:
    - rules.schema.json: Rule set configuration (rules, options, exclusions)

Usage:
    from archguard.schemas import validate_rules

    with open("rules.json") as f:
        data = json.load(f)
    validate_rules(data)  # Raises jsonschema.ValidationError if invalid
"""

from __future__ import annotations

import json
from importlib.resources import files
from typing import Any

import jsonschema


def _load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema from the schemas package.

    Args:
        name: Schema filename (e.g., 'rules.schema.json')

    Returns:
        Parsed JSON schema as a dictionary
    """
    schema_text = files("archguard.schemas").joinpath(name).read_text()
    result: dict[str, Any] = json.loads(schema_text)
    return result


def get_rules_schema() -> dict[str, Any]:
    """Get the rules.json schema."""
    return _load_schema("rules.schema.json")


def validate_rules(data: dict[str, Any]) -> None:
    """Validate a rule set configuration against the schema.

    Args:
        data: Rule set configuration dictionary

    Raises:
        jsonschema.ValidationError: If validation fails
    """
    jsonschema.validate(data, get_rules_schema())


__all__ = [
    "get_rules_schema",
    "validate_rules",
]
