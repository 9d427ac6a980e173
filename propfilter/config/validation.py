from __future__ import annotations

from collections.abc import Mapping as MappingABC
from collections.abc import Set as SetABC
from typing import Any, Dict, List

from jsonschema import Draft202012Validator

from .defaults import CONFIGURATION_KEY_EXCLUDES, CONFIGURATION_KEY_INCLUDES
from .exceptions import ConfigValidationError
from .shapes import resolve_type_key

_PROPERTY_NAMES_SCHEMA: Dict[str, Any] = {
    "type": ["string", "array"],
    "items": {"type": "string"},
}

# additionalProperties only constrains the object form
_FILTER_SCHEMA: Dict[str, Any] = {
    "type": ["null", "string", "object"],
    "additionalProperties": _PROPERTY_NAMES_SCHEMA,
}

FILTER_CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        CONFIGURATION_KEY_EXCLUDES: _FILTER_SCHEMA,
        CONFIGURATION_KEY_INCLUDES: _FILTER_SCHEMA,
    },
}

_validator = Draft202012Validator(FILTER_CONFIG_SCHEMA)


def _as_document(value: Any) -> Any:
    """Turn class keys into simple names and collections into lists."""
    if isinstance(value, MappingABC):
        document: Dict[Any, Any] = {}
        for key, item in value.items():
            type_id = resolve_type_key(key)
            # Unusable keys are kept as text so they show up in the report
            document[type_id if type_id is not None else repr(key)] = _as_document(item)
        return document
    if isinstance(value, (list, tuple, SetABC)):
        return [_as_document(item) for item in value]
    return value


def validate_configuration(configuration: Any) -> List[str]:
    """
    Check a filter configuration against :data:`FILTER_CONFIG_SCHEMA`.

    Parsing a configuration never fails on malformed entries, it just skips
    them. This reports what would be skipped.

    Returns:
        One message per problem, empty if the configuration is well-formed
    """
    issues: List[str] = []
    errors = sorted(
        _validator.iter_errors(_as_document(configuration)),
        key=lambda error: [str(part) for part in error.absolute_path],
    )
    for error in errors:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        issues.append(f"{location}: {error.message}")
    return issues


def ensure_valid(configuration: Any) -> None:
    """Raise :class:`ConfigValidationError` if the configuration has problems."""
    issues = validate_configuration(configuration)
    if issues:
        raise ConfigValidationError(
            "Invalid property filter configuration: " + "; ".join(issues)
        )


__all__ = ["FILTER_CONFIG_SCHEMA", "validate_configuration", "ensure_valid"]
