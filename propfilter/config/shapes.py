# propfilter/config/shapes.py

"""Classification of raw ``excludes`` / ``includes`` configuration values.

Filter configuration arrives loosely typed: nothing at all, a comma separated
string of property names, or a mapping from a type (by name or by class) to
property names.  :func:`classify` turns such a value into one of the variants
below so that consumers handle each accepted shape explicitly instead of
probing the raw value themselves.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from collections.abc import Sequence as SequenceABC
from collections.abc import Set as SetABC
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple, Union

from .defaults import CONFIGURATION_VALUE_SEPARATOR


@dataclass(frozen=True)
class NamesString:
    """A plain string of property names, e.g. ``"password, token"``."""
    value: str


@dataclass(frozen=True)
class TypeMapping:
    """A mapping of type identifiers to property names."""
    entries: Mapping[Any, Any]


@dataclass(frozen=True)
class Unsupported:
    """Anything else, including a missing value."""
    value: Any = None


ConfigurationShape = Union[NamesString, TypeMapping, Unsupported]


def classify(raw: Any) -> ConfigurationShape:
    """Map a raw configuration value onto its configuration shape."""
    if isinstance(raw, str):
        return NamesString(raw)
    if isinstance(raw, MappingABC):
        return TypeMapping(raw)
    return Unsupported(raw)


def split_names(value: Optional[str]) -> Tuple[str, ...]:
    """Split a comma separated string into trimmed, non-empty property names.

    Order is preserved and duplicates are kept.
    """
    if not value:
        return ()
    tokens = (token.strip() for token in value.split(CONFIGURATION_VALUE_SEPARATOR))
    return tuple(token for token in tokens if token)


def resolve_type_key(key: Any) -> Optional[str]:
    """Return the type identifier for a mapping key, or None if unusable.

    String keys are taken verbatim; classes contribute their simple name.
    """
    if isinstance(key, str):
        return key
    if isinstance(key, type):
        return key.__name__
    return None


def resolve_property_names(value: Any) -> Optional[Tuple[str, ...]]:
    """Return the property names for a mapping value, or None if unusable.

    Strings are split like a global names string; lists, tuples and sets are
    copied as they are.
    """
    if isinstance(value, str):
        return split_names(value)
    if isinstance(value, (SequenceABC, SetABC)) and not isinstance(
        value, (bytes, bytearray)
    ):
        return tuple(value)
    return None


def type_identifier(owner: Any) -> str:
    """Simple name of the runtime type of ``owner``."""
    return type(owner).__name__


__all__ = [
    "NamesString",
    "TypeMapping",
    "Unsupported",
    "ConfigurationShape",
    "classify",
    "split_names",
    "resolve_type_key",
    "resolve_property_names",
    "type_identifier",
]
