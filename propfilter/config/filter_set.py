# propfilter/config/filter_set.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from .shapes import (
    NamesString,
    TypeMapping,
    classify,
    resolve_property_names,
    resolve_type_key,
    split_names,
    type_identifier,
)

logger = logging.getLogger(__name__)


def _empty_mapping() -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True)
class FilterSet:
    """Property names used either for inclusion or for exclusion.

    ``global_names`` match on any owner, ``names_by_type`` only match on owners
    whose runtime type has the given simple name. Types from different modules
    that share a simple name cannot be told apart.
    """

    global_names: FrozenSet[str] = frozenset()
    # Hashed through global_names only, mapping proxies are unhashable
    names_by_type: Mapping[str, Tuple[str, ...]] = field(
        default_factory=_empty_mapping, hash=False
    )

    def __post_init__(self) -> None:
        # Normalise into immutable containers, whatever the caller passed in
        object.__setattr__(self, "global_names", frozenset(self.global_names))
        object.__setattr__(
            self,
            "names_by_type",
            MappingProxyType(
                {key: tuple(names) for key, names in self.names_by_type.items()}
            ),
        )

    @classmethod
    def from_configuration(
        cls, configuration: Any, *default_global_names: str
    ) -> "FilterSet":
        """
        Build a filter set from an ``excludes`` / ``includes`` configuration value.

        A string is read as a comma separated list of global property names.
        A mapping goes from type identifiers (simple names or classes) to
        property names, given either as a comma separated string or as a
        list. Entries of any other shape are skipped, as is a configuration
        value of any other shape.

        Args:
            configuration: The raw configuration value, may be None
            default_global_names: Names that always belong to the global set

        Returns:
            The immutable filter set
        """
        global_names: List[str] = list(default_global_names)
        names_by_type: Dict[str, Tuple[str, ...]] = {}

        shape = classify(configuration)
        if isinstance(shape, NamesString):
            global_names.extend(split_names(shape.value))
        elif isinstance(shape, TypeMapping):
            names_by_type.update(_resolve_type_entries(shape.entries))
        elif shape.value is not None:
            logger.debug(
                "Ignoring filter configuration of unsupported type %s",
                type(shape.value).__name__,
            )

        return cls(frozenset(global_names), names_by_type)

    def is_empty(self) -> bool:
        """Whether there are property names defined or not."""
        return not self.global_names and not self.names_by_type

    def has_property_name(self, owner: Any, property_name: Optional[str]) -> bool:
        """Whether ``property_name`` of ``owner`` is part of this filter set.

        ``owner`` may be None, in which case only global names can match.
        """
        if property_name is None:
            return False
        if property_name in self.global_names:
            return True
        if owner is None:
            return False
        return property_name in self.names_by_type.get(type_identifier(owner), ())

    def has_type_property_name(self, type_id: Any, property_name: Optional[str]) -> bool:
        """Like :meth:`has_property_name` for a type given by name or class."""
        if property_name is None:
            return False
        if property_name in self.global_names:
            return True
        return property_name in self.names_for_type(type_id)

    def names_for_type(self, type_id: Any) -> Tuple[str, ...]:
        key = resolve_type_key(type_id)
        if key is None:
            return ()
        return self.names_by_type.get(key, ())

    def to_dict(self) -> Dict[str, Any]:
        """Plain snapshot suitable for JSON or YAML output."""
        return {
            "global": sorted(self.global_names),
            "types": {key: list(names) for key, names in self.names_by_type.items()},
        }


def _resolve_type_entries(entries: Mapping[Any, Any]) -> Dict[str, Tuple[str, ...]]:
    resolved: Dict[str, Tuple[str, ...]] = {}
    for key, value in entries.items():
        type_id = resolve_type_key(key)
        if type_id is None:
            logger.debug("Skipping filter entry with unsupported key %r", key)
            continue

        names = resolve_property_names(value)
        if names is None:
            logger.debug(
                "Skipping filter entry for %s with unsupported value of type %s",
                type_id,
                type(value).__name__,
            )
            continue

        if names:
            # Later entries for the same identifier replace earlier ones
            resolved[type_id] = names
    return resolved


__all__ = ["FilterSet"]
