# propfilter/config/output_config.py

"""Configuration consulted by a JSON serializer when rendering properties.

The configuration mapping may hold an ``excludes`` and an ``includes`` entry,
each of which is parsed into a :class:`~propfilter.config.filter_set.FilterSet`::

    config = new_configuration({
        "excludes": "password, token",
        "includes": {User: ["name", "email"], "Order": "id, total"},
    })
    config.excludes.has_property_name(user, "password")  # True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from .defaults import (
    CONFIGURATION_KEY_EXCLUDES,
    CONFIGURATION_KEY_INCLUDES,
    DEFAULT_EXCLUDED_PROPERTY_NAMES,
)
from .exceptions import InvalidArgumentError
from .filter_set import FilterSet

logger = logging.getLogger(__name__)

_NO_CONFIGURATION: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, init=False)
class PropertyFilterConfig:
    """Parsed ``excludes`` and ``includes`` filters of an output configuration."""

    excludes: FilterSet
    includes: FilterSet

    def __init__(
        self,
        configuration: Mapping[str, Any],
        extra_excludes: Iterable[str] = (),
        extra_includes: Iterable[str] = (),
    ) -> None:
        """
        Parse the given configuration mapping. The mapping is left unmodified
        and may be empty, but it must not be None.

        ``extra_excludes`` and ``extra_includes`` are added to the global names
        of the respective filter, next to whatever the mapping configures.

        Raises:
            InvalidArgumentError: If ``configuration`` is None or not a mapping
        """
        if configuration is None:
            raise InvalidArgumentError("Argument 'configuration' must not be null!")
        if not isinstance(configuration, MappingABC):
            raise InvalidArgumentError(
                "Argument 'configuration' must be a mapping, "
                f"got {type(configuration).__name__}"
            )

        # Reflective metadata properties are always excluded from rendering
        excludes = FilterSet.from_configuration(
            configuration.get(CONFIGURATION_KEY_EXCLUDES),
            *DEFAULT_EXCLUDED_PROPERTY_NAMES,
            *extra_excludes,
        )
        includes = FilterSet.from_configuration(
            configuration.get(CONFIGURATION_KEY_INCLUDES),
            *extra_includes,
        )
        object.__setattr__(self, "excludes", excludes)
        object.__setattr__(self, "includes", includes)

        logger.debug(
            "Property filter configuration loaded: %d global / %d typed excludes, "
            "%d global / %d typed includes",
            len(excludes.global_names),
            len(excludes.names_by_type),
            len(includes.global_names),
            len(includes.names_by_type),
        )

    def to_dict(self) -> dict:
        return {
            CONFIGURATION_KEY_EXCLUDES: self.excludes.to_dict(),
            CONFIGURATION_KEY_INCLUDES: self.includes.to_dict(),
        }


def new_configuration(
    configuration: Mapping[str, Any] = _NO_CONFIGURATION,
) -> PropertyFilterConfig:
    """
    Create a :class:`PropertyFilterConfig`.

    Called without arguments it returns the default configuration: only the
    built-in excludes and no includes. An explicit None is rejected.
    """
    return PropertyFilterConfig(configuration)


__all__ = ["PropertyFilterConfig", "new_configuration"]
