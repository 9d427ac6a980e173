"""Property inclusion / exclusion filters for JSON output."""

from .config import (
    FilterSet,
    PropertyFilterConfig,
    new_configuration,
    load_configuration,
    load_property_filter_config,
    validate_configuration,
    FilterConfigError,
    InvalidArgumentError,
    ConfigValidationError,
    ConfigIOError,
)

__version__ = "1.0.0"

__all__ = [
    "FilterSet",
    "PropertyFilterConfig",
    "new_configuration",
    "load_configuration",
    "load_property_filter_config",
    "validate_configuration",
    "FilterConfigError",
    "InvalidArgumentError",
    "ConfigValidationError",
    "ConfigIOError",
]
