from __future__ import annotations

from .exceptions import (
    FilterConfigError,
    InvalidArgumentError,
    ConfigValidationError,
    ConfigIOError,
)
from .filter_set import FilterSet
from .output_config import PropertyFilterConfig, new_configuration
from .loader import load_configuration, load_property_filter_config
from .validation import validate_configuration, ensure_valid

__all__ = [
    "FilterSet",
    "PropertyFilterConfig",
    "new_configuration",
    "load_configuration",
    "load_property_filter_config",
    "validate_configuration",
    "ensure_valid",
    "FilterConfigError",
    "InvalidArgumentError",
    "ConfigValidationError",
    "ConfigIOError",
]
