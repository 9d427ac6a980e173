from __future__ import annotations


class FilterConfigError(Exception):
    """Base exception for property filter configuration errors."""


class InvalidArgumentError(FilterConfigError, ValueError):
    """Raised when a required configuration argument is missing or unusable."""


class ConfigValidationError(FilterConfigError):
    """Raised when configuration validation fails."""


class ConfigIOError(FilterConfigError):
    """Raised when a configuration file cannot be read or decoded."""


__all__ = [
    "FilterConfigError",
    "InvalidArgumentError",
    "ConfigValidationError",
    "ConfigIOError",
]
