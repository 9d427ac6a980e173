# propfilter/config/defaults.py

from typing import Tuple

CONFIGURATION_KEY_EXCLUDES = "excludes"
CONFIGURATION_KEY_INCLUDES = "includes"

CONFIGURATION_VALUE_SEPARATOR = ","

# Reflective metadata properties that are never rendered
DEFAULT_EXCLUDED_PROPERTY_NAMES: Tuple[str, ...] = (
    "class",
    "metaClass",
    "declaringClass",
)

SUPPORTED_FILE_SUFFIXES: Tuple[str, ...] = (".toml", ".yaml", ".yml", ".json")
