# propfilter/config/loader.py

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from .defaults import SUPPORTED_FILE_SUFFIXES
from .exceptions import ConfigIOError, ConfigValidationError
from .output_config import PropertyFilterConfig

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_toml(path: Path) -> Any:
    with path.open("rb") as fh:
        return tomllib.load(fh)


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


def _read_json(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


_READERS = {
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


def load_configuration(path: PathLike) -> Dict[str, Any]:
    """
    Read a property filter configuration file.

    The format is chosen by the file suffix (TOML, YAML or JSON).

    Args:
        path: Path to the configuration file

    Returns:
        The configuration mapping

    Raises:
        ConfigIOError: If the file cannot be read or decoded
        ConfigValidationError: If the file does not hold a table at the top
    """
    config_path = Path(path).expanduser()
    suffix = config_path.suffix.lower()
    reader = _READERS.get(suffix)
    if reader is None:
        raise ConfigIOError(
            f"Unsupported configuration file type '{suffix or config_path.name}', "
            f"expected one of: {', '.join(SUPPORTED_FILE_SUFFIXES)}"
        )

    try:
        data = reader(config_path)
    except OSError as exc:
        raise ConfigIOError(
            f"Failed to read configuration file {config_path}: {exc}"
        ) from exc
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigIOError(
            f"Failed to parse configuration file {config_path}: {exc}"
        ) from exc

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Configuration file {config_path} must contain a table at the top level"
        )

    logger.debug("Loaded property filter configuration from %s", config_path)
    return data


def load_property_filter_config(path: PathLike) -> PropertyFilterConfig:
    """Read a configuration file and parse it into a :class:`PropertyFilterConfig`."""
    return PropertyFilterConfig(load_configuration(path))


__all__ = ["load_configuration", "load_property_filter_config"]
