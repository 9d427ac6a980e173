import logging
import sys
from collections.abc import Mapping as MappingABC
from typing import Any, Dict, List, Optional, Tuple

import yaml

from propfilter.backend.services.logging.logging_service import setup_logging
from propfilter.cli.parser import parse_arguments
from propfilter.config import (
    FilterConfigError,
    PropertyFilterConfig,
    load_configuration,
    validate_configuration,
)
from propfilter.config.defaults import CONFIGURATION_KEY_EXCLUDES, CONFIGURATION_KEY_INCLUDES
from propfilter.config.shapes import split_names
from propfilter.utils.color_support import color_support

logger = logging.getLogger(__name__)


def build_configuration(
    config_file: Optional[str],
    excludes: Optional[str] = None,
    includes: Optional[str] = None,
) -> Tuple[Dict[str, Any], Dict[str, Tuple[str, ...]]]:
    """
    Merge the configuration file with the command line overrides.

    An override replaces a global names string from the file. When the file
    configures a type mapping instead, the mapping is kept and the override
    names are returned separately as extra global names.

    Returns:
        The configuration mapping and the extra global names per filter key
    """
    configuration: Dict[str, Any] = {}
    if config_file:
        configuration.update(load_configuration(config_file))

    extra_names: Dict[str, Tuple[str, ...]] = {}
    for key, override in (
        (CONFIGURATION_KEY_EXCLUDES, excludes),
        (CONFIGURATION_KEY_INCLUDES, includes),
    ):
        if override is None:
            continue
        if isinstance(configuration.get(key), MappingABC):
            extra_names[key] = split_names(override)
        else:
            configuration[key] = override
    return configuration, extra_names


def describe_property(config: PropertyFilterConfig, type_name: Optional[str], name: str) -> str:
    owner = type_name or "*"
    excluded = config.excludes.has_type_property_name(type_name, name)
    included = config.includes.has_type_property_name(type_name, name)
    return "{}.{}: {}, {}".format(
        owner,
        name,
        color_support.verdict(excluded, "excluded", "not excluded"),
        color_support.verdict(included, "included", "not included"),
    )


def run(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_file, force_color=False if args.no_color else None)

    try:
        configuration, extra_names = build_configuration(
            args.config, args.excludes, args.includes
        )
    except FilterConfigError as exc:
        logger.error("Failed to load configuration: %s", exc)
        return 1

    if args.validate:
        issues = validate_configuration(configuration)
        if issues:
            for issue in issues:
                print(color_support.error(issue))
            print("Configuration validation failed.")
            return 1
        print(color_support.success("Configuration is valid."))
        return 0

    try:
        config = PropertyFilterConfig(
            configuration,
            extra_excludes=extra_names.get(CONFIGURATION_KEY_EXCLUDES, ()),
            extra_includes=extra_names.get(CONFIGURATION_KEY_INCLUDES, ()),
        )
    except FilterConfigError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    if args.show:
        print(yaml.safe_dump(config.to_dict(), sort_keys=False, allow_unicode=True), end="")

    for name in args.properties:
        print(describe_property(config, args.type_name, name))

    if not args.show and not args.properties:
        logger.info("Nothing to do, use --show, --validate or --property")
    return 0


def main() -> None:
    sys.exit(run())
