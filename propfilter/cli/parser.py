import argparse
from typing import List, Optional


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="propfilter",
        description=(
            "Inspects the property filters (excludes / includes) a JSON "
            "serializer applies when rendering objects."
        ),
        epilog=(
            "Examples:\n"
            "  propfilter --config filters.toml --show\n"
            "  propfilter --config filters.yaml --validate\n"
            "  propfilter --config filters.toml --type User --property password email\n"
            "  propfilter --excludes 'password, token' --property token\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Configuration sources
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        default=None,
        help="Path to a filter configuration file (.toml, .yaml, .yml or .json)",
    )
    parser.add_argument(
        "--excludes",
        type=str,
        default=None,
        help="Comma separated property names excluded for every type (overrides the file)",
    )
    parser.add_argument(
        "--includes",
        type=str,
        default=None,
        help="Comma separated property names included for every type (overrides the file)",
    )

    # Actions
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Report malformed filter entries and exit.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Print the resolved filters as YAML.",
    )
    parser.add_argument(
        "-t",
        "--type",
        dest="type_name",
        type=str,
        default=None,
        help="Simple name of the owning type for --property checks",
    )
    parser.add_argument(
        "-p",
        "--property",
        dest="properties",
        nargs="+",
        default=[],
        metavar="NAME",
        help="Property names to check against the filters",
    )

    # Logging
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", type=str, default=None, help="Write logs to this file as well.")
    parser.add_argument("--no-color", action="store_true", help="Disable coloured output.")

    return parser.parse_args(argv)
