"""CLI entry point for subnet inventory generation — standalone-capable."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from netinventory.generate_subnets.collector import DEFAULT_OUTPUT, SubnetInventoryCollector, write_subnets
from netinventory.generate_subnets.config import load_credentials, load_endpoint_map
from netinventory.generate_subnets.exceptions import InventoryError
from netinventory.generate_subnets.formatters import SummaryFormatter

EXIT_FATAL = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netinventory generate-subnets",
        description="Generate subnets.json from SoftLayer CI VLANs with IPv6 addressing and vCenter assignment.",
    )
    parser.add_argument(
        "--vcenter",
        help="vCenter association json",
    )
    parser.add_argument(
        "--auth",
        help="IBM Authentication json",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Output file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print a table of the generated subnets to stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose logging",
    )
    return parser


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Build argparse parser for subnet generation."""
    return build_parser().parse_args(args)


def main(args: list[str] | None = None) -> None:
    """Main entry point for subnet generation CLI."""
    parsed = parse_args(args)

    if not parsed.vcenter or not parsed.auth:
        print("Error: Both vcenter and auth options are required.")
        build_parser().print_help(sys.stdout)
        sys.exit(EXIT_USAGE)

    logger.enable("netinventory")
    if not parsed.verbose:
        logger.remove()
        logger.add(sys.stderr, level="INFO")

    try:
        endpoint_map = load_endpoint_map(parsed.vcenter)
        credentials = load_credentials(parsed.auth)
        subnet_map = SubnetInventoryCollector(credentials, endpoint_map).collect()
        write_subnets(subnet_map, parsed.output)
    except (InventoryError, OSError) as e:
        logger.error(str(e))
        sys.exit(EXIT_FATAL)

    if parsed.summary:
        print(SummaryFormatter(subnet_map).format())


if __name__ == "__main__":
    main()
