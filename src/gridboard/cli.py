"""
Gridboard CLI entry point.

Renders declarative dashboard definitions into CloudWatch dashboard
bodies.
"""

from __future__ import annotations

import argparse
import sys

from gridboard import __version__
from gridboard.config import ConfigFileError, DashboardConfig
from gridboard.dashboard import (
    DashboardConfigError,
    RegionResolutionError,
    dashboard_url,
    get_dashboard_body,
    resolve_region,
)
from gridboard.observability import configure_logging, get_logger
from gridboard.widgets import EmitContext

logger = get_logger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="gridboard",
        description="Gridboard - lay out CloudWatch dashboards on a 24-column grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"gridboard {__version__}",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (can be repeated)",
    )

    parser.add_argument(
        "--log-format",
        choices=["human", "json"],
        default="human",
        help="Log output format (default: human)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # render - Build a dashboard body from a config file
    render_parser = subparsers.add_parser(
        "render",
        help="Render a dashboard body",
        description="Lay out the widgets of a JSON or YAML dashboard definition.",
    )
    render_parser.add_argument(
        "config",
        help="Path to the dashboard definition (.json, .yaml or .yml)",
    )
    render_parser.add_argument(
        "--region",
        help="Region for metric widgets (default: from config or AWS configuration)",
    )
    render_parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format (default: json)",
    )
    render_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Indent JSON output by this many spaces",
    )

    # url - Print the console URL of a dashboard
    url_parser = subparsers.add_parser(
        "url",
        help="Print the CloudWatch console URL of a dashboard",
    )
    url_parser.add_argument("name", help="Dashboard name")
    url_parser.add_argument("--region", help="Dashboard region")

    subparsers.add_parser("version", help="Show version information")

    return parser


def cmd_render(args: argparse.Namespace) -> int:
    """
    Handle render command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        config = DashboardConfig.from_file(args.config)
        dashboard_args = config.to_args()
    except (ConfigFileError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    region = args.region or config.region
    if not region:
        try:
            region = resolve_region()
        except RegionResolutionError as e:
            logger.info("Rendering without a region", error=str(e))

    try:
        body = get_dashboard_body(dashboard_args, EmitContext(region=region))
    except DashboardConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(body.to_json(indent=args.indent))
    else:
        print(f"\nDashboard: {config.name}")
        print("=" * 60)
        print(f"{'#':<4} {'Type':<10} {'X':>4} {'Y':>4} {'Width':>6} {'Height':>7}")
        print("-" * 60)
        for i, w in enumerate(body.widgets):
            print(f"{i:<4} {w.type:<10} {w.x:>4} {w.y:>4} {w.width:>6} {w.height:>7}")
        print(f"\nTotal: {len(body.widgets)} widgets")

    return 0


def cmd_url(args: argparse.Namespace) -> int:
    """Handle url command."""
    try:
        region = resolve_region(args.region)
    except RegionResolutionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(dashboard_url(args.name, region))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        level = "DEBUG" if args.verbose > 1 else "INFO"
    else:
        level = "WARNING"
    configure_logging(level=level, format=args.log_format)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "version":
        print(f"Gridboard version {__version__}")
        return 0

    command_handlers = {
        "render": cmd_render,
        "url": cmd_url,
    }

    handler = command_handlers.get(args.command)
    if handler:
        return handler(args)

    print(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
