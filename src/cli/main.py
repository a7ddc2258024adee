"""inxi-dash CLI entry points.
This module exposes commands for serving the dashboard and for
producing reports from live inxi runs or saved captures.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from cli.export_command import add_export_command, run_export_command
from cli.parse_command import add_parse_command, run_parse_command
from cli.report_command import add_report_command, run_report_command
from cli.serve_command import add_serve_command, run_serve_command
from core.config import DashConfig, load_dash_config
from core.errors import InxiDashError


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="inxi-dash", description="inxi hardware dashboard")
    parser.add_argument("--config", help="Optional YAML config file layered over INXI_DASH_* env")
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_serve_command(subparsers)
    add_report_command(subparsers)
    add_parse_command(subparsers)
    add_export_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the inxi-dash CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_dash_config(args.config)
        return _dispatch_command(parser, config, args)
    except InxiDashError as error:
        print(f"error={error}")
        return 1


def _dispatch_command(
    parser: argparse.ArgumentParser,
    config: DashConfig,
    args: argparse.Namespace,
) -> int:
    if args.command == "serve":
        return run_serve_command(config, args)
    if args.command == "report":
        return run_report_command(config, args)
    if args.command == "parse":
        return run_parse_command(config, args)
    if args.command == "export":
        return run_export_command(config, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2
