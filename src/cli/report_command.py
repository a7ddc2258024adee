"""CLI command for printing a live inxi report as JSON."""

from __future__ import annotations

import argparse
import json
from typing import Any

from core.config import DashConfig
from core.inxi_modes import parse_inxi_mode, supported_inxi_modes
from serve.inxi_runner import InxiRunner


def add_report_command(subparsers: Any) -> None:
    """Register report subcommand."""
    parser = subparsers.add_parser("report", help="Run inxi and print the structured report")
    parser.add_argument("--mode", choices=supported_inxi_modes(), help="Detail level")


def run_report_command(config: DashConfig, args: argparse.Namespace) -> int:
    """Print the report JSON for one live inxi run."""
    mode = parse_inxi_mode(args.mode or config.default_mode)
    report = InxiRunner(config).run(mode)
    print(json.dumps(report.to_dict(), indent=2))
    return 0
