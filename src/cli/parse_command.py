"""CLI command for parsing a saved inxi capture offline."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from core.config import DashConfig
from core.errors import InxiDashCaptureError
from core.inxi_modes import parse_inxi_mode, supported_inxi_modes
from core.types import SystemReport
from ingest.report_assembly import build_system_report
from transforms.categorization import categorize_sections


def add_parse_command(subparsers: Any) -> None:
    """Register parse subcommand."""
    parser = subparsers.add_parser("parse", help="Parse a saved inxi capture file")
    parser.add_argument("capture", help="File holding captured inxi output")
    parser.add_argument(
        "--mode",
        choices=supported_inxi_modes(),
        help="Mode label recorded on the report",
    )
    parser.add_argument(
        "--categories",
        action="store_true",
        help="Print category<TAB>section rows instead of JSON",
    )


def run_parse_command(config: DashConfig, args: argparse.Namespace) -> int:
    """Print a report, or its category grouping, for a capture file."""
    report = load_capture_report(args.capture, args.mode or config.default_mode)
    if args.categories:
        for category in categorize_sections(report.sections):
            for section in category.sections:
                print(f"{category.label}\t{section.title}")
        return 0
    print(json.dumps(report.to_dict(), indent=2))
    return 0


def load_capture_report(capture_path: str, raw_mode: str) -> SystemReport:
    """Build a report from a capture file on disk.

    Raises:
        InxiDashCaptureError: If the file cannot be read.
        InxiDashModeError: If the mode is invalid.
    """
    mode = parse_inxi_mode(raw_mode)
    capture_file = Path(capture_path).expanduser()
    try:
        raw_capture = capture_file.read_bytes()
    except OSError as error:
        raise InxiDashCaptureError(
            f"Failed to read capture at {capture_file}: {error}. Provide an existing file."
        ) from error
    return build_system_report(raw_capture, mode)
