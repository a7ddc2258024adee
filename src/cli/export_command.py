"""CLI command for writing a standalone HTML snapshot."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any

from cli.parse_command import load_capture_report
from core.config import DashConfig
from core.constants import DOWNLOAD_MODE
from core.errors import InxiDashCaptureError
from core.inxi_modes import parse_inxi_mode, supported_inxi_modes
from serve.html_rendering import render_download_page
from serve.inxi_runner import InxiRunner


def add_export_command(subparsers: Any) -> None:
    """Register export subcommand."""
    parser = subparsers.add_parser("export", help="Write a standalone HTML snapshot")
    parser.add_argument("--output", required=True, help="Destination HTML file")
    parser.add_argument(
        "--mode",
        choices=supported_inxi_modes(),
        default=DOWNLOAD_MODE,
        help="Detail level",
    )
    parser.add_argument("--capture", help="Render a saved capture instead of running inxi")


def run_export_command(config: DashConfig, args: argparse.Namespace) -> int:
    """Render a snapshot and print the written path."""
    if args.capture:
        report = load_capture_report(args.capture, args.mode)
    else:
        report = InxiRunner(config).run(parse_inxi_mode(args.mode))
    output_path = Path(args.output).expanduser()
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(render_download_page(report), encoding="utf-8")
    except OSError as error:
        raise InxiDashCaptureError(
            f"Failed to write snapshot to {output_path}: {error}. Check the destination path."
        ) from error
    print(output_path)
    return 0
