"""CLI command for running the dashboard HTTP server."""

from __future__ import annotations

import argparse
from dataclasses import replace
from typing import Any

from core.config import DashConfig
from core.logging_config import get_logger
from serve.inxi_runner import InxiRunner
from serve.web_app import create_app

_LOGGER = get_logger(__name__)


def add_serve_command(subparsers: Any) -> None:
    """Register serve subcommand."""
    parser = subparsers.add_parser("serve", help="Serve the dashboard on a local address")
    parser.add_argument("--host", help="Override bind host")
    parser.add_argument("--port", type=int, help="Override bind port")


def run_serve_command(config: DashConfig, args: argparse.Namespace) -> int:
    """Verify inxi is runnable, then serve until interrupted."""
    if args.host:
        config = replace(config, bind_host=args.host)
    if args.port:
        config = replace(config, bind_port=args.port)
    runner = InxiRunner(config)
    runner.ensure_available()
    app = create_app(config, runner)
    _LOGGER.info("server_starting", host=config.bind_host, port=config.bind_port)
    app.run(host=config.bind_host, port=config.bind_port)
    return 0
