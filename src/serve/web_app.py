"""Flask application for the local hardware dashboard.

This module maps HTTP routes onto the inxi runner and renderers and
translates domain errors into JSON error responses.
"""

from __future__ import annotations

from typing import Protocol

from flask import Flask, Response, jsonify, request

from core.config import DashConfig
from core.constants import DOWNLOAD_FILENAME_PREFIX
from core.errors import (
    InxiDashAssetError,
    InxiDashCommandError,
    InxiDashError,
    InxiDashMissingBinaryError,
    InxiDashModeError,
    InxiDashParseError,
)
from core.inxi_modes import parse_inxi_mode
from core.logging_config import get_logger
from core.types import InxiMode, SystemReport
from serve.html_rendering import (
    render_category_cards,
    render_dashboard_page,
    render_download_page,
)
from serve.inxi_runner import InxiRunner
from serve.static_assets import load_asset

_LOGGER = get_logger(__name__)

_ERROR_STATUS: tuple[tuple[type[InxiDashError], int], ...] = (
    (InxiDashMissingBinaryError, 500),
    (InxiDashCommandError, 502),
    (InxiDashModeError, 400),
    (InxiDashAssetError, 404),
    (InxiDashParseError, 422),
)


class ReportRunner(Protocol):
    """Anything that can produce a report for a mode."""

    def run(self, mode: InxiMode) -> SystemReport:
        """Produce a fresh report."""
        ...


def create_app(config: DashConfig, runner: ReportRunner | None = None) -> Flask:
    """Build the dashboard Flask application.

    Args:
        config: Runtime configuration.
        runner: Optional report source; defaults to invoking inxi.

    Returns:
        Configured Flask application.
    """
    app = Flask(__name__, static_folder=None)
    report_runner = runner or InxiRunner(config)

    def _requested_report() -> SystemReport:
        raw_mode = request.args.get("mode") or config.default_mode
        return report_runner.run(parse_inxi_mode(raw_mode))

    @app.route("/")
    def dashboard() -> str:
        return render_dashboard_page(config.default_mode)

    @app.route("/api/system")
    def api_system() -> Response:
        return jsonify(_requested_report().to_dict())

    @app.route("/api/cards")
    def api_cards() -> Response:
        report = _requested_report()
        return Response(render_category_cards(report), mimetype="text/html")

    @app.route("/download")
    def download() -> Response:
        report = _requested_report()
        filename = f"{DOWNLOAD_FILENAME_PREFIX}-{report.mode}.html"
        return Response(
            render_download_page(report),
            content_type="text/html; charset=utf-8",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    @app.route("/static/<path:asset_path>")
    def static_asset(asset_path: str) -> Response:
        content_type, payload = load_asset(asset_path)
        return Response(payload, content_type=content_type)

    @app.route("/health")
    def health() -> Response:
        return jsonify(status="ok")

    @app.errorhandler(InxiDashError)
    def handle_dash_error(error: InxiDashError) -> tuple[Response, int]:
        status = error_status(error)
        _LOGGER.warning("handled_request_error", error=str(error), status=status)
        return jsonify(message=str(error)), status

    return app


def error_status(error: InxiDashError) -> int:
    """Map a domain error onto an HTTP status code."""
    for error_type, status in _ERROR_STATUS:
        if isinstance(error, error_type):
            return status
    return 500
