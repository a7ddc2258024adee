"""HTML rendering for the dashboard and standalone exports.

Templates live in ``serve/templates`` and are rendered with Jinja2
autoescaping, so report keys and values never reach markup unescaped.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.constants import DOWNLOAD_MODE, INXI_MODE_LABELS, THEME_OPTIONS
from core.types import ReportCategory, SystemReport
from serve.static_assets import load_text_asset
from transforms.categorization import categorize_sections

TEMPLATE_ROOT = Path(__file__).resolve().parent / "templates"

_ENVIRONMENT = Environment(
    loader=FileSystemLoader(str(TEMPLATE_ROOT)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_dashboard_page(default_mode: str) -> str:
    """Render the interactive dashboard shell.

    Args:
        default_mode: Mode preselected in the detail level selector.

    Returns:
        Full HTML document; report data is fetched client-side.
    """
    template = _ENVIRONMENT.get_template("dashboard.html")
    return template.render(
        mode_options=INXI_MODE_LABELS,
        theme_options=THEME_OPTIONS,
        theme_labels=" · ".join(label for _, label in THEME_OPTIONS),
        default_mode=default_mode,
        download_mode=DOWNLOAD_MODE,
    )


def render_category_cards(report: SystemReport) -> str:
    """Render category cards for one report as an HTML fragment."""
    template = _ENVIRONMENT.get_template("category_cards.html")
    return template.render(categories=categorize_sections(report.sections))


def render_download_page(report: SystemReport) -> str:
    """Render a standalone HTML snapshot with inlined styles and script.

    Args:
        report: Report to export.

    Returns:
        Self-contained HTML document.

    Raises:
        InxiDashAssetError: If the packaged stylesheet or script is missing.
    """
    categories: list[ReportCategory] = categorize_sections(report.sections)
    template = _ENVIRONMENT.get_template("download.html")
    return template.render(
        report=report,
        categories=categories,
        generated_at=_format_timestamp(report.timestamp),
        stylesheet=load_text_asset("css/app.css"),
        script=load_text_asset("js/dashboard.js"),
    )


def _format_timestamp(timestamp: int) -> str:
    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return f"UTC {moment.strftime('%Y-%m-%d %H:%M:%S')} ({timestamp})"
