"""Unit tests for dashboard and export HTML rendering."""

from __future__ import annotations

from core.types import SystemReport
from serve.html_rendering import (
    render_category_cards,
    render_dashboard_page,
    render_download_page,
)


def test_render_dashboard_page_lists_modes_and_themes() -> None:
    """Dashboard shell should offer every mode and theme option."""
    html = render_dashboard_page("full")

    assert '<option value="full" selected>Full</option>' in html
    assert '<option value="royal">Royal</option>' in html
    assert 'href="/download?mode=maximum"' in html


def test_render_category_cards_groups_and_escapes(sample_report: SystemReport) -> None:
    """Cards should follow category order and escape report values."""
    html = render_category_cards(sample_report)

    assert html.index(">CPU<") < html.index(">GPU<") < html.index(">General<")
    assert "&lt;kernel-api&gt;" in html and "<kernel-api>" not in html


def test_render_category_cards_shows_empty_state() -> None:
    """A report without sections should render an explanatory message."""
    html = render_category_cards(SystemReport(timestamp=0, mode="basic", sections=()))

    assert "no recognizable sections" in html


def test_render_download_page_is_standalone(sample_report: SystemReport) -> None:
    """Exported pages should inline styles and record mode and time."""
    html = render_download_page(sample_report)

    assert "<style>" in html and "--primary" in html
    assert "Inxi Snapshot (basic)" in html
    assert "UTC 2023-11-14 22:13:20 (1700000000)" in html
    assert "/static/" not in html


def test_render_download_page_inlines_dashboard_script(sample_report: SystemReport) -> None:
    """Exported pages should carry the dashboard script inline."""
    html = render_download_page(sample_report)

    assert "<script>" in html and "inxi-dashboard-theme" in html
    assert '<script src="' not in html
