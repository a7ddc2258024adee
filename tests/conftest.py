"""Pytest configuration for repository test runs."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart() -> None:
    """Add src directory to sys.path for test imports."""
    project_root = Path(__file__).resolve().parent.parent
    src_path = project_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


@pytest.fixture
def sample_report():
    """Small report covering GPU, CPU, and General sections."""
    from core.types import ReportEntry, ReportSection, SystemReport

    return SystemReport(
        timestamp=1_700_000_000,
        mode="basic",
        sections=(
            ReportSection(
                title="Graphics",
                entries=(ReportEntry(key="Device-1", value="AMD Navi 23 driver amdgpu"),),
            ),
            ReportSection(
                title="CPU",
                entries=(ReportEntry(key="Info", value="6-core model AMD Ryzen 5"),),
            ),
            ReportSection(
                title="Audio",
                entries=(ReportEntry(key="API", value="ALSA status <kernel-api>"),),
            ),
        ),
    )
