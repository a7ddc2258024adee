"""Public SDK surface for inxi-dash.

This module provides a stable import path for library users.
It re-exports the parsing pipeline and typed report models.
"""

from __future__ import annotations

from core.config import DashConfig, load_dash_config
from core.inxi_modes import parse_inxi_mode, supported_inxi_modes
from core.types import ReportCategory, ReportEntry, ReportSection, SystemReport
from ingest.control_sequences import strip_control_sequences
from ingest.report_assembly import assemble_report, build_system_report
from ingest.section_parser import parse_sections
from serve.inxi_runner import InxiRunner
from transforms.categorization import categorize_sections

__all__ = [
    "DashConfig",
    "InxiRunner",
    "ReportCategory",
    "ReportEntry",
    "ReportSection",
    "SystemReport",
    "assemble_report",
    "build_system_report",
    "categorize_sections",
    "load_dash_config",
    "parse_inxi_mode",
    "parse_sections",
    "strip_control_sequences",
    "supported_inxi_modes",
]
