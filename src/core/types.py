"""Shared typed models.

This module defines immutable data models produced by the ingest
pipeline and consumed by the categorization, rendering, and API layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

InxiMode = Literal["basic", "full", "verbose", "maximum"]


@dataclass(frozen=True)
class ReportEntry:
    """One key/value fact inside a report section.

    Attributes:
        key: Non-empty entry label, e.g. ``Kernel`` or ``Speed (MHz)``.
        value: Non-empty entry text, including merged continuation lines.
    """

    key: str
    value: str

    def to_dict(self) -> dict[str, str]:
        """Serialize entry into a JSON-friendly mapping."""
        return {"key": self.key, "value": self.value}


@dataclass(frozen=True)
class ReportSection:
    """Titled group of entries as emitted by inxi.

    Attributes:
        title: Section title without its trailing colon.
        entries: Ordered entries in first-appearance order.
    """

    title: str
    entries: tuple[ReportEntry, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Serialize section into a JSON-friendly mapping."""
        return {
            "title": self.title,
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class SystemReport:
    """Structured snapshot of one inxi capture.

    Attributes:
        timestamp: Capture time in whole seconds since the Unix epoch.
        mode: Detail mode label used for the capture.
        sections: Ordered sections in first-appearance order.
    """

    timestamp: int
    mode: str
    sections: tuple[ReportSection, ...]

    def to_dict(self) -> dict[str, object]:
        """Serialize report into the stable API payload shape."""
        return {
            "timestamp": self.timestamp,
            "mode": self.mode,
            "sections": [section.to_dict() for section in self.sections],
        }


@dataclass(frozen=True)
class CategoryConfig:
    """Static keyword configuration for one display category."""

    label: str
    keywords: tuple[str, ...]


@dataclass(frozen=True)
class ReportCategory:
    """Render-time grouping of report sections.

    Attributes:
        label: Category heading, e.g. ``CPU`` or ``General``.
        sections: Sections observed from the report, never copies.
    """

    label: str
    sections: tuple[ReportSection, ...]
