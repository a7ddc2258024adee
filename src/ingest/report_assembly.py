"""System report assembly.

This module wraps parsed sections with a capture timestamp and the
requested detail mode. It is the single entry point used by the inxi
runner and the offline CLI parse command.
"""

from __future__ import annotations

import time
from typing import Callable

from core.errors import InxiDashParseError
from core.logging_config import get_logger
from core.types import SystemReport
from ingest.control_sequences import strip_control_sequences
from ingest.section_parser import parse_sections

_LOGGER = get_logger(__name__)


def assemble_report(
    clean_text: str,
    mode: str,
    timestamp: int | None = None,
    clock: Callable[[], float] = time.time,
) -> SystemReport:
    """Parse clean text and wrap it into an immutable report.

    Args:
        clean_text: Text already stripped of control sequences.
        mode: Detail mode label recorded on the report.
        timestamp: Optional capture time; read from ``clock`` when omitted.
        clock: Source of seconds since the Unix epoch.

    Returns:
        Report with sections in first-appearance order.

    Raises:
        InxiDashParseError: If the capture time cannot be obtained.
    """
    capture_time = _capture_timestamp(clock) if timestamp is None else timestamp
    sections = parse_sections(clean_text)
    report = SystemReport(timestamp=capture_time, mode=mode, sections=tuple(sections))
    _LOGGER.debug("report_assembled", mode=mode, section_count=len(report.sections))
    return report


def build_system_report(
    raw_capture: str | bytes,
    mode: str,
    timestamp: int | None = None,
    clock: Callable[[], float] = time.time,
) -> SystemReport:
    """Build a report from raw captured inxi output.

    Args:
        raw_capture: Captured text or bytes; invalid UTF-8 is replaced.
        mode: Detail mode label recorded on the report.
        timestamp: Optional capture time override.
        clock: Source of seconds since the Unix epoch.

    Returns:
        Assembled report.

    Raises:
        InxiDashParseError: If the capture time cannot be obtained.
    """
    if isinstance(raw_capture, bytes):
        raw_text = raw_capture.decode("utf-8", errors="replace")
    else:
        raw_text = raw_capture
    clean_text = strip_control_sequences(raw_text)
    return assemble_report(clean_text, mode, timestamp=timestamp, clock=clock)


def _capture_timestamp(clock: Callable[[], float]) -> int:
    """Read whole seconds since the epoch from a clock.

    Raises:
        InxiDashParseError: If the clock fails or reports pre-epoch time.
    """
    try:
        seconds = clock()
    except (OSError, OverflowError, ValueError) as error:
        raise InxiDashParseError(f"failed to parse system report: {error}") from error
    if seconds < 0:
        raise InxiDashParseError(
            "failed to parse system report: system clock is set before the Unix epoch"
        )
    return int(seconds)
