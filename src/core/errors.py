"""inxi-dash exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each subsystem raises a specific error type for debuggability.
"""

from __future__ import annotations


class InxiDashError(Exception):
    """Base exception for all inxi-dash failures."""


class InxiDashConfigError(InxiDashError):
    """Raised for invalid runtime configuration."""


class InxiDashParseError(InxiDashError):
    """Raised when a system report cannot be assembled."""


class InxiDashModeError(InxiDashError):
    """Raised for unsupported inxi detail modes."""


class InxiDashMissingBinaryError(InxiDashError):
    """Raised when the inxi binary is missing from PATH."""


class InxiDashCommandError(InxiDashError):
    """Raised when an inxi invocation fails or times out."""


class InxiDashCaptureError(InxiDashError):
    """Raised when a saved capture cannot be read or a snapshot written."""


class InxiDashAssetError(InxiDashError):
    """Raised when a static asset cannot be resolved."""


class InxiDashDependencyError(InxiDashError):
    """Raised when an optional runtime dependency is missing."""
