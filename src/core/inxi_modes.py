"""Detail mode allowlist for inxi invocations.

Modes map onto fixed inxi argument lists so that no caller input is
ever forwarded to the command line.
"""

from __future__ import annotations

from typing import cast

from core.constants import INXI_MODE_ARGS
from core.errors import InxiDashModeError
from core.types import InxiMode

_MODE_ARGS: dict[str, tuple[str, ...]] = dict(INXI_MODE_ARGS)


def supported_inxi_modes() -> tuple[str, ...]:
    """Return supported mode names in display order."""
    return tuple(name for name, _ in INXI_MODE_ARGS)


def parse_inxi_mode(raw_mode: str) -> InxiMode:
    """Validate a caller-provided mode label.

    Args:
        raw_mode: Mode text, matched case-insensitively after trimming.

    Returns:
        Normalized mode name.

    Raises:
        InxiDashModeError: If the mode is not supported.
    """
    normalized_mode = raw_mode.strip().lower()
    if normalized_mode in _MODE_ARGS:
        return cast(InxiMode, normalized_mode)
    supported_rows = ", ".join(supported_inxi_modes())
    raise InxiDashModeError(
        f"invalid mode requested: {raw_mode}. Use one of: {supported_rows}."
    )


def inxi_mode_args(mode: InxiMode) -> tuple[str, ...]:
    """Return the fixed inxi argument list for a validated mode."""
    return _MODE_ARGS[mode]
