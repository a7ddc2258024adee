"""inxi process invocation.

This module runs inxi with fixed per-mode arguments and turns its
captured output into a system report. It is the only blocking step
in a report request; the parsing pipeline behind it is pure.
"""

from __future__ import annotations

import subprocess
from typing import Sequence

from core.config import DashConfig
from core.errors import InxiDashCommandError, InxiDashMissingBinaryError
from core.inxi_modes import inxi_mode_args
from core.logging_config import get_logger
from core.types import InxiMode, SystemReport
from ingest.report_assembly import build_system_report

_LOGGER = get_logger(__name__)


class InxiRunner:
    """Stateless wrapper around the inxi executable."""

    def __init__(self, config: DashConfig) -> None:
        self._binary = config.inxi_binary
        self._timeout = config.command_timeout_seconds

    def run(self, mode: InxiMode) -> SystemReport:
        """Run inxi for one mode and return the parsed report.

        Args:
            mode: Validated detail mode.

        Returns:
            Freshly assembled report; nothing is cached.

        Raises:
            InxiDashMissingBinaryError: If inxi is not installed.
            InxiDashCommandError: If inxi fails or times out.
            InxiDashParseError: If the capture time cannot be read.
        """
        args = inxi_mode_args(mode)
        _LOGGER.info("inxi_command_started", command=self._binary, mode=mode, args=list(args))
        completed = self._execute(args)
        if completed.returncode != 0:
            stderr_text = completed.stderr.decode("utf-8", errors="replace").strip()
            _LOGGER.warning(
                "inxi_command_failed",
                mode=mode,
                returncode=completed.returncode,
                stderr=stderr_text,
            )
            raise InxiDashCommandError(f"inxi execution failed: {stderr_text}")
        return build_system_report(completed.stdout, mode)

    def ensure_available(self) -> None:
        """Verify that inxi can be executed.

        Raises:
            InxiDashMissingBinaryError: If inxi is not installed.
            InxiDashCommandError: If ``inxi --version`` exits non-zero.
        """
        completed = self._execute(("--version",))
        if completed.returncode != 0:
            raise InxiDashCommandError(
                "inxi execution failed: inxi --version returned non-zero"
            )
        _LOGGER.info("inxi_binary_verified", command=self._binary)

    def _execute(self, args: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
        command = [self._binary, *args]
        try:
            return subprocess.run(
                command,
                capture_output=True,
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as error:
            raise InxiDashMissingBinaryError(
                f"required binary '{self._binary}' missing from PATH. "
                "Install inxi or set INXI_DASH_INXI_BINARY."
            ) from error
        except subprocess.TimeoutExpired as error:
            raise InxiDashCommandError(
                f"inxi execution failed: timed out after {self._timeout:g} seconds"
            ) from error
        except OSError as error:
            raise InxiDashCommandError(f"inxi execution failed: {error}") from error
