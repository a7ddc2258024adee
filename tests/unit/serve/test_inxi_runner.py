"""Unit tests for inxi process invocation."""

from __future__ import annotations

import subprocess
from dataclasses import replace

import pytest

from core.config import DashConfig
from core.errors import InxiDashCommandError, InxiDashMissingBinaryError
from serve.inxi_runner import InxiRunner


@pytest.fixture
def config() -> DashConfig:
    return replace(DashConfig.from_env(), inxi_binary="inxi", command_timeout_seconds=5.0)


def _fake_run(returncode: int, stdout: bytes = b"", stderr: bytes = b"", calls=None):
    def _run(command, **kwargs):
        if calls is not None:
            calls.append((command, kwargs))
        return subprocess.CompletedProcess(command, returncode, stdout=stdout, stderr=stderr)

    return _run


def test_run_parses_captured_output(
    config: DashConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Runner should pass fixed mode args and parse the stripped output."""
    calls: list = []
    stdout = b"\x0312System:\x03\n  \x0312Kernel\x03 6.12 arch x86_64\n"
    monkeypatch.setattr(subprocess, "run", _fake_run(0, stdout=stdout, calls=calls))

    report = InxiRunner(config).run("full")

    assert calls[0][0] == ["inxi", "-F", "-z"] and calls[0][1]["timeout"] == 5.0
    assert report.mode == "full"
    assert report.sections[0].entries[0].value == "6.12 arch x86_64"


def test_run_raises_command_error_on_non_zero_exit(
    config: DashConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A failing inxi run should surface its stderr."""
    monkeypatch.setattr(subprocess, "run", _fake_run(2, stderr=b"unsupported option"))

    with pytest.raises(InxiDashCommandError, match="unsupported option"):
        InxiRunner(config).run("basic")


def test_run_raises_missing_binary_error(
    config: DashConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A missing executable should be reported distinctly."""

    def _missing(command, **kwargs):
        raise FileNotFoundError(command[0])

    monkeypatch.setattr(subprocess, "run", _missing)

    with pytest.raises(InxiDashMissingBinaryError):
        InxiRunner(config).run("basic")


def test_run_raises_command_error_on_timeout(
    config: DashConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A hung inxi process should be reported as a command failure."""

    def _hang(command, **kwargs):
        raise subprocess.TimeoutExpired(command, kwargs["timeout"])

    monkeypatch.setattr(subprocess, "run", _hang)

    with pytest.raises(InxiDashCommandError, match="timed out"):
        InxiRunner(config).run("maximum")


def test_ensure_available_checks_version(
    config: DashConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Availability check should run inxi --version and accept exit 0."""
    calls: list = []
    monkeypatch.setattr(subprocess, "run", _fake_run(0, calls=calls))

    InxiRunner(config).ensure_available()

    assert calls[0][0] == ["inxi", "--version"]


def test_ensure_available_rejects_non_zero_version_exit(
    config: DashConfig, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A broken inxi install should fail the availability check."""
    monkeypatch.setattr(subprocess, "run", _fake_run(1))

    with pytest.raises(InxiDashCommandError):
        InxiRunner(config).ensure_available()
