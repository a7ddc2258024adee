"""Unit tests for CLI command handling."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


def test_cli_parse_prints_report_json(capsys) -> None:
    """Parse command should print the report for a saved capture."""
    exit_code = main(["parse", str(fixture_path("inxi/full_capture.txt")), "--mode", "full"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and payload["mode"] == "full"
    assert payload["sections"][0]["title"] == "System"


def test_cli_parse_prints_category_rows(capsys) -> None:
    """Parse --categories should print label and title per section."""
    exit_code = main(["parse", str(fixture_path("inxi/full_capture.txt")), "--categories"])
    rows = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0
    assert "CPU\tCPU" in rows and "GPU\tGraphics" in rows and "General\tAudio" in rows


def test_cli_parse_reports_missing_capture(tmp_path: Path, capsys) -> None:
    """Unreadable capture files should exit 1 with an error line."""
    exit_code = main(["parse", str(tmp_path / "missing.txt")])

    assert exit_code == 1 and capsys.readouterr().out.startswith("error=")


def test_cli_rejects_invalid_config_file(tmp_path: Path, capsys) -> None:
    """Invalid config files should fail before any command runs."""
    config_file = tmp_path / "dash.yaml"
    config_file.write_text("colour: blue\n", encoding="utf-8")

    exit_code = main(["--config", str(config_file), "parse", "unused.txt"])

    assert exit_code == 1 and "unknown fields" in capsys.readouterr().out


def test_cli_requires_a_command() -> None:
    """Running without a subcommand should be an argparse usage error."""
    with pytest.raises(SystemExit):
        main([])
