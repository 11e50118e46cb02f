"""Tests for the command line interface."""

import json
import logging
from datetime import datetime, timezone

import pandas as pd
import pytest
from click.testing import CliRunner

from metar_decoder import cli as cli_module
from metar_decoder.cli import cli
from metar_decoder.logging_setup import LOGGER_NAME
from metar_decoder.parser.decoder import decode
from metar_decoder.realtime.feed import LatestObservation, MetarFeedError


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop the handlers each invocation installs on the package logger."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def test_decode_json_output():
    """--json prints the exported dict."""
    runner = CliRunner()
    result = runner.invoke(cli, ["decode", "--json", "KXYZ 151854Z 18012KT 9999 FEW030 22/18 Q1013"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["station"] == "KXYZ"
    assert data["wind"]["direction"] == 180


def test_decode_accepts_separate_words():
    """Report groups may be passed as separate arguments."""
    runner = CliRunner()
    result = runner.invoke(cli, ["decode", "--json", "KXYZ", "151854Z", "00000KT", "CAVOK"])
    assert result.exit_code == 0
    assert json.loads(result.output)["atmospheric"]["cavok"] is True


def test_decode_pretty_output():
    """Without --json the report is pretty printed."""
    runner = CliRunner()
    result = runner.invoke(cli, ["decode", "KXYZ 151854Z 00000KT CAVOK"])
    assert result.exit_code == 0
    assert "KXYZ" in result.output
    assert "cavok" in result.output


def test_decode_error_aborts():
    """Parse errors are reported and abort the command."""
    runner = CliRunner()
    result = runner.invoke(cli, ["decode", "KXYZ 152554Z"])
    assert result.exit_code == 1
    assert "observation time" in result.output


def test_decode_file_writes_csv(tmp_path):
    """Every decodable line becomes a row; failures are counted."""
    source = tmp_path / "reports.txt"
    source.write_text(
        "KXYZ 151854Z 18012KT 9999 FEW030 22/18 Q1013\n"
        "\n"
        "NOT A REPORT\n"
        "KXYZ 151954Z VRB03KT CAVOK 21/17 Q1014\n"
    )
    output = tmp_path / "out" / "reports.csv"
    runner = CliRunner()
    result = runner.invoke(cli, ["decode-file", str(source), "--output", str(output)])
    assert result.exit_code == 0
    assert "Decoded 2 reports (1 failed)" in result.output
    frame = pd.read_csv(output)
    assert list(frame["station"]) == ["KXYZ", "KXYZ"]
    assert list(frame["hour"]) == [18, 19]


def test_decode_file_writes_json(tmp_path):
    """JSON output holds one record per report."""
    source = tmp_path / "reports.txt"
    source.write_text("KXYZ 151854Z 18012KT 9999 FEW030 22/18 Q1013\n")
    output = tmp_path / "reports.json"
    runner = CliRunner()
    result = runner.invoke(cli, ["decode-file", str(source), "--output", str(output), "--format", "json"])
    assert result.exit_code == 0
    records = json.loads(output.read_text())
    assert records[0]["pressure_value"] == 1013


def test_latest_command(monkeypatch):
    """The latest observation is printed with its issue time."""
    raw = "KXYZ 151854Z 00000KT CAVOK"

    def fake_latest(icao):
        return LatestObservation(datetime(2024, 5, 15, 18, 54, tzinfo=timezone.utc), raw, decode(raw))

    monkeypatch.setattr(cli_module, "latest_report", fake_latest)
    runner = CliRunner()
    result = runner.invoke(cli, ["latest", "KXYZ", "--json"])
    assert result.exit_code == 0
    assert result.output.startswith("2024-05-15 18:54Z  KXYZ 151854Z")


def test_latest_command_feed_failure(monkeypatch):
    """Feed failures abort with an error message."""

    def failing_latest(icao):
        raise MetarFeedError("Failed to fetch METAR after retries")

    monkeypatch.setattr(cli_module, "latest_report", failing_latest)
    runner = CliRunner()
    result = runner.invoke(cli, ["latest", "KXYZ"])
    assert result.exit_code == 1
    assert "Failed to fetch METAR" in result.output


def test_log_file_option(tmp_path):
    """--log-file creates the log file and its directory."""
    log_file = tmp_path / "logs" / "decoder.log"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["--log-level", "DEBUG", "--log-file", str(log_file), "decode", "KXYZ 151854Z"]
    )
    assert result.exit_code == 0
    assert "Decoded KXYZ" in log_file.read_text()
