"""Tests for the pace command line."""

import json

import pytest
from typer.testing import CliRunner

from cli import __version__
from cli.main import app

runner = CliRunner()


@pytest.mark.parametrize(
    "args, line",
    [
        (["-t", "3600", "-d", "10000"], "10.00 km/h"),
        (["-d", "10km", "-s", "5m/s"], "33m20s"),
        (["--time", "50m", "--speed", "300/km", "--output", "km"], "10.00 km"),
        (["-s", "12km/h", "-o", "/km"], "5m00s/km"),
        (["-s", "300/km", "-o", "s/km", "-p", "0"], "300 sec/km"),
        (["-t", "90"], "1m30s"),
        (["-d", "1mi", "-o", "m", "-p", "1"], "1609.3 m"),
    ],
)
def test_calculation_output(args, line):
    """Test a successful calculation prints one line."""
    result = runner.invoke(app, args)

    assert result.exit_code == 0
    assert result.stdout.strip() == line


def test_json_output():
    """Test --json prints the full result."""
    result = runner.invoke(app, ["-t", "1h", "-d", "10km", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["target"] == "speed"
    assert data["recalculated"] is True
    assert data["unit"] == "km/h"
    assert data["text"] == "10.00 km/h"
    assert data["output_value"] == pytest.approx(10.0)


@pytest.mark.parametrize(
    "args, code",
    [
        (["-t", "1h", "-d", "10km", "-s", "5"], 1),
        (["-p", "3"], 2),
        (["-t", "5h3d"], 3),
        (["-s", "fast"], 4),
        (["-d", "10furlongs"], 5),
        (["-d", "10km", "-o", " "], 6),
        (["-t", "1h", "-d", "10km", "-o", "mi"], 7),
        (["-d", "10km", "-o", "km/h"], 8),
        (["-t", "1h", "-o", "s"], 9),
        (["-t", "1h", "-p", "x"], 10),
        (["-t", "0", "-d", "10km"], 12),
    ],
)
def test_error_exit_codes(args, code):
    """Test each failure exits with its code."""
    result = runner.invoke(app, args)

    assert result.exit_code == code
    assert "✗" in result.output


def test_error_message_is_shown():
    """Test the error message reaches the user."""
    result = runner.invoke(app, ["-t", "1h", "-d", "10km", "-s", "5"])
    assert "Only two of time, distance and speed may be given" in result.output


@pytest.mark.parametrize("args", [[], ["-h"], ["--help"]])
def test_help(args):
    """Test help is shown without arguments and with -h."""
    result = runner.invoke(app, args)

    assert result.exit_code == 0
    assert "Usage" in result.output
    assert "--distance" in result.output


def test_verbose():
    """Test -v still prints the result."""
    result = runner.invoke(app, ["-v", "-t", "1h30m"])

    assert result.exit_code == 0
    assert "1h30m00s" in result.stdout


def test_version():
    """Test --version."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert f"pace version {__version__}" in result.output


def test_units_command():
    """Test the units listing."""
    result = runner.invoke(app, ["units"])

    assert result.exit_code == 0
    assert "Speed Units" in result.output
    assert "sec/km" in result.output


def test_units_command_json():
    """Test the units listing as JSON."""
    result = runner.invoke(app, ["units", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert set(data) == {"time", "distance", "speed"}
    paces = {row["unit"] for row in data["speed"] if row["pace"]}
    assert paces == {"s/m", "s/yd", "s/km", "s/mi", "/m", "/yd", "/km", "/mi"}
    defaults = [row["unit"] for row in data["speed"] if row["default"]]
    assert defaults == ["km/h"]


@pytest.mark.parametrize(
    "args, code",
    [
        (["-t", "9" * 400 + "h"], 3),
        (["-t", "9" * 400, "-d", "9" * 400], 3),
        (["-d", "9" * 400], 5),
        (["-d", "10km", "-p", "999999999999"], 10),
    ],
)
def test_oversized_inputs_exit_cleanly(args, code):
    """Test oversized inputs are reported instead of crashing."""
    result = runner.invoke(app, args)

    assert result.exit_code == code
    assert not isinstance(result.exception, (OverflowError, ValueError))
    assert "inf" not in result.stdout
    assert "nan" not in result.stdout


@pytest.mark.parametrize(
    "variable, value",
    [("PACECALC_DEFAULT_PRECISION", "x"), ("PACECALC_LOG_LEVEL", "loud")],
)
def test_invalid_environment_setting(monkeypatch, variable, value):
    """Test broken settings are reported with the configuration exit code."""
    monkeypatch.setenv(variable, value)
    result = runner.invoke(app, ["-d", "10km"])

    assert result.exit_code == 14
    assert variable in result.output
