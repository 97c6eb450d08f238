"""Command line tests."""

import pytest
from typer.testing import CliRunner

from cybertime.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCommands:
    def test_explain(self, runner):
        result = runner.invoke(app, ["explain", "7"])
        assert result.exit_code == 0
        assert "Cycle: 7 (Each cycle ≈ 3.65 Earth days)" in result.output

    def test_compare(self, runner):
        result = runner.invoke(app, ["compare", "5 arc 3", "7"])
        assert result.exit_code == 0
        assert "Klik: 95, Chord: 6, Cycle: 6, Solar Cycle: 0" in result.output

    def test_add(self, runner):
        result = runner.invoke(app, ["add", "7", "3 days"])
        assert result.exit_code == 0
        assert "21 arc 8 7 arc 0" in result.output

    def test_subtract(self, runner):
        result = runner.invoke(app, ["subtract", "7", "1 day"])
        assert result.exit_code == 0
        assert "26 arc 7 6 arc 0" in result.output

    def test_seconds(self, runner):
        result = runner.invoke(app, ["seconds", "7"])
        assert result.exit_code == 0
        assert "2209032.0" in result.output

    def test_from_seconds(self, runner):
        result = runner.invoke(app, ["from-seconds", "86400"])
        assert result.exit_code == 0
        assert "73 arc 2 0 arc 0" in result.output

    def test_version(self, runner):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "cybertime version" in result.output


class TestFailures:
    def test_bad_date_exits_nonzero(self, runner):
        result = runner.invoke(app, ["explain", "abc"])
        assert result.exit_code == 1
        assert "Error: Invalid cybertronian date format." in result.output

    def test_seconds_bad_date(self, runner):
        result = runner.invoke(app, ["seconds", "1 2 3 4 5"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    @pytest.mark.parametrize("value", ["inf", "nan"])
    def test_from_seconds_non_finite(self, runner, value):
        result = runner.invoke(app, ["from-seconds", "--", value])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Error: Earth seconds must be a finite number." in result.output

    def test_malformed_token(self, runner):
        result = runner.invoke(app, ["explain", "5-3"])
        assert result.exit_code == 1
        assert "Error: Invalid cybertronian date format." in result.output

    def test_subtract_before_origin(self, runner):
        result = runner.invoke(app, ["subtract", "7", "1 year"])
        assert result.exit_code == 1
        assert "before the start of Cybertronian time" in result.output
