"""Form handler tests."""

from cybertime.forms import (
    FormResult,
    add_form,
    compare_form,
    explain_form,
    from_seconds_form,
    seconds_form,
    subtract_form,
)


class TestExplainForm:
    def test_success(self):
        result = explain_form("5 arc 3")
        assert result.ok
        assert result.output == (
            "Chord: 3 (1/10 of a cycle ≈ 8.76 hours)\n"
            "Klik: 5 (1/1000 of a cycle ≈ 5 Earth minutes)"
        )

    def test_bad_date(self):
        result = explain_form("abc")
        assert result == FormResult("Error: Invalid cybertronian date format.", ok=False)


class TestCompareForm:
    def test_success(self):
        result = compare_form("5 arc 3", "7")
        assert result.ok
        assert str(result) == (
            "Elapsed Cybertronian Time:\n"
            "Klik: 95, Chord: 6, Cycle: 6, Solar Cycle: 0\n\n"
            "Elapsed Earth Time:\n"
            "0 years, 3 weeks, 3 days, 10 hours, 53 minutes, 1 seconds"
        )

    def test_earth_time_uses_exact_seconds(self):
        result = compare_form("1 arc 0 0 arc 1000000000", "0")
        assert result.output.endswith(
            "10000000000 years, 0 weeks, 0 days, 0 hours, 5 minutes, 15 seconds"
        )
        assert "Klik: 1, Chord: 0, Cycle: 0, Solar Cycle: 1000000000" in result.output

    def test_second_date_invalid(self):
        result = compare_form("7", "1 2 3 4 5")
        assert not result.ok
        assert result.output.startswith("Error: ")


class TestAddForm:
    def test_success(self):
        assert add_form("7", "3 days") == FormResult("New Cybertronian Date:\n21 arc 8 7 arc 0")

    def test_zero_duration(self):
        assert add_form("7", "later") == FormResult(
            "Error: Invalid or zero Earth time to add.", ok=False
        )


class TestSubtractForm:
    def test_success(self):
        result = subtract_form("7", "1 day")
        assert result.output == "Cybertronian Date after subtracting time:\n26 arc 7 6 arc 0"

    def test_before_origin(self):
        result = subtract_form("5 arc 3", "1 year")
        assert result == FormResult(
            "Error: Resulting date is before the start of Cybertronian time.", ok=False
        )


class TestSecondsForm:
    def test_success(self):
        assert seconds_form("7") == FormResult("2209032.0")

    def test_bad_date(self):
        assert not seconds_form("5-3").ok


class TestFromSecondsForm:
    def test_success(self):
        assert from_seconds_form(86400.0) == FormResult("73 arc 2 0 arc 0")

    def test_non_finite(self):
        assert from_seconds_form(float("nan")) == FormResult(
            "Error: Earth seconds must be a finite number.", ok=False
        )
