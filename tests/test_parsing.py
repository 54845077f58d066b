import pytest

from projectcalc.services.parsing import parse_amount, parse_hours


class TestParseAmount:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("50,50", 50.50),
            ("15,5", 15.5),
            ("-10,00", -10.0),
            ("100", 100.0),
            (",5", 0.5),
            ("R$ 1.234,56", 1234.56),
            ("  42 ", 42.0),
        ],
    )
    def test_decimal_comma(self, raw, expected):
        assert parse_amount(raw) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "raw", ["", "abc", "-", ",", "1,2,3", "--5", "1-2", "0", "-0", "0,00", None]
    )
    def test_invalid_or_zero_reads_as_zero(self, raw):
        value = parse_amount(raw)
        assert value == 0
        # never negative zero
        assert str(value) == "0.0"

    def test_period_is_dropped_not_decimal(self):
        # only comma is a decimal separator
        assert parse_amount("50.50") == 5050.0

    def test_non_ascii_digits_are_stripped(self):
        assert parse_amount("١٢") == 0
        assert parse_amount("1٢3") == 13.0

    def test_overflow_reads_as_zero(self):
        assert parse_amount("9" * 400) == 0


class TestParseHours:
    @pytest.mark.parametrize(
        "raw, expected",
        [("10", 10.0), (" 7.5 ", 7.5), (12, 12.0), (2.5, 2.5), ("1e2", 100.0)],
    )
    def test_valid(self, raw, expected):
        assert parse_hours(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", "abc", "1,5", None, "-3", -3, "inf", float("nan"), True]
    )
    def test_invalid_or_negative_is_zero(self, raw):
        assert parse_hours(raw) == 0.0
