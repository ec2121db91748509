from datetime import date, datetime, timezone

from trade_history.analytics.coercion import (
    finite_or_zero,
    is_blank,
    is_missing,
    parse_amount,
    parse_entry_date,
    strip_currency_symbols,
)


def test_parse_amount_currency_and_thousands():
    assert parse_amount("€1,234.56") == 1234.56
    assert parse_amount("$1,234.56") == 1234.56
    assert parse_amount("€ 1,000") == 1000.0
    assert parse_amount("1,234,567.5") == 1234567.5


def test_parse_amount_decimal_comma():
    assert parse_amount("95,25") == 95.25
    assert parse_amount("-120,40") == -120.4
    assert parse_amount("997,01") == 997.01


def test_parse_amount_signs():
    assert parse_amount("-€150.00") == -150.0
    assert parse_amount("$-75") == -75.0
    assert parse_amount("+20") == 20.0


def test_parse_amount_numeric_prefix():
    assert parse_amount("12abc") == 12.0
    assert parse_amount("3.5 EUR") == 3.5
    assert parse_amount(".5") == 0.5


def test_parse_amount_falls_back_to_zero():
    assert parse_amount(None) == 0.0
    assert parse_amount("") == 0.0
    assert parse_amount("foo") == 0.0
    assert parse_amount("nan") == 0.0
    assert parse_amount(float("nan")) == 0.0
    assert parse_amount(float("inf")) == 0.0
    assert parse_amount("1e999") == 0.0


def test_parse_amount_non_text_values():
    assert parse_amount(42) == 42.0
    assert parse_amount(-1.25) == -1.25


def test_strip_currency_symbols_is_configurable():
    assert strip_currency_symbols("£12", ("£",)) == "12"
    assert strip_currency_symbols("£12", ("€", "$")) == "£12"
    # longer symbols are removed before their substrings
    assert strip_currency_symbols("US$10", ("$", "US$")) == "10"
    assert parse_amount("£1,250.00", symbols=("£",)) == 1250.0
    assert parse_amount("£1,250.00", symbols=()) == 0.0


def test_parse_entry_date_formats():
    assert parse_entry_date("2024-01-01") == date(2024, 1, 1)
    assert parse_entry_date("2024-03-15 10:30:00") == date(2024, 3, 15)
    assert parse_entry_date("2024-03-15T10:30:00Z") == date(2024, 3, 15)
    assert parse_entry_date("03/15/2024") == date(2024, 3, 15)
    assert parse_entry_date("25/12/2023") == date(2023, 12, 25)
    assert parse_entry_date("Mar 5, 2024") == date(2024, 3, 5)


def test_parse_entry_date_passthrough_and_epoch():
    assert parse_entry_date(date(2022, 6, 1)) == date(2022, 6, 1)
    assert parse_entry_date(datetime(2022, 6, 1, 23, 59)) == date(2022, 6, 1)
    ts = datetime(2023, 7, 4, 12, tzinfo=timezone.utc).timestamp()
    assert parse_entry_date(ts) == date(2023, 7, 4)
    assert parse_entry_date(int(ts * 1000)) == date(2023, 7, 4)


def test_parse_entry_date_invalid():
    assert parse_entry_date("bad-date") is None
    assert parse_entry_date("2024-02-30") is None
    assert parse_entry_date("") is None
    assert parse_entry_date(None) is None
    assert parse_entry_date(True) is None
    assert parse_entry_date(7) is None
    assert parse_entry_date(float("inf")) is None


def test_is_blank():
    assert is_blank(None)
    assert is_blank("")
    assert is_blank("   ")
    assert not is_blank("x")
    assert not is_blank(0)


def test_parse_entry_date_compact_digits():
    assert parse_entry_date("20240115", ("%Y%m%d",)) == date(2024, 1, 15)
    # ten digits is still an epoch in seconds
    assert parse_entry_date("1700000000", ("%Y%m%d",)) == date(2023, 11, 14)


def test_parse_amount_huge_int():
    assert parse_amount(10 ** 5000) == 0.0


def test_is_missing():
    assert is_missing(None)
    assert is_missing("")
    assert is_missing(0)
    assert is_missing(0.0)
    assert is_missing(False)
    assert is_missing(float("nan"))
    assert not is_missing("   ")
    assert not is_missing("bad-date")
    assert not is_missing(date(2024, 1, 1))


def test_finite_or_zero():
    assert finite_or_zero(12.5) == 12.5
    assert finite_or_zero(float("nan")) == 0.0
    assert finite_or_zero(float("-inf")) == 0.0
    assert finite_or_zero(None) == 0.0
    assert finite_or_zero(10 ** 400) == 0.0
