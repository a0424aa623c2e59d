"""Tests for pay configuration parsing."""

import pytest

from bureau_payroll.deadlines import (
    ConfigurationError,
    DayOfMonth,
    LastWeekday,
    PayFrequency,
    Weekday,
    parse_frequency,
    parse_pay_day_rule,
)
from bureau_payroll.deadlines.rules import parse_weekday


class TestParseFrequency:
    @pytest.mark.parametrize("value", ["weekly", "fortnightly", "four_weekly", "monthly"])
    def test_known_frequencies(self, value):
        assert parse_frequency(value) is PayFrequency(value)

    def test_case_and_whitespace_insensitive(self):
        assert parse_frequency(" Monthly ") is PayFrequency.MONTHLY

    def test_enum_passes_through(self):
        assert parse_frequency(PayFrequency.WEEKLY) is PayFrequency.WEEKLY

    @pytest.mark.parametrize("value", ["biweekly", "", "semimonthly", "daily"])
    def test_unknown_frequency_raises(self, value):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_frequency(value)
        assert exc_info.value.field == "pay_frequency"
        assert exc_info.value.value == value

    def test_non_string_raises(self):
        with pytest.raises(ConfigurationError):
            parse_frequency(None)


class TestParsePayDayRule:
    def test_weekday_for_weekly(self):
        assert parse_pay_day_rule("weekly", "friday") == Weekday(4)
        assert parse_pay_day_rule("fortnightly", "Monday") == Weekday(0)
        assert parse_pay_day_rule("four_weekly", " sunday ") == Weekday(6)

    def test_numeric_day_for_monthly(self):
        assert parse_pay_day_rule("monthly", "28") == DayOfMonth(28)
        assert parse_pay_day_rule("monthly", "1") == DayOfMonth(1)
        assert parse_pay_day_rule("monthly", "31") == DayOfMonth(31)

    def test_last_weekday_for_monthly(self):
        assert parse_pay_day_rule("monthly", "last_friday") == LastWeekday(4)
        assert parse_pay_day_rule("monthly", "LAST_MONDAY") == LastWeekday(0)

    def test_parsed_rule_passes_through(self):
        assert parse_pay_day_rule("monthly", DayOfMonth(15)) == DayOfMonth(15)

    @pytest.mark.parametrize("value", ["0", "32", "99"])
    def test_out_of_range_day_raises(self, value):
        with pytest.raises(ConfigurationError, match="between 1 and 31"):
            parse_pay_day_rule("monthly", value)

    @pytest.mark.parametrize("value", ["fri", "funday", "last_fri", "last_", "-1", "1.5"])
    def test_unrecognized_values_raise(self, value):
        with pytest.raises(ConfigurationError):
            parse_pay_day_rule("monthly", value)

    def test_empty_pay_day_raises(self):
        with pytest.raises(ConfigurationError, match="required"):
            parse_pay_day_rule("weekly", "  ")

    @pytest.mark.parametrize("value", ["15", "last_friday"])
    def test_monthly_rule_for_weekly_frequency_raises(self, value):
        with pytest.raises(ConfigurationError, match="requires a weekday name"):
            parse_pay_day_rule("weekly", value)

    def test_weekday_for_monthly_frequency_raises(self):
        with pytest.raises(ConfigurationError, match="monthly payroll requires"):
            parse_pay_day_rule("monthly", "friday")

    def test_out_of_range_rule_object_raises(self):
        with pytest.raises(ConfigurationError):
            parse_pay_day_rule("monthly", DayOfMonth(40))
        with pytest.raises(ConfigurationError):
            parse_pay_day_rule("weekly", Weekday(7))

    def test_error_message_names_value(self):
        with pytest.raises(ConfigurationError) as exc_info:
            parse_pay_day_rule("weekly", "funday")
        assert "'funday'" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)


class TestParseWeekday:
    def test_names(self):
        assert parse_weekday("monday") == 0
        assert parse_weekday("Sunday") == 6

    def test_unknown_name(self):
        with pytest.raises(ConfigurationError):
            parse_weekday("someday")
