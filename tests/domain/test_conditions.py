"""Tests for guard clause extraction and the temperature/time grammars."""

import pytest

from domolect.domain.conditions import (
    extract_condition,
    extract_conditions,
    parse_comparison,
    parse_condition,
    parse_temperature,
    parse_temperature_condition,
    parse_time_condition,
)
from domolect.domain.errors import (
    InvalidComparison,
    InvalidTemperatureConditionFormat,
    InvalidTemperatureFormat,
    InvalidTimeFormat,
    InvalidTimeValue,
    NonPositiveTemperature,
)
from domolect.domain.models import Comparison, TemperatureCondition, TimeCondition


class TestExtractConditions:
    def test_none(self):
        assert extract_conditions("turn lamp on") == {}

    def test_when_only(self):
        assert extract_conditions("turn lamp on when 10:00 pm") == {"when": "10:00 pm"}

    def test_until_only(self):
        assert extract_condition("open gate until 6:00 am", "until") == "6:00 am"
        assert extract_condition("open gate until 6:00 am", "when") is None

    def test_when_then_until(self):
        clauses = extract_conditions(
            "turn lamp on when current-temperature less-than 300K until 10:00 pm"
        )
        assert clauses == {
            "when": "current-temperature less-than 300K",
            "until": "10:00 pm",
        }

    def test_until_then_when(self):
        clauses = extract_conditions(
            "turn lamp on until 10:00 pm when current-temperature less-than 300K"
        )
        assert clauses == {
            "when": "current-temperature less-than 300K",
            "until": "10:00 pm",
        }

    def test_repeated_keyword_bounds_first_clause(self):
        assert extract_condition("turn lamp on when 1:00 pm when 2:00 pm", "when") == "1:00 pm"

    def test_keyword_match_is_literal(self):
        assert extract_conditions("turn lamp on WHEN 10:00 pm") == {}
        assert extract_conditions("turn lamp on whenever") == {}

    def test_empty_clause_before_other_keyword(self):
        assert extract_condition("turn lamp on when until 10:00 pm", "when") == ""


class TestParseTemperature:
    @pytest.mark.parametrize("literal", ["295K", "295 K", "295k", " 295K "])
    def test_forms_agree(self, literal):
        assert parse_temperature(literal) == 295

    @pytest.mark.parametrize("literal", ["0K", "-5K"])
    def test_non_positive(self, literal):
        with pytest.raises(NonPositiveTemperature):
            parse_temperature(literal)

    @pytest.mark.parametrize("literal", ["abcK", "K", "2.5K", "2 95K"])
    def test_not_an_integer(self, literal):
        with pytest.raises(InvalidTemperatureFormat) as exc:
            parse_temperature(literal)
        assert type(exc.value) is InvalidTemperatureFormat

    def test_missing_suffix(self):
        with pytest.raises(InvalidTemperatureFormat, match="must end with K"):
            parse_temperature("295")


class TestTemperatureCondition:
    @pytest.mark.parametrize("phrase,comparison", [
        ("less-than", Comparison.LESS_THAN),
        ("EQUAL-TO", Comparison.EQUAL_TO),
        ("Greater-Than", Comparison.GREATER_THAN),
    ])
    def test_comparisons(self, phrase, comparison):
        assert parse_comparison(phrase) == comparison

    def test_parses(self):
        condition = parse_temperature_condition("current-temperature less-than 300K")
        assert condition == TemperatureCondition(threshold_kelvin=300, comparison=Comparison.LESS_THAN)

    def test_case_insensitive_with_spaced_kelvin(self):
        condition = parse_temperature_condition("Current-Temperature equal-to 280 k")
        assert condition == TemperatureCondition(280, Comparison.EQUAL_TO)

    def test_unknown_comparison(self):
        with pytest.raises(InvalidComparison):
            parse_temperature_condition("current-temperature below 300K")

    def test_missing_comparison(self):
        with pytest.raises(InvalidTemperatureConditionFormat):
            parse_temperature_condition("current-temperature")

    def test_missing_temperature(self):
        with pytest.raises(InvalidTemperatureFormat):
            parse_temperature_condition("current-temperature less-than")

    def test_non_positive_threshold(self):
        with pytest.raises(NonPositiveTemperature):
            parse_temperature_condition("current-temperature less-than 0K")

    def test_describe(self):
        condition = TemperatureCondition(300, Comparison.LESS_THAN)
        assert condition.describe() == "current temperature less than 300 K"


class TestTimeCondition:
    @pytest.mark.parametrize("text,hour,minute", [
        ("12:00am", 0, 0),
        ("12:00pm", 12, 0),
        ("10:00 pm", 22, 0),
        ("10:00 am", 10, 0),
        ("1:05PM", 13, 5),
        ("12:59 AM", 0, 59),
        ("11:59 pm", 23, 59),
    ])
    def test_normalizes_to_24_hour(self, text, hour, minute):
        assert parse_time_condition(text) == TimeCondition(hour=hour, minute=minute)

    @pytest.mark.parametrize("text", ["13:00 pm", "0:30 am", "10:60 pm", "99:00 am"])
    def test_out_of_range(self, text):
        with pytest.raises(InvalidTimeValue):
            parse_time_condition(text)

    @pytest.mark.parametrize("text", ["10:00", "10 pm", "10:0 pm", "noon", "10:00 pm sharp"])
    def test_bad_format(self, text):
        with pytest.raises(InvalidTimeFormat) as exc:
            parse_time_condition(text)
        assert type(exc.value) is InvalidTimeFormat

    def test_display_uses_normalized_form(self):
        assert parse_time_condition("10:00 pm").describe() == "22:00"
        assert parse_time_condition("7:05 am").describe() == "07:05"


class TestParseCondition:
    def test_dispatches_temperature(self):
        assert isinstance(parse_condition("current-temperature greater-than 310K"), TemperatureCondition)

    def test_dispatches_time(self):
        assert isinstance(parse_condition("9:15 am"), TimeCondition)
