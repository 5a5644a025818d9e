"""Guard clause extraction and parsing.

Guard clauses ("when ...", "until ...") are free-form phrases, so they are
carved out of the raw command string rather than its tokens. Each clause is
then parsed as either a temperature comparison or a 12-hour clock time.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

from domolect.domain.errors import (
    InvalidComparison,
    InvalidTemperatureConditionFormat,
    InvalidTemperatureFormat,
    InvalidTimeFormat,
    InvalidTimeValue,
    NonPositiveTemperature,
)
from domolect.domain.models import (
    Comparison,
    Condition,
    TemperatureCondition,
    TimeCondition,
)

GUARD_KEYWORDS = ("when", "until")

TEMPERATURE_SUBJECT = "current-temperature"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

# current-temperature <comparison> [<temperature>]
_TEMPERATURE_CONDITION_RE = re.compile(
    r"current-temperature\s+(?P<comparison>\S+)(?:\s+(?P<temperature>.*))?",
    re.IGNORECASE | re.DOTALL,
)

# H:MM[ ](am|pm)
_TIME_RE = re.compile(
    r"(?P<hour>[0-9]{1,2}):(?P<minute>[0-9]{2})\s*(?P<meridiem>am|pm)",
    re.IGNORECASE,
)

_COMPARISONS: Dict[str, Comparison] = {c.value: c for c in Comparison}


def extract_condition(command: str, keyword: str) -> Optional[str]:
    """Return the text of the ``keyword`` clause in ``command``, or None if absent.

    The clause runs to the start of the next guard keyword after it, or to
    the end of the string, so the order of "when" and "until" does not matter.
    """
    index = command.find(f" {keyword} ")
    if index == -1:
        return None
    start = index + len(keyword) + 2

    end = len(command)
    for other in GUARD_KEYWORDS:
        # start - 1: the space closing this keyword may open the next one
        pos = command.find(f" {other} ", start - 1)
        if pos != -1:
            end = min(end, pos)
    return command[start:end].strip()


def extract_conditions(command: str) -> Dict[str, str]:
    """Map each guard keyword present in ``command`` to its raw clause text."""
    clauses: Dict[str, str] = {}
    for keyword in GUARD_KEYWORDS:
        text = extract_condition(command, keyword)
        if text is not None:
            clauses[keyword] = text
    return clauses


def parse_temperature(literal: str) -> int:
    """Parse ``"295K"`` or ``"295 K"`` (any case of K) into a positive integer."""
    text = literal.strip().upper()
    if not text.endswith("K"):
        raise InvalidTemperatureFormat("Temperature must end with K")
    number = text[:-1].strip()
    if not _INTEGER_RE.fullmatch(number):
        raise InvalidTemperatureFormat()
    kelvin = int(number)
    if kelvin <= 0:
        raise NonPositiveTemperature()
    return kelvin


def parse_comparison(phrase: str) -> Comparison:
    try:
        return _COMPARISONS[phrase.lower()]
    except KeyError:
        raise InvalidComparison(f"Invalid comparison: {phrase}") from None


def parse_temperature_condition(text: str) -> TemperatureCondition:
    m = _TEMPERATURE_CONDITION_RE.fullmatch(text.strip())
    if not m:
        raise InvalidTemperatureConditionFormat()

    comparison = parse_comparison(m.group("comparison"))
    literal = m.group("temperature")
    if not literal or not literal.strip():
        raise InvalidTemperatureFormat("Temperature is missing")
    return TemperatureCondition(
        threshold_kelvin=parse_temperature(literal),
        comparison=comparison,
    )


def parse_time_condition(text: str) -> TimeCondition:
    """Parse a 12-hour clock time and normalize it to 24-hour form.

    12am is 0:MM, 12pm is 12:MM, other pm hours gain 12.
    """
    m = _TIME_RE.fullmatch(text.strip())
    if not m:
        raise InvalidTimeFormat()

    hour = int(m.group("hour"))
    minute = int(m.group("minute"))
    meridiem = m.group("meridiem").lower()
    if not (1 <= hour <= 12 and 0 <= minute <= 59):
        raise InvalidTimeValue()

    if meridiem == "am" and hour == 12:
        hour = 0
    elif meridiem == "pm" and hour != 12:
        hour += 12
    return TimeCondition(hour=hour, minute=minute)


def parse_condition(text: str) -> Condition:
    """Parse one guard clause; temperature clauses start with ``current-temperature``."""
    if text.strip().lower().startswith(TEMPERATURE_SUBJECT):
        return parse_temperature_condition(text)
    return parse_time_condition(text)
