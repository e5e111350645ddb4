"""
BirthDate Value Object

Strict YYYY-MM-DD date handling and age derivation.

Both directions (parse and format) live here so that the external date
representation can never drift between reads and writes.
"""

from dataclasses import dataclass
from datetime import date, datetime

from constants import DATE_FORMAT, DATE_OUTPUT_TEMPLATE, DATE_PATTERN, LEAP_DAY_ANNIVERSARY
from exceptions import DateParseError


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def parse_date(value: str) -> date:
    """
    Parse a strict YYYY-MM-DD string into a date.

    Args:
        value: Date string, e.g. "1990-01-01"

    Returns:
        Parsed calendar date

    Raises:
        DateParseError: If the string is malformed or is not a real calendar
            date (e.g. "2023-02-29", "2024-13-01")
    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        raise DateParseError(str(value))
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise DateParseError(value)


def format_date(value: date) -> str:
    """
    Format a date as YYYY-MM-DD.

    Zero-pads the year so that years below 1000 round-trip through parse_date.
    """
    return DATE_OUTPUT_TEMPLATE.format(year=value.year, month=value.month, day=value.day)


def anniversary_in(dob: date, year: int) -> tuple[int, int]:
    """
    (month, day) on which the birthday falls in the given year.

    Feb 29 birthdays fall on Feb 28 in non-leap years.
    """
    if (dob.month, dob.day) == (2, 29) and not _is_leap_year(year):
        return LEAP_DAY_ANNIVERSARY
    return (dob.month, dob.day)


def compute_age(dob: date, today: date) -> int:
    """
    Whole years elapsed between dob and today.

    The age increments on the anniversary itself. Comparison is on
    (month, day) tuples rather than day-of-year ordinals, which would shift by
    one after Feb 28 in leap years.

    Args:
        dob: Date of birth
        today: Reference date

    Returns:
        Age in completed years; 0 when dob is after today
    """
    if dob > today:
        return 0

    age = today.year - dob.year
    if (today.month, today.day) < anniversary_in(dob, today.year):
        age -= 1
    return age


@dataclass(frozen=True)
class BirthDate:
    """
    Immutable date-of-birth value object.

    Wraps a calendar date with parsing, formatting and age derivation.
    """

    value: date

    @classmethod
    def parse(cls, raw: str) -> "BirthDate":
        """Create a BirthDate from a YYYY-MM-DD string."""
        return cls(parse_date(raw))

    def age_on(self, today: date) -> int:
        """Age in completed years on the given day."""
        return compute_age(self.value, today)

    def is_after(self, today: date) -> bool:
        """Check if this birth date lies in the future relative to today."""
        return self.value > today

    def __str__(self) -> str:
        """String representation."""
        return format_date(self.value)
