from datetime import date, timedelta

import pytest

from domain.value_objects.birth_date import (
    BirthDate,
    anniversary_in,
    compute_age,
    format_date,
    parse_date,
)
from exceptions import DateParseError, ValidationError


@pytest.mark.parametrize("raw", [
    "1990-01-01",
    "2000-02-29",
    "2024-12-31",
    "1999-06-09",
])
def test_format_inverts_parse(raw):
    assert format_date(parse_date(raw)) == raw


def test_parse_returns_calendar_date():
    assert parse_date("2000-06-15") == date(2000, 6, 15)


@pytest.mark.parametrize("raw", [
    "not-a-date",
    "",
    "2023-02-29",   # not a leap year
    "1900-02-29",   # century, not a leap year
    "2024-13-01",
    "2024-00-10",
    "2024-04-31",
    "2024-01-00",
    "1990-1-01",
    "19900101",
    " 1990-01-01",
    "1990-01-01\n",
    "1990-01-01T00:00:00",
    "1990/01/01",
])
def test_parse_rejects_malformed_and_impossible_dates(raw):
    with pytest.raises(DateParseError):
        parse_date(raw)


def test_parse_error_is_a_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        parse_date("not-a-date")
    assert "YYYY-MM-DD" in exc_info.value.message


def test_parse_rejects_non_string():
    with pytest.raises(DateParseError):
        parse_date(None)


def test_age_day_before_and_on_birthday():
    dob = date(2000, 6, 15)
    assert compute_age(dob, date(2024, 6, 14)) == 23
    assert compute_age(dob, date(2024, 6, 15)) == 24


def test_age_is_zero_on_day_of_birth():
    assert compute_age(date(2024, 3, 1), date(2024, 3, 1)) == 0


def test_age_never_decreases_and_steps_once_on_anniversary():
    dob = date(2000, 6, 15)
    day = date(2024, 6, 1)
    ages = []
    while day <= date(2024, 6, 30):
        ages.append((day, compute_age(dob, day)))
        day += timedelta(days=1)

    for (_, prev), (_, curr) in zip(ages, ages[1:]):
        assert curr >= prev
    steps = [d for (d, a), (_, p) in zip(ages[1:], ages) if a != p]
    assert steps == [date(2024, 6, 15)]


def test_age_across_leap_year_day_after_feb():
    # Day-of-year comparison would get this wrong: Mar 1 is day 61 in 2024 but 60 in 2001
    dob = date(2001, 3, 1)
    assert compute_age(dob, date(2024, 2, 29)) == 22
    assert compute_age(dob, date(2024, 3, 1)) == 23


@pytest.mark.parametrize("today, expected", [
    (date(2023, 2, 27), 22),
    (date(2023, 2, 28), 23),   # non-leap year: anniversary observed on Feb 28
    (date(2023, 3, 1), 23),
    (date(2024, 2, 28), 23),
    (date(2024, 2, 29), 24),
])
def test_leap_day_birthday(today, expected):
    assert compute_age(date(2000, 2, 29), today) == expected


def test_anniversary_in_non_leap_year():
    dob = date(2000, 2, 29)
    assert anniversary_in(dob, 2023) == (2, 28)
    assert anniversary_in(dob, 2024) == (2, 29)
    assert anniversary_in(dob, 2100) == (2, 28)


def test_future_dob_clamps_to_zero():
    assert compute_age(date(2030, 1, 1), date(2024, 1, 1)) == 0
    assert compute_age(date(2024, 6, 16), date(2024, 6, 15)) == 0


def test_format_pads_years_below_1000():
    assert format_date(date(999, 3, 7)) == "0999-03-07"
    assert format_date(date(1, 1, 1)) == "0001-01-01"


def test_birth_date_value_object():
    dob = BirthDate.parse("2000-06-15")
    assert str(dob) == "2000-06-15"
    assert dob.age_on(date(2024, 6, 15)) == 24
    assert dob.is_after(date(1999, 1, 1))
    assert not dob.is_after(date(2000, 6, 15))
    assert dob == BirthDate(date(2000, 6, 15))
