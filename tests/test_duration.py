import pytest

from course_scraper.utils.duration import (
    DurationSpec,
    compute_duration,
    hours_to_hhmm,
    minutes_to_hhmm,
    months_to_hhmm,
    parse_duration,
    weeks_to_hhmm,
)


def test_hours_to_hhmm_converts_fractional_hours():
    assert hours_to_hhmm(6.5) == "06:30"
    assert hours_to_hhmm(0.25) == "00:15"
    assert hours_to_hhmm(14) == "14:00"


def test_hours_to_hhmm_carries_rounded_minutes():
    assert hours_to_hhmm(1.999) == "02:00"


def test_weeks_to_hhmm_multiplies_by_pace():
    assert weeks_to_hhmm(6, 4) == "24:00"
    assert weeks_to_hhmm(3, 2.5) == "07:30"


def test_months_to_hhmm_counts_four_weeks_and_floors():
    assert months_to_hhmm(3, 10) == "120:00"
    assert months_to_hhmm(1, 2.7) == "10:00"


def test_minutes_to_hhmm():
    assert minutes_to_hhmm(45) == "00:45"
    assert minutes_to_hhmm(135) == "02:15"


def test_parse_duration_separates_pace_from_length():
    spec = parse_duration("6 weeks, 4 hours per week")

    assert spec == DurationSpec(weeks=6, hours_per_week=4.0)


def test_parse_duration_range_takes_upper_bound():
    assert parse_duration("3-4 hours per week").hours_per_week == 4.0


def test_parse_duration_nothing_recognised_is_empty():
    assert parse_duration("Self-paced").is_empty
    assert parse_duration(None).is_empty


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Approx. 14 hours to complete", "14:00"),
        ("11 hours", "11:00"),
        ("6 weeks, 4 hours a week", "24:00"),
        ("3 months at 10 hours a week", "120:00"),
        ("6 weeks, 4 hours per week", "24:00"),
        ("6 weeks 4–6 hours per week", "36:00"),
        ("5 semaines 2 heures par semaine", "10:00"),
        ("22h 13m", "22:13"),
        ("Durée 7h", "07:00"),
        ("Durée : 10 heures", "10:00"),
        ("1.5 hrs", "01:30"),
        ("45 mins", "00:45"),
        ("2 hours 30 minutes", "02:30"),
        ("4 hours total", "04:00"),
    ],
)
def test_compute_duration_from_page_text(text, expected):
    assert compute_duration(text) == expected


@pytest.mark.parametrize("text", ["", None, "Self-paced", "6 weeks"])
def test_compute_duration_without_enough_information(text):
    assert compute_duration(text) == "00:00"


def test_compute_duration_accepts_parsed_spec():
    assert compute_duration(DurationSpec(months=2, hours_per_week=5)) == "40:00"
