"""Duration parsing and HH:MM formatting.

Platforms publish effort in different shapes: a plain number of hours
("6.5 hours", "Durée 7h"), a clock length ("22h 13m"), a number of weeks
with a weekly pace ("6 weeks, 4 hours a week") or months with a weekly
pace ("3 months at 10 hours a week"). Each shape has its own named
conversion; ``compute_duration`` picks the one the text supports.
"""

import math
import re
from dataclasses import dataclass
from typing import Optional, Union

EMPTY_DURATION = "00:00"

_NUMBER = r"(\d+(?:[.,]\d+)?)"
_HOUR_UNIT = r"(?:hours?|hrs?|heures?|h)(?![a-zà-ÿ])"

PACE_RE = re.compile(
    _NUMBER + r"\s*" + _HOUR_UNIT + r"\s*(?:a|an|per|each|every|by|par|/)\s*(?:week|semaine|wk)",
    re.IGNORECASE,
)
HOURS_RE = re.compile(_NUMBER + r"\s*" + _HOUR_UNIT, re.IGNORECASE)
MINUTES_RE = re.compile(r"(\d+)\s*(?:minutes?|mins?|mn|m)(?![a-zà-ÿ])", re.IGNORECASE)
WEEKS_RE = re.compile(r"(\d+)\s*(?:weeks?|semaines?|wks?)(?![a-zà-ÿ])", re.IGNORECASE)
MONTHS_RE = re.compile(r"(\d+)\s*(?:months?|mois)(?![a-zà-ÿ])", re.IGNORECASE)


@dataclass(frozen=True)
class DurationSpec:
    """Parsed duration expression."""

    hours: Optional[float] = None
    minutes: Optional[int] = None
    weeks: Optional[int] = None
    months: Optional[int] = None
    hours_per_week: Optional[float] = None

    @property
    def is_empty(self) -> bool:
        """Whether no duration component was recognised."""
        return all(
            value is None
            for value in (self.hours, self.minutes, self.weeks, self.months, self.hours_per_week)
        )


def _to_float(value: str) -> float:
    return float(value.replace(",", "."))


def format_hhmm(hours: int, minutes: int) -> str:
    """Format a total as zero-padded two-digit hours and minutes."""
    return f"{hours:02d}:{minutes:02d}"


def hours_to_hhmm(hours: float) -> str:
    """Convert (possibly fractional) hours, e.g. 6.5 -> "06:30"."""
    whole = math.floor(hours)
    minutes = round((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    return format_hhmm(whole, minutes)


def minutes_to_hhmm(minutes: int) -> str:
    """Convert a number of minutes, e.g. 45 -> "00:45"."""
    hours, rest = divmod(minutes, 60)
    return format_hhmm(hours, rest)


def weeks_to_hhmm(weeks: int, hours_per_week: float) -> str:
    """Total effort of a weekly paced course."""
    return hours_to_hhmm(weeks * hours_per_week)


def months_to_hhmm(months: int, hours_per_week: float) -> str:
    """Total effort of a monthly course, counting four weeks per month.

    Partial hours are dropped.
    """
    return format_hhmm(math.floor(months * 4 * hours_per_week), 0)


def parse_duration(text: Optional[str]) -> DurationSpec:
    """Parse a free-text duration into its components.

    Ranges such as "3-4 hours per week" resolve to their upper bound.

    Args:
        text: Duration text as shown on the page

    Returns:
        DurationSpec, empty when nothing is recognised
    """
    if not text:
        return DurationSpec()

    hours_per_week = None
    pace = PACE_RE.search(text)
    if pace:
        hours_per_week = _to_float(pace.group(1))
        text = text[:pace.start()] + " " + text[pace.end():]

    hours = HOURS_RE.search(text)
    minutes = MINUTES_RE.search(text)
    weeks = WEEKS_RE.search(text)
    months = MONTHS_RE.search(text)

    return DurationSpec(
        hours=_to_float(hours.group(1)) if hours else None,
        minutes=int(minutes.group(1)) if minutes else None,
        weeks=int(weeks.group(1)) if weeks else None,
        months=int(months.group(1)) if months else None,
        hours_per_week=hours_per_week,
    )


def compute_duration(spec: Union[DurationSpec, str, None]) -> str:
    """Compute the total effort as HH:MM.

    Args:
        spec: Parsed duration, or raw text to parse first

    Returns:
        Zero-padded "HH:MM", "00:00" when the duration cannot be computed
    """
    if not isinstance(spec, DurationSpec):
        spec = parse_duration(spec)

    if spec.months is not None and spec.hours_per_week is not None:
        return months_to_hhmm(spec.months, spec.hours_per_week)
    if spec.weeks is not None and spec.hours_per_week is not None:
        return weeks_to_hhmm(spec.weeks, spec.hours_per_week)
    if spec.hours is not None:
        return hours_to_hhmm(spec.hours + (spec.minutes or 0) / 60)
    if spec.minutes is not None:
        return minutes_to_hhmm(spec.minutes)
    if spec.hours_per_week is not None and spec.weeks is None and spec.months is None:
        return hours_to_hhmm(spec.hours_per_week)
    return EMPTY_DURATION
