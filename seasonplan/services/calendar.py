"""Cooking calendar: which dates of a season are cooking days."""

from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

from seasonplan.domain.types import DateRange, Weekday, WeekdaySelection


def is_cooking_day(day: date, weekday_selection: WeekdaySelection) -> bool:
    """Weekday lookup only; holidays are not considered here."""
    return weekday_selection[Weekday.of(day)]


def find_first_cooking_day(weekday_selection: WeekdaySelection, dates: Iterable[date]) -> Optional[date]:
    """
    Find the chronologically earliest cooking day among ``dates``.

    Args:
        weekday_selection: Season cooking days
        dates: Candidate dates in any order

    Returns:
        Earliest qualifying date, or None when nothing qualifies
    """
    qualifying = [d for d in dates if is_cooking_day(d, weekday_selection)]
    return min(qualifying) if qualifying else None


def each_cooking_day(weekday_selection: WeekdaySelection, date_range: DateRange) -> List[date]:
    """All dates in ``date_range`` (inclusive) whose weekday is flagged, ascending."""
    if weekday_selection.is_empty():
        return []
    return [d for d in date_range.days() if is_cooking_day(d, weekday_selection)]


def compute_cooking_dates(
    weekday_selection: WeekdaySelection,
    date_range: DateRange,
    holiday_ranges: Sequence[DateRange] = (),
) -> List[date]:
    """
    Compute the cooking dates of a season.

    Args:
        weekday_selection: Which weekdays are cooking days
        date_range: Season dates, inclusive
        holiday_ranges: Excluded ranges, inclusive, in any order (may overlap)

    Returns:
        Ascending list of distinct dates that are cooking days and not holidays
    """
    return [
        d
        for d in each_cooking_day(weekday_selection, date_range)
        if not any(h.contains(d) for h in holiday_ranges)
    ]


def is_holiday_week_off(day: date, holiday_ranges: Sequence[DateRange], weekday_selection: WeekdaySelection) -> bool:
    """
    Decide whether a holiday cooking day is a week off rather than ghost duty.

    Within one holiday, the cooking days that add up to whole cooking weeks
    are week off; the remaining tail counts as ghost duty. With Mon-Thu
    cooking (4 per week), a holiday holding 5 cooking days gives 4 days off
    and 1 ghost-duty day.

    Args:
        day: Date to classify
        holiday_ranges: All holidays of the season
        weekday_selection: Season cooking days

    Returns:
        True only when ``day`` is a cooking day inside a holiday and falls in
        the week-off portion of every holiday containing it
    """
    if not is_cooking_day(day, weekday_selection):
        return False
    containing = [h for h in holiday_ranges if h.contains(day)]
    if not containing:
        return False

    per_week = len(weekday_selection.days())
    for holiday in containing:
        holiday_days = each_cooking_day(weekday_selection, holiday)
        week_off_days = (len(holiday_days) // per_week) * per_week
        if holiday_days.index(day) >= week_off_days:
            return False
    return True
