from __future__ import annotations

from collections import Counter
from typing import List

from seasonplan.domain.models import Season
from seasonplan.domain.types import WeekdaySelection


def collect_season_errors(season: Season) -> List[str]:
    errors: List[str] = []

    try:
        cooking_days = WeekdaySelection.from_mask(season.cooking_days or "")
    except ValueError as e:
        errors.append(str(e))
    else:
        if cooking_days.is_empty():
            errors.append("Season needs at least one cooking day per week")

    if season.start_date is None or season.end_date is None:
        errors.append("Season needs both a start and an end date")
        return errors
    if season.start_date > season.end_date:
        errors.append(f"Season starts {season.start_date} after it ends {season.end_date}")

    if season.consecutive_cooking_days is not None and season.consecutive_cooking_days < 1:
        errors.append(f"consecutive_cooking_days must be at least 1, got {season.consecutive_cooking_days}")

    holidays = sorted(season.holidays, key=lambda h: h.start_date)
    for holiday in holidays:
        if holiday.start_date > holiday.end_date:
            errors.append(f"Holiday starts {holiday.start_date} after it ends {holiday.end_date}")
        elif holiday.start_date < season.start_date or holiday.end_date > season.end_date:
            errors.append(f"Holiday {holiday.start_date}..{holiday.end_date} lies outside the season")
    for prev, nxt in zip(holidays, holidays[1:]):
        if nxt.start_date <= prev.end_date:
            errors.append(
                f"Holidays overlap: {prev.start_date}..{prev.end_date} and {nxt.start_date}..{nxt.end_date}"
            )
    return errors


def validate_season(season: Season) -> None:
    """Raise ValueError listing every configuration problem of ``season``."""
    errors = collect_season_errors(season)
    if errors:
        raise ValueError(f"Season '{season.short_name}' is invalid: " + "; ".join(errors))


def validate_schedule(season: Season) -> None:
    """
    Check the persisted dinner-event schedule of a season.

    Raises:
        ValueError: If an event references a team outside the season, falls
            on a holiday, or shares its date with another event
    """
    team_ids = {t.id for t in season.teams}
    holidays = season.holiday_ranges()

    unknown = [e for e in season.dinner_events if e.cooking_team_id is not None and e.cooking_team_id not in team_ids]
    if unknown:
        raise ValueError(f"Dinner events reference unknown team ids: {sorted({e.cooking_team_id for e in unknown})}")

    on_holiday = [e for e in season.dinner_events if any(h.contains(e.date) for h in holidays)]
    if on_holiday:
        raise ValueError(f"Dinner events fall on holidays: {sorted(str(e.date) for e in on_holiday)}")

    duplicates = [d for d, n in Counter(e.date for e in season.dinner_events).items() if n > 1]
    if duplicates:
        raise ValueError(f"Several dinner events share a date: {sorted(str(d) for d in duplicates)}")

    print("[OK] Schedule validated")
