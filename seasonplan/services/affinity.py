"""Weekly affinity assignment for cooking teams."""

from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import List, Sequence

from seasonplan.domain.types import CookingTeam, Weekday, WeekdaySelection

from .calendar import is_cooking_day
from .rotation import block_slice, rotate


def cooking_weekday_order(weekday_selection: WeekdaySelection, start_day: Weekday) -> List[Weekday]:
    """
    Flagged weekdays in rotation order, beginning at ``start_day``.

    Cooking days {Mon, Wed, Fri} starting Wednesday give [Wed, Fri, Mon].
    Returns an empty list when ``start_day`` is not flagged.
    """
    days = weekday_selection.days()
    if start_day not in days:
        return []
    return rotate(days, days.index(start_day))


def assign_affinities(
    teams: Sequence[CookingTeam],
    weekday_selection: WeekdaySelection,
    consecutive_cooking_days: int,
    first_day: date,
) -> List[CookingTeam]:
    """
    Fill in missing team affinities with a block-wise round robin over the cooking weekdays.

    Teams that already carry an affinity keep it and keep their position, so
    calling this again on its own output changes nothing. The n-th team
    without an affinity receives ``consecutive_cooking_days`` weekdays taken
    cyclically from the rotation order, starting at ``n * consecutive_cooking_days``.
    When there are more blocks than weekdays, several teams share a weekday.

    Args:
        teams: Cooking teams of the season
        weekday_selection: Season cooking days
        consecutive_cooking_days: Block size per team
        first_day: First cooking date of the season; anchors the rotation

    Returns:
        New list of teams. Returned unchanged when ``first_day`` is not a
        cooking day or the block size is below 1.
    """
    if not is_cooking_day(first_day, weekday_selection):
        print(f"[WARN] First day {first_day} is not a cooking day; affinities left unchanged")
        return list(teams)
    if consecutive_cooking_days < 1:
        return list(teams)

    order = cooking_weekday_order(weekday_selection, Weekday.of(first_day))

    result: List[CookingTeam] = []
    unassigned_index = 0
    for team in teams:
        if team.affinity is not None:
            result.append(team)
            continue
        block = block_slice(order, unassigned_index * consecutive_cooking_days, consecutive_cooking_days)
        result.append(replace(team, affinity=WeekdaySelection.from_days(block)))
        unassigned_index += 1
    return result
