"""Assignment of roster teams to dinner-event slots."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import replace
from datetime import date
from typing import Dict, List, Sequence

from seasonplan.domain.types import CookingTeam, DateRange, DinnerEventSlot, WeekdaySelection

from .calendar import each_cooking_day, is_holiday_week_off


def build_chronological_slots(
    weekday_selection: WeekdaySelection,
    season_dates: DateRange,
    holiday_ranges: Sequence[DateRange],
    events: Sequence[DinnerEventSlot],
    skip_holiday_week_off: bool = False,
) -> List[DinnerEventSlot]:
    """
    Build the gap-inclusive slot list of a season.

    Every cooking date of the season yields a slot: the persisted event(s) on
    that date, or a holiday slot when no event exists (holidays, deleted
    events). Events on dates that are not cooking days are merged in by date.

    Args:
        weekday_selection: Season cooking days
        season_dates: Season date range
        holiday_ranges: Season holidays
        events: Persisted dinner events as slots
        skip_holiday_week_off: Drop holiday dates that form whole cooking
            weeks instead of counting them against the quota

    Returns:
        Slots in ascending date order
    """
    events_by_date: Dict[date, List[DinnerEventSlot]] = defaultdict(list)
    for event in events:
        events_by_date[event.date].append(event)

    all_dates = sorted(set(each_cooking_day(weekday_selection, season_dates)) | set(events_by_date))

    slots: List[DinnerEventSlot] = []
    for day in all_dates:
        if day in events_by_date:
            slots.extend(sorted(events_by_date[day], key=lambda s: (s.event_id is None, s.event_id or 0)))
            continue
        if skip_holiday_week_off and is_holiday_week_off(day, holiday_ranges, weekday_selection):
            continue
        slots.append(DinnerEventSlot(date=day, holiday=True))
    return slots


def assign_teams_to_events(
    roster_teams: Sequence[CookingTeam],
    weekday_selection: WeekdaySelection,
    consecutive_cooking_days: int,
    chronological_slots: Sequence[DinnerEventSlot],
) -> List[DinnerEventSlot]:
    """
    Walk the slots in date order and hand each open one to the current roster team.

    Every slot (open, pre-assigned or holiday) uses up one day of the current
    team's quota. After ``consecutive_cooking_days`` slots the rotation moves
    on to the next roster team, wrapping at the end of the roster.

    Args:
        roster_teams: Rotation order from ``create_team_roster``
        weekday_selection: Season cooking days the slots were built from
        consecutive_cooking_days: Quota per team before rotating
        chronological_slots: Gap-inclusive slots, ascending by date

    Returns:
        Event slots with open assignments filled in; holiday slots are dropped.
        With no roster teams or a quota below 1, open slots stay unassigned.
    """
    ordered = sorted(chronological_slots, key=lambda s: s.date)
    can_assign = bool(roster_teams) and consecutive_cooking_days >= 1

    result: List[DinnerEventSlot] = []
    roster_index = 0
    quota_used = 0
    for slot in ordered:
        if can_assign and slot.assigned_team_id is None and not slot.holiday:
            slot = replace(slot, assigned_team_id=roster_teams[roster_index].id)
        if not slot.holiday:
            result.append(slot)

        if not can_assign:
            continue
        quota_used += 1
        if quota_used == consecutive_cooking_days:
            quota_used = 0
            roster_index = (roster_index + 1) % len(roster_teams)
    return result
