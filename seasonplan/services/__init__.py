"""Pure scheduling services: calendar, affinity, roster and event assignment."""

from .affinity import assign_affinities, cooking_weekday_order
from .calendar import (
    compute_cooking_dates,
    each_cooking_day,
    find_first_cooking_day,
    is_cooking_day,
    is_holiday_week_off,
)
from .events import assign_teams_to_events, build_chronological_slots
from .roster import compare_affinities, create_sorted_affinities_to_teams_map, create_team_roster
from .rotation import block_slice, rotate

__all__ = [
    "assign_affinities",
    "cooking_weekday_order",
    "compute_cooking_dates",
    "each_cooking_day",
    "find_first_cooking_day",
    "is_cooking_day",
    "is_holiday_week_off",
    "assign_teams_to_events",
    "build_chronological_slots",
    "compare_affinities",
    "create_sorted_affinities_to_teams_map",
    "create_team_roster",
    "block_slice",
    "rotate",
]
