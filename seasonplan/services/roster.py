"""Roster construction: a fair, interleaved rotation order of teams."""

from __future__ import annotations

from collections import defaultdict
from itertools import zip_longest
from typing import Callable, Dict, List, Optional, Sequence

from seasonplan.domain.types import CookingTeam, Weekday, WeekdaySelection

_EXHAUSTED = object()


def closest_affinity_day(affinity: Optional[WeekdaySelection], start_day: Weekday) -> Optional[Weekday]:
    """The flagged weekday reached first when walking forward from ``start_day``."""
    if affinity is None or affinity.is_empty():
        return None
    return min(affinity.days(), key=lambda wd: wd.distance_from(start_day))


def compare_affinities(
    start_day: Weekday,
) -> Callable[[Optional[WeekdaySelection], Optional[WeekdaySelection]], int]:
    """
    Build a comparator ordering affinities by cyclic distance from ``start_day``.

    Missing or empty affinities sort after real ones. Wrap with
    ``functools.cmp_to_key`` to use with ``sorted``.
    """

    def _compare(a: Optional[WeekdaySelection], b: Optional[WeekdaySelection]) -> int:
        day_a = closest_affinity_day(a, start_day)
        day_b = closest_affinity_day(b, start_day)
        if day_a is None and day_b is None:
            return 0
        if day_a is None:
            return 1
        if day_b is None:
            return -1
        diff = day_a.distance_from(start_day) - day_b.distance_from(start_day)
        return (diff > 0) - (diff < 0)

    return _compare


def create_sorted_affinities_to_teams_map(
    teams: Sequence[CookingTeam],
    start_day: Weekday = Weekday.MONDAY,
) -> Dict[Weekday, List[CookingTeam]]:
    """
    Group teams by the affinity weekday closest to ``start_day``.

    Args:
        teams: Teams to group; teams without an affinity are left out
        start_day: Weekday the week is considered to start on

    Returns:
        Dict whose keys run in cyclic order from ``start_day`` and whose
        groups are sorted by team name
    """
    groups: Dict[Weekday, List[CookingTeam]] = defaultdict(list)
    for team in teams:
        key = closest_affinity_day(team.affinity, start_day)
        if key is not None:
            groups[key].append(team)

    ordered_keys = sorted(groups, key=lambda wd: wd.distance_from(start_day))
    return {key: sorted(groups[key], key=lambda t: t.name) for key in ordered_keys}


def create_team_roster(start_day: Weekday, teams: Sequence[CookingTeam]) -> List[CookingTeam]:
    """
    Interleave the weekday groups into one rotation order.

    Round r takes the r-th team of every group in key order, skipping groups
    that have run out. Three Monday teams and one Wednesday team give
    [Mon1, Wed1, Mon2, Mon3], so the Wednesday team is not left waiting for
    three full cycles.
    """
    groups = create_sorted_affinities_to_teams_map(teams, start_day).values()
    return [
        team
        for round_ in zip_longest(*groups, fillvalue=_EXHAUSTED)
        for team in round_
        if team is not _EXHAUSTED
    ]
