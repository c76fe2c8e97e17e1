"""Stage that assigns roster teams to the season's open dinner events."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.orm import Session

from seasonplan.config import PlannerConfig
from seasonplan.domain.models import Season
from seasonplan.domain.types import Weekday
from seasonplan.services.calendar import find_first_cooking_day
from seasonplan.services.events import assign_teams_to_events
from seasonplan.services.roster import create_team_roster

from .base import BaseStage, ScheduleResult, quota_for, season_slots


class EventStage(BaseStage):
    """
    Rotate teams over every slot of the season, starting at its first cooking day.

    The roster is built relative to the weekday of that first day, so the
    rotation lines up with the affinities handed out by AffinityStage.
    """

    stage = "EVENTS"

    def make_schedule(
        self,
        session: Session,
        season: Season,
        cfg: PlannerConfig,
        result: ScheduleResult,
    ) -> ScheduleResult:
        open_events = [e for e in result.events if e.assigned_team_id is None]
        if not open_events:
            print(f"[INFO] No open dinner events in season {season.short_name}")
            return result

        cooking_days = season.cooking_weekdays()
        slots = season_slots(season, result.events, cfg)
        first_day = find_first_cooking_day(cooking_days, (s.date for s in slots))
        start_day = Weekday.of(first_day) if first_day else Weekday.MONDAY

        roster = create_team_roster(start_day, result.teams)
        if not roster:
            print(f"[WARN] No teams with affinity in season {season.short_name}; events left open")
            return result
        print(f"[INFO] Roster from {start_day.name.title()}: {[t.name for t in roster]}")

        events = assign_teams_to_events(roster, cooking_days, quota_for(season, cfg), slots)
        open_ids = {e.event_id for e in open_events}
        assigned = sum(1 for e in events if e.event_id in open_ids and e.assigned_team_id is not None)
        print(f"[INFO] Assigned teams to {assigned} dinner events")
        return replace(result, events=events)
