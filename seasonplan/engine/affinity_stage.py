"""Stage that fills in missing weekly affinities of the season's teams."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.orm import Session

from seasonplan.config import PlannerConfig
from seasonplan.domain.models import Season
from seasonplan.services.affinity import assign_affinities
from seasonplan.services.calendar import find_first_cooking_day

from .base import BaseStage, ScheduleResult, quota_for, season_slots


class AffinityStage(BaseStage):
    """Anchor the affinity rotation on the first cooking slot of the season."""

    stage = "AFFINITY"

    def make_schedule(
        self,
        session: Session,
        season: Season,
        cfg: PlannerConfig,
        result: ScheduleResult,
    ) -> ScheduleResult:
        cooking_days = season.cooking_weekdays()
        slots = season_slots(season, result.events, cfg)
        first_day = find_first_cooking_day(cooking_days, (s.date for s in slots))
        if first_day is None:
            print(f"[WARN] Season {season.short_name} has no cooking days; affinities unchanged")
            return result

        missing = sum(1 for t in result.teams if t.affinity is None)
        teams = assign_affinities(result.teams, cooking_days, quota_for(season, cfg), first_day)
        print(f"[INFO] Affinities computed for {missing} of {len(teams)} teams (first day {first_day})")
        return replace(result, teams=teams)
