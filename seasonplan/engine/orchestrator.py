"""Orchestrator - runs the scheduling stages for one season and persists the result."""

from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from seasonplan.config import PlannerConfig
from seasonplan.domain.repositories import DinnerEventRepository, SeasonRepository, TeamRepository
from seasonplan.validator import validate_season

from .affinity_stage import AffinityStage
from .base import BaseStage, ScheduleResult
from .event_stage import EventStage


class Orchestrator:
    """
    Orchestrator chains the scheduling stages of a season.

    Each stage works on the in-memory result of the previous one, so event
    assignment already sees the affinities computed in the same run.
    """

    def __init__(self, stage_order: List[str] | None = None):
        """
        Initialize orchestrator with stage execution order.

        Args:
            stage_order: Order to execute stages (default: AFFINITY, EVENTS)
        """
        self.stage_order = [s.upper() for s in (stage_order or ["AFFINITY", "EVENTS"])]

    def build_schedule(
        self,
        session: Session,
        season_id: int,
        cfg: PlannerConfig,
    ) -> ScheduleResult:
        """
        Compute affinities and event assignments for a season without writing them.

        Args:
            session: Database session
            season_id: Season to schedule
            cfg: PlannerConfig

        Returns:
            ScheduleResult with all teams and all dinner events of the season

        Raises:
            LookupError: If the season does not exist
            ValueError: If the season configuration is invalid
        """
        season = SeasonRepository.require(session, season_id)
        validate_season(season)
        print(f"[INFO] Orchestrator: Building schedule for season {season.short_name}")
        print(f"[INFO] Stage order: {self.stage_order}")

        stages: List[BaseStage] = []
        for name in self.stage_order:
            if name == "AFFINITY":
                stages.append(AffinityStage())
            elif name == "EVENTS":
                stages.append(EventStage())
            else:
                print(f"[WARN] Unknown stage {name} in stage_order, skipping")

        result = ScheduleResult(
            season_id=season.id,
            teams=[t.to_domain() for t in TeamRepository.get_by_season(session, season.id)],
            events=[e.to_slot() for e in DinnerEventRepository.get_by_season(session, season.id)],
        )
        for stage in stages:
            print(f"[INFO] Running {stage.get_stage_name()} stage...")
            result = stage.make_schedule(session, season, cfg, result)

        print(f"[OK] Orchestrator: {len(result.teams)} teams, {len(result.events)} dinner events")
        return result


def build_season_schedule(
    session: Session,
    season_id: int,
    cfg: PlannerConfig,
    stage_order: List[str] | None = None,
    persist: bool = True,
) -> ScheduleResult:
    """
    Convenience function to build a season schedule using the orchestrator.

    Args:
        session: Database session
        season_id: Season to schedule
        cfg: PlannerConfig
        stage_order: Optional custom stage order (defaults to cfg.stage_order)
        persist: If True, write new affinities and assignments to the database

    Returns:
        ScheduleResult
    """
    orchestrator = Orchestrator(stage_order or cfg.stage_order)
    result = orchestrator.build_schedule(session, season_id, cfg)

    if persist:
        teams_updated = TeamRepository.save_affinities(session, result.teams)
        events_updated = DinnerEventRepository.save_assignments(session, result.events)
        print(f"[INFO] Persisted {teams_updated} team affinities and {events_updated} event assignments")

    return result


def assign_team_affinities(session: Session, season_id: int, cfg: PlannerConfig, persist: bool = True) -> ScheduleResult:
    """Run only the affinity stage for a season."""
    return build_season_schedule(session, season_id, cfg, stage_order=["AFFINITY"], persist=persist)


def assign_cooking_teams(session: Session, season_id: int, cfg: PlannerConfig, persist: bool = True) -> ScheduleResult:
    """Run only the event-assignment stage for a season, using persisted affinities."""
    return build_season_schedule(session, season_id, cfg, stage_order=["EVENTS"], persist=persist)
