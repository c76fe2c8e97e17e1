"""Base stage interface and the in-memory state passed between stages."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from sqlalchemy.orm import Session

from seasonplan.config import PlannerConfig
from seasonplan.domain.models import Season
from seasonplan.domain.types import CookingTeam, DinnerEventSlot
from seasonplan.services.events import build_chronological_slots


@dataclass
class ScheduleResult:
    """Teams and dinner events of one season as computed so far."""

    season_id: int
    teams: List[CookingTeam] = field(default_factory=list)
    events: List[DinnerEventSlot] = field(default_factory=list)


def quota_for(season: Season, cfg: PlannerConfig) -> int:
    """Consecutive cooking days per team for ``season``."""
    if season.consecutive_cooking_days is not None:
        return season.consecutive_cooking_days
    return cfg.default_consecutive_cooking_days


def season_slots(season: Season, events: List[DinnerEventSlot], cfg: PlannerConfig) -> List[DinnerEventSlot]:
    """Gap-inclusive, chronological slots of ``season`` for the given events."""
    return build_chronological_slots(
        season.cooking_weekdays(),
        season.season_dates(),
        season.holiday_ranges(),
        events,
        skip_holiday_week_off=cfg.holiday_week_off,
    )


class BaseStage(ABC):
    """
    Abstract base class for the scheduling stages.

    A stage reads the season configuration, takes the result of the previous
    stage and returns a new result. Stages never write to the database; the
    orchestrator persists the final result.
    """

    stage: str | None = None  # Override in subclasses (e.g., "AFFINITY", "EVENTS")

    @abstractmethod
    def make_schedule(
        self,
        session: Session,
        season: Season,
        cfg: PlannerConfig,
        result: ScheduleResult,
    ) -> ScheduleResult:
        """
        Compute this stage's part of the season schedule.

        Args:
            session: Database session for data access
            season: Season being scheduled
            cfg: PlannerConfig with planner settings
            result: Output of the previous stage

        Returns:
            New ScheduleResult (the input is not modified)
        """
        pass

    def get_stage_name(self) -> str:
        """Get the name of this stage."""
        return self.stage or "UNKNOWN"
