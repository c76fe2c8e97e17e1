"""Scheduling engine: stages, orchestrator and dinner-event generation."""

from .affinity_stage import AffinityStage
from .base import BaseStage, ScheduleResult
from .dinner_events import generate_dinner_event_dates, sync_dinner_events
from .event_stage import EventStage
from .orchestrator import Orchestrator, assign_cooking_teams, assign_team_affinities, build_season_schedule

__all__ = [
    "BaseStage",
    "ScheduleResult",
    "AffinityStage",
    "EventStage",
    "Orchestrator",
    "build_season_schedule",
    "assign_team_affinities",
    "assign_cooking_teams",
    "generate_dinner_event_dates",
    "sync_dinner_events",
]
