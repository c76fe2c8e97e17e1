"""Tests for Orchestrator - affinity and event assignment for a stored season."""

import datetime as dt

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from seasonplan.config import PlannerConfig
from seasonplan.domain.models import Base, DinnerEvent, Holiday, Season, Team
from seasonplan.domain.repositories import DinnerEventRepository, TeamRepository
from seasonplan.engine.dinner_events import sync_dinner_events
from seasonplan.engine.orchestrator import (
    Orchestrator,
    assign_cooking_teams,
    assign_team_affinities,
    build_season_schedule,
)


@pytest.fixture
def db_session():
    """Create in-memory database session for testing."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def sample_config():
    return PlannerConfig(db_url="sqlite:///:memory:")


@pytest.fixture
def sample_season(db_session):
    """January 2025, Mon/Wed/Fri, one-day quota, three teams without affinity."""
    season = Season(
        short_name="jan-2025",
        start_date=dt.date(2025, 1, 6),
        end_date=dt.date(2025, 1, 31),
        cooking_days="1010100",
        consecutive_cooking_days=1,
    )
    season.teams = [Team(name=f"Team{i}") for i in range(1, 4)]
    db_session.add(season)
    db_session.commit()
    return season


def _schedule(db_session, season):
    events = DinnerEventRepository.get_by_season(db_session, season.id)
    names = {t.id: t.name for t in season.teams}
    return [(e.date.day, names.get(e.cooking_team_id)) for e in events]


def test_build_persists_affinities_and_assignments(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)

    build_season_schedule(db_session, sample_season.id, sample_config)

    affinities = [t.affinity for t in TeamRepository.get_by_season(db_session, sample_season.id)]
    assert affinities == ["1000000", "0010000", "0000100"]
    assert [name for _, name in _schedule(db_session, sample_season)] == ["Team1", "Team2", "Team3"] * 4


def test_rerun_changes_nothing(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)
    build_season_schedule(db_session, sample_season.id, sample_config)
    before = _schedule(db_session, sample_season)

    build_season_schedule(db_session, sample_season.id, sample_config)

    assert _schedule(db_session, sample_season) == before


def test_extended_season_continues_rotation(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)
    build_season_schedule(db_session, sample_season.id, sample_config)

    sample_season.end_date = dt.date(2025, 2, 14)
    db_session.commit()
    created, deleted = sync_dinner_events(db_session, sample_season.id)
    assign_cooking_teams(db_session, sample_season.id, sample_config)

    assert (created, deleted) == (6, 0)
    assert [name for _, name in _schedule(db_session, sample_season)] == ["Team1", "Team2", "Team3"] * 6


def test_holiday_counts_against_quota(db_session, sample_season, sample_config):
    sample_season.holidays = [Holiday(start_date=dt.date(2025, 1, 15), end_date=dt.date(2025, 1, 15))]
    db_session.commit()
    sync_dinner_events(db_session, sample_season.id)

    build_season_schedule(db_session, sample_season.id, sample_config)

    schedule = dict(_schedule(db_session, sample_season))
    assert 15 not in schedule
    assert schedule[13] == "Team1"
    assert schedule[17] == "Team3"


def test_affinity_stage_alone_leaves_events_open(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)

    result = assign_team_affinities(db_session, sample_season.id, sample_config)

    assert all(t.affinity is not None for t in result.teams)
    assert all(team_id is None for _, team_id in _schedule(db_session, sample_season))


def test_events_stage_without_affinities_assigns_nothing(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)

    result = assign_cooking_teams(db_session, sample_season.id, sample_config)

    assert all(e.assigned_team_id is None for e in result.events)


def test_dry_run_does_not_write(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)

    result = build_season_schedule(db_session, sample_season.id, sample_config, persist=False)

    assert all(e.assigned_team_id is not None for e in result.events)
    assert all(t.affinity is None for t in TeamRepository.get_by_season(db_session, sample_season.id))
    assert all(team_id is None for _, team_id in _schedule(db_session, sample_season))


def test_preassigned_event_is_kept(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)
    events = DinnerEventRepository.get_by_season(db_session, sample_season.id)
    events[1].cooking_team_id = TeamRepository.get_by_season(db_session, sample_season.id)[2].id
    db_session.commit()

    build_season_schedule(db_session, sample_season.id, sample_config)

    names = [name for _, name in _schedule(db_session, sample_season)]
    assert names[:4] == ["Team1", "Team3", "Team3", "Team1"]


def test_default_quota_from_config(db_session, sample_season):
    sample_season.consecutive_cooking_days = None
    db_session.commit()
    sync_dinner_events(db_session, sample_season.id)

    build_season_schedule(db_session, sample_season.id, PlannerConfig(default_consecutive_cooking_days=2))

    names = [name for _, name in _schedule(db_session, sample_season)]
    assert names[:6] == ["Team1", "Team1", "Team3", "Team3", "Team2", "Team2"]


def test_unknown_season_raises(db_session, sample_config):
    with pytest.raises(LookupError):
        Orchestrator().build_schedule(db_session, 999, sample_config)


def test_invalid_season_raises(db_session, sample_season, sample_config):
    sample_season.cooking_days = "0000000"
    db_session.commit()

    with pytest.raises(ValueError, match="at least one cooking day"):
        build_season_schedule(db_session, sample_season.id, sample_config)


def test_unknown_stage_is_skipped(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)

    result = Orchestrator(["AFFINITY", "MENUS"]).build_schedule(db_session, sample_season.id, sample_config)

    assert all(t.affinity is not None for t in result.teams)
    assert all(e.assigned_team_id is None for e in result.events)


def test_extra_event_on_saturday_takes_a_slot(db_session, sample_season, sample_config):
    sync_dinner_events(db_session, sample_season.id)
    DinnerEventRepository.bulk_create(
        db_session, [DinnerEvent(season_id=sample_season.id, date=dt.date(2025, 1, 11), menu_title="Fest")]
    )

    build_season_schedule(db_session, sample_season.id, sample_config)

    schedule = _schedule(db_session, sample_season)
    assert schedule[:5] == [(6, "Team1"), (8, "Team2"), (10, "Team3"), (11, "Team1"), (13, "Team2")]
