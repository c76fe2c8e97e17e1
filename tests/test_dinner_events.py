"""Tests for dinner-event generation and reconciliation."""

import datetime as dt

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from seasonplan.domain.models import Base, Holiday, Season, Team
from seasonplan.domain.repositories import DinnerEventRepository, TeamRepository
from seasonplan.engine.dinner_events import generate_dinner_event_dates, sync_dinner_events


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
def sample_season(db_session):
    season = Season(
        short_name="jan-2025",
        start_date=dt.date(2025, 1, 6),
        end_date=dt.date(2025, 1, 31),
        cooking_days="1010100",
    )
    season.teams = [Team(name="Team1"), Team(name="Team2")]
    db_session.add(season)
    db_session.commit()
    return season


def test_generate_dates_skips_holidays(sample_season, db_session):
    sample_season.holidays = [Holiday(start_date=dt.date(2025, 1, 13), end_date=dt.date(2025, 1, 17))]
    db_session.commit()

    dates = generate_dinner_event_dates(sample_season)

    assert [d.day for d in dates] == [6, 8, 10, 20, 22, 24, 27, 29, 31]


def test_sync_creates_one_event_per_cooking_day(db_session, sample_season):
    created, deleted = sync_dinner_events(db_session, sample_season.id)

    events = DinnerEventRepository.get_by_season(db_session, sample_season.id)
    assert (created, deleted) == (12, 0)
    assert [e.date.day for e in events] == [6, 8, 10, 13, 15, 17, 20, 22, 24, 27, 29, 31]
    assert all(e.cooking_team_id is None and e.menu_title == "" for e in events)


def test_second_sync_is_a_no_op(db_session, sample_season):
    sync_dinner_events(db_session, sample_season.id)
    assert sync_dinner_events(db_session, sample_season.id) == (0, 0)


def test_changed_weekdays_prune_events_and_keep_teams(db_session, sample_season):
    sync_dinner_events(db_session, sample_season.id)
    monday = DinnerEventRepository.get_by_season(db_session, sample_season.id)[0]
    monday.cooking_team_id = TeamRepository.get_by_season(db_session, sample_season.id)[0].id
    db_session.commit()

    sample_season.cooking_days = "1000000"
    db_session.commit()
    created, deleted = sync_dinner_events(db_session, sample_season.id)

    events = DinnerEventRepository.get_by_season(db_session, sample_season.id)
    assert (created, deleted) == (0, 8)
    assert [e.date.day for e in events] == [6, 13, 20, 27]
    assert events[0].cooking_team_id is not None
    assert len(TeamRepository.get_by_season(db_session, sample_season.id)) == 2


def test_new_holiday_removes_events(db_session, sample_season):
    sync_dinner_events(db_session, sample_season.id)
    sample_season.holidays = [Holiday(start_date=dt.date(2025, 1, 20), end_date=dt.date(2025, 1, 24))]
    db_session.commit()

    assert sync_dinner_events(db_session, sample_season.id) == (0, 3)


def test_sync_rejects_invalid_season(db_session, sample_season):
    sample_season.holidays = [Holiday(start_date=dt.date(2025, 2, 3), end_date=dt.date(2025, 2, 7))]
    db_session.commit()

    with pytest.raises(ValueError, match="outside the season"):
        sync_dinner_events(db_session, sample_season.id)


def test_sync_unknown_season(db_session):
    with pytest.raises(LookupError):
        sync_dinner_events(db_session, 42)
