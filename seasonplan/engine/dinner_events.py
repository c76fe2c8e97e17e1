"""Generate and reconcile the dinner events of a season from its configuration."""

from __future__ import annotations

from datetime import date
from typing import List, Tuple

from sqlalchemy.orm import Session

from seasonplan.domain.models import DinnerEvent, Season
from seasonplan.domain.repositories import DinnerEventRepository, SeasonRepository
from seasonplan.services.calendar import compute_cooking_dates
from seasonplan.validator import validate_season


def generate_dinner_event_dates(season: Season) -> List[date]:
    """Dates that should carry a dinner event: cooking days minus holidays."""
    return compute_cooking_dates(season.cooking_weekdays(), season.season_dates(), season.holiday_ranges())


def sync_dinner_events(session: Session, season_id: int) -> Tuple[int, int]:
    """
    Bring the season's dinner events in line with its configuration.

    Events are matched by date. Missing dates get a new, unassigned event;
    events on dates that no longer qualify (changed weekdays, new holidays,
    shortened season) are deleted. Surviving events keep their team.

    Args:
        session: Database session
        season_id: Season to reconcile

    Returns:
        (created, deleted) counts

    Raises:
        LookupError: If the season does not exist
        ValueError: If the season configuration is invalid
    """
    season = SeasonRepository.require(session, season_id)
    validate_season(season)

    desired = set(generate_dinner_event_dates(season))
    existing = DinnerEventRepository.get_by_season(session, season.id)
    existing_dates = {e.date for e in existing}

    stale_ids = [e.id for e in existing if e.date not in desired]
    deleted = DinnerEventRepository.delete_by_ids(session, stale_ids)

    new_events = [
        DinnerEvent(season_id=season.id, date=d, cooking_team_id=None, menu_title="")
        for d in sorted(desired - existing_dates)
    ]
    DinnerEventRepository.bulk_create(session, new_events)

    print(f"[INFO] Season {season.short_name}: created {len(new_events)} and deleted {deleted} dinner events")
    return len(new_events), deleted
