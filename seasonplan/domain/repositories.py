"""Repository classes for data access."""

from __future__ import annotations

from typing import Iterable, List, Optional

from sqlalchemy.orm import Session

from .models import DinnerEvent, Holiday, Season, Team
from .types import CookingTeam, DinnerEventSlot


class SeasonRepository:
    """Repository for season data access."""

    @staticmethod
    def get_all(session: Session) -> List[Season]:
        """Get all seasons, oldest first."""
        return session.query(Season).order_by(Season.start_date).all()

    @staticmethod
    def get_by_id(session: Session, season_id: int) -> Optional[Season]:
        """Get season by ID."""
        return session.query(Season).filter(Season.id == season_id).first()

    @staticmethod
    def get_by_name(session: Session, short_name: str) -> Optional[Season]:
        """Get season by its short name."""
        return session.query(Season).filter(Season.short_name == short_name).first()

    @staticmethod
    def require(session: Session, season_id: int) -> Season:
        """Get season by ID or raise LookupError."""
        season = SeasonRepository.get_by_id(session, season_id)
        if season is None:
            raise LookupError(f"Season {season_id} not found")
        return season

    @staticmethod
    def bulk_create(session: Session, seasons: List[Season]) -> None:
        """Create multiple seasons."""
        session.add_all(seasons)
        session.commit()

    @staticmethod
    def add_holidays(session: Session, holidays: List[Holiday]) -> None:
        """Attach holiday ranges to their seasons."""
        session.add_all(holidays)
        session.commit()


class TeamRepository:
    """Repository for cooking team data access."""

    @staticmethod
    def get_by_season(session: Session, season_id: int) -> List[Team]:
        """Get all teams of a season in creation order."""
        return session.query(Team).filter(Team.season_id == season_id).order_by(Team.id).all()

    @staticmethod
    def get_by_id(session: Session, team_id: int) -> Optional[Team]:
        """Get team by ID."""
        return session.query(Team).filter(Team.id == team_id).first()

    @staticmethod
    def bulk_create(session: Session, teams: List[Team]) -> None:
        """Create multiple teams."""
        session.add_all(teams)
        session.commit()

    @staticmethod
    def save_affinities(session: Session, teams: Iterable[CookingTeam]) -> int:
        """
        Persist computed affinities for teams that have none yet.

        Existing affinities are never overwritten. Returns the number of
        teams updated.
        """
        updated = 0
        for team in teams:
            if team.affinity is None:
                continue
            row = TeamRepository.get_by_id(session, team.id)
            if row is None or row.affinity is not None:
                continue
            row.affinity = team.affinity.to_mask()
            updated += 1
        session.commit()
        return updated


class DinnerEventRepository:
    """Repository for dinner event data access."""

    @staticmethod
    def get_by_season(session: Session, season_id: int) -> List[DinnerEvent]:
        """Get all dinner events of a season, by date."""
        return (
            session.query(DinnerEvent)
            .filter(DinnerEvent.season_id == season_id)
            .order_by(DinnerEvent.date, DinnerEvent.id)
            .all()
        )

    @staticmethod
    def bulk_create(session: Session, events: List[DinnerEvent]) -> None:
        """Create multiple dinner events."""
        session.add_all(events)
        session.commit()

    @staticmethod
    def delete_by_ids(session: Session, event_ids: List[int]) -> int:
        """Delete dinner events by ID. Returns number of deleted rows."""
        if not event_ids:
            return 0
        count = (
            session.query(DinnerEvent)
            .filter(DinnerEvent.id.in_(event_ids))
            .delete(synchronize_session=False)
        )
        session.commit()
        return count

    @staticmethod
    def save_assignments(session: Session, slots: Iterable[DinnerEventSlot]) -> int:
        """
        Persist team assignments for dinner events that have no team yet.

        Returns the number of events updated.
        """
        updated = 0
        for slot in slots:
            if slot.event_id is None or slot.assigned_team_id is None:
                continue
            row = session.get(DinnerEvent, slot.event_id)
            if row is None or row.cooking_team_id is not None:
                continue
            row.cooking_team_id = slot.assigned_team_id
            updated += 1
        session.commit()
        return updated
