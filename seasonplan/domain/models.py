"""SQLAlchemy models for seasons, cooking teams and dinner events."""

from __future__ import annotations

from typing import List

from sqlalchemy import Column, Date, ForeignKey, Integer, String
from sqlalchemy.orm import DeclarativeBase, relationship

from .types import CookingTeam, DateRange, DinnerEventSlot, WeekdaySelection


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Season(Base):
    """A dinner season: date range, cooking weekdays and rotation quota."""

    __tablename__ = "seasons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    short_name = Column(String(50), nullable=False, unique=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    cooking_days = Column(String(7), nullable=False, default="0000000")  # Monday-first mask, e.g. 1010100
    consecutive_cooking_days = Column(Integer, nullable=True)

    # Relationships
    holidays = relationship("Holiday", back_populates="season", cascade="all, delete-orphan")
    teams = relationship("Team", back_populates="season", cascade="all, delete-orphan")
    dinner_events = relationship("DinnerEvent", back_populates="season", cascade="all, delete-orphan")

    def cooking_weekdays(self) -> WeekdaySelection:
        return WeekdaySelection.from_mask(self.cooking_days)

    def season_dates(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    def holiday_ranges(self) -> List[DateRange]:
        return [h.to_range() for h in self.holidays]

    def __repr__(self) -> str:
        return f"<Season(id={self.id}, name='{self.short_name}', {self.start_date}..{self.end_date}, days={self.cooking_days})>"


class Holiday(Base):
    """Inclusive date range without dinners."""

    __tablename__ = "holidays"

    id = Column(Integer, primary_key=True, autoincrement=True)
    season_id = Column(Integer, ForeignKey("seasons.id"), nullable=False)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)

    season = relationship("Season", back_populates="holidays")

    def to_range(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    def __repr__(self) -> str:
        return f"<Holiday(id={self.id}, season={self.season_id}, {self.start_date}..{self.end_date})>"


class Team(Base):
    """Cooking team; affinity stays NULL until the first scheduling run fills it."""

    __tablename__ = "teams"

    id = Column(Integer, primary_key=True, autoincrement=True)
    season_id = Column(Integer, ForeignKey("seasons.id"), nullable=False)
    name = Column(String(100), nullable=False)
    affinity = Column(String(7), nullable=True)  # Monday-first mask

    season = relationship("Season", back_populates="teams")
    dinner_events = relationship("DinnerEvent", back_populates="cooking_team")

    def to_domain(self) -> CookingTeam:
        affinity = WeekdaySelection.from_mask(self.affinity) if self.affinity else None
        return CookingTeam(id=self.id, name=self.name, affinity=affinity)

    def __repr__(self) -> str:
        return f"<Team(id={self.id}, name='{self.name}', affinity={self.affinity})>"


class DinnerEvent(Base):
    """A dinner on a given date, optionally cooked by a team."""

    __tablename__ = "dinner_events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    season_id = Column(Integer, ForeignKey("seasons.id"), nullable=False)
    date = Column(Date, nullable=False)
    cooking_team_id = Column(Integer, ForeignKey("teams.id"), nullable=True)
    menu_title = Column(String(200), nullable=False, default="")

    season = relationship("Season", back_populates="dinner_events")
    cooking_team = relationship("Team", back_populates="dinner_events")

    def to_slot(self) -> DinnerEventSlot:
        return DinnerEventSlot(date=self.date, assigned_team_id=self.cooking_team_id, event_id=self.id)

    def __repr__(self) -> str:
        return f"<DinnerEvent(id={self.id}, date={self.date}, team={self.cooking_team_id})>"
