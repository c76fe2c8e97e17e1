"""Domain value types, models and data access layer."""

from .models import Base, DinnerEvent, Holiday, Season, Team
from .repositories import DinnerEventRepository, SeasonRepository, TeamRepository
from .types import CookingTeam, DateRange, DinnerEventSlot, HolidayRange, Weekday, WeekdaySelection

__all__ = [
    "Base",
    "DinnerEvent",
    "Holiday",
    "Season",
    "Team",
    "DinnerEventRepository",
    "SeasonRepository",
    "TeamRepository",
    "CookingTeam",
    "DateRange",
    "DinnerEventSlot",
    "HolidayRange",
    "Weekday",
    "WeekdaySelection",
]
