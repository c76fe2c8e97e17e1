"""Immutable value types consumed and produced by the scheduling engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import IntEnum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple


class Weekday(IntEnum):
    """Weekday index, aligned with ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        return cls(day.weekday())

    @classmethod
    def parse(cls, value: str | int | "Weekday") -> "Weekday":
        """Accept a Weekday, an index 0-6 or a (case-insensitive) day name."""
        if isinstance(value, Weekday):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown weekday: {value!r}")
        if isinstance(value, int):
            return cls(value)
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday: {value!r}") from None

    def distance_from(self, start: "Weekday") -> int:
        """Cyclic distance (0-6) walking forward from ``start`` to this day."""
        return (self - start) % 7


WEEKDAYS: Tuple[Weekday, ...] = tuple(Weekday)


@dataclass(frozen=True)
class WeekdaySelection:
    """Seven boolean cooking-day flags, Monday first.

    Always fully populated; an all-false selection is valid and simply
    qualifies no dates.
    """

    flags: Tuple[bool, ...] = (False,) * 7

    def __post_init__(self):
        flags = tuple(self.flags)
        if len(flags) != 7:
            raise ValueError(f"WeekdaySelection needs exactly 7 flags, got {len(flags)}")
        if not all(isinstance(f, bool) for f in flags):
            raise ValueError(f"WeekdaySelection flags must be booleans: {flags!r}")
        object.__setattr__(self, "flags", flags)

    @classmethod
    def none(cls) -> "WeekdaySelection":
        return cls()

    @classmethod
    def all(cls) -> "WeekdaySelection":
        return cls((True,) * 7)

    @classmethod
    def from_days(cls, days: Iterable[Weekday | str | int]) -> "WeekdaySelection":
        selected = {Weekday.parse(d) for d in days}
        return cls(tuple(wd in selected for wd in WEEKDAYS))

    @classmethod
    def from_mask(cls, mask: str) -> "WeekdaySelection":
        """Build from a 7-character ``0``/``1`` string, e.g. ``"1010100"``."""
        if len(mask) != 7 or set(mask) - {"0", "1"}:
            raise ValueError(f"Invalid weekday mask: {mask!r}")
        return cls(tuple(c == "1" for c in mask))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, bool]) -> "WeekdaySelection":
        """Build from ``{"monday": True, ...}``; all seven days are required."""
        normalized = {Weekday.parse(k): v for k, v in mapping.items()}
        missing = [wd.name.lower() for wd in WEEKDAYS if wd not in normalized]
        if missing:
            raise ValueError(f"Weekday mapping is missing: {', '.join(missing)}")
        not_bool = [wd.name.lower() for wd in WEEKDAYS if not isinstance(normalized[wd], bool)]
        if not_bool:
            raise ValueError(f"Weekday mapping values must be booleans: {', '.join(not_bool)}")
        return cls(tuple(normalized[wd] for wd in WEEKDAYS))

    def __getitem__(self, weekday: Weekday) -> bool:
        return self.flags[int(weekday)]

    def days(self) -> List[Weekday]:
        """Flagged weekdays in Monday-first order."""
        return [wd for wd in WEEKDAYS if self.flags[wd]]

    def is_empty(self) -> bool:
        return not any(self.flags)

    def to_mask(self) -> str:
        return "".join("1" if f else "0" for f in self.flags)

    def to_dict(self) -> Dict[str, bool]:
        return {wd.name.lower(): self.flags[wd] for wd in WEEKDAYS}

    def __repr__(self) -> str:
        names = ",".join(wd.name[:3].title() for wd in self.days())
        return f"WeekdaySelection({names or '-'})"


@dataclass(frozen=True)
class DateRange:
    """Inclusive date interval."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"DateRange start {self.start} is after end {self.end}")

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def days(self) -> Iterator[date]:
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)


# Holidays are plain ranges; the alias marks intent at call sites.
HolidayRange = DateRange


@dataclass(frozen=True)
class CookingTeam:
    id: int
    name: str
    affinity: Optional[WeekdaySelection] = None


@dataclass(frozen=True)
class DinnerEventSlot:
    """A qualifying calendar date, with or without a persisted dinner event.

    Holiday slots carry no event id and exist only so that quota bookkeeping
    advances over them.
    """

    date: date
    assigned_team_id: Optional[int] = None
    event_id: Optional[int] = None
    holiday: bool = field(default=False)
