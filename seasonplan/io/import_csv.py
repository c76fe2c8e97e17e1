"""CSV import utilities to load season data into the database."""

from __future__ import annotations

from pathlib import Path
from typing import Dict

import pandas as pd
from sqlalchemy.orm import Session

from seasonplan.domain.models import Holiday, Season, Team
from seasonplan.domain.repositories import SeasonRepository, TeamRepository
from seasonplan.domain.types import WeekdaySelection


def parse_weekdays(value: str) -> WeekdaySelection:
    """
    Parse a weekday cell: a ``1010100`` mask or day names separated by ``;``.

    ``"monday;wednesday;friday"`` and ``"1010100"`` are equivalent.
    """
    text = str(value).strip()
    if len(text) == 7 and set(text) <= {"0", "1"}:
        return WeekdaySelection.from_mask(text)
    return WeekdaySelection.from_days(part for part in text.split(";") if part.strip())


def _read(csv_path: str | Path) -> pd.DataFrame:
    # Masks such as 0010100 must stay strings
    df = pd.read_csv(csv_path, dtype=str, keep_default_na=False)
    df.columns = df.columns.str.lower().str.strip()
    return df


def _season_ids_by_name(session: Session) -> Dict[str, int]:
    return {s.short_name: s.id for s in SeasonRepository.get_all(session)}


def import_seasons_csv(session: Session, csv_path: str | Path) -> int:
    """
    Import seasons from CSV into database.

    Columns: short_name, start_date, end_date, cooking_days and optionally
    consecutive_cooking_days.

    Args:
        session: Database session
        csv_path: Path to seasons CSV

    Returns:
        Number of seasons imported
    """
    df = _read(csv_path)
    df["start_date"] = pd.to_datetime(df["start_date"]).dt.date
    df["end_date"] = pd.to_datetime(df["end_date"]).dt.date

    seasons = []
    for _, row in df.iterrows():
        consecutive = str(row.get("consecutive_cooking_days", "")).strip()
        season = Season(
            short_name=str(row["short_name"]).strip(),
            start_date=row["start_date"],
            end_date=row["end_date"],
            cooking_days=parse_weekdays(row["cooking_days"]).to_mask(),
            consecutive_cooking_days=int(consecutive) if consecutive else None,
        )
        seasons.append(season)

    SeasonRepository.bulk_create(session, seasons)

    print(f"[INFO] Imported {len(seasons)} seasons from {csv_path}")
    return len(seasons)


def import_holidays_csv(session: Session, csv_path: str | Path) -> int:
    """
    Import holiday ranges from CSV into database.

    Columns: season (short name), start_date, end_date.

    Raises:
        ValueError: If a row references an unknown season
    """
    df = _read(csv_path)
    df["start_date"] = pd.to_datetime(df["start_date"]).dt.date
    df["end_date"] = pd.to_datetime(df["end_date"]).dt.date
    season_ids = _season_ids_by_name(session)

    holidays = []
    for _, row in df.iterrows():
        name = str(row["season"]).strip()
        if name not in season_ids:
            raise ValueError(f"Holiday references unknown season '{name}'")
        holidays.append(Holiday(season_id=season_ids[name], start_date=row["start_date"], end_date=row["end_date"]))

    SeasonRepository.add_holidays(session, holidays)

    print(f"[INFO] Imported {len(holidays)} holidays from {csv_path}")
    return len(holidays)


def import_teams_csv(session: Session, csv_path: str | Path) -> int:
    """
    Import cooking teams from CSV into database.

    Columns: season (short name), name and optionally affinity. An empty
    affinity is left NULL so the next scheduling run assigns one.

    Raises:
        ValueError: If a row references an unknown season
    """
    df = _read(csv_path)
    season_ids = _season_ids_by_name(session)

    teams = []
    for _, row in df.iterrows():
        name = str(row["season"]).strip()
        if name not in season_ids:
            raise ValueError(f"Team references unknown season '{name}'")
        affinity = str(row.get("affinity", "")).strip()
        teams.append(
            Team(
                season_id=season_ids[name],
                name=str(row["name"]).strip(),
                affinity=parse_weekdays(affinity).to_mask() if affinity else None,
            )
        )

    TeamRepository.bulk_create(session, teams)

    print(f"[INFO] Imported {len(teams)} teams from {csv_path}")
    return len(teams)
