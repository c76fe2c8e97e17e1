"""CSV export utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import pandas as pd
from sqlalchemy.orm import Session

from seasonplan.domain.repositories import DinnerEventRepository, SeasonRepository, TeamRepository
from seasonplan.domain.types import DinnerEventSlot


def export_schedule_csv(
    session: Session,
    csv_path: str | Path,
    season_id: int,
    date_format: str = "%Y-%m-%d",
    events: Sequence[DinnerEventSlot] | None = None,
) -> int:
    """
    Export the dinner-event schedule of a season.

    Columns: event_id, date, weekday, team_id, team_name. Unassigned events
    have empty team columns.

    Args:
        session: Database session
        csv_path: Output path
        season_id: Season to export
        date_format: strftime format of the date column
        events: Computed slots to write instead of the stored events
            (e.g. the result of a dry run)

    Returns:
        Number of events exported
    """
    season = SeasonRepository.require(session, season_id)
    teams = {t.id: t.name for t in TeamRepository.get_by_season(session, season.id)}
    if events is None:
        events = [e.to_slot() for e in DinnerEventRepository.get_by_season(session, season.id)]

    df = pd.DataFrame(
        [
            {
                "event_id": e.event_id,
                "date": e.date.strftime(date_format),
                "weekday": e.date.strftime("%A"),
                "team_id": e.assigned_team_id,
                "team_name": teams.get(e.assigned_team_id),
            }
            for e in events
        ],
        columns=["event_id", "date", "weekday", "team_id", "team_name"],
    )
    df["team_id"] = df["team_id"].astype("Int64")
    df.to_csv(csv_path, index=False)

    print(f"[INFO] Exported {len(df)} dinner events to {csv_path}")
    return len(df)


def export_teams_csv(session: Session, csv_path: str | Path, season_id: int) -> int:
    """
    Export the teams of a season with their affinity mask.

    The file uses the same columns that ``import_teams_csv`` reads.

    Returns:
        Number of teams exported
    """
    season = SeasonRepository.require(session, season_id)
    teams = TeamRepository.get_by_season(session, season.id)

    df = pd.DataFrame(
        [{"season": season.short_name, "name": t.name, "affinity": t.affinity or ""} for t in teams],
        columns=["season", "name", "affinity"],
    )
    df.to_csv(csv_path, index=False)

    print(f"[INFO] Exported {len(df)} teams to {csv_path}")
    return len(df)
