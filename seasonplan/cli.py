"""Command-line interface for the season planner."""

from __future__ import annotations

import argparse

from seasonplan.config import PlannerConfig, load_config
from seasonplan.domain.db import get_session, init_database
from seasonplan.domain.models import Season
from seasonplan.domain.repositories import SeasonRepository
from seasonplan.engine.dinner_events import sync_dinner_events
from seasonplan.engine.orchestrator import build_season_schedule
from seasonplan.io.export_csv import export_schedule_csv, export_teams_csv
from seasonplan.io.import_csv import import_holidays_csv, import_seasons_csv, import_teams_csv
from seasonplan.validator import validate_schedule, validate_season


def _load(args: argparse.Namespace) -> PlannerConfig:
    cfg = load_config(args.config) if args.config else PlannerConfig()
    if args.db:
        cfg.db_url = args.db
    return cfg


def _season(session, name: str) -> Season:
    season = SeasonRepository.get_by_name(session, name)
    if season is None:
        raise LookupError(f"Season '{name}' not found")
    return season


def _cmd_init_db(args: argparse.Namespace) -> None:
    """Initialize the database."""
    cfg = _load(args)
    init_database(cfg.db_url)
    print(f"[OK] Database initialized: {cfg.db_url}")


def _cmd_import_csv(args: argparse.Namespace) -> None:
    """Import CSV data into database."""
    cfg = _load(args)
    session = get_session(cfg.db_url)

    try:
        if args.seasons:
            count = import_seasons_csv(session, args.seasons)
            print(f"[OK] Imported {count} seasons")

        if args.holidays:
            count = import_holidays_csv(session, args.holidays)
            print(f"[OK] Imported {count} holidays")

        if args.teams:
            count = import_teams_csv(session, args.teams)
            print(f"[OK] Imported {count} teams")

        session.close()
        print("[OK] CSV import complete")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Import failed: {e}")
        raise


def _cmd_generate_events(args: argparse.Namespace) -> None:
    """Create or prune dinner events to match the season configuration."""
    cfg = _load(args)
    session = get_session(cfg.db_url)

    try:
        season = _season(session, args.season)
        created, deleted = sync_dinner_events(session, season.id)
        session.close()
        print(f"[OK] Dinner events for {args.season}: {created} created, {deleted} deleted")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Event generation failed: {e}")
        raise


def _cmd_assign(args: argparse.Namespace) -> None:
    """Assign affinities and cooking teams for a season."""
    cfg = _load(args)
    session = get_session(cfg.db_url)

    try:
        season = _season(session, args.season)
        stage_order = [args.stage] if args.stage else None
        result = build_season_schedule(session, season.id, cfg, stage_order=stage_order, persist=not args.dry_run)

        if args.out:
            export_schedule_csv(
                session, args.out, season.id, date_format=cfg.export_date_format, events=result.events
            )

        session.close()
        assigned = sum(1 for e in result.events if e.assigned_team_id is not None)
        print(f"[OK] {assigned} of {len(result.events)} dinner events have a team for {args.season}")

    except Exception as e:
        session.rollback()
        session.close()
        print(f"[ERROR] Assignment failed: {e}")
        raise


def _cmd_export(args: argparse.Namespace) -> None:
    """Export data from database to CSV."""
    cfg = _load(args)
    session = get_session(cfg.db_url)

    try:
        season = _season(session, args.season)
        if args.schedule:
            count = export_schedule_csv(session, args.schedule, season.id, date_format=cfg.export_date_format)
            print(f"[OK] Exported {count} dinner events to {args.schedule}")

        if args.teams:
            count = export_teams_csv(session, args.teams, season.id)
            print(f"[OK] Exported {count} teams to {args.teams}")

        session.close()

    except Exception as e:
        session.close()
        print(f"[ERROR] Export failed: {e}")
        raise


def _cmd_validate(args: argparse.Namespace) -> None:
    """Validate season configuration and its schedule."""
    cfg = _load(args)
    session = get_session(cfg.db_url)

    try:
        season = _season(session, args.season)
        validate_season(season)
        validate_schedule(season)
        session.close()
        print(f"[OK] Validation passed for {args.season}")

    except Exception as e:
        session.close()
        print(f"[ERROR] Validation failed: {e}")
        raise


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="seasonplan",
        description="Cooking-season planner: dinner calendar and cooking-team rotation",
    )

    # Global options
    parser.add_argument("--db", help="Database URL (overrides config db_url)")
    parser.add_argument("--config", help="Path to config YAML or JSON")

    sub = parser.add_subparsers(dest="command", required=True)

    # init-db command
    init = sub.add_parser("init-db", help="Initialize database")
    init.set_defaults(func=_cmd_init_db)

    # import-csv command
    imp = sub.add_parser("import-csv", help="Import CSV data into database")
    imp.add_argument("--seasons", help="Path to seasons CSV")
    imp.add_argument("--holidays", help="Path to holidays CSV")
    imp.add_argument("--teams", help="Path to teams CSV")
    imp.set_defaults(func=_cmd_import_csv)

    # generate-events command
    gen = sub.add_parser("generate-events", help="Create dinner events for the season's cooking days")
    gen.add_argument("--season", required=True, help="Season short name")
    gen.set_defaults(func=_cmd_generate_events)

    # assign command
    asg = sub.add_parser("assign", help="Assign team affinities and cooking teams to dinner events")
    asg.add_argument("--season", required=True, help="Season short name")
    asg.add_argument("--stage", choices=["AFFINITY", "EVENTS"], help="Run a single stage only")
    asg.add_argument("--dry-run", action="store_true", help="Compute without writing to the database")
    asg.add_argument("--out", help="Optional: export schedule to CSV")
    asg.set_defaults(func=_cmd_assign)

    # export command
    exp = sub.add_parser("export", help="Export data from database to CSV")
    exp.add_argument("--season", required=True, help="Season short name")
    exp.add_argument("--schedule", help="Path to export dinner-event schedule CSV")
    exp.add_argument("--teams", help="Path to export teams CSV")
    exp.set_defaults(func=_cmd_export)

    # validate command
    val = sub.add_parser("validate", help="Validate a season and its schedule")
    val.add_argument("--season", required=True, help="Season short name")
    val.set_defaults(func=_cmd_validate)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
