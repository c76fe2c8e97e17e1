"""I/O utilities for configuration and CSV import/export."""

from seasonplan.config import PlannerConfig, load_config

from .export_csv import export_schedule_csv, export_teams_csv
from .import_csv import import_holidays_csv, import_seasons_csv, import_teams_csv, parse_weekdays

__all__ = [
    "PlannerConfig",
    "load_config",
    "export_schedule_csv",
    "export_teams_csv",
    "import_holidays_csv",
    "import_seasons_csv",
    "import_teams_csv",
    "parse_weekdays",
]
