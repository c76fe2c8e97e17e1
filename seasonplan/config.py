"""Planner configuration loaded from YAML or JSON."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List

import yaml

STAGES = ("AFFINITY", "EVENTS")


@dataclass
class PlannerConfig:
    db_url: str = "sqlite:///seasonplan.db"
    default_consecutive_cooking_days: int = 2
    # Whole cooking weeks inside a holiday do not count against the quota
    holiday_week_off: bool = False
    stage_order: List[str] = field(default_factory=lambda: list(STAGES))
    export_date_format: str = "%Y-%m-%d"

    def __post_init__(self):
        if self.default_consecutive_cooking_days < 1:
            raise ValueError("default_consecutive_cooking_days must be at least 1")
        self.stage_order = [s.upper() for s in self.stage_order]
        unknown = [s for s in self.stage_order if s not in STAGES]
        if unknown:
            raise ValueError(f"Unknown stages in stage_order: {unknown}")


def _read_raw(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        data = json.loads(text)
    else:
        data = yaml.safe_load(text)
    return data or {}


def load_config(path: str | Path) -> PlannerConfig:
    """
    Load planner configuration from a YAML (.yaml/.yml) or JSON (.json) file.

    Missing keys fall back to defaults.

    Raises:
        ValueError: If the file holds unknown keys or invalid values
    """
    raw = _read_raw(Path(path))
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must contain a mapping")

    known = {f.name for f in fields(PlannerConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys in {path}: {', '.join(unknown)}")
    return PlannerConfig(**raw)
