from pathlib import Path

import pytest

from seasonplan.config import PlannerConfig, load_config

SAMPLE_CONFIG = Path(__file__).parents[1] / "season_config.yaml"


def test_sample_config_loads():
    cfg = load_config(SAMPLE_CONFIG)
    assert cfg.default_consecutive_cooking_days == 2
    assert cfg.holiday_week_off is False
    assert cfg.stage_order == ["AFFINITY", "EVENTS"]


def test_json_config(tmp_path):
    path = tmp_path / "planner.json"
    path.write_text('{"holiday_week_off": true, "stage_order": ["events"]}')

    cfg = load_config(path)

    assert cfg.holiday_week_off is True
    assert cfg.stage_order == ["EVENTS"]
    assert cfg.default_consecutive_cooking_days == PlannerConfig().default_consecutive_cooking_days


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_config(path) == PlannerConfig()


@pytest.mark.parametrize(
    "content,message",
    [
        ("menu_planning: true\n", "Unknown config keys"),
        ("stage_order: [SHOPPING]\n", "Unknown stages"),
        ("default_consecutive_cooking_days: 0\n", "at least 1"),
        ("- AFFINITY\n", "mapping"),
    ],
)
def test_invalid_config(tmp_path, content, message):
    path = tmp_path / "bad.yaml"
    path.write_text(content)
    with pytest.raises(ValueError, match=message):
        load_config(path)
