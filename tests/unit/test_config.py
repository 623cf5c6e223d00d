"""Unit tests for VisualizerConfig and TOML loading."""

import pytest

from bst_visualizer import ConfigError, VisualizerConfig, load_config
from bst_visualizer.core.config import config_from_dict


def test_defaults():
    cfg = VisualizerConfig()
    assert cfg.speed == 1.0
    assert cfg.insert_step_ms == 500
    assert cfg.find_step_ms == 400
    assert cfg.settle_ms == 300
    assert (cfg.root_x, cfg.root_y, cfg.root_offset, cfg.level_gap) == (300, 40, 100, 80)


def test_scaled():
    cfg = VisualizerConfig(speed=0.5)
    assert cfg.scaled(400) == 800


@pytest.mark.parametrize(
    "kwargs",
    [
        {"speed": 3.0},
        {"speed": 0.1},
        {"min_speed": 0},
        {"min_speed": 2.5, "max_speed": 2.0},
        {"settle_ms": -1},
        {"level_gap": 0},
    ],
)
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError):
        VisualizerConfig(**kwargs)


def test_config_from_dict():
    cfg = config_from_dict({"visualizer": {"speed": 2.0, "level_gap": 60}})
    assert cfg.speed == 2.0
    assert cfg.level_gap == 60


def test_config_from_dict_without_table():
    assert config_from_dict({}) == VisualizerConfig()


def test_config_from_dict_unknown_key():
    with pytest.raises(ConfigError, match="Unknown config keys: colour"):
        config_from_dict({"visualizer": {"colour": "red"}})


def test_config_from_dict_bad_type():
    with pytest.raises(ConfigError):
        config_from_dict({"visualizer": {"speed": "fast"}})


def test_load_config(tmp_path):
    path = tmp_path / "viz.toml"
    path.write_text("[visualizer]\nspeed = 1.5\nfind_step_ms = 250\n", encoding="utf-8")

    cfg = load_config(path)

    assert cfg.speed == 1.5
    assert cfg.find_step_ms == 250


def test_load_config_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.toml")


def test_load_config_malformed(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[visualizer\nspeed = ", encoding="utf-8")
    with pytest.raises(ConfigError, match="Malformed TOML"):
        load_config(path)


def test_load_config_directory(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(tmp_path)


def test_load_config_not_utf8(tmp_path):
    path = tmp_path / "latin1.toml"
    path.write_bytes(b"[visualizer]\n# caf\xe9\nspeed = 1.0\n")
    with pytest.raises(ConfigError, match="Cannot read config file"):
        load_config(path)
