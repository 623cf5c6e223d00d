"""Configuration for the BST visualizer.

Defines pacing, layout and drawing parameters, and loads them from TOML.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass
class VisualizerConfig:
    """Configuration parameters for layout and animation.

    Attributes:
        speed: Animation speed multiplier; delays are divided by it
        min_speed: Lowest accepted speed multiplier
        max_speed: Highest accepted speed multiplier
        insert_step_ms: Delay per visited node while inserting
        find_step_ms: Delay per visited node while searching
        delete_step_ms: Delay per visited node while deleting
        settle_ms: Pause after a node is inserted before relayout
        root_x: X coordinate of the root node
        root_y: Y coordinate of the root node
        root_offset: Horizontal offset of the root's children, halved per level
        level_gap: Vertical distance between depths
        node_spacing: Horizontal distance between in-order ranks
        node_radius: Radius of a drawn node
        node_color: Fill colour of an idle node
        highlight_color: Fill colour of a node on the current path
        found_color: Fill colour of the node an operation ended on
    """

    speed: float = 1.0
    min_speed: float = 0.5
    max_speed: float = 2.0
    insert_step_ms: float = 500.0
    find_step_ms: float = 400.0
    delete_step_ms: float = 400.0
    settle_ms: float = 300.0
    root_x: float = 300.0
    root_y: float = 40.0
    root_offset: float = 100.0
    level_gap: float = 80.0
    node_spacing: float = 50.0
    node_radius: float = 18.0
    node_color: str = "#16a34a"
    highlight_color: str = "#facc15"
    found_color: str = "#dc2626"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Check value ranges; raise ConfigError on the first violation."""
        if self.min_speed <= 0 or self.min_speed > self.max_speed:
            raise ConfigError(
                f"Invalid speed bounds: min_speed={self.min_speed}, max_speed={self.max_speed}"
            )
        if not self.min_speed <= self.speed <= self.max_speed:
            raise ConfigError(
                f"speed must be within [{self.min_speed}, {self.max_speed}], got {self.speed}"
            )
        for name in ("insert_step_ms", "find_step_ms", "delete_step_ms", "settle_ms"):
            if getattr(self, name) < 0:
                raise ConfigError(f"{name} must not be negative")
        for name in ("level_gap", "node_spacing", "node_radius"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive")

    def scaled(self, delay_ms: float) -> float:
        """Return a delay adjusted by the current speed multiplier."""
        return delay_ms / self.speed


def config_from_dict(data: dict[str, Any]) -> VisualizerConfig:
    """Build a config from the ``[visualizer]`` table of a parsed TOML document."""
    table = data.get("visualizer", {})
    if not isinstance(table, dict):
        raise ConfigError("[visualizer] must be a table")

    known = {f.name for f in fields(VisualizerConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    try:
        return VisualizerConfig(**table)
    except TypeError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def load_config(path: Path) -> VisualizerConfig:
    """Load a VisualizerConfig from a TOML file."""
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed TOML in {path}: {e}") from e

    config = config_from_dict(data)
    logger.info(f"Loaded config from {path}")
    return config
