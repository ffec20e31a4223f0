"""Configuration management for the planner."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .core.tasks import DEFAULT_COLOR, Priority

logger = logging.getLogger(__name__)

PLANNER_HOME = Path(os.environ.get("PLANNER_HOME", Path.home() / "dayplanner"))
CONFIG_FILE = PLANNER_HOME / "config" / "planner.conf"
DATA_DIR = PLANNER_HOME / "data"

TIME_FORMATS = ("24h", "12h")


@dataclass
class Config:
    """Planner configuration."""

    data_dir: str = ""
    default_color: str = DEFAULT_COLOR
    default_priority: Priority = Priority.NORMAL
    time_format: str = "24h"

    def resolved_data_dir(self) -> Path:
        """Directory holding the per-day JSON files."""
        if self.data_dir:
            return Path(self.data_dir).expanduser()
        return DATA_DIR


def _strip_value(value: str) -> str:
    """Unquote a value and drop any inline comment."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def parse_config(text: str) -> Config:
    """Parse planner.conf contents (KEY=value lines)."""
    config = Config()

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "data_dir":
                config.data_dir = value
            case "default_color":
                config.default_color = value or DEFAULT_COLOR
            case "default_priority":
                try:
                    config.default_priority = Priority.parse(value)
                except ValueError as e:
                    logger.warning(f"Ignoring DEFAULT_PRIORITY: {e}")
            case "time_format":
                if value.lower() in TIME_FORMATS:
                    config.time_format = value.lower()
                else:
                    logger.warning(f"Ignoring TIME_FORMAT {value!r}, expected 24h or 12h")
            case _:
                logger.debug(f"Unknown config key: {key}")

    return config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from planner.conf file."""
    path = path or CONFIG_FILE
    if not path.exists():
        return Config()
    return parse_config(path.read_text())
