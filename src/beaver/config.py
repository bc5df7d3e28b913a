"""Configuration management for the Beaver application."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from .todo import Priority

logger = logging.getLogger(__name__)

DATA_DIR_ENV = "BEAVER_HOME"
DEFAULT_DATA_DIR = "~/.beaver"


def default_data_dir() -> str:
    return os.environ.get(DATA_DIR_ENV) or DEFAULT_DATA_DIR


@dataclass
class ConfigModel:
    """Per-user configuration for Beaver."""

    # File paths
    data_dir: str = ""
    store_file: str = "todos.json"

    # Default settings
    default_priority: Priority = Priority.LOW

    # Behavior settings
    confirm_deletion: bool = True

    # Display preferences
    no_color: bool = False
    date_format: str = "%a, %d %b %Y %H:%M:%S %z"

    def __post_init__(self):
        """Post-initialization setup."""
        # Expand user paths
        self.data_dir = os.path.expanduser(self.data_dir or default_data_dir())

        if isinstance(self.default_priority, str):
            self.default_priority = Priority.from_name(self.default_priority)

    @property
    def store_path(self) -> Path:
        """Path of the JSON file holding the todo collection."""
        return Path(self.data_dir) / self.store_file

    @property
    def config_path(self) -> Path:
        return Path(self.data_dir) / "config.yaml"

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "store_file": self.store_file,
            "default_priority": self.default_priority.value,
            "confirm_deletion": self.confirm_deletion,
            "no_color": self.no_color,
            "date_format": self.date_format,
        }
        return yaml.safe_dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML.

        Unknown keys are ignored. An unknown priority name falls back to the
        default priority.
        """
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        for key in sorted(set(data) - known):
            logger.warning(f"Ignoring unknown configuration key '{key}'")
        data = {key: value for key, value in data.items() if key in known}

        if "default_priority" in data:
            try:
                data["default_priority"] = Priority.from_name(str(data["default_priority"]))
            except ValueError:
                logger.warning(
                    f"Invalid default_priority {data['default_priority']!r}, using Low"
                )
                data["default_priority"] = Priority.LOW

        return cls(**data)


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file, falling back to the defaults.

    A missing file is not an error. A file that cannot be read or parsed is
    reported in the log and the defaults are used instead.
    """
    config = ConfigModel()
    if config_path is None:
        config_path = config.config_path

    if not config_path.exists():
        logger.debug(f"No configuration at {config_path}, using defaults")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            yaml_content = f.read()
        config = ConfigModel.from_yaml(yaml_content)
        logger.debug(f"Loaded configuration from {config_path}")
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
        config = ConfigModel()

    return config


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    if config_path is None:
        config_path = config.config_path

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w", encoding="utf-8") as f:
        f.write(config.to_yaml())
    logger.info(f"Configuration saved to {config_path}")
