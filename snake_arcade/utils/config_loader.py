"""
Configuration Loader - Load and validate configuration from YAML.

Only presentation and logging are configurable. The rules of the game
(board size, speeds, start position) are fixed in ``game.config``.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class DisplayConfig:
    """Pygame window settings."""
    cell_size: int = 30
    render_fps: int = 60
    window_title: str = "Snake"
    show_grid: bool = True

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"display.cell_size must be positive, got {self.cell_size}")
        if self.render_fps <= 0:
            raise ValueError(f"display.render_fps must be positive, got {self.render_fps}")


@dataclass
class ConsoleConfig:
    """Terminal output settings."""
    enabled: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = ""

    def __post_init__(self):
        self.level = str(self.level).upper()
        if self.level not in LOG_LEVELS:
            raise ValueError(f"logging.level must be one of {LOG_LEVELS}, got {self.level!r}")


@dataclass
class Config:
    """Complete application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Look for config.yaml in the usual places."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path

    return None


def config_from_dict(data: Optional[dict]) -> Config:
    """
    Build a Config from parsed YAML.

    Unknown sections and keys are ignored; missing ones take defaults.
    """
    if not data:
        return Config()

    config = Config()

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    if 'console' in data:
        config.console = _dict_to_dataclass(data['console'], ConsoleConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to config.yaml in the
            working directory or project root)

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    logger.debug("Loaded config from %s", path)
    return config_from_dict(data)

