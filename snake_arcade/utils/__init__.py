"""
Configuration and logging utilities.
"""

from .config_loader import (
    Config,
    ConsoleConfig,
    DisplayConfig,
    LoggingConfig,
    config_from_dict,
    load_config,
)
from .logging_setup import setup_logging

__all__ = [
    'Config',
    'ConsoleConfig',
    'DisplayConfig',
    'LoggingConfig',
    'config_from_dict',
    'load_config',
    'setup_logging',
]
