"""
Logging setup - stdlib logging rendered through rich.
"""
import logging
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig


def setup_logging(config: LoggingConfig, console: Optional[Console] = None) -> None:
    """
    Configure the root logger.

    Args:
        config: Level and optional log file
        console: Rich console to log to (stderr console when omitted)
    """
    handlers: List[logging.Handler] = [
        RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
    ]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        handlers.append(file_handler)

    logging.basicConfig(
        level=config.level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=handlers,
        force=True,
    )
