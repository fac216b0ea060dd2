"""
Logging setup for the word-matching game.
Level is controlled by the LOG_LEVEL environment variable.
"""

import os
import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

logger = logging.getLogger(__name__)


def _resolve_level(level: Optional[Union[str, int]]) -> int:
    if isinstance(level, int):
        return level
    level_name = (level or os.getenv('LOG_LEVEL', 'INFO')).strip().upper()
    return getattr(logging, level_name, logging.INFO)


def configure_logging(level: Optional[Union[str, int]] = None,
                      log_file: Optional[Union[str, Path]] = None) -> int:
    """
    Configure the root logger for the game.

    Args:
        level: Level name or number; defaults to LOG_LEVEL (INFO when unset)
        log_file: Optional path of a log file written next to the console output

    Returns:
        The numeric level that was applied
    """
    log_level = _resolve_level(level)
    handlers = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    # Force reconfigure so a host application's defaults don't suppress DEBUG
    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers, force=True)

    logging.getLogger().setLevel(log_level)
    logging.getLogger('wordmatch').setLevel(log_level)
    logger.debug(f"Logging configured at level {logging.getLevelName(log_level)}")
    return log_level


def log_info_safe(log: logging.Logger, prefix: str, text: str) -> None:
    """Log remote-service text escaped to ASCII so Windows consoles never choke on it."""
    combined = f"{prefix}{text}"
    sanitized = combined.encode('ascii', errors='backslashreplace').decode('ascii', errors='ignore')
    log.info(sanitized)
