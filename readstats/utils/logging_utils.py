"""
Logging configuration for ReadStats command-line runs.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Union[str, int] = 'INFO',
                  log_file: Optional[Union[str, Path]] = None):
    """
    Configure root logging with a console handler and an optional log file.

    Args:
        level: Level name ('DEBUG', 'INFO', ...) or logging constant
        log_file: Also write log records to this file
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    handlers = [logging.StreamHandler()]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
