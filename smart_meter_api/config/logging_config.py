"""
Logging configuration for the API process.
"""

import logging
from typing import List, Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    quiet_loggers: Optional[List[str]] = None,
) -> None:
    """
    Configure root logging once for the whole application.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format_string: Custom format string for log messages.
        quiet_loggers: Extra logger names to hold at WARNING.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format=format_string or DEFAULT_FORMAT
    )

    # uvicorn's access log is noisy at INFO
    for logger_name in (quiet_loggers or []) + ["uvicorn.access"]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
