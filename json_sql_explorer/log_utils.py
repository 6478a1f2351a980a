"""
Centralized logging configuration for JSON SQL Explorer.
"""

import logging
import sys
from typing import Optional, Union

from . import config

_initialized = False


def setup_logging(
    level: Union[int, str, None] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure logging for the app.
    Only runs once, subsequent calls return the existing logger.
    """
    global _initialized

    if _initialized:
        return logging.getLogger("json_sql_explorer")

    if level is None:
        level = config.LOG_LEVEL
    if format_string is None:
        format_string = (
            "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
        )

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    # Gradio pulls these in and they are chatty at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _initialized = True
    return logging.getLogger("json_sql_explorer")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, namespaced under the app logger.
    """
    if name.startswith("json_sql_explorer"):
        return logging.getLogger(name)
    return logging.getLogger(f"json_sql_explorer.{name}")
