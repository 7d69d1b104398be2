from __future__ import annotations

import logging
import os
from typing import Optional

from rich.logging import RichHandler


_CONFIGURED = False


def setup_logging(level: Optional[str] = None) -> None:
    """Configure process-wide logging once."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_time=True, show_level=True, show_path=False)],
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    _CONFIGURED = True



def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    setup_logging(level)
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
