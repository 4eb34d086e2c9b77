"""Opt-in logging for the tfidf package."""
from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger


def setup_logging(sink: TextIO = sys.stderr, level: str = "DEBUG") -> int:
    """Enable tfidf log output on ``sink`` and return the loguru handler id.

    Stage summaries are logged at DEBUG. Only records from the tfidf package
    reach the handler; other handlers are left alone. Pass the returned id to
    ``logger.remove`` to detach it again.
    """
    logger.enable("tfidf")
    return logger.add(
        sink,
        level=level,
        filter="tfidf",
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
               "<level>{level: <8}</level> | "
               "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
               "<level>{message}</level>",
        backtrace=False,
        diagnose=False,
    )
