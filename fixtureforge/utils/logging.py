"""
FixtureForge — Build step logger with duration tracking.
"""

import logging
import time
from contextlib import contextmanager
from typing import Generator

from fixtureforge.core.config import settings

logger = logging.getLogger("fixtureforge")
logger.setLevel(settings.log_level)


@contextmanager
def step_timer(step_name: str) -> Generator[None, None, None]:
    """Context manager that logs the start and duration of a build step."""
    logger.debug("▶ %s — started", step_name)
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug("✔ %s — completed in %.2f ms", step_name, elapsed_ms)
