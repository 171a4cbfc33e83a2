"""Factory for creating scoreboards from configuration."""

from typing import Optional

import structlog

from .config import Config
from .core.scoreboard import InMemoryScoreBoard

logger = structlog.get_logger()


def create_scoreboard(config: Optional[Config] = None) -> InMemoryScoreBoard:
    """Factory function to create a scoreboard.

    Args:
        config: Application configuration, loaded from the environment if omitted

    Returns:
        Empty InMemoryScoreBoard using the configured tie-break rule
    """
    if config is None:
        config = Config.from_env()

    logger.info(
        "Creating in-memory scoreboard",
        tie_break=config.summary_tie_break.value,
    )
    return InMemoryScoreBoard(tie_break=config.summary_tie_break)
