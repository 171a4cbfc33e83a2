"""Live scoreboard of games in progress.

Tracks the games currently being played and produces a ranked summary of
them on demand. Safe to use from multiple threads.
"""

from .config import Config, Environment
from .core import (
    Team,
    Game,
    GameSummary,
    TieBreak,
    ScoreBoard,
    InMemoryScoreBoard,
    rank_summaries,
    format_summary,
    ScoreBoardError,
    InvalidTeamError,
    InvalidScoreError,
    GameAlreadyStartedError,
    GameNotFoundError,
)
from .observability import configure_logging
from .scoreboard_factory import create_scoreboard

__all__ = [
    "Config",
    "Environment",
    "Team",
    "Game",
    "GameSummary",
    "TieBreak",
    "ScoreBoard",
    "InMemoryScoreBoard",
    "rank_summaries",
    "format_summary",
    "ScoreBoardError",
    "InvalidTeamError",
    "InvalidScoreError",
    "GameAlreadyStartedError",
    "GameNotFoundError",
    "configure_logging",
    "create_scoreboard",
]
