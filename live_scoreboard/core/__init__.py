"""Core layer for the live scoreboard.

This module provides the scoreboard, its domain entities, the ranking rules
for summaries and the exceptions raised on invalid operations.
"""

from .entities import Team, Game, GameSummary
from .enums import TieBreak
from .exceptions import (
    ScoreBoardError,
    InvalidTeamError,
    InvalidScoreError,
    GameAlreadyStartedError,
    GameNotFoundError,
)
from .ranking import summary_sort_key, rank_summaries, format_summary
from .scoreboard import ScoreBoard, InMemoryScoreBoard

__all__ = [
    # Entities
    "Team",
    "Game",
    "GameSummary",
    "TieBreak",
    # Scoreboard
    "ScoreBoard",
    "InMemoryScoreBoard",
    # Ranking
    "summary_sort_key",
    "rank_summaries",
    "format_summary",
    # Exceptions
    "ScoreBoardError",
    "InvalidTeamError",
    "InvalidScoreError",
    "GameAlreadyStartedError",
    "GameNotFoundError",
]
