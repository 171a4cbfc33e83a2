"""Scoreboard of games currently in progress."""

import itertools
import threading
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple

import structlog

from .entities import Game, GameSummary, Team
from .enums import TieBreak
from .exceptions import (
    GameAlreadyStartedError,
    GameNotFoundError,
    InvalidScoreError,
    InvalidTeamError,
)
from .ranking import rank_summaries

logger = structlog.get_logger()


class ScoreBoard(ABC):
    """Interface for a scoreboard of live games."""

    @abstractmethod
    def start_game(self, home_team: Team, away_team: Team) -> None:
        """Start a new game with a 0 - 0 score."""
        pass

    @abstractmethod
    def finish_game(self, home_team: Team, away_team: Team) -> None:
        """Finish a game and remove it from the scoreboard."""
        pass

    @abstractmethod
    def update_game(
        self, home_team: Team, away_team: Team, home_score: int, away_score: int
    ) -> None:
        """Set the absolute score of a game in progress."""
        pass

    @abstractmethod
    def get_summary(self) -> List[GameSummary]:
        """Get the games in progress in ranked order."""
        pass


class InMemoryScoreBoard(ScoreBoard):
    """Thread-safe scoreboard that keeps in-progress games in memory.

    Games are keyed by the ordered (home, away) pair, so a pair can only be
    in progress once; (A, B) and (B, A) are different games. A single lock
    guards every lookup and mutation of the collection, and no method calls
    another while holding it.
    """

    def __init__(self, tie_break: TieBreak = TieBreak.MOST_RECENT):
        """Initialize an empty scoreboard.

        Args:
            tie_break: How to order games with equal total scores
        """
        self.tie_break = tie_break
        self._games: Dict[Tuple[Team, Team], Game] = {}
        self._lock = threading.Lock()
        self._sequence = itertools.count(1)

    def start_game(self, home_team: Team, away_team: Team) -> None:
        """Start a new game between the home and away teams.

        Raises:
            InvalidTeamError: If either team is missing or unnamed
            GameAlreadyStartedError: If the pair is already in progress
        """
        self._validate_team(home_team)
        self._validate_team(away_team)

        key = (home_team, away_team)
        with self._lock:
            if key in self._games:
                raise GameAlreadyStartedError(
                    f"Game already started: {home_team} vs {away_team}"
                )
            game = Game(home_team, away_team, sequence=next(self._sequence))
            self._games[key] = game

        logger.info(
            "Game started",
            home_team=home_team.name,
            away_team=away_team.name,
            sequence=game.sequence,
        )

    def finish_game(self, home_team: Team, away_team: Team) -> None:
        """Finish a game in progress. Finished games are not kept.

        Raises:
            InvalidTeamError: If either team is missing or unnamed
            GameNotFoundError: If the pair is not in progress
        """
        self._validate_team(home_team)
        self._validate_team(away_team)

        with self._lock:
            game = self._games.pop((home_team, away_team), None)
            if game is None:
                raise GameNotFoundError(f"Game not found: {home_team} vs {away_team}")

        logger.info(
            "Game finished",
            home_team=home_team.name,
            away_team=away_team.name,
            home_score=game.home_score,
            away_score=game.away_score,
        )

    def update_game(
        self, home_team: Team, away_team: Team, home_score: int, away_score: int
    ) -> None:
        """Set the absolute score of a game in progress.

        Scores may go down; only negative values are rejected.

        Raises:
            InvalidTeamError: If either team is missing or unnamed
            InvalidScoreError: If either score is negative or not an integer
            GameNotFoundError: If the pair is not in progress
        """
        self._validate_team(home_team)
        self._validate_team(away_team)
        self._validate_score(home_score)
        self._validate_score(away_score)

        # Lookup and update share one critical section so a concurrent
        # finish_game cannot remove the game in between.
        with self._lock:
            game = self._find_game(home_team, away_team)
            if game is None:
                raise GameNotFoundError(f"Game not found: {home_team} vs {away_team}")
            game.set_score(home_score, away_score)

        logger.debug(
            "Game updated",
            home_team=home_team.name,
            away_team=away_team.name,
            home_score=home_score,
            away_score=away_score,
        )

    def get_summary(self) -> List[GameSummary]:
        """Get a ranked snapshot of the games in progress.

        Entries are copied under the lock, so they never reflect a
        half-applied update and are not affected by later ones.
        """
        with self._lock:
            summaries = [GameSummary.from_game(game) for game in self._games.values()]
        return rank_summaries(summaries, self.tie_break)

    def is_in_progress(self, home_team: Team, away_team: Team) -> bool:
        """Check if a game for the ordered pair is in progress."""
        with self._lock:
            return self._find_game(home_team, away_team) is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def _find_game(self, home_team: Team, away_team: Team) -> Optional[Game]:
        """Find the game for the ordered pair. Caller must hold the lock."""
        return self._games.get((home_team, away_team))

    @staticmethod
    def _validate_team(team: Optional[Team]) -> None:
        """Validate a team to ensure it is present and has a name."""
        if team is None:
            raise InvalidTeamError("Team cannot be None")
        if not isinstance(team, Team):
            raise InvalidTeamError(f"Expected a Team, got {type(team).__name__}")
        if not team.has_valid_name():
            raise InvalidTeamError("Team name cannot be empty")

    @staticmethod
    def _validate_score(score: int) -> None:
        """Validate a score to ensure it is a non-negative integer."""
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidScoreError(f"Score must be an integer, got {score!r}")
        if score < 0:
            raise InvalidScoreError("Score cannot be negative")
