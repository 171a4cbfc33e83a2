"""Core entities for the live scoreboard."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Team:
    """A participant in a game, identified by its name."""

    name: str

    def has_valid_name(self) -> bool:
        """Check if this team has a usable, non-blank name."""
        return isinstance(self.name, str) and bool(self.name.strip())

    def __str__(self) -> str:
        return self.name


@dataclass
class Game:
    """Represents a game currently in progress.

    The teams are fixed once the game is created; only the score changes.
    The sequence number is handed out by the scoreboard when the game starts
    and is used to order games with equal totals.
    """

    home_team: Team
    away_team: Team
    sequence: int = 0

    home_score: int = 0
    away_score: int = 0

    @property
    def total_score(self) -> int:
        """Get the combined score of both teams."""
        return self.home_score + self.away_score

    def set_score(self, home_score: int, away_score: int) -> None:
        """Replace the current score with the given absolute values."""
        self.home_score = home_score
        self.away_score = away_score

    def __str__(self) -> str:
        return (
            f"Game({self.home_team} {self.home_score} - "
            f"{self.away_team} {self.away_score})"
        )


@dataclass(frozen=True)
class GameSummary:
    """Read-only, point-in-time projection of a game for ranked display."""

    home_team: str
    away_team: str
    home_score: int
    away_score: int
    sequence: int

    @classmethod
    def from_game(cls, game: Game) -> "GameSummary":
        """Create a summary entry from a live game."""
        return cls(
            home_team=game.home_team.name,
            away_team=game.away_team.name,
            home_score=game.home_score,
            away_score=game.away_score,
            sequence=game.sequence,
        )

    @property
    def total_score(self) -> int:
        """Get the combined score of both teams."""
        return self.home_score + self.away_score

    def __str__(self) -> str:
        return f"{self.home_team} {self.home_score} - {self.away_team} {self.away_score}"
