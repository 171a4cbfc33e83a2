"""Exceptions raised by the scoreboard."""


class ScoreBoardError(Exception):
    """Base exception for scoreboard errors."""

    pass


class InvalidTeamError(ScoreBoardError, ValueError):
    """Team is missing or has no usable name."""

    pass


class InvalidScoreError(ScoreBoardError, ValueError):
    """Score is negative or not an integer."""

    pass


class GameAlreadyStartedError(ScoreBoardError):
    """A game between the same home and away teams is already in progress."""

    pass


class GameNotFoundError(ScoreBoardError, LookupError):
    """No game in progress for the given home and away teams."""

    pass
