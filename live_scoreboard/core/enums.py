"""Core enums for the live scoreboard."""

from enum import Enum


class TieBreak(Enum):
    """Rule used to order games that share the same total score."""

    MOST_RECENT = "most_recent"
    EARLIEST = "earliest"

    @property
    def newest_first(self) -> bool:
        """Check if later-started games rank ahead on a tie."""
        return self == self.MOST_RECENT
