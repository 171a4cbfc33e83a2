"""Ranking and display of game summaries."""

from typing import Iterable, List, Tuple

from .entities import GameSummary
from .enums import TieBreak


def summary_sort_key(summary: GameSummary, tie_break: TieBreak = TieBreak.MOST_RECENT) -> Tuple[int, int]:
    """Build the ascending sort key for a summary entry.

    Higher totals sort first. On equal totals the start sequence decides,
    newest first for MOST_RECENT and oldest first for EARLIEST.
    """
    sequence = -summary.sequence if tie_break.newest_first else summary.sequence
    return (-summary.total_score, sequence)


def rank_summaries(
    summaries: Iterable[GameSummary],
    tie_break: TieBreak = TieBreak.MOST_RECENT,
) -> List[GameSummary]:
    """Return a new list of summaries in ranked order."""
    return sorted(summaries, key=lambda summary: summary_sort_key(summary, tie_break))


def format_summary(summaries: Iterable[GameSummary]) -> List[str]:
    """Render summaries as numbered display lines, keeping their order.

    Example:
        >>> format_summary([GameSummary("Spain", "Brazil", 10, 2, 1)])
        ['1. Spain 10 - Brazil 2']
    """
    return [f"{position}. {summary}" for position, summary in enumerate(summaries, start=1)]
