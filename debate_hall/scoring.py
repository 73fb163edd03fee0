"""Scoring of debate arguments into per-debate statistics.

Every argument is worth ``BASE_POINTS``; arguments whose text is at least
``LENGTH_BONUS_THRESHOLD`` characters long earn an extra ``LENGTH_BONUS``.
The side with more points wins, equal points are a draw.
"""

from collections.abc import Iterable, Mapping

from .models import Argument, DebateStats
from .types import Side, Winner

BASE_POINTS = 1
LENGTH_BONUS = 1
LENGTH_BONUS_THRESHOLD = 120


def argument_points(argument: Argument) -> int:
    """Points a single argument contributes to its side."""
    if len(argument.text) >= LENGTH_BONUS_THRESHOLD:
        return BASE_POINTS + LENGTH_BONUS
    return BASE_POINTS


def determine_winner(for_points: int, against_points: int) -> Winner:
    """Pick the winning side from the point totals."""
    if for_points > against_points:
        return Winner.FOR
    if against_points > for_points:
        return Winner.AGAINST
    return Winner.DRAW


def compute_stats(arguments: Iterable[Argument]) -> DebateStats:
    """
    Compute statistics for the arguments of a single debate.

    Args:
        arguments: Arguments belonging to one debate, in any order

    Returns:
        DebateStats with side counts, points, distinct participants and winner
    """
    counts = {Side.FOR: 0, Side.AGAINST: 0}
    points = {Side.FOR: 0, Side.AGAINST: 0}
    participants: set[str] = set()

    for argument in arguments:
        counts[argument.side] += 1
        points[argument.side] += argument_points(argument)
        participants.add(argument.author_name)

    return DebateStats(
        for_count=counts[Side.FOR],
        against_count=counts[Side.AGAINST],
        for_points=points[Side.FOR],
        against_points=points[Side.AGAINST],
        participant_count=len(participants),
        winner=determine_winner(points[Side.FOR], points[Side.AGAINST]),
    )


def compute_stats_by_debate(
    arguments_by_debate: Mapping[int, Iterable[Argument]],
    debate_ids: Iterable[int],
) -> dict[int, DebateStats]:
    """Compute stats for each debate; debates without arguments score a draw."""
    return {
        debate_id: compute_stats(arguments_by_debate.get(debate_id, ()))
        for debate_id in debate_ids
    }
