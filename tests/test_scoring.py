"""Tests for debate statistics and scoring."""

import itertools

import pytest

from debate_hall.models import DebateStats
from debate_hall.scoring import (
    argument_points,
    compute_stats,
    compute_stats_by_debate,
    determine_winner,
)
from debate_hall.types import Side, Winner

pytestmark = pytest.mark.unit


def test_empty_input_is_all_zero_draw():
    stats = compute_stats([])

    assert stats == DebateStats()
    assert stats.for_count == 0
    assert stats.against_points == 0
    assert stats.participant_count == 0
    assert stats.winner is Winner.DRAW


@pytest.mark.parametrize(
    "length, expected_points",
    [(1, 1), (119, 1), (120, 2), (500, 2)],
)
def test_length_bonus_threshold_is_inclusive(make_argument, length, expected_points):
    argument = make_argument(Side.FOR, "x" * length, "Alice")

    assert argument_points(argument) == expected_points
    assert compute_stats([argument]).for_points == expected_points


def test_long_against_argument_wins(make_argument):
    arguments = [
        make_argument(Side.FOR, "a" * 50, "Alice"),
        make_argument(Side.AGAINST, "b" * 200, "Bob"),
    ]

    stats = compute_stats(arguments)

    assert stats.for_points == 1
    assert stats.against_points == 2
    assert stats.winner is Winner.AGAINST
    assert stats.participant_count == 2


def test_equal_points_is_draw(make_argument):
    arguments = [
        make_argument(Side.FOR, "x", "A"),
        make_argument(Side.FOR, "y", "B"),
        make_argument(Side.AGAINST, "z" * 150, "C"),
    ]

    stats = compute_stats(arguments)

    assert stats == DebateStats(
        for_count=2,
        against_count=1,
        for_points=2,
        against_points=2,
        participant_count=3,
        winner=Winner.DRAW,
    )


def test_same_author_on_both_sides_counts_once(make_argument):
    arguments = [
        make_argument(Side.FOR, "yes", "Alice"),
        make_argument(Side.AGAINST, "no", "Alice"),
    ]

    assert compute_stats(arguments).participant_count == 1


def test_author_names_are_case_sensitive(make_argument):
    arguments = [
        make_argument(Side.FOR, "yes", "alice"),
        make_argument(Side.FOR, "yes again", "Alice"),
    ]

    assert compute_stats(arguments).participant_count == 2


def test_counts_sum_to_number_of_arguments(make_argument):
    arguments = [
        make_argument(side, "t" * length, f"user{index % 3}")
        for index, (side, length) in enumerate(
            [(Side.FOR, 10), (Side.AGAINST, 130), (Side.FOR, 120), (Side.AGAINST, 5), (Side.AGAINST, 119)]
        )
    ]

    stats = compute_stats(arguments)

    assert stats.for_count + stats.against_count == len(arguments)
    assert stats.for_points == 3
    assert stats.against_points == 4
    assert stats.winner is Winner.AGAINST
    assert stats.participant_count == 3


def test_result_is_order_independent(make_argument):
    arguments = [
        make_argument(Side.FOR, "f" * 130, "A"),
        make_argument(Side.AGAINST, "g", "B"),
        make_argument(Side.AGAINST, "h" * 121, "A"),
        make_argument(Side.FOR, "i", "C"),
    ]

    expected = compute_stats(arguments)
    for permutation in itertools.permutations(arguments):
        assert compute_stats(permutation) == expected


def test_repeated_calls_are_identical(make_argument):
    arguments = [make_argument(Side.FOR, "x" * 140, "A"), make_argument(Side.AGAINST, "y", "B")]

    assert compute_stats(arguments) == compute_stats(list(arguments))


def test_accepts_generators(make_argument):
    arguments = [make_argument(Side.FOR, "x", "A"), make_argument(Side.FOR, "y", "B")]

    stats = compute_stats(argument for argument in arguments)

    assert stats.for_count == 2
    assert stats.winner is Winner.FOR


@pytest.mark.parametrize(
    "for_points, against_points, expected",
    [(3, 2, Winner.FOR), (2, 3, Winner.AGAINST), (0, 0, Winner.DRAW), (4, 4, Winner.DRAW)],
)
def test_determine_winner(for_points, against_points, expected):
    assert determine_winner(for_points, against_points) is expected


def test_compute_stats_by_debate_fills_missing_debates(make_argument):
    arguments_by_debate = {
        1: [make_argument(Side.FOR, "x", "A")],
        2: [make_argument(Side.AGAINST, "y" * 120, "B"), make_argument(Side.AGAINST, "z", "C")],
    }

    stats = compute_stats_by_debate(arguments_by_debate, [1, 2, 3])

    assert stats[1].winner is Winner.FOR
    assert stats[2].against_points == 3
    assert stats[2].participant_count == 2
    assert stats[3] == DebateStats()


def test_stats_to_dict():
    stats = DebateStats(for_count=1, for_points=2, participant_count=1, winner=Winner.FOR)

    assert stats.to_dict() == {
        "for_count": 1,
        "against_count": 0,
        "for_points": 2,
        "against_points": 0,
        "participant_count": 1,
        "winner": "FOR",
    }
