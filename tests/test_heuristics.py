"""Tests for the misplaced-tiles and Manhattan heuristics."""

import pytest
import numpy as np

from eight_puzzle.core.data_models import parse_board
from eight_puzzle.core.heuristics import (
    HeuristicKind, compute_heuristic, manhattan_distance, misplaced_tiles
)

GOAL = "123456780"


def _grids(state, goal=GOAL):
    return parse_board(state), parse_board(goal)


class TestHeuristicKind:
    """Test heuristic selector parsing."""

    @pytest.mark.parametrize("value,expected", [
        (HeuristicKind.MANHATTAN, HeuristicKind.MANHATTAN),
        (0, HeuristicKind.MISPLACED_TILES),
        (1, HeuristicKind.MANHATTAN),
        ("misplaced_tiles", HeuristicKind.MISPLACED_TILES),
        ("misplaced", HeuristicKind.MISPLACED_TILES),
        ("MISPLACED-TILES", HeuristicKind.MISPLACED_TILES),
        ("manhattan", HeuristicKind.MANHATTAN),
        ("Manhattan_Distance", HeuristicKind.MANHATTAN),
    ])
    def test_parse(self, value, expected):
        assert HeuristicKind.parse(value) is expected

    @pytest.mark.parametrize("value", ["euclidean", "", 2, -1, True, None])
    def test_parse_rejects_unknown(self, value):
        with pytest.raises(ValueError):
            HeuristicKind.parse(value)


class TestMisplacedTiles:

    def test_goal_is_zero(self):
        assert misplaced_tiles(*_grids(GOAL)) == 0

    def test_blank_is_ignored(self):
        # Only tile 8 is off its cell; the blank is off too but does not count
        assert misplaced_tiles(*_grids("123456708")) == 1

    def test_known_value(self):
        assert misplaced_tiles(*_grids("123804765")) == 4
        assert misplaced_tiles(*_grids("876543210")) == 8


class TestManhattanDistance:

    def test_goal_is_zero(self):
        assert manhattan_distance(*_grids(GOAL)) == 0

    def test_single_move(self):
        assert manhattan_distance(*_grids("123456708")) == 1

    def test_known_value(self):
        assert manhattan_distance(*_grids("123804765")) == 8

    def test_custom_goal(self):
        assert manhattan_distance(*_grids("123804765", "123804765")) == 0
        assert manhattan_distance(*_grids("123456780", "123804765")) == 8

    def test_dominates_misplaced_tiles(self, scrambled_instances):
        for start, goal, _ in scrambled_instances:
            grid, goal_grid = _grids(start, goal)
            assert manhattan_distance(grid, goal_grid) >= misplaced_tiles(grid, goal_grid)


class TestAdmissibility:
    """Neither heuristic may overestimate the true distance."""

    @pytest.mark.parametrize("kind", list(HeuristicKind))
    def test_never_overestimates(self, kind, scrambled_instances):
        for start, goal, distance in scrambled_instances:
            assert compute_heuristic(*_grids(start, goal), kind) <= distance

    def test_returns_plain_int(self):
        value = compute_heuristic(*_grids("123804765"), "manhattan")
        assert isinstance(value, int)
        assert not isinstance(value, np.integer)
