"""Tests for the value-in/value-out solver entry points."""

import pytest

from eight_puzzle import (
    PuzzleValidationError, SearchConfig, compare_algorithms, solve, solve_a_star,
    solve_uniform_cost
)
from eight_puzzle.core.data_models import apply_path
from eight_puzzle.solver import normalize_algorithm

GOAL = "123456780"


class TestNormalizeAlgorithm:

    @pytest.mark.parametrize("name,expected", [
        ("uniform_cost", "uniform_cost"),
        ("UCS", "uniform_cost"),
        ("uniform-cost", "uniform_cost"),
        ("astar", "astar"),
        ("A*", "astar"),
        ("a_star", "astar"),
    ])
    def test_aliases(self, name, expected):
        assert normalize_algorithm(name) == expected

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            normalize_algorithm("dijkstra")


class TestSolveFunctions:

    def test_start_equals_goal(self):
        for result in (solve_uniform_cost(GOAL, GOAL), solve_a_star(GOAL, GOAL, 0),
                       solve_a_star(GOAL, GOAL, 1)):
            assert result.path == ""
            assert result.statistics.nodes_expanded == 0
            assert result.statistics.max_frontier_size == 1

    def test_default_goal(self):
        result = solve_uniform_cost("123456078")
        assert result.path == "RR"

    def test_legacy_heuristic_indices(self):
        misplaced = solve_a_star("123804765", "123860754", 0)
        manhattan = solve_a_star("123804765", "123860754", 1)
        assert misplaced.heuristic == "misplaced_tiles"
        assert manhattan.heuristic == "manhattan"
        assert misplaced.path_length == manhattan.path_length == 3

    def test_dispatch(self):
        assert solve("123804765", "123860754", algorithm="ucs").algorithm == "uniform_cost"
        result = solve("123804765", "123860754", algorithm="astar", heuristic="misplaced")
        assert result.algorithm == "astar"
        assert result.heuristic == "misplaced_tiles"

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError):
            solve("123804765", GOAL, algorithm="bfs")

    @pytest.mark.parametrize("start,goal", [
        ("12345678", GOAL),
        ("123456789", GOAL),
        ("123804765", "113456780"),
        (None, GOAL),
    ])
    def test_invalid_input_rejected_before_search(self, start, goal):
        events = []
        with pytest.raises(PuzzleValidationError):
            solve_uniform_cost(start, goal, update_callback=lambda e, p: events.append(e))
        with pytest.raises(PuzzleValidationError):
            solve_a_star(start, goal, update_callback=lambda e, p: events.append(e))
        assert events == []

    def test_config_is_honoured(self):
        result = solve_a_star("123804765", GOAL, config=SearchConfig(check_solvability=True))
        assert result.termination_reason == "unsolvable"

    def test_calls_are_independent(self):
        first = solve_a_star("208135467")
        solve_uniform_cost("123804765", "123860754")
        again = solve_a_star("208135467")

        assert first.path == again.path
        assert first.statistics.to_dict()['nodes_expanded'] == again.statistics.nodes_expanded


class TestCompareAlgorithms:

    def test_all_strategies(self, oracle):
        results = compare_algorithms("208135467", GOAL)

        assert list(results) == ['uniform_cost', 'astar_misplaced_tiles', 'astar_manhattan']
        distance = oracle("208135467", GOAL)
        for result in results.values():
            assert result.success
            assert result.path_length == distance
            assert apply_path("208135467", result.path, GOAL).goal_match()

        assert (results['astar_manhattan'].statistics.nodes_expanded <=
                results['uniform_cost'].statistics.nodes_expanded)

    def test_invalid_input(self):
        with pytest.raises(PuzzleValidationError):
            compare_algorithms("0", GOAL)
