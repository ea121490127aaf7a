"""Tests for the shared best-first driver: limits, statistics and observers."""

import pytest

from eight_puzzle.core.data_models import PuzzleState
from eight_puzzle.search.astar import AStarSearcher
from eight_puzzle.search.base import SearchConfig, SearchResult, SearchStatistics
from eight_puzzle.search.uniform_cost import UniformCostSearcher

GOAL = "123456780"


@pytest.fixture(params=["uniform_cost", "astar"])
def make_searcher(request):
    def factory(config=None):
        if request.param == "uniform_cost":
            return UniformCostSearcher(config)
        return AStarSearcher("manhattan", config)
    return factory


class TestSearchConfig:

    def test_defaults_are_unbounded(self):
        config = SearchConfig()
        assert config.max_computation_time is None
        assert config.max_nodes_expanded is None
        assert config.check_solvability is False
        assert config.progress_interval == 1000

    def test_from_config(self):
        config = SearchConfig.from_config({
            'max_computation_time': 2,
            'max_nodes_expanded': 500,
            'check_solvability': True,
            'progress_interval': 10,
        })
        assert config.max_computation_time == 2.0
        assert config.max_nodes_expanded == 500
        assert config.check_solvability is True
        assert config.progress_interval == 10

    def test_from_empty_config(self):
        assert SearchConfig.from_config(None) == SearchConfig()
        assert SearchConfig.from_config({'max_computation_time': None}) == SearchConfig()


class TestStatistics:

    def test_placeholder_counters_stay_zero(self, make_searcher):
        result = make_searcher().search(PuzzleState.from_strings("208135467", GOAL))
        stats = result.statistics

        assert stats.deletions_from_middle_of_heap == 0
        assert stats.local_loops_avoided == 0
        assert stats.attempted_reexpansions == 0

    def test_counters(self, make_searcher):
        result = make_searcher().search(PuzzleState.from_strings("208135467", GOAL))
        stats = result.statistics

        assert stats.nodes_generated >= stats.nodes_expanded
        assert stats.max_frontier_size <= stats.nodes_generated
        assert stats.max_depth_reached <= stats.path_length
        assert stats.computation_time >= 0
        assert stats.time_ms == int(stats.computation_time * 1000)

    def test_to_dict(self):
        stats = SearchStatistics(path_length=3, nodes_expanded=7, max_frontier_size=9,
                                 computation_time=0.25)
        data = stats.to_dict()

        assert data['path_length'] == 3
        assert data['nodes_expanded'] == 7
        assert data['max_frontier_size'] == 9
        assert data['time_ms'] == 250
        assert data['attempted_reexpansions'] == 0

    def test_result_to_dict(self):
        result = SearchResult(success=True, path="RR", algorithm="astar", heuristic="manhattan",
                              termination_reason="goal_reached",
                              statistics=SearchStatistics(path_length=2))
        data = result.to_dict()

        assert data['path'] == "RR"
        assert data['success'] is True
        assert data['stats']['path_length'] == 2
        assert result.path_length == 2


class TestLimits:

    def test_expansion_cap(self, make_searcher):
        searcher = make_searcher(SearchConfig(max_nodes_expanded=5))
        result = searcher.search(PuzzleState.from_strings("208135467", GOAL))

        assert not result.success
        assert result.path == ""
        assert result.termination_reason == "max_nodes_reached"
        assert result.statistics.nodes_expanded == 5

    def test_timeout(self, make_searcher):
        searcher = make_searcher(SearchConfig(max_computation_time=0.0))
        result = searcher.search(PuzzleState.from_strings("208135467", GOAL))

        assert not result.success
        assert result.path == ""
        assert result.termination_reason == "timeout"

    def test_goal_on_top_within_exact_budget(self, make_searcher):
        # Uniform-cost needs 2 expansions for "R"; popping the goal costs none
        searcher = make_searcher(SearchConfig(max_nodes_expanded=2))
        result = searcher.search(PuzzleState.from_strings("123456708", GOAL))

        assert result.success
        assert result.path == "R"
        assert result.termination_reason == "goal_reached"
        assert result.statistics.nodes_expanded <= 2

    def test_budget_one_short_fails(self):
        searcher = UniformCostSearcher(SearchConfig(max_nodes_expanded=1))
        result = searcher.search(PuzzleState.from_strings("123456708", GOAL))

        assert not result.success
        assert result.termination_reason == "max_nodes_reached"
        assert result.statistics.nodes_expanded == 1

    def test_solved_start_ignores_zero_deadline(self, make_searcher):
        searcher = make_searcher(SearchConfig(max_computation_time=0.0, max_nodes_expanded=1))
        result = searcher.search(PuzzleState.from_strings(GOAL, GOAL))

        assert result.success
        assert result.path == ""
        assert result.termination_reason == "goal_reached"
        assert result.statistics.nodes_expanded == 0

    def test_solvability_short_circuit(self, make_searcher):
        searcher = make_searcher(SearchConfig(check_solvability=True))
        result = searcher.search(PuzzleState.from_strings("123804765", GOAL))

        assert not result.success
        assert result.path == ""
        assert result.termination_reason == "unsolvable"
        assert result.statistics.nodes_expanded == 0

    def test_solvability_check_passes_solvable(self, make_searcher):
        searcher = make_searcher(SearchConfig(check_solvability=True))
        result = searcher.search(PuzzleState.from_strings("123804765", "123860754"))
        assert result.success
        assert result.path_length == 3


class TestUpdateCallback:

    def test_event_sequence(self, make_searcher):
        events = []
        searcher = make_searcher(SearchConfig(progress_interval=1))
        result = searcher.search(PuzzleState.from_strings("123804765", "123860754"),
                                 lambda event, payload: events.append((event, payload)))

        names = [event for event, _ in events]
        assert names[0] == 'search_started'
        assert names[-1] == 'solver_finished'
        assert names.count('progress_update') == result.statistics.nodes_expanded

        started = events[0][1]
        assert started['start'] == "123804765"
        assert started['goal'] == "123860754"

        finished = events[-1][1]
        assert finished['path'] == result.path
        assert finished['stats']['nodes_expanded'] == result.statistics.nodes_expanded

    def test_progress_payload(self, make_searcher):
        updates = []
        searcher = make_searcher(SearchConfig(progress_interval=1))
        searcher.search(PuzzleState.from_strings("208135467", GOAL),
                        lambda event, payload: updates.append(payload)
                        if event == 'progress_update' else None)

        payload = updates[0]
        assert payload['stats']['nodes_expanded'] == 1
        assert payload['closed_size'] == 1
        assert 0 < len(payload['candidates']) <= 5
        assert set(payload['candidates'][0]) == {'state', 'cost', 'heuristic', 'f_score'}

    def test_progress_disabled(self, make_searcher):
        events = []
        searcher = make_searcher(SearchConfig(progress_interval=0))
        searcher.search(PuzzleState.from_strings("208135467", GOAL),
                        lambda event, payload: events.append(event))
        assert events == ['search_started', 'solver_finished']

    def test_failing_callback_does_not_abort(self, make_searcher):
        def broken(event, payload):
            raise RuntimeError("observer failure")

        result = make_searcher(SearchConfig(progress_interval=1)).search(
            PuzzleState.from_strings("123804765", "123860754"), broken)
        assert result.success
        assert result.path_length == 3
