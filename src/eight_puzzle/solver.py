"""Value-in/value-out entry points for solving 8-puzzle instances.

Each call validates its encodings, builds its own searcher, frontier and
closed set, and returns a SearchResult; nothing is shared between calls.
"""

import logging
from typing import Dict, Optional, Union

from eight_puzzle.core.data_models import PuzzleState
from eight_puzzle.core.heuristics import HeuristicKind
from eight_puzzle.core.validation import DEFAULT_GOAL, validate_pair
from eight_puzzle.search.astar import AStarSearcher, HeuristicSpec
from eight_puzzle.search.base import SearchConfig, SearchResult, UpdateCallback
from eight_puzzle.search.uniform_cost import UniformCostSearcher

logger = logging.getLogger(__name__)

ALGORITHMS = ('uniform_cost', 'astar')

_ALGORITHM_ALIASES = {
    'uniform_cost': 'uniform_cost',
    'ucs': 'uniform_cost',
    'uc': 'uniform_cost',
    'astar': 'astar',
    'a_star': 'astar',
    'a*': 'astar',
}


def normalize_algorithm(name: str) -> str:
    """Map an algorithm name or alias to 'uniform_cost' or 'astar'."""
    key = str(name).strip().lower().replace('-', '_')
    if key not in _ALGORITHM_ALIASES:
        raise ValueError(f"Unknown algorithm: {name!r} (expected one of {', '.join(ALGORITHMS)})")
    return _ALGORITHM_ALIASES[key]


def solve_uniform_cost(start: str, goal: str = DEFAULT_GOAL,
                       config: Optional[SearchConfig] = None,
                       update_callback: Optional[UpdateCallback] = None) -> SearchResult:
    """Solve with uniform-cost search.

    Args:
        start: Start encoding, e.g. "123804765"
        goal: Goal encoding
        config: Search configuration (unbounded by default)
        update_callback: Optional observer ``(event, payload)``

    Returns:
        SearchResult; ``path`` is empty when no solution exists

    Raises:
        PuzzleValidationError: If either encoding is malformed
    """
    validate_pair(start, goal)
    searcher = UniformCostSearcher(config)
    return searcher.search(PuzzleState.from_strings(start, goal), update_callback)


def solve_a_star(start: str, goal: str = DEFAULT_GOAL,
                 heuristic: HeuristicSpec = HeuristicKind.MANHATTAN,
                 config: Optional[SearchConfig] = None,
                 update_callback: Optional[UpdateCallback] = None) -> SearchResult:
    """Solve with A* search.

    Args:
        start: Start encoding
        goal: Goal encoding
        heuristic: HeuristicKind, its name, 0/1, or a callable on states
        config: Search configuration (unbounded by default)
        update_callback: Optional observer ``(event, payload)``

    Returns:
        SearchResult; ``path`` is empty when no solution exists

    Raises:
        PuzzleValidationError: If either encoding is malformed
        ValueError: If the heuristic is unknown
    """
    validate_pair(start, goal)
    searcher = AStarSearcher(heuristic, config)
    return searcher.search(PuzzleState.from_strings(start, goal), update_callback)


def solve(start: str, goal: str = DEFAULT_GOAL, algorithm: str = 'astar',
          heuristic: HeuristicSpec = HeuristicKind.MANHATTAN,
          config: Optional[SearchConfig] = None,
          update_callback: Optional[UpdateCallback] = None) -> SearchResult:
    """Dispatch to uniform-cost search or A* by name."""
    algorithm = normalize_algorithm(algorithm)
    if algorithm == 'uniform_cost':
        return solve_uniform_cost(start, goal, config, update_callback)
    return solve_a_star(start, goal, heuristic, config, update_callback)


def compare_algorithms(start: str, goal: str = DEFAULT_GOAL,
                       config: Optional[SearchConfig] = None) -> Dict[str, SearchResult]:
    """Run every strategy on the same instance.

    Returns:
        Results keyed 'uniform_cost', 'astar_misplaced_tiles', 'astar_manhattan'
    """
    validate_pair(start, goal)
    results: Dict[str, SearchResult] = {
        'uniform_cost': solve_uniform_cost(start, goal, config),
    }
    for kind in HeuristicKind:
        results[f"astar_{kind.value}"] = solve_a_star(start, goal, kind, config)

    logger.info("Comparison: " + ", ".join(
        f"{name}={result.statistics.nodes_expanded} expansions"
        for name, result in results.items()
    ))
    return results
