"""8-puzzle solver: uniform-cost and A* search over sliding-tile boards."""

from .core import HeuristicKind, PuzzleState, PuzzleValidationError, is_solvable
from .search import SearchConfig, SearchResult, SearchStatistics
from .solver import compare_algorithms, solve, solve_a_star, solve_uniform_cost

__version__ = "1.0.0"

__all__ = [
    'HeuristicKind',
    'PuzzleState',
    'PuzzleValidationError',
    'is_solvable',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'compare_algorithms',
    'solve',
    'solve_a_star',
    'solve_uniform_cost'
]
