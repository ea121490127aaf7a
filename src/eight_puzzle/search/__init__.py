"""Best-first search strategies for the 8-puzzle.

Uniform-cost search and A* share one driver with a strict expanded list and
differ only in how the frontier is ordered.
"""

from .frontier import Frontier, SearchNode, path_cost_priority, total_cost_priority
from .base import BestFirstSearcher, SearchConfig, SearchResult, SearchStatistics
from .uniform_cost import UniformCostSearcher, create_uniform_cost_searcher
from .astar import AStarSearcher, create_astar_searcher

__all__ = [
    'Frontier',
    'SearchNode',
    'path_cost_priority',
    'total_cost_priority',
    'BestFirstSearcher',
    'SearchConfig',
    'SearchResult',
    'SearchStatistics',
    'UniformCostSearcher',
    'create_uniform_cost_searcher',
    'AStarSearcher',
    'create_astar_searcher'
]
