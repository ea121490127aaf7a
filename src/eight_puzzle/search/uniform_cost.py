"""Uniform-cost search for the 8-puzzle.

Nodes leave the frontier in order of path cost g alone, so with unit move
costs the first goal popped lies at the shortest distance from the start.
"""

import logging
from typing import Optional

from .base import BestFirstSearcher, SearchConfig
from .frontier import PriorityFunction, path_cost_priority

logger = logging.getLogger(__name__)


class UniformCostSearcher(BestFirstSearcher):
    """Best-first search ordered strictly by path cost."""

    algorithm_name = "uniform_cost"

    @property
    def priority(self) -> PriorityFunction:
        return path_cost_priority


def create_uniform_cost_searcher(max_computation_time: Optional[float] = None,
                                 max_nodes_expanded: Optional[int] = None,
                                 check_solvability: bool = False) -> UniformCostSearcher:
    """Factory function to create a uniform-cost searcher.

    Args:
        max_computation_time: Optional deadline in seconds
        max_nodes_expanded: Optional cap on expansions
        check_solvability: Reject mismatched-parity pairs before searching

    Returns:
        Configured UniformCostSearcher instance
    """
    config = SearchConfig(
        max_computation_time=max_computation_time,
        max_nodes_expanded=max_nodes_expanded,
        check_solvability=check_solvability
    )
    logger.debug(f"Creating uniform-cost searcher with {config}")
    return UniformCostSearcher(config)
