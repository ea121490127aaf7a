"""A* search for the 8-puzzle.

Priority is f = g + h with h recomputed for every generated successor. The
misplaced-tiles and Manhattan heuristics are admissible and consistent, so the
first goal popped is optimal and no state needs to be expanded twice.
"""

import logging
from typing import Callable, Optional, Union

from eight_puzzle.core.data_models import PuzzleState
from eight_puzzle.core.heuristics import HeuristicKind

from .base import BestFirstSearcher, SearchConfig
from .frontier import PriorityFunction, total_cost_priority

logger = logging.getLogger(__name__)

HeuristicSpec = Union[HeuristicKind, str, int, Callable[[PuzzleState], int]]


class AStarSearcher(BestFirstSearcher):
    """Best-first search ordered by path cost plus a heuristic estimate."""

    algorithm_name = "astar"

    def __init__(self, heuristic: HeuristicSpec = HeuristicKind.MANHATTAN,
                 config: Optional[SearchConfig] = None):
        """Initialize A* searcher.

        Args:
            heuristic: Built-in heuristic selector, or any callable mapping a
                state to a non-negative estimate
            config: Search configuration parameters
        """
        super().__init__(config)
        if callable(heuristic):
            self.heuristic_kind: Optional[HeuristicKind] = None
            self._heuristic_fn = heuristic
            self._heuristic_name = getattr(heuristic, '__name__', 'custom')
        else:
            kind = HeuristicKind.parse(heuristic)
            self.heuristic_kind = kind
            self._heuristic_fn = lambda state: state.heuristic(kind)
            self._heuristic_name = kind.value

        logger.debug(f"A* searcher initialized with heuristic={self._heuristic_name}")

    @property
    def priority(self) -> PriorityFunction:
        return total_cost_priority

    @property
    def heuristic_name(self) -> Optional[str]:
        return self._heuristic_name

    def estimate(self, state: PuzzleState) -> int:
        self.statistics.heuristic_computations += 1
        return int(self._heuristic_fn(state))


def create_astar_searcher(heuristic: HeuristicSpec = HeuristicKind.MANHATTAN,
                          max_computation_time: Optional[float] = None,
                          max_nodes_expanded: Optional[int] = None,
                          check_solvability: bool = False) -> AStarSearcher:
    """Factory function to create an A* searcher with custom configuration.

    Args:
        heuristic: Heuristic selector or callable
        max_computation_time: Optional deadline in seconds
        max_nodes_expanded: Optional cap on expansions
        check_solvability: Reject mismatched-parity pairs before searching

    Returns:
        Configured AStarSearcher instance
    """
    config = SearchConfig(
        max_computation_time=max_computation_time,
        max_nodes_expanded=max_nodes_expanded,
        check_solvability=check_solvability
    )
    return AStarSearcher(heuristic, config)
