"""Best-first graph search driver shared by uniform-cost search and A*.

The driver keeps a strict expanded list (closed set of canonical strings):
- the goal test happens when a node is popped, never when it is generated
- a popped state is expanded at most once; later copies are skipped
- successors are generated Up, Right, Down, Left and pushed unless their
  state has already been expanded (copies already waiting in the frontier
  are not looked for)
"""

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Set

from eight_puzzle.core.data_models import PuzzleState
from eight_puzzle.core.validation import is_solvable

from .frontier import Frontier, PriorityFunction, SearchNode

logger = logging.getLogger(__name__)

UpdateCallback = Callable[[str, Dict[str, Any]], None]


@dataclass
class SearchStatistics:
    """Counters and timing collected during one search."""
    path_length: int = 0
    nodes_expanded: int = 0
    max_frontier_size: int = 0
    computation_time: float = 0.0  # seconds
    nodes_generated: int = 0
    duplicate_states: int = 0  # popped entries whose state was already expanded
    max_depth_reached: int = 0
    heuristic_computations: int = 0
    # Always zero; kept so reports have a stable shape
    deletions_from_middle_of_heap: int = 0
    local_loops_avoided: int = 0
    attempted_reexpansions: int = 0

    @property
    def time_ms(self) -> int:
        return int(self.computation_time * 1000)

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'path_length': self.path_length,
            'nodes_expanded': self.nodes_expanded,
            'max_frontier_size': self.max_frontier_size,
            'computation_time': self.computation_time,
            'time_ms': self.time_ms,
            'nodes_generated': self.nodes_generated,
            'duplicate_states': self.duplicate_states,
            'max_depth_reached': self.max_depth_reached,
            'heuristic_computations': self.heuristic_computations,
            'deletions_from_middle_of_heap': self.deletions_from_middle_of_heap,
            'local_loops_avoided': self.local_loops_avoided,
            'attempted_reexpansions': self.attempted_reexpansions,
        }


@dataclass
class SearchConfig:
    """Configuration for best-first search.

    The defaults reproduce unbounded search: no deadline, no expansion cap and
    no parity pre-check, so unsolvable pairs are discovered by exhausting the
    reachable states.
    """
    max_computation_time: Optional[float] = None  # seconds
    max_nodes_expanded: Optional[int] = None
    check_solvability: bool = False
    progress_interval: int = 1000  # expansions between progress_update events

    @classmethod
    def from_config(cls, search_cfg: Optional[Mapping[str, Any]]) -> 'SearchConfig':
        """Build from the ``search`` section of a loaded configuration."""
        if not search_cfg:
            return cls()

        max_time = search_cfg.get('max_computation_time', None)
        max_nodes = search_cfg.get('max_nodes_expanded', None)
        return cls(
            max_computation_time=float(max_time) if max_time is not None else None,
            max_nodes_expanded=int(max_nodes) if max_nodes is not None else None,
            check_solvability=bool(search_cfg.get('check_solvability', False)),
            progress_interval=int(search_cfg.get('progress_interval', 1000)),
        )


@dataclass
class SearchResult:
    """Outcome of one search: the move string plus statistics."""
    success: bool
    path: str = ""
    statistics: SearchStatistics = field(default_factory=SearchStatistics)
    termination_reason: str = "unknown"
    algorithm: str = ""
    heuristic: Optional[str] = None

    @property
    def path_length(self) -> int:
        return self.statistics.path_length

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'path': self.path,
            'algorithm': self.algorithm,
            'heuristic': self.heuristic,
            'termination_reason': self.termination_reason,
            'stats': self.statistics.to_dict(),
        }


class BestFirstSearcher(ABC):
    """Best-first search over puzzle states with a strict expanded list."""

    algorithm_name = "best_first"

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize searcher.

        Args:
            config: Search configuration parameters
        """
        self.config = config or SearchConfig()
        self.statistics = SearchStatistics()

    @property
    @abstractmethod
    def priority(self) -> PriorityFunction:
        """Frontier ordering used by this strategy."""

    @property
    def heuristic_name(self) -> Optional[str]:
        return None

    def estimate(self, state: PuzzleState) -> int:
        """Heuristic estimate for ``state``; zero unless overridden."""
        return 0

    def make_node(self, state: PuzzleState, cost: int) -> SearchNode:
        """Wrap a state in a frontier node, refreshing its cached costs."""
        h = self.estimate(state)
        state.h_cost = h
        state.update_f_cost()
        return SearchNode(state=state, cost=cost, heuristic=h)

    def search(self, initial_state: PuzzleState,
               update_callback: Optional[UpdateCallback] = None) -> SearchResult:
        """Search from ``initial_state`` to its goal.

        Args:
            initial_state: Root state (its goal grid defines success)
            update_callback: Optional observer called as
                ``update_callback(event, payload)``

        Returns:
            SearchResult with the move string (empty if none found) and statistics
        """
        start_time = time.perf_counter()
        self.statistics = SearchStatistics()
        stats = self.statistics

        logger.info(f"Starting {self.algorithm_name} search: {initial_state.key} -> "
                    f"{initial_state.goal_string}"
                    + (f" (heuristic={self.heuristic_name})" if self.heuristic_name else ""))
        self._notify(update_callback, 'search_started', {
            'algorithm': self.algorithm_name,
            'heuristic': self.heuristic_name,
            'start': initial_state.key,
            'goal': initial_state.goal_string,
        })

        if (self.config.check_solvability and
                not is_solvable(initial_state.key, initial_state.goal_string)):
            logger.info("Start and goal have different inversion parity; skipping search")
            return self._finish(start_time, "", False, "unsolvable", update_callback)

        deadline = (start_time + self.config.max_computation_time
                    if self.config.max_computation_time is not None else None)

        frontier = Frontier(self.priority)
        frontier.push(self.make_node(initial_state, 0))
        stats.nodes_generated = 1
        stats.max_frontier_size = len(frontier)

        # Canonical strings of expanded states
        closed_set: Set[str] = set()

        while frontier:
            current = frontier.pop()
            state = current.state

            if state.goal_match():
                stats.path_length = current.cost
                return self._finish(start_time, current.path, True, "goal_reached", update_callback)

            if state.key in closed_set:
                stats.duplicate_states += 1
                continue

            # Limits only guard expansions; the goal test above is free
            if deadline is not None and time.perf_counter() > deadline:
                logger.warning(f"{self.algorithm_name} search timed out after "
                               f"{stats.nodes_expanded} expansions")
                return self._finish(start_time, "", False, "timeout", update_callback)

            if (self.config.max_nodes_expanded is not None and
                    stats.nodes_expanded >= self.config.max_nodes_expanded):
                logger.warning(f"{self.algorithm_name} search hit the expansion cap "
                               f"({self.config.max_nodes_expanded})")
                return self._finish(start_time, "", False, "max_nodes_reached", update_callback)

            closed_set.add(state.key)
            stats.nodes_expanded += 1
            stats.max_depth_reached = max(stats.max_depth_reached, state.depth)

            for _, successor in state.successors():
                if successor.key in closed_set:
                    continue
                frontier.push(self.make_node(successor, current.cost + 1))
                stats.nodes_generated += 1
                stats.max_frontier_size = max(stats.max_frontier_size, len(frontier))

            if (self.config.progress_interval > 0 and
                    stats.nodes_expanded % self.config.progress_interval == 0):
                logger.debug(f"{self.algorithm_name}: {stats.nodes_expanded} expansions, "
                             f"frontier={len(frontier)}, closed={len(closed_set)}")
                self._notify(update_callback, 'progress_update', {
                    'stats': stats.to_dict(),
                    'frontier_size': len(frontier),
                    'closed_size': len(closed_set),
                    'candidates': [{
                        'state': node.state.key,
                        'cost': node.cost,
                        'heuristic': node.heuristic,
                        'f_score': node.f_score,
                    } for node in frontier.smallest(5)],
                })

        return self._finish(start_time, "", False, "search_exhausted", update_callback)

    def _finish(self, start_time: float, path: str, success: bool, reason: str,
                update_callback: Optional[UpdateCallback]) -> SearchResult:
        stats = self.statistics
        stats.computation_time = time.perf_counter() - start_time

        result = SearchResult(
            success=success,
            path=path,
            statistics=stats,
            termination_reason=reason,
            algorithm=self.algorithm_name,
            heuristic=self.heuristic_name,
        )

        if success:
            logger.info(f"Solution found! Path: {path}, Length: {stats.path_length}, "
                        f"Expansions: {stats.nodes_expanded}, Max Queue: {stats.max_frontier_size}, "
                        f"Time: {stats.computation_time:.3f} s")
        else:
            logger.info(f"No solution found ({reason}). Expansions: {stats.nodes_expanded}, "
                        f"Max Queue: {stats.max_frontier_size}, Time: {stats.computation_time:.3f} s")

        self._notify(update_callback, 'solver_finished', result.to_dict())
        return result

    @staticmethod
    def _notify(update_callback: Optional[UpdateCallback], event: str,
                payload: Dict[str, Any]) -> None:
        if not update_callback:
            return
        try:
            update_callback(event, payload)
        except Exception as e:
            logger.warning(f"Failed to execute update_callback for '{event}': {e}")
