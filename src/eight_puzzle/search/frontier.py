"""Priority-ordered open set for best-first search."""

import heapq
from dataclasses import dataclass
from typing import Callable, List, Tuple

from eight_puzzle.core.data_models import PuzzleState


@dataclass
class SearchNode:
    """Frontier entry: a state with its path cost and heuristic estimate."""
    state: PuzzleState
    cost: int  # g(n) - moves from the start
    heuristic: int = 0  # h(n) - 0 for uniform-cost search

    @property
    def f_score(self) -> int:
        """Total estimated cost f(n) = g(n) + h(n)."""
        return self.cost + self.heuristic

    @property
    def path(self) -> str:
        return self.state.path

    @property
    def depth(self) -> int:
        return self.state.depth


PriorityFunction = Callable[[SearchNode], float]


def path_cost_priority(node: SearchNode) -> float:
    """Uniform-cost ordering: g alone."""
    return node.cost


def total_cost_priority(node: SearchNode) -> float:
    """A* ordering: g + h."""
    return node.f_score


class Frontier:
    """Min-heap of search nodes keyed by a pluggable priority function.

    Each entry stores an insertion counter after the priority, so nodes with
    equal priority leave in the order they were pushed and nodes themselves are
    never compared. The same state may sit in the heap several times; filtering
    happens against the closed set when nodes are pushed or popped.
    """

    def __init__(self, priority: PriorityFunction = path_cost_priority):
        self.priority = priority
        self._heap: List[Tuple[float, int, SearchNode]] = []
        self._entrance = 0

    def push(self, node: SearchNode) -> None:
        heapq.heappush(self._heap, (self.priority(node), self._entrance, node))
        self._entrance += 1

    def pop(self) -> SearchNode:
        """Remove and return the node with the lowest priority.

        Raises:
            IndexError: If the frontier is empty
        """
        if not self._heap:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> SearchNode:
        if not self._heap:
            raise IndexError("peek at empty frontier")
        return self._heap[0][2]

    def smallest(self, n: int) -> List[SearchNode]:
        """Best ``n`` nodes without removing them."""
        return [entry[2] for entry in heapq.nsmallest(n, self._heap)]

    @property
    def pushed(self) -> int:
        """Total number of insertions so far."""
        return self._entrance

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
