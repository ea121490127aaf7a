"""Shared fixtures and a breadth-first oracle for search tests."""

import random
from collections import deque
from typing import Dict, List, Optional

import pytest

GOAL = "123456780"

# (row delta, col delta, letter) in the solver's successor order
_MOVES = ((-1, 0, 'U'), (0, 1, 'R'), (1, 0, 'D'), (0, -1, 'L'))


def _neighbours(state: str) -> List[str]:
    blank = state.index('0')
    row, col = divmod(blank, 3)
    result = []
    for d_row, d_col, _ in _MOVES:
        r, c = row + d_row, col + d_col
        if 0 <= r < 3 and 0 <= c < 3:
            cells = list(state)
            other = r * 3 + c
            cells[blank], cells[other] = cells[other], cells[blank]
            result.append(''.join(cells))
    return result


def bfs_distance(start: str, goal: str) -> Optional[int]:
    """Exact move distance by plain breadth-first search (None if unreachable)."""
    if start == goal:
        return 0
    dist: Dict[str, int] = {start: 0}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        for nxt in _neighbours(state):
            if nxt not in dist:
                dist[nxt] = dist[state] + 1
                if nxt == goal:
                    return dist[nxt]
                queue.append(nxt)
    return None


def scramble(goal: str, moves: int, seed: int) -> str:
    """Random walk of the blank away from ``goal``."""
    rng = random.Random(seed)
    state, previous = goal, None
    for _ in range(moves):
        options = [s for s in _neighbours(state) if s != previous]
        previous, state = state, rng.choice(options)
    return state


@pytest.fixture(scope="session")
def oracle():
    return bfs_distance


@pytest.fixture(scope="session")
def scrambled_instances():
    """Solvable (start, goal, distance) triples of varying depth."""
    instances = []
    for seed, moves in [(1, 4), (2, 8), (3, 10), (4, 12), (5, 14), (6, 16)]:
        start = scramble(GOAL, moves, seed)
        instances.append((start, GOAL, bfs_distance(start, GOAL)))
    return instances
