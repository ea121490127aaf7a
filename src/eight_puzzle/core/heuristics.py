"""Admissible heuristics for the 8-puzzle.

Both estimates ignore the blank and never overestimate the number of unit-cost
moves left, which keeps A* optimal:
- misplaced tiles: non-blank cells whose value differs from the goal cell
- Manhattan distance: summed grid distance of each tile to its goal cell
"""

from enum import Enum
from typing import Union

import numpy as np


class HeuristicKind(Enum):
    """Heuristic selector for A*."""
    MISPLACED_TILES = "misplaced_tiles"
    MANHATTAN = "manhattan"

    @classmethod
    def parse(cls, value: Union['HeuristicKind', str, int]) -> 'HeuristicKind':
        """Resolve a heuristic from an enum member, name, value or legacy index.

        The integers 0 and 1 map to misplaced tiles and Manhattan distance.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Unknown heuristic: {value!r}")
        if isinstance(value, int):
            members = list(cls)
            if 0 <= value < len(members):
                return members[value]
            raise ValueError(f"Unknown heuristic index: {value}")
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_')
            aliases = {
                'misplaced': cls.MISPLACED_TILES,
                'manhattan_distance': cls.MANHATTAN,
            }
            if key in aliases:
                return aliases[key]
            for member in cls:
                if key in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown heuristic: {value!r}")


def misplaced_tiles(grid: np.ndarray, goal: np.ndarray) -> int:
    """Number of non-blank tiles not on their goal cell."""
    return int(np.count_nonzero((grid != goal) & (grid != 0)))


def manhattan_distance(grid: np.ndarray, goal: np.ndarray) -> int:
    """Sum of row and column offsets between each tile and its goal cell."""
    size = grid.shape[1]
    # argsort of a permutation gives, for each value, its flat position
    current_pos = np.argsort(grid, axis=None)[1:]
    goal_pos = np.argsort(goal, axis=None)[1:]
    cur_rows, cur_cols = np.divmod(current_pos, size)
    goal_rows, goal_cols = np.divmod(goal_pos, size)
    return int(np.abs(cur_rows - goal_rows).sum() + np.abs(cur_cols - goal_cols).sum())


def compute_heuristic(grid: np.ndarray, goal: np.ndarray,
                      kind: Union[HeuristicKind, str, int]) -> int:
    """Evaluate the heuristic selected by ``kind``."""
    kind = HeuristicKind.parse(kind)
    if kind is HeuristicKind.MISPLACED_TILES:
        return misplaced_tiles(grid, goal)
    return manhattan_distance(grid, goal)
