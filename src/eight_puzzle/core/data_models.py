"""Core data models for the 8-puzzle solver."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional, Tuple, Union

import numpy as np

from .heuristics import HeuristicKind, compute_heuristic
from .validation import BOARD_SIZE, validate_encoding


class Direction(Enum):
    """Blank-tile moves.

    Declaration order is the successor order used by every search driver:
    Up, Right, Down, Left.
    """
    UP = ('U', -1, 0)
    RIGHT = ('R', 0, 1)
    DOWN = ('D', 1, 0)
    LEFT = ('L', 0, -1)

    def __init__(self, letter: str, d_row: int, d_col: int):
        self.letter = letter
        self.d_row = d_row
        self.d_col = d_col

    @classmethod
    def from_letter(cls, letter: str) -> 'Direction':
        """Look up a direction by its path letter."""
        for direction in cls:
            if direction.letter == letter:
                return direction
        raise ValueError(f"Unknown move letter: {letter!r}")


def parse_board(encoding: str, name: str = "state") -> np.ndarray:
    """Convert a canonical string into a read-only 3x3 grid.

    Raises:
        PuzzleValidationError: If the encoding is malformed
    """
    validate_encoding(encoding, name)
    grid = np.array([int(ch) for ch in encoding], dtype=np.int8).reshape(BOARD_SIZE, BOARD_SIZE)
    grid.setflags(write=False)
    return grid


def board_to_string(grid: np.ndarray) -> str:
    """Row-major digit concatenation of a grid."""
    return ''.join(str(v) for v in grid.ravel().tolist())


@dataclass(eq=False)
class PuzzleState:
    """A board position together with its goal, path and cached costs.

    States are never mutated by moves: every move returns a new state and
    leaves the original untouched. Only ``h_cost``/``f_cost`` are refreshed
    right after construction.
    """
    grid: np.ndarray
    goal: np.ndarray
    blank_row: Optional[int] = None
    blank_col: Optional[int] = None
    path: str = ""
    depth: int = 0
    h_cost: int = 0
    f_cost: int = 0
    key: str = field(init=False, repr=False)

    def __post_init__(self):
        """Freeze the grids, locate the blank and cache the canonical string."""
        assert self.grid.shape == (BOARD_SIZE, BOARD_SIZE), f"Expected 3x3 grid, got {self.grid.shape}"
        assert self.goal.shape == (BOARD_SIZE, BOARD_SIZE), f"Expected 3x3 goal, got {self.goal.shape}"
        if self.grid.flags.writeable:
            self.grid.setflags(write=False)
        if self.goal.flags.writeable:
            self.goal.setflags(write=False)

        if self.blank_row is None or self.blank_col is None:
            row, col = np.argwhere(self.grid == 0)[0]
            self.blank_row, self.blank_col = int(row), int(col)
        assert self.grid[self.blank_row, self.blank_col] == 0, "Blank coordinate must point at 0"

        self.key = board_to_string(self.grid)

    @classmethod
    def from_strings(cls, start: str, goal: str) -> 'PuzzleState':
        """Build the initial search state from two encodings.

        Args:
            start: Start encoding, e.g. "123804765"
            goal: Goal encoding, e.g. "123456780"

        Returns:
            Root state with an empty path

        Raises:
            PuzzleValidationError: If either encoding is malformed
        """
        return cls(grid=parse_board(start, "start"), goal=parse_board(goal, "goal"))

    # Costs

    @property
    def path_length(self) -> int:
        return len(self.path)

    @property
    def g_cost(self) -> int:
        """Moves made so far (unit move cost)."""
        return self.path_length

    def heuristic(self, kind: Union[HeuristicKind, str, int]) -> int:
        """Estimate of the moves still needed to reach the goal."""
        return compute_heuristic(self.grid, self.goal, kind)

    def update_h_cost(self, kind: Union[HeuristicKind, str, int]) -> None:
        self.h_cost = self.heuristic(kind)
        self.update_f_cost()

    def update_f_cost(self) -> None:
        self.f_cost = self.g_cost + self.h_cost

    # Goal and identity

    def goal_match(self) -> bool:
        """Cell-by-cell comparison against the goal grid."""
        return bool(np.array_equal(self.grid, self.goal))

    def to_string(self) -> str:
        """Canonical string of the current grid."""
        return self.key

    @property
    def goal_string(self) -> str:
        return board_to_string(self.goal)

    def __str__(self) -> str:
        return self.key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleState):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def copy(self) -> 'PuzzleState':
        """Return an equal, independent state."""
        return replace(self)

    # Moves

    def can_move(self, direction: Direction) -> bool:
        row = self.blank_row + direction.d_row
        col = self.blank_col + direction.d_col
        return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE

    def move(self, direction: Direction) -> 'PuzzleState':
        """Slide the blank one cell in ``direction``.

        An illegal move is not an error: it returns an unchanged copy, so
        callers that need strict behaviour must check ``can_move`` first.
        """
        if not self.can_move(direction):
            return self.copy()

        row = self.blank_row + direction.d_row
        col = self.blank_col + direction.d_col
        grid = self.grid.copy()
        grid[self.blank_row, self.blank_col] = grid[row, col]
        grid[row, col] = 0

        depth = self.depth + 1
        return PuzzleState(
            grid=grid,
            goal=self.goal,
            blank_row=row,
            blank_col=col,
            path=self.path + direction.letter,
            depth=depth,
            h_cost=0,
            f_cost=depth,
        )

    def can_move_up(self) -> bool:
        return self.can_move(Direction.UP)

    def can_move_right(self) -> bool:
        return self.can_move(Direction.RIGHT)

    def can_move_down(self) -> bool:
        return self.can_move(Direction.DOWN)

    def can_move_left(self) -> bool:
        return self.can_move(Direction.LEFT)

    def move_up(self) -> 'PuzzleState':
        return self.move(Direction.UP)

    def move_right(self) -> 'PuzzleState':
        return self.move(Direction.RIGHT)

    def move_down(self) -> 'PuzzleState':
        return self.move(Direction.DOWN)

    def move_left(self) -> 'PuzzleState':
        return self.move(Direction.LEFT)

    def successors(self) -> List[Tuple[Direction, 'PuzzleState']]:
        """All legal (direction, state) pairs in Up, Right, Down, Left order."""
        return [(direction, self.move(direction))
                for direction in Direction if self.can_move(direction)]


def apply_path(state: Union[PuzzleState, str], path: str,
               goal: Optional[str] = None, strict: bool = True) -> PuzzleState:
    """Replay a move string from a state.

    Args:
        state: Start state or start encoding
        path: Moves over {U, D, L, R}
        goal: Goal encoding when ``state`` is a string (defaults to the start)
        strict: Raise on a move that leaves the board instead of ignoring it

    Returns:
        The state reached after the last move

    Raises:
        ValueError: On an unknown letter, or an illegal move when strict
    """
    if isinstance(state, str):
        state = PuzzleState.from_strings(state, goal if goal is not None else state)

    for step, letter in enumerate(path):
        direction = Direction.from_letter(letter)
        if strict and not state.can_move(direction):
            raise ValueError(f"Illegal move {letter!r} at step {step} from {state.key}")
        state = state.move(direction)
    return state


def format_board(board: Union[PuzzleState, np.ndarray, str], blank: str = " ") -> str:
    """Render a board as three lines of tiles."""
    if isinstance(board, PuzzleState):
        grid = board.grid
    elif isinstance(board, str):
        grid = parse_board(board)
    else:
        grid = np.asarray(board)

    lines = []
    for row in grid.tolist():
        cells = [blank if v == 0 else str(v) for v in row]
        lines.append(" ".join(c.rjust(2) for c in cells))
    return "\n".join(lines)

