"""Validation of board encodings and solvability checks.

A board is encoded as a 9-character row-major digit string, each digit
'0'-'8' appearing exactly once, with '0' marking the blank.
"""

import logging
from typing import Any, List, Optional

import numpy as np

logger = logging.getLogger(__name__)

BOARD_SIZE = 3
NUM_CELLS = BOARD_SIZE * BOARD_SIZE
DEFAULT_GOAL = "123456780"


class PuzzleValidationError(ValueError):
    """Exception raised when a board encoding is malformed."""
    pass


def validate_encoding(encoding: Any, name: str = "state") -> str:
    """Check that an encoding describes a valid 3x3 board.

    Args:
        encoding: Candidate board encoding
        name: Label used in error messages (e.g. 'start', 'goal')

    Returns:
        The encoding, unchanged

    Raises:
        PuzzleValidationError: If the encoding is not a permutation of 0-8
    """
    if not isinstance(encoding, str):
        raise PuzzleValidationError(
            f"{name} must be a string, got {type(encoding).__name__}"
        )

    if len(encoding) != NUM_CELLS:
        raise PuzzleValidationError(
            f"{name} must have exactly {NUM_CELLS} characters, got {len(encoding)}: {encoding!r}"
        )

    bad_chars = sorted({ch for ch in encoding if ch not in "012345678"})
    if bad_chars:
        raise PuzzleValidationError(
            f"{name} contains invalid characters {bad_chars}; only digits 0-8 are allowed"
        )

    repeated = sorted({ch for ch in encoding if encoding.count(ch) > 1})
    if repeated:
        raise PuzzleValidationError(
            f"{name} repeats digits {repeated}; each of 0-8 must appear exactly once"
        )

    return encoding


def validate_pair(start: Any, goal: Any) -> None:
    """Validate a start/goal pair ahead of search construction."""
    validate_encoding(start, "start")
    validate_encoding(goal, "goal")


def count_inversions(encoding: str) -> int:
    """Count inversions among the non-blank tiles of an encoding."""
    tiles = [int(ch) for ch in encoding if ch != '0']
    inversions = 0
    for i in range(len(tiles) - 1):
        for j in range(i + 1, len(tiles)):
            if tiles[i] > tiles[j]:
                inversions += 1
    return inversions


def is_solvable(state: str, goal: str = DEFAULT_GOAL) -> bool:
    """Check whether ``goal`` is reachable from ``state``.

    On an odd-width board a move never changes the parity of the inversion
    count, so two boards are connected iff their parities agree.

    Args:
        state: Start encoding
        goal: Goal encoding

    Returns:
        True if a solution exists
    """
    validate_encoding(state, "state")
    validate_encoding(goal, "goal")
    return count_inversions(state) % 2 == count_inversions(goal) % 2


def generate_random_state(goal: str = DEFAULT_GOAL,
                          seed: Optional[int] = None,
                          rng: Optional[np.random.Generator] = None) -> str:
    """Generate a random board that can reach ``goal``.

    Args:
        goal: Goal encoding the result must be solvable against
        seed: Seed for a fresh generator (ignored when rng is given)
        rng: Generator to draw from

    Returns:
        A random solvable encoding
    """
    validate_encoding(goal, "goal")
    if rng is None:
        rng = np.random.default_rng(seed)

    while True:
        digits = rng.permutation(NUM_CELLS)
        state = ''.join(str(d) for d in digits)
        if is_solvable(state, goal):
            return state


def generate_random_states(count: int,
                           goal: str = DEFAULT_GOAL,
                           seed: Optional[int] = None) -> List[str]:
    """Generate ``count`` random solvable boards from one generator."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    rng = np.random.default_rng(seed)
    states = [generate_random_state(goal, rng=rng) for _ in range(count)]
    logger.debug(f"Generated {len(states)} random states (seed={seed})")
    return states
