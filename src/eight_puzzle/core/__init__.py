"""Puzzle state representation, validation and heuristics."""

from .data_models import Direction, PuzzleState, apply_path, board_to_string, format_board, parse_board
from .heuristics import HeuristicKind, compute_heuristic, manhattan_distance, misplaced_tiles
from .validation import (
    DEFAULT_GOAL, PuzzleValidationError, count_inversions, generate_random_state,
    generate_random_states, is_solvable, validate_encoding, validate_pair
)

__all__ = [
    'Direction',
    'PuzzleState',
    'apply_path',
    'board_to_string',
    'format_board',
    'parse_board',
    'HeuristicKind',
    'compute_heuristic',
    'manhattan_distance',
    'misplaced_tiles',
    'DEFAULT_GOAL',
    'PuzzleValidationError',
    'count_inversions',
    'generate_random_state',
    'generate_random_states',
    'is_solvable',
    'validate_encoding',
    'validate_pair'
]
