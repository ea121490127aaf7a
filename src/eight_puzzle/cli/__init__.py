"""Command-line interface for the 8-puzzle solver.

This module provides CLI commands for solving, comparing and batch-processing puzzles.
"""

from .main import main_cli
from .commands import solve_command, compare_command, random_command, batch_command, config_command
from .utils import setup_logging, load_states_from_file, save_results

__all__ = [
    'main_cli',
    'solve_command',
    'compare_command',
    'random_command',
    'batch_command',
    'config_command',
    'setup_logging',
    'load_states_from_file',
    'save_results'
]
