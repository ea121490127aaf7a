"""Configuration validation for the 8-puzzle solver."""

import logging
from typing import Any, Mapping

from omegaconf import DictConfig

from eight_puzzle.core.heuristics import HeuristicKind
from eight_puzzle.core.validation import PuzzleValidationError, validate_encoding

logger = logging.getLogger(__name__)

VALID_ALGORITHMS = ('uniform_cost', 'astar')


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_solver_config(config.get('solver', {}))
        validate_search_config(config.get('search', {}))
        validate_development_config(config.get('development', {}))
    except ConfigValidationError:
        raise
    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")

    logger.debug("Configuration validation passed")


def validate_solver_config(solver_config: Mapping[str, Any]) -> None:
    """Validate the solver section: algorithm, heuristic and goal board."""
    if not solver_config:
        return

    algorithm = solver_config.get('algorithm', 'astar')
    if algorithm not in VALID_ALGORITHMS:
        raise ConfigValidationError(
            f"solver.algorithm must be one of {VALID_ALGORITHMS}, got {algorithm!r}"
        )

    heuristic = solver_config.get('heuristic', HeuristicKind.MANHATTAN.value)
    valid_heuristics = tuple(kind.value for kind in HeuristicKind)
    if heuristic not in valid_heuristics:
        raise ConfigValidationError(
            f"solver.heuristic must be one of {valid_heuristics}, got {heuristic!r}"
        )

    goal = solver_config.get('goal', None)
    if goal is not None:
        try:
            validate_encoding(str(goal), "solver.goal")
        except PuzzleValidationError as e:
            raise ConfigValidationError(str(e))


def validate_search_config(search_config: Mapping[str, Any]) -> None:
    """Validate the search section: limits and progress reporting."""
    if not search_config:
        return

    max_time = search_config.get('max_computation_time', None)
    if max_time is not None:
        if isinstance(max_time, bool) or not isinstance(max_time, (int, float)) or max_time <= 0:
            raise ConfigValidationError(
                f"search.max_computation_time must be a positive number or null, got {max_time}"
            )

    max_nodes = search_config.get('max_nodes_expanded', None)
    if max_nodes is not None:
        if isinstance(max_nodes, bool) or not isinstance(max_nodes, int) or max_nodes <= 0:
            raise ConfigValidationError(
                f"search.max_nodes_expanded must be a positive integer or null, got {max_nodes}"
            )

    check = search_config.get('check_solvability', False)
    if not isinstance(check, bool):
        raise ConfigValidationError(
            f"search.check_solvability must be true or false, got {check!r}"
        )

    interval = search_config.get('progress_interval', 1000)
    if isinstance(interval, bool) or not isinstance(interval, int) or interval <= 0:
        raise ConfigValidationError(
            f"search.progress_interval must be a positive integer, got {interval}"
        )


def validate_development_config(dev_config: Mapping[str, Any]) -> None:
    """Validate the development section."""
    if not dev_config:
        return

    testing = dev_config.get('testing', {})
    if testing:
        seed = testing.get('random_seed', 42)
        if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
            raise ConfigValidationError(
                f"development.testing.random_seed must be a non-negative integer, got {seed}"
            )
