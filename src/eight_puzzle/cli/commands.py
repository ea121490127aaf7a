"""CLI command implementations."""

import logging
from typing import Any, Dict, List, Optional

from omegaconf import OmegaConf

from eight_puzzle.config import ConfigValidationError, load_config, validate_config
from eight_puzzle.core.heuristics import HeuristicKind
from eight_puzzle.core.validation import DEFAULT_GOAL, PuzzleValidationError, generate_random_states
from eight_puzzle.search.base import SearchConfig, SearchResult
from eight_puzzle.solver import compare_algorithms, normalize_algorithm, solve

from .utils import (
    ProgressReporter, create_result_summary, format_comparison, format_result,
    load_states_from_file, print_summary, save_results
)

logger = logging.getLogger(__name__)


def _parse_overrides(config_arg: Optional[str]) -> List[str]:
    """Split a ``--config`` value into Hydra overrides."""
    if not config_arg:
        return []
    return [item.strip() for item in config_arg.replace(',', ' ').split() if item.strip()]


def _deterministic_seed(config) -> Optional[int]:
    """``development.testing.random_seed`` when deterministic mode is on, else None."""
    testing_cfg = config.get('development', {}).get('testing', {})
    if not testing_cfg.get('deterministic_mode', False):
        return None
    return int(testing_cfg.get('random_seed', 42))


class PuzzleSolver:
    """Binds the loaded configuration to the solver entry points."""

    def __init__(self, config_overrides: Optional[List[str]] = None):
        """Initialize the solver from configuration.

        Args:
            config_overrides: Hydra overrides, e.g. ``["search.max_nodes_expanded=5000"]``
        """
        self.config = load_config(overrides=config_overrides or [])

        solver_cfg = self.config.get('solver', {})
        self.algorithm = normalize_algorithm(solver_cfg.get('algorithm', 'astar'))
        self.heuristic = HeuristicKind.parse(solver_cfg.get('heuristic', HeuristicKind.MANHATTAN.value))
        self.goal = str(solver_cfg.get('goal', DEFAULT_GOAL))
        self.search_config = SearchConfig.from_config(self.config.get('search', {}))

        self._apply_determinism()
        logger.info(f"Puzzle solver initialized: algorithm={self.algorithm}, "
                    f"heuristic={self.heuristic.value}, goal={self.goal}")

    def _apply_determinism(self) -> None:
        """Resolve the seed used for generated instances in deterministic mode."""
        self.seed = _deterministic_seed(self.config)
        self.deterministic = self.seed is not None

    def apply_limits(self, timeout: Optional[float] = None,
                     max_nodes: Optional[int] = None) -> None:
        """Let command-line limits take precedence over configured ones."""
        if timeout is not None:
            self.search_config.max_computation_time = timeout
        if max_nodes is not None:
            self.search_config.max_nodes_expanded = max_nodes

    def solve(self, start: str, goal: Optional[str] = None,
              algorithm: Optional[str] = None,
              heuristic: Optional[str] = None) -> SearchResult:
        return solve(
            start,
            goal or self.goal,
            algorithm=algorithm or self.algorithm,
            heuristic=heuristic or self.heuristic,
            config=self.search_config,
        )

    def compare(self, start: str, goal: Optional[str] = None) -> Dict[str, SearchResult]:
        return compare_algorithms(start, goal or self.goal, self.search_config)


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 when a solution was found)
    """
    try:
        solver = PuzzleSolver(_parse_overrides(getattr(args, 'config', None)))
        solver.apply_limits(args.timeout, args.max_nodes)
        goal = args.goal or solver.goal

        result = solver.solve(args.start, goal, args.algorithm, args.heuristic)
    except PuzzleValidationError as e:
        logger.error(f"Invalid puzzle: {e}")
        return 1
    except (ConfigValidationError, ValueError) as e:
        logger.error(f"Solve failed: {e}")
        return 1

    if not getattr(args, 'quiet', False):
        print(format_result(args.start, goal, result, show_steps=args.show_steps))

    if getattr(args, 'output', None):
        save_results({'start': args.start, 'goal': goal, 'result': result}, args.output)
        logger.info(f"Results saved to {args.output}")

    return 0 if result.success else 1


def compare_command(args) -> int:
    """Handle compare command: run every strategy on one instance."""
    try:
        solver = PuzzleSolver(_parse_overrides(getattr(args, 'config', None)))
        solver.apply_limits(args.timeout, args.max_nodes)
        goal = args.goal or solver.goal
        results = solver.compare(args.start, goal)
    except (PuzzleValidationError, ConfigValidationError, ValueError) as e:
        logger.error(f"Compare failed: {e}")
        return 1

    if not getattr(args, 'quiet', False):
        print(f"Start: {args.start}  Goal: {goal}")
        print(format_comparison(results))

    if getattr(args, 'output', None):
        save_results({'start': args.start, 'goal': goal, 'results': results}, args.output)

    return 0


def random_command(args) -> int:
    """Handle random command: print random solvable start states."""
    try:
        solver = PuzzleSolver(_parse_overrides(getattr(args, 'config', None)))
        goal = args.goal or solver.goal
        # --seed wins; deterministic mode supplies the configured seed otherwise
        seed = args.seed if args.seed is not None else solver.seed
        states = generate_random_states(args.count, goal=goal, seed=seed)
    except (PuzzleValidationError, ConfigValidationError, ValueError) as e:
        logger.error(f"Random generation failed: {e}")
        return 1

    for state in states:
        print(state)

    if getattr(args, 'output', None):
        save_results({'goal': goal, 'seed': seed, 'states': states}, args.output)
    return 0


def batch_command(args) -> int:
    """Handle batch command: solve every start state listed in a file."""
    try:
        solver = PuzzleSolver(_parse_overrides(getattr(args, 'config', None)))
        solver.apply_limits(args.timeout, args.max_nodes)
        states = load_states_from_file(args.input_file, args.max_states)
    except (FileNotFoundError, ConfigValidationError, ValueError) as e:
        logger.error(f"Batch setup failed: {e}")
        return 1

    if not states:
        logger.error(f"No start states found in {args.input_file}")
        return 1

    goal = args.goal or solver.goal
    reporter = ProgressReporter(len(states), args.report_interval)
    results: List[Dict[str, Any]] = []

    for start in states:
        try:
            result = solver.solve(start, goal, args.algorithm, args.heuristic)
            entry = result.to_dict()
        except PuzzleValidationError as e:
            logger.warning(f"Skipping invalid start state {start!r}: {e}")
            entry = SearchResult(success=False, termination_reason=f"invalid: {e}").to_dict()
        entry['start'] = start
        results.append(entry)
        reporter.update(entry['success'])

    summary = create_result_summary(results)
    print_summary(summary)

    if getattr(args, 'output', None):
        save_results({'goal': goal, 'summary': summary, 'results': results}, args.output)
        logger.info(f"Results saved to {args.output}")

    return 0


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = _parse_overrides(getattr(args, 'config', None))
    try:
        if args.config_action == 'show':
            config = load_config(overrides=overrides)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        if args.config_action == 'validate':
            config = load_config(overrides=overrides, validate=False)
            try:
                validate_config(config)
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1
            print("Configuration is valid")
            return 0

        print("Unknown config action")
        return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1
