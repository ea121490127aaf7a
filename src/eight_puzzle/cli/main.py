"""Main CLI entry point for the 8-puzzle solver."""

import sys
import argparse
import logging
from typing import List, Optional

from eight_puzzle.core.heuristics import HeuristicKind

from . import commands
from .utils import setup_logging

HEURISTIC_CHOICES = [kind.value for kind in HeuristicKind]
ALGORITHM_CHOICES = ['uniform_cost', 'astar']


def _add_instance_options(subparser: argparse.ArgumentParser) -> None:
    """Options shared by commands that run searches."""
    subparser.add_argument(
        '--goal', '-g',
        type=str,
        default=None,
        help='Goal state (default: solver.goal from configuration, 123456780)'
    )
    subparser.add_argument(
        '--timeout', '-t',
        type=float,
        default=None,
        help='Deadline in seconds per search (default: unbounded)'
    )
    subparser.add_argument(
        '--max-nodes',
        type=int,
        default=None,
        help='Maximum number of expansions per search (default: unbounded)'
    )


def _add_strategy_options(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        '--algorithm', '-a',
        choices=ALGORITHM_CHOICES,
        default=None,
        help='Search strategy (default: solver.algorithm from configuration)'
    )
    subparser.add_argument(
        '--heuristic', '-H',
        choices=HEURISTIC_CHOICES,
        default=None,
        help='A* heuristic (default: solver.heuristic from configuration)'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='eight-puzzle',
        description='8-puzzle solver - uniform-cost and A* search with a strict expanded list',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  eight-puzzle solve 123804765                       # Solve with the configured strategy
  eight-puzzle solve 208135467 -a astar -H misplaced_tiles --show-steps
  eight-puzzle compare 208135467                     # Compare all strategies
  eight-puzzle random --count 5 --seed 7             # Random solvable states
  eight-puzzle batch states.txt -a uniform_cost      # Solve every state in a file
  eight-puzzle config show                           # Show current configuration
        """
    )

    parser.add_argument(
        '--config', '-c',
        type=str,
        help='Configuration overrides (e.g., search.check_solvability=true)'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except errors'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Solve a single puzzle',
        description='Find a shortest move sequence from START to the goal state'
    )
    solve_parser.add_argument(
        'start',
        type=str,
        help='Start state as 9 digits in row-major order, 0 = blank (e.g., 123804765)'
    )
    _add_strategy_options(solve_parser)
    _add_instance_options(solve_parser)
    solve_parser.add_argument(
        '--show-steps',
        action='store_true',
        help='Print the board after every move'
    )

    # Compare command
    compare_parser = subparsers.add_parser(
        'compare',
        help='Compare all strategies on one puzzle',
        description='Run uniform-cost search and A* with each heuristic on START'
    )
    compare_parser.add_argument('start', type=str, help='Start state')
    _add_instance_options(compare_parser)

    # Random command
    random_parser = subparsers.add_parser(
        'random',
        help='Generate random solvable states',
        description='Print random start states that can reach the goal'
    )
    random_parser.add_argument(
        '--count', '-n',
        type=int,
        default=1,
        help='Number of states to generate (default: 1)'
    )
    random_parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed (default: development.testing.random_seed in deterministic mode)'
    )
    random_parser.add_argument(
        '--goal', '-g',
        type=str,
        default=None,
        help='Goal state the generated states must be solvable against'
    )

    # Batch command
    batch_parser = subparsers.add_parser(
        'batch',
        help='Solve many puzzles',
        description='Solve every start state listed (one per line) in INPUT_FILE'
    )
    batch_parser.add_argument(
        'input_file',
        type=str,
        help='Text file with one start state per line'
    )
    _add_strategy_options(batch_parser)
    _add_instance_options(batch_parser)
    batch_parser.add_argument(
        '--max-states',
        type=int,
        help='Maximum number of states to process'
    )
    batch_parser.add_argument(
        '--report-interval',
        type=int,
        default=10,
        help='Progress report interval (default: 10)'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect solver configuration'
    )
    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )
    config_subparsers.add_parser('show', help='Show current configuration')
    config_subparsers.add_parser('validate', help='Validate configuration')

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'compare':
            return commands.compare_command(parsed_args)
        if parsed_args.command == 'random':
            return commands.random_command(parsed_args)
        if parsed_args.command == 'batch':
            return commands.batch_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        return 1


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()
