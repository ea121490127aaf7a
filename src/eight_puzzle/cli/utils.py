"""CLI utility functions."""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from eight_puzzle.core.data_models import apply_path, format_board
from eight_puzzle.search.base import SearchResult


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True
    )

    # Hydra logs composition details at INFO
    logging.getLogger('hydra').setLevel(logging.WARNING)


def load_states_from_file(file_path: Union[str, Path],
                          max_states: Optional[int] = None) -> List[str]:
    """Read start encodings, one per line.

    Blank lines and lines starting with '#' are ignored; only the first
    whitespace-separated token of a line is used.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    file_path = Path(file_path)
    if not file_path.is_file():
        raise FileNotFoundError(f"State file not found: {file_path}")

    states = []
    with open(file_path, 'r') as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            states.append(line.split()[0])

    return states[:max_states] if max_states else states


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    def convert(obj):
        if hasattr(obj, 'to_dict'):
            return convert(obj.to_dict())
        if hasattr(obj, 'tolist'):
            return obj.tolist()
        if isinstance(obj, dict):
            return {k: convert(v) for k, v in obj.items()}
        if isinstance(obj, (list, tuple)):
            return [convert(item) for item in obj]
        return obj

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(convert(results), f, indent=2, sort_keys=True)
        else:
            json.dump(convert(results), f)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format."""
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds % 60:.1f}s"


def format_result(start: str, goal: str, result: SearchResult,
                  show_steps: bool = False) -> str:
    """Render a search result for the terminal.

    Args:
        start: Start encoding
        goal: Goal encoding
        result: Search result
        show_steps: Include the board after every move

    Returns:
        Multi-line report
    """
    stats = result.statistics
    label = result.algorithm if not result.heuristic else f"{result.algorithm} ({result.heuristic})"
    lines = [f"Algorithm:   {label}"]

    if result.success:
        lines.append(f"Path:        {result.path or '(already solved)'}")
    else:
        lines.append(f"No solution: {result.termination_reason}")

    lines.extend([
        f"Length:      {stats.path_length}",
        f"Expansions:  {stats.nodes_expanded}",
        f"Max Queue:   {stats.max_frontier_size}",
        f"Time:        {format_duration(stats.computation_time)}",
    ])

    if show_steps and result.success:
        lines.append("")
        lines.append("Start:")
        lines.append(format_board(start))
        for step in range(1, len(result.path) + 1):
            state = apply_path(start, result.path[:step], goal)
            lines.append(f"Move {step} ({result.path[step - 1]}):")
            lines.append(format_board(state))

    return "\n".join(lines)


def format_comparison(results: Dict[str, SearchResult]) -> str:
    """Tabulate statistics of several strategies run on one instance."""
    header = f"{'Strategy':<26}{'Length':>8}{'Expansions':>12}{'Max Queue':>11}{'Time':>11}"
    lines = [header, "-" * len(header)]
    for name, result in results.items():
        stats = result.statistics
        length = str(stats.path_length) if result.success else "-"
        lines.append(
            f"{name:<26}{length:>8}{stats.nodes_expanded:>12}"
            f"{stats.max_frontier_size:>11}{format_duration(stats.computation_time):>11}"
        )
    return "\n".join(lines)


class ProgressReporter:
    """Progress reporting for batch processing."""

    def __init__(self, total: int, report_interval: int = 10):
        """Initialize progress reporter.

        Args:
            total: Total number of instances
            report_interval: Report progress every N instances
        """
        self.total = total
        self.report_interval = max(1, report_interval)
        self.completed = 0
        self.solved = 0
        self.start_time = time.time()

    def update(self, success: bool = False) -> None:
        self.completed += 1
        if success:
            self.solved += 1

        if self.completed % self.report_interval == 0 or self.completed == self.total:
            self._report_progress()

    def _report_progress(self) -> None:
        elapsed = time.time() - self.start_time
        rate = self.completed / elapsed if elapsed > 0 else 0
        remaining = self.total - self.completed
        eta = remaining / rate if rate > 0 else 0

        print(f"Progress: {self.completed}/{self.total} "
              f"({self.completed/self.total*100:.1f}%) | "
              f"Solved: {self.solved} | "
              f"Rate: {rate:.1f} puzzles/s | "
              f"ETA: {format_duration(eta)}")


def create_result_summary(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Create summary statistics from batch results.

    Args:
        results: Per-instance dictionaries as produced by ``SearchResult.to_dict``

    Returns:
        Summary statistics dictionary
    """
    if not results:
        return {
            'total': 0,
            'solved': 0,
            'unsolved': 0,
            'success_rate': 0.0,
            'average_expansions': 0.0,
            'average_path_length': 0.0,
            'max_frontier_size': 0,
            'total_time': 0.0,
            'average_time': 0.0,
            'max_time': 0.0
        }

    solved = [r for r in results if r.get('success', False)]
    times = [r['stats']['computation_time'] for r in results]
    expansions = [r['stats']['nodes_expanded'] for r in results]

    total_time = sum(times)
    return {
        'total': len(results),
        'solved': len(solved),
        'unsolved': len(results) - len(solved),
        'success_rate': len(solved) / len(results),
        'average_expansions': sum(expansions) / len(results),
        'average_path_length': (sum(r['stats']['path_length'] for r in solved) / len(solved)
                                if solved else 0.0),
        'max_frontier_size': max(r['stats']['max_frontier_size'] for r in results),
        'total_time': total_time,
        'average_time': total_time / len(results),
        'max_time': max(times)
    }


def print_summary(summary: Dict[str, Any]) -> None:
    """Print batch processing summary."""
    print("\n" + "=" * 60)
    print("BATCH SUMMARY")
    print("=" * 60)
    print(f"Instances:          {summary['total']}")
    print(f"Solved:             {summary['solved']} ({summary['success_rate']*100:.1f}%)")
    print(f"Unsolved:           {summary['unsolved']}")
    print(f"Avg path length:    {summary['average_path_length']:.2f}")
    print(f"Avg expansions:     {summary['average_expansions']:.1f}")
    print(f"Peak frontier size: {summary['max_frontier_size']}")
    print(f"Total time:         {format_duration(summary['total_time'])}")
    print(f"Average time:       {format_duration(summary['average_time'])}")
    print(f"Max time:           {format_duration(summary['max_time'])}")
