#!/usr/bin/env python3
"""
Script to compare search heuristics.

Usage:
    python scripts/run_benchmark.py                  # every heuristic, 3 runs each
    python scripts/run_benchmark.py -H unit -n 5
"""

import click
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from sixqueens import config
from sixqueens.analysis import HeuristicBenchmark, BenchmarkConfig
from sixqueens.solvers import HEURISTIC_REGISTRY


@click.command()
@click.option('--heuristics', '-H', multiple=True,
              type=click.Choice(list(HEURISTIC_REGISTRY)),
              help='Heuristics to benchmark (default: all)')
@click.option('--repeats', '-n', type=int, default=3,
              help='Number of runs per heuristic')
@click.option('--time-limit', '-t', type=float, default=60.0,
              help='Time limit per run in seconds')
@click.option('--output-dir', '-o', type=click.Path(), default=str(config.RESULTS_BENCHMARKS_DIR),
              help='Output directory for results')
def main(heuristics, repeats, time_limit, output_dir):
    """Run the A* search once per heuristic and repeat, then summarize."""
    benchmark = HeuristicBenchmark(BenchmarkConfig(
        heuristics=list(heuristics) or list(HEURISTIC_REGISTRY),
        repeats=repeats,
        time_limit=time_limit,
        output_dir=Path(output_dir)
    ))

    results_df = benchmark.run()

    click.echo("\n" + "=" * 50)
    click.echo("Benchmark summary")
    click.echo("=" * 50)
    click.echo(HeuristicBenchmark.summarize(results_df).to_string())


if __name__ == '__main__':
    main()
