#!/usr/bin/env python3
"""
Script to run the six-queens A* search.

Usage:
    python scripts/run_solver.py --heuristic penalty --visualize
    python scripts/run_solver.py --interactive      # press a key to advance one step
    python scripts/run_solver.py --animate results/visualizations/search.gif
"""

import click
import sys
from pathlib import Path
import json

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from sixqueens import config
from sixqueens.core.graph import Graph
from sixqueens.core.validator import GraphValidator
from sixqueens.core.utils import BoardConverter, setup_logger
from sixqueens.solvers import get_solver, search, get_heuristic, SolverConfig, HEURISTIC_REGISTRY
from sixqueens.visualization import BoardVisualizer, SearchAnimator


def echo_step(index: int, step, is_last: bool):
    """Print one search snapshot: current board, queues and tentative paths"""
    click.echo("\n" + "=" * 50)
    click.echo(f"Step {index} - current: {step.current}")

    open_nodes = step.open_sorted()
    click.echo(f"\nOpen queue ({len(open_nodes)}):")
    for i, node in enumerate(open_nodes, 1):
        click.echo(f"  #{i} {node.describe()}")

    closed = step.closed_nodes()
    click.echo(f"\nClosed set ({len(closed)}):")
    for i, node in enumerate(closed, 1):
        click.echo(f"  #{i} {node.describe()}")

    click.echo("\nTentative paths:")
    for i, (cost, path) in enumerate(step.tentative_paths(), 1):
        click.echo(f"  #{i} {BoardConverter.format_path(cost, path)}")

    if is_last:
        click.echo("\nSolution: " + BoardConverter.format_path(*step.traceback(step.current)))

    click.echo("\n" + BoardConverter.to_string(step.current))


@click.command()
@click.option('--heuristic', '-h', 'heuristic_name', type=click.Choice(list(HEURISTIC_REGISTRY)),
              default=config.DEFAULT_HEURISTIC, help='Edge cost and estimate used by the search')
@click.option('--max-steps', '-m', type=int, default=config.MAX_STEPS,
              help='Abort after this many steps')
@click.option('--time-limit', '-t', type=float, default=config.TIME_LIMIT,
              help='Time limit in seconds')
@click.option('--interactive', '-i', is_flag=True,
              help='Step through the search one expansion at a time')
@click.option('--visualize', '-v', is_flag=True,
              help='Draw the solution board and its placement path')
@click.option('--animate', '-a', type=click.Path(), default=None,
              help='Save an animation of the search (gif or mp4)')
@click.option('--verbose', is_flag=True, help='Enable verbose output')
@click.option('--output-dir', '-o', type=click.Path(), default=str(config.RESULTS_VIZ_DIR),
              help='Output directory for visualizations')
def main(heuristic_name, max_steps, time_limit, interactive, visualize, animate,
         verbose, output_dir):
    """Search for a six-queens placement on the 6x6 board."""

    logger = setup_logger("SixQueens", level="DEBUG" if verbose else "INFO")

    logger.info("Building placement graph...")
    graph = Graph.build_from_empty()

    if interactive:
        steps = search(graph, get_heuristic(heuristic_name))
        step = next(steps)
        index = 1
        while step is not None:
            following = next(steps, None)
            echo_step(index, step, following is None)
            if following is not None:
                click.pause("\nPress any key for the next step...")
            step = following
            index += 1
        return

    solver = get_solver('astar', SolverConfig(
        heuristic=heuristic_name,
        max_steps=max_steps,
        time_limit=time_limit,
        verbose=verbose,
        record_steps=bool(animate)
    ))

    if verbose:
        def progress_callback(iteration, step, stats):
            if iteration % 100 == 0:
                logger.debug(f"Step {iteration}: {stats}")

        solver.add_progress_callback(progress_callback)

    result = solver.solve(graph)

    # Display results
    click.echo("\n" + "=" * 50)
    click.echo(f"Heuristic: {heuristic_name}")
    click.echo(f"Status: {'SUCCESS' if result.success else 'FAILED'}")
    click.echo(f"Time: {result.solve_time:.3f} seconds")
    click.echo(f"Steps: {result.steps_taken}")
    click.echo(f"Memory: {result.memory_used:.1f} MB")

    if result.message:
        click.echo(f"Message: {result.message}")

    if result.stats:
        click.echo(f"Additional stats: {json.dumps(result.stats, indent=2)}")

    click.echo("=" * 50 + "\n")

    if not (result.success and result.solution is not None):
        click.echo("No valid placement found.")
        sys.exit(1)

    validation = GraphValidator.validate_solution(result.solution)
    if not validation:
        click.echo("✗ Placement is invalid!")
        click.echo(f"Errors: {'; '.join(validation.errors)}")
        sys.exit(1)

    click.echo("✓ Placement is valid!")
    click.echo(BoardConverter.format_path(result.cost, result.path))
    click.echo(BoardConverter.to_string(result.solution))

    output_path = Path(output_dir)

    if visualize:
        viz = BoardVisualizer()
        viz.visualize(
            result.solution,
            title=f"Solution ({heuristic_name}, cost {result.cost})",
            save_path=output_path / f"solution_{heuristic_name}.png",
            show_plot=True
        )
        viz.visualize_path(
            result.path,
            cost=result.cost,
            save_path=output_path / f"path_{heuristic_name}.png",
            show_plot=True
        )
        click.echo(f"\nVisualizations saved to {output_path}")

    if animate:
        SearchAnimator().animate(result.steps, Path(animate))
        click.echo(f"Animation saved to {animate}")


if __name__ == '__main__':
    main()
