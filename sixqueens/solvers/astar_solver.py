"""
A* solver: drives the steppable search to the first full placement.
"""

from typing import Optional

from ..core.graph import Graph
from ..core.utils import calculate_search_stats
from .base_solver import BaseSolver, SolverConfig, SolverResult
from .search import Step, get_heuristic, search


class AStarSolver(BaseSolver):
    """Pull Steps from the search until it terminates"""

    def __init__(self, config: Optional[SolverConfig] = None):
        super().__init__(config)
        self.heuristic = get_heuristic(self.config.heuristic)

    def _solve(self, graph: Graph) -> SolverResult:
        self.logger.info(f"Using {self.heuristic!r}")
        recorded = []
        last: Optional[Step] = None

        for step in search(graph, self.heuristic):
            self._increment_iteration()
            last = step

            if self.config.record_steps:
                recorded.append(step)

            self.logger.debug(f"Step {self._iterations}: {step!r}")
            self._call_progress_callbacks(step, {
                'current': str(step.current),
                'queens': step.current.count_queens(),
            })

            if self._check_time_limit():
                return SolverResult(
                    success=False,
                    steps=recorded,
                    message=f"Time limit ({self.config.time_limit}s) exceeded at {step.current}"
                )

        if last is None or not last.is_final():
            return SolverResult(
                success=False,
                steps=recorded,
                message="Search ended without a full placement"
            )

        cost, path = last.traceback(last.current)
        stats = calculate_search_stats(recorded) if recorded else {}
        stats.update({
            'heuristic': self.heuristic.name,
            'open_size': len(last.open_sorted()),
            'closed_size': len(last.closed_nodes()),
            'path_length': len(path),
        })

        return SolverResult(
            success=True,
            solution=last.current,
            path=path,
            cost=cost,
            steps=recorded,
            message="Found full placement",
            stats=stats
        )
