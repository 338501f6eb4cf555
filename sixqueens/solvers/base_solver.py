"""
Base solver class for the six-queens search.
"""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, List, Callable
from dataclasses import dataclass, field
import time
from pathlib import Path

from .. import config as project_config
from ..core.board import Board
from ..core.graph import Graph
from ..core.validator import GraphValidator
from ..core.utils import setup_logger, memory_usage


@dataclass
class SolverConfig:
    """Configuration for search solvers"""
    heuristic: str = project_config.DEFAULT_HEURISTIC
    time_limit: float = project_config.TIME_LIMIT  # seconds
    max_steps: int = project_config.MAX_STEPS
    verbose: bool = False
    log_file: Optional[Path] = None
    record_steps: bool = False


@dataclass
class SolverResult:
    """Result from a search run"""
    success: bool
    solution: Optional[Board] = None
    path: List[Board] = field(default_factory=list)
    cost: int = 0
    steps_taken: int = 0
    solve_time: float = 0.0
    memory_used: float = 0.0  # MB
    message: str = ""
    steps: List[Any] = field(default_factory=list)
    stats: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self):
        status = "Success" if self.success else "Failed"
        return f"SolverResult({status}, time={self.solve_time:.2f}s, steps={self.steps_taken})"


class BaseSolver(ABC):
    """Abstract base class for six-queens solvers"""

    def __init__(self, config: Optional[SolverConfig] = None):
        """Initialize solver with configuration."""
        self.config = config or SolverConfig()
        self.logger = setup_logger(
            self.__class__.__name__,
            self.config.log_file,
            "DEBUG" if self.config.verbose else project_config.LOG_LEVEL
        )

        self._progress_callbacks: List[Callable] = []
        self._start_time: Optional[float] = None
        self._iterations: int = 0

    def add_progress_callback(self, callback: Callable):
        """Add a callback(iteration, step, stats) to monitor search progress."""
        self._progress_callbacks.append(callback)

    def solve(self, graph: Graph) -> SolverResult:
        """Run the search on graph."""
        self.logger.info(f"Starting {self.__class__.__name__} solver")
        self.logger.info(f"Graph: {graph!r}")

        self._start_time = time.time()
        self._iterations = 0
        initial_memory = memory_usage()

        try:
            result = self._solve(graph)

            # A reported placement must hold six queens with no mutual attack
            if result.success and result.solution is not None:
                validation = GraphValidator.validate_solution(result.solution)
                if not validation:
                    result.success = False
                    result.message = f"Invalid solution: {'; '.join(validation.errors)}"

            result.solve_time = time.time() - self._start_time
            result.memory_used = memory_usage() - initial_memory
            result.steps_taken = self._iterations

            if result.success:
                self.logger.info(f"Solved in {result.solve_time:.2f}s with {result.steps_taken} steps, "
                                 f"cost {result.cost}")
            else:
                self.logger.warning(f"Failed to solve: {result.message}")

            return result

        except Exception as e:
            self.logger.error(f"Error during search: {str(e)}", exc_info=True)
            return SolverResult(
                success=False,
                message=f"Solver error: {str(e)}",
                solve_time=time.time() - self._start_time,
                steps_taken=self._iterations
            )

    @abstractmethod
    def _solve(self, graph: Graph) -> SolverResult:
        """Drive the search and fill in path, cost and stats."""
        pass

    def _check_time_limit(self) -> bool:
        """True once the run has outlived config.time_limit"""
        if self._start_time is None:
            return False
        return (time.time() - self._start_time) > self.config.time_limit

    def _increment_iteration(self):
        """Count one expanded Step, failing the run past config.max_steps"""
        self._iterations += 1

        if self._iterations > self.config.max_steps:
            raise RuntimeError(f"Maximum steps ({self.config.max_steps}) exceeded")

    def _call_progress_callbacks(self, step: Any, stats: Optional[Dict[str, Any]] = None):
        """Report a Step to every callback; a failing callback is logged, not raised"""
        for callback in self._progress_callbacks:
            try:
                callback(self._iterations, step, stats or {})
            except Exception as e:
                self.logger.error(f"Error in progress callback: {e}")
