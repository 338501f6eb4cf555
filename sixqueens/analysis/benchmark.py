"""
Benchmark comparing search heuristics on the six-queens graph.
"""

import time
import pandas as pd
from pathlib import Path
from typing import List, Dict, Any, Optional
from dataclasses import dataclass, asdict, field
from datetime import datetime
from tqdm import tqdm

from ..core.graph import Graph
from ..core.utils import setup_logger, timer
from ..solvers import get_solver, SolverConfig, HEURISTIC_REGISTRY


@dataclass
class BenchmarkResult:
    """Result from a single search run"""
    heuristic: str
    run: int
    success: bool
    solve_time: float
    steps: int
    memory_mb: float

    # Solution quality
    cost: int = 0
    path_length: int = 0
    solution: str = ""
    open_size: int = 0
    closed_size: int = 0
    error_message: str = ""

    timestamp: str = ""
    extra_stats: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return asdict(self)


class BenchmarkConfig:
    """Configuration for heuristic benchmarks"""

    def __init__(self, **kwargs):
        self.heuristics: List[str] = kwargs.get('heuristics', list(HEURISTIC_REGISTRY))
        self.repeats: int = kwargs.get('repeats', 3)
        self.time_limit: float = kwargs.get('time_limit', 60.0)
        self.max_steps: int = kwargs.get('max_steps', 100000)
        self.output_dir: Optional[Path] = kwargs.get('output_dir')


class HeuristicBenchmark:
    """Run every heuristic on one shared graph and tabulate the outcome"""

    def __init__(self, config: Optional[BenchmarkConfig] = None, graph: Optional[Graph] = None):
        self.config = config or BenchmarkConfig()
        self.logger = setup_logger(self.__class__.__name__)
        self.graph = graph
        self.results: List[BenchmarkResult] = []

    def run(self) -> pd.DataFrame:
        """
        Run complete benchmark.

        Returns:
            DataFrame with one row per run
        """
        self.logger.info("Starting heuristic benchmark")
        start_time = time.time()

        if self.graph is None:
            self.graph = Graph.build_from_empty()

        total_runs = len(self.config.heuristics) * self.config.repeats
        with tqdm(total=total_runs, desc="Running benchmarks") as pbar:
            for heuristic in self.config.heuristics:
                for run in range(self.config.repeats):
                    self.results.append(self._run_single(heuristic, run))
                    pbar.update(1)

        results_df = pd.DataFrame([r.to_dict() for r in self.results])

        if self.config.output_dir:
            output_dir = Path(self.config.output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            results_file = output_dir / f"heuristic_benchmark_{timestamp}.csv"
            results_df.drop(columns=['extra_stats']).to_csv(results_file, index=False)
            self.logger.info(f"Results saved to {results_file}")

        self.logger.info(f"Benchmark completed in {time.time() - start_time:.2f} seconds")
        return results_df

    @timer
    def _run_single(self, heuristic: str, run: int) -> BenchmarkResult:
        """Run one search with the given heuristic"""
        solver_config = SolverConfig(
            heuristic=heuristic,
            time_limit=self.config.time_limit,
            max_steps=self.config.max_steps
        )
        solver = get_solver('astar', solver_config)
        solver_result = solver.solve(self.graph)

        return BenchmarkResult(
            heuristic=heuristic,
            run=run,
            success=solver_result.success,
            solve_time=solver_result.solve_time,
            steps=solver_result.steps_taken,
            memory_mb=solver_result.memory_used,
            cost=solver_result.cost,
            path_length=len(solver_result.path),
            solution=str(solver_result.solution) if solver_result.solution else "",
            open_size=solver_result.stats.get('open_size', 0),
            closed_size=solver_result.stats.get('closed_size', 0),
            error_message="" if solver_result.success else solver_result.message,
            timestamp=datetime.now().isoformat(),
            extra_stats=solver_result.stats
        )

    @staticmethod
    def summarize(results_df: pd.DataFrame) -> pd.DataFrame:
        """Per-heuristic means of the main metrics"""
        return results_df.groupby('heuristic').agg({
            'success': 'mean',
            'steps': 'mean',
            'cost': 'mean',
            'path_length': 'mean',
            'closed_size': 'mean',
            'solve_time': ['mean', 'std'],
        }).round(3)
