"""
Analysis tools for comparing search heuristics.
"""

from .benchmark import HeuristicBenchmark, BenchmarkConfig, BenchmarkResult

__all__ = [
    'HeuristicBenchmark',
    'BenchmarkConfig',
    'BenchmarkResult'
]
