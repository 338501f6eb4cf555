# sixqueens/core/__init__.py
"""
Core data structures and utilities for the six-queens search.
"""

from .board import Board, EMPTY, BOARD_SIZE, BOARD_CELLS, MAX_QUEENS
from .graph import Edge, Graph
from .validator import GraphValidator, ValidationResult
from .utils import (
    setup_logger, timer, memory_usage,
    BoardConverter, calculate_search_stats
)

__all__ = [
    # Data structures
    'Board', 'EMPTY', 'BOARD_SIZE', 'BOARD_CELLS', 'MAX_QUEENS',
    'Edge', 'Graph',

    # Validation
    'GraphValidator', 'ValidationResult',

    # Utilities
    'setup_logger', 'timer', 'memory_usage',
    'BoardConverter', 'calculate_search_stats'
]
