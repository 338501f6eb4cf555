"""
Utility functions for the six-queens search.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Dict, Any, Sequence
import time
from functools import wraps

import numpy as np
import psutil

from .board import Board, BOARD_SIZE
from .. import config


def setup_logger(name: str, log_file: Optional[Path] = None, level: str = config.LOG_LEVEL) -> logging.Logger:
    """
    Set up a logger with console and optional file output.

    Args:
        name: Logger name
        log_file: Optional log file path
        level: Logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()))

    # Remove existing handlers
    logger.handlers = []

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(getattr(logging, level.upper()))

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATEFMT)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(getattr(logging, level.upper()))
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def timer(func):
    """Decorator to time function execution"""
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.time()
        result = func(*args, **kwargs)
        execution_time = time.time() - start_time

        # Try to get logger from first argument (usually self)
        if args and hasattr(args[0], 'logger'):
            args[0].logger.debug(f"{func.__name__} took {execution_time:.3f} seconds")
        else:
            logging.getLogger(func.__module__).debug(
                f"{func.__name__} took {execution_time:.3f} seconds")

        return result
    return wrapper


def memory_usage() -> float:
    """Get current memory usage in MB"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


class BoardConverter:
    """Convert boards between display formats"""

    QUEEN = '♛'

    @staticmethod
    def to_grid(board: Board) -> np.ndarray:
        """
        Convert board to a 6x6 grid, row-major.
        0: empty, 1: queen
        """
        # bits() is most significant first, reverse it back to position order
        cells = np.array(board.bits()[::-1], dtype=int)
        return cells.reshape(BOARD_SIZE, BOARD_SIZE)

    @staticmethod
    def from_grid(grid: np.ndarray) -> Board:
        """Create board from a 6x6 grid of 0/1 cells"""
        grid = np.asarray(grid)
        if grid.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Expected a {BOARD_SIZE}x{BOARD_SIZE} grid, got {grid.shape}")
        return Board.from_positions(int(pos) for pos in np.flatnonzero(grid))

    @staticmethod
    def to_string(board: Board) -> str:
        """Box-drawing rendering of the board, one queen symbol per occupied cell"""
        grid = BoardConverter.to_grid(board)
        separator = '───'
        lines = ['╭' + '┬'.join([separator] * BOARD_SIZE) + '╮']

        for row_idx, row in enumerate(grid):
            cells = [BoardConverter.QUEEN if cell else ' ' for cell in row]
            lines.append('│ ' + ' │ '.join(cells) + ' │')
            if row_idx < BOARD_SIZE - 1:
                lines.append('├' + '┼'.join([separator] * BOARD_SIZE) + '┤')

        lines.append('╰' + '┴'.join([separator] * BOARD_SIZE) + '╯')
        return '\n'.join(lines)

    @staticmethod
    def format_path(cost: int, path: Sequence[Board]) -> str:
        """Format a traceback as '$cost: b0 -> b1 -> ...'"""
        return f"${cost}: " + ' -> '.join(str(board) for board in path)


def calculate_search_stats(steps: List[Any]) -> Dict[str, Any]:
    """Calculate statistics over a recorded list of search steps"""
    if not steps:
        return {'steps': 0}

    open_sizes = [len(step.open_sorted()) for step in steps]
    closed_sizes = [len(step.closed_nodes()) for step in steps]
    last = steps[-1]

    return {
        'steps': len(steps),
        'final_board': str(last.current),
        'final_queens': last.current.count_queens(),
        'max_open': max(open_sizes),
        'max_closed': max(closed_sizes),
        'avg_open': float(np.mean(open_sizes)),
    }
