"""
Static visualization for six-queens boards.
"""

import matplotlib.pyplot as plt
import matplotlib.patches as patches
import numpy as np
from typing import Optional, Tuple, Sequence
from pathlib import Path

from ..core.board import Board, BOARD_SIZE, BOARD_CELLS
from ..core.utils import BoardConverter
from .. import config


class BoardVisualizer:
    """Visualize six-queens boards and placement paths"""

    def __init__(self, figsize: Tuple[int, int] = config.VIZ_FIGSIZE, dpi: int = config.VIZ_DPI):
        """
        Initialize visualizer.

        Args:
            figsize: Figure size in inches
            dpi: Dots per inch for saved images
        """
        self.figsize = figsize
        self.dpi = dpi

        # Visual parameters
        self.light_color = '#F0D9B5'
        self.dark_color = '#B58863'
        self.vision_color = '#E76F51'
        self.queen_color = '#264653'
        self.background_color = '#F7F7F7'

    def visualize(self, board: Board,
                  show_vision: bool = False,
                  title: Optional[str] = None,
                  save_path: Optional[Path] = None,
                  show_plot: bool = True) -> plt.Figure:
        """
        Create visualization of a board.

        Args:
            board: The board to visualize
            show_vision: Whether to shade squares attacked by the queens
            title: Optional title for the plot
            save_path: Optional path to save the image
            show_plot: Whether to display the plot

        Returns:
            The matplotlib figure
        """
        fig, ax = plt.subplots(figsize=self.figsize)
        fig.patch.set_facecolor(self.background_color)
        self.draw_board(ax, board, show_vision=show_vision)

        if title:
            ax.set_title(title, fontsize=16, pad=20)

        self._finish(fig, save_path, show_plot)
        return fig

    def visualize_path(self, path: Sequence[Board],
                       cost: Optional[int] = None,
                       save_path: Optional[Path] = None,
                       show_plot: bool = True) -> plt.Figure:
        """Draw every board of a placement path side by side"""
        if not path:
            raise ValueError("Cannot visualize an empty path")

        fig, axes = plt.subplots(1, len(path), figsize=(3 * len(path), 3.5))
        axes = np.atleast_1d(axes)
        fig.patch.set_facecolor(self.background_color)

        for idx, (ax, board) in enumerate(zip(axes, path)):
            self.draw_board(ax, board)
            ax.set_title(f"{idx}: {board.count_queens()} queens", fontsize=10)

        if cost is not None:
            fig.suptitle(f"Path cost {cost}", fontsize=14)

        self._finish(fig, save_path, show_plot)
        return fig

    def draw_board(self, ax, board: Board, show_vision: bool = False):
        """Draw checkerboard, optional vision shading and queens onto ax"""
        ax.clear()
        ax.set_xlim(-0.5, BOARD_SIZE - 0.5)
        ax.set_ylim(-0.5, BOARD_SIZE - 0.5)
        ax.set_aspect('equal')

        # Row 0 at the top
        ax.invert_yaxis()

        attacked = self._attacked_squares(board) if show_vision else np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=bool)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                color = self.light_color if (row + col) % 2 == 0 else self.dark_color
                ax.add_patch(patches.Rectangle((col - 0.5, row - 0.5), 1, 1,
                                               facecolor=color, zorder=0))
                if attacked[row, col]:
                    ax.add_patch(patches.Rectangle((col - 0.5, row - 0.5), 1, 1,
                                                   facecolor=self.vision_color, alpha=0.35, zorder=1))

        grid = BoardConverter.to_grid(board)
        for row, col in zip(*np.nonzero(grid)):
            ax.text(col, row, BoardConverter.QUEEN, ha='center', va='center',
                    fontsize=28, color=self.queen_color, zorder=3)

        ax.set_xticks([])
        ax.set_yticks([])
        for spine in ax.spines.values():
            spine.set_visible(False)

    def _attacked_squares(self, board: Board) -> np.ndarray:
        """Empty squares at least one queen can see"""
        attacked = np.zeros(BOARD_CELLS, dtype=bool)
        queens = board.positions()
        for pos in range(BOARD_CELLS):
            if pos in queens:
                continue
            attacked[pos] = any(Board.attacks(pos, queen) for queen in queens)
        return attacked.reshape(BOARD_SIZE, BOARD_SIZE)

    def _finish(self, fig: plt.Figure, save_path: Optional[Path], show_plot: bool):
        if save_path:
            save_path = Path(save_path)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            fig.savefig(save_path, dpi=self.dpi, bbox_inches='tight',
                        facecolor=self.background_color)

        if show_plot:
            plt.show()
        else:
            plt.close(fig)
