"""
Animated visualization of the A* search.
"""

import logging
import matplotlib.pyplot as plt
import matplotlib.animation as animation
from typing import Tuple, Sequence
from pathlib import Path

from ..solvers.search import Step
from .static_viz import BoardVisualizer
from .. import config


logger = logging.getLogger(__name__)


class SearchAnimator:
    """Create animated visualization of a sequence of search steps"""

    def __init__(self, figsize: Tuple[int, int] = (12, 7), dpi: int = 100):
        """
        Initialize animator.

        Args:
            figsize: Figure size
            dpi: Dots per inch for output
        """
        self.figsize = figsize
        self.dpi = dpi
        self.viz = BoardVisualizer(figsize=figsize, dpi=dpi)

    def animate(self, steps: Sequence[Step],
                output_path: Path,
                fps: int = config.ANIMATION_FPS,
                show_stats: bool = True,
                max_open: int = 8):
        """
        Create animation of search steps.

        Args:
            steps: Search snapshots in order
            output_path: Path to save animation (mp4 or gif)
            fps: Frames per second
            show_stats: Whether to show the open/closed panel
            max_open: Number of open nodes listed in the panel
        """
        if not steps:
            raise ValueError("No steps to animate")

        output_path = Path(output_path)
        fig, (ax_main, ax_stats) = plt.subplots(
            1, 2, figsize=self.figsize,
            gridspec_kw={'width_ratios': [3, 2]}
        )
        ax_stats.axis('off')
        if not show_stats:
            ax_stats.set_visible(False)

        stats_text = ax_stats.text(
            0.0, 1.0, '', fontsize=9,
            verticalalignment='top',
            fontfamily='monospace'
        )

        def animate_frame(frame):
            step = steps[frame]
            self.viz.draw_board(ax_main, step.current)
            ax_main.set_title(f"Step {frame + 1}/{len(steps)} - "
                              f"{step.current.count_queens()} queens", fontsize=14)

            if show_stats:
                stats_text.set_text(self._format_stats(step, max_open))

        anim = animation.FuncAnimation(
            fig, animate_frame, frames=len(steps),
            interval=1000 / fps, blit=False
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        if output_path.suffix == '.gif':
            writer = animation.PillowWriter(fps=fps)
        else:
            writer = animation.FFMpegWriter(fps=fps, bitrate=1800)

        anim.save(str(output_path), writer=writer, dpi=self.dpi)
        plt.close(fig)

        logger.info(f"Animation saved to {output_path}")

    def _format_stats(self, step: Step, max_open: int) -> str:
        """Format the statistics panel for one frame"""
        open_nodes = step.open_sorted()
        lines = [
            f"Current: {step.current}",
            f"Open:    {len(open_nodes)}",
            f"Closed:  {len(step.closed_nodes())}",
            "",
            "Next in queue (f = g + h):",
        ]
        lines.extend(f"  {node.describe()}" for node in open_nodes[:max_open])

        if step.is_final():
            cost, path = step.traceback(step.current)
            lines.extend(["", "Solution:", f"  cost {cost}, {len(path) - 1} placements"])

        return '\n'.join(lines)
