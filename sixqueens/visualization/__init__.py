"""
Visualization tools for six-queens boards and search runs.
"""

from .static_viz import BoardVisualizer
from .animated_viz import SearchAnimator

__all__ = [
    # Static visualization
    'BoardVisualizer',

    # Animated visualization
    'SearchAnimator',
]
