"""
Six queens: placement graph and steppable A* search on a 6x6 board.
"""

__version__ = "0.1.0"
