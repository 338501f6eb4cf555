"""
State-transition graph of valid six-queens placements.
"""

from dataclasses import dataclass
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Set, Tuple
import logging
import time

import networkx as nx

from .board import Board, EMPTY, BOARD_CELLS, MAX_QUEENS


logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class Edge:
    """Directed transition between two boards, ordered by (from, to)"""
    from_board: Board
    to_board: Board

    def reversed(self) -> 'Edge':
        return Edge(self.to_board, self.from_board)

    def __repr__(self):
        return f"Edge({self.from_board} -> {self.to_board})"


class Graph:
    """Ordered, deduplicated and immutable set of edges"""

    def __init__(self, edges: Iterable[Edge] = ()):
        self._edges: List[Edge] = sorted(set(edges))

        adjacency: Dict[Board, List[Board]] = defaultdict(list)
        for edge in self._edges:
            adjacency[edge.from_board].append(edge.to_board)
        # Edges are sorted, so every target list is already ascending
        self._adjacency: Dict[Board, Tuple[Board, ...]] = {
            board: tuple(targets) for board, targets in adjacency.items()
        }

    @classmethod
    def build_from_empty(cls) -> 'Graph':
        """
        Enumerate every board reachable from the empty board by adding
        non-attacked queens, linking each board with its one-queen
        extensions in both directions.

        Returns:
            The complete graph for the 6x6 rules
        """
        start_time = time.time()
        edges: Set[Edge] = set()
        expanded: Set[Board] = set()
        frontier = [EMPTY]

        while frontier:
            parent = frontier.pop()
            # Expanding the same board twice only re-adds existing edges
            if parent in expanded:
                continue
            expanded.add(parent)

            if parent.count_queens() >= MAX_QUEENS:
                continue

            for pos in range(BOARD_CELLS):
                if parent.has_queen_at(pos):
                    continue

                candidate = parent.place_queen(pos)
                if candidate.has_vision(pos):
                    continue

                edges.add(Edge(parent, candidate))
                edges.add(Edge(candidate, parent))
                if candidate not in expanded:
                    frontier.append(candidate)

        graph = cls(edges)
        logger.info(f"Built graph with {len(expanded)} boards and {len(graph)} edges "
                    f"in {time.time() - start_time:.2f}s")
        return graph

    def reachable_from(self, board: Board) -> Iterator[Board]:
        """Yield the targets of all edges leaving board, ascending"""
        return iter(self._adjacency.get(board, ()))

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def boards(self) -> List[Board]:
        """All boards with at least one edge, ascending"""
        return sorted(self._adjacency)

    def boards_with_queens(self, count: int) -> List[Board]:
        return [board for board in self.boards() if board.count_queens() == count]

    def to_networkx(self) -> nx.DiGraph:
        """Convert to a networkx directed graph keyed by Board"""
        digraph = nx.DiGraph()
        digraph.add_nodes_from(self._adjacency)
        digraph.add_edges_from((edge.from_board, edge.to_board) for edge in self._edges)
        return digraph

    def __contains__(self, edge: Edge) -> bool:
        return edge.to_board in self._adjacency.get(edge.from_board, ())

    def __len__(self):
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def __repr__(self):
        return f"Graph({len(self._adjacency)} boards, {len(self._edges)} edges)"
