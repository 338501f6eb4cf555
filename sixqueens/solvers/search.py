"""
Steppable A* search over the six-queens placement graph.

Every Step is an independent snapshot: advancing copies the open and
closed collections, so earlier Steps stay valid while the search moves on.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional, Tuple
import heapq
import logging

from ..core.board import Board, EMPTY, BOARD_CELLS, MAX_QUEENS
from ..core.graph import Graph


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Heuristic:
    """Edge cost and remaining-cost estimate used by the search"""
    name: str
    edge_cost: int
    estimate: Callable[[Board], int]

    def __repr__(self):
        return f"Heuristic({self.name}, edge_cost={self.edge_cost})"


def _penalty_estimate(board: Board) -> int:
    return board.penalty() * (MAX_QUEENS - board.count_queens())


def _unit_estimate(board: Board) -> int:
    return MAX_QUEENS - board.count_queens()


# Not admissible: the Gray-code penalty can exceed the edge cost per missing queen
PENALTY_HEURISTIC = Heuristic('penalty', BOARD_CELLS, _penalty_estimate)
UNIT_HEURISTIC = Heuristic('unit', 1, _unit_estimate)

HEURISTIC_REGISTRY: Dict[str, Heuristic] = {
    'penalty': PENALTY_HEURISTIC,
    'unit': UNIT_HEURISTIC,
}


def get_heuristic(name: str) -> Heuristic:
    """
    Get a heuristic by name.

    Raises:
        ValueError: If heuristic name is not recognized
    """
    heuristic = HEURISTIC_REGISTRY.get(name.lower())
    if not heuristic:
        raise ValueError(f"Unknown heuristic: {name}. Available: {list(HEURISTIC_REGISTRY.keys())}")
    return heuristic


@dataclass(frozen=True)
class Node:
    """Search vertex: a board with path cost, estimate and parent board"""
    board: Board
    parent: Optional[Board]
    g: int
    h: int

    @property
    def f(self) -> int:
        return self.g + self.h

    def describe(self) -> str:
        return f"{self.f} = {self.g} + {self.h} | {self.board}"


class Step:
    """Immutable snapshot of the search: current board, open and closed nodes"""

    def __init__(self, current: Board, graph: Graph, heuristic: Heuristic,
                 open_nodes: Dict[Board, Node], open_heap: List[Tuple[int, Board]],
                 closed: Dict[Board, Node]):
        self.current = current
        self.graph = graph
        self.heuristic = heuristic
        self._open_nodes = open_nodes
        # Heap keys are (f, board); boards are unique in open so ties on f
        # always resolve to the smallest board
        self._open_heap = open_heap
        self._closed = closed

    @classmethod
    def initial(cls, graph: Graph, heuristic: Heuristic = PENALTY_HEURISTIC) -> 'Step':
        """First snapshot: only the empty board is open"""
        start = Node(EMPTY, None, 0, heuristic.estimate(EMPTY))
        return cls(EMPTY, graph, heuristic, {EMPTY: start}, [(start.f, EMPTY)], {})

    def is_final(self) -> bool:
        return self.current.count_queens() >= MAX_QUEENS

    def advance(self) -> Optional['Step']:
        """
        Expand the best open node.

        Returns:
            The next snapshot, or None once the current board is a full
            placement or nothing is left to expand
        """
        if self.is_final():
            return None

        if not self._open_heap:
            logger.warning(f"Open set exhausted at {self.current} without a full placement")
            return None

        open_nodes = dict(self._open_nodes)
        open_heap = list(self._open_heap)
        closed = dict(self._closed)

        _, board = heapq.heappop(open_heap)
        node = open_nodes.pop(board)
        closed[board] = node
        tentative_cost = node.g + self.heuristic.edge_cost

        for neighbor in self.graph.reachable_from(board):
            existing = open_nodes.get(neighbor)
            if existing is None:
                existing = closed.get(neighbor)

            if existing is None:
                h = self.heuristic.estimate(neighbor)
            elif tentative_cost < existing.g:
                # Cheaper path found, closed nodes are re-opened as well
                if neighbor in open_nodes:
                    del open_nodes[neighbor]
                    open_heap = [entry for entry in open_heap if entry[1] != neighbor]
                    heapq.heapify(open_heap)
                else:
                    del closed[neighbor]
                logger.debug(f"Relaxed {neighbor}: g {existing.g} -> {tentative_cost}")
                h = existing.h
            else:
                continue

            fresh = Node(neighbor, board, tentative_cost, h)
            open_nodes[neighbor] = fresh
            heapq.heappush(open_heap, (fresh.f, neighbor))

        return Step(board, self.graph, self.heuristic, open_nodes, open_heap, closed)

    def open_sorted(self) -> List[Node]:
        """Open nodes in the order they would be expanded"""
        return [self._open_nodes[board] for _, board in sorted(self._open_heap)]

    def closed_nodes(self) -> List[Node]:
        return list(self._closed.values())

    def node_for(self, board: Board) -> Optional[Node]:
        """Look a board up in closed, then open"""
        node = self._closed.get(board)
        if node is None:
            node = self._open_nodes.get(board)
        return node

    def traceback(self, board: Board) -> Tuple[int, List[Board]]:
        """
        Reconstruct the placements leading to board.

        Returns:
            The board's path cost and the boards from the empty board to it

        Raises:
            LookupError: If the search never reached board
        """
        target = self.node_for(board)
        if target is None:
            raise LookupError(f"Board {board} is neither open nor closed")

        path = [board]
        node = target
        while node.parent is not None:
            path.append(node.parent)
            node = self.node_for(node.parent)
            if node is None:
                raise LookupError(f"Parent {path[-1]} of {path[-2]} is neither open nor closed")

        path.reverse()
        return target.g, path

    def tentative_paths(self) -> List[Tuple[int, List[Board]]]:
        """Tracebacks of every open node, in expansion order"""
        return [self.traceback(node.board) for node in self.open_sorted()]

    def describe(self) -> str:
        """Multi-line dump of the snapshot"""
        open_text = ', '.join(node.describe() for node in self.open_sorted())
        closed_text = ', '.join(node.describe() for node in self.closed_nodes())
        return (f"Current board: {self.current}\n"
                f"Open set: [{open_text}]\n"
                f"Closed set: [{closed_text}]\n")

    def __repr__(self):
        return (f"Step(current={self.current}, open={len(self._open_nodes)}, "
                f"closed={len(self._closed)})")


def search(graph: Graph, heuristic: Heuristic = PENALTY_HEURISTIC) -> Iterator[Step]:
    """
    Lazily yield the snapshots of an A* run from the empty board.

    The last Step yielded holds the first full placement expanded.
    """
    step = Step.initial(graph, heuristic)
    while step is not None:
        yield step
        step = step.advance()
