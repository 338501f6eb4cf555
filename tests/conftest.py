import os
import sys
import pytest

# Add project root to sys.path (so tests can import sixqueens.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from sixqueens.core.board import Board, EMPTY
from sixqueens.core.graph import Edge, Graph
from sixqueens.solvers.search import Heuristic, PENALTY_HEURISTIC, UNIT_HEURISTIC, search


@pytest.fixture(scope="session")
def graph():
    """The full 6x6 placement graph, built once per session."""
    return Graph.build_from_empty()


@pytest.fixture(scope="session")
def penalty_steps(graph):
    return list(search(graph, PENALTY_HEURISTIC))


@pytest.fixture(scope="session")
def unit_steps(graph):
    return list(search(graph, UNIT_HEURISTIC))


def _linked(*pairs):
    edges = []
    for a, b in pairs:
        edges.append(Edge(a, b))
        edges.append(Edge(b, a))
    return edges


@pytest.fixture
def detour_graph():
    """
    Small hand-made graph where the cheap route to D is only found after
    D was closed through a longer route:

        EMPTY - B - E - D
        EMPTY - C ------ D      (C looks expensive to the estimate)
    """
    b, c, e, d = Board(1), Board(2), Board(4), Board(8)
    graph = Graph(_linked((EMPTY, b), (b, e), (e, d), (EMPTY, c), (c, d)))
    estimates = {EMPTY: 0, b: 0, e: 0, d: 0, c: 10}
    heuristic = Heuristic('table', 1, estimates.__getitem__)
    return graph, heuristic, {'B': b, 'C': c, 'E': e, 'D': d}
