"""
A* search tests:
- termination on a full placement
- expansion order (lowest f first, ties to the smallest board)
- snapshots stay untouched while the search advances
- re-opening of closed nodes when a cheaper path shows up
- traceback
"""

import pytest

from sixqueens.core.board import Board, EMPTY, MAX_QUEENS
from sixqueens.core.graph import Edge
from sixqueens.solvers.search import (
    Node, Step, search, get_heuristic,
    PENALTY_HEURISTIC, UNIT_HEURISTIC
)


@pytest.fixture(params=["penalty", "unit"])
def steps(request, penalty_steps, unit_steps):
    return penalty_steps if request.param == "penalty" else unit_steps


def test_initial_step(graph):
    step = Step.initial(graph, PENALTY_HEURISTIC)
    assert step.current == EMPTY
    assert step.closed_nodes() == []
    assert step.open_sorted() == [Node(EMPTY, None, 0, 36 * 6)]


def test_search_ends_on_full_placement(steps):
    assert steps[-1].current.count_queens() == MAX_QUEENS
    assert steps[-1].is_final()
    assert all(not step.is_final() for step in steps[:-1])
    assert steps[-1].advance() is None


def test_each_step_expands_lowest_f_node(steps):
    for before, after in zip(steps, steps[1:]):
        open_nodes = before.open_sorted()
        best = open_nodes[0]
        assert after.current == best.board
        assert all(best.f <= node.f for node in open_nodes[1:])
        # Equal f resolves to the smallest board
        assert best.board == min(node.board for node in open_nodes if node.f == best.f)


def test_open_sorted_is_ascending(steps):
    for step in steps[::10]:
        keys = [(node.f, node.board) for node in step.open_sorted()]
        assert keys == sorted(keys)


def test_open_and_closed_are_disjoint(steps):
    for step in steps[::10]:
        open_boards = {node.board for node in step.open_sorted()}
        closed_boards = {node.board for node in step.closed_nodes()}
        assert not open_boards & closed_boards


def test_ties_pick_smallest_board(unit_steps, penalty_steps):
    # After the empty board every one-queen board shares f under the unit estimate
    assert unit_steps[1].current == EMPTY
    assert unit_steps[2].current == Board(1)
    # Under the penalty estimate Board(1) scores worse than the other single queens
    assert penalty_steps[2].current == Board(2)


def test_earlier_steps_are_not_mutated(penalty_steps):
    first, second = penalty_steps[0], penalty_steps[1]
    assert [node.board for node in first.open_sorted()] == [EMPTY]
    assert first.closed_nodes() == []
    assert len(second.open_sorted()) == 36
    assert [node.board for node in second.closed_nodes()] == [EMPTY]


def test_search_is_deterministic(graph, penalty_steps):
    replay = [step.current for step in search(graph, PENALTY_HEURISTIC)]
    assert replay == [step.current for step in penalty_steps]


def test_traceback_of_solution(graph, steps):
    last = steps[-1]
    cost, path = last.traceback(last.current)

    assert path[0] == EMPTY
    assert path[-1] == last.current
    for a, b in zip(path, path[1:]):
        assert Edge(a, b) in graph
    assert cost == last.node_for(last.current).g
    assert cost >= last.heuristic.edge_cost * (len(path) - 1)


def _first_detour(steps):
    for index, step in enumerate(steps):
        for node in step.closed_nodes() + step.open_sorted():
            _, path = step.traceback(node.board)
            if len(path) != 1 + node.board.count_queens():
                return index, node.board, path
    return None


def test_final_paths_place_one_queen_per_move(steps):
    last = steps[-1]
    cost, path = last.traceback(last.current)
    assert cost == last.heuristic.edge_cost * MAX_QUEENS
    assert len(path) == MAX_QUEENS + 1

    for node in last.closed_nodes():
        _, node_path = last.traceback(node.board)
        assert len(node_path) == 1 + node.board.count_queens()


def test_penalty_search_holds_detours_mid_search(penalty_steps):
    # A board first reached by lifting a queen off a deeper board keeps that
    # longer route until a later expansion relaxes it
    found = _first_detour(penalty_steps)
    assert found is not None

    index, board, path = found
    assert index < len(penalty_steps) - 1
    assert path[0] == EMPTY and path[-1] == board
    assert len(path) > 1 + board.count_queens()
    # Every move changes the queen count by one, so detours add moves in pairs
    assert (len(path) - 1 - board.count_queens()) % 2 == 0

    # By the final snapshot every open and closed route is direct again
    assert _first_detour(penalty_steps[-1:]) is None


def test_traceback_unknown_board_raises(penalty_steps):
    with pytest.raises(LookupError):
        penalty_steps[0].traceback(Board(1))


def test_tentative_paths_follow_open_order(penalty_steps):
    step = penalty_steps[-1]
    tentative = step.tentative_paths()
    open_nodes = step.open_sorted()
    assert len(tentative) == len(open_nodes)
    for (cost, path), node in zip(tentative, open_nodes):
        assert path[-1] == node.board
        assert cost == node.g


def test_describe(penalty_steps):
    text = penalty_steps[1].describe()
    assert text.startswith(f"Current board: {EMPTY}")
    assert "Open set: [" in text
    assert "Closed set: [" in text
    assert Node(EMPTY, None, 0, 216).describe() == f"216 = 0 + 216 | {EMPTY}"


def test_closed_node_is_reopened_by_cheaper_path(detour_graph):
    graph, heuristic, boards = detour_graph
    steps = list(search(graph, heuristic))
    b, c, e, d = boards['B'], boards['C'], boards['E'], boards['D']

    assert [step.current for step in steps] == [EMPTY, EMPTY, b, e, d, c, d]

    # D closed through the long route
    assert steps[4].traceback(d) == (3, [EMPTY, b, e, d])

    # Expanding C finds the cheaper route and moves D back to open
    reopened = steps[5]
    assert d in {node.board for node in reopened.open_sorted()}
    assert d not in {node.board for node in reopened.closed_nodes()}
    assert reopened.node_for(d) == Node(d, c, 2, 0)

    # The older snapshot still sees D closed at the old cost
    assert steps[4].node_for(d).g == 3

    assert steps[-1].traceback(d) == (2, [EMPTY, c, d])


def test_search_stops_when_open_is_exhausted(detour_graph):
    graph, heuristic, _ = detour_graph
    last = list(search(graph, heuristic))[-1]
    assert last.open_sorted() == []
    assert not last.is_final()
    assert last.advance() is None


def test_unit_heuristic_values():
    assert UNIT_HEURISTIC.edge_cost == 1
    assert UNIT_HEURISTIC.estimate(EMPTY) == 6
    assert PENALTY_HEURISTIC.edge_cost == 36
    assert PENALTY_HEURISTIC.estimate(Board(1)) == 35 * 5


@pytest.mark.parametrize("name", ["penalty", "UNIT"])
def test_get_heuristic(name):
    assert get_heuristic(name).name == name.lower()


def test_get_heuristic_rejects_unknown_name():
    with pytest.raises(ValueError):
        get_heuristic("manhattan")
