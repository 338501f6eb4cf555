"""
Validator for six-queens boards and placement graphs.
"""

from itertools import combinations
from typing import List

import networkx as nx

from .board import Board, EMPTY, MAX_QUEENS
from .graph import Graph


class ValidationResult:
    """Result of board or graph validation"""

    def __init__(self):
        self.is_valid = True
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def add_error(self, error: str):
        """Add an error message"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add a warning message"""
        self.warnings.append(warning)

    def extend(self, other: 'ValidationResult'):
        """Merge another result into this one"""
        for error in other.errors:
            self.add_error(error)
        self.warnings.extend(other.warnings)

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        status = "Valid" if self.is_valid else "Invalid"
        return f"ValidationResult({status}, {len(self.errors)} errors, {len(self.warnings)} warnings)"


class GraphValidator:
    """Validates placement rules on boards and graphs"""

    @staticmethod
    def validate_board(board: Board) -> ValidationResult:
        """Check that no two queens on the board attack each other"""
        result = ValidationResult()

        if board.count_queens() > MAX_QUEENS:
            result.add_error(f"Board {board} has {board.count_queens()} queens")

        for a, b in combinations(board.positions(), 2):
            if Board.attacks(a, b):
                result.add_error(f"Queens at {a} and {b} attack each other on {board}")

        return result

    @staticmethod
    def validate_solution(board: Board) -> ValidationResult:
        """Check that the board is a complete six-queens solution"""
        result = GraphValidator.validate_board(board)
        if not board.is_solution():
            result.add_error(f"Board {board} has {board.count_queens()} queens, needs {MAX_QUEENS}")
        return result

    @staticmethod
    def validate_edges(graph: Graph) -> ValidationResult:
        """Check edge symmetry and that every edge adds or removes one queen"""
        result = ValidationResult()

        for edge in graph:
            if edge.reversed() not in graph:
                result.add_error(f"Missing reverse of {edge!r}")

            delta = edge.from_board.count_queens() - edge.to_board.count_queens()
            if abs(delta) != 1:
                result.add_error(f"{edge!r} changes queen count by {delta}")

            if edge.from_board.value & edge.to_board.value not in (
                    edge.from_board.value, edge.to_board.value):
                result.add_error(f"{edge!r} moves a queen instead of adding one")

        return result

    @staticmethod
    def validate_reachability(graph: Graph) -> ValidationResult:
        """Check every board is reached from the empty board in queen-count moves"""
        result = ValidationResult()
        digraph = graph.to_networkx()

        if EMPTY not in digraph:
            result.add_error("Graph does not contain the empty board")
            return result

        distances = nx.single_source_shortest_path_length(digraph, EMPTY)
        for board in digraph.nodes:
            if board not in distances:
                result.add_error(f"Board {board} is not reachable from the empty board")
            elif distances[board] != board.count_queens():
                result.add_error(f"Board {board} is {distances[board]} moves away, "
                                 f"expected {board.count_queens()}")

        if not graph.boards_with_queens(MAX_QUEENS):
            result.add_warning(f"Graph has no board with {MAX_QUEENS} queens")

        return result

    @staticmethod
    def validate_graph(graph: Graph) -> ValidationResult:
        """Run every graph check"""
        result = ValidationResult()

        for board in graph.boards():
            result.extend(GraphValidator.validate_board(board))

        result.extend(GraphValidator.validate_edges(graph))
        result.extend(GraphValidator.validate_reachability(graph))
        return result
