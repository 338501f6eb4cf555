"""
Core data structure for six-queens boards.

A board is a 36-bit integer: bit ``i`` set means a queen stands on
row ``i // 6``, column ``i % 6``.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple


BOARD_SIZE = 6
BOARD_CELLS = BOARD_SIZE * BOARD_SIZE
MAX_QUEENS = BOARD_SIZE
_BOARD_LIMIT = 1 << BOARD_CELLS


def _check_position(pos: int):
    if not 0 <= pos < BOARD_CELLS:
        raise ValueError(f"Position {pos} is outside the board (0..{BOARD_CELLS - 1})")


@dataclass(frozen=True, order=True)
class Board:
    """Immutable set of queen positions on the 6x6 board"""
    value: int = 0

    def __post_init__(self):
        if not isinstance(self.value, int) or not 0 <= self.value < _BOARD_LIMIT:
            raise ValueError(f"Board bits out of range: {self.value!r}")

    @classmethod
    def from_positions(cls, positions: Iterable[int]) -> 'Board':
        """Create a board with a queen on every given position"""
        value = 0
        for pos in positions:
            _check_position(pos)
            value |= 1 << pos
        return cls(value)

    @classmethod
    def from_string(cls, text: str) -> 'Board':
        """Parse the 36-character binary form produced by ``str(board)``"""
        text = text.strip()
        if len(text) != BOARD_CELLS or set(text) - {'0', '1'}:
            raise ValueError(f"Expected {BOARD_CELLS} binary digits, got {text!r}")
        return cls(int(text, 2))

    @staticmethod
    def attacks(a: int, b: int) -> bool:
        """Check if queens on positions a and b would see each other"""
        row_a, col_a = divmod(a, BOARD_SIZE)
        row_b, col_b = divmod(b, BOARD_SIZE)
        if a == b:
            return False
        return (row_a == row_b or col_a == col_b
                or abs(row_a - row_b) == abs(col_a - col_b))

    def count_queens(self) -> int:
        return bin(self.value).count('1')

    def is_solution(self) -> bool:
        return self.count_queens() == MAX_QUEENS

    def has_queen_at(self, pos: int) -> bool:
        _check_position(pos)
        return bool(self.value & (1 << pos))

    def place_queen(self, pos: int) -> 'Board':
        """Return a new board with a queen added on pos"""
        _check_position(pos)
        return Board(self.value | (1 << pos))

    def has_vision(self, pos: int) -> bool:
        """
        Check if the queen on pos is attacked by any other queen.

        Rows, columns and both diagonals are checked; pos itself is
        excluded, so this is meant to run right after placing on pos.
        """
        _check_position(pos)
        return bool(self.value & _VISION_MASKS[pos])

    def penalty(self) -> int:
        """Number of equal neighbouring bits (zeros of the Gray code) in 36 bits"""
        gray = self.value ^ (self.value >> 1)
        return BOARD_CELLS - bin(gray).count('1')

    def bits(self) -> Tuple[bool, ...]:
        """Per-cell flags, most significant bit first"""
        return tuple(bool(self.value & (1 << (BOARD_CELLS - i - 1)))
                     for i in range(BOARD_CELLS))

    def positions(self) -> List[int]:
        """Occupied positions in ascending order"""
        return [pos for pos in range(BOARD_CELLS) if self.value & (1 << pos)]

    def __str__(self):
        return format(self.value, f'0{BOARD_CELLS}b')

    def __repr__(self):
        return f"Board(0b{self})"


def _build_vision_masks() -> List[int]:
    masks = []
    for pos in range(BOARD_CELLS):
        mask = 0
        for other in range(BOARD_CELLS):
            if Board.attacks(pos, other):
                mask |= 1 << other
        masks.append(mask)
    return masks


_VISION_MASKS = _build_vision_masks()

EMPTY = Board(0)
