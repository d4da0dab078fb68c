"""Board coordinates and the algebraic notation codec.

Board layout (row 0 is the top rank):
    (0,0)=A8, (0,1)=B8, ..., (0,7)=H8
    ...
    (7,0)=A1, (7,1)=B1, ..., (7,7)=H1
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8

_COLUMN_LETTERS = "ABCDEFGH"

# Compass order: NW, N, NE, W, E, SW, S, SE.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


@dataclass(frozen=True, slots=True, order=True)
class BoardPosition:
    """Immutable (row, col) coordinate. Ordering is row-major.

    Out-of-range coordinates are representable; check :attr:`is_valid`
    before using one to index a board.
    """

    row: int
    col: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.col < BOARD_SIZE

    @property
    def is_corner(self) -> bool:
        return self.row in (0, BOARD_SIZE - 1) and self.col in (0, BOARD_SIZE - 1)

    @property
    def is_edge(self) -> bool:
        """Whether the cell lies on the outer ring (corners included)."""
        return self.is_valid and (
            self.row in (0, BOARD_SIZE - 1) or self.col in (0, BOARD_SIZE - 1)
        )

    def offset(self, d_row: int, d_col: int) -> BoardPosition | None:
        """Neighbour shifted by (*d_row*, *d_col*), or None when off-board."""
        moved = BoardPosition(self.row + d_row, self.col + d_col)
        return moved if moved.is_valid else None

    @property
    def adjacent_positions(self) -> list[BoardPosition]:
        """On-board neighbours in the 8 compass directions."""
        neighbours: list[BoardPosition] = []
        for d_row, d_col in DIRECTIONS:
            pos = self.offset(d_row, d_col)
            if pos is not None:
                neighbours.append(pos)
        return neighbours

    # ── Notation ─────────────────────────────────────────────────────────

    @property
    def algebraic(self) -> str | None:
        """Algebraic name, e.g. (0,0) → 'A8'. None for off-board positions."""
        if not self.is_valid:
            return None
        return f"{_COLUMN_LETTERS[self.col]}{BOARD_SIZE - self.row}"

    @classmethod
    def from_algebraic(cls, name: str) -> BoardPosition | None:
        """Parse a name like 'D3' (case-insensitive). None if malformed."""
        if not isinstance(name, str) or len(name) != 2:
            return None
        letter, digit = name[0].upper(), name[1]
        if letter not in _COLUMN_LETTERS or digit not in "12345678":
            return None
        return cls(BOARD_SIZE - int(digit), _COLUMN_LETTERS.index(letter))

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.algebraic or f"({self.row}, {self.col})"


def all_positions() -> list[BoardPosition]:
    """All 64 cells in row-major order."""
    return list(_ALL_POSITIONS)


_ALL_POSITIONS: tuple[BoardPosition, ...] = tuple(
    BoardPosition(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)

CORNERS: tuple[BoardPosition, ...] = (
    BoardPosition(0, 0),
    BoardPosition(0, BOARD_SIZE - 1),
    BoardPosition(BOARD_SIZE - 1, 0),
    BoardPosition(BOARD_SIZE - 1, BOARD_SIZE - 1),
)

EDGES: tuple[BoardPosition, ...] = tuple(p for p in _ALL_POSITIONS if p.is_edge)
