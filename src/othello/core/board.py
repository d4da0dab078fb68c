"""Board - disc placement on an 8x8 grid, plus the derived score."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from othello.core.enums import CellState, Player
from othello.core.types import BOARD_SIZE, DIRECTIONS, BoardPosition, all_positions

if TYPE_CHECKING:
    from othello.core.move import Move

_CELL_COUNT = BOARD_SIZE * BOARD_SIZE

_SYMBOLS: dict[CellState, str] = {
    CellState.EMPTY: ".",
    CellState.BLACK: "X",
    CellState.WHITE: "O",
}


@dataclass(frozen=True, slots=True)
class Score:
    """Disc counts. Always derived from a :class:`Board`, never stored."""

    black: int
    white: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "black", max(0, self.black))
        object.__setattr__(self, "white", max(0, self.white))

    @property
    def total(self) -> int:
        return self.black + self.white

    @property
    def difference(self) -> int:
        """Black minus white."""
        return self.black - self.white

    @property
    def is_tied(self) -> bool:
        return self.black == self.white

    @property
    def leader(self) -> Player | None:
        if self.black > self.white:
            return Player.BLACK
        if self.white > self.black:
            return Player.WHITE
        return None

    def for_player(self, player: Player) -> int:
        return self.black if player == Player.BLACK else self.white

    def __str__(self) -> str:
        return f"Black: {self.black}, White: {self.white}"


class Board:
    """Immutable 64-cell board. Every mutation returns a new instance."""

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[CellState] | None = None) -> None:
        if cells is None:
            self._cells: tuple[CellState, ...] = (CellState.EMPTY,) * _CELL_COUNT
            return
        cells = tuple(CellState(c) for c in cells)
        if len(cells) != _CELL_COUNT:
            raise ValueError(f"Board needs {_CELL_COUNT} cells, got {len(cells)}")
        self._cells = cells

    @staticmethod
    def _index(pos: BoardPosition) -> int:
        return pos.row * BOARD_SIZE + pos.col

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: BoardPosition) -> CellState:
        """Cell at *pos*; off-board positions read as EMPTY."""
        if not pos.is_valid:
            return CellState.EMPTY
        return self._cells[self._index(pos)]

    def cell(self, row: int, col: int) -> CellState:
        return self[BoardPosition(row, col)]

    def is_empty_at(self, pos: BoardPosition) -> bool:
        return pos.is_valid and self[pos] is CellState.EMPTY

    # -- Query helpers ------------------------------------------------------

    def positions_with(self, state: CellState) -> list[BoardPosition]:
        """Cells holding *state*, row-major."""
        return [pos for pos in all_positions() if self[pos] is state]

    def empty_positions(self) -> list[BoardPosition]:
        return self.positions_with(CellState.EMPTY)

    @property
    def score(self) -> Score:
        return Score(
            black=self._cells.count(CellState.BLACK),
            white=self._cells.count(CellState.WHITE),
        )

    @property
    def piece_count(self) -> int:
        return _CELL_COUNT - self._cells.count(CellState.EMPTY)

    @property
    def is_full(self) -> bool:
        return CellState.EMPTY not in self._cells

    @property
    def is_empty(self) -> bool:
        return self.piece_count == 0

    # -- Capture logic ------------------------------------------------------

    def captures_in_direction(
        self,
        player: Player,
        pos: BoardPosition,
        d_row: int,
        d_col: int,
    ) -> list[BoardPosition]:
        """Opponent discs bracketed from *pos* along one direction."""
        own = player.cell_state
        opponent = player.opposite.cell_state
        run: list[BoardPosition] = []
        current = pos.offset(d_row, d_col)
        while current is not None:
            state = self[current]
            if state is opponent:
                run.append(current)
            elif state is own:
                return run
            else:
                break
            current = current.offset(d_row, d_col)
        return []

    def captured_positions(
        self, player: Player, pos: BoardPosition
    ) -> frozenset[BoardPosition]:
        """Union of captures over all 8 directions. Empty if the cell is taken."""
        if not self.is_empty_at(pos):
            return frozenset()
        captured: set[BoardPosition] = set()
        for d_row, d_col in DIRECTIONS:
            captured.update(self.captures_in_direction(player, pos, d_row, d_col))
        return frozenset(captured)

    def is_valid_move(self, player: Player, pos: BoardPosition) -> bool:
        return bool(self.captured_positions(player, pos))

    def valid_moves(self, player: Player) -> list[BoardPosition]:
        """Legal placements for *player*, row-major."""
        return [pos for pos in self.empty_positions() if self.is_valid_move(player, pos)]

    # -- Mutation / copying -------------------------------------------------

    def placing(self, placements: Mapping[BoardPosition, CellState]) -> Board:
        """New board with *placements* applied. Off-board keys are ignored."""
        cells = list(self._cells)
        for pos, state in placements.items():
            if pos.is_valid:
                cells[self._index(pos)] = state
        return Board(cells)

    def applying_move(
        self, move: Move
    ) -> tuple[Board, frozenset[BoardPosition]] | None:
        """Place and flip for *move*; None when it captures nothing."""
        captured = self.captured_positions(move.player, move.position)
        if not captured:
            return None
        disc = move.player.cell_state
        placements = {pos: disc for pos in captured}
        placements[move.position] = disc
        return self.placing(placements), captured

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard opening: two discs each on the centre diagonals."""
        return cls().placing(
            {
                BoardPosition(3, 3): CellState.WHITE,
                BoardPosition(3, 4): CellState.BLACK,
                BoardPosition(4, 3): CellState.BLACK,
                BoardPosition(4, 4): CellState.WHITE,
            }
        )

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> Board:
        """Build a board from 8 strings of ``X`` (black), ``O`` (white), ``.``."""
        lookup = {symbol: state for state, symbol in _SYMBOLS.items()}
        cells: list[CellState] = []
        for line in rows:
            text = line.replace(" ", "")
            if len(text) != BOARD_SIZE:
                raise ValueError(f"Row must have {BOARD_SIZE} cells: {line!r}")
            try:
                cells.extend(lookup[ch.upper()] for ch in text)
            except KeyError as exc:
                raise ValueError(f"Unknown cell symbol in row {line!r}") from exc
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        rows = ["  A B C D E F G H"]
        for row in range(BOARD_SIZE):
            line = " ".join(_SYMBOLS[self.cell(row, col)] for col in range(BOARD_SIZE))
            rows.append(f"{BOARD_SIZE - row} {line}")
        return "\n".join(rows)
