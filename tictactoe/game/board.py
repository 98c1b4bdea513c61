"""
Board snapshots and win detection for Tic-Tac-Toe.

Cells are indexed 0-8 in row-major order:

    0 | 1 | 2
    3 | 4 | 5
    6 | 7 | 8
"""

import enum

BOARD_SIZE = 9

WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


class Cell(enum.Enum):
    EMPTY = ""
    X = "X"
    O = "O"

    @property
    def label(self):
        return self.value

    def opponent(self):
        if self is Cell.X:
            return Cell.O
        if self is Cell.O:
            return Cell.X
        return Cell.EMPTY

    @classmethod
    def from_label(cls, label):
        """Map a display label ('X', 'O' or '') back to a Cell."""
        try:
            return cls(label)
        except ValueError:
            raise ValueError(f"Unknown cell label: {label!r}") from None


class Board:
    """Immutable 9-cell snapshot. `place` returns a new Board."""

    __slots__ = ("_cells",)

    def __init__(self, cells=None):
        if cells is None:
            cells = (Cell.EMPTY,) * BOARD_SIZE
        cells = tuple(cells)
        if len(cells) != BOARD_SIZE:
            raise ValueError(f"A board has {BOARD_SIZE} cells, got {len(cells)}")
        if not all(isinstance(c, Cell) for c in cells):
            raise ValueError("Board cells must be Cell values")
        self._cells = cells

    @classmethod
    def empty(cls):
        return cls()

    @classmethod
    def from_labels(cls, labels):
        return cls(Cell.from_label(label) for label in labels)

    def __getitem__(self, position):
        return self._cells[position]

    def __iter__(self):
        return iter(self._cells)

    def __len__(self):
        return BOARD_SIZE

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"<Board {''.join(c.value or '.' for c in self._cells)}>"

    def is_empty(self, position):
        return self._cells[position] is Cell.EMPTY

    def place(self, position, mark):
        """
        Return a copy of this board with `mark` at `position`.

        Raises:
            ValueError: if the mark is EMPTY or the cell is already taken.
        """
        if mark is Cell.EMPTY:
            raise ValueError("Cannot place EMPTY")
        if not self.is_empty(position):
            raise ValueError(f"Cell {position} is occupied")
        cells = list(self._cells)
        cells[position] = mark
        return Board(cells)

    def labels(self):
        return [c.label for c in self._cells]

    def mark_count(self):
        return sum(1 for c in self._cells if c is not Cell.EMPTY)

    def diff(self, other):
        """Positions whose cell differs between this board and `other`."""
        return [i for i in range(BOARD_SIZE) if self._cells[i] is not other[i]]

    def to_text(self):
        rows = []
        for start in range(0, BOARD_SIZE, 3):
            row = self._cells[start:start + 3]
            rows.append(" | ".join(c.value or " " for c in row))
        return "\n---------\n".join(rows)


def check_winner(board):
    """
    Return the mark that owns a complete line on `board`, or None.

    Lines are checked in WIN_LINES order and the first match wins. A full
    board with no line is not reported as a draw.
    """
    for a, b, c in WIN_LINES:
        if board[a] is not Cell.EMPTY and board[a] is board[b] is board[c]:
            return board[a]
    return None
