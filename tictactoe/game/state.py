"""
Game state with move history and time travel.

Only the history of board snapshots and the index of the snapshot being
viewed are stored. Turn, winner and status are always derived from them.
"""

from dataclasses import dataclass
from typing import Optional

from tictactoe.game.board import BOARD_SIZE, Board, Cell, check_winner

REASON_GAME_OVER = "game_over"
REASON_OCCUPIED = "occupied"
REASON_OUT_OF_RANGE = "out_of_range"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of GameState.play. A rejected move never changes state."""
    accepted: bool
    reason: str = ""
    winner: Optional[Cell] = None

    @staticmethod
    def ok(winner=None):
        return MoveResult(accepted=True, winner=winner)

    @staticmethod
    def fail(reason):
        return MoveResult(accepted=False, reason=reason)


def _is_index(value):
    return isinstance(value, int) and not isinstance(value, bool)


class GameState:
    def __init__(self):
        self._history = [Board.empty()]
        self._current_move = 0

    # -------------------------
    # Derived views
    # -------------------------

    @property
    def history(self):
        return tuple(self._history)

    @property
    def current_move(self):
        return self._current_move

    @property
    def current_board(self):
        return self._history[self._current_move]

    @property
    def x_is_next(self):
        return self._current_move % 2 == 0

    @property
    def next_mark(self):
        return Cell.X if self.x_is_next else Cell.O

    @property
    def winner(self):
        return check_winner(self.current_board)

    @property
    def status(self):
        winner = self.winner
        if winner is not None:
            return f"Winner: {winner.label}"
        return f"Next player: {self.next_mark.label}"

    def moves(self):
        """Entries for the move list as (move, description) pairs."""
        entries = []
        for move in range(len(self._history)):
            if move > 0:
                entries.append((move, f"Go to move #{move}"))
            else:
                entries.append((move, "Go to game start"))
        return entries

    # -------------------------
    # Mutations
    # -------------------------

    def play(self, position):
        """
        Place the mark whose turn it is at `position` (0-8).

        Moves after a win, onto an occupied cell, or outside the board are
        rejected without touching history. An accepted move discards every
        snapshot after the current one before appending the new board.
        """
        if not _is_index(position) or not 0 <= position < BOARD_SIZE:
            return MoveResult.fail(REASON_OUT_OF_RANGE)

        board = self.current_board
        if check_winner(board) is not None:
            return MoveResult.fail(REASON_GAME_OVER)
        if not board.is_empty(position):
            return MoveResult.fail(REASON_OCCUPIED)

        next_board = board.place(position, self.next_mark)
        self._history = self._history[:self._current_move + 1] + [next_board]
        self._current_move = len(self._history) - 1
        return MoveResult.ok(winner=check_winner(next_board))

    def jump_to(self, move):
        """Point at history[move]. Out-of-range moves are rejected, not clamped."""
        if not _is_index(move) or not 0 <= move < len(self._history):
            return False
        self._current_move = move
        return True

    # -------------------------
    # Serialization
    # -------------------------

    def to_dict(self):
        return {
            "history": [board.labels() for board in self._history],
            "current_move": self._current_move,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Rebuild a game from `to_dict` output.

        Raises:
            ValueError: if the data does not describe a reachable history.
        """
        try:
            rows = data["history"]
            current_move = data["current_move"]
        except (KeyError, TypeError):
            raise ValueError("Game data needs 'history' and 'current_move'") from None

        if not isinstance(rows, list) or not rows:
            raise ValueError("History must be a non-empty list")
        try:
            history = [Board.from_labels(row) for row in rows]
        except TypeError:
            raise ValueError("History rows must be lists of cell labels") from None

        if history[0] != Board.empty():
            raise ValueError("History must start from an empty board")
        for k in range(1, len(history)):
            changed = history[k].diff(history[k - 1])
            expected = Cell.X if k % 2 == 1 else Cell.O
            if (len(changed) != 1
                    or not history[k - 1].is_empty(changed[0])
                    or history[k][changed[0]] is not expected):
                raise ValueError(f"History step {k} is not a single {expected.label} move")
            if check_winner(history[k - 1]) is not None:
                raise ValueError(f"History continues after a win at step {k - 1}")

        if not _is_index(current_move) or not 0 <= current_move < len(history):
            raise ValueError(f"current_move {current_move!r} is out of range")

        game = cls()
        game._history = history
        game._current_move = current_move
        return game

    def view(self):
        """JSON-ready snapshot of everything the page renders."""
        winner = self.winner
        return {
            "board": self.current_board.labels(),
            "x_is_next": self.x_is_next,
            "next_player": self.next_mark.label,
            "winner": winner.label if winner else None,
            "status": self.status,
            "current_move": self._current_move,
            "moves": [
                {"move": move, "description": description}
                for move, description in self.moves()
            ],
        }
