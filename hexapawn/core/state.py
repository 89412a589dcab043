from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Iterable, Tuple

import numpy as np
from numpy.typing import NDArray

BoardArray = NDArray[np.int8]

BOARD_SIZE = 3
EMPTY = 0


class Player(IntEnum):
    MAX = 1
    MIN = -1

    def next(self) -> "Player":
        return Player.MIN if self is Player.MAX else Player.MAX

    @property
    def direction(self) -> int:
        """Row step of a forward move."""
        return int(self)

    @property
    def far_row(self) -> int:
        return BOARD_SIZE - 1 if self is Player.MAX else 0

    def __str__(self) -> str:
        return self.name.capitalize()


class ActionKind(Enum):
    ADVANCE = "Advance"
    CAPTURE_LEFT = "CaptureLeft"
    CAPTURE_RIGHT = "CaptureRight"

    @property
    def column_step(self) -> int:
        if self is ActionKind.CAPTURE_LEFT:
            return -1
        if self is ActionKind.CAPTURE_RIGHT:
            return 1
        return 0

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Location:
    row: int
    col: int

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


@dataclass(frozen=True)
class PlayerAction:
    kind: ActionKind
    src: Location

    def __str__(self) -> str:
        return f"Action: {self.kind} @ {self.src}"


@dataclass(frozen=True, eq=False)
class GameState:
    player: Player
    board: BoardArray = field(repr=False)  # shape (3, 3), dtype=np.int8, values -1, 0 or 1

    def __post_init__(self) -> None:
        board = np.array(self.board, dtype=np.int8)
        if board.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must have shape {(BOARD_SIZE, BOARD_SIZE)}, got {board.shape}.")
        if not np.isin(board, (Player.MIN, EMPTY, Player.MAX)).all():
            raise ValueError("Board cells must be -1, 0 or 1.")
        board.flags.writeable = False
        object.__setattr__(self, "board", board)
        object.__setattr__(self, "player", Player(self.player))

    def copy_board(self) -> BoardArray:
        """Return a writable copy of the board."""
        return self.board.copy()

    def occupied_positions(self, player: Player) -> Iterable[Location]:
        for r, c in np.argwhere(self.board == int(player)):
            yield Location(int(r), int(c))

    def piece_count(self) -> int:
        return int(np.count_nonzero(self.board))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return self.player == other.player and np.array_equal(self.board, other.board)

    def __hash__(self) -> int:
        return hash((int(self.player), self.board.tobytes()))

    def __str__(self) -> str:
        rows = "\n".join("[" + ", ".join(f"{int(cell):3}" for cell in row) + "]" for row in self.board)
        return f"\nBoard:\n{rows}\nNext Player: {self.player!s}\n"

    def __repr__(self) -> str:
        return f"GameState(player={self.player!s}, board={self.board.tolist()})"


def new_game() -> GameState:
    board = np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
    board[0, :] = Player.MAX
    board[BOARD_SIZE - 1, :] = Player.MIN
    return GameState(player=Player.MAX, board=board)
