from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

import numpy as np

from .state import (
    BOARD_SIZE,
    EMPTY,
    ActionKind,
    GameState,
    Location,
    Player,
    PlayerAction,
)

logger = logging.getLogger(__name__)

ACTION_KINDS = (ActionKind.ADVANCE, ActionKind.CAPTURE_LEFT, ActionKind.CAPTURE_RIGHT)
ACTION_VECTOR_SIZE = BOARD_SIZE * BOARD_SIZE * len(ACTION_KINDS)


class HexapawnError(ValueError):
    pass


class OutOfBoundsError(HexapawnError):
    pass


class IllegalActionError(HexapawnError):
    pass


def is_in_bounds(loc: Location) -> bool:
    return 0 <= loc.row < BOARD_SIZE and 0 <= loc.col < BOARD_SIZE


def destination(state: GameState, src: Location, kind: ActionKind) -> Location:
    """Square reached from ``src`` by ``kind`` for the player to move. May lie off the board."""
    return Location(src.row + state.player.direction, src.col + kind.column_step)


# ----------------------------------------------------------------------
# Legality
# ----------------------------------------------------------------------
def check_advance(src: Location, state: GameState) -> bool:
    dst = destination(state, src, ActionKind.ADVANCE)
    if not is_in_bounds(dst):
        return False
    return bool(state.board[dst.row, dst.col] == EMPTY)


def check_capture_left(src: Location, state: GameState) -> bool:
    return _check_capture(src, state, ActionKind.CAPTURE_LEFT)


def check_capture_right(src: Location, state: GameState) -> bool:
    return _check_capture(src, state, ActionKind.CAPTURE_RIGHT)


def _check_capture(src: Location, state: GameState, kind: ActionKind) -> bool:
    dst = destination(state, src, kind)
    if not is_in_bounds(dst):
        return False
    return bool(state.board[dst.row, dst.col] == state.player.next().value)


_CHECKS: Dict[ActionKind, Callable[[Location, GameState], bool]] = {
    ActionKind.ADVANCE: check_advance,
    ActionKind.CAPTURE_LEFT: check_capture_left,
    ActionKind.CAPTURE_RIGHT: check_capture_right,
}


def check_action(state: GameState, action: PlayerAction) -> bool:
    return _CHECKS[action.kind](action.src, state)


def actions(state: GameState) -> List[PlayerAction]:
    """Return every legal action for the player to move.

    Sources are scanned row-major; for each source the order is advance,
    capture-left, capture-right. Callers may rely on this order.
    """
    legal: List[PlayerAction] = []
    for src in state.occupied_positions(state.player):
        for kind in ACTION_KINDS:
            if _CHECKS[kind](src, state):
                logger.debug("%s could %s", src, kind)
                legal.append(PlayerAction(kind, src))
    return legal


# ----------------------------------------------------------------------
# Transitions
# ----------------------------------------------------------------------
def update(state: GameState, dst: Location, src: Location) -> GameState:
    """Move the piece at ``src`` onto ``dst`` and hand the turn over.

    Whatever occupied ``dst`` is overwritten, which is how captures remove the
    opposing piece. Legality is not checked here.
    """
    for loc in (src, dst):
        if not is_in_bounds(loc):
            raise OutOfBoundsError(f"Location {loc} is outside the {BOARD_SIZE}x{BOARD_SIZE} board.")

    board = state.copy_board()
    board[dst.row, dst.col] = state.board[src.row, src.col]
    board[src.row, src.col] = EMPTY
    logger.debug("%s moved %s -> %s", state.player, src, dst)
    return GameState(player=state.player.next(), board=board)


def advance(state: GameState, src: Location) -> GameState:
    return update(state, destination(state, src, ActionKind.ADVANCE), src)


def capture_left(state: GameState, src: Location) -> GameState:
    return update(state, destination(state, src, ActionKind.CAPTURE_LEFT), src)


def capture_right(state: GameState, src: Location) -> GameState:
    return update(state, destination(state, src, ActionKind.CAPTURE_RIGHT), src)


_TRANSITIONS: Dict[ActionKind, Callable[[GameState, Location], GameState]] = {
    ActionKind.ADVANCE: advance,
    ActionKind.CAPTURE_LEFT: capture_left,
    ActionKind.CAPTURE_RIGHT: capture_right,
}


def result(state: GameState, action: PlayerAction) -> GameState:
    return _TRANSITIONS[action.kind](state, action.src)


def apply_action(state: GameState, action: PlayerAction) -> GameState:
    """Checked version of :func:`result`."""
    if is_terminal(state):
        raise IllegalActionError("Cannot apply action to a terminal state.")
    src = action.src
    if not is_in_bounds(src):
        raise OutOfBoundsError(f"Source {src} is outside the board.")
    if state.board[src.row, src.col] != state.player.value:
        raise IllegalActionError(f"No {state.player!s} piece at {src}.")
    if not check_action(state, action):
        raise IllegalActionError(f"{action} is not legal for {state.player!s}.")
    return result(state, action)


# ----------------------------------------------------------------------
# Terminal detection
# ----------------------------------------------------------------------
def _reached_far_row(state: GameState, player: Player) -> bool:
    return bool(np.any(state.board[player.far_row] == player.value))


def is_terminal(state: GameState) -> bool:
    if _reached_far_row(state, Player.MIN) or _reached_far_row(state, Player.MAX):
        return True
    return not actions(state)


def winner(state: GameState) -> Optional[Player]:
    """Return the winning player, or ``None`` while the game is still going.

    A player stuck without moves loses.
    """
    if _reached_far_row(state, Player.MIN):
        return Player.MIN
    if _reached_far_row(state, Player.MAX):
        return Player.MAX
    if not actions(state):
        return state.player.next()
    return None


# ----------------------------------------------------------------------
# Action index codec
# ----------------------------------------------------------------------
def encode_action(action: PlayerAction) -> int:
    if not is_in_bounds(action.src):
        raise ValueError(f"Action source {action.src} out of range.")
    base = action.src.row * BOARD_SIZE + action.src.col
    return base * len(ACTION_KINDS) + ACTION_KINDS.index(action.kind)


def decode_action(index: int) -> PlayerAction:
    if not 0 <= index < ACTION_VECTOR_SIZE:
        raise ValueError("Action index out of range.")
    base, kind_index = divmod(index, len(ACTION_KINDS))
    row, col = divmod(base, BOARD_SIZE)
    return PlayerAction(ACTION_KINDS[kind_index], Location(row, col))


def legal_action_mask(state: GameState) -> np.ndarray:
    mask = np.zeros(ACTION_VECTOR_SIZE, dtype=np.int8)
    for action in actions(state):
        mask[encode_action(action)] = 1
    return mask
