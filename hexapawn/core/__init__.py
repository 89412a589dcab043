"""Core game logic for Hexapawn."""

from .state import (
    BOARD_SIZE,
    EMPTY,
    ActionKind,
    GameState,
    Location,
    Player,
    PlayerAction,
    new_game,
)
from .rules import (
    ACTION_KINDS,
    ACTION_VECTOR_SIZE,
    HexapawnError,
    IllegalActionError,
    OutOfBoundsError,
    actions,
    advance,
    apply_action,
    capture_left,
    capture_right,
    check_action,
    check_advance,
    check_capture_left,
    check_capture_right,
    decode_action,
    destination,
    encode_action,
    is_in_bounds,
    is_terminal,
    legal_action_mask,
    result,
    update,
    winner,
)

__all__ = [
    "BOARD_SIZE",
    "EMPTY",
    "ActionKind",
    "GameState",
    "Location",
    "Player",
    "PlayerAction",
    "new_game",
    "ACTION_KINDS",
    "ACTION_VECTOR_SIZE",
    "HexapawnError",
    "IllegalActionError",
    "OutOfBoundsError",
    "actions",
    "advance",
    "apply_action",
    "capture_left",
    "capture_right",
    "check_action",
    "check_advance",
    "check_capture_left",
    "check_capture_right",
    "decode_action",
    "destination",
    "encode_action",
    "is_in_bounds",
    "is_terminal",
    "legal_action_mask",
    "result",
    "update",
    "winner",
]
