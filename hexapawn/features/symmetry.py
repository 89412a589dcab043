"""Board symmetries that preserve the direction of play.

Rows encode direction, so the only non-trivial symmetry is the column mirror.
Mirroring turns every capture-left into a capture-right and vice versa.
"""

from __future__ import annotations

from enum import Enum, auto
from functools import lru_cache
from typing import Tuple

import numpy as np

from hexapawn.core import (
    ACTION_VECTOR_SIZE,
    BOARD_SIZE,
    ActionKind,
    GameState,
    Location,
    PlayerAction,
    decode_action,
    encode_action,
)


class Transform(Enum):
    IDENTITY = auto()
    MIRROR = auto()


_MIRRORED_KIND = {
    ActionKind.ADVANCE: ActionKind.ADVANCE,
    ActionKind.CAPTURE_LEFT: ActionKind.CAPTURE_RIGHT,
    ActionKind.CAPTURE_RIGHT: ActionKind.CAPTURE_LEFT,
}


def all_transforms() -> Tuple[Transform, ...]:
    return tuple(Transform)


def transform_location(transform: Transform, loc: Location) -> Location:
    if transform is Transform.IDENTITY:
        return loc
    return Location(loc.row, BOARD_SIZE - 1 - loc.col)


def transform_action(transform: Transform, action: PlayerAction) -> PlayerAction:
    if transform is Transform.IDENTITY:
        return action
    return PlayerAction(_MIRRORED_KIND[action.kind], transform_location(transform, action.src))


def transform_state(transform: Transform, state: GameState) -> GameState:
    if transform is Transform.IDENTITY:
        return state
    return GameState(player=state.player, board=np.ascontiguousarray(state.board[:, ::-1]))


@lru_cache(maxsize=None)
def policy_permutation(transform: Transform) -> np.ndarray:
    """Return permutation array P such that new_policy = old_policy[P]. Mirroring is its own inverse."""
    perm = np.empty(ACTION_VECTOR_SIZE, dtype=np.int64)
    for index in range(ACTION_VECTOR_SIZE):
        perm[index] = encode_action(transform_action(transform, decode_action(index)))
    perm.flags.writeable = False
    return perm


def apply_policy_transform(policy: np.ndarray, transform: Transform) -> np.ndarray:
    if policy.shape[-1] != ACTION_VECTOR_SIZE:
        raise ValueError(f"Policy must have {ACTION_VECTOR_SIZE} entries, got {policy.shape[-1]}.")
    return policy[..., policy_permutation(transform)]
