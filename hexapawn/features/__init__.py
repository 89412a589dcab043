"""Feature extraction helpers for Hexapawn."""

from .observation import (
    BOARD_CHANNELS,
    VECTOR_SIZE,
    build_board_tensor,
    state_to_numpy,
    state_to_torch,
    to_vector,
)
from .symmetry import (
    Transform,
    all_transforms,
    apply_policy_transform,
    policy_permutation,
    transform_action,
    transform_location,
    transform_state,
)

__all__ = [
    "BOARD_CHANNELS",
    "VECTOR_SIZE",
    "build_board_tensor",
    "state_to_numpy",
    "state_to_torch",
    "to_vector",
    "Transform",
    "all_transforms",
    "apply_policy_transform",
    "policy_permutation",
    "transform_action",
    "transform_location",
    "transform_state",
]
