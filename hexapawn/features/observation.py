from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
import torch

from hexapawn.core import BOARD_SIZE, GameState, Player

BOARD_CHANNELS = 2  # one plane per player: Max, Min
VECTOR_SIZE = 1 + BOARD_SIZE * BOARD_SIZE  # player marker + cells


def to_vector(state: GameState) -> np.ndarray:
    """Return the player to move followed by the nine cells in row-major order."""
    vector = np.empty((VECTOR_SIZE,), dtype=np.int8)
    vector[0] = state.player.value
    vector[1:] = state.board.reshape(-1)
    return vector


def build_board_tensor(state: GameState) -> np.ndarray:
    """Return board tensor with shape (2, 3, 3) channel-first."""
    tensor = np.zeros((BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE), dtype=np.float32)
    tensor[0] = state.board == Player.MAX
    tensor[1] = state.board == Player.MIN
    return tensor


def state_to_numpy(state: GameState) -> Tuple[np.ndarray, np.ndarray]:
    return build_board_tensor(state), to_vector(state).astype(np.float32)


def state_to_torch(
    state: GameState,
    *,
    device: Optional[torch.device] = None,
    dtype: torch.dtype = torch.float32,
) -> Tuple[torch.Tensor, torch.Tensor]:
    board_np, vector_np = state_to_numpy(state)
    board = torch.from_numpy(board_np).to(device=device, dtype=dtype)
    vector = torch.from_numpy(vector_np).to(device=device, dtype=dtype)
    return board, vector
