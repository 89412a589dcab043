from __future__ import annotations

from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from hexapawn.core import (
    ACTION_VECTOR_SIZE,
    BOARD_SIZE,
    GameState,
    Player,
    apply_action,
    decode_action,
    is_terminal,
    legal_action_mask,
    new_game,
    result,
    winner,
)
from hexapawn.features import BOARD_CHANNELS, VECTOR_SIZE, build_board_tensor, to_vector


class HexapawnEnv(gym.Env):
    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        board_shape = (BOARD_CHANNELS, BOARD_SIZE, BOARD_SIZE)
        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=board_shape, dtype=np.float32),
                "vector": spaces.Box(low=-1.0, high=1.0, shape=(VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(ACTION_VECTOR_SIZE)

        self._state = new_game()

    @property
    def state(self) -> GameState:
        return self._state

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._state = new_game()
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        if is_terminal(self._state):
            raise ValueError("Episode has terminated; call reset() before stepping again.")

        action = decode_action(int(action_index))
        if self._enforce_legal:
            if not self.legal_action_mask()[action_index]:
                raise ValueError("Illegal action provided and enforce_legal_actions=True.")
            self._state = apply_action(self._state, action)
        else:
            self._state = result(self._state, action)

        terminated = is_terminal(self._state)
        reward = self._compute_reward(winner(self._state) if terminated else None)
        truncated = False

        return self._build_observation(), reward, terminated, truncated, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        return legal_action_mask(self._state)

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return str(self._state)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> Dict[str, np.ndarray]:
        board = build_board_tensor(self._state)
        vector = to_vector(self._state).astype(np.float32)
        return {"board": board, "vector": vector}

    def _build_info(self) -> Dict[str, np.ndarray]:
        return {"legal_action_mask": self.legal_action_mask(), "player": self._state.player}

    def _compute_reward(self, victor: Optional[Player]) -> float:
        if victor is Player.MAX:
            return 1.0
        if victor is Player.MIN:
            return -1.0
        return 0.0
