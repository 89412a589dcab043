from __future__ import annotations

import numpy as np

from hexapawn.core import GameState, actions, encode_action


class Policy:
    """Policy interface producing action probabilities over legal moves."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        raise NotImplementedError


class RandomPolicy(Policy):
    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        logits = legal_mask.astype(np.float64)
        if logits.sum() == 0:
            return logits.astype(np.float32)
        probs = logits / logits.sum()
        return probs.astype(np.float32, copy=True)


class FirstLegalPolicy(Policy):
    """Always plays the first action in enumeration order."""

    def act(self, state: GameState, legal_mask: np.ndarray) -> np.ndarray:
        probs = np.zeros_like(legal_mask, dtype=np.float32)
        legal = actions(state)
        if legal:
            probs[encode_action(legal[0])] = 1.0
        return probs
