from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from hexapawn.core import Player, winner
from hexapawn.env import HexapawnEnv

from .policies import Policy

logger = logging.getLogger(__name__)


@dataclass
class MatchConfig:
    episodes: int = 100
    seed: Optional[int] = None
    max_ply: int = 32  # hexapawn games end within 12 plies; this only guards broken policies


@dataclass
class EvaluationResult:
    games_played: int
    max_wins: int
    min_wins: int
    average_length: float

    def winrate_max(self) -> float:
        return self.max_wins / max(1, self.games_played)

    def winrate_min(self) -> float:
        return self.min_wins / max(1, self.games_played)


def _sample_action(probs: np.ndarray, legal_mask: np.ndarray, rng: np.random.Generator) -> int:
    probs = probs.astype(np.float64) * legal_mask
    if probs.sum() <= 0:
        probs = legal_mask.astype(np.float64)
    probs = probs / probs.sum()
    return int(rng.choice(len(probs), p=probs))


def evaluate_policies(
    policy_max: Policy,
    policy_min: Policy,
    config: Optional[MatchConfig] = None,
    *,
    env_factory: Optional[Callable[[], HexapawnEnv]] = None,
) -> EvaluationResult:
    config = config or MatchConfig()
    env_factory = env_factory or HexapawnEnv
    rng = np.random.default_rng(config.seed)

    max_wins = 0
    min_wins = 0
    total_ply = 0

    for episode in range(config.episodes):
        env = env_factory()
        obs, info = env.reset(seed=None if config.seed is None else config.seed + episode)
        terminated = False
        ply = 0

        while not terminated:
            if ply >= config.max_ply:
                raise RuntimeError(f"Episode {episode} exceeded {config.max_ply} plies.")
            state = env.state
            legal_mask = info["legal_action_mask"]
            policy = policy_max if state.player is Player.MAX else policy_min
            action_index = _sample_action(policy.act(state, legal_mask), legal_mask, rng)
            obs, reward, terminated, truncated, info = env.step(action_index)
            ply += 1

        total_ply += ply
        if winner(env.state) is Player.MAX:
            max_wins += 1
        else:
            min_wins += 1

    evaluation = EvaluationResult(
        games_played=config.episodes,
        max_wins=max_wins,
        min_wins=min_wins,
        average_length=total_ply / max(1, config.episodes),
    )
    logger.info(
        "Played %d games: Max %d, Min %d, average length %.2f",
        evaluation.games_played,
        evaluation.max_wins,
        evaluation.min_wins,
        evaluation.average_length,
    )
    return evaluation
