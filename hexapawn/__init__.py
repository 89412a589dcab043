"""Hexapawn game engine."""

from . import core, env, features, evaluation
from .core import (
    ActionKind,
    GameState,
    IllegalActionError,
    Location,
    OutOfBoundsError,
    Player,
    PlayerAction,
    actions,
    apply_action,
    is_terminal,
    new_game,
    result,
    winner,
)
from .env import HexapawnEnv
from .features import build_board_tensor, state_to_numpy, state_to_torch, to_vector
from .evaluation import (
    EvaluationResult,
    FirstLegalPolicy,
    MatchConfig,
    Policy,
    RandomPolicy,
    evaluate_policies,
)

__all__ = [
    "core",
    "env",
    "features",
    "evaluation",
    "ActionKind",
    "GameState",
    "IllegalActionError",
    "Location",
    "OutOfBoundsError",
    "Player",
    "PlayerAction",
    "actions",
    "apply_action",
    "is_terminal",
    "new_game",
    "result",
    "winner",
    "HexapawnEnv",
    "build_board_tensor",
    "state_to_numpy",
    "state_to_torch",
    "to_vector",
    "EvaluationResult",
    "FirstLegalPolicy",
    "MatchConfig",
    "Policy",
    "RandomPolicy",
    "evaluate_policies",
]
