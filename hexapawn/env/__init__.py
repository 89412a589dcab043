"""Gymnasium environment for Hexapawn."""

from .gym_env import HexapawnEnv

__all__ = ["HexapawnEnv"]
