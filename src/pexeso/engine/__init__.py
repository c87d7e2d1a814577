"""Deterministic, headless rules for the Pexeso board.

IMPORTANT: This package must never import pygame.
"""

from .actions import ClickAction
from .board import BoardConfig, BoardState, StepResult, is_game_won, new_board, replay, step
from .types import Card, Idle, OneSelected, Rect, TwoPending

__all__ = [
    "BoardConfig",
    "BoardState",
    "Card",
    "ClickAction",
    "Idle",
    "OneSelected",
    "Rect",
    "StepResult",
    "TwoPending",
    "is_game_won",
    "new_board",
    "replay",
    "step",
]
