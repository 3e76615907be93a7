"""
Minesweeper front ends.

Adapters around the engine: pointer/tap input, text rendering, the
console game and a Gymnasium environment for automated players.
"""
from .input import (
    BoardLayout,
    InputAction,
    InputConfig,
    PointerAdapter,
    PointerButton,
    PointerEvent,
    screen_to_game,
)
from .text import render_board, render_status
from .console import ConsoleGame
from .environment import MinesweeperEnv, RandomPlayer, RewardConfig

__all__ = [
    "BoardLayout",
    "InputAction",
    "InputConfig",
    "PointerAdapter",
    "PointerButton",
    "PointerEvent",
    "screen_to_game",
    "render_board",
    "render_status",
    "ConsoleGame",
    "MinesweeperEnv",
    "RandomPlayer",
    "RewardConfig",
]
