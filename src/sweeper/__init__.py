"""
Minesweeper engine.

Provides the core game logic: grid and cells, mine placement, reveal and
chord rules, session state, difficulty progression and save files.
"""
from .cell import Cell, CellState
from .grid import Grid, MIN_GRID_SIZE
from .placement import mine_count_for, place_mines, place_mines_at, compute_adjacency
from .session import GameSession, Outcome, SessionSnapshot
from .reveal import reveal, reveal_all_mines, chord_reveal, toggle_flag
from .progression import (
    PlatformTier,
    PlatformConfig,
    DESKTOP,
    MOBILE,
    next_grid_size,
    parse_grid_size,
    clamp_grid_size,
    resolve_custom_size,
)
from .codec import PersistenceError, serialize, deserialize, read_session, write_session
from .engine import Engine

__all__ = [
    "Cell",
    "CellState",
    "Grid",
    "MIN_GRID_SIZE",
    "mine_count_for",
    "place_mines",
    "place_mines_at",
    "compute_adjacency",
    "GameSession",
    "Outcome",
    "SessionSnapshot",
    "reveal",
    "reveal_all_mines",
    "chord_reveal",
    "toggle_flag",
    "PlatformTier",
    "PlatformConfig",
    "DESKTOP",
    "MOBILE",
    "next_grid_size",
    "parse_grid_size",
    "clamp_grid_size",
    "resolve_custom_size",
    "PersistenceError",
    "serialize",
    "deserialize",
    "read_session",
    "write_session",
    "Engine",
]
