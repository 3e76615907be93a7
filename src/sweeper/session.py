"""
Game session: the aggregate that owns one grid from creation until the
player acknowledges its outcome.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional

import numpy as np

from .cell import CellState
from .grid import Grid, Position
from .placement import (
    compute_adjacency,
    mine_count_for,
    place_mines,
    place_mines_at,
)


# ============================================================================
# Constants
# ============================================================================

class Outcome(Enum):
    """Possible outcomes of a session."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Session
# ============================================================================

@dataclass
class GameSession:
    """
    One playthrough of a single grid.

    Attributes:
        grid: The cells of this session.
        mine_count: Total mines on the grid.
        remaining_safe_cells: Non-mine cells still to be revealed.
        elapsed_time: Seconds played so far.
        outcome: Whether the session is still running, won or lost.
        pending_advance: Set once the outcome is final; the session then
            waits for the acknowledgment gesture.
    """

    grid: Grid
    mine_count: int
    remaining_safe_cells: int
    elapsed_time: float = 0.0
    outcome: Outcome = Outcome.IN_PROGRESS
    pending_advance: bool = False

    @classmethod
    def new(cls, size: int, rng: Optional[random.Random] = None) -> "GameSession":
        """
        Create a session with randomly placed mines.

        Args:
            size: Grid side length.
            rng: Random source (default: a fresh unseeded one).

        Returns:
            A session ready to play.
        """
        grid = Grid(size)
        mine_count = mine_count_for(size)
        place_mines(grid, mine_count, rng or random.Random())
        compute_adjacency(grid)
        return cls(
            grid=grid,
            mine_count=mine_count,
            remaining_safe_cells=grid.area - mine_count,
        )

    @classmethod
    def from_mine_positions(
        cls, size: int, positions: Iterable[Position]
    ) -> "GameSession":
        """Create a session whose mines sit exactly at the given positions."""
        grid = Grid(size)
        mine_count = place_mines_at(grid, positions)
        compute_adjacency(grid)
        return cls(
            grid=grid,
            mine_count=mine_count,
            remaining_safe_cells=grid.area - mine_count,
        )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def size(self) -> int:
        """Grid side length."""
        return self.grid.size

    @property
    def is_playing(self) -> bool:
        """Check if the session still accepts moves."""
        return self.outcome == Outcome.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if the session was won."""
        return self.outcome == Outcome.WON

    @property
    def is_lost(self) -> bool:
        """Check if the session was lost."""
        return self.outcome == Outcome.LOST

    @property
    def remaining_mines(self) -> int:
        """Mine counter shown to the player: mines minus flags placed."""
        return self.mine_count - self.grid.count_state(CellState.FLAGGED)

    def finish(self, outcome: Outcome) -> None:
        """Record a final outcome and start waiting for acknowledgment."""
        self.outcome = outcome
        self.pending_advance = True

    def snapshot(self) -> "SessionSnapshot":
        """Read-only view of this session for renderers."""
        board = self.grid.get_observation()
        board.flags.writeable = False
        return SessionSnapshot(
            board=board,
            outcome=self.outcome,
            remaining_mines=self.remaining_mines,
            elapsed_time=self.elapsed_time,
            grid_size=self.size,
            pending_advance=self.pending_advance,
        )


# ============================================================================
# Snapshot
# ============================================================================

@dataclass(frozen=True)
class SessionSnapshot:
    """What a renderer needs to draw one frame."""

    board: np.ndarray = field(repr=False, compare=False)
    outcome: Outcome
    remaining_mines: int
    elapsed_time: float
    grid_size: int
    pending_advance: bool
