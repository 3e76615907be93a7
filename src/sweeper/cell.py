"""
Cell module for the Minesweeper engine.

A cell is one grid position: whether it holds a mine, how many of its
neighbours do, and what the player currently sees there.
"""
from enum import Enum
from dataclasses import dataclass
from typing import Tuple


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """
    Visible state of a cell.

    The values are the ordinals written by the save-file codec.
    """

    HIDDEN = 0
    REVEALED = 1
    FLAGGED = 2


# Observation values shared by the renderers and the agent environment
OBS_HIDDEN = -1
OBS_FLAGGED = -2
OBS_MINE = 9

MAX_ADJACENT = 8

# (is_mine, state ordinal, adjacent_mines) as stored in a save file
CellRecord = Tuple[bool, int, int]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single position on the Minesweeper grid.

    Player moves go through reveal() and toggle_flag(), which only ever
    act on cells in the state the move expects. expose() is reserved for
    showing mines once a session is lost and overrides flags.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines among the 8 neighbours (0-8).
        state: Current visible state.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN

    # ========================================================================
    # Player Moves
    # ========================================================================

    def reveal(self) -> bool:
        """Open a hidden cell. Flagged and revealed cells are left alone."""
        if not self.is_hidden:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Switch between hidden and flagged.

        Returns:
            False for a revealed cell, which cannot carry a flag.
        """
        if self.is_revealed:
            return False
        self.state = CellState.HIDDEN if self.is_flagged else CellState.FLAGGED
        return True

    def expose(self) -> bool:
        """
        Show this cell whatever its state, flags included.

        Returns:
            True if the cell was not revealed before.
        """
        if self.is_revealed:
            return False
        self.state = CellState.REVEALED
        return True

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def is_hidden(self) -> bool:
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Value a renderer or agent sees for this cell.

        Returns:
            OBS_HIDDEN or OBS_FLAGGED for covered cells, OBS_MINE for a
            shown mine, otherwise the adjacent mine count.
        """
        if self.is_hidden:
            return OBS_HIDDEN
        if self.is_flagged:
            return OBS_FLAGGED
        return OBS_MINE if self.is_mine else self.adjacent_mines

    # ========================================================================
    # Save Records
    # ========================================================================

    def to_record(self) -> CellRecord:
        return (self.is_mine, self.state.value, self.adjacent_mines)

    @classmethod
    def from_record(cls, is_mine: bool, state: int, adjacent_mines: int) -> "Cell":
        """
        Rebuild a cell from its stored fields.

        Raises:
            ValueError: If the state ordinal is unknown or the adjacency
                count is outside 0-8.
        """
        try:
            cell_state = CellState(state)
        except ValueError as exc:
            raise ValueError(f"Unknown cell state: {state}") from exc
        if not 0 <= adjacent_mines <= MAX_ADJACENT:
            raise ValueError(f"Adjacent mine count out of range: {adjacent_mines}")
        return cls(is_mine=bool(is_mine), adjacent_mines=adjacent_mines, state=cell_state)
