"""
Grid module for the Minesweeper engine.

A square matrix of cells with the bounds and neighbour helpers the
placement and reveal modules build on.
"""
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell, CellState


# ============================================================================
# Constants
# ============================================================================

MIN_GRID_SIZE = 3

# Moore neighbourhood offsets, in the order neighbours are visited
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)

Position = Tuple[int, int]


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Square N x N matrix of cells.

    The grid owns its cells; sessions replace the whole grid rather
    than resizing it.
    """

    def __init__(self, size: int) -> None:
        """
        Create a grid of hidden, mine-free cells.

        Args:
            size: Side length of the grid.
        """
        if size < 1:
            raise ValueError("Grid size must be positive")
        self._size = size
        self._cells: List[List[Cell]] = [
            [Cell() for _ in range(size)] for _ in range(size)
        ]

    # ========================================================================
    # Geometry (Low-level)
    # ========================================================================

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self._size

    @property
    def area(self) -> int:
        """Total number of cells."""
        return self._size * self._size

    def is_valid(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self._size and 0 <= col < self._size

    def corners(self) -> Tuple[Position, ...]:
        """The four corner positions."""
        last = self._size - 1
        return ((0, 0), (0, last), (last, 0), (last, last))

    def is_corner(self, row: int, col: int) -> bool:
        """Check if position is one of the four corners."""
        return (row, col) in self.corners()

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get neighbouring positions, clipped at the grid edges.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples in a fixed scan order.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Cell Access (Mid-level)
    # ========================================================================

    def cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.is_valid(row, col):
            return None
        return self._cells[row][col]

    def __iter__(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield row, col, self._cells[row][col]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid(size={self._size}, mines={len(self.mine_positions())})"

    # ========================================================================
    # Queries (High-level)
    # ========================================================================

    def mine_positions(self) -> List[Position]:
        """Positions of every mined cell, row-major."""
        return [(row, col) for row, col, cell in self if cell.is_mine]

    def count_state(self, state: CellState) -> int:
        """Count cells currently in the given state."""
        return sum(1 for _, _, cell in self if cell.state == state)

    def count_revealed_safe(self) -> int:
        """Count revealed cells that are not mines."""
        return sum(
            1 for _, _, cell in self if cell.is_revealed and not cell.is_mine
        )

    def get_observation(self) -> np.ndarray:
        """
        Get the grid as seen by the player.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self._size, self._size), dtype=np.int8)
        for row, col, cell in self:
            obs[row, col] = cell.to_observation()
        return obs
