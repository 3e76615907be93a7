"""
Mine placement and adjacency computation.

Mines are scattered by rejection sampling so the four corners always stay
safe; adjacency counts are computed once placement is complete.
"""
import random
from typing import Iterable

from .grid import Grid, Position


# ============================================================================
# Constants
# ============================================================================

MINE_DENSITY_PERCENT = 15
SAFE_CORNERS = 4


def mine_count_for(size: int) -> int:
    """Number of mines for an N x N session: max(1, floor(0.15 * N^2))."""
    return max(1, MINE_DENSITY_PERCENT * size * size // 100)


# ============================================================================
# Placement
# ============================================================================

def place_mines(grid: Grid, mine_count: int, rng: random.Random) -> None:
    """
    Place mines uniformly at random, never on a corner.

    Draws a random (row, col); a corner or an already mined cell is
    redrawn until mine_count distinct cells are mined.

    Args:
        grid: Freshly created grid to mine.
        mine_count: Number of mines to place.
        rng: Random source.
    """
    if mine_count < 0:
        raise ValueError("Number of mines cannot be negative")
    max_mines = grid.area - SAFE_CORNERS
    if mine_count > max_mines:
        raise ValueError(f"Too many mines (max {max_mines})")

    placed = 0
    while placed < mine_count:
        row = rng.randrange(grid.size)
        col = rng.randrange(grid.size)
        cell = grid.cell(row, col)
        if grid.is_corner(row, col) or cell.is_mine:
            continue
        cell.is_mine = True
        placed += 1


def place_mines_at(grid: Grid, positions: Iterable[Position]) -> int:
    """
    Mine exactly the given positions.

    Args:
        grid: Freshly created grid to mine.
        positions: (row, col) pairs to mine.

    Returns:
        Number of mines placed.
    """
    placed = 0
    for row, col in positions:
        cell = grid.cell(row, col)
        if cell is None:
            raise ValueError(f"Mine position out of bounds: ({row}, {col})")
        if grid.is_corner(row, col):
            raise ValueError(f"Mines cannot be placed on a corner: ({row}, {col})")
        if cell.is_mine:
            raise ValueError(f"Duplicate mine position: ({row}, {col})")
        cell.is_mine = True
        placed += 1
    return placed


# ============================================================================
# Adjacency
# ============================================================================

def compute_adjacency(grid: Grid) -> None:
    """Store the mined-neighbour count in every non-mine cell."""
    for row, col, cell in grid:
        if cell.is_mine:
            continue
        cell.adjacent_mines = count_adjacent_mines(grid, row, col)


def count_adjacent_mines(grid: Grid, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell."""
    count = 0
    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        if grid.cell(neighbor_row, neighbor_col).is_mine:
            count += 1
    return count
