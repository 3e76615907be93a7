"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Cell, Engine, GameSession, DESKTOP, MOBILE


# Mine layouts on a 5x5 grid. With mines at (1,1) and (2,2) the grid reads:
#
#     1 1 1 0 0
#     1 * 2 1 0
#     1 2 * 1 0
#     0 1 1 1 0
#     0 0 0 0 0
TWO_MINES = [(1, 1), (2, 2)]
FOUR_MINES = [(1, 1), (1, 3), (3, 1), (3, 3)]


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def two_mine_session() -> GameSession:
    """5x5 session with mines at (1,1) and (2,2)."""
    return GameSession.from_mine_positions(5, TWO_MINES)


@pytest.fixture
def four_mine_session() -> GameSession:
    """5x5 session with four mines and no zero cells."""
    return GameSession.from_mine_positions(5, FOUR_MINES)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


# ============================================================================
# Engine Fixtures
# ============================================================================

@pytest.fixture
def engine(rng: random.Random) -> Engine:
    """Desktop engine with a seeded random source."""
    return Engine(DESKTOP, rng=rng)


@pytest.fixture
def mobile_engine(rng: random.Random) -> Engine:
    """Mobile engine with a seeded random source."""
    return Engine(MOBILE, rng=rng)


@pytest.fixture
def two_mine_engine(engine: Engine, two_mine_session: GameSession) -> Engine:
    """Desktop engine playing the two-mine layout."""
    engine.resume(two_mine_session)
    return engine


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)
