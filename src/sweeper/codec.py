"""
Binary save-file codec.

Layout (little-endian, packed):
    int32   grid size N
    N*N x   {bool is_mine, int32 state, int32 adjacent_mines}   row-major
    bool    won
    bool    lost
    float32 elapsed time
    int32   remaining safe cells
    int32   mine count

The plain layout has no header. Versioned files prefix it with the magic
b"MSWP" and a one-byte format version; both are accepted on read.
"""
from pathlib import Path
from typing import Union

import numpy as np

from .cell import Cell
from .grid import Grid
from .session import GameSession, Outcome


# ============================================================================
# Constants
# ============================================================================

MAGIC = b"MSWP"
FORMAT_VERSION = 1

SIZE_DTYPE = np.dtype("<i4")
CELL_DTYPE = np.dtype([
    ("is_mine", "?"),
    ("state", "<i4"),
    ("adjacent_mines", "<i4"),
])
FOOTER_DTYPE = np.dtype([
    ("won", "?"),
    ("lost", "?"),
    ("elapsed_time", "<f4"),
    ("remaining_safe_cells", "<i4"),
    ("mine_count", "<i4"),
])

PathLike = Union[str, Path]


class PersistenceError(ValueError):
    """Raised when a byte stream is not a readable saved session."""


# ============================================================================
# Encoding
# ============================================================================

def serialize(session: GameSession, versioned: bool = False) -> bytes:
    """
    Encode a session.

    Args:
        session: Session to encode.
        versioned: Prefix the payload with the magic and format version.

    Returns:
        The encoded bytes.
    """
    cells = np.zeros(session.grid.area, dtype=CELL_DTYPE)
    for index, (_, _, cell) in enumerate(session.grid):
        cells[index] = cell.to_record()

    footer = np.array(
        [(
            session.is_won,
            session.is_lost,
            session.elapsed_time,
            session.remaining_safe_cells,
            session.mine_count,
        )],
        dtype=FOOTER_DTYPE,
    )
    payload = (
        np.array([session.size], dtype=SIZE_DTYPE).tobytes()
        + cells.tobytes()
        + footer.tobytes()
    )
    if versioned:
        return MAGIC + bytes([FORMAT_VERSION]) + payload
    return payload


# ============================================================================
# Decoding
# ============================================================================

def deserialize(data: bytes) -> GameSession:
    """
    Decode a session.

    Args:
        data: Bytes produced by serialize(), with or without header.

    Returns:
        The decoded session.

    Raises:
        PersistenceError: If the stream is truncated, declares an
            impossible size or holds an unknown cell state.
    """
    payload = _strip_header(bytes(data))

    if len(payload) < SIZE_DTYPE.itemsize:
        raise PersistenceError("Truncated save: missing grid size")
    size = int(np.frombuffer(payload, dtype=SIZE_DTYPE, count=1)[0])
    if size < 1:
        raise PersistenceError(f"Invalid grid size in save: {size}")

    area = size * size
    cells_offset = SIZE_DTYPE.itemsize
    footer_offset = cells_offset + area * CELL_DTYPE.itemsize
    expected = footer_offset + FOOTER_DTYPE.itemsize
    if len(payload) < expected:
        raise PersistenceError(
            f"Truncated save: {len(payload)} bytes, grid of {size} needs {expected}"
        )
    if len(payload) > expected:
        raise PersistenceError(
            f"Save size mismatch: {len(payload)} bytes, grid of {size} needs {expected}"
        )

    records = np.frombuffer(payload, dtype=CELL_DTYPE, count=area, offset=cells_offset)
    footer = np.frombuffer(payload, dtype=FOOTER_DTYPE, count=1, offset=footer_offset)[0]

    grid = Grid(size)
    for index, (_, _, cell) in enumerate(grid):
        _decode_cell(records[index], cell)

    if footer["won"]:
        outcome = Outcome.WON
    elif footer["lost"]:
        outcome = Outcome.LOST
    else:
        outcome = Outcome.IN_PROGRESS

    return GameSession(
        grid=grid,
        mine_count=int(footer["mine_count"]),
        remaining_safe_cells=int(footer["remaining_safe_cells"]),
        elapsed_time=float(footer["elapsed_time"]),
        outcome=outcome,
        pending_advance=outcome != Outcome.IN_PROGRESS,
    )


def _strip_header(data: bytes) -> bytes:
    """Drop the magic/version prefix of a versioned stream."""
    if not data.startswith(MAGIC):
        return data
    if len(data) <= len(MAGIC):
        raise PersistenceError("Truncated save: missing format version")
    version = data[len(MAGIC)]
    if version != FORMAT_VERSION:
        raise PersistenceError(f"Unsupported save format version: {version}")
    return data[len(MAGIC) + 1:]


def _decode_cell(record: np.void, cell: Cell) -> None:
    """Copy one packed record into a cell."""
    try:
        decoded = Cell.from_record(
            bool(record["is_mine"]),
            int(record["state"]),
            int(record["adjacent_mines"]),
        )
    except ValueError as exc:
        raise PersistenceError(str(exc)) from exc
    cell.is_mine = decoded.is_mine
    cell.state = decoded.state
    cell.adjacent_mines = decoded.adjacent_mines


# ============================================================================
# Files
# ============================================================================

def write_session(path: PathLike, session: GameSession, versioned: bool = False) -> None:
    """Write a session to a file, replacing any previous content."""
    data = serialize(session, versioned=versioned)
    with open(path, "wb") as f:
        f.write(data)


def read_session(path: PathLike) -> GameSession:
    """Read a session from a file."""
    with open(path, "rb") as f:
        data = f.read()
    return deserialize(data)
