"""
Reveal, flood-fill, chord and flag operations on a game session.

Every operation returns the number of cells whose state it changed and
treats out-of-bounds coordinates, cells in the wrong state and finished
sessions as no-ops.
"""
from .grid import Grid
from .session import GameSession, Outcome


# ============================================================================
# Reveal
# ============================================================================

def reveal(session: GameSession, row: int, col: int) -> int:
    """
    Reveal a hidden cell.

    A mine loses the session and exposes every mine on the grid. A cell
    with no adjacent mines cascades to its neighbours.

    Args:
        session: Session to mutate.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        Number of cells revealed.
    """
    if not session.is_playing:
        return 0
    cell = session.grid.cell(row, col)
    if cell is None or not cell.is_hidden:
        return 0

    if cell.is_mine:
        cell.reveal()
        session.finish(Outcome.LOST)
        return 1 + reveal_all_mines(session.grid)

    revealed = _flood_fill(session, row, col)
    _check_win_condition(session)
    return revealed


def _flood_fill(session: GameSession, row: int, col: int) -> int:
    """Reveal a safe cell and the zero-contour around it."""
    grid = session.grid
    grid.cell(row, col).reveal()
    session.remaining_safe_cells -= 1
    revealed = 1

    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        if grid.cell(current_row, current_col).adjacent_mines != 0:
            continue
        for neighbor_row, neighbor_col in grid.neighbors(current_row, current_col):
            neighbor = grid.cell(neighbor_row, neighbor_col)
            # Hidden-only guard: revealed and flagged cells are skipped
            if neighbor.is_mine or not neighbor.reveal():
                continue
            session.remaining_safe_cells -= 1
            revealed += 1
            if neighbor.adjacent_mines == 0:
                stack.append((neighbor_row, neighbor_col))
    return revealed


def reveal_all_mines(grid: Grid) -> int:
    """
    Reveal every mine, flagged or not.

    Returns:
        Number of mines that were not already revealed.
    """
    return sum(cell.expose() for _, _, cell in grid if cell.is_mine)


def _reveal_adjacent_mines(grid: Grid, row: int, col: int) -> int:
    """
    Expose the mines around one cell after a lost chord.

    Like reveal_all_mines(), this shows correctly flagged mines too: the
    loss display takes precedence over flags. Flags on safe cells stay.
    """
    changed = 0
    for neighbor_row, neighbor_col in grid.neighbors(row, col):
        neighbor = grid.cell(neighbor_row, neighbor_col)
        if neighbor.is_mine:
            changed += neighbor.expose()
    return changed


def _check_win_condition(session: GameSession) -> None:
    """Win once every safe cell is revealed."""
    if session.is_playing and session.remaining_safe_cells <= 0:
        session.finish(Outcome.WON)


# ============================================================================
# Chord
# ============================================================================

def chord_reveal(session: GameSession, row: int, col: int) -> int:
    """
    Reveal all unflagged neighbours of a satisfied number.

    A number is satisfied when the flags around it equal its count. If one
    of those flags is wrong, the session is lost and only the mines around
    the chorded cell are exposed.

    Args:
        session: Session to mutate.
        row: Row index of a revealed number.
        col: Column index of a revealed number.

    Returns:
        Number of cells revealed.
    """
    if not session.is_playing:
        return 0
    grid = session.grid
    cell = grid.cell(row, col)
    if cell is None or not cell.is_revealed or cell.adjacent_mines == 0:
        return 0

    neighbors = grid.neighbors(row, col)
    flagged = [grid.cell(r, c) for r, c in neighbors if grid.cell(r, c).is_flagged]
    if len(flagged) != cell.adjacent_mines:
        return 0

    if any(not neighbor.is_mine for neighbor in flagged):
        changed = _reveal_adjacent_mines(grid, row, col)
        session.finish(Outcome.LOST)
        return changed

    changed = 0
    for neighbor_row, neighbor_col in neighbors:
        neighbor = grid.cell(neighbor_row, neighbor_col)
        if not neighbor.is_hidden:
            continue
        if neighbor.is_mine:
            neighbor.reveal()
            changed += 1 + _reveal_adjacent_mines(grid, neighbor_row, neighbor_col)
            session.finish(Outcome.LOST)
            return changed
        changed += reveal(session, neighbor_row, neighbor_col)
    return changed


# ============================================================================
# Flag
# ============================================================================

def toggle_flag(session: GameSession, row: int, col: int) -> int:
    """
    Toggle the flag on a hidden or flagged cell.

    Returns:
        1 if the flag changed, 0 otherwise.
    """
    if not session.is_playing:
        return 0
    cell = session.grid.cell(row, col)
    if cell is None:
        return 0
    return int(cell.toggle_flag())
