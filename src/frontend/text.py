"""
Plain-text rendering of engine snapshots.
"""
from sweeper import Outcome, SessionSnapshot
from sweeper.cell import OBS_FLAGGED, OBS_HIDDEN, OBS_MINE


OUTCOME_LABELS = {
    Outcome.IN_PROGRESS: "Playing",
    Outcome.WON: "You win! (next: grid grows)",
    Outcome.LOST: "Game over (next: same grid)",
}


def render_symbol(value: int) -> str:
    """Character for one observation value."""
    if value == OBS_HIDDEN:
        return "."
    if value == OBS_FLAGGED:
        return "F"
    if value == OBS_MINE:
        return "*"
    if value == 0:
        return " "
    return str(value)


def render_board(snapshot: SessionSnapshot) -> str:
    """Render the grid with row and column labels."""
    size = snapshot.grid_size
    width = len(str(size - 1))
    header = " " * (width + 1) + " ".join(
        str(col).rjust(width) for col in range(size)
    )
    lines = [header]
    for row in range(size):
        cells = " ".join(
            render_symbol(int(value)).rjust(width) for value in snapshot.board[row]
        )
        lines.append(f"{str(row).rjust(width)} {cells}")
    return "\n".join(lines)


def render_status(snapshot: SessionSnapshot) -> str:
    """One-line summary: size, mine counter, clock and outcome."""
    status = (
        f"{snapshot.grid_size}x{snapshot.grid_size} | "
        f"Mines: {snapshot.remaining_mines:03d} | "
        f"Time: {int(snapshot.elapsed_time):03d} | "
        f"{OUTCOME_LABELS[snapshot.outcome]}"
    )
    if snapshot.pending_advance:
        status += " - type 'next' to continue"
    return status
