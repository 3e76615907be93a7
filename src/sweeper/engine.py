"""
Game engine: the state machine and API that input adapters and renderers
talk to.

The engine owns exactly one session at a time and replaces it wholesale on
new game, next level, custom size and load. Public operations never raise:
invalid moves are ignored and persistence failures come back as False.
"""
import logging
import random
from typing import Optional

from .codec import PathLike, read_session, write_session
from .grid import MIN_GRID_SIZE
from .progression import (
    DESKTOP,
    PlatformConfig,
    clamp_grid_size,
    next_grid_size,
    resolve_custom_size,
)
from .reveal import chord_reveal, reveal, toggle_flag
from .session import GameSession, Outcome, SessionSnapshot

logger = logging.getLogger(__name__)


# ============================================================================
# Engine
# ============================================================================

class Engine:
    """
    Single-player Minesweeper engine.

    Sessions move from IN_PROGRESS to WON or LOST. A finished session
    ignores every move until advance_after_outcome() starts the next one:
    one size larger after a win, the same size after a loss.
    """

    def __init__(
        self,
        config: Optional[PlatformConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Create the engine and its first session.

        Args:
            config: Platform limits (default: desktop).
            rng: Random source for mine placement.
        """
        self.config = config or DESKTOP
        self.rng = rng or random.Random()
        self._session = GameSession.new(self.config.initial_size, self.rng)
        logger.debug("Engine ready at size %d", self._session.size)

    # ========================================================================
    # Session Lifecycle
    # ========================================================================

    @property
    def session(self) -> GameSession:
        """The current session."""
        return self._session

    def start_new_session(self, grid_size: Optional[int] = None) -> GameSession:
        """
        Replace the current session with a freshly mined one.

        Args:
            grid_size: Requested side length, clamped to the platform
                limits (default: the platform's initial size).

        Returns:
            The new session.
        """
        if grid_size is None:
            grid_size = self.config.initial_size
        size = clamp_grid_size(grid_size, MIN_GRID_SIZE, self.config.max_size)
        self._session = GameSession.new(size, self.rng)
        logger.info(
            "New session: %dx%d with %d mines",
            size, size, self._session.mine_count,
        )
        return self._session

    def new_game(self) -> GameSession:
        """Start over at the platform's initial size."""
        return self.start_new_session(self.config.initial_size)

    def start_custom_session(self, text: str) -> GameSession:
        """Start a session at a user-entered size."""
        return self.start_new_session(resolve_custom_size(text, self.config))

    def resume(self, session: GameSession) -> None:
        """Adopt an existing session, e.g. one read from disk."""
        self._session = session

    def advance_after_outcome(self) -> bool:
        """
        Acknowledge a finished session and start the next one.

        Returns:
            True if a new session started, False if the current one is
            still in progress.
        """
        if not self._session.pending_advance:
            return False
        size = next_grid_size(self._session.size, self._session.outcome, self.config)
        self.start_new_session(size)
        return True

    # ========================================================================
    # Moves
    # ========================================================================

    def reveal(self, row: int, col: int) -> int:
        """Reveal a cell. Returns the number of cells revealed."""
        was_playing = self._session.is_playing
        changed = reveal(self._session, row, col)
        if was_playing:
            self._log_outcome()
        return changed

    def toggle_flag(self, row: int, col: int) -> int:
        """Flag or unflag a hidden cell. Returns 1 if it changed."""
        return toggle_flag(self._session, row, col)

    def chord_reveal(self, row: int, col: int) -> int:
        """Reveal around a satisfied number. Returns cells revealed."""
        was_playing = self._session.is_playing
        changed = chord_reveal(self._session, row, col)
        if was_playing:
            self._log_outcome()
        return changed

    def tick(self, delta_time: float) -> None:
        """Advance the session clock while the session is in progress."""
        if self._session.is_playing and delta_time > 0:
            self._session.elapsed_time += delta_time

    def _log_outcome(self) -> None:
        session = self._session
        if session.outcome == Outcome.WON:
            logger.info("Won %dx%d in %.1fs", session.size, session.size, session.elapsed_time)
        elif session.outcome == Outcome.LOST:
            logger.info("Lost %dx%d after %.1fs", session.size, session.size, session.elapsed_time)

    # ========================================================================
    # Views
    # ========================================================================

    def get_snapshot(self) -> SessionSnapshot:
        """Read-only state of the current session."""
        return self._session.snapshot()

    # ========================================================================
    # Persistence
    # ========================================================================

    def save(self, filename: PathLike) -> bool:
        """
        Write the current session to a file.

        Returns:
            True on success, False if the file could not be written.
        """
        try:
            write_session(filename, self._session, versioned=self.config.versioned_saves)
        except (OSError, ValueError) as exc:
            logger.warning("Could not save to %s: %s", filename, exc)
            return False
        logger.info("Saved session to %s", filename)
        return True

    def load(self, filename: PathLike) -> bool:
        """
        Replace the current session with one read from a file.

        The current session is kept if the file cannot be opened, read or
        decoded. Decoding failures are PersistenceError, a ValueError.

        Returns:
            True on success, False otherwise.
        """
        try:
            session = read_session(filename)
        except (OSError, ValueError) as exc:
            logger.warning("Could not load %s: %s", filename, exc)
            return False
        self.resume(session)
        logger.info("Loaded %dx%d session from %s", session.size, session.size, filename)
        return True
