"""
Pointer and tap input adapter.

Translates window-space presses into grid coordinates and dispatches them
to the engine. The game is laid out on a fixed logical screen that is
letterboxed into the real window.
"""
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from sweeper import Engine, PlatformTier


# ============================================================================
# Constants
# ============================================================================

GAME_SCREEN_WIDTH = 960
GAME_SCREEN_HEIGHT = 540


class PointerButton(Enum):
    """Which button (or tap kind) produced a press."""

    PRIMARY = auto()
    SECONDARY = auto()


class InputAction(Enum):
    """What a press ended up doing."""

    NONE = auto()
    REVEAL = auto()
    CHORD = auto()
    FLAG = auto()
    ADVANCE = auto()


@dataclass(frozen=True)
class PointerEvent:
    """
    A single press in window coordinates.

    Attributes:
        button: Button or tap kind.
        x: Horizontal window position in pixels.
        y: Vertical window position in pixels.
        press_duration: Seconds the press was held.
    """

    button: PointerButton
    x: float
    y: float
    press_duration: float = 0.0


@dataclass
class InputConfig:
    """
    Input tuning.

    Attributes:
        long_press_seconds: Hold time after which a mobile tap flags.
    """

    long_press_seconds: float = 0.4

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.long_press_seconds <= 0:
            raise ValueError("Long press threshold must be positive")


# ============================================================================
# Layout
# ============================================================================

@dataclass
class BoardLayout:
    """
    Placement of an N x N grid on the logical game screen.

    Cells are square and as large as fits; the grid is centred.
    """

    grid_size: int
    screen_width: float = GAME_SCREEN_WIDTH
    screen_height: float = GAME_SCREEN_HEIGHT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.grid_size < 1:
            raise ValueError("Grid size must be positive")
        if self.screen_width <= 0 or self.screen_height <= 0:
            raise ValueError("Screen dimensions must be positive")

    @property
    def cell_size(self) -> float:
        """Side length of one cell in game-screen pixels."""
        return min(
            self.screen_width / self.grid_size,
            self.screen_height / self.grid_size,
        )

    @property
    def offset(self) -> Tuple[float, float]:
        """Top-left corner of the grid."""
        total = self.cell_size * self.grid_size
        return (
            (self.screen_width - total) / 2,
            (self.screen_height - total) / 2,
        )

    def cell_at(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """
        Grid cell under a game-screen position.

        Returns:
            (row, col), or None if the position is outside the grid.
        """
        offset_x, offset_y = self.offset
        col = math.floor((x - offset_x) / self.cell_size)
        row = math.floor((y - offset_y) / self.cell_size)
        if 0 <= row < self.grid_size and 0 <= col < self.grid_size:
            return row, col
        return None


def screen_to_game(
    x: float,
    y: float,
    window_width: float,
    window_height: float,
) -> Tuple[float, float]:
    """
    Convert a window position to logical game-screen coordinates.

    The game screen is scaled uniformly to fit the window and centred,
    leaving bars on the sides that do not fit.
    """
    scale = min(window_width / GAME_SCREEN_WIDTH, window_height / GAME_SCREEN_HEIGHT)
    game_x = (x - (window_width - GAME_SCREEN_WIDTH * scale) * 0.5) / scale
    game_y = (y - (window_height - GAME_SCREEN_HEIGHT * scale) * 0.5) / scale
    return game_x, game_y


# ============================================================================
# Adapter
# ============================================================================

class PointerAdapter:
    """
    Dispatch pointer presses to an engine.

    Primary presses reveal hidden cells and chord revealed numbers;
    secondary presses, and long taps on mobile, toggle flags. Once a
    session is finished, a primary press on the grid acknowledges it.
    """

    def __init__(
        self,
        engine: Engine,
        config: Optional[InputConfig] = None,
        window_size: Tuple[float, float] = (GAME_SCREEN_WIDTH, GAME_SCREEN_HEIGHT),
    ) -> None:
        self.engine = engine
        self.config = config or InputConfig()
        self.window_width, self.window_height = window_size

    def resize(self, width: float, height: float) -> None:
        """Track a window resize."""
        self.window_width = width
        self.window_height = height

    def locate(self, x: float, y: float) -> Optional[Tuple[int, int]]:
        """Grid cell under a window position, or None."""
        game_x, game_y = screen_to_game(x, y, self.window_width, self.window_height)
        layout = BoardLayout(self.engine.session.size)
        return layout.cell_at(game_x, game_y)

    def handle(self, event: PointerEvent) -> InputAction:
        """
        Apply one press to the engine.

        Returns:
            The action performed, NONE if the press changed nothing.
        """
        position = self.locate(event.x, event.y)
        session = self.engine.session

        if session.pending_advance:
            if event.button == PointerButton.PRIMARY and position is not None:
                self.engine.advance_after_outcome()
                return InputAction.ADVANCE
            return InputAction.NONE

        if position is None:
            return InputAction.NONE
        row, col = position

        if self._is_flag_gesture(event):
            if self.engine.toggle_flag(row, col):
                return InputAction.FLAG
            return InputAction.NONE

        if session.grid.cell(row, col).is_revealed:
            if self.engine.chord_reveal(row, col):
                return InputAction.CHORD
            return InputAction.NONE

        if self.engine.reveal(row, col):
            return InputAction.REVEAL
        return InputAction.NONE

    def _is_flag_gesture(self, event: PointerEvent) -> bool:
        if event.button == PointerButton.SECONDARY:
            return True
        return (
            self.engine.config.tier == PlatformTier.MOBILE
            and event.press_duration >= self.config.long_press_seconds
        )
