"""
Unit tests for the pointer and tap input adapter.

On the 960x540 logical screen a 5x5 grid has 108-pixel cells and starts
at x=210, y=0.
"""
import pytest
from sweeper import Engine, GameSession, MOBILE, Outcome

from frontend import (
    BoardLayout,
    InputAction,
    InputConfig,
    PointerAdapter,
    PointerButton,
    PointerEvent,
    screen_to_game,
)


def center(row: int, col: int):
    """Window position of a cell centre on an unscaled 960x540 window."""
    return 210 + col * 108 + 54, row * 108 + 54


def press(adapter: PointerAdapter, row: int, col: int,
          button: PointerButton = PointerButton.PRIMARY,
          duration: float = 0.0) -> InputAction:
    x, y = center(row, col)
    return adapter.handle(PointerEvent(button, x, y, duration))


# ============================================================================
# Layout Tests
# ============================================================================

class TestBoardLayout:
    """Test fitting the grid on the logical screen."""

    def test_cell_size_and_offset(self) -> None:
        """The grid is as tall as the screen and centred horizontally."""
        layout = BoardLayout(5)
        assert layout.cell_size == 108
        assert layout.offset == (210, 0)

    def test_cell_at_center(self) -> None:
        """A point inside a cell maps to that cell."""
        assert BoardLayout(5).cell_at(*center(2, 3)) == (2, 3)

    @pytest.mark.parametrize("x, y", [(100, 50), (209.5, 10), (751, 10), (300, 540)])
    def test_outside_grid_is_none(self, x: float, y: float) -> None:
        """Points in the side bars or below the grid hit nothing."""
        assert BoardLayout(5).cell_at(x, y) is None

    def test_invalid_layout_raises_error(self) -> None:
        """Layouts need a positive grid size."""
        with pytest.raises(ValueError, match="must be positive"):
            BoardLayout(0)


class TestScreenToGame:
    """Test window-to-logical-screen conversion."""

    def test_identity_at_native_size(self) -> None:
        """No scaling at 960x540."""
        assert screen_to_game(100, 200, 960, 540) == (100, 200)

    def test_uniform_scale(self) -> None:
        """A window twice as large halves the coordinates."""
        assert screen_to_game(1176, 540, 1920, 1080) == (588, 270)

    def test_letterbox_bars(self) -> None:
        """A wide window adds bars on the sides."""
        assert screen_to_game(1068, 270, 1920, 540) == (588, 270)


# ============================================================================
# Dispatch Tests
# ============================================================================

class TestPointerAdapter:
    """Test how presses become engine moves."""

    def test_primary_reveals(self, two_mine_engine: Engine) -> None:
        """Primary press on a hidden cell reveals it."""
        adapter = PointerAdapter(two_mine_engine)
        assert press(adapter, 0, 0) == InputAction.REVEAL
        assert two_mine_engine.session.grid.cell(0, 0).is_revealed

    def test_secondary_flags(self, two_mine_engine: Engine) -> None:
        """Secondary press toggles the flag."""
        adapter = PointerAdapter(two_mine_engine)
        assert press(adapter, 0, 1, PointerButton.SECONDARY) == InputAction.FLAG
        assert two_mine_engine.session.grid.cell(0, 1).is_flagged

    def test_primary_on_number_chords(self, two_mine_engine: Engine) -> None:
        """Primary press on a satisfied number chords."""
        adapter = PointerAdapter(two_mine_engine)
        press(adapter, 1, 2)
        press(adapter, 1, 1, PointerButton.SECONDARY)
        press(adapter, 2, 2, PointerButton.SECONDARY)
        assert press(adapter, 1, 2) == InputAction.CHORD
        assert two_mine_engine.session.grid.cell(0, 1).is_revealed

    def test_press_outside_grid_does_nothing(
        self, two_mine_engine: Engine
    ) -> None:
        """Side-bar presses are ignored."""
        adapter = PointerAdapter(two_mine_engine)
        assert adapter.handle(PointerEvent(PointerButton.PRIMARY, 20, 20)) == InputAction.NONE

    def test_scaled_window(self, two_mine_engine: Engine) -> None:
        """Presses are mapped through the current window size."""
        adapter = PointerAdapter(two_mine_engine, window_size=(1920, 1080))
        action = adapter.handle(PointerEvent(PointerButton.PRIMARY, 1176, 540))
        assert action == InputAction.REVEAL
        assert two_mine_engine.session.grid.cell(2, 3).is_revealed

    def test_resize(self, two_mine_engine: Engine) -> None:
        """resize() updates the mapping."""
        adapter = PointerAdapter(two_mine_engine)
        adapter.resize(1920, 540)
        assert adapter.locate(1068, 270) == (2, 3)

    def test_primary_on_grid_advances_finished_session(
        self, two_mine_engine: Engine
    ) -> None:
        """After a loss, a primary press on the grid starts the next game."""
        adapter = PointerAdapter(two_mine_engine)
        press(adapter, 1, 1)
        assert two_mine_engine.session.outcome == Outcome.LOST

        assert press(adapter, 3, 3) == InputAction.ADVANCE
        assert two_mine_engine.session.is_playing
        assert two_mine_engine.session.size == 5

    def test_secondary_ignored_while_awaiting_advance(
        self, two_mine_engine: Engine
    ) -> None:
        """Only the acknowledgment gesture works on a finished session."""
        adapter = PointerAdapter(two_mine_engine)
        press(adapter, 1, 1)
        assert press(adapter, 0, 0, PointerButton.SECONDARY) == InputAction.NONE
        assert two_mine_engine.session.is_lost


class TestMobileInput:
    """Test long-press flagging on the mobile tier."""

    @pytest.fixture
    def adapter(self) -> PointerAdapter:
        engine = Engine(MOBILE)
        engine.resume(GameSession.from_mine_positions(5, [(1, 1), (2, 2)]))
        return PointerAdapter(engine, InputConfig(long_press_seconds=0.4))

    def test_long_press_flags(self, adapter: PointerAdapter) -> None:
        """Holding past the threshold flags instead of revealing."""
        assert press(adapter, 0, 0, duration=0.6) == InputAction.FLAG
        assert adapter.engine.session.grid.cell(0, 0).is_flagged

    def test_short_tap_reveals(self, adapter: PointerAdapter) -> None:
        """A quick tap reveals."""
        assert press(adapter, 0, 0, duration=0.1) == InputAction.REVEAL

    def test_long_press_reveals_on_desktop(self, two_mine_engine: Engine) -> None:
        """Desktop ignores press duration."""
        adapter = PointerAdapter(two_mine_engine)
        assert press(adapter, 0, 0, duration=2.0) == InputAction.REVEAL

    def test_invalid_threshold_raises_error(self) -> None:
        """The threshold must be positive."""
        with pytest.raises(ValueError, match="must be positive"):
            InputConfig(long_press_seconds=0)
