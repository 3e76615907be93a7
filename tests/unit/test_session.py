"""
Unit tests for GameSession and snapshots.
"""
import random

import numpy as np
import pytest
from sweeper import GameSession, Outcome, mine_count_for, reveal, toggle_flag


class TestSessionCreation:
    """Test session constructors."""

    @pytest.mark.parametrize("size", [3, 5, 8, 20])
    def test_new_session_counts(self, size: int) -> None:
        """Random sessions follow the density rule."""
        session = GameSession.new(size, random.Random(size))
        assert session.size == size
        assert session.mine_count == mine_count_for(size)
        assert len(session.grid.mine_positions()) == session.mine_count
        assert session.remaining_safe_cells == size * size - session.mine_count

    def test_new_session_is_in_progress(self) -> None:
        """Fresh sessions are playable, untimed and not waiting."""
        session = GameSession.new(5, random.Random(0))
        assert session.outcome == Outcome.IN_PROGRESS
        assert session.elapsed_time == 0.0
        assert session.pending_advance is False

    def test_fixed_layout_sets_mine_count(
        self, four_mine_session: GameSession
    ) -> None:
        """Injected layouts use their own mine count."""
        assert four_mine_session.mine_count == 4
        assert four_mine_session.remaining_safe_cells == 21

    def test_adjacency_is_computed(self, four_mine_session: GameSession) -> None:
        """The center of the four-mine layout touches all four mines."""
        assert four_mine_session.grid.cell(2, 2).adjacent_mines == 4


class TestSessionState:
    """Test derived state."""

    def test_remaining_mines_counts_flags(
        self, two_mine_session: GameSession
    ) -> None:
        """The mine counter drops with every flag, right or wrong."""
        toggle_flag(two_mine_session, 0, 0)
        toggle_flag(two_mine_session, 0, 1)
        toggle_flag(two_mine_session, 0, 2)
        assert two_mine_session.remaining_mines == -1

    def test_finish_sets_pending_advance(
        self, two_mine_session: GameSession
    ) -> None:
        """Ending a session waits for acknowledgment."""
        two_mine_session.finish(Outcome.WON)
        assert two_mine_session.is_won
        assert two_mine_session.pending_advance is True


class TestSnapshot:
    """Test the read-only view."""

    def test_snapshot_fields(self, two_mine_session: GameSession) -> None:
        """Snapshot mirrors the session."""
        reveal(two_mine_session, 0, 0)
        two_mine_session.elapsed_time = 4.5
        snapshot = two_mine_session.snapshot()

        assert snapshot.grid_size == 5
        assert snapshot.outcome == Outcome.IN_PROGRESS
        assert snapshot.remaining_mines == 2
        assert snapshot.elapsed_time == 4.5
        assert snapshot.board[0, 0] == 1
        assert snapshot.board[4, 4] == -1

    def test_snapshot_board_is_read_only(
        self, two_mine_session: GameSession
    ) -> None:
        """Renderers cannot write through the snapshot."""
        board = two_mine_session.snapshot().board
        with pytest.raises(ValueError):
            board[0, 0] = 5

    def test_snapshot_hides_mines(self, two_mine_session: GameSession) -> None:
        """Hidden mines are indistinguishable from hidden safe cells."""
        assert np.all(two_mine_session.snapshot().board == -1)
