"""
Gymnasium environment wrapper for the Minesweeper engine.

Lets automated players drive the same engine the pointer and console
front ends use.
"""
import random
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from sweeper import Engine, PlatformConfig, MIN_GRID_SIZE
from sweeper.cell import OBS_FLAGGED, OBS_MINE

from .text import render_board, render_status


# ============================================================================
# Reward Configuration
# ============================================================================

@dataclass
class RewardConfig:
    """Rewards handed out per step."""

    safe_reveal: float = 1.0
    win: float = 10.0
    mine: float = -10.0
    invalid: float = -0.1


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for a fixed grid size.

    Observation:
        N x N int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size N * N.
        Action i reveals the cell at (i // N, i % N).

    Rewards:
        See RewardConfig.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        grid_size: int = 5,
        render_mode: Optional[str] = None,
        rewards: Optional[RewardConfig] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            grid_size: Side length of every episode's grid.
            render_mode: How to render the environment.
            rewards: Reward values (default: RewardConfig()).
        """
        super().__init__()

        if grid_size < MIN_GRID_SIZE:
            raise ValueError(f"Grid size must be at least {MIN_GRID_SIZE}")
        self.grid_size = grid_size
        self.render_mode = render_mode
        self.rewards = rewards or RewardConfig()
        self.engine = Engine(
            PlatformConfig(
                initial_size=grid_size,
                max_size=grid_size,
                custom_min_size=grid_size,
            )
        )

        self.observation_space = spaces.Box(
            low=OBS_FLAGGED,
            high=OBS_MINE,
            shape=(grid_size, grid_size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(grid_size * grid_size)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new episode.

        Args:
            seed: Seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.engine.rng = random.Random(seed)
        self.engine.start_new_session(self.grid_size)
        self._steps = 0
        return self._observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index (row * N + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = divmod(int(action), self.grid_size)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        terminated = not self.engine.session.is_playing

        return self._observation(), reward, terminated, False, self._get_info()

    def _calculate_reward(self, row: int, col: int) -> float:
        """Perform the reveal and score it."""
        if not self.engine.reveal(row, col):
            return self.rewards.invalid

        session = self.engine.session
        if session.is_won:
            return self.rewards.win
        if session.is_lost:
            return self.rewards.mine
        return self.rewards.safe_reveal

    def _observation(self) -> np.ndarray:
        return self.engine.session.grid.get_observation()

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        session = self.engine.session
        total_safe = session.grid.area - session.mine_count
        return {
            "steps": self._steps,
            "revealed": total_safe - session.remaining_safe_cells,
            "total_safe": total_safe,
            "game_state": session.outcome.name,
            "valid_actions": int(self.get_action_mask().sum()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        snapshot = self.engine.get_snapshot()
        text = f"{render_board(snapshot)}\n{render_status(snapshot)}"
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = hidden cell that may be revealed.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.engine.session.is_playing:
            return mask
        for row, col, cell in self.engine.session.grid:
            if cell.is_hidden:
                mask[row * self.grid_size + col] = True
        return mask


# ============================================================================
# Random Player
# ============================================================================

class RandomPlayer:
    """
    Baseline player that reveals hidden cells uniformly at random.

    Used by the CLI demo to exercise the environment end to end.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = np.random.default_rng(seed)

    def select_action(self, valid_actions: np.ndarray) -> int:
        """
        Pick a random valid action.

        Args:
            valid_actions: Mask from MinesweeperEnv.get_action_mask().

        Returns:
            Action index, 0 if nothing is valid.
        """
        valid_indices = np.flatnonzero(valid_actions)
        if len(valid_indices) == 0:
            return 0
        return int(self.rng.choice(valid_indices))
