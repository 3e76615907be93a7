"""
Platform configuration and difficulty progression.

The platform tier is resolved once at startup and decides how large grids
start and how large they may grow.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .grid import MIN_GRID_SIZE
from .session import Outcome


# ============================================================================
# Constants
# ============================================================================

class PlatformTier(Enum):
    """Device class the game runs on."""

    DESKTOP = auto()
    MOBILE = auto()


@dataclass
class PlatformConfig:
    """
    Grid size limits for a platform.

    Attributes:
        tier: Device class.
        initial_size: Grid size of a new game.
        max_size: Largest grid the progression reaches.
        custom_min_size: Smallest grid a custom size request may ask for.
        versioned_saves: Write save files with a magic/version header.
    """

    tier: PlatformTier = PlatformTier.DESKTOP
    initial_size: int = 5
    max_size: int = 20
    custom_min_size: int = 5
    versioned_saves: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure size limits are consistent."""
        if self.initial_size < MIN_GRID_SIZE:
            raise ValueError(f"Initial size must be at least {MIN_GRID_SIZE}")
        if self.custom_min_size < MIN_GRID_SIZE:
            raise ValueError(f"Custom minimum must be at least {MIN_GRID_SIZE}")
        if self.max_size < self.initial_size:
            raise ValueError("Maximum size cannot be below the initial size")
        if self.max_size < self.custom_min_size:
            raise ValueError("Maximum size cannot be below the custom minimum")

    @classmethod
    def for_tier(cls, tier: PlatformTier, **overrides) -> "PlatformConfig":
        """Preset configuration for a tier, with optional field overrides."""
        preset = DESKTOP if tier == PlatformTier.DESKTOP else MOBILE
        values = {
            "tier": preset.tier,
            "initial_size": preset.initial_size,
            "max_size": preset.max_size,
            "custom_min_size": preset.custom_min_size,
            "versioned_saves": preset.versioned_saves,
        }
        values.update(overrides)
        return cls(**values)


# Platform presets
DESKTOP = PlatformConfig(PlatformTier.DESKTOP, 5, 20, 5)
MOBILE = PlatformConfig(PlatformTier.MOBILE, 3, 8, 3)


# ============================================================================
# Progression
# ============================================================================

def next_grid_size(previous: int, outcome: Outcome, config: PlatformConfig) -> int:
    """
    Grid size of the session that follows an acknowledged outcome.

    A win grows the grid by one up to the platform maximum; anything else
    replays the same size.
    """
    if outcome == Outcome.WON:
        return min(previous + 1, config.max_size)
    return previous


# ============================================================================
# Custom Size Input
# ============================================================================

def parse_grid_size(text: str) -> Optional[int]:
    """
    Parse user-entered grid size text.

    Returns:
        The integer value, or None if the text is not a whole number.
    """
    stripped = text.strip()
    digits = stripped[1:] if stripped[:1] in ("+", "-") else stripped
    if not digits.isascii() or not digits.isdigit():
        return None
    return int(stripped)


def clamp_grid_size(value: int, low: int, high: int) -> int:
    """Clamp a grid size into [low, high]."""
    return max(low, min(value, high))


def resolve_custom_size(text: str, config: PlatformConfig) -> int:
    """
    Turn a custom size request into a usable grid size.

    Text that is not a number resolves to the smallest custom size;
    numbers are clamped into the platform's custom range.
    """
    value = parse_grid_size(text)
    if value is None:
        return config.custom_min_size
    return clamp_grid_size(value, config.custom_min_size, config.max_size)
