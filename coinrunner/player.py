"""The runner controlled by the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

WILE_E_COYOTE_FRAMES = 16
JUMP_RECOVERY = 40


@dataclass
class Player:
    """Position, motion, animation and coin purse of the runner."""

    x: int = 0
    y: int = 0
    facing_left: bool = False
    y_velocity: float = 0.0
    wile_e_coyote: int = WILE_E_COYOTE_FRAMES
    jump_recovery: int = JUMP_RECOVERY
    time_since_last_jump: int = -JUMP_RECOVERY
    idle_frames: list[Any] = field(default_factory=list)
    run_frames: list[Any] = field(default_factory=list)
    fall_frames: list[Any] = field(default_factory=list)
    slides: list[Any] = field(default_factory=list)
    coins: int = 0

    def reset_wile_e_coyote(self) -> None:
        """Restore the grace frames before the fall animation starts."""
        self.wile_e_coyote = WILE_E_COYOTE_FRAMES


def new_player(runner_tiles: Sequence[Any]) -> Player:
    """Create a player animated from the runner sprite sheet."""
    idle = list(runner_tiles[1:6])
    return Player(
        idle_frames=idle,
        run_frames=list(runner_tiles[9:17]),
        fall_frames=list(runner_tiles[17:21]),
        slides=idle,
    )