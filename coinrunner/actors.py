"""Things placed in a level: coins and spawn points."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Coin:
    """A coin at a pixel position; collected coins stay in the level."""

    x: int
    y: int
    uncollected: bool = True


@dataclass(frozen=True)
class Spawn:
    """A point where the player can (re)enter the level."""

    x: int
    y: int