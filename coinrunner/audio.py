"""Coin sound effects and looping level ambience."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Callable

import pygame

from coinrunner.assets import game_data

SAMPLE_RATE = 44100
DROP_SOUND_COUNT = 5


@dataclass
class SoundBoard:
    """Plays the game's sounds from a set of loaded sound objects."""

    drop_sounds: list[Any]
    pickup_sound: Any
    load_ambience: Callable[[int], Any]
    ambient: Any = None

    def __post_init__(self) -> None:
        if not self.drop_sounds:
            raise ValueError("at least one coin drop sound is required")

    @staticmethod
    def _restart(sound: Any) -> None:
        sound.stop()
        sound.play()

    def drop_coin(self, count: int) -> None:
        """Play the drop sound chosen by the frame count."""
        self._restart(self.drop_sounds[count % len(self.drop_sounds)])

    def pickup_coin(self) -> None:
        """Play the coin pickup sound from the start."""
        self._restart(self.pickup_sound)

    def play_level_ambience(self, level: int) -> None:
        """Start the looping ambience for a level."""
        self.ambient = self.load_ambience(level)
        self.ambient.play(loops=-1)

    def stop_level_ambience(self) -> None:
        """Stop the ambience if it is playing."""
        if self.ambient is not None and self.ambient.get_num_channels() > 0:
            self.ambient.stop()


def _sound(path: str) -> pygame.mixer.Sound:
    return pygame.mixer.Sound(file=io.BytesIO(game_data(path)))


def _ambience(level: int) -> pygame.mixer.Sound:
    return _sound(f"assets/ambience-level-{level}.ogg")


def load_sound_board() -> SoundBoard:
    """Open the mixer and load every sound effect from the game data."""
    if not pygame.mixer.get_init():
        pygame.mixer.init(frequency=SAMPLE_RATE)
    drops = [_sound(f"assets/Coins_Grab_0{i}.ogg") for i in range(DROP_SOUND_COUNT)]
    return SoundBoard(drop_sounds=drops, pickup_sound=_sound("assets/coin.ogg"), load_ambience=_ambience)