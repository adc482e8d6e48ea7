"""Game state and the per-tick update: movement, collisions, coins and levels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from coinrunner.assets import (
    FRAME_HEIGHT,
    FRAME_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    write_message,
)
from coinrunner.level import Level
from coinrunner.player import Player

HOLE_DEPTH = SCREEN_HEIGHT * 4
END_MESSAGE_MARGIN = 600
END_MESSAGE_TOP = 150


def _tdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


@dataclass(frozen=True)
class Controls:
    """Input state for one tick: held keys and keys pressed this tick."""

    left: bool = False
    right: bool = False
    jump: bool = False
    try_again: bool = False
    next_level: bool = False
    reload: bool = False
    skip_spawn: bool = False
    tps: int = 0
    fps: int = 0


@dataclass(frozen=True)
class Collisions:
    """Which sides of the runner touch or nearly touch terrain."""

    ground: bool = False
    left: bool = False
    left_adjacent: bool = False
    right: bool = False
    right_adjacent: bool = False
    top: bool = False


@dataclass
class Game:
    """A running game: the current level, the runner and the tick counter."""

    level: Level
    player: Player
    load_level: Callable[[int], Level]
    sounds: Any = None
    font: Any = None
    coin_tiles: list[Any] = field(default_factory=list)
    editor: bool = True
    count: int = 0
    message: str = ""

    def update(self, controls: Controls) -> None:
        """Advance the game by one tick."""
        self.count += 1
        self.player.slides = self.player.idle_frames

        collisions = self.detect_collisions()

        if not collisions.ground:
            self.fall()

        if self.at_end_of_level():
            self.level_end(controls)
            return

        self.lose_coins()

        if collisions.ground:
            self.jump(controls)

        self.run(controls, collisions)
        self.correct_terrain_overlap(collisions)
        self.pick_up_coins()
        self.fall_in_holes()
        self.message = self.level_editor(controls)

    def detect_collisions(self) -> Collisions:
        """Probe the terrain around the runner."""
        p, lvl = self.player, self.level
        middle = p.y + FRAME_HEIGHT // 2
        return Collisions(
            ground=lvl.solid_at(p.x - FRAME_WIDTH // 2, p.y + FRAME_HEIGHT),
            left=lvl.solid_at(p.x - FRAME_WIDTH, middle),
            left_adjacent=lvl.solid_at(p.x - FRAME_WIDTH - lvl.move_speed, middle),
            right=lvl.solid_at(p.x, middle),
            right_adjacent=lvl.solid_at(p.x + lvl.move_speed, middle),
            top=lvl.solid_at(p.x - FRAME_WIDTH // 2, p.y),
        )

    def _right_limit(self) -> int:
        return self.level.width - SCREEN_WIDTH // 2 + FRAME_WIDTH // 2 - 1

    def at_end_of_level(self) -> bool:
        """Whether the runner has reached the right edge of the level."""
        return self.player.x > self._right_limit()

    def fall(self) -> None:
        """Apply gravity for one tick."""
        p = self.player
        p.y += int(p.y_velocity)
        p.y_velocity += self.level.gravity
        if p.wile_e_coyote == 0:
            p.slides = p.fall_frames
        else:
            p.wile_e_coyote -= 1

    def jump(self, controls: Controls) -> None:
        """Stand on the ground and jump if asked and there is headroom."""
        p, lvl = self.player, self.level
        p.y_velocity = 0.0
        p.reset_wile_e_coyote()
        if not controls.jump:
            return
        if p.time_since_last_jump + p.jump_recovery >= self.count:
            return
        if lvl.solid_at(p.x - FRAME_WIDTH // 2, p.y - lvl.jump_height):
            return
        p.y_velocity = -float(lvl.jump_height)
        p.y += int(p.y_velocity)
        p.time_since_last_jump = self.count
        p.wile_e_coyote = 0

    def run(self, controls: Controls, collisions: Collisions) -> None:
        """Move left or right unless blocked or at the level edge."""
        p, lvl = self.player, self.level
        if controls.right:
            p.facing_left = False
            if (
                p.x < self._right_limit()
                and not collisions.right
                and not collisions.right_adjacent
            ):
                p.slides = p.run_frames
                p.x += lvl.move_speed
        if controls.left:
            p.facing_left = True
            if (
                p.x > SCREEN_WIDTH // 2 + FRAME_WIDTH // 2
                and not collisions.left
                and not collisions.left_adjacent
            ):
                p.slides = p.run_frames
                p.x -= lvl.move_speed

    def correct_terrain_overlap(self, collisions: Collisions) -> None:
        """Push the runner out of terrain it has sunk into."""
        p, lvl = self.player, self.level
        if collisions.top and not collisions.ground:
            p.y += 1
            p.y_velocity = 0.0
        while lvl.solid_at(p.x - FRAME_WIDTH // 2, p.y + FRAME_HEIGHT - 1):
            p.y -= 1
        if collisions.left and not collisions.right:
            p.x += lvl.move_speed
        if collisions.right and not collisions.left:
            p.x -= lvl.move_speed

    def pick_up_coins(self) -> None:
        """Collect every coin the runner overlaps."""
        p = self.player
        for coin in self.level.coins:
            cx = coin.x + FRAME_WIDTH // 2
            cy = coin.y + FRAME_HEIGHT // 2
            if (
                coin.uncollected
                and p.x - FRAME_WIDTH < cx < p.x
                and p.y < cy < p.y + FRAME_HEIGHT
            ):
                coin.uncollected = False
                p.coins += 1
                if self.sounds is not None:
                    self.sounds.pickup_coin()

    def fall_in_holes(self) -> None:
        """Return a runner that fell out of the level to the last spawn point."""
        p, lvl = self.player, self.level
        if p.y > HOLE_DEPTH:
            p.x, p.y = lvl.previous_spawn(p.x, p.y)
            p.y_velocity = 0.0
            p.coins = max(p.coins - lvl.coin_hole_penalty, 0)

    def lose_coins(self) -> None:
        """Drop a coin every so many ticks: it costs money to be alive."""
        if self.count % self.level.coin_decay == 0 and self.player.coins > 0:
            self.player.coins -= 1
            if self.sounds is not None:
                self.sounds.drop_coin(self.count)

    def _end_message(self) -> str:
        if self.level.level_number == 1:
            return (
                f"You collected {self.player.coins} coins.\n"
                "G: try again\nN: next level"
            )
        return "Thanks for playing.\nMore content (including this level)\ncoming soon."

    def _restart_in(self, level_number: int) -> None:
        self.level = self.load_level(level_number)
        self.player.x, self.player.y = self.level.start_position()
        self.player.coins = 0

    def level_end(self, controls: Controls) -> None:
        """Show the end-of-level message and handle retry or next level."""
        if self.font is not None:
            background = self.level.background_image
            write_message(
                background.get_width() - END_MESSAGE_MARGIN,
                END_MESSAGE_TOP,
                self._end_message(),
                background,
                self.font,
            )
        if controls.try_again:
            self._restart_in(self.level.level_number)
        if self.level.level_number == 1 and controls.next_level:
            self._restart_in(2)
            if self.sounds is not None:
                self.sounds.stop_level_ambience()
                self.sounds.play_level_ambience(2)

    def level_editor(self, controls: Controls) -> str:
        """Editing shortcuts and a status line; empty when editing is off."""
        if not self.editor:
            return ""
        p = self.player
        if controls.reload:
            self.level = self.load_level(self.level.level_number)
        if controls.skip_spawn:
            p.x, p.y = self.level.next_spawn(p.x, p.y)
            p.y_velocity = 0.0

        left_edge = p.x - FRAME_WIDTH // 2
        x_cell = _tdiv(left_edge, FRAME_WIDTH * 26) + 64
        x_cell_char = chr(x_cell) if x_cell > 64 else " "
        column = _tdiv(left_edge, FRAME_WIDTH)
        column_char = chr(abs(column) % 26 * (1 if column >= 0 else -1) + 65)
        row = _tdiv(p.y, FRAME_WIDTH) + 1
        position = f"{x_cell_char}{column_char}:{row}"
        return (
            f"level edit mode\n[{position}]0:reload 9:spawn\n"
            f"tps {controls.tps} fps {controls.fps}"
        )