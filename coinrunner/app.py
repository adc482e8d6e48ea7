"""Window, input and main loop."""

from __future__ import annotations

import argparse
import dataclasses
from typing import Any, Collection

import pygame

from coinrunner.assets import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    load_font,
    load_sprites,
    write_message,
)
from coinrunner.audio import load_sound_board
from coinrunner.game import Controls, Game
from coinrunner.level import load_level
from coinrunner.player import new_player

TITLE = "it costs money to be alive"
TICKS_PER_SECOND = 60
INTRO_POSITION = (540, 150)
INTRO = (
    "run and jump with arrow keys\ncollect coins, but hurry up!\n"
    "you lose coins over time\n(it costs money to be alive)"
)


def read_controls(pressed: Any, just_pressed: Collection[int]) -> Controls:
    """Turn held keys and keys pressed this tick into game controls."""
    return Controls(
        left=bool(pressed[pygame.K_LEFT] or pressed[pygame.K_a]),
        right=bool(pressed[pygame.K_RIGHT] or pressed[pygame.K_d]),
        jump=bool(pressed[pygame.K_SPACE] or pressed[pygame.K_UP] or pressed[pygame.K_w]),
        try_again=pygame.K_g in just_pressed,
        next_level=pygame.K_n in just_pressed,
        reload=pygame.K_0 in just_pressed,
        skip_spawn=pygame.K_9 in just_pressed,
    )


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="coinrunner", description=TITLE)
    parser.add_argument(
        "--no-editor", action="store_true", help="hide the level editing shortcuts"
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        pygame.display.set_caption(TITLE)
        sprites = load_sprites()
        font = load_font()
        sounds = load_sound_board()

        sprite_level = lambda number: load_level(number, sprites)  # noqa: E731
        level = sprite_level(1)
        player = new_player(sprites.runner_tiles)
        player.x, player.y = level.start_position()
        game = Game(
            level=level,
            player=player,
            load_level=sprite_level,
            sounds=sounds,
            font=font,
            coin_tiles=sprites.coin_tiles,
            editor=not args.no_editor,
        )
        write_message(*INTRO_POSITION, INTRO, level.background_image, font)
        sounds.play_level_ambience(1)

        from coinrunner.render import draw_game

        frame = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.SRCALPHA)
        clock = pygame.time.Clock()
        while True:
            just_pressed: set[int] = set()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    just_pressed.add(event.key)
            rate = round(clock.get_fps())
            controls = dataclasses.replace(
                read_controls(pygame.key.get_pressed(), just_pressed), tps=rate, fps=rate
            )
            game.update(controls)
            draw_game(game, screen, frame, font)
            pygame.display.flip()
            clock.tick(TICKS_PER_SECOND)
    finally:
        pygame.quit()