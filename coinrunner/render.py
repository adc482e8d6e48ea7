"""Drawing the game: parallax backgrounds, terrain, coins, runner and score."""

from __future__ import annotations

import functools
from typing import Any

import pygame

from coinrunner.assets import (
    COIN_ANIMATION_SPEED,
    COIN_SLIDES,
    FRAME_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    write_message,
)
from coinrunner.game import Game

PARALLAX_SPEEDS = (4, 3, 2)
RUNNER_ANIMATION_SPEED = 5
SCORE_MARGIN = 20
DEBUG_COLOR = (255, 255, 255)
DEBUG_FONT_SIZE = 18


def _tdiv(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _tmod(a: int, b: int) -> int:
    return a - _tdiv(a, b) * b


def viewport_offset(player_x: int) -> int:
    """Level x coordinate shown at the left edge of the screen."""
    return player_x - (SCREEN_WIDTH // 2 + FRAME_WIDTH // 2)


def parallax(frame: pygame.Surface, image: pygame.Surface, offset: int, speed: int) -> list[int]:
    """Tile a background panel across the screen; return the x of each copy."""
    panel_width = image.get_width()
    position = _tmod(_tdiv(offset, speed), panel_width)
    positions = [position]
    while positions[-1] + panel_width < SCREEN_WIDTH:
        positions.append(positions[-1] + panel_width)
    for x in positions:
        frame.blit(image, (x, 0))
    return positions


@functools.lru_cache(maxsize=1)
def _debug_font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, DEBUG_FONT_SIZE)


def _debug_print(surface: pygame.Surface, message: str) -> None:
    font = _debug_font()
    top = 0
    for line in message.split("\n"):
        if line:
            surface.blit(font.render(line, True, DEBUG_COLOR), (0, top))
        top += font.get_linesize()


def _blit_view(frame: pygame.Surface, image: pygame.Surface, view: pygame.Rect) -> None:
    area = view.clip(image.get_rect())
    if area.width and area.height:
        frame.blit(image, (0, 0), area=area)


def _runner_frame(game: Game) -> Any:
    slides = game.player.slides
    if not slides:
        return None
    image = slides[(game.count // RUNNER_ANIMATION_SPEED) % len(slides)]
    if game.player.facing_left:
        image = pygame.transform.flip(image, True, False)
    return image


def draw_game(game: Game, screen: pygame.Surface, frame: pygame.Surface, font: Any) -> None:
    """Compose one frame into the frame buffer and show it on the screen."""
    level, player = game.level, game.player
    frame.fill((0, 0, 0, 0))
    for image, speed in zip(level.backgrounds, PARALLAX_SPEEDS):
        parallax(frame, image, -player.x, speed)

    offset = viewport_offset(player.x)
    view = pygame.Rect(offset, 0, SCREEN_WIDTH, SCREEN_HEIGHT)
    _blit_view(frame, level.background_image, view)
    _blit_view(frame, level.level_image, view)

    if game.coin_tiles:
        coin_image = game.coin_tiles[(game.count // COIN_ANIMATION_SPEED) % COIN_SLIDES]
        for coin in level.coins:
            if not coin.uncollected:
                continue
            if coin.x > offset or coin.x < offset + SCREEN_WIDTH // 2 - FRAME_WIDTH:
                frame.blit(coin_image, (coin.x - offset, coin.y))

    runner = _runner_frame(game)
    if runner is not None:
        frame.blit(runner, (SCREEN_WIDTH // 2 - FRAME_WIDTH // 2, player.y))
    _blit_view(frame, level.foreground_image, view)

    if game.message:
        _debug_print(frame, game.message)
    screen.blit(frame, (0, 0))

    score = f"Coins: {player.coins}"
    width, height = font.size(score)
    write_message(SCREEN_WIDTH - width - SCORE_MARGIN, height, score, screen, font)