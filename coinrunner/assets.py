"""Game data access, sprite sheets, fonts and on-screen messages."""

from __future__ import annotations

import io
import os
from dataclasses import dataclass, field
from pathlib import Path

import pygame

SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 512
FRAME_WIDTH = 64
FRAME_HEIGHT = 64

COIN_SLIDES = 6
COIN_ANIMATION_SPEED = 10

FONT_PATH = "assets/Modak-Regular.ttf"
FONT_SIZE = 36
TEXT_COLOR = (0xD4, 0xAF, 0x47)
SHADOW_COLOR = (0x00, 0x00, 0x00)
SHADOW_OFFSET = 2

DATA_ENV = "COINRUNNER_DATA"

TILE_SHEETS = (
    "assets/1-tiles-city.png",
    "assets/2-tiles-country.png",
    "assets/3-objects-city.png",
    "assets/4-objects-country.png",
)
COIN_SHEET = "assets/coin.png"
RUNNER_SHEET = "assets/runner.png"


def _data_root() -> Path:
    configured = os.environ.get(DATA_ENV)
    if configured:
        return Path(configured)
    return Path(__file__).resolve().parent / "data"


def game_data(path: str) -> bytes:
    """Return the bytes of a game data file, relative to the data directory."""
    return (_data_root() / path).read_bytes()


def load_image(path: str) -> pygame.Surface:
    """Decode an image from the game data into a surface."""
    return pygame.image.load(io.BytesIO(game_data(path)), Path(path).name)


def slice_sprite_sheet(sheet: pygame.Surface) -> list[pygame.Surface]:
    """Cut a sheet into frames, row by row, framed by a black tile at each end."""
    blank = pygame.Surface((FRAME_WIDTH, FRAME_HEIGHT), pygame.SRCALPHA)
    blank.fill((0, 0, 0, 255))
    columns = sheet.get_width() // FRAME_WIDTH
    rows = sheet.get_height() // FRAME_HEIGHT
    frames = [
        sheet.subsurface(
            pygame.Rect(col * FRAME_WIDTH, row * FRAME_HEIGHT, FRAME_WIDTH, FRAME_HEIGHT)
        )
        for row in range(rows)
        for col in range(columns)
    ]
    return [blank, *frames, blank]


def load_sprite_sheet(path: str) -> list[pygame.Surface]:
    """Load an image from the game data and slice it into frames."""
    return slice_sprite_sheet(load_image(path))


@dataclass
class Sprites:
    """All tile and animation frames used by the game."""

    tiles: list[pygame.Surface] = field(default_factory=list)
    coin_tiles: list[pygame.Surface] = field(default_factory=list)
    runner_tiles: list[pygame.Surface] = field(default_factory=list)


def load_sprites() -> Sprites:
    """Load the level tiles, coin animation and runner animation."""
    tiles: list[pygame.Surface] = []
    for sheet in TILE_SHEETS:
        tiles.extend(load_sprite_sheet(sheet))
    coin_tiles = load_sprite_sheet(COIN_SHEET)[1 : 1 + COIN_SLIDES]
    runner_tiles = load_sprite_sheet(RUNNER_SHEET)
    return Sprites(tiles=tiles, coin_tiles=coin_tiles, runner_tiles=runner_tiles)


def load_font() -> pygame.font.Font:
    """Load the game's display font."""
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(io.BytesIO(game_data(FONT_PATH)), FONT_SIZE)


def _draw_text(
    surface: pygame.Surface,
    message: str,
    font: pygame.font.Font,
    x: int,
    y: int,
    color: tuple[int, int, int],
) -> None:
    top = y - font.get_ascent()
    for line in message.split("\n"):
        if line:
            surface.blit(font.render(line, True, color), (x, top))
        top += font.get_linesize()


def write_message(
    x: int, y: int, message: str, surface: pygame.Surface, font: pygame.font.Font
) -> None:
    """Draw a shadowed gold message whose first baseline sits at (x, y)."""
    _draw_text(surface, message, font, x + SHADOW_OFFSET, y + SHADOW_OFFSET, SHADOW_COLOR)
    _draw_text(surface, message, font, x, y, TEXT_COLOR)