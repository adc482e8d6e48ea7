"""Level layouts built from CSV tile grids and actor maps."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import pygame

from coinrunner.actors import Coin, Spawn
from coinrunner.assets import (
    FRAME_HEIGHT,
    FRAME_WIDTH,
    SCREEN_HEIGHT,
    Sprites,
    game_data,
    load_image,
)

MAX_LEVEL_WIDTH = 16320
GRID_ROWS = SCREEN_HEIGHT // FRAME_HEIGHT

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _cell_value(cell: str) -> int:
    return int(cell) if _INTEGER.fullmatch(cell) else 0


def parse_level_grid(text: str) -> list[list[int]]:
    """Parse a tile grid; cells that are not integers become 0."""
    grid: list[list[int]] = [[] for _ in range(GRID_ROWS)]
    for row, line in enumerate(text.split("\n")):
        line = line.removesuffix("\r")
        if not line:
            continue
        if row >= GRID_ROWS:
            raise ValueError(f"level grid has more than {GRID_ROWS} rows")
        grid[row].extend(_cell_value(cell) for cell in line.split(","))
    return grid


def level_width(grid: list[list[int]]) -> int:
    """Pixel width of a grid, capped at the largest drawable width."""
    columns = max((len(row) for row in grid), default=0)
    return min(max(columns, 1) * FRAME_WIDTH, MAX_LEVEL_WIDTH)


def render_level(grid: list[list[int]], tiles: list[pygame.Surface]) -> pygame.Surface:
    """Draw a grid of tile numbers onto a transparent surface."""
    image = pygame.Surface((level_width(grid), SCREEN_HEIGHT), pygame.SRCALPHA)
    image.fill((0, 0, 0, 0))
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if 0 < cell < len(tiles):
                image.blit(tiles[cell], (col * FRAME_WIDTH, row * FRAME_HEIGHT))
    return image


def parse_actors(text: str) -> tuple[list[Coin], list[Spawn]]:
    """Read coins ("c") and spawn points ("s") from an actor map."""
    coins: list[Coin] = []
    spawns: list[Spawn] = []
    for row, line in enumerate(text.split("\n")):
        for col, cell in enumerate(line.split(",")):
            x, y = col * FRAME_WIDTH, row * FRAME_HEIGHT
            if cell == "s":
                spawns.append(Spawn(x, y))
            elif cell == "c":
                coins.append(Coin(x, y))
    return coins, spawns


@dataclass
class Level:
    """A playable level: terrain images, actors and tuning values."""

    level_number: int
    level_image: pygame.Surface
    background_image: pygame.Surface
    foreground_image: pygame.Surface
    backgrounds: tuple[pygame.Surface, ...] = ()
    coins: list[Coin] = field(default_factory=list)
    spawns: list[Spawn] = field(default_factory=list)
    coin_decay: int = 90
    coin_hole_penalty: int = 5
    move_speed: int = 4
    jump_height: int = 8
    gravity: float = 0.5

    @property
    def width(self) -> int:
        return self.level_image.get_width()

    def solid_at(self, x: int, y: int) -> bool:
        """Whether the terrain has a visible pixel at (x, y)."""
        if not self.level_image.get_rect().collidepoint(x, y):
            return False
        return self.level_image.get_at((x, y)).a > 0

    def start_position(self) -> tuple[int, int]:
        first = self.spawns[0]
        return first.x + FRAME_WIDTH, first.y

    def previous_spawn(self, x: int, y: int) -> tuple[int, int]:
        """Position of the last spawn point behind x."""
        spawn_x, spawn_y = 0, 0
        for spawn in self.spawns:
            if spawn_x < spawn.x < x:
                spawn_x, spawn_y = spawn.x + FRAME_WIDTH, spawn.y
        return spawn_x, spawn_y

    def next_spawn(self, x: int, y: int) -> tuple[int, int]:
        """Position of the next spawn point ahead of x, or the start."""
        spawn_x, spawn_y = self.width, 0
        found = False
        for spawn in self.spawns:
            if x < spawn.x < spawn_x:
                spawn_x, spawn_y = spawn.x + FRAME_WIDTH, spawn.y
                found = True
        return (spawn_x, spawn_y) if found else self.start_position()


def _layer(path: str, tiles: list[pygame.Surface]) -> pygame.Surface:
    return render_level(parse_level_grid(game_data(path).decode("utf-8")), tiles)


def load_level(level_number: int, sprites: Sprites) -> Level:
    """Build a level from its CSV files and the background images."""
    backgrounds = tuple(load_image(f"assets/Background_Layer_{i}.png") for i in (1, 2, 3))
    prefix = f"leveldata/level_{level_number}"
    coins, spawns = parse_actors(game_data(f"{prefix}_actors.csv").decode("utf-8"))
    return Level(
        level_number=level_number,
        level_image=_layer(f"{prefix}_main.csv", sprites.tiles),
        background_image=_layer(f"{prefix}_background.csv", sprites.tiles),
        foreground_image=_layer(f"{prefix}_foreground.csv", sprites.tiles),
        backgrounds=backgrounds,
        coins=coins,
        spawns=spawns,
    )