import pygame
import pytest

from coinrunner.actors import Coin, Spawn
from coinrunner.assets import DATA_ENV, FRAME_HEIGHT, FRAME_WIDTH, Sprites
from coinrunner.level import (
    MAX_LEVEL_WIDTH,
    Level,
    level_width,
    load_level,
    parse_actors,
    parse_level_grid,
    render_level,
)


def _tiles():
    tiles = []
    for color in [(0, 0, 0, 255), (200, 0, 0, 255), (0, 200, 0, 255)]:
        tile = pygame.Surface((FRAME_WIDTH, FRAME_HEIGHT), pygame.SRCALPHA)
        tile.fill(color)
        tiles.append(tile)
    return tiles


def _level(spawns, width_cells=40):
    image = pygame.Surface((width_cells * FRAME_WIDTH, 512), pygame.SRCALPHA)
    image.fill((0, 0, 0, 0))
    return Level(1, image, image, image, spawns=spawns)


def test_parse_level_grid_handles_bad_cells_and_crlf():
    grid = parse_level_grid("1,2\r\n0,x,2\n\n")
    assert grid[0] == [1, 2]
    assert grid[1] == [0, 0, 2]
    assert all(row == [] for row in grid[2:])


def test_parse_level_grid_rejects_extra_rows():
    rows = len(parse_level_grid(""))
    with pytest.raises(ValueError):
        parse_level_grid("\n".join(["1"] * (rows + 1)))


def test_level_width_counts_widest_row_and_caps():
    assert level_width(parse_level_grid("1,2\n0,0,0")) == 3 * FRAME_WIDTH
    assert level_width(parse_level_grid("")) == FRAME_WIDTH
    assert level_width(parse_level_grid(",".join(["1"] * 1000))) == MAX_LEVEL_WIDTH


def test_render_level_places_tiles():
    tiles = _tiles()
    image = render_level(parse_level_grid("0,1\n2,5"), tiles)
    assert image.get_size() == (2 * FRAME_WIDTH, 512)
    assert image.get_at((1, 1)).a == 0
    assert image.get_at((FRAME_WIDTH + 1, 1)) == tiles[1].get_at((0, 0))
    assert image.get_at((1, FRAME_HEIGHT + 1)) == tiles[2].get_at((0, 0))
    assert image.get_at((FRAME_WIDTH + 1, FRAME_HEIGHT + 1)).a == 0


def test_parse_actors():
    coins, spawns = parse_actors("0,s,c\nc,,0\nc\r")
    assert spawns == [Spawn(FRAME_WIDTH, 0)]
    assert coins == [Coin(2 * FRAME_WIDTH, 0), Coin(0, FRAME_HEIGHT)]


def test_solid_at():
    image = render_level(parse_level_grid("0,1"), _tiles())
    level = Level(1, image, image, image)
    assert level.solid_at(FRAME_WIDTH + 3, 3)
    assert not level.solid_at(3, 3)
    assert not level.solid_at(-1, 3)
    assert not level.solid_at(10_000, 3)


def test_start_position():
    spawns = [Spawn(0, 128), Spawn(640, 192)]
    assert _level(spawns).start_position() == (FRAME_WIDTH, 128)


def test_start_position_without_spawns():
    with pytest.raises(IndexError):
        _level([]).start_position()


def test_previous_spawn():
    spawns = [Spawn(0, 128), Spawn(640, 192), Spawn(1280, 64)]
    level = _level(spawns)
    assert level.previous_spawn(1000, 0) == (spawns[1].x + FRAME_WIDTH, spawns[1].y)
    assert level.previous_spawn(2000, 0) == (spawns[2].x + FRAME_WIDTH, spawns[2].y)


def test_next_spawn_and_fallback_to_start():
    spawns = [Spawn(0, 128), Spawn(640, 192), Spawn(1280, 64)]
    level = _level(spawns)
    assert level.next_spawn(100, 0) == (spawns[1].x + FRAME_WIDTH, spawns[1].y)
    assert level.next_spawn(1500, 0) == level.start_position()


def test_load_level(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_ENV, str(tmp_path))
    (tmp_path / "assets").mkdir()
    (tmp_path / "leveldata").mkdir()
    for i in (1, 2, 3):
        pygame.image.save(pygame.Surface((32, 32)), str(tmp_path / "assets" / f"Background_Layer_{i}.png"))
    main = "0,1,2"
    (tmp_path / "leveldata" / "level_1_main.csv").write_text(main)
    (tmp_path / "leveldata" / "level_1_background.csv").write_text("2")
    (tmp_path / "leveldata" / "level_1_foreground.csv").write_text("")
    (tmp_path / "leveldata" / "level_1_actors.csv").write_text("s,c,c")

    level = load_level(1, Sprites(tiles=_tiles()))
    assert level.level_number == 1
    assert level.level_image.get_width() == level_width(parse_level_grid(main))
    assert level.solid_at(FRAME_WIDTH + 1, 1)
    assert not level.solid_at(1, 1)
    assert level.spawns == [Spawn(0, 0)]
    assert len(level.coins) == 2
    assert len(level.backgrounds) == 3
    assert (level.coin_decay, level.coin_hole_penalty, level.move_speed, level.jump_height) == (90, 5, 4, 8)


def test_load_level_missing_files(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_ENV, str(tmp_path))
    with pytest.raises(FileNotFoundError):
        load_level(3, Sprites(tiles=_tiles()))