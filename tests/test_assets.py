import pygame
import pytest

from coinrunner.assets import (
    DATA_ENV,
    FRAME_HEIGHT,
    FRAME_WIDTH,
    TEXT_COLOR,
    game_data,
    load_image,
    load_sprite_sheet,
    slice_sprite_sheet,
    write_message,
)


def _sheet(colors_by_row):
    rows = len(colors_by_row)
    cols = len(colors_by_row[0])
    sheet = pygame.Surface((cols * FRAME_WIDTH, rows * FRAME_HEIGHT), pygame.SRCALPHA)
    for r, row in enumerate(colors_by_row):
        for c, color in enumerate(row):
            sheet.fill(color, pygame.Rect(c * FRAME_WIDTH, r * FRAME_HEIGHT, FRAME_WIDTH, FRAME_HEIGHT))
    return sheet


def test_game_data_reads_relative_to_root(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_ENV, str(tmp_path))
    (tmp_path / "leveldata").mkdir()
    (tmp_path / "leveldata" / "x.csv").write_bytes(b"1,2,3")
    assert game_data("leveldata/x.csv") == b"1,2,3"


def test_game_data_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_ENV, str(tmp_path))
    with pytest.raises(FileNotFoundError):
        game_data("assets/missing.png")


def test_slice_sprite_sheet_order_and_padding():
    red, green, blue, white = (255, 0, 0, 255), (0, 255, 0, 255), (0, 0, 255, 255), (255, 255, 255, 255)
    sprites = slice_sprite_sheet(_sheet([[red, green], [blue, white]]))
    assert len(sprites) == 6
    assert sprites[0] is sprites[-1]
    assert sprites[0].get_at((5, 5)) == pygame.Color(0, 0, 0, 255)
    assert [s.get_at((1, 1)) for s in sprites[1:5]] == [pygame.Color(*c) for c in (red, green, blue, white)]
    assert all(s.get_size() == (FRAME_WIDTH, FRAME_HEIGHT) for s in sprites)


def test_load_image_and_sheet_round_trip(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_ENV, str(tmp_path))
    (tmp_path / "assets").mkdir()
    color = (10, 200, 30, 255)
    sheet = _sheet([[color, color, color]])
    pygame.image.save(sheet, str(tmp_path / "assets" / "sheet.png"))

    image = load_image("assets/sheet.png")
    assert image.get_size() == sheet.get_size()
    assert image.get_at((70, 10)) == pygame.Color(*color)

    sprites = load_sprite_sheet("assets/sheet.png")
    assert len(sprites) == 5
    assert sprites[2].get_at((0, 0)) == pygame.Color(*color)


def _rendered(message):
    pygame.font.init()
    font = pygame.font.Font(None, 48)
    surface = pygame.Surface((400, 300))
    surface.fill((0, 0, 255))
    write_message(20, 60, message, surface, font)
    return surface


def test_write_message_draws_gold_text():
    surface = _rendered("Coins")
    gold = pygame.Color(*TEXT_COLOR)
    found = any(
        surface.get_at((x, y)) == gold
        for x in range(surface.get_width())
        for y in range(surface.get_height())
    )
    assert found


def test_write_message_multiline_is_taller():
    def text_height(surface):
        rows = [
            y
            for y in range(surface.get_height())
            if any(surface.get_at((x, y)) != pygame.Color(0, 0, 255) for x in range(surface.get_width()))
        ]
        return rows[-1] - rows[0]

    assert text_height(_rendered("one\ntwo")) > text_height(_rendered("one"))