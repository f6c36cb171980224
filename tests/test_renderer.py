import random

import pygame
import pytest

from minefield.constants import GameState
from minefield.field import Field
from minefield.renderer import (
    BLUE,
    CLOSED_COLOR,
    OPENED_COLOR,
    TEXTURE_FILES,
    GameRenderer,
    number_color,
)
from minefield.ui import GREEN, RED

TILE = 20
OFFSET = 10


@pytest.fixture
def renderer(tmp_path):
    return GameRenderer(OFFSET, tmp_path)


@pytest.fixture
def field():
    f = Field(rows=3, cols=3, mine_count=1, rng=random.Random(0))
    f.place_mines(0, 0)
    return f


def _surface(field):
    surface = pygame.Surface((field.cols * TILE, field.rows * TILE + OFFSET))
    surface.fill((0, 0, 0))
    return surface


def _mine_cell(field):
    return next(
        (r, c) for r in range(field.rows) for c in range(field.cols) if field.is_mined(r, c)
    )


def _pixel(surface, row, col, dx=1, dy=1):
    return tuple(surface.get_at((col * TILE + dx, row * TILE + OFFSET + dy)))[:3]


def _tile_colors(surface, row, col):
    return {
        tuple(surface.get_at((col * TILE + x, row * TILE + OFFSET + y)))[:3]
        for x in range(TILE - 2)
        for y in range(TILE - 2)
    }


def test_number_colors():
    assert number_color(1) == BLUE
    assert number_color(2) == GREEN
    assert number_color(3) == RED
    assert number_color(8) == RED


def test_number_color_rejects_zero():
    with pytest.raises(ValueError):
        number_color(0)


def test_missing_textures_fall_back(renderer, capsys):
    assert set(renderer.textures) == set(TEXTURE_FILES)
    assert "Error loading texture" in capsys.readouterr().err


def test_playing_tiles_show_open_and_closed(renderer, field):
    field.auto_release(0, 0)
    surface = _surface(field)
    renderer.display(surface, TILE, GameState.PLAYING, None, field)
    assert _pixel(surface, 0, 0) == OPENED_COLOR
    row, col = _mine_cell(field)
    assert _pixel(surface, row, col) == CLOSED_COLOR
    # the two-pixel gap between tiles stays unpainted
    assert _pixel(surface, 0, 0, TILE - 1, TILE - 1) == (0, 0, 0)


def test_playing_shows_number_on_opened_cell(renderer, field):
    row, col = _mine_cell(field)
    neighbour = next(
        (r, c)
        for r in range(field.rows)
        for c in range(field.cols)
        if not field.is_mined(r, c) and field.count(r, c) > 0
    )
    field.open(*neighbour)
    surface = _surface(field)
    renderer.display(surface, TILE, GameState.PLAYING, None, field)
    assert len(_tile_colors(surface, *neighbour)) > 1


def test_playing_blank_opened_cell_is_plain(renderer, field):
    field.open(0, 0)
    surface = _surface(field)
    renderer.display(surface, TILE, GameState.PLAYING, None, field)
    assert _tile_colors(surface, 0, 0) == {OPENED_COLOR}


def test_playing_flag_drawn(renderer, field):
    field.toggle_flag(0, 0)
    surface = _surface(field)
    renderer.display(surface, TILE, GameState.PLAYING, None, field)
    assert _pixel(surface, 0, 0) == tuple(renderer.textures["flag"].get_at((0, 0)))[:3]


def test_game_over_shows_boom_on_mines(renderer, field):
    row, col = _mine_cell(field)
    surface = _surface(field)
    renderer.display(surface, TILE, GameState.GAME_OVER, None, field)
    assert _pixel(surface, row, col) == tuple(renderer.textures["boom"].get_at((0, 0)))[:3]
    assert _pixel(surface, 0, 0) == CLOSED_COLOR


def test_win_shows_mine_texture(renderer, field):
    row, col = _mine_cell(field)
    surface = _surface(field)
    renderer.display(surface, TILE, GameState.WIN, None, field)
    assert _pixel(surface, row, col) == tuple(renderer.textures["mine"].get_at((0, 0)))[:3]