"""Draws the board: tiles, numbers, flags and mines."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Union

import pygame

from .constants import GameState
from .field import Field
from .ui import GREEN, RED, WHITE, Color, FontSource

BLUE: Color = (0, 0, 255)
OPENED_COLOR: Color = WHITE
CLOSED_COLOR: Color = (200, 200, 200)
NUMBER_SIZE = 24

TEXTURE_FILES = {
    "white": "GroundWhite.jpg",
    "flag": "Flag2.png",
    "mine": "Mine.jpg",
    "boom": "Boom.jpg",
}

_FALLBACK_COLORS: dict[str, Color] = {
    "white": WHITE,
    "flag": (230, 120, 0),
    "mine": (60, 60, 60),
    "boom": (200, 30, 30),
}

PathSource = Union[str, "os.PathLike[str]"]


def number_color(count: int) -> Color:
    """Colour of the digit shown for a cell with the given number of adjacent mines."""
    if count < 1:
        raise ValueError(f"no number is shown for {count} adjacent mines")
    if count == 1:
        return BLUE
    if count == 2:
        return GREEN
    return RED


class GameRenderer:
    """Paints the field onto a surface below the interface strip."""

    def __init__(self, offset: int, resource_dir: PathSource = "resources") -> None:
        self.ui_offset = offset
        self.textures: dict[str, pygame.Surface] = {}
        for name, filename in TEXTURE_FILES.items():
            path = Path(resource_dir) / filename
            try:
                self.textures[name] = pygame.image.load(str(path))
            except (pygame.error, OSError):
                print(f"Error loading texture: {path}", file=sys.stderr)
                fallback = pygame.Surface((1, 1))
                fallback.fill(_FALLBACK_COLORS[name])
                self.textures[name] = fallback
        self._scaled: dict[tuple[str, int], pygame.Surface] = {}
        self._fonts: dict[FontSource, pygame.font.Font] = {}

    def _sprite(self, name: str, tile_size: int) -> pygame.Surface:
        key = (name, tile_size)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.scale(
                self.textures[name], (tile_size, tile_size)
            )
        return self._scaled[key]

    def _font(self, font: FontSource) -> pygame.font.Font:
        if font not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[font] = pygame.font.Font(font, NUMBER_SIZE)
        return self._fonts[font]

    def display(
        self,
        surface: pygame.Surface,
        tile_size: int,
        state: GameState,
        font: FontSource,
        field: Field,
    ) -> None:
        """Draw every cell of the field as it should look in the given state."""
        for row in range(field.rows):
            for col in range(field.cols):
                self._draw_cell(surface, tile_size, state, font, field, row, col)

    def _draw_cell(
        self,
        surface: pygame.Surface,
        tile_size: int,
        state: GameState,
        font: FontSource,
        field: Field,
        row: int,
        col: int,
    ) -> None:
        left = col * tile_size
        top = row * tile_size + self.ui_offset
        opened = field.is_opened(row, col)
        flagged = field.is_flagged(row, col)
        mined = field.is_mined(row, col)

        tile = pygame.Rect(left, top, tile_size - 2, tile_size - 2)
        pygame.draw.rect(surface, OPENED_COLOR if opened else CLOSED_COLOR, tile)

        def sprite(name: str) -> None:
            surface.blit(self._sprite(name, tile_size), (left, top))

        def number() -> None:
            count = field.count(row, col)
            if count > 0:
                image = self._font(font).render(str(count), True, number_color(count))
                center = (round(left + tile_size / 2), round(top + tile_size / 2))
                surface.blit(image, image.get_rect(center=center))

        if state is GameState.GAME_OVER:
            if mined:
                sprite("boom")
            elif opened and field.count(row, col) > 0:
                number()
            elif flagged:
                sprite("flag")
        elif state is GameState.WIN:
            if mined:
                sprite("mine")
            else:
                number()
        elif flagged:
            sprite("flag")
        elif opened:
            number()