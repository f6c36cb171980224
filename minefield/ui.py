"""Heads-up display: menus, buttons, messages and their click areas."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

import pygame

from .constants import GameState

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BUTTON_FILL: Color = (100, 100, 250)

_OUTLINE = 2


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in window coordinates."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.left + self.width / 2, self.top + self.height / 2)

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        x0, x1 = sorted((self.left, self.right))
        y0, y1 = sorted((self.top, self.bottom))
        return x0 <= x < x1 and y0 <= y < y1

    def _grown(self, amount: float) -> Rect:
        return Rect(
            self.left - amount,
            self.top - amount,
            self.width + 2 * amount,
            self.height + 2 * amount,
        )

    def _to_pygame(self) -> pygame.Rect:
        return pygame.Rect(
            round(self.left), round(self.top), round(self.width), round(self.height)
        )


@dataclass(frozen=True)
class _Button:
    rect: Rect
    outline: Color
    fill: Color = BUTTON_FILL
    outline_thickness: int = _OUTLINE

    @property
    def bounds(self) -> Rect:
        """Clickable area: the rectangle together with its outline."""
        return self.rect._grown(self.outline_thickness)

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, self.fill, self.rect._to_pygame())
        pygame.draw.rect(
            surface, self.outline, self.bounds._to_pygame(), width=self.outline_thickness
        )


@dataclass(frozen=True)
class _Label:
    text: str
    size: int
    color: Color
    pos: tuple[float, float]
    centered: bool = True


FontSource = Union[str, "os.PathLike[str]", None]


class GameUI:
    """Draws the menus and status bar and tells which button a click hit."""

    def __init__(self, window_width: int, window_height: int, offset: int) -> None:
        self.window_width = window_width
        self.window_height = window_height
        self.ui_offset = offset
        w, h = window_width, window_height
        small_top = offset / 2 - 15

        self.restart_button = _Button(Rect(w - 10 - 100, small_top, 100, 30), WHITE)
        self.menu_button = _Button(Rect(w - 10 - 100, small_top, 100, 30), WHITE)
        self.continue_button = _Button(Rect(w / 2, small_top, 100, 30), WHITE)
        self.finish_button = _Button(Rect(w / 2, small_top, 100, 30), WHITE)
        self.easy_button = _Button(Rect(w / 2 - 200, h / 2 - 150 - offset + 10, 400, 100), RED)
        self.normal_button = _Button(Rect(w / 2 - 200, h / 2 - offset - 50, 400, 100), WHITE)
        self.difficult_button = _Button(
            Rect(w / 2 - 200, h / 2 + 150 - offset - 110, 400, 100), GREEN
        )

        self._labels = {
            "left": _Label("Left Click: Open Tile", 20, WHITE, (10, 10), centered=False),
            "right": _Label("Right Click: Flag Tile", 20, WHITE, (10, 40), centered=False),
            "game_over": _Label("Game Over!", 30, RED, (w / 2, offset // 2)),
            "win": _Label("You Win!", 48, GREEN, (w / 2, offset // 2)),
            "title": _Label("MyMineSweeper", 60, GREEN, (w / 2, offset / 2)),
            "restart": _Label("RESTART", 18, WHITE, self.restart_button.rect.center),
            "menu": _Label("Menu", 18, WHITE, self.menu_button.rect.center),
            "pause": _Label("Pause", 30, WHITE, (w / 2, offset / 2)),
            "continue": _Label("CONTINUE", 18, WHITE, self.continue_button.rect.center),
            "finish": _Label("FINISH", 18, WHITE, self.finish_button.rect.center),
            "easy": _Label("Easy", 48, WHITE, (w / 2, h / 2 - 100 - offset)),
            "normal": _Label("Normal", 48, WHITE, (w / 2, h / 2 - offset)),
            "difficult": _Label("Difficult", 48, WHITE, (w / 2, h / 2 + 100 - offset)),
        }
        self._rendered: dict[str, tuple[pygame.Surface, pygame.Rect]] = {}

        restart = (self.restart_button, "restart")
        self._scenes: dict[GameState, tuple[_Button | str, ...]] = {
            GameState.PLAYING: ("left", "right", self.menu_button, "menu"),
            GameState.MAIN_MENU: (
                "title",
                self.easy_button,
                "easy",
                self.normal_button,
                "normal",
                self.difficult_button,
                "difficult",
            ),
            GameState.PAUSE_MENU: (
                "pause",
                self.continue_button,
                "continue",
                self.finish_button,
                "finish",
            ),
            GameState.GAME_OVER: (*restart, "game_over"),
            GameState.WIN: (*restart, "win"),
            GameState.READY: restart,
        }

    def set_font(self, font: FontSource) -> None:
        """Render every text with the font file given, or pygame's default for None."""
        if not pygame.font.get_init():
            pygame.font.init()
        fonts: dict[int, pygame.font.Font] = {}
        rendered = {}
        for name, label in self._labels.items():
            if label.size not in fonts:
                fonts[label.size] = pygame.font.Font(font, label.size)
            image = fonts[label.size].render(label.text, True, label.color)
            x, y = round(label.pos[0]), round(label.pos[1])
            rect = image.get_rect(center=(x, y)) if label.centered else image.get_rect(topleft=(x, y))
            rendered[name] = (image, rect)
        self._rendered = rendered

    def draw(self, surface: pygame.Surface, state: GameState) -> None:
        """Draw the parts of the interface that belong to the given state."""
        for item in self._scenes.get(state, ()):
            if isinstance(item, _Button):
                item.draw(surface)
            elif item in self._rendered:
                surface.blit(*self._rendered[item])

    @staticmethod
    def _hit(button: _Button, pos: tuple[float, float]) -> bool:
        return button.bounds.contains(float(pos[0]), float(pos[1]))

    def is_restart_button_clicked(self, pos: tuple[float, float]) -> bool:
        return self._hit(self.restart_button, pos)

    def is_menu_button_clicked(self, pos: tuple[float, float]) -> bool:
        return self._hit(self.menu_button, pos)

    def is_continue_button_clicked(self, pos: tuple[float, float]) -> bool:
        return self._hit(self.continue_button, pos)

    def is_finish_button_clicked(self, pos: tuple[float, float]) -> bool:
        return self._hit(self.finish_button, pos)

    def is_easy_button_clicked(self, pos: tuple[float, float]) -> bool:
        return self._hit(self.easy_button, pos)

    def is_normal_button_clicked(self, pos: tuple[float, float]) -> bool:
        return self._hit(self.normal_button, pos)

    def is_difficult_button_clicked(self, pos: tuple[float, float]) -> bool:
        return self._hit(self.difficult_button, pos)