"""Game session: state machine, mouse handling and the main loop."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from .constants import NUM_COLS, NUM_ROWS, TILE_SIZE, UI_AREA_HEIGHT, GameState, Level
from .field import Field
from .renderer import GameRenderer
from .ui import GameUI

RESOURCE_DIR = Path("resources")
FONT_PATH = RESOURCE_DIR / "arial.ttf"
WINDOW_TITLE = "MineSweeper"

_BOARD_STATES = (GameState.PLAYING, GameState.GAME_OVER, GameState.WIN)
_RESTARTABLE = (GameState.GAME_OVER, GameState.WIN, GameState.READY)

Point = tuple[float, float]


class Game:
    """One session of the game, driven by mouse clicks."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.window_width = NUM_COLS * TILE_SIZE
        self.window_height = NUM_ROWS * TILE_SIZE + UI_AREA_HEIGHT
        self.state = GameState.MAIN_MENU
        self.level = Level.BEFORE_CHOOSING
        self.field = Field(rng=self._rng)
        self.open_count = 0
        self.first_click = True
        self.ui = GameUI(self.window_width, self.window_height, UI_AREA_HEIGHT)

    def reset_game(self) -> None:
        """Start a fresh board and go straight to play."""
        self.field = Field(rng=self._rng)
        self.open_count = 0
        self.state = GameState.PLAYING
        self.first_click = True

    def _cell_at(self, pos: Point) -> tuple[int, int] | None:
        col = int(pos[0] / TILE_SIZE)
        row = int((pos[1] - UI_AREA_HEIGHT) / TILE_SIZE)
        if 0 <= row < self.field.rows and 0 <= col < self.field.cols:
            return row, col
        return None

    def handle_left_click(self, pos: Point) -> None:
        """React to the primary button pressed at a window position."""
        if self.state is GameState.MAIN_MENU:
            choices = (
                ("easy", self.ui.is_easy_button_clicked),
                ("normal", self.ui.is_normal_button_clicked),
                ("difficult", self.ui.is_difficult_button_clicked),
            )
            for name, hit in choices:
                if hit(pos):
                    print(name)
                    break

        if 0 <= pos[1] < UI_AREA_HEIGHT:
            if self.state in _RESTARTABLE:
                if self.ui.is_restart_button_clicked(pos):
                    self.reset_game()
            elif self.state is GameState.PLAYING:
                if self.ui.is_menu_button_clicked(pos):
                    self.state = GameState.PAUSE_MENU
        elif self.state is GameState.PAUSE_MENU:
            if self.ui.is_continue_button_clicked(pos):
                self.state = GameState.PLAYING
            elif self.ui.is_finish_button_clicked(pos):
                self.state = GameState.MAIN_MENU
        elif self.state is GameState.PLAYING:
            self._open_cell(pos)

    def _open_cell(self, pos: Point) -> None:
        cell = self._cell_at(pos)
        if cell is None:
            return
        row, col = cell
        if self.first_click:
            self.field.place_mines(row, col)
            self.first_click = False
        if self.field.is_flagged(row, col) or self.field.is_opened(row, col):
            return
        if self.field.is_mined(row, col):
            self.state = GameState.GAME_OVER
            return
        self.open_count += self.field.auto_release(row, col)
        if self.open_count == self.field.safe_cells:
            self.state = GameState.WIN

    def handle_right_click(self, pos: Point) -> None:
        """Toggle the flag on an unopened cell while playing."""
        if self.state is not GameState.PLAYING:
            return
        cell = self._cell_at(pos)
        if cell is not None and not self.field.is_opened(*cell):
            self.field.toggle_flag(*cell)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        if not FONT_PATH.is_file():
            raise FileNotFoundError(f"Error loading font: {FONT_PATH}")
        pygame.init()
        try:
            window = pygame.display.set_mode((self.window_width, self.window_height))
            pygame.display.set_caption(WINDOW_TITLE)
            font = str(FONT_PATH)
            self.ui.set_font(font)
            renderer = GameRenderer(UI_AREA_HEIGHT, RESOURCE_DIR)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        if event.button == 1:
                            self.handle_left_click(event.pos)
                        elif event.button == 3:
                            self.handle_right_click(event.pos)
                window.fill((0, 0, 0))
                if self.state in _BOARD_STATES:
                    renderer.display(window, TILE_SIZE, self.state, font, self.field)
                self.ui.draw(window, self.state)
                pygame.display.flip()
                clock.tick(60)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; returns the process exit status."""
    parser = argparse.ArgumentParser(prog="minefield", description="Play Minesweeper.")
    parser.parse_args(argv)
    try:
        Game(random.Random()).run()
    except FileNotFoundError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0