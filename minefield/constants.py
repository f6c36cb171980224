"""Board dimensions, layout sizes and the game's state enumerations."""

from enum import Enum, auto

NUM_ROWS = 16
NUM_COLS = 32
NUM_MINES = 60

TILE_SIZE = 50
UI_AREA_HEIGHT = 70


class GameState(Enum):
    """Which screen the game is on."""

    PLAYING = auto()
    GAME_OVER = auto()
    WIN = auto()
    READY = auto()
    MAIN_MENU = auto()
    PAUSE_MENU = auto()


class Level(Enum):
    """Difficulty chosen on the main menu."""

    BEFORE_CHOOSING = auto()
    EASY = auto()
    NORMAL = auto()
    DIFFICULT = auto()