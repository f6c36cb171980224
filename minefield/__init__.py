"""A minesweeper board with first-click-safe mines, menus and a pygame window."""

__version__ = "0.1.0"
__all__ = ["constants", "field", "ui", "renderer", "game"]