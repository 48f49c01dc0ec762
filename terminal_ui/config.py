"""Layout and color constants for the terminal UI."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ColorPairs:
    """curses color pair numbers."""

    TABLE: int = 1
    CARD_BLACK: int = 2
    CARD_RED: int = 3
    CARD_BACK: int = 4
    HEADER: int = 5
    WIN: int = 6
    LOSE: int = 7
    PUSH: int = 8
    STATUS: int = 9


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Card glyph
    CARD_WIDTH: int = 11
    CARD_HEIGHT: int = 7
    CARD_SPACING: int = 2
    CARDS_PER_ROW: int = 6
    CARD_MIN_STRIDE: int = 4  # keeps the corner label of an overlapped card visible

    # Screen
    TITLE_HEIGHT: int = 2
    MIN_WIDTH: int = 60
    MIN_HEIGHT: int = 20

    # Result popup, as a fraction of the screen
    POPUP_WIDTH_FRACTION: float = 0.4
    POPUP_HEIGHT_FRACTION: float = 0.2


COLOR_PAIRS = ColorPairs()
DIMENSIONS = Dimensions()
