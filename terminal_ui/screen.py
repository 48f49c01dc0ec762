"""Curses drawing of a game snapshot."""

import curses

from core.cards import Card, Color
from core.hand import HandOwner, HandResult
from core.game.snapshot import GameSnapshot, HandView
from core.game.state import GameState
from core.game.tally import SessionTally
from terminal_ui.config import COLOR_PAIRS, DIMENSIONS
from terminal_ui.keymap import help_text
from terminal_ui.widgets import card_positions, glyph_lines, result_lines, status_lines

RESULT_COLORS = {
    HandResult.PLAYER_WIN: COLOR_PAIRS.WIN,
    HandResult.DEALER_WIN: COLOR_PAIRS.LOSE,
    HandResult.PUSH: COLOR_PAIRS.PUSH,
    HandResult.BUST: COLOR_PAIRS.LOSE,
}


def init_colors() -> None:
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(COLOR_PAIRS.TABLE, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_PAIRS.CARD_BLACK, curses.COLOR_BLACK, curses.COLOR_WHITE)
    curses.init_pair(COLOR_PAIRS.CARD_RED, curses.COLOR_RED, curses.COLOR_WHITE)
    curses.init_pair(COLOR_PAIRS.CARD_BACK, curses.COLOR_BLUE, curses.COLOR_WHITE)
    curses.init_pair(COLOR_PAIRS.HEADER, curses.COLOR_CYAN, -1)
    curses.init_pair(COLOR_PAIRS.WIN, curses.COLOR_GREEN, -1)
    curses.init_pair(COLOR_PAIRS.LOSE, curses.COLOR_RED, -1)
    curses.init_pair(COLOR_PAIRS.PUSH, curses.COLOR_YELLOW, -1)
    curses.init_pair(COLOR_PAIRS.STATUS, curses.COLOR_WHITE, -1)


class Screen:
    """Draws the table: title bar, both hands, result popup and event log."""

    def __init__(self, stdscr: "curses.window", use_color: bool = True) -> None:
        self.stdscr = stdscr
        self.use_color = use_color and curses.has_colors()
        if self.use_color:
            init_colors()

    def _attr(self, pair: int, bold: bool = False) -> int:
        attr = curses.color_pair(pair) if self.use_color else 0
        return attr | curses.A_BOLD if bold else attr

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        """addstr that ignores writes falling off the screen edges."""
        try:
            self.stdscr.addstr(y, x, text, attr)
        except curses.error:
            pass

    def draw(
        self,
        snapshot: GameSnapshot,
        tally: SessionTally,
        messages: list[str],
    ) -> None:
        """Redraw the whole screen from a snapshot."""
        self.stdscr.erase()
        height, width = self.stdscr.getmaxyx()

        if height < DIMENSIONS.MIN_HEIGHT or width < DIMENSIONS.MIN_WIDTH:
            self.addstr(0, 0, "Terminal too small for the table")
            self.stdscr.refresh()
            return

        self._draw_title(width, tally)

        log_height = len(messages)
        top = DIMENSIONS.TITLE_HEIGHT
        panel_height = height - top - log_height
        half = width // 2

        self._draw_hand(snapshot.player_hand, top, 0, panel_height, half, snapshot.state)
        self._draw_hand(snapshot.dealer_hand, top, half, panel_height, width - half, snapshot.state)

        if snapshot.state == GameState.HAND_SCORE_SCREEN:
            self._draw_result(snapshot, height, width)

        for i, message in enumerate(messages):
            self.addstr(top + panel_height + i, 1, message[: width - 2], self._attr(COLOR_PAIRS.STATUS))

        self.stdscr.refresh()

    def _draw_title(self, width: int, tally: SessionTally) -> None:
        header = self._attr(COLOR_PAIRS.HEADER, bold=True)
        self.addstr(0, 1, "Blackjack", header)
        score = str(tally)
        self.addstr(0, max(width - len(score) - 2, 0), score, header)
        self.addstr(1, 0, "─" * width, self._attr(COLOR_PAIRS.TABLE))

    def _draw_box(
        self,
        y: int,
        x: int,
        height: int,
        width: int,
        title: str = "",
        footer: str = "",
    ) -> None:
        """Draw a rounded box with an optional title and footer."""
        attr = self._attr(COLOR_PAIRS.TABLE)
        inner = width - 2
        self.addstr(y, x, "╭" + "─" * inner + "╮", attr)
        for row in range(1, height - 1):
            self.addstr(y + row, x, "│", attr)
            self.addstr(y + row, x + 1, " " * inner)
            self.addstr(y + row, x + width - 1, "│", attr)
        self.addstr(y + height - 1, x, "╰" + "─" * inner + "╯", attr)
        if title:
            self.addstr(y, x + 2, f" {title} ", self._attr(COLOR_PAIRS.HEADER, bold=True))
        if footer:
            self.addstr(y + height - 1, x + 2, f" {footer} ", attr)

    def _card_attr(self, card: Card | None) -> int:
        if card is None:
            return self._attr(COLOR_PAIRS.CARD_BACK)
        if card.color == Color.RED:
            return self._attr(COLOR_PAIRS.CARD_RED, bold=True)
        return self._attr(COLOR_PAIRS.CARD_BLACK, bold=True)

    def _draw_hand(
        self,
        view: HandView,
        y: int,
        x: int,
        height: int,
        width: int,
        state: GameState,
    ) -> None:
        footer = help_text(state) if view.owner == HandOwner.PLAYER else ""
        self._draw_box(y, x, height, width, title=str(view.owner), footer=footer)

        lines = status_lines(view)
        area_height = height - 3 - len(lines)
        area_width = width - 3
        cards = view.visible_cards
        for card, (row, col) in zip(cards, card_positions(len(cards), area_width, area_height)):
            attr = self._card_attr(card)
            for offset, line in enumerate(glyph_lines(card)):
                if row + offset >= area_height:
                    break
                self.addstr(y + 1 + row + offset, x + 2 + col, line[: area_width - col], attr)

        for i, line in enumerate(lines):
            self.addstr(y + height - 1 - len(lines) + i, x + 2, line)

    def _draw_result(self, snapshot: GameSnapshot, height: int, width: int) -> None:
        popup_width = max(int(width * DIMENSIONS.POPUP_WIDTH_FRACTION), 30)
        popup_height = max(int(height * DIMENSIONS.POPUP_HEIGHT_FRACTION), 4)
        y = (height - popup_height) // 2
        x = (width - popup_width) // 2

        self._draw_box(
            y,
            x,
            popup_height,
            popup_width,
            title="Hand Result",
            footer=help_text(snapshot.state),
        )

        lines = result_lines(snapshot)
        if not lines:
            return
        result_attr = self._attr(RESULT_COLORS[snapshot.result], bold=True)
        self.addstr(y + 1, x + 2, lines[0], result_attr)
        for i, line in enumerate(lines[1:], start=2):
            self.addstr(y + i, x + 2, line)
