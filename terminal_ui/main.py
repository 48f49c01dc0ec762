"""Main entry point for the terminal blackjack UI."""

import curses
from collections import deque

from config import AppConfig, config
from core.game.engine import BlackjackGame
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.tally import SessionTally
from terminal_ui.keymap import action_for_key
from terminal_ui.screen import Screen

# Events that are too chatty for the status line outside debug mode
QUIET_EVENTS = {
    EventType.GAME_STARTED,
    EventType.CARD_DEALT,
    EventType.ROUND_ENDED,
}


class Application:
    """Owns the game, the session tally and the screen, and runs the key loop."""

    def __init__(self, stdscr: "curses.window", app_config: AppConfig = config) -> None:
        self.config = app_config
        curses.curs_set(0)
        self.screen = Screen(stdscr, use_color=app_config.display.use_color)
        self.stdscr = stdscr

        log_lines = app_config.display.event_log_lines if app_config.debug else 1
        self.messages: deque[str] = deque(maxlen=log_lines)

        events = EventEmitter()
        events.subscribe(self._on_event)
        self.tally = SessionTally()
        self.tally.attach(events)

        self.game = BlackjackGame(
            rng=app_config.game.make_rng(),
            shuffle_passes=app_config.game.shuffle_passes,
            events=events,
        )

    def _on_event(self, event: GameEvent) -> None:
        """Keep the latest event messages for the status line."""
        if event.event_type in QUIET_EVENTS and not self.config.debug:
            return
        self.messages.append(event.message)

    def run(self) -> None:
        """Draw, read a key, dispatch, until the player quits."""
        while not self.game.finished:
            self.screen.draw(self.game.snapshot(), self.tally, list(self.messages))

            key = self.stdscr.getch()
            if key in (-1, curses.KEY_RESIZE):
                continue

            action = action_for_key(key, self.game.state)
            if action is not None:
                self.game.dispatch(action)


def _run(stdscr: "curses.window") -> None:
    Application(stdscr).run()


def main() -> None:
    """Start the game; curses.wrapper restores the terminal on exit."""
    curses.wrapper(_run)


if __name__ == "__main__":
    main()
