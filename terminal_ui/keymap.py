"""Translate raw key codes into game actions."""

from core.game.actions import Action
from core.game.state import GameState

KEY_ESCAPE = 27

PLAYING_KEYS: dict[str, Action] = {
    "1": Action.HIT,
    "h": Action.HIT,
    "2": Action.HOLD,
    "s": Action.HOLD,
    "q": Action.QUIT,
}

PLAYING_HELP = [("1", "Hit"), ("2", "Hold"), ("Q", "Quit")]
SCORE_SCREEN_HELP = [("Any", "New Hand"), ("Q", "Quit")]


def action_for_key(key: int, state: GameState) -> Action | None:
    """
    Map a key code from getch() to an action.

    On the score screen any key other than q/Esc deals a new round.
    Unmapped keys while playing return None.
    """
    if key == KEY_ESCAPE:
        return Action.QUIT

    char = chr(key).lower() if 0 <= key < 0x110000 else ""

    if char == "q":
        return Action.QUIT

    if state == GameState.HAND_SCORE_SCREEN:
        return Action.NEW_ROUND

    return PLAYING_KEYS.get(char)


def help_text(state: GameState) -> str:
    """Key hints shown under the player's hand."""
    hints = SCORE_SCREEN_HELP if state == GameState.HAND_SCORE_SCREEN else PLAYING_HELP
    return "   ".join(f"{key}) {label}" for key, label in hints)
