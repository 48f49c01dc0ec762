"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round controller states.

    Flow: PLAYING_HAND → HAND_SCORE_SCREEN → PLAYING_HAND → ...
    """

    # Player is deciding; dealer may still be drawing
    PLAYING_HAND = auto()

    # Round resolved, dealer revealed, waiting for the next round
    HAND_SCORE_SCREEN = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.PLAYING_HAND: [GameState.HAND_SCORE_SCREEN],
    GameState.HAND_SCORE_SCREEN: [GameState.PLAYING_HAND],
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
