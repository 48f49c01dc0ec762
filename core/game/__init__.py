"""Round controller and state management."""

from core.game.actions import Action
from core.game.events import GameEvent, EventEmitter, EventType
from core.game.snapshot import GameSnapshot, HandView
from core.game.state import GameState
from core.game.tally import SessionTally
from core.game.engine import BlackjackGame

__all__ = [
    "Action",
    "GameEvent",
    "EventEmitter",
    "EventType",
    "GameSnapshot",
    "HandView",
    "GameState",
    "SessionTally",
    "BlackjackGame",
]
