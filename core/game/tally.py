"""Running win/loss tally for the current session."""

from dataclasses import dataclass

from core.hand import HandResult
from core.game.events import EventEmitter, EventType, GameEvent


@dataclass
class SessionTally:
    """Counts round results for as long as the game is open."""

    rounds_played: int = 0
    player_wins: int = 0
    dealer_wins: int = 0
    pushes: int = 0
    busts: int = 0

    def attach(self, events: EventEmitter) -> None:
        """Start counting ROUND_ENDED events from an emitter."""
        events.subscribe(self.on_round_ended, EventType.ROUND_ENDED)

    def on_round_ended(self, event: GameEvent) -> None:
        self.record(HandResult[event.data["result"]])

    def record(self, result: HandResult) -> None:
        """Record the result of one round."""
        self.rounds_played += 1
        if result == HandResult.PLAYER_WIN:
            self.player_wins += 1
        elif result == HandResult.DEALER_WIN:
            self.dealer_wins += 1
        elif result == HandResult.PUSH:
            self.pushes += 1
        else:
            self.busts += 1

    @property
    def losses(self) -> int:
        """Rounds the player lost, by bust or on value."""
        return self.dealer_wins + self.busts

    @property
    def win_rate(self) -> float:
        """Fraction of rounds won (0.0 before any round)."""
        if self.rounds_played == 0:
            return 0.0
        return self.player_wins / self.rounds_played

    def __str__(self) -> str:
        text = f"W {self.player_wins}  L {self.losses}  P {self.pushes}"
        if self.rounds_played:
            text += f"  {self.win_rate:.0%}"
        return text
