"""Read-only views of the game for the presentation layer."""

from dataclasses import dataclass

from core.cards import Card
from core.hand import Hand, HandOwner, HandResult, HandStatus
from core.game.state import GameState


@dataclass(frozen=True)
class HandView:
    """Snapshot of one hand."""

    owner: HandOwner
    cards: tuple[Card, ...]
    status: HandStatus
    value: int
    hides_first_card: bool
    is_bust: bool

    @classmethod
    def from_hand(cls, hand: Hand) -> "HandView":
        """Copy the displayable parts of a hand."""
        return cls(
            owner=hand.owner,
            cards=tuple(hand.cards),
            status=hand.status,
            value=hand.value,
            hides_first_card=hand.hides_first_card,
            is_bust=hand.is_bust,
        )

    @property
    def visible_cards(self) -> tuple[Card | None, ...]:
        """Cards as shown at the table, None for a face-down card."""
        if self.hides_first_card:
            return (None, *self.cards[1:])
        return self.cards


@dataclass(frozen=True)
class GameSnapshot:
    """Snapshot of game state for UI rendering."""

    state: GameState
    result: HandResult | None
    player_hand: HandView
    dealer_hand: HandView
    cards_remaining: int
    can_hit: bool
    can_hold: bool
    can_start_new_round: bool
    finished: bool
