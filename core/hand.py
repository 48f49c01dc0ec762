"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator

from core.cards import Card, Deck

BLACKJACK = 21


class HandOwner(Enum):
    """Who a hand belongs to."""

    PLAYER = auto()
    DEALER = auto()

    def __str__(self) -> str:
        return self.name.title()


class HandStatus(Enum):
    """Hand lifecycle: ACTIVE → HELD, and for the dealer → REVEALED."""

    ACTIVE = auto()
    HELD = auto()
    REVEALED = auto()

    def __str__(self) -> str:
        return self.name.title()


class HandResult(Enum):
    """Outcome of a finished round, from the player's side."""

    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    PUSH = auto()
    BUST = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def count_value(cards: Iterable[Card]) -> int:
    """
    Count the value of a set of cards.

    Non-ace cards are summed first. Each ace is then added in hand order,
    as 11 if the running total stays at or below 21, otherwise as 1. Aces
    are resolved one at a time rather than globally, so A-A-A-9 counts 22.
    """
    cards = list(cards)
    total = sum(card.value for card in cards if not card.is_ace)

    for card in cards:
        if not card.is_ace:
            continue
        if total + card.value > BLACKJACK:
            total += 1
        else:
            total += card.value

    return total


def is_bust(cards: Iterable[Card]) -> bool:
    """Check if the cards count over 21."""
    return count_value(cards) > BLACKJACK


@dataclass
class Hand:
    """A player's or dealer's hand for one round."""

    owner: HandOwner
    cards: list[Card] = field(default_factory=list)
    status: HandStatus = HandStatus.ACTIVE

    def __post_init__(self) -> None:
        if len(self.cards) < 2:
            raise ValueError("A hand is dealt with at least two cards")

    @classmethod
    def deal(cls, deck: Deck, owner: HandOwner) -> "Hand":
        """Deal a fresh two-card hand from the deck."""
        return cls(owner=owner, cards=[deck.draw(), deck.draw()])

    def hit(self, deck: Deck) -> Card:
        """Draw one card from the deck into the hand."""
        if not self.is_active:
            raise ValueError(f"Cannot hit a {self.status} hand")
        card = deck.draw()
        self.cards.append(card)
        return card

    def hold(self) -> None:
        """Stop drawing cards for this round."""
        if self.status == HandStatus.REVEALED:
            raise ValueError("Cannot hold a revealed hand")
        self.status = HandStatus.HELD

    def reveal(self) -> None:
        """Turn the dealer's face-down first card up."""
        if self.owner != HandOwner.DEALER:
            raise ValueError("Only the dealer's hand can be revealed")
        self.status = HandStatus.REVEALED

    @property
    def value(self) -> int:
        """Return the hand value (see count_value)."""
        return count_value(self.cards)

    @property
    def is_bust(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    @property
    def is_active(self) -> bool:
        return self.status == HandStatus.ACTIVE

    @property
    def is_held(self) -> bool:
        return self.status == HandStatus.HELD

    @property
    def is_revealed(self) -> bool:
        return self.status == HandStatus.REVEALED

    @property
    def is_dealer(self) -> bool:
        return self.owner == HandOwner.DEALER

    @property
    def hides_first_card(self) -> bool:
        """Check if the first card is face down (dealer, before reveal)."""
        return self.is_dealer and not self.is_revealed

    @property
    def visible_cards(self) -> list[Card | None]:
        """Return the cards as shown at the table, None for a face-down card."""
        if self.hides_first_card:
            return [None, *self.cards[1:]]
        return list(self.cards)

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(
            "??" if card is None else str(card) for card in self.visible_cards
        )
        if self.hides_first_card:
            return cards_str
        value_str = "(BUST)" if self.is_bust else f"({self.value})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.owner.name}, {self.cards!r}, {self.status.name})"


def score_hands(player_hand: Hand, dealer_hand: Hand) -> HandResult | None:
    """
    Decide whether the round is over.

    Returns:
        BUST if the player busted
        PLAYER_WIN if the dealer busted
        the value comparison once neither hand is still active
        None while the round is still in play
    """
    if player_hand.is_bust:
        return HandResult.BUST

    if dealer_hand.is_bust:
        return HandResult.PLAYER_WIN

    if player_hand.is_active or dealer_hand.is_active:
        return None

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > dealer_value:
        return HandResult.PLAYER_WIN
    if dealer_value > player_value:
        return HandResult.DEALER_WIN
    return HandResult.PUSH
