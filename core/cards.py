"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable, Iterable, Iterator


class Color(Enum):
    """Display color of a suit."""

    BLACK = auto()
    RED = auto()


class Suit(Enum):
    """Card suits, in canonical deck order."""

    SPADE = auto()
    CLUB = auto()
    DIAMOND = auto()
    HEART = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.SPADE: "♠",
            Suit.CLUB: "♣",
            Suit.DIAMOND: "♦",
            Suit.HEART: "♥",
        }
        return symbols[self]

    @property
    def color(self) -> Color:
        """Return the display color (spades and clubs are black)."""
        if self in (Suit.SPADE, Suit.CLUB):
            return Color.BLACK
        return Color.RED


class Rank(Enum):
    """Card ranks, in canonical deck order."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.name.title()

    @property
    def label(self) -> str:
        """Short label printed in the card corners."""
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def points(self) -> int:
        """Return the nominal point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank.label}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the nominal point value."""
        return self.rank.points

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def color(self) -> Color:
        return self.suit.color

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', '10h', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {rank.label: rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "S": Suit.SPADE,
            "♠": Suit.SPADE,
            "C": Suit.CLUB,
            "♣": Suit.CLUB,
            "D": Suit.DIAMOND,
            "♦": Suit.DIAMOND,
            "H": Suit.HEART,
            "♥": Suit.HEART,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def canonical_cards() -> list[Card]:
    """Return the 52 cards in canonical order (suit by suit, Two to Ace)."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A single 52-card deck shared by both hands of a round.

    Cards are drawn from the end of the list. An exhausted deck refills
    itself with a freshly shuffled set of 52 cards on the next draw, so
    drawing never fails.
    """

    def __init__(
        self,
        rng: Random | None = None,
        shuffle_passes: int = 1,
        on_reshuffle: Callable[[], None] | None = None,
    ) -> None:
        """
        Initialize a shuffled deck.

        Args:
            rng: Random number generator for shuffling
            shuffle_passes: Number of shuffle passes per (re)shuffle
            on_reshuffle: Called whenever an exhausted deck is refilled
        """
        if shuffle_passes < 1:
            raise ValueError("shuffle_passes must be at least 1")

        self._rng = rng or Random()
        self._shuffle_passes = shuffle_passes
        self._cards: list[Card] = []
        self._reshuffles = 0
        self.on_reshuffle = on_reshuffle
        self.reset()
        self.shuffle()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Create a deck holding exactly the given cards, in order.

        The last card is drawn first. Once these cards run out the deck
        refills with a shuffled full deck like any other.
        """
        cards = list(cards)
        if len(set(cards)) != len(cards):
            raise ValueError("Deck cannot contain duplicate cards")

        deck = cls(rng=rng)
        deck._cards = cards
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in canonical order."""
        self._cards = canonical_cards()

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        for _ in range(self._shuffle_passes):
            self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Draw a card from the top of the deck, refilling it if empty."""
        if not self._cards:
            self.reset()
            self.shuffle()
            self._reshuffles += 1
            if self.on_reshuffle is not None:
                self.on_reshuffle()
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def reshuffles(self) -> int:
        """Return how many times the deck refilled itself after running out."""
        return self._reshuffles
