"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Color, Deck, Rank, Suit
from core.hand import Hand, HandOwner, HandResult, HandStatus, count_value, is_bust

__all__ = [
    "Card",
    "Color",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "HandOwner",
    "HandResult",
    "HandStatus",
    "count_value",
    "is_bust",
]
