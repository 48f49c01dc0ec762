"""Scripted dealer policy."""

from core.cards import Card, Deck
from core.hand import Hand

# Dealer draws below this value and holds at or above it
DEALER_HOLD_THRESHOLD = 16


def dealer_should_hit(hand: Hand) -> bool:
    """Determine if the dealer should draw another card."""
    return hand.value < DEALER_HOLD_THRESHOLD


def do_dealer_action(hand: Hand, deck: Deck) -> Card | None:
    """
    Take one dealer policy step.

    Draws a card while the hand is under 16, otherwise holds. A hand that
    is no longer active is left alone.

    Returns:
        The drawn card, or None if the dealer held (or had already held)
    """
    if not hand.is_dealer:
        raise ValueError("Dealer policy only applies to the dealer's hand")

    if not hand.is_active:
        return None

    if dealer_should_hit(hand):
        return hand.hit(deck)

    hand.hold()
    return None


def reveal(hand: Hand) -> None:
    """Show the dealer's face-down card."""
    hand.reveal()
