"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand, HandOwner
from core.game import BlackjackGame


def cards(*codes: str) -> list[Card]:
    """Build cards from short strings like 'AS', '10H'."""
    return [Card.from_string(code) for code in codes]


def stacked_deck(*codes: str) -> Deck:
    """A deck that deals the given cards first, in the order listed."""
    return Deck.from_cards(reversed(cards(*codes)), rng=Random(7))


def player_hand(*codes: str) -> Hand:
    return Hand(owner=HandOwner.PLAYER, cards=cards(*codes))


def dealer_hand(*codes: str) -> Hand:
    return Hand(owner=HandOwner.DEALER, cards=cards(*codes))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def hard_20_hand():
    """A player 20 (10-K)."""
    return player_hand("10S", "KH")


@pytest.fixture
def blackjack_hand():
    """A two-card 21 (A-K)."""
    return player_hand("AS", "KH")


@pytest.fixture
def dealer_15_hand():
    """A dealer 15 (10-5), one under the hold line."""
    return dealer_hand("10C", "5D")


@pytest.fixture
def dealer_16_hand():
    """A dealer 16 (10-6), exactly on the hold line."""
    return dealer_hand("10C", "6D")


@pytest.fixture
def game(rng):
    """A new game instance."""
    return BlackjackGame(rng=rng)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=2, max_cards=8):
    """Generate a random player hand."""
    drawn = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    return Hand(owner=HandOwner.PLAYER, cards=drawn)
