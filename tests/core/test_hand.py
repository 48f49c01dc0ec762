"""Tests for Hand evaluation."""

import pytest
from hypothesis import given

from core.cards import Card, Rank, Suit
from core.hand import (
    Hand,
    HandOwner,
    HandResult,
    HandStatus,
    count_value,
    is_bust,
    score_hands,
)
from conftest import cards, dealer_hand, hand_strategy, player_hand, stacked_deck


class TestCountValue:
    """Tests for the ace-aware value count."""

    @pytest.mark.parametrize(
        "codes, expected",
        [
            (("AS", "AH"), 12),
            (("AS", "KH"), 21),
            (("AS", "AH", "9C"), 21),
            (("10S", "KH"), 20),
            (("2S", "3H"), 5),
            (("AS", "5H", "8C"), 14),
            (("KS", "QH", "2C"), 22),
        ],
    )
    def test_known_values(self, codes, expected):
        assert count_value(cards(*codes)) == expected

    def test_ace_counts_eleven_when_it_fits(self):
        """A single ace counts 11 while the total stays at or under 21."""
        assert count_value(cards("AS", "10H")) == 21
        assert count_value(cards("AS", "6H")) == 17

    def test_ace_counts_one_when_eleven_would_bust(self):
        assert count_value(cards("AS", "6H", "9C")) == 16

    def test_aces_resolved_after_other_cards(self):
        """Aces are added after the non-ace total, whatever their position."""
        assert count_value(cards("AS", "9H", "AC")) == 21
        assert count_value(cards("9H", "AS", "AC")) == 21

    def test_aces_resolved_one_at_a_time(self):
        """Each ace is settled in turn rather than choosing the best total."""
        # 9, then 11 (20), then 1 (21), then 1 (22)
        assert count_value(cards("AS", "AH", "AC", "9D")) == 22

    def test_is_bust(self):
        assert is_bust(cards("10S", "6H", "KC"))
        assert not is_bust(cards("10S", "AH", "KC"))

    @given(hand_strategy())
    def test_is_bust_matches_value(self, hand):
        """For every hand, bust means value over 21."""
        assert hand.is_bust == (hand.value > 21)
        assert is_bust(hand) == (count_value(hand) > 21)

    @given(hand_strategy())
    def test_value_is_at_least_hard_total(self, hand):
        """Every ace adds at least 1."""
        hard_total = sum(1 if card.is_ace else card.value for card in hand)
        assert count_value(hand) >= hard_total


class TestHand:
    """Tests for the Hand class."""

    def test_hand_needs_two_cards(self):
        with pytest.raises(ValueError):
            Hand(owner=HandOwner.PLAYER, cards=cards("AS"))
        with pytest.raises(ValueError):
            Hand(owner=HandOwner.DEALER)

    def test_new_hand_is_active(self, hard_20_hand):
        assert hard_20_hand.status == HandStatus.ACTIVE
        assert hard_20_hand.is_active
        assert hard_20_hand.value == 20

    def test_deal_draws_two_cards(self):
        deck = stacked_deck("2S", "3H")
        hand = Hand.deal(deck, HandOwner.PLAYER)
        assert hand.cards == cards("2S", "3H")
        assert hand.owner == HandOwner.PLAYER

    def test_hit_appends_card(self, hard_20_hand):
        deck = stacked_deck("AC")
        card = hard_20_hand.hit(deck)
        assert card == Card(Rank.ACE, Suit.CLUB)
        assert hard_20_hand.cards[-1] == card
        assert len(hard_20_hand) == 3
        assert hard_20_hand.value == 21

    def test_hit_after_hold_raises(self, hard_20_hand):
        hard_20_hand.hold()
        with pytest.raises(ValueError):
            hard_20_hand.hit(stacked_deck("2C"))
        assert len(hard_20_hand) == 2

    def test_hold(self, hard_20_hand):
        hard_20_hand.hold()
        assert hard_20_hand.is_held
        assert not hard_20_hand.is_active

    def test_hold_twice_is_harmless(self, hard_20_hand):
        hard_20_hand.hold()
        hard_20_hand.hold()
        assert hard_20_hand.is_held

    def test_reveal_dealer_hand(self, dealer_16_hand):
        assert dealer_16_hand.hides_first_card
        dealer_16_hand.reveal()
        assert dealer_16_hand.is_revealed
        assert not dealer_16_hand.hides_first_card

    def test_reveal_player_hand_raises(self, hard_20_hand):
        with pytest.raises(ValueError):
            hard_20_hand.reveal()

    def test_hold_revealed_hand_raises(self, dealer_16_hand):
        dealer_16_hand.reveal()
        with pytest.raises(ValueError):
            dealer_16_hand.hold()

    def test_player_cards_never_hidden(self, hard_20_hand):
        assert not hard_20_hand.hides_first_card
        assert hard_20_hand.visible_cards == hard_20_hand.cards

    def test_dealer_first_card_hidden(self, dealer_16_hand):
        assert dealer_16_hand.visible_cards == [None, Card(Rank.SIX, Suit.DIAMOND)]

    def test_str(self, hard_20_hand, dealer_16_hand):
        assert str(hard_20_hand) == "10♠ K♥ (20)"
        assert str(dealer_16_hand) == "?? 6♦"
        dealer_16_hand.reveal()
        assert str(dealer_16_hand) == "10♣ 6♦ (16)"


class TestScoreHands:
    """Tests for the end-of-round check."""

    def test_player_bust(self):
        player = player_hand("10S", "KH", "5C")
        dealer = dealer_hand("10C", "2D")
        assert score_hands(player, dealer) == HandResult.BUST

    def test_player_bust_beats_dealer_bust(self):
        """A player bust is scored first, even if the dealer also busted."""
        player = player_hand("10S", "KH", "5C")
        dealer = dealer_hand("10C", "5D", "KD")
        assert score_hands(player, dealer) == HandResult.BUST

    def test_dealer_bust_while_player_active(self):
        player = player_hand("10S", "2H")
        dealer = dealer_hand("10C", "5D", "KD")
        assert score_hands(player, dealer) == HandResult.PLAYER_WIN

    def test_no_result_while_player_active(self):
        player = player_hand("10S", "2H")
        dealer = dealer_hand("10C", "6D")
        dealer.hold()
        assert score_hands(player, dealer) is None

    def test_no_result_while_dealer_active(self):
        """A held player waits for the dealer to finish."""
        player = player_hand("10S", "KH")
        player.hold()
        dealer = dealer_hand("10C", "2D")
        assert score_hands(player, dealer) is None

    @pytest.mark.parametrize(
        "player_codes, dealer_codes, expected",
        [
            (("10S", "KH"), ("10C", "6D"), HandResult.PLAYER_WIN),
            (("10S", "7H"), ("10C", "7D"), HandResult.PUSH),
            (("10S", "6H"), ("10C", "9D"), HandResult.DEALER_WIN),
        ],
    )
    def test_value_comparison(self, player_codes, dealer_codes, expected):
        player = player_hand(*player_codes)
        dealer = dealer_hand(*dealer_codes)
        player.hold()
        dealer.hold()
        assert score_hands(player, dealer) == expected
