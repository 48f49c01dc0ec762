"""Blackjack round controller with state machine."""

from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Deck
from core.dealer import do_dealer_action
from core.hand import Hand, HandOwner, HandResult, score_hands
from core.game.actions import Action
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.snapshot import GameSnapshot, HandView
from core.game.state import GameState

RESULT_EVENTS = {
    HandResult.PLAYER_WIN: EventType.PLAYER_WINS,
    HandResult.DEALER_WIN: EventType.DEALER_WINS,
    HandResult.PUSH: EventType.PUSH,
    HandResult.BUST: EventType.DEALER_WINS,
}


class BlackjackGame:
    """
    Single-player blackjack against a scripted dealer.

    The game owns the deck and both hands. The presentation layer drives it
    with hit / hold / new_round / quit (or dispatch) and reads it through
    snapshot() and the events it emits.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "score_hand", "source": "playing_hand", "dest": "hand_score_screen"},
        {"trigger": "deal_hand", "source": "hand_score_screen", "dest": "playing_hand"},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        deck: Deck | None = None,
        shuffle_passes: int = 1,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Initialize a new game and deal the first round.

        Args:
            rng: Random number generator for reproducible games
            deck: Deck to play from (a fresh shuffled deck if not provided)
            shuffle_passes: Shuffle passes for a fresh deck
            events: Emitter to report to, so handlers can subscribe before the deal
        """
        self.events = events or EventEmitter()
        self.deck = deck if deck is not None else Deck(rng=rng, shuffle_passes=shuffle_passes)
        self._deck_on_reshuffle = self.deck.on_reshuffle
        self.deck.on_reshuffle = self._on_deck_reshuffled

        self.result: HandResult | None = None
        self.finished = False

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="playing_hand",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self.events.emit_new(EventType.GAME_STARTED)
        self._deal_hands()

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def player_hand(self) -> Hand:
        return self._player_hand

    @property
    def dealer_hand(self) -> Hand:
        return self._dealer_hand

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def dispatch(self, action: Action) -> bool:
        """
        Apply a player action.

        On the score screen every action except QUIT starts the next round.

        Returns:
            True if the action was applied
        """
        if action == Action.QUIT:
            return self.quit()

        if self.state == GameState.HAND_SCORE_SCREEN:
            return self.new_round()

        if action == Action.HIT:
            return self.hit()
        if action == Action.HOLD:
            return self.hold()
        return self.new_round()

    def hit(self) -> bool:
        """
        Player hits (takes another card).

        The dealer then takes one policy step of its own.
        """
        if not self.can_hit:
            return self._refuse("hit")

        hand = self._player_hand
        card = hand.hit(self.deck)
        self._report_card(card, hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=hand.value)

        if hand.is_bust:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=hand.value)

        self._dealer_step()
        self._check_hand()
        return True

    def hold(self) -> bool:
        """Player holds; the dealer then plays until it holds or busts."""
        if not self.can_hold:
            return self._refuse("hold")

        self._player_hand.hold()
        self.events.emit_new(EventType.PLAYER_HOLDS, hand_value=self._player_hand.value)

        dealer = self._dealer_hand
        while dealer.is_active and not dealer.is_bust:
            self._dealer_step()
            if self._check_hand():
                break

        self._check_hand()
        return True

    def new_round(self) -> bool:
        """Deal fresh hands from the score screen."""
        if not self.can_start_new_round:
            return self._refuse("start a new round")

        self.result = None
        self.deal_hand()  # Trigger state transition
        self._deal_hands()
        return True

    def quit(self) -> bool:
        """End the session. The round state is left as it is."""
        if self.finished:
            return self._refuse("quit")

        self.finished = True
        self.events.emit_new(EventType.GAME_ENDED, state=self.state.name)
        return True

    def snapshot(self) -> GameSnapshot:
        """Build a read-only view of the game for rendering."""
        return GameSnapshot(
            state=self.state,
            result=self.result,
            player_hand=HandView.from_hand(self._player_hand),
            dealer_hand=HandView.from_hand(self._dealer_hand),
            cards_remaining=self.deck.cards_remaining,
            can_hit=self.can_hit,
            can_hold=self.can_hold,
            can_start_new_round=self.can_start_new_round,
            finished=self.finished,
        )

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return not self.finished and self.state == GameState.PLAYING_HAND

    @property
    def can_hold(self) -> bool:
        """Check if holding is allowed."""
        return not self.finished and self.state == GameState.PLAYING_HAND

    @property
    def can_start_new_round(self) -> bool:
        """Check if a new round can be dealt."""
        return not self.finished and self.state == GameState.HAND_SCORE_SCREEN

    def _deal_hands(self) -> None:
        """Deal two cards to the player, then two to the dealer."""
        self._player_hand = Hand.deal(self.deck, HandOwner.PLAYER)
        for card in self._player_hand:
            self._report_card(card, self._player_hand)

        self._dealer_hand = Hand.deal(self.deck, HandOwner.DEALER)
        hole_card, up_card = self._dealer_hand.cards
        self._report_card(hole_card, self._dealer_hand, face_down=True)
        self._report_card(up_card, self._dealer_hand)

        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_value=self._player_hand.value,
        )

    def _report_card(self, card: Card, hand: Hand, face_down: bool = False) -> None:
        """Emit CARD_DEALT; the dealer's hand value stays hidden until reveal."""
        self.events.emit_new(
            EventType.CARD_DEALT,
            card="??" if face_down else str(card),
            hand=str(hand.owner).lower(),
            hand_value=None if hand.is_dealer else hand.value,
        )

    def _dealer_step(self) -> None:
        """Run one step of the dealer policy and report what it did."""
        dealer = self._dealer_hand
        was_active = dealer.is_active

        card = do_dealer_action(dealer, self.deck)

        if card is not None:
            self._report_card(card, dealer)
            self.events.emit_new(EventType.DEALER_HITS, card=str(card))
            if dealer.is_bust:
                self.events.emit_new(EventType.DEALER_BUSTS)
        elif was_active:
            self.events.emit_new(EventType.DEALER_HOLDS)

    def _check_hand(self) -> bool:
        """
        Score the round if it is over.

        Returns:
            True if the game is on the score screen
        """
        if self.state == GameState.HAND_SCORE_SCREEN:
            return True

        result = score_hands(self._player_hand, self._dealer_hand)
        if result is None:
            return False

        self._resolve_round(result)
        return True

    def _resolve_round(self, result: HandResult) -> None:
        """Reveal the dealer's hand and move to the score screen."""
        dealer = self._dealer_hand
        dealer.reveal()
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            card=str(dealer.cards[0]),
            hand_value=dealer.value,
        )

        self.result = result
        self.events.emit_new(
            RESULT_EVENTS[result],
            player_value=self._player_hand.value,
            dealer_value=dealer.value,
        )

        self.score_hand()  # Trigger state transition
        self.events.emit_new(
            EventType.ROUND_ENDED,
            result=result.name,
            player_value=self._player_hand.value,
            dealer_value=dealer.value,
        )

    def _on_deck_reshuffled(self) -> None:
        """Run any hook the deck came with, then report the reshuffle."""
        if self._deck_on_reshuffle is not None:
            self._deck_on_reshuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED)

    def _refuse(self, action: str) -> bool:
        """Report an action that is not allowed right now."""
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            state=self.state.name,
        )
        return False
