"""Text building blocks for cards, hands and the result popup.

Everything here returns plain strings so it can be drawn by curses or
checked in tests without a terminal.
"""

import math

from core.cards import Card
from core.hand import HandOwner
from core.game.snapshot import GameSnapshot, HandView
from terminal_ui.config import DIMENSIONS

INNER_WIDTH = DIMENSIONS.CARD_WIDTH - 2


def card_lines(card: Card) -> list[str]:
    """Draw a face-up card as a box with corner labels and the rank name."""
    corner = f"{card.suit}{card.rank.label}"
    return [
        "╭" + "─" * INNER_WIDTH + "╮",
        f"|{corner:<{INNER_WIDTH}}|",
        "|" + " " * INNER_WIDTH + "|",
        f"|{str(card.rank):^{INNER_WIDTH}}|",
        "|" + " " * INNER_WIDTH + "|",
        f"|{card.rank.label + str(card.suit):>{INNER_WIDTH}}|",
        "╰" + "─" * INNER_WIDTH + "╯",
    ]


def face_down_lines() -> list[str]:
    """Draw the back of a card."""
    pattern = "|" + "x" * INNER_WIDTH + "|"
    return [
        "╭" + "─" * INNER_WIDTH + "╮",
        *[pattern] * (DIMENSIONS.CARD_HEIGHT - 2),
        "╰" + "─" * INNER_WIDTH + "╯",
    ]


def glyph_lines(card: Card | None) -> list[str]:
    """Card art for a visible card, or the card back for None."""
    if card is None:
        return face_down_lines()
    return card_lines(card)


def card_positions(count: int, width: int, height: int) -> list[tuple[int, int]]:
    """
    Lay out cards in an area of the given size.

    Cards sit side by side, at most CARDS_PER_ROW to a row and no more than
    fit the width, in as many rows as fit the height. When that is not
    enough room, the cards of a row overlap so that each still shows its
    left corner label.

    Returns:
        (row, column) offset of each card's top-left corner
    """
    card_width = DIMENSIONS.CARD_WIDTH
    stride = card_width + DIMENSIONS.CARD_SPACING
    row_height = DIMENSIONS.CARD_HEIGHT + 1

    max_rows = max(1, (height + 1) // row_height)
    fit = max(1, min(DIMENSIONS.CARDS_PER_ROW, (width - card_width) // stride + 1))
    per_row = max(fit, math.ceil(count / max_rows))

    if per_row > fit:
        stride = max(DIMENSIONS.CARD_MIN_STRIDE, (width - card_width) // (per_row - 1))

    return [((i // per_row) * row_height, (i % per_row) * stride) for i in range(count)]


def status_lines(view: HandView) -> list[str]:
    """Status (and, for the player, value) shown under a hand."""
    lines = [f"Status: {view.status}"]
    if view.owner == HandOwner.PLAYER:
        lines.append(f"Value: {view.value}")
    return lines


def result_lines(snapshot: GameSnapshot) -> list[str]:
    """Lines of the result popup, empty while the round is in play."""
    if snapshot.result is None:
        return []
    return [
        str(snapshot.result),
        f"You: {snapshot.player_hand.value} Dealer: {snapshot.dealer_hand.value}",
    ]
