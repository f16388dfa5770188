"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from fivehundred.bidding import BidEntry
from fivehundred.cards import Card, Suit
from fivehundred.deck import KITTY_SIZE
from fivehundred.game import HandEngine
from fivehundred.table import Position


class BotStrategy:
    """Base class for bot policies.

    Bots only propose actions; the engine decides whether they are legal.
    """

    name: str = "BaseBot"

    def on_hand_start(self, hand: HandEngine, player: Position) -> None:
        """Optional hook invoked at the start of each hand."""
        return None

    def offer_bid(self, hand: HandEngine, player: Position) -> BidEntry:
        return BidEntry.passed(player)

    def choose_discards(self, hand: HandEngine, player: Position) -> Sequence[Card]:
        """Return exactly five cards to bury after taking the kitty."""
        return list(hand.hands[player][-KITTY_SIZE:])

    def play_card(self, hand: HandEngine, player: Position) -> Tuple[Card, Optional[Suit]]:
        """Return (card, nominated suit for a no-trump joker lead)."""
        assert hand.state is not None
        legal: List[Card] = hand.state.available_moves(player)
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        return legal[0], _nomination(hand, legal[0])

    def should_claim(self, hand: HandEngine, player: Position) -> bool:
        assert hand.state is not None
        return hand.state.can_claim(player)


def _nomination(hand: HandEngine, card: Card) -> Optional[Suit]:
    assert hand.state is not None
    if card.is_joker and hand.trump is None and hand.state.current_trick.is_empty:
        return Suit.SPADES
    return None
