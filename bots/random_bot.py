"""Random baseline bot that only proposes legal actions."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple

from fivehundred.avondale import MAX_BID_TRICKS
from fivehundred.bidding import Bid, BidEntry, validate_bid
from fivehundred.cards import BidSuit, Card, Suit
from fivehundred.deck import KITTY_SIZE
from fivehundred.game import HandEngine
from fivehundred.table import Position

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, pass_rate: float = 0.5) -> None:
        self._rng = random.Random(seed)
        self.pass_rate = pass_rate

    def offer_bid(self, hand: HandEngine, player: Position) -> BidEntry:
        auction = hand.auction
        if self._rng.random() < self.pass_rate:
            return BidEntry.passed(player)
        normal: List[BidEntry] = []
        for tricks in range(auction.rules.auction.min_winning_tricks, MAX_BID_TRICKS + 1):
            for suit in BidSuit:
                entry = BidEntry.normal(Bid(tricks, suit, player))
                if validate_bid(entry, auction.history, auction.dealer, auction.rules).is_valid:
                    normal.append(entry)
        if auction.can_inkle(player) and (not normal or self._rng.random() < 0.2):
            return BidEntry.inkle(player, self._rng.choice(list(BidSuit)))
        if not normal:
            return BidEntry.passed(player)
        # Favour the cheapest contracts so hands are usually playable.
        return self._rng.choice(normal[:5])

    def choose_discards(self, hand: HandEngine, player: Position) -> Sequence[Card]:
        cards = list(hand.hands[player])
        self._rng.shuffle(cards)
        return cards[:KITTY_SIZE]

    def play_card(self, hand: HandEngine, player: Position) -> Tuple[Card, Optional[Suit]]:
        assert hand.state is not None
        legal = list(hand.state.available_moves(player))
        if not legal:
            raise RuntimeError("No legal plays available for bot.")
        choice = self._rng.choice(legal)
        nominated = None
        if choice.is_joker and hand.trump is None and hand.state.current_trick.is_empty:
            nominated = self._rng.choice(list(Suit))
        return choice, nominated
