"""Detect hands whose remaining tricks are already decided.

Every test here is sufficient on its own and deliberately narrow: a claim is
only reported when the holder wins every remaining trick whatever the other
players hold and whoever leads next. Unseen cards include the buried kitty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from .cards import Card, Suit
from .deck import build_deck
from .trick import Trick
from .trump import TrumpRules

logger = logging.getLogger(__name__)

TRICKS_PER_HAND = 10


@dataclass
class ClaimAnalyzer:
    hand: Sequence[Card]
    rules: TrumpRules
    completed_tricks: Sequence[Trick] = field(default_factory=list)
    current_trick: Optional[Trick] = None

    def can_claim_remaining_tricks(self) -> bool:
        if not self.hand:
            return False
        if self.current_trick is not None and not self.current_trick.is_empty:
            return False
        if len(self.hand) < self.remaining_tricks():
            return False

        unseen = self.unseen_cards()
        for name, check in (
            ("all trumps", self._holds_every_trump),
            ("joker and master trumps", self._joker_and_master_trumps),
            ("master cards", self._master_cards_everywhere),
        ):
            if check(unseen):
                logger.debug("Claim allowed (%s) for hand %s", name, [str(card) for card in self.hand])
                return True
        return False

    def remaining_tricks(self) -> int:
        return TRICKS_PER_HAND - len(self.completed_tricks)

    def played_cards(self) -> List[Card]:
        played = [card for trick in self.completed_tricks for card in trick.cards]
        if self.current_trick is not None:
            played.extend(self.current_trick.cards)
        return played

    def unseen_cards(self) -> Set[Card]:
        """Cards neither played nor in the holder's hand."""
        known = set(self.played_cards()) | set(self.hand)
        return {card for card in build_deck() if card not in known}

    def _outstanding_trumps(self, unseen: Set[Card]) -> List[Card]:
        return [card for card in self.rules.all_trumps() if card in unseen]

    def _has_joker(self) -> bool:
        return any(card.is_joker for card in self.hand)

    def _holds_every_trump(self, unseen: Set[Card]) -> bool:
        if not self._has_joker() or self._outstanding_trumps(unseen):
            return False
        return self.rules.count_trump(self.hand) >= self.remaining_tricks()

    def _joker_and_master_trumps(self, unseen: Set[Card]) -> bool:
        if not self._has_joker():
            return False
        if not all(self.rules.is_trump(card) for card in self.hand):
            return False
        lowest = self.rules.lowest(self.hand)
        assert lowest is not None
        return all(self.rules.compare(lowest, card) > 0 for card in self._outstanding_trumps(unseen))

    def _master_cards_everywhere(self, unseen: Set[Card]) -> bool:
        if self._outstanding_trumps(unseen):
            return False

        held_suits: Set[Optional[Suit]] = set()
        for card in self.hand:
            if self.rules.is_trump(card):
                continue
            suit = self.rules.effective_suit(card)
            held_suits.add(suit)
            rivals = [other for other in unseen if self.rules.effective_suit(other) is suit]
            if any(self.rules.compare(card, rival) <= 0 for rival in rivals):
                return False

        # Someone else may lead first: the holder must be able to follow with a
        # master card or trump in.
        if self.rules.count_trump(self.hand):
            return True
        outstanding_suits = {self.rules.effective_suit(card) for card in unseen}
        return outstanding_suits <= held_suits
