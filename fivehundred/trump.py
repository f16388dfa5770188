"""Trump ranking, bowers and effective suits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .cards import (
    DISPLAY_SUIT_ORDER,
    JOKER,
    SUIT_SYMBOLS,
    SUITED_RANKS,
    Card,
    Rank,
    Suit,
    same_color_suit,
)

JOKER_RANK = 100
RIGHT_BOWER_RANK = 99
LEFT_BOWER_RANK = 98

# Trump suit cards once both jacks have left the suit. Ten sits directly
# under the Queen.
TRUMP_RANKS: dict[Rank, int] = {
    Rank.ACE: 14,
    Rank.KING: 13,
    Rank.QUEEN: 12,
    Rank.TEN: 11,
    Rank.NINE: 10,
    Rank.EIGHT: 9,
    Rank.SEVEN: 8,
    Rank.SIX: 7,
    Rank.FIVE: 6,
    Rank.FOUR: 5,
}

PLAIN_RANKS: dict[Rank, int] = {
    Rank.ACE: 14,
    Rank.KING: 13,
    Rank.QUEEN: 12,
    Rank.JACK: 11,
    Rank.TEN: 10,
    Rank.NINE: 9,
    Rank.EIGHT: 8,
    Rank.SEVEN: 7,
    Rank.SIX: 6,
    Rank.FIVE: 5,
    Rank.FOUR: 4,
}


@dataclass(frozen=True)
class TrumpRules:
    """Card ordering for one hand.

    ``trump`` is None in a no-trump hand, where the joker is the only trump.
    """

    trump: Optional[Suit] = None

    def is_trump(self, card: Card) -> bool:
        if card.is_joker:
            return True
        if self.trump is None:
            return False
        return card.suit is self.trump or self.is_left_bower(card)

    def is_right_bower(self, card: Card) -> bool:
        return self.trump is not None and card.is_jack and card.suit is self.trump

    def is_left_bower(self, card: Card) -> bool:
        if self.trump is None or not card.is_jack:
            return False
        return card.suit is same_color_suit(self.trump)

    def effective_suit(self, card: Card) -> Optional[Suit]:
        """Return the suit a card follows as.

        The joker and the left bower belong to the trump suit. In no-trump the
        joker belongs to no suit at all, so None is returned.
        """
        if card.is_joker:
            return self.trump
        if self.is_left_bower(card):
            return self.trump
        return card.suit

    def trump_rank(self, card: Card) -> int:
        if card.is_joker:
            return JOKER_RANK
        if self.is_right_bower(card):
            return RIGHT_BOWER_RANK
        if self.is_left_bower(card):
            return LEFT_BOWER_RANK
        return TRUMP_RANKS.get(card.rank, 0)

    @staticmethod
    def plain_rank(card: Card) -> int:
        return PLAIN_RANKS.get(card.rank, 0)

    def compare(self, first: Card, second: Card) -> int:
        """Return 1 if ``first`` ranks higher, -1 if lower, 0 if equal.

        Two non-trump cards are compared by rank only; callers compare cards of
        the same suit.
        """
        first_trump = self.is_trump(first)
        second_trump = self.is_trump(second)
        if first_trump and not second_trump:
            return 1
        if second_trump and not first_trump:
            return -1
        if first_trump:
            a, b = self.trump_rank(first), self.trump_rank(second)
        else:
            a, b = self.plain_rank(first), self.plain_rank(second)
        return (a > b) - (a < b)

    def trump_cards(self, cards: Iterable[Card]) -> List[Card]:
        return [card for card in cards if self.is_trump(card)]

    def non_trump_cards(self, cards: Iterable[Card]) -> List[Card]:
        return [card for card in cards if not self.is_trump(card)]

    def count_trump(self, cards: Iterable[Card]) -> int:
        return len(self.trump_cards(cards))

    def highest(self, cards: Iterable[Card]) -> Optional[Card]:
        best: Optional[Card] = None
        for card in cards:
            if best is None or self.compare(card, best) > 0:
                best = card
        return best

    def lowest(self, cards: Iterable[Card]) -> Optional[Card]:
        worst: Optional[Card] = None
        for card in cards:
            if worst is None or self.compare(card, worst) < 0:
                worst = card
        return worst

    def all_trumps(self) -> List[Card]:
        """Every trump in the 45-card deck."""
        if self.trump is None:
            return [JOKER]
        return self.suit_members(self.trump)

    def suit_members(self, suit: Suit) -> List[Card]:
        """Every card in the deck whose effective suit is ``suit``."""
        members: List[Card] = []
        if suit is self.trump:
            members.append(JOKER)
            members.append(Card(Rank.JACK, same_color_suit(suit)))
        for rank in SUITED_RANKS:
            card = Card(rank, suit)
            if not self.is_left_bower(card):
                members.append(card)
        return members

    def __str__(self) -> str:
        if self.trump is None:
            return "TrumpRules(No Trump)"
        return f"TrumpRules({SUIT_SYMBOLS[self.trump]})"


def _display_key(card: Card) -> tuple[int, int]:
    return DISPLAY_SUIT_ORDER.index(card.suit), -PLAIN_RANKS[card.rank]


def sort_hand(cards: Iterable[Card], trump: Optional[Suit] = None) -> List[Card]:
    """Return the cards in display order.

    Without a trump suit the joker comes first, followed by Spades, Hearts,
    Diamonds and Clubs from Ace down to Four. With a trump suit every trump
    (left bower included) comes first from the joker down, then the plain
    suits in the same order.
    """
    rules = TrumpRules(trump)
    hand = list(cards)
    trumps = sorted(rules.trump_cards(hand), key=rules.trump_rank, reverse=True)
    plain = sorted(rules.non_trump_cards(hand), key=_display_key)
    return trumps + plain
