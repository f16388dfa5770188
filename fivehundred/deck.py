"""Deck creation and dealing for 500."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .cards import JOKER, SUITED_RANKS, Card, Suit
from .table import Position, left_of

logger = logging.getLogger(__name__)

DECK_SIZE = 45
HAND_SIZE = 10
KITTY_SIZE = 5

# Suit precedence when two cut cards share a rank, best first.
CUT_SUIT_ORDER: tuple[Suit, ...] = (Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS, Suit.SPADES)

# (cards per player, cards to the kitty) for each pass round the table.
DEAL_PATTERN: tuple[tuple[int, int], ...] = ((3, 3), (4, 2), (3, 0))


class DealError(ValueError):
    """Raised when a deck cannot be dealt into four hands and a kitty."""


@dataclass(frozen=True)
class DealResult:
    hands: Dict[Position, List[Card]]
    kitty: List[Card]


def build_deck() -> List[Card]:
    """Return the ordered 45-card deck: the joker then Four to Ace in every suit."""
    return [JOKER] + [Card(rank, suit) for suit in Suit for rank in SUITED_RANKS]


def shuffled_deck(rng: Optional[Random] = None) -> List[Card]:
    cards = build_deck()
    if rng is None:
        rng = Random()
    rng.shuffle(cards)
    return cards


def deal_hand(deck: Sequence[Card], dealer: Position) -> DealResult:
    """Deal ten cards to each seat and five to the kitty.

    Dealing starts at the dealer's left: three cards each, three to the kitty,
    four each, two to the kitty, three each.
    """
    cards = list(deck)
    if len(cards) != DECK_SIZE:
        raise DealError(f"Deck must contain exactly {DECK_SIZE} cards (got {len(cards)}).")
    if len(set(cards)) != DECK_SIZE:
        raise DealError("Deck contains duplicate cards.")

    order = left_of(dealer)
    hands: Dict[Position, List[Card]] = {position: [] for position in order}
    kitty: List[Card] = []
    draw = iter(cards)

    for per_player, to_kitty in DEAL_PATTERN:
        for _ in range(per_player):
            for position in order:
                hands[position].append(next(draw))
        for _ in range(to_kitty):
            kitty.append(next(draw))

    counts = {position: len(hand) for position, hand in hands.items()}
    if any(count != HAND_SIZE for count in counts.values()):
        raise DealError(f"Invalid hand counts after deal: {counts}")
    if len(kitty) != KITTY_SIZE:
        raise DealError(f"Invalid kitty size after deal: {len(kitty)}")

    logger.debug("Dealt hands from %s; kitty holds %d cards", dealer, len(kitty))
    return DealResult(hands=hands, kitty=kitty)


def next_dealer(dealer: Position) -> Position:
    return dealer.next


def _cut_strength(card: Card) -> tuple[int, int]:
    if card.is_joker:
        return len(SUITED_RANKS), 0
    return SUITED_RANKS.index(card.rank), -CUT_SUIT_ORDER.index(card.suit)


def cut_winner(cuts: Mapping[Position, Card]) -> Position:
    """The joker wins the cut, then the highest rank, then the better suit."""
    if not cuts:
        raise DealError("Nobody has cut.")
    return max(cuts, key=lambda position: _cut_strength(cuts[position]))


def cut_for_deal(
    deck: Optional[Sequence[Card]] = None,
    rng: Optional[Random] = None,
) -> Tuple[Position, Dict[Position, Card]]:
    """Each seat draws one card; the winner of the cut deals first."""
    cards = list(dict.fromkeys(deck)) if deck is not None else build_deck()
    if len(cards) < len(Position):
        raise DealError(f"Need at least {len(Position)} distinct cards to cut (got {len(cards)}).")
    if rng is None:
        rng = Random()
    drawn = rng.sample(cards, len(Position))
    cuts = dict(zip(Position, drawn))
    dealer = cut_winner(cuts)
    logger.debug("Cut for deal: %s; %s deals", {str(p): str(c) for p, c in cuts.items()}, dealer)
    return dealer, cuts
