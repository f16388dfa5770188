"""Compact card encodings for storage."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from .cards import JOKER, Card, Rank, Suit

RANKS: list[Rank] = list(Rank)
SUITS: list[Suit] = list(Suit)

RANK_INDEX = {rank: index for index, rank in enumerate(RANKS)}
SUIT_INDEX = {suit: index for index, suit in enumerate(SUITS)}


def _clamp(value: int, upper: int) -> int:
    return max(0, min(value, upper))


def encode_card(card: Card) -> Tuple[int, int]:
    """Return the (rank index, suit index) pair for a card."""
    return RANK_INDEX[card.rank], SUIT_INDEX[card.suit]


def decode_card(rank_index: int, suit_index: int) -> Card:
    """Rebuild a card, clamping indices stored under an older enum layout."""
    rank = RANKS[_clamp(rank_index, len(RANKS) - 1)]
    if rank is Rank.JOKER:
        return JOKER
    suit = SUITS[_clamp(suit_index, len(SUITS) - 1)]
    return Card(rank, suit)


def encode_cards(cards: Iterable[Card]) -> List[Tuple[int, int]]:
    return [encode_card(card) for card in cards]


def decode_cards(pairs: Iterable[Sequence[int]]) -> List[Card]:
    return [decode_card(rank, suit) for rank, suit in pairs]


def encode_card_string(card: Card) -> str:
    rank, suit = encode_card(card)
    return f"{rank}|{suit}"


def decode_card_string(raw: str) -> Card:
    """Parse the ``rank|suit`` form; unreadable parts decode as index 0."""
    parts = raw.split("|")
    indices = []
    for position in range(2):
        try:
            indices.append(int(parts[position]))
        except (IndexError, ValueError):
            indices.append(0)
    return decode_card(indices[0], indices[1])
