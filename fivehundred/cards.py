"""Card-related data structures and helpers for 500."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Optional


class Suit(Enum):
    SPADES = auto()
    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()

    def __str__(self) -> str:
        return self.name.lower()


class BidSuit(Enum):
    """Suits as named in the auction, in ascending bidding rank."""

    SPADES = 0
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    NO_TRUMP = 4

    def __str__(self) -> str:
        return self.name.lower()

    @property
    def trump_suit(self) -> Optional[Suit]:
        """Return the trump suit this bid establishes, None for no-trump."""
        if self is BidSuit.NO_TRUMP:
            return None
        return Suit[self.name]


class Rank(Enum):
    JOKER = auto()
    FOUR = auto()
    FIVE = auto()
    SIX = auto()
    SEVEN = auto()
    EIGHT = auto()
    NINE = auto()
    TEN = auto()
    JACK = auto()
    QUEEN = auto()
    KING = auto()
    ACE = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Ranks from lowest to highest, joker excluded.
SUITED_RANKS: list[Rank] = [rank for rank in Rank if rank is not Rank.JOKER]

SAME_COLOR: dict[Suit, Suit] = {
    Suit.HEARTS: Suit.DIAMONDS,
    Suit.DIAMONDS: Suit.HEARTS,
    Suit.SPADES: Suit.CLUBS,
    Suit.CLUBS: Suit.SPADES,
}

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
}

BID_SUIT_SYMBOLS: dict[BidSuit, str] = {
    BidSuit.SPADES: "♠",
    BidSuit.CLUBS: "♣",
    BidSuit.DIAMONDS: "♦",
    BidSuit.HEARTS: "♥",
    BidSuit.NO_TRUMP: "NT",
}

RANK_LABELS: dict[Rank, str] = {
    Rank.JOKER: "JKR",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Display order for hands: Spades, Hearts, Diamonds, Clubs.
DISPLAY_SUIT_ORDER: list[Suit] = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card.

    The joker carries a placeholder suit so that every card encodes the same
    way; rules code must never read ``suit`` off the joker.
    """

    rank: Rank
    suit: Suit

    @property
    def is_joker(self) -> bool:
        return self.rank is Rank.JOKER

    @property
    def is_jack(self) -> bool:
        return self.rank is Rank.JACK

    def __str__(self) -> str:
        return card_label(self)


JOKER = Card(Rank.JOKER, Suit.SPADES)


def same_color_suit(suit: Suit) -> Suit:
    """Return the other suit of the same colour (used for the left bower)."""
    return SAME_COLOR[suit]


def card_label(card: Card) -> str:
    if card.is_joker:
        return "JOKER"
    return f"{RANK_LABELS[card.rank]}{SUIT_SYMBOLS[card.suit]}"


def card_name(card: Card) -> str:
    if card.is_joker:
        return "Joker"
    return f"{card.rank.name.title()} of {card.suit.name.title()}"


def serialize_card(card: Card) -> dict[str, str]:
    return {"rank": card.rank.name.lower(), "suit": card.suit.name.lower()}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    rank_name = payload["rank"].upper()
    suit_name = payload["suit"].upper()
    return Card(Rank[rank_name], Suit[suit_name])

