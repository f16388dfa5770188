"""Avondale bid value table."""

from __future__ import annotations

from .cards import BidSuit

MIN_BID_TRICKS = 6
MAX_BID_TRICKS = 10

# Six of a suit is worth 40/60/80/100/120 and each extra trick adds 100.
SIX_TRICK_VALUES: dict[BidSuit, int] = {
    BidSuit.SPADES: 40,
    BidSuit.CLUBS: 60,
    BidSuit.DIAMONDS: 80,
    BidSuit.HEARTS: 100,
    BidSuit.NO_TRUMP: 120,
}

AVONDALE_TABLE: dict[tuple[int, BidSuit], int] = {
    (tricks, suit): base + 100 * (tricks - MIN_BID_TRICKS)
    for tricks in range(MIN_BID_TRICKS, MAX_BID_TRICKS + 1)
    for suit, base in SIX_TRICK_VALUES.items()
}


def bid_value(tricks: int, suit: BidSuit) -> int:
    try:
        return AVONDALE_TABLE[(tricks, suit)]
    except KeyError as exc:
        raise ValueError(f"No Avondale value for {tricks} {suit}.") from exc
