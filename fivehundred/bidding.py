"""Auction rules for 500 (American variant).

Each player acts exactly once, starting at the dealer's left. The first two
players may inkle (a six-trick bid that cannot win). The best bid of seven or
more wins; otherwise the hand is redealt.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Sequence

from .avondale import MAX_BID_TRICKS, MIN_BID_TRICKS, bid_value
from .cards import BID_SUIT_SYMBOLS, BidSuit
from .rules_schema import DEFAULT_RULES, RuleSet
from .table import Position, left_of

logger = logging.getLogger(__name__)

INKLE_TRICKS = 6
INKLE_SEATS = 2
PLAYERS = 4


class BiddingError(ValueError):
    """Raised when the auction is driven incorrectly (not for illegal bids)."""


@dataclass(frozen=True)
class Bid:
    tricks: int
    suit: BidSuit
    bidder: Position

    def __post_init__(self) -> None:
        if not MIN_BID_TRICKS <= self.tricks <= MAX_BID_TRICKS:
            raise ValueError(
                f"Bid must be between {MIN_BID_TRICKS} and {MAX_BID_TRICKS} tricks (got {self.tricks})."
            )

    @property
    def value(self) -> int:
        return bid_value(self.tricks, self.suit)

    def beats(self, other: "Bid") -> bool:
        if self.tricks != other.tricks:
            return self.tricks > other.tricks
        return self.suit.value > other.suit.value

    @property
    def label(self) -> str:
        return f"{self.tricks}{BID_SUIT_SYMBOLS[self.suit]}"

    def __str__(self) -> str:
        return f"{self.label} by {self.bidder}"


class BidAction(Enum):
    PASS = auto()
    BID = auto()
    INKLE = auto()


@dataclass(frozen=True)
class BidEntry:
    """One action in the auction history.

    Build entries with :meth:`passed`, :meth:`normal` or :meth:`inkle`; the
    constructor rejects a pass carrying a bid, a bid without one, and an inkle
    at any level but six.
    """

    bidder: Position
    action: BidAction
    bid: Optional[Bid] = None

    def __post_init__(self) -> None:
        if self.action is BidAction.PASS:
            if self.bid is not None:
                raise BiddingError("A pass carries no bid.")
            return
        if self.bid is None:
            raise BiddingError(f"{self.action.name.title()} requires a bid.")
        if self.bid.bidder is not self.bidder:
            raise BiddingError("Bid belongs to a different player.")
        if self.action is BidAction.INKLE and self.bid.tricks != INKLE_TRICKS:
            raise BiddingError(f"An inkle is always a bid of {INKLE_TRICKS}.")

    @classmethod
    def passed(cls, bidder: Position) -> "BidEntry":
        return cls(bidder=bidder, action=BidAction.PASS)

    @classmethod
    def normal(cls, bid: Bid) -> "BidEntry":
        return cls(bidder=bid.bidder, action=BidAction.BID, bid=bid)

    @classmethod
    def inkle(cls, bidder: Position, suit: BidSuit) -> "BidEntry":
        return cls(bidder=bidder, action=BidAction.INKLE, bid=Bid(INKLE_TRICKS, suit, bidder))

    @property
    def is_pass(self) -> bool:
        return self.action is BidAction.PASS

    @property
    def is_inkle(self) -> bool:
        return self.action is BidAction.INKLE

    def __str__(self) -> str:
        if self.bid is None:
            return f"{self.bidder}: Pass"
        if self.is_inkle:
            return f"{self.bidder}: Inkle ({self.bid.label})"
        return f"{self.bidder}: {self.bid.label}"


@dataclass(frozen=True)
class BidValidation:
    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> "BidValidation":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, reason: str) -> "BidValidation":
        return cls(is_valid=False, reason=reason)


class AuctionStatus(Enum):
    INCOMPLETE = auto()
    WON = auto()
    REDEAL = auto()


@dataclass(frozen=True)
class AuctionResult:
    status: AuctionStatus
    message: str
    winning_bid: Optional[Bid] = None

    @property
    def winner(self) -> Optional[Position]:
        return self.winning_bid.bidder if self.winning_bid is not None else None


def bidding_order(dealer: Position) -> List[Position]:
    return left_of(dealer)


def has_acted(bidder: Position, history: Sequence[BidEntry]) -> bool:
    return any(entry.bidder is bidder for entry in history)


def can_inkle(
    bidder: Position,
    history: Sequence[BidEntry],
    dealer: Position,
    rules: Optional[RuleSet] = None,
) -> bool:
    """Only the first two players in bidding order may inkle, once."""
    rules = rules or DEFAULT_RULES
    if not rules.auction.inkle_enabled:
        return False
    if bidding_order(dealer).index(bidder) >= INKLE_SEATS:
        return False
    return not has_acted(bidder, history)


def highest_bid(history: Sequence[BidEntry]) -> Optional[Bid]:
    """Best bid so far, ignoring inkles."""
    best: Optional[Bid] = None
    for entry in history:
        if entry.action is BidAction.BID and entry.bid is not None:
            if best is None or entry.bid.beats(best):
                best = entry.bid
    return best


def highest_inkle(history: Sequence[BidEntry]) -> Optional[Bid]:
    best: Optional[Bid] = None
    for entry in history:
        if entry.is_inkle and entry.bid is not None:
            if best is None or entry.bid.beats(best):
                best = entry.bid
    return best


def validate_bid(
    entry: BidEntry,
    history: Sequence[BidEntry],
    dealer: Position,
    rules: Optional[RuleSet] = None,
) -> BidValidation:
    """Check one auction action against the history without changing it."""
    rules = rules or DEFAULT_RULES
    if entry.is_pass:
        return BidValidation.valid()

    if has_acted(entry.bidder, history):
        return BidValidation.invalid("You have already bid this round.")

    assert entry.bid is not None
    if entry.is_inkle:
        if not can_inkle(entry.bidder, history, dealer, rules):
            return BidValidation.invalid("Only the first two players can inkle.")
        return BidValidation.valid()

    minimum = rules.auction.min_winning_tricks
    if entry.bid.tricks < minimum:
        return BidValidation.invalid(f"Bids below {minimum} must be made as an inkle.")

    current = highest_bid(history)
    if current is not None and not entry.bid.beats(current):
        return BidValidation.invalid(f"Bid must beat current high bid of {current.label}.")

    return BidValidation.valid()


def is_complete(history: Sequence[BidEntry]) -> bool:
    return len(history) >= PLAYERS


def next_bidder(history: Sequence[BidEntry], dealer: Position) -> Optional[Position]:
    if is_complete(history):
        return None
    return bidding_order(dealer)[len(history)]


def determine_winner(history: Sequence[BidEntry], rules: Optional[RuleSet] = None) -> AuctionResult:
    """Resolve a finished auction to a winning bid or a redeal."""
    rules = rules or DEFAULT_RULES
    if len(history) > PLAYERS:
        raise BiddingError(f"Auction history has {len(history)} entries; at most {PLAYERS} allowed.")
    if len(history) != PLAYERS:
        return AuctionResult(
            status=AuctionStatus.INCOMPLETE,
            message=f"Waiting for {PLAYERS - len(history)} more bid(s).",
        )

    best = highest_bid(history)
    best_inkle = highest_inkle(history)
    logger.debug(
        "Resolving auction: highest bid %s, highest inkle %s",
        best or "none",
        best_inkle or "none",
    )

    if best is not None and best.tricks >= rules.auction.min_winning_tricks:
        result = AuctionResult(
            status=AuctionStatus.WON,
            message=f"{best.bidder} wins with {best.label}.",
            winning_bid=best,
        )
    elif best is None and best_inkle is not None:
        result = AuctionResult(status=AuctionStatus.REDEAL, message="Only inkles bid - redeal required.")
    elif best is None:
        result = AuctionResult(status=AuctionStatus.REDEAL, message="No bids - redeal required.")
    else:
        result = AuctionResult(
            status=AuctionStatus.REDEAL,
            message=f"Auction must reach level {rules.auction.min_winning_tricks} - redeal required.",
        )
    logger.debug("Auction result: %s (%s)", result.status.name, result.message)
    return result


@dataclass
class Auction:
    """One round of bidding with an append-only history."""

    dealer: Position
    rules: RuleSet = field(default_factory=lambda: DEFAULT_RULES)
    history: List[BidEntry] = field(default_factory=list)

    @property
    def current_bidder(self) -> Optional[Position]:
        return next_bidder(self.history, self.dealer)

    def is_complete(self) -> bool:
        return is_complete(self.history)

    def can_inkle(self, bidder: Position) -> bool:
        return can_inkle(bidder, self.history, self.dealer, self.rules)

    def highest_bid(self) -> Optional[Bid]:
        return highest_bid(self.history)

    def submit(self, entry: BidEntry) -> BidValidation:
        """Record ``entry`` if it is legal; an illegal entry leaves history untouched."""
        if self.is_complete():
            raise BiddingError("Auction already complete.")
        if entry.bidder is not self.current_bidder:
            raise BiddingError(f"Not {entry.bidder}'s turn to bid.")
        validation = validate_bid(entry, self.history, self.dealer, self.rules)
        if validation.is_valid:
            self.history.append(entry)
        return validation

    def result(self) -> AuctionResult:
        return determine_winner(self.history, self.rules)
