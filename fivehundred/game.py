"""High-level game orchestration for 500."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Dict, List, Optional, Sequence

from .bidding import Auction, AuctionStatus, Bid, BiddingError, BidEntry, BidValidation
from .cards import Card, Suit
from .deck import cut_for_deal, deal_hand, next_dealer, shuffled_deck
from .kitty import InvalidKittyOperation, KittyExchange
from .rules_schema import DEFAULT_RULES, RuleSet
from .scoring import GameOverStatus, HandScore, check_game_over, describe_hand_result, score_hand
from .state import PlayState
from .table import Position, Team

logger = logging.getLogger(__name__)


class HandPhase(Enum):
    AUCTION = auto()
    KITTY = auto()
    PLAY = auto()
    COMPLETE = auto()
    REDEAL = auto()


@dataclass
class HandEngine:
    """Manage a single hand of 500 from the deal to the score."""

    dealer: Position
    rng: Optional[Random] = None
    deck: Optional[Sequence[Card]] = None
    rules: RuleSet = field(default_factory=lambda: DEFAULT_RULES)

    phase: HandPhase = field(init=False, default=HandPhase.AUCTION)
    hands: Dict[Position, List[Card]] = field(init=False)
    kitty: KittyExchange = field(init=False)
    auction: Auction = field(init=False)
    contract: Optional[Bid] = field(init=False, default=None)
    state: Optional[PlayState] = field(init=False, default=None)
    score: Optional[HandScore] = field(init=False, default=None)

    def __post_init__(self) -> None:
        deck = list(self.deck) if self.deck is not None else shuffled_deck(self.rng)
        dealt = deal_hand(deck, self.dealer)
        self.hands = {position: list(hand) for position, hand in dealt.hands.items()}
        self.kitty = KittyExchange(list(dealt.kitty))
        self.auction = Auction(dealer=self.dealer, rules=self.rules)

    @property
    def contractor(self) -> Optional[Position]:
        return self.contract.bidder if self.contract is not None else None

    @property
    def trump(self) -> Optional[Suit]:
        return self.contract.suit.trump_suit if self.contract is not None else None

    def bid(self, entry: BidEntry) -> BidValidation:
        self._ensure_phase(HandPhase.AUCTION)
        validation = self.auction.submit(entry)
        if not validation.is_valid or not self.auction.is_complete():
            return validation

        result = self.auction.result()
        if result.status is AuctionStatus.WON:
            self.contract = result.winning_bid
            self.phase = HandPhase.KITTY
        elif result.status is AuctionStatus.REDEAL:
            self.phase = HandPhase.REDEAL
        else:
            raise BiddingError(f"Auction unresolved after {len(self.auction.history)} bids.")
        logger.debug("Auction closed: %s", result.message)
        return validation

    def take_kitty(self) -> List[Card]:
        self._ensure_phase(HandPhase.KITTY)
        contractor = self._require_contractor()
        self.hands[contractor] = self.kitty.take(self.hands[contractor])
        return list(self.hands[contractor])

    def discard(self, cards: Sequence[Card]) -> None:
        self._ensure_phase(HandPhase.KITTY)
        contractor = self._require_contractor()
        if not self.kitty.taken:
            raise InvalidKittyOperation("Must take the kitty before discarding.")
        self.hands[contractor] = self.kitty.discard(self.hands[contractor], cards)
        self._start_play()

    def play_card(self, player: Position, card: Card, *, nominated_suit: Optional[Suit] = None) -> None:
        self._ensure_phase(HandPhase.PLAY)
        assert self.state is not None
        self.state.play_card(player, card, nominated_suit=nominated_suit)
        self.hands[player] = list(self.state.hands[player])
        if self.state.is_finished():
            self.phase = HandPhase.COMPLETE

    def claim(self, player: Position) -> int:
        self._ensure_phase(HandPhase.PLAY)
        assert self.state is not None
        awarded = self.state.claim_remaining(player)
        for position in self.hands:
            self.hands[position] = []
        self.phase = HandPhase.COMPLETE
        return awarded

    def tricks_won(self, team: Team) -> int:
        if self.state is None:
            return 0
        return self.state.tricks_for(team)

    def complete_scoring(self) -> HandScore:
        self._ensure_phase(HandPhase.COMPLETE)
        assert self.contract is not None
        team = self.contract.bidder.team
        self.score = score_hand(
            self.contract,
            self.tricks_won(team),
            self.tricks_won(team.opponent),
            self.rules,
        )
        return self.score

    def _start_play(self) -> None:
        contractor = self._require_contractor()
        self.state = PlayState(hands=self.hands, leader=contractor, trump=self.trump)
        self.phase = HandPhase.PLAY

    def _require_contractor(self) -> Position:
        if self.contractor is None:
            raise BiddingError("Auction has not produced a contractor.")
        return self.contractor

    def _ensure_phase(self, expected: HandPhase) -> None:
        if self.phase != expected:
            raise RuntimeError(f"Action not allowed in phase {self.phase}. Expected {expected}.")


@dataclass(frozen=True)
class HandRecord:
    dealer: Position
    contract: Bid
    score: HandScore
    scores: Dict[Team, int]
    description: str


@dataclass
class GameSession:
    """Track team scores and the dealer across hands.

    Without an explicit ``dealer`` the seats cut for deal.
    """

    seed: Optional[int] = None
    dealer: Optional[Position] = None
    rules: RuleSet = field(default_factory=lambda: DEFAULT_RULES)
    scores: Dict[Team, int] = field(default_factory=lambda: {team: 0 for team in Team})
    rng: Random = field(init=False)
    current_hand: Optional[HandEngine] = field(default=None, init=False)
    hand_history: List[HandRecord] = field(default_factory=list)
    redeals: int = 0
    result: Optional[GameOverStatus] = field(default=None, init=False)
    cut_cards: Dict[Position, Card] = field(default_factory=dict, init=False)

    def __post_init__(self) -> None:
        self.rng = Random(self.seed)
        if self.dealer is None:
            self.dealer, self.cut_cards = cut_for_deal(rng=self.rng)

    @property
    def game_over(self) -> bool:
        return self.result is not None

    def start_hand(self, deck: Optional[Sequence[Card]] = None) -> HandEngine:
        if self.game_over:
            raise RuntimeError("Game is already over.")
        self.current_hand = HandEngine(dealer=self.dealer, rng=self.rng, deck=deck, rules=self.rules)
        return self.current_hand

    def redeal(self, deck: Optional[Sequence[Card]] = None) -> HandEngine:
        """Throw in a hand nobody bid on; the same dealer deals again."""
        hand = self._require_hand()
        if hand.phase != HandPhase.REDEAL:
            raise RuntimeError("Only an auction that ended in a redeal can be redealt.")
        self.redeals += 1
        logger.debug("Redeal #%d by %s", self.redeals, self.dealer)
        return self.start_hand(deck)

    def finish_hand(self) -> HandRecord:
        hand = self._require_hand()
        if hand.phase != HandPhase.COMPLETE:
            raise RuntimeError("Cannot finish hand before play is complete.")
        score = hand.complete_scoring()
        assert hand.contract is not None
        team = hand.contract.bidder.team
        self.scores[team] += score.contractor_points
        self.scores[team.opponent] += score.opponent_points

        record = HandRecord(
            dealer=hand.dealer,
            contract=hand.contract,
            score=score,
            scores=dict(self.scores),
            description=describe_hand_result(hand.contract, score),
        )
        self.hand_history.append(record)
        self.dealer = next_dealer(self.dealer)
        self.current_hand = None
        self.result = check_game_over(
            self.scores[Team.NORTH_SOUTH],
            self.scores[Team.EAST_WEST],
            self.rules,
        )
        logger.debug("%s; scores now %s", record.description, {str(t): s for t, s in self.scores.items()})
        return record

    def _require_hand(self) -> HandEngine:
        if self.current_hand is None:
            raise RuntimeError("No active hand.")
        return self.current_hand
