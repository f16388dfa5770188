"""Legal move generation and trick resolution for 500."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, List, Optional

from .cards import Card, Suit
from .table import Position
from .trick import CardPlay, Trick
from .trump import TrumpRules


class PlayError(Enum):
    NOT_IN_HAND = auto()
    MUST_FOLLOW_SUIT = auto()
    NOMINATION_REQUIRED = auto()
    TRICK_COMPLETE = auto()
    OUT_OF_TURN = auto()


@dataclass(frozen=True)
class PlayValidation:
    is_valid: bool
    error: Optional[PlayError] = None
    message: Optional[str] = None

    @classmethod
    def valid(cls) -> "PlayValidation":
        return cls(is_valid=True)

    @classmethod
    def invalid(cls, error: PlayError, message: str) -> "PlayValidation":
        return cls(is_valid=False, error=error, message=message)


class TrickStatus(Enum):
    PLAYED = auto()
    COMPLETE = auto()
    ERROR = auto()


@dataclass(frozen=True)
class PlayResult:
    status: TrickStatus
    trick: Trick
    message: str
    winner: Optional[Position] = None
    error: Optional[PlayError] = None


@dataclass(frozen=True)
class TrickEngine:
    """Stateless rules for playing cards to a trick under one trump suit."""

    rules: TrumpRules

    def legal_cards(self, trick: Trick, hand: Iterable[Card]) -> List[Card]:
        """Return the cards in ``hand`` that may be played to ``trick``.

        Any card may lead (a no-trump joker lead also needs a nominated suit).
        Followers must play a card of the led suit when they hold one.
        """
        cards = list(hand)
        if trick.is_empty:
            return cards
        led = trick.led_suit
        following = [card for card in cards if self._follows(card, led)]
        return following if following else cards

    def _follows(self, card: Card, led: Optional[Suit]) -> bool:
        if led is None:
            return False
        return self.rules.effective_suit(card) is led

    def validate_play(
        self,
        trick: Trick,
        card: Card,
        hand: Iterable[Card],
        nominated_suit: Optional[Suit] = None,
    ) -> PlayValidation:
        cards = list(hand)
        if trick.is_complete:
            return PlayValidation.invalid(PlayError.TRICK_COMPLETE, "Trick already complete.")
        if card not in cards:
            return PlayValidation.invalid(PlayError.NOT_IN_HAND, f"Card not in hand: {card}.")
        if trick.is_empty and card.is_joker and self.rules.trump is None and nominated_suit is None:
            return PlayValidation.invalid(
                PlayError.NOMINATION_REQUIRED,
                "Nominate a suit for the joker when leading it in no-trump.",
            )
        if card not in self.legal_cards(trick, cards):
            led = trick.led_suit
            return PlayValidation.invalid(
                PlayError.MUST_FOLLOW_SUIT,
                f"You must follow suit ({led}) when able.",
            )
        return PlayValidation.valid()

    def play_card(
        self,
        trick: Trick,
        card: Card,
        player: Position,
        hand: Iterable[Card],
        nominated_suit: Optional[Suit] = None,
    ) -> PlayResult:
        """Validate and append a play, returning a new trick."""
        if not trick.is_complete and player is not trick.next_player:
            return PlayResult(
                status=TrickStatus.ERROR,
                trick=trick,
                message=f"Not {player}'s turn; {trick.next_player} plays next.",
                error=PlayError.OUT_OF_TURN,
            )
        validation = self.validate_play(trick, card, hand, nominated_suit)
        if not validation.is_valid:
            return PlayResult(
                status=TrickStatus.ERROR,
                trick=trick,
                message=validation.message or "Illegal play.",
                error=validation.error,
            )

        updated = trick.with_play(CardPlay(card=card, player=player), nominated_suit=nominated_suit)
        if updated.is_complete:
            winner = self.current_winner(updated)
            return PlayResult(
                status=TrickStatus.COMPLETE,
                trick=updated,
                message=f"{winner} wins the trick.",
                winner=winner,
            )
        return PlayResult(status=TrickStatus.PLAYED, trick=updated, message=f"{player} plays {card}.")

    def winning_play(self, trick: Trick) -> Optional[CardPlay]:
        if trick.is_empty:
            return None
        trumps = [play for play in trick.plays if self.rules.is_trump(play.card)]
        if trumps:
            candidates = trumps
        else:
            led = trick.led_suit
            candidates = [play for play in trick.plays if self._follows(play.card, led)]
        best = candidates[0]
        for play in candidates[1:]:
            if self.rules.compare(play.card, best.card) > 0:
                best = play
        return best

    def current_winner(self, trick: Trick) -> Optional[Position]:
        """Who is winning ``trick`` so far (None for an empty trick)."""
        play = self.winning_play(trick)
        return play.player if play is not None else None


def legal_moves(hand: Iterable[Card], trick: Trick) -> List[Card]:
    """Legal cards for ``hand`` under the trick's own trump suit."""
    return TrickEngine(TrumpRules(trick.trump)).legal_cards(trick, hand)
