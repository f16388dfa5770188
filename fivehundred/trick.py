"""Trick representation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .cards import Card, Suit
from .table import Position
from .trump import TrumpRules

TRICK_SIZE = 4


class TrickError(RuntimeError):
    """Raised when trick play breaks ordering constraints."""


@dataclass(frozen=True)
class CardPlay:
    card: Card
    player: Position

    def __str__(self) -> str:
        return f"{self.card} by {self.player}"


@dataclass(frozen=True)
class Trick:
    """A trick in progress or finished. Never modified; see :meth:`with_play`.

    ``nominated_suit`` is only set when the joker is led in a no-trump hand and
    names the suit the others must follow.
    """

    leader: Position
    trump: Optional[Suit] = None
    plays: Tuple[CardPlay, ...] = ()
    nominated_suit: Optional[Suit] = None

    @property
    def is_empty(self) -> bool:
        return not self.plays

    @property
    def is_complete(self) -> bool:
        return len(self.plays) == TRICK_SIZE

    @property
    def cards(self) -> Tuple[Card, ...]:
        return tuple(play.card for play in self.plays)

    @property
    def rules(self) -> TrumpRules:
        return TrumpRules(self.trump)

    @property
    def led_suit(self) -> Optional[Suit]:
        if not self.plays:
            return None
        lead = self.plays[0].card
        if lead.is_joker and self.trump is None:
            return self.nominated_suit
        return self.rules.effective_suit(lead)

    @property
    def next_player(self) -> Position:
        if not self.plays:
            return self.leader
        return self.plays[-1].player.next

    def with_play(self, play: CardPlay, nominated_suit: Optional[Suit] = None) -> "Trick":
        if self.is_complete:
            raise TrickError("Trick already complete.")
        if play.card in self.cards:
            raise TrickError(f"{play.card} has already been played to this trick.")
        if any(existing.player is play.player for existing in self.plays):
            raise TrickError(f"{play.player} has already played to this trick.")
        nominated = self.nominated_suit
        if self.is_empty and play.card.is_joker and self.trump is None:
            nominated = nominated_suit
        return Trick(
            leader=self.leader,
            trump=self.trump,
            plays=self.plays + (play,),
            nominated_suit=nominated,
        )

    def __str__(self) -> str:
        return f"Trick: {len(self.plays)}/{TRICK_SIZE} cards, led by {self.leader}"
