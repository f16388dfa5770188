"""Trick-play state for one hand of 500."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .cards import Card, Suit
from .claims import TRICKS_PER_HAND, ClaimAnalyzer
from .mechanics import PlayValidation, TrickEngine, TrickStatus
from .table import Position, Team
from .trick import Trick
from .trump import TrumpRules


class InvalidPlay(RuntimeError):
    """Raised when an illegal card play is attempted."""

    def __init__(self, message: str, validation: Optional[PlayValidation] = None) -> None:
        super().__init__(message)
        self.validation = validation


@dataclass
class PlayState:
    hands: Dict[Position, List[Card]]
    leader: Position
    trump: Optional[Suit] = None
    current_player: Position = field(init=False)
    current_trick: Trick = field(init=False)
    completed_tricks: List[Trick] = field(default_factory=list)
    trick_winners: List[Position] = field(default_factory=list)
    tricks_won: Dict[Team, int] = field(init=False)
    engine: TrickEngine = field(init=False)

    def __post_init__(self) -> None:
        if set(self.hands) != set(Position):
            raise ValueError("PlayState needs a hand for every seat.")
        self.hands = {position: list(hand) for position, hand in self.hands.items()}
        self.engine = TrickEngine(TrumpRules(self.trump))
        self.current_player = self.leader
        self.current_trick = Trick(leader=self.leader, trump=self.trump)
        self.tricks_won = {team: 0 for team in Team}

    @property
    def rules(self) -> TrumpRules:
        return self.engine.rules

    def available_moves(self, player: Position) -> List[Card]:
        if player is not self.current_player:
            raise InvalidPlay("Not this player's turn.")
        return self.engine.legal_cards(self.current_trick, self.hands[player])

    def play_card(self, player: Position, card: Card, *, nominated_suit: Optional[Suit] = None) -> None:
        if self.is_finished():
            raise InvalidPlay("All tricks have been played.")
        result = self.engine.play_card(
            self.current_trick,
            card,
            player,
            self.hands[player],
            nominated_suit=nominated_suit,
        )
        if result.status is TrickStatus.ERROR:
            raise InvalidPlay(
                result.message,
                PlayValidation.invalid(result.error, result.message) if result.error else None,
            )

        self.hands[player].remove(card)
        if result.status is TrickStatus.COMPLETE:
            assert result.winner is not None
            self._complete_trick(result.trick, result.winner)
        else:
            self.current_trick = result.trick
            self.current_player = player.next

    def _complete_trick(self, trick: Trick, winner: Position) -> None:
        self.completed_tricks.append(trick)
        self.trick_winners.append(winner)
        self.tricks_won[winner.team] += 1
        self.current_player = winner
        self.current_trick = Trick(leader=winner, trump=self.trump)

    def can_claim(self, player: Position) -> bool:
        analyzer = ClaimAnalyzer(
            hand=self.hands[player],
            rules=self.rules,
            completed_tricks=self.completed_tricks,
            current_trick=self.current_trick,
        )
        return analyzer.can_claim_remaining_tricks()

    def claim_remaining(self, player: Position) -> int:
        """Award every remaining trick to ``player``'s team and end play."""
        if not self.can_claim(player):
            raise InvalidPlay(f"{player} cannot claim the remaining tricks.")
        remaining = TRICKS_PER_HAND - len(self.completed_tricks)
        self.tricks_won[player.team] += remaining
        self.trick_winners.extend([player] * remaining)
        for hand in self.hands.values():
            hand.clear()
        return remaining

    def is_finished(self) -> bool:
        hands_empty = all(len(hand) == 0 for hand in self.hands.values())
        return hands_empty and self.current_trick.is_empty

    def tricks_for(self, team: Team) -> int:
        return self.tricks_won[team]

    def remaining_cards(self) -> Dict[Position, int]:
        return {position: len(hand) for position, hand in self.hands.items()}

    def played_cards(self) -> Sequence[Card]:
        return [card for trick in self.completed_tricks for card in trick.cards] + list(self.current_trick.cards)
