"""Kitty handling for the auction winner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .cards import Card
from .deck import KITTY_SIZE


class InvalidKittyOperation(RuntimeError):
    """Raised when kitty handling violates the rules."""


@dataclass
class KittyExchange:
    """The contractor picks up the five-card kitty and buries five cards."""

    kitty: List[Card]
    discards: List[Card] = field(default_factory=list)
    _taken: bool = False

    def __post_init__(self) -> None:
        if len(self.kitty) != KITTY_SIZE:
            raise InvalidKittyOperation(f"Kitty must hold exactly {KITTY_SIZE} cards.")
        self.kitty = list(self.kitty)

    def take(self, hand: Sequence[Card]) -> List[Card]:
        """Return a new hand with the kitty added."""
        if self._taken:
            raise InvalidKittyOperation("Kitty already taken.")
        taken_cards = list(self.kitty)
        self.kitty = []
        self._taken = True
        return list(hand) + taken_cards

    def discard(self, hand: Sequence[Card], cards: Sequence[Card]) -> List[Card]:
        """Bury ``cards`` face down and return the remaining hand."""
        if not self._taken:
            raise InvalidKittyOperation("Must take the kitty before discarding.")
        if self.discards:
            raise InvalidKittyOperation("Cards have already been discarded.")
        if len(cards) != KITTY_SIZE or len(set(cards)) != KITTY_SIZE:
            raise InvalidKittyOperation(f"Exactly {KITTY_SIZE} distinct cards must be discarded.")

        new_hand = list(hand)
        for card in cards:
            try:
                new_hand.remove(card)
            except ValueError as exc:
                raise InvalidKittyOperation("Discarded cards must come from the current hand.") from exc

        self.discards = list(cards)
        return new_hand

    @property
    def taken(self) -> bool:
        return self._taken

    @property
    def complete(self) -> bool:
        return bool(self.discards)
