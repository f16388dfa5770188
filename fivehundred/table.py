"""Seats and partnerships around the 500 table."""

from __future__ import annotations

from enum import Enum, auto
from typing import List


class Team(Enum):
    NORTH_SOUTH = auto()
    EAST_WEST = auto()

    def __str__(self) -> str:
        return TEAM_NAMES[self]

    @property
    def opponent(self) -> "Team":
        return Team.EAST_WEST if self is Team.NORTH_SOUTH else Team.NORTH_SOUTH

    @property
    def members(self) -> tuple["Position", "Position"]:
        return TEAM_MEMBERS[self]


class Position(Enum):
    NORTH = auto()
    EAST = auto()
    SOUTH = auto()
    WEST = auto()

    def __str__(self) -> str:
        return self.name.title()

    @property
    def next(self) -> "Position":
        """The seat to this player's left (clockwise)."""
        return NEXT_POSITION[self]

    @property
    def partner(self) -> "Position":
        return PARTNERS[self]

    @property
    def team(self) -> Team:
        return TEAMS[self]


NEXT_POSITION: dict[Position, Position] = {
    Position.NORTH: Position.EAST,
    Position.EAST: Position.SOUTH,
    Position.SOUTH: Position.WEST,
    Position.WEST: Position.NORTH,
}

PARTNERS: dict[Position, Position] = {
    Position.NORTH: Position.SOUTH,
    Position.SOUTH: Position.NORTH,
    Position.EAST: Position.WEST,
    Position.WEST: Position.EAST,
}

TEAMS: dict[Position, Team] = {
    Position.NORTH: Team.NORTH_SOUTH,
    Position.SOUTH: Team.NORTH_SOUTH,
    Position.EAST: Team.EAST_WEST,
    Position.WEST: Team.EAST_WEST,
}

TEAM_MEMBERS: dict[Team, tuple[Position, Position]] = {
    Team.NORTH_SOUTH: (Position.NORTH, Position.SOUTH),
    Team.EAST_WEST: (Position.EAST, Position.WEST),
}

TEAM_NAMES: dict[Team, str] = {
    Team.NORTH_SOUTH: "North-South",
    Team.EAST_WEST: "East-West",
}


def rotation(start: Position) -> List[Position]:
    """Return all four seats clockwise beginning with ``start``."""
    order = [start]
    while len(order) < 4:
        order.append(order[-1].next)
    return order


def left_of(dealer: Position) -> List[Position]:
    """Return the dealing/bidding order: dealer's left first, dealer last."""
    return rotation(dealer.next)
