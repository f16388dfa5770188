"""Hand scoring helpers for 500."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .bidding import Bid
from .rules_schema import DEFAULT_RULES, RuleSet
from .table import Team

logger = logging.getLogger(__name__)

TRICKS_PER_HAND = 10


class ScoringError(ValueError):
    """Raised when a hand is scored with impossible trick counts."""


@dataclass(frozen=True)
class HandScore:
    contractor_points: int
    opponent_points: int
    contract_made: bool
    tricks_over: int
    tricks_under: int
    is_slam: bool = False

    def __str__(self) -> str:
        if self.contract_made:
            prefix = "SLAM!" if self.is_slam else "Contract made:"
            return f"{prefix} +{self.contractor_points} (contractors), +{self.opponent_points} (opponents)"
        return f"Contract failed: {self.contractor_points} (contractors), +{self.opponent_points} (opponents)"


class GameOverStatus(Enum):
    NORTH_SOUTH_WINS = "north_south_wins"
    EAST_WEST_WINS = "east_west_wins"
    NORTH_SOUTH_LOSES = "north_south_loses"
    EAST_WEST_LOSES = "east_west_loses"

    @property
    def winner(self) -> Team:
        if self in (GameOverStatus.NORTH_SOUTH_WINS, GameOverStatus.EAST_WEST_LOSES):
            return Team.NORTH_SOUTH
        return Team.EAST_WEST


def score_hand(
    contract: Bid,
    contractor_tricks: int,
    opponent_tricks: int,
    rules: Optional[RuleSet] = None,
) -> HandScore:
    """Score a finished hand for both partnerships.

    A made contract earns its Avondale value, raised to the slam floor when
    all ten tricks were taken. A failed contract loses its value. Defenders
    always earn ten points per trick.
    """
    rules = rules or DEFAULT_RULES
    if contractor_tricks < 0 or opponent_tricks < 0:
        raise ScoringError("Trick counts cannot be negative.")
    if contractor_tricks + opponent_tricks != TRICKS_PER_HAND:
        raise ScoringError(
            f"Total tricks must equal {TRICKS_PER_HAND} (got {contractor_tricks + opponent_tricks})."
        )

    value = contract.value
    made = contractor_tricks >= contract.tricks
    slam = contractor_tricks == TRICKS_PER_HAND

    if made and slam:
        contractor_points = max(value, rules.scoring.slam_floor)
    elif made:
        contractor_points = value
    else:
        contractor_points = -value
    opponent_points = opponent_tricks * rules.scoring.opponent_points_per_trick

    score = HandScore(
        contractor_points=contractor_points,
        opponent_points=opponent_points,
        contract_made=made,
        tricks_over=contractor_tricks - contract.tricks if made else 0,
        tricks_under=0 if made else contract.tricks - contractor_tricks,
        is_slam=slam,
    )
    logger.debug("Scored %s with %d tricks: %s", contract, contractor_tricks, score)
    return score


def check_game_over(
    score_ns: int,
    score_ew: int,
    rules: Optional[RuleSet] = None,
) -> Optional[GameOverStatus]:
    """Return the game result, or None while play continues.

    Reaching the winning score is checked before falling to the losing score.
    If both teams pass the winning score North-South needs the strictly
    higher score; an exact tie goes to East-West.
    """
    rules = rules or DEFAULT_RULES
    win = rules.game.win_score
    lose = rules.game.lose_score

    if score_ns >= win and score_ew >= win:
        if score_ns == score_ew:
            logger.debug("Both teams reached %d with %d; tie goes to %s", win, score_ns, Team.EAST_WEST)
        return GameOverStatus.NORTH_SOUTH_WINS if score_ns > score_ew else GameOverStatus.EAST_WEST_WINS
    if score_ns >= win:
        return GameOverStatus.NORTH_SOUTH_WINS
    if score_ew >= win:
        return GameOverStatus.EAST_WEST_WINS
    if score_ns <= lose:
        return GameOverStatus.NORTH_SOUTH_LOSES
    if score_ew <= lose:
        return GameOverStatus.EAST_WEST_LOSES
    return None


def describe_hand_result(contract: Bid, score: HandScore) -> str:
    team = contract.bidder.team
    if score.contract_made:
        if score.is_slam:
            return f"{team} SLAM! Won all {TRICKS_PER_HAND} tricks (+{score.contractor_points})"
        if score.tricks_over == 0:
            return f"{team} made {contract.label} exactly (+{score.contractor_points})"
        return f"{team} made {contract.label} with {score.tricks_over} overtrick(s) (+{score.contractor_points})"
    return f"{team} failed {contract.label} by {score.tricks_under} trick(s) ({score.contractor_points})"


def game_over_message(status: GameOverStatus, score_ns: int, score_ew: int) -> str:
    if status is GameOverStatus.NORTH_SOUTH_WINS:
        return f"Team North-South wins! Final score: {score_ns} to {score_ew}"
    if status is GameOverStatus.EAST_WEST_WINS:
        return f"Team East-West wins! Final score: {score_ew} to {score_ns}"
    if status is GameOverStatus.NORTH_SOUTH_LOSES:
        return f"Team North-South loses ({score_ns}). East-West wins!"
    return f"Team East-West loses ({score_ew}). North-South wins!"
