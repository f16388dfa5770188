"""Simple bot arena for 500."""

from __future__ import annotations

import argparse
import logging
from typing import Dict, Iterable, Mapping, Optional

from fivehundred.game import GameSession, HandEngine, HandPhase
from fivehundred.scoring import game_over_message
from fivehundred.table import Position, Team

from .base import BotStrategy
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "random": RandomBot,
}

MAX_REDEALS = 200


def _resolve_auction(hand: HandEngine, bots: Mapping[Position, BotStrategy]) -> None:
    while hand.phase == HandPhase.AUCTION:
        player = hand.auction.current_bidder
        assert player is not None
        entry = bots[player].offer_bid(hand, player)
        validation = hand.bid(entry)
        if not validation.is_valid:
            raise ValueError(f"{bots[player].name} proposed an illegal bid: {validation.reason}")


def _resolve_kitty(hand: HandEngine, bots: Mapping[Position, BotStrategy]) -> None:
    contractor = hand.contractor
    if contractor is None:
        raise RuntimeError("Auction not resolved before kitty phase.")
    hand.take_kitty()
    hand.discard(list(bots[contractor].choose_discards(hand, contractor)))


def _play_out(hand: HandEngine, bots: Mapping[Position, BotStrategy]) -> None:
    while hand.phase == HandPhase.PLAY:
        assert hand.state is not None
        player = hand.state.current_player
        if hand.state.current_trick.is_empty and bots[player].should_claim(hand, player):
            awarded = hand.claim(player)
            logger.info("%s claims the remaining %d trick(s)", player, awarded)
            break
        card, nominated = bots[player].play_card(hand, player)
        hand.play_card(player, card, nominated_suit=nominated)


def play_hand(hand: HandEngine, bots: Mapping[Position, BotStrategy]) -> bool:
    """Drive one deal; returns False when the auction ended in a redeal."""
    for position, bot in bots.items():
        bot.on_hand_start(hand, position)
    _resolve_auction(hand, bots)
    if hand.phase == HandPhase.REDEAL:
        return False
    _resolve_kitty(hand, bots)
    _play_out(hand, bots)
    return True


def run_match(
    bots: Mapping[Position, BotStrategy],
    *,
    n_hands: int = 10,
    seed: Optional[int] = None,
) -> dict:
    """Play up to ``n_hands`` scored hands, stopping early if the game ends."""
    session = GameSession(seed=seed)
    history = []
    hand = session.start_hand()
    while len(history) < n_hands:
        if not play_hand(hand, bots):
            if session.redeals >= MAX_REDEALS:
                raise RuntimeError(f"No contract reached after {MAX_REDEALS} redeals.")
            hand = session.redeal()
            continue
        record = session.finish_hand()
        history.append(
            {
                "contract": record.contract.label,
                "contractor": str(record.contract.bidder),
                "contract_made": record.score.contract_made,
                "scores": {str(team): points for team, points in record.scores.items()},
            }
        )
        if session.game_over:
            break
        hand = session.start_hand()
    return {
        "scores": {str(team): points for team, points in session.scores.items()},
        "history": history,
        "redeals": session.redeals,
        "result": session.result,
    }


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot match.")
    parser.add_argument("--north-south", default="random", choices=BOT_REGISTRY.keys())
    parser.add_argument("--east-west", default="random", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=10, help="Number of hands to play.")
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--verbose", action="store_true", help="Log engine decisions.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    bots: Dict[Position, BotStrategy] = {}
    for team, choice in ((Team.NORTH_SOUTH, args.north_south), (Team.EAST_WEST, args.east_west)):
        for position in team.members:
            bots[position] = BOT_REGISTRY[choice]()
    results = run_match(bots, n_hands=args.n, seed=args.seed)

    print(f"Scores after {len(results['history'])} hands: {results['scores']}")
    made = sum(1 for entry in results["history"] if entry["contract_made"])
    print(f"Contracts made: {made}/{len(results['history'])} ({results['redeals']} redeals)")
    if results["result"] is not None:
        scores = results["scores"]
        print(game_over_message(results["result"], scores[str(Team.NORTH_SOUTH)], scores[str(Team.EAST_WEST)]))


if __name__ == "__main__":
    main()
