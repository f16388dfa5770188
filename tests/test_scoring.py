import pytest

from fivehundred.avondale import bid_value
from fivehundred.bidding import Bid
from fivehundred.cards import BidSuit
from fivehundred.rules_schema import RuleSet
from fivehundred.scoring import ScoringError, describe_hand_result, score_hand
from fivehundred.table import Position


@pytest.mark.parametrize(
    "tricks,suit,value",
    [
        (6, BidSuit.SPADES, 40),
        (6, BidSuit.NO_TRUMP, 120),
        (7, BidSuit.CLUBS, 160),
        (7, BidSuit.NO_TRUMP, 220),
        (8, BidSuit.HEARTS, 300),
        (9, BidSuit.DIAMONDS, 380),
        (10, BidSuit.HEARTS, 500),
        (10, BidSuit.NO_TRUMP, 520),
    ],
)
def test_avondale_values(tricks, suit, value):
    assert bid_value(tricks, suit) == value


def test_value_outside_table_raises():
    with pytest.raises(ValueError):
        bid_value(5, BidSuit.HEARTS)


def test_contract_made_exactly():
    contract = Bid(8, BidSuit.HEARTS, Position.NORTH)
    score = score_hand(contract, 8, 2)
    assert score.contractor_points == 300
    assert score.opponent_points == 20
    assert score.contract_made
    assert score.tricks_over == 0
    assert not score.is_slam


def test_overtricks_earn_nothing_extra():
    score = score_hand(Bid(8, BidSuit.HEARTS, Position.NORTH), 9, 1)
    assert score.contractor_points == 300
    assert score.tricks_over == 1
    assert score.opponent_points == 10


def test_slam_is_worth_at_least_250():
    low = score_hand(Bid(6, BidSuit.SPADES, Position.EAST), 10, 0)
    assert low.is_slam
    assert low.contractor_points == 250
    assert low.opponent_points == 0

    high = score_hand(Bid(8, BidSuit.HEARTS, Position.EAST), 10, 0)
    assert high.contractor_points == 300


def test_failed_contract_loses_its_value():
    score = score_hand(Bid(8, BidSuit.HEARTS, Position.WEST), 6, 4)
    assert not score.contract_made
    assert score.contractor_points == -300
    assert score.opponent_points == 40
    assert score.tricks_under == 2


def test_slam_floor_comes_from_rules():
    rules = RuleSet(scoring={"slam_floor": 320, "opponent_points_per_trick": 5})
    assert score_hand(Bid(7, BidSuit.SPADES, Position.EAST), 10, 0, rules).contractor_points == 320
    assert score_hand(Bid(7, BidSuit.SPADES, Position.EAST), 7, 3, rules).opponent_points == 15


@pytest.mark.parametrize("contractor,opponents", [(8, 3), (5, 4), (-1, 11)])
def test_trick_counts_must_total_ten(contractor, opponents):
    with pytest.raises(ScoringError):
        score_hand(Bid(7, BidSuit.CLUBS, Position.NORTH), contractor, opponents)


def test_hand_descriptions():
    contract = Bid(8, BidSuit.HEARTS, Position.NORTH)
    assert describe_hand_result(contract, score_hand(contract, 8, 2)) == "North-South made 8♥ exactly (+300)"
    assert describe_hand_result(contract, score_hand(contract, 9, 1)) == (
        "North-South made 8♥ with 1 overtrick(s) (+300)"
    )
    assert describe_hand_result(contract, score_hand(contract, 6, 4)) == "North-South failed 8♥ by 2 trick(s) (-300)"
    assert describe_hand_result(contract, score_hand(contract, 10, 0)).startswith("North-South SLAM!")
    assert str(score_hand(contract, 8, 2)).startswith("Contract made")
