import pytest

from fivehundred.rules_schema import RuleSet
from fivehundred.scoring import GameOverStatus, check_game_over, game_over_message
from fivehundred.table import Team


@pytest.mark.parametrize(
    "ns,ew,expected",
    [
        (500, 300, GameOverStatus.NORTH_SOUTH_WINS),
        (100, 520, GameOverStatus.EAST_WEST_WINS),
        (-510, 100, GameOverStatus.NORTH_SOUTH_LOSES),
        (100, -500, GameOverStatus.EAST_WEST_LOSES),
        (600, 550, GameOverStatus.NORTH_SOUTH_WINS),
        (550, 600, GameOverStatus.EAST_WEST_WINS),
        (-600, 500, GameOverStatus.EAST_WEST_WINS),
        (499, -499, None),
        (0, 0, None),
    ],
)
def test_game_over_thresholds(ns, ew, expected):
    assert check_game_over(ns, ew) is expected


def test_tie_above_target_goes_to_east_west():
    assert check_game_over(520, 520) is GameOverStatus.EAST_WEST_WINS
    assert check_game_over(500, 500) is GameOverStatus.EAST_WEST_WINS


def test_thresholds_come_from_rules():
    rules = RuleSet(game={"win_score": 300, "lose_score": -200})
    assert check_game_over(300, 0, rules) is GameOverStatus.NORTH_SOUTH_WINS
    assert check_game_over(0, -200, rules) is GameOverStatus.EAST_WEST_LOSES
    assert check_game_over(299, -199, rules) is None


def test_losing_team_hands_win_to_opponents():
    assert GameOverStatus.NORTH_SOUTH_LOSES.winner is Team.EAST_WEST
    assert GameOverStatus.EAST_WEST_LOSES.winner is Team.NORTH_SOUTH
    assert GameOverStatus.EAST_WEST_WINS.winner is Team.EAST_WEST


def test_game_over_messages():
    assert game_over_message(GameOverStatus.NORTH_SOUTH_WINS, 510, 200) == (
        "Team North-South wins! Final score: 510 to 200"
    )
    assert game_over_message(GameOverStatus.EAST_WEST_LOSES, 120, -530) == (
        "Team East-West loses (-530). North-South wins!"
    )
