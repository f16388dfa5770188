import pytest

from fivehundred.cards import JOKER, Card, Rank, Suit
from fivehundred.mechanics import PlayError, TrickEngine, TrickStatus
from fivehundred.table import Position
from fivehundred.trick import CardPlay, Trick, TrickError
from fivehundred.trump import TrumpRules


def build_trick(trump, *cards, leader=Position.NORTH, nominated=None):
    trick = Trick(leader=leader, trump=trump)
    player = leader
    for card in cards:
        trick = trick.with_play(CardPlay(card, player), nominated_suit=nominated)
        player = player.next
    return trick


def test_left_bower_wins_over_ace_of_trumps():
    trick = build_trick(
        Suit.HEARTS,
        Card(Rank.QUEEN, Suit.HEARTS),
        Card(Rank.JACK, Suit.DIAMONDS),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
    )
    assert TrickEngine(TrumpRules(Suit.HEARTS)).current_winner(trick) is Position.EAST


def test_off_suit_ace_never_wins():
    trick = build_trick(
        Suit.SPADES,
        Card(Rank.TEN, Suit.HEARTS),
        Card(Rank.ACE, Suit.CLUBS),
        Card(Rank.FOUR, Suit.HEARTS),
        Card(Rank.KING, Suit.HEARTS),
    )
    assert TrickEngine(TrumpRules(Suit.SPADES)).current_winner(trick) is Position.WEST


def test_lowest_trump_beats_led_ace():
    trick = build_trick(Suit.SPADES, Card(Rank.ACE, Suit.HEARTS), Card(Rank.FOUR, Suit.SPADES))
    assert TrickEngine(TrumpRules(Suit.SPADES)).current_winner(trick) is Position.EAST


def test_joker_wins_a_no_trump_trick_it_leads():
    trick = build_trick(
        None,
        JOKER,
        Card(Rank.ACE, Suit.DIAMONDS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.ACE, Suit.CLUBS),
        leader=Position.SOUTH,
        nominated=Suit.DIAMONDS,
    )
    assert TrickEngine(TrumpRules()).current_winner(trick) is Position.SOUTH


def test_no_trump_follow_winner_uses_nominated_suit():
    trick = build_trick(
        None,
        JOKER,
        Card(Rank.FIVE, Suit.DIAMONDS),
        leader=Position.SOUTH,
        nominated=Suit.DIAMONDS,
    )
    assert trick.led_suit is Suit.DIAMONDS
    assert TrickEngine(TrumpRules()).current_winner(trick) is Position.SOUTH


def test_empty_trick_has_no_winner():
    assert TrickEngine(TrumpRules(Suit.CLUBS)).current_winner(Trick(leader=Position.NORTH)) is None


def test_playing_four_cards_completes_the_trick():
    engine = TrickEngine(TrumpRules(Suit.CLUBS))
    trick = Trick(leader=Position.WEST, trump=Suit.CLUBS)
    plays = [
        (Position.WEST, Card(Rank.NINE, Suit.DIAMONDS)),
        (Position.NORTH, Card(Rank.ACE, Suit.DIAMONDS)),
        (Position.EAST, Card(Rank.SIX, Suit.CLUBS)),
        (Position.SOUTH, Card(Rank.FOUR, Suit.DIAMONDS)),
    ]
    result = None
    for player, card in plays:
        result = engine.play_card(trick, card, player, [card])
        trick = result.trick

    assert result.status is TrickStatus.COMPLETE
    assert result.winner is Position.EAST
    assert trick.is_complete


def test_partial_trick_reports_played():
    engine = TrickEngine(TrumpRules(Suit.CLUBS))
    trick = Trick(leader=Position.NORTH, trump=Suit.CLUBS)
    card = Card(Rank.KING, Suit.HEARTS)

    result = engine.play_card(trick, card, Position.NORTH, [card])

    assert result.status is TrickStatus.PLAYED
    assert result.winner is None
    assert trick.is_empty
    assert result.trick.cards == (card,)


def test_out_of_turn_play_is_rejected():
    engine = TrickEngine(TrumpRules(Suit.CLUBS))
    trick = Trick(leader=Position.NORTH, trump=Suit.CLUBS)
    card = Card(Rank.KING, Suit.HEARTS)

    result = engine.play_card(trick, card, Position.SOUTH, [card])

    assert result.status is TrickStatus.ERROR
    assert result.error is PlayError.OUT_OF_TURN


def test_complete_trick_rejects_more_plays():
    engine = TrickEngine(TrumpRules(Suit.SPADES))
    trick = build_trick(
        Suit.SPADES,
        Card(Rank.TEN, Suit.HEARTS),
        Card(Rank.ACE, Suit.CLUBS),
        Card(Rank.FOUR, Suit.HEARTS),
        Card(Rank.KING, Suit.HEARTS),
    )
    card = Card(Rank.FIVE, Suit.HEARTS)
    assert engine.validate_play(trick, card, [card]).error is PlayError.TRICK_COMPLETE
    with pytest.raises(TrickError):
        trick.with_play(CardPlay(card, Position.NORTH))


def test_trick_rejects_repeated_player_or_card():
    trick = build_trick(Suit.SPADES, Card(Rank.TEN, Suit.HEARTS))
    with pytest.raises(TrickError):
        trick.with_play(CardPlay(Card(Rank.NINE, Suit.HEARTS), Position.NORTH))
    with pytest.raises(TrickError):
        trick.with_play(CardPlay(Card(Rank.TEN, Suit.HEARTS), Position.EAST))
