import pytest

from fivehundred.bidding import Bid, BidEntry
from fivehundred.cards import BidSuit, Suit
from fivehundred.deck import build_deck, cut_winner
from fivehundred.game import GameSession, HandEngine, HandPhase
from fivehundred.kitty import InvalidKittyOperation
from fivehundred.mechanics import PlayError
from fivehundred.scoring import GameOverStatus
from fivehundred.state import InvalidPlay
from fivehundred.table import Position, Team

N, E, S, W = Position.NORTH, Position.EAST, Position.SOUTH, Position.WEST


def west_wins_seven_hearts(hand):
    hand.bid(BidEntry.passed(E))
    hand.bid(BidEntry.inkle(S, BidSuit.SPADES))
    hand.bid(BidEntry.normal(Bid(7, BidSuit.HEARTS, W)))
    hand.bid(BidEntry.passed(N))


def exchange_kitty(hand):
    cards = hand.take_kitty()
    hand.discard(cards[-5:])


def play_first_legal(hand):
    while hand.phase is HandPhase.PLAY:
        player = hand.state.current_player
        card = hand.state.available_moves(player)[0]
        hand.play_card(player, card)


def test_full_hand_from_fixed_deck():
    hand = HandEngine(dealer=N, deck=build_deck())
    assert all(len(cards) == 10 for cards in hand.hands.values())

    west_wins_seven_hearts(hand)
    assert hand.phase is HandPhase.KITTY
    assert hand.contractor is W
    assert hand.trump is Suit.HEARTS

    exchange_kitty(hand)
    assert hand.phase is HandPhase.PLAY
    assert len(hand.hands[W]) == 10
    assert hand.state.current_player is W

    play_first_legal(hand)
    assert hand.phase is HandPhase.COMPLETE
    assert hand.tricks_won(Team.NORTH_SOUTH) + hand.tricks_won(Team.EAST_WEST) == 10
    assert len(hand.state.completed_tricks) == 10

    score = hand.complete_scoring()
    if score.contract_made:
        assert score.contractor_points in (200, 250)
    else:
        assert score.contractor_points == -200
    assert score.opponent_points == 10 * hand.tricks_won(Team.NORTH_SOUTH)


def test_phase_order_is_enforced():
    hand = HandEngine(dealer=N, deck=build_deck())
    with pytest.raises(RuntimeError):
        hand.take_kitty()

    west_wins_seven_hearts(hand)
    with pytest.raises(RuntimeError):
        hand.play_card(W, hand.hands[W][0])
    with pytest.raises(InvalidKittyOperation):
        hand.discard(hand.hands[W][:5])


def test_illegal_play_raises_with_reason():
    hand = HandEngine(dealer=N, deck=build_deck())
    west_wins_seven_hearts(hand)
    exchange_kitty(hand)

    with pytest.raises(InvalidPlay) as excinfo:
        hand.play_card(N, hand.hands[N][0])
    assert excinfo.value.validation.error is PlayError.OUT_OF_TURN

    stranger = hand.hands[N][0]
    with pytest.raises(InvalidPlay) as excinfo:
        hand.play_card(W, stranger)
    assert excinfo.value.validation.error is PlayError.NOT_IN_HAND


def test_all_pass_leads_to_redeal_by_same_dealer():
    session = GameSession(seed=3, dealer=S)
    hand = session.start_hand(deck=build_deck())
    for player in (W, N, E, S):
        hand.bid(BidEntry.passed(player))
    assert hand.phase is HandPhase.REDEAL

    redealt = session.redeal()
    assert redealt.dealer is S
    assert session.redeals == 1
    assert session.dealer is S
    with pytest.raises(RuntimeError):
        session.finish_hand()


def test_session_scores_hand_and_rotates_dealer():
    session = GameSession(seed=1, dealer=N)
    hand = session.start_hand(deck=build_deck())
    west_wins_seven_hearts(hand)
    exchange_kitty(hand)
    play_first_legal(hand)

    record = session.finish_hand()

    assert session.dealer is E
    assert session.current_hand is None
    assert session.hand_history == [record]
    assert record.contract == Bid(7, BidSuit.HEARTS, W)
    assert session.scores[Team.EAST_WEST] == record.score.contractor_points
    assert session.scores[Team.NORTH_SOUTH] == record.score.opponent_points
    assert record.scores == session.scores
    assert record.description.startswith("East-West")
    assert not session.game_over


def test_finish_hand_detects_game_over():
    session = GameSession(seed=1, dealer=N, scores={Team.NORTH_SOUTH: 0, Team.EAST_WEST: 499})
    hand = session.start_hand(deck=build_deck())
    west_wins_seven_hearts(hand)
    exchange_kitty(hand)
    play_first_legal(hand)
    record = session.finish_hand()

    if record.score.contract_made:
        assert session.result is GameOverStatus.EAST_WEST_WINS
        with pytest.raises(RuntimeError):
            session.start_hand()
    else:
        assert session.result is None


def test_redeal_only_after_failed_auction():
    session = GameSession(seed=2)
    session.start_hand()
    with pytest.raises(RuntimeError):
        session.redeal()


def test_session_cuts_for_first_dealer():
    session = GameSession(seed=9)
    assert set(session.cut_cards) == set(Position)
    assert len(set(session.cut_cards.values())) == 4
    assert session.dealer is cut_winner(session.cut_cards)
    assert session.start_hand().dealer is session.dealer


def test_cut_is_reproducible_with_seed():
    assert GameSession(seed=4).cut_cards == GameSession(seed=4).cut_cards


def test_explicit_dealer_skips_the_cut():
    session = GameSession(seed=9, dealer=W)
    assert session.dealer is W
    assert session.cut_cards == {}
