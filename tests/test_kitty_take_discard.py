import pytest

from fivehundred.cards import Card, Rank, Suit
from fivehundred.deck import build_deck
from fivehundred.kitty import InvalidKittyOperation, KittyExchange


def setup_exchange():
    deck = build_deck()
    return KittyExchange(deck[40:45]), deck[:10]


def test_take_then_discard_restores_hand_size():
    exchange, hand = setup_exchange()
    kitty_cards = list(exchange.kitty)

    full = exchange.take(hand)
    assert len(full) == 15
    assert full[-5:] == kitty_cards
    assert exchange.taken
    assert exchange.kitty == []

    buried = full[:5]
    remaining = exchange.discard(full, buried)
    assert len(remaining) == 10
    assert not set(buried) & set(remaining)
    assert exchange.discards == buried
    assert exchange.complete


def test_kitty_must_hold_five_cards():
    with pytest.raises(InvalidKittyOperation):
        KittyExchange(build_deck()[:4])


def test_cannot_take_twice():
    exchange, hand = setup_exchange()
    exchange.take(hand)
    with pytest.raises(InvalidKittyOperation):
        exchange.take(hand)


def test_cannot_discard_before_taking():
    exchange, hand = setup_exchange()
    with pytest.raises(InvalidKittyOperation):
        exchange.discard(hand, hand[:5])


def test_discard_needs_five_distinct_cards_from_hand():
    exchange, hand = setup_exchange()
    full = exchange.take(hand)

    with pytest.raises(InvalidKittyOperation):
        exchange.discard(full, full[:4])
    with pytest.raises(InvalidKittyOperation):
        exchange.discard(full, [full[0]] * 5)

    outsider = Card(Rank.ACE, Suit.CLUBS)
    assert outsider not in full
    with pytest.raises(InvalidKittyOperation):
        exchange.discard(full, full[:4] + [outsider])
    assert not exchange.complete


def test_discard_only_once():
    exchange, hand = setup_exchange()
    full = exchange.take(hand)
    remaining = exchange.discard(full, full[:5])
    with pytest.raises(InvalidKittyOperation):
        exchange.discard(remaining, remaining[:5])
