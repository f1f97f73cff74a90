import pytest

from scoundrel.cards import Card, Suit
from scoundrel.deck import Deck
from scoundrel.room import InvalidPlay, InvalidPlayReason, Room


def cards(*codes):
    suits = {"s": Suit.SPADES, "c": Suit.CLUBS, "d": Suit.DIAMONDS, "h": Suit.HEARTS}
    return [Card(suits[code[-1]], int(code[:-1])) for code in codes]


def test_replenish_tops_up_to_four():
    deck = Deck(cards("2s", "3s", "4s", "5s", "6s"))
    room = Room(cards=cards("9c"))
    room.replenish(deck)
    assert room.cards == cards("9c", "2s", "3s", "4s")
    assert len(deck) == 2


def test_replenish_stops_when_deck_empty():
    deck = Deck(cards("2s"))
    room = Room()
    room.replenish(deck)
    assert room.cards == cards("2s")
    assert deck.is_empty()


def test_fourth_play_is_rejected():
    room = Room(cards=cards("2s", "3s", "4s", "5s"))
    for _ in range(3):
        room.play_card(0)
    assert room.cards == cards("5s")
    with pytest.raises(InvalidPlay) as excinfo:
        room.play_card(0)
    assert excinfo.value.reason is InvalidPlayReason.ROOM_NOT_ACTIVE
    assert room.cards == cards("5s")


def test_out_of_range_index():
    room = Room(cards=cards("2s", "3s"))
    for index in (-1, 2, 4):
        with pytest.raises(InvalidPlay) as excinfo:
            room.play_card(index)
        assert excinfo.value.reason is InvalidPlayReason.OUT_OF_RANGE
    assert room.plays_remaining == 3


def test_skip_returns_room_to_bottom():
    deck = Deck(cards("2h", "3h", "4h", "5h", "6h"))
    room = Room(cards=cards("10s", "11s", "12s", "13s"))
    skipped = room.skip(deck)
    assert list(skipped) == cards("10s", "11s", "12s", "13s")
    assert room.cards == cards("2h", "3h", "4h", "5h")
    assert deck.cards == cards("6h", "10s", "11s", "12s", "13s")
    assert room.skipped_last_room


def test_consecutive_skip_rejected_and_nothing_changes():
    deck = Deck(cards("2h", "3h", "4h", "5h", "6h"))
    room = Room(cards=cards("10s", "11s", "12s", "13s"))
    room.skip(deck)
    before_room, before_deck = list(room.cards), list(deck.cards)
    with pytest.raises(InvalidPlay) as excinfo:
        room.skip(deck)
    assert excinfo.value.reason is InvalidPlayReason.CONSECUTIVE_SKIP
    assert room.cards == before_room
    assert deck.cards == before_deck


def test_playing_clears_skip_flag_but_blocks_skip_this_visit():
    deck = Deck(cards("2h", "3h", "4h", "5h", "6h"))
    room = Room(cards=cards("10s", "11s", "12s", "13s"))
    room.skip(deck)
    room.play_card(0)
    assert not room.skipped_last_room
    with pytest.raises(InvalidPlay) as excinfo:
        room.skip(deck)
    assert excinfo.value.reason is InvalidPlayReason.SKIP_AFTER_PLAY


def test_invalid_play_message_defaults():
    exc = InvalidPlay(InvalidPlayReason.CONSECUTIVE_SKIP)
    assert str(exc) == "Cannot skip two rooms in a row!"
    assert str(exc.reason) == "consecutive_skip"
