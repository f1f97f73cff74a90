"""Room handling: the visible cards and the play/skip protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .cards import Card
from .deck import Deck

ROOM_SIZE = 4
PLAYS_PER_ROOM = 3


class InvalidPlayReason(Enum):
    OUT_OF_RANGE = auto()
    ROOM_NOT_ACTIVE = auto()
    CONSECUTIVE_SKIP = auto()
    SKIP_AFTER_PLAY = auto()
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.lower()


_DEFAULT_MESSAGES = {
    InvalidPlayReason.OUT_OF_RANGE: "No card at that position in the room.",
    InvalidPlayReason.ROOM_NOT_ACTIVE: "Three cards already played; the last card carries over.",
    InvalidPlayReason.CONSECUTIVE_SKIP: "Cannot skip two rooms in a row!",
    InvalidPlayReason.SKIP_AFTER_PLAY: "Cannot skip after playing cards!",
    InvalidPlayReason.GAME_OVER: "The game is over.",
}


class InvalidPlay(RuntimeError):
    """Raised when a play or skip breaks the room rules."""

    def __init__(self, reason: InvalidPlayReason, message: Optional[str] = None) -> None:
        super().__init__(message or _DEFAULT_MESSAGES[reason])
        self.reason = reason


@dataclass
class Room:
    """The face-up cards of the current room.

    ``plays_remaining`` counts down from three each visit; ``skipped_last_room``
    blocks a second consecutive skip.
    """

    cards: List[Card] = field(default_factory=list)
    plays_remaining: int = PLAYS_PER_ROOM
    skipped_last_room: bool = False

    def __len__(self) -> int:
        return len(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def snapshot(self) -> Tuple[Card, ...]:
        return tuple(self.cards)

    def replenish(self, deck: Deck) -> None:
        while len(self.cards) < ROOM_SIZE:
            card = deck.draw()
            if card is None:
                break
            self.cards.append(card)

    def start_visit(self, deck: Deck) -> None:
        """Top up from the deck and open a new visit with three plays."""
        self.replenish(deck)
        self.plays_remaining = PLAYS_PER_ROOM

    def has_played_this_visit(self) -> bool:
        return self.plays_remaining < PLAYS_PER_ROOM

    def visit_complete(self) -> bool:
        return self.plays_remaining == 0 or not self.cards

    def can_skip(self) -> bool:
        return not self.skipped_last_room and not self.has_played_this_visit() and bool(self.cards)

    def check_play(self, index: int) -> Card:
        if self.plays_remaining <= 0:
            raise InvalidPlay(InvalidPlayReason.ROOM_NOT_ACTIVE)
        if not 0 <= index < len(self.cards):
            raise InvalidPlay(InvalidPlayReason.OUT_OF_RANGE, f"Card index {index} is outside the room (size {len(self.cards)}).")
        return self.cards[index]

    def play_card(self, index: int) -> Card:
        self.check_play(index)
        card = self.cards.pop(index)
        self.plays_remaining -= 1
        self.skipped_last_room = False
        return card

    def check_skip(self) -> None:
        if self.skipped_last_room:
            raise InvalidPlay(InvalidPlayReason.CONSECUTIVE_SKIP)
        if self.has_played_this_visit():
            raise InvalidPlay(InvalidPlayReason.SKIP_AFTER_PLAY)

    def skip(self, deck: Deck) -> Tuple[Card, ...]:
        """Return the room to the bottom of the deck and deal a fresh one."""
        self.check_skip()
        skipped = tuple(self.cards)
        self.cards = []
        deck.put_bottom(skipped)
        self.skipped_last_room = True
        self.start_visit(deck)
        return skipped
