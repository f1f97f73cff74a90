"""High-level game orchestration for Scoundrel."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import List, Optional, Sequence, Tuple

from .cards import Card, card_label
from .combat import Effect, Resolution, resolve_card
from .deck import Deck, build_deck
from .player import PlayerState
from .room import InvalidPlay, InvalidPlayReason, Room

logger = logging.getLogger(__name__)


class GameStatus(Enum):
    PLAYING = auto()
    WON = auto()
    LOST = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Outcome:
    """What a single accepted command did."""

    action: str
    status: GameStatus
    message: str
    resolution: Optional[Resolution] = None
    skipped: Tuple[Card, ...] = ()
    room_advanced: bool = False


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot handed to presentation layers."""

    status: GameStatus
    room: Tuple[Card, ...]
    player: PlayerState
    skipped_last_room: bool
    can_skip: bool
    plays_remaining: int
    deck_remaining: int
    discard_count: int
    turn_number: int
    log: Tuple[str, ...]
    seed: Optional[int]


def _labels(cards: Sequence[Card]) -> str:
    return ", ".join(card_label(card) for card in cards)


@dataclass
class DungeonGame:
    """A single run through the dungeon deck."""

    seed: Optional[int] = None
    deck: Optional[Deck] = None

    status: GameStatus = field(init=False, default=GameStatus.PLAYING)
    room: Room = field(init=False)
    player: PlayerState = field(init=False)
    discard: List[Card] = field(init=False, default_factory=list)
    turn_number: int = field(init=False, default=1)
    _log: List[str] = field(init=False, default_factory=list)

    def __post_init__(self) -> None:
        # A supplied deck keeps whatever seed the caller gave, possibly None.
        if self.deck is None:
            if self.seed is None:
                self.seed = time.time_ns()
            self.deck = build_deck(rng=Random(self.seed))
        self.room = Room()
        self.player = PlayerState()
        self.log(f"Entered the dungeon with {self.player.health} HP")
        self._enter_room()

    # Commands ----------------------------------------------------------

    def submit_play(self, index: int, *, use_weapon: bool = True) -> Outcome:
        self._ensure_playing()
        card = self.room.play_card(index)
        resolution = resolve_card(self.player, card, use_weapon=use_weapon)
        self.player = resolution.player
        message = self._record(resolution)

        advanced = False
        if not self.player.is_alive:
            self._finish(GameStatus.LOST)
        elif self.deck.is_empty() and self.room.is_empty():
            self._finish(GameStatus.WON)
        elif self.room.visit_complete():
            self.turn_number += 1
            self._enter_room()
            advanced = True

        return Outcome(
            action="play",
            status=self.status,
            message=message,
            resolution=resolution,
            room_advanced=advanced,
        )

    def submit_skip(self) -> Outcome:
        self._ensure_playing()
        skipped = self.room.skip(self.deck)
        self.player = self.player.start_room()
        self.log(f"Skipped room ({_labels(skipped)})")
        logger.debug("Skipped %d cards to the bottom of the deck", len(skipped))
        self._log_room_entry()
        return Outcome(
            action="skip",
            status=self.status,
            message="Skipped room",
            skipped=skipped,
            room_advanced=True,
        )

    # Queries -----------------------------------------------------------

    def current_view(self, log_tail: Optional[int] = None) -> GameView:
        if log_tail is not None and log_tail < 0:
            raise ValueError(f"log_tail must be non-negative, got {log_tail}.")
        if log_tail is None:
            entries = list(self._log)
        else:
            entries = self._log[-log_tail:] if log_tail > 0 else []
        return GameView(
            status=self.status,
            room=self.room.snapshot(),
            player=self.player,
            skipped_last_room=self.room.skipped_last_room,
            can_skip=self.status is GameStatus.PLAYING and self.room.can_skip(),
            plays_remaining=self.room.plays_remaining,
            deck_remaining=len(self.deck),
            discard_count=len(self.discard),
            turn_number=self.turn_number,
            log=tuple(entries),
            seed=self.seed,
        )

    @property
    def log_entries(self) -> Tuple[str, ...]:
        return tuple(self._log)

    def is_over(self) -> bool:
        return self.status is not GameStatus.PLAYING

    def log(self, message: str) -> None:
        self._log.append(f"[Turn {self.turn_number}] {message}")

    # Helpers -----------------------------------------------------------

    def _ensure_playing(self) -> None:
        if self.status is not GameStatus.PLAYING:
            raise InvalidPlay(InvalidPlayReason.GAME_OVER)

    def _enter_room(self) -> None:
        self.room.start_visit(self.deck)
        self.player = self.player.start_room()
        self._log_room_entry()

    def _log_room_entry(self) -> None:
        if self.room.is_empty():
            return
        self.log(f"Entered room: {_labels(self.room.cards)}")
        logger.debug("Room dealt: %s (%d left in deck)", _labels(self.room.cards), len(self.deck))
        if self.deck.is_empty():
            self.log("The dungeon is empty. Face what remains.")

    def _record(self, resolution: Resolution) -> str:
        card = resolution.card
        label = card_label(card)
        health = self.player.health
        if resolution.effect is Effect.WEAPON_KILL:
            assert self.player.weapon is not None
            weapon = card_label(self.player.weapon.card)
            self.discard.append(card)
            self.log(f"Killed {label} with {weapon}, took {resolution.damage} dmg (now {health} HP)")
            return f"Slew {label} with weapon - took {resolution.damage} damage!"
        if resolution.effect is Effect.BAREHANDED:
            self.discard.append(card)
            self.log(f"Fought {label} barehanded, took {resolution.damage} dmg (now {health} HP)")
            return f"Fought {label} barehanded - took {resolution.damage} damage!"
        if resolution.effect is Effect.EQUIPPED:
            if resolution.replaced_weapon is not None:
                self.discard.append(resolution.replaced_weapon.card)
                self.log(f"Discarded {card_label(resolution.replaced_weapon.card)}, equipped {label}")
            else:
                self.log(f"Equipped {label}")
            return f"Equipped {label}!"
        self.discard.append(card)
        if resolution.effect is Effect.POTION_WASTED:
            self.log(f"Wasted {label} (already used potion)")
            return f"Second potion - {label} wasted!"
        self.log(f"Drank {label}, healed {resolution.healed} HP (now {health} HP)")
        return f"Used {label} - healed {resolution.healed} HP!"

    def _finish(self, status: GameStatus) -> None:
        self.status = status
        if status is GameStatus.LOST:
            self.log("DIED!")
        else:
            self.log(f"VICTORY! Escaped the dungeon with {self.player.health} HP")
        logger.debug("Game over: %s on turn %d", status, self.turn_number)
