"""Convenience service layer for UI and agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .cards import Card, card_effect_text, card_label, serialize_card
from .combat import weapon_usable
from .config import GameConfig
from .game import DungeonGame, GameView, Outcome
from .player import MAX_HEALTH, PlayerState

logger = logging.getLogger(__name__)


@dataclass
class CardView:
    card: dict
    label: str
    kind: str
    effect: str
    hint: str


@dataclass
class WeaponView:
    card: dict
    label: str
    power: int
    ceiling: Optional[int]
    durability: str


@dataclass
class PlayerView:
    health: int
    max_health: int
    weapon: Optional[WeaponView]
    potion_used_this_turn: bool


@dataclass
class OutcomeView:
    action: str
    message: str
    effect: Optional[str]
    damage: int
    healed: int
    skipped: list[str]
    room_advanced: bool


@dataclass
class SessionView:
    status: str
    room: list[CardView]
    player: PlayerView
    skipped_last_room: bool
    can_skip: bool
    plays_remaining: int
    deck_remaining: int
    discard_count: int
    turn_number: int
    log: list[str]
    seed: Optional[int]


def card_hint(card: Card, player: PlayerState) -> str:
    """One-line preview of what playing ``card`` would do right now."""
    if card.is_monster():
        if weapon_usable(player, card):
            assert player.weapon is not None
            with_weapon = max(0, card.value - player.weapon.power)
            return f"{card.value} dmg barehanded, {with_weapon} with weapon"
        return f"{card.value} damage"
    if card.is_weapon():
        return f"equip for {card.value} attack power"
    if player.potion_used_this_turn:
        return "wasted - already used potion"
    return f"heal {min(card.value, MAX_HEALTH - player.health)} HP"


def build_player_view(player: PlayerState) -> PlayerView:
    weapon_view = None
    if player.weapon is not None:
        weapon_view = WeaponView(
            card=serialize_card(player.weapon.card),
            label=card_label(player.weapon.card),
            power=player.weapon.power,
            ceiling=player.weapon.ceiling,
            durability=player.weapon.durability_text(),
        )
    return PlayerView(
        health=player.health,
        max_health=MAX_HEALTH,
        weapon=weapon_view,
        potion_used_this_turn=player.potion_used_this_turn,
    )


def build_session_view(view: GameView) -> SessionView:
    return SessionView(
        status=str(view.status),
        room=[
            CardView(
                card=serialize_card(card),
                label=card_label(card),
                kind=str(card.kind),
                effect=card_effect_text(card),
                hint=card_hint(card, view.player),
            )
            for card in view.room
        ],
        player=build_player_view(view.player),
        skipped_last_room=view.skipped_last_room,
        can_skip=view.can_skip,
        plays_remaining=view.plays_remaining,
        deck_remaining=view.deck_remaining,
        discard_count=view.discard_count,
        turn_number=view.turn_number,
        log=list(view.log),
        seed=view.seed,
    )


def build_outcome_view(outcome: Outcome) -> OutcomeView:
    resolution = outcome.resolution
    return OutcomeView(
        action=outcome.action,
        message=outcome.message,
        effect=str(resolution.effect) if resolution is not None else None,
        damage=resolution.damage if resolution is not None else 0,
        healed=resolution.healed if resolution is not None else 0,
        skipped=[card_label(card) for card in outcome.skipped],
        room_advanced=outcome.room_advanced,
    )


class GameService:
    """Facade around DungeonGame for UI consumers."""

    def __init__(self, config: Optional[GameConfig] = None, game: Optional[DungeonGame] = None) -> None:
        self.config = config or GameConfig()
        self.game = game

    # Session lifecycle -------------------------------------------------

    def start_new_game(self, seed: Optional[int] = None) -> SessionView:
        chosen = seed if seed is not None else self.config.seed
        self.game = DungeonGame(seed=chosen)
        logger.info("Started new dungeon run with seed %s", self.game.seed)
        return self.view()

    def has_active_game(self) -> bool:
        return self.game is not None

    # Actions -----------------------------------------------------------

    def play(self, index: int, *, use_weapon: bool = True) -> OutcomeView:
        game = self._require_game()
        return build_outcome_view(game.submit_play(index, use_weapon=use_weapon))

    def skip(self) -> OutcomeView:
        game = self._require_game()
        return build_outcome_view(game.submit_skip())

    # Views -------------------------------------------------------------

    def view(self) -> SessionView:
        game = self._require_game()
        return build_session_view(game.current_view(log_tail=self.config.log_tail))

    # Helpers -----------------------------------------------------------

    def _require_game(self) -> DungeonGame:
        if self.game is None:
            raise RuntimeError("No active game.")
        return self.game
