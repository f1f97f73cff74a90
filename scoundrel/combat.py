"""Card resolution against the player state."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional

from .cards import Card
from .player import MAX_HEALTH, PlayerState, Weapon


class Effect(Enum):
    WEAPON_KILL = auto()
    BAREHANDED = auto()
    EQUIPPED = auto()
    HEALED = auto()
    POTION_WASTED = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class Resolution:
    """Result of applying one card: the new player state and what happened."""

    card: Card
    effect: Effect
    player: PlayerState
    damage: int = 0
    healed: int = 0
    replaced_weapon: Optional[Weapon] = None


def weapon_usable(player: PlayerState, monster: Card) -> bool:
    return player.weapon is not None and player.weapon.can_use_against(monster.value)


def fight_monster(player: PlayerState, card: Card, *, use_weapon: bool = True) -> Resolution:
    weapon = player.weapon
    if use_weapon and weapon is not None and weapon.can_use_against(card.value):
        damage = max(0, card.value - weapon.power)
        updated = player.with_weapon(weapon.degraded_to(card.value)).damaged(damage)
        return Resolution(card=card, effect=Effect.WEAPON_KILL, player=updated, damage=damage)
    damage = card.value
    return Resolution(card=card, effect=Effect.BAREHANDED, player=player.damaged(damage), damage=damage)


def equip_weapon(player: PlayerState, card: Card) -> Resolution:
    return Resolution(
        card=card,
        effect=Effect.EQUIPPED,
        player=player.with_weapon(Weapon(card=card)),
        replaced_weapon=player.weapon,
    )


def drink_potion(player: PlayerState, card: Card) -> Resolution:
    if player.potion_used_this_turn:
        return Resolution(card=card, effect=Effect.POTION_WASTED, player=player)
    heal = min(card.value, MAX_HEALTH - player.health)
    updated = replace(player.healed(heal), potion_used_this_turn=True)
    return Resolution(card=card, effect=Effect.HEALED, player=updated, healed=heal)


def resolve_card(player: PlayerState, card: Card, *, use_weapon: bool = True) -> Resolution:
    """Apply ``card`` to ``player`` and return the resolution.

    ``use_weapon`` only matters for monsters: passing False fights barehanded
    even when the equipped weapon could be used, leaving it undegraded.
    """
    if card.is_monster():
        return fight_monster(player, card, use_weapon=use_weapon)
    if card.is_weapon():
        return equip_weapon(player, card)
    return drink_potion(player, card)
