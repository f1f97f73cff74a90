"""Baseline greedy bot."""

from __future__ import annotations

from typing import List, Tuple

from scoundrel.cards import Card
from scoundrel.combat import resolve_card, weapon_usable
from scoundrel.game import DungeonGame
from scoundrel.player import MAX_HEALTH, PlayerState

from .base import BotStrategy

# Monsters at or below this rank are fought barehanded to keep a fresh weapon sharp.
CHEAP_MONSTER_RANK = 4


def _room_threat(cards: List[Card], player: PlayerState) -> int:
    """Damage the room would deal if every monster had to be fought."""
    total = 0
    for card in cards:
        if not card.is_monster():
            continue
        if weapon_usable(player, card):
            assert player.weapon is not None
            total += max(0, card.value - player.weapon.power)
        else:
            total += card.value
    return total


def _wants_barehanded(card: Card, player: PlayerState) -> bool:
    weapon = player.weapon
    if weapon is None or not weapon.can_use_against(card.value):
        return False
    return card.value <= CHEAP_MONSTER_RANK and player.health > card.value + 5


def _score(card: Card, player: PlayerState) -> float:
    """Lower is better."""
    if card.is_potion():
        if player.potion_used_this_turn:
            return 10.0
        return -float(min(card.value, MAX_HEALTH - player.health))
    if card.is_weapon():
        if player.weapon is None:
            return -float(card.value) - 5.0
        current = player.weapon.power if player.weapon.ceiling is None else min(player.weapon.power, player.weapon.ceiling - 1)
        return float(current - card.value)
    use_weapon = not _wants_barehanded(card, player)
    result = resolve_card(player, card, use_weapon=use_weapon)
    if not result.player.is_alive:
        return 100.0 + result.damage
    return float(result.damage)


class GreedyBot(BotStrategy):
    name = "Greedy"

    def should_skip(self, game: DungeonGame) -> bool:
        if not game.room.can_skip():
            return False
        return _room_threat(game.room.cards, game.player) >= game.player.health

    def choose_play(self, game: DungeonGame) -> Tuple[int, bool]:
        cards = game.room.cards
        if not cards:
            raise RuntimeError("No cards available for bot.")
        player = game.player
        best_index = min(range(len(cards)), key=lambda idx: _score(cards[idx], player))
        chosen = cards[best_index]
        return best_index, not (chosen.is_monster() and _wants_barehanded(chosen, player))
