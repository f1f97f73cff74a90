"""Player state: health, equipped weapon and the per-room potion flag."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .cards import Card

MAX_HEALTH = 20


@dataclass(frozen=True)
class Weapon:
    """An equipped weapon and its degradation ceiling.

    ``ceiling`` is the rank of the last monster slain with this weapon. A fresh
    weapon has no ceiling and can be used against any monster.
    """

    card: Card
    ceiling: Optional[int] = None

    @property
    def power(self) -> int:
        return self.card.value

    def can_use_against(self, monster_rank: int) -> bool:
        if self.ceiling is None:
            return True
        return monster_rank < self.ceiling

    def degraded_to(self, monster_rank: int) -> "Weapon":
        return replace(self, ceiling=monster_rank)

    def durability_text(self) -> str:
        if self.ceiling is None:
            return "Full"
        if self.ceiling <= 2:
            return "Broken"
        return f"Hits up to {self.ceiling - 1}"


@dataclass(frozen=True)
class PlayerState:
    health: int = MAX_HEALTH
    weapon: Optional[Weapon] = None
    potion_used_this_turn: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.health <= MAX_HEALTH:
            raise ValueError(f"Health must be between 0 and {MAX_HEALTH}, got {self.health}.")

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def damaged(self, amount: int) -> "PlayerState":
        return replace(self, health=max(0, self.health - amount))

    def healed(self, amount: int) -> "PlayerState":
        return replace(self, health=min(MAX_HEALTH, self.health + amount))

    def with_weapon(self, weapon: Optional[Weapon]) -> "PlayerState":
        return replace(self, weapon=weapon)

    def start_room(self) -> "PlayerState":
        return replace(self, potion_used_this_turn=False)
