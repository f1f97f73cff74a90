"""Random baseline bot."""

from __future__ import annotations

import random
from typing import Optional, Tuple

from scoundrel.game import DungeonGame

from .base import BotStrategy


class RandomBot(BotStrategy):
    name = "Random"

    def __init__(self, seed: Optional[int] = None, skip_chance: float = 0.2) -> None:
        self._rng = random.Random(seed)
        self.skip_chance = skip_chance

    def should_skip(self, game: DungeonGame) -> bool:
        return game.room.can_skip() and self._rng.random() < self.skip_chance

    def choose_play(self, game: DungeonGame) -> Tuple[int, bool]:
        if game.room.is_empty():
            raise RuntimeError("No cards available for bot.")
        index = self._rng.randrange(len(game.room))
        return index, self._rng.random() < 0.8
