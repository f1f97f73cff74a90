"""Common bot strategy interfaces."""

from __future__ import annotations

from typing import Tuple

from scoundrel.game import DungeonGame


class BotStrategy:
    """Base class for bot policies."""

    name: str = "BaseBot"

    def on_game_start(self, game: DungeonGame) -> None:
        """Optional hook invoked once a new dungeon has been dealt."""
        return None

    def should_skip(self, game: DungeonGame) -> bool:
        """Return True to skip the current room instead of playing a card."""
        return False

    def choose_play(self, game: DungeonGame) -> Tuple[int, bool]:
        """Return (room_index, use_weapon)."""
        if game.room.is_empty():
            raise RuntimeError("No cards available for bot.")
        return 0, True
