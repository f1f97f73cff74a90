"""Dungeon deck creation and drawing for Scoundrel."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Iterable, Iterator, List, Optional

from .cards import MAX_RANK, MIN_RANK, Card, Suit

DECK_SIZE = 44

# Red cards stop at ten: no face cards or aces among weapons and potions.
RED_MAX_RANK = 10


def ordered_cards() -> List[Card]:
    """Return the canonical 44-card dungeon in a fixed order."""
    cards = [Card(suit, rank) for suit in (Suit.SPADES, Suit.CLUBS) for rank in range(MIN_RANK, MAX_RANK + 1)]
    cards.extend(Card(suit, rank) for suit in (Suit.HEARTS, Suit.DIAMONDS) for rank in range(MIN_RANK, RED_MAX_RANK + 1))
    return cards


@dataclass
class Deck:
    """Face-down dungeon pile; the front of ``cards`` is the top of the pile."""

    cards: List[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cards = list(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def is_empty(self) -> bool:
        return not self.cards

    def draw(self) -> Optional[Card]:
        """Remove and return the top card, or None once the dungeon is exhausted."""
        if not self.cards:
            return None
        return self.cards.pop(0)

    def put_bottom(self, cards: Iterable[Card]) -> None:
        self.cards.extend(cards)


def build_deck(seed: Optional[int] = None, *, rng: Optional[Random] = None) -> Deck:
    """Return a shuffled 44-card deck.

    The same ``seed`` always yields the same ordering. A caller-supplied ``rng``
    takes precedence over ``seed``.
    """
    cards = ordered_cards()
    if rng is None:
        rng = Random(seed)
    rng.shuffle(cards)
    if len(cards) != DECK_SIZE:
        raise ValueError(f"Deck must contain exactly {DECK_SIZE} cards.")
    return Deck(cards)
