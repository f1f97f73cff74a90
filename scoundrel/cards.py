"""Card-related data structures and helpers for Scoundrel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Union


class Suit(Enum):
    SPADES = auto()
    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()

    def __str__(self) -> str:
        return self.name.lower()


class CardKind(Enum):
    MONSTER = auto()
    WEAPON = auto()
    POTION = auto()

    def __str__(self) -> str:
        return self.name.lower()


# Black suits are monsters, diamonds are weapons, hearts are potions.
SUIT_KINDS: dict[Suit, CardKind] = {
    Suit.SPADES: CardKind.MONSTER,
    Suit.CLUBS: CardKind.MONSTER,
    Suit.DIAMONDS: CardKind.WEAPON,
    Suit.HEARTS: CardKind.POTION,
}

SUIT_SYMBOLS: dict[Suit, str] = {
    Suit.SPADES: "♠",
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
}

FACE_LABELS: dict[int, str] = {11: "J", 12: "Q", 13: "K", 14: "A"}

MIN_RANK = 2
MAX_RANK = 14


@dataclass(frozen=True)
class Card:
    """Immutable representation of a dungeon card."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise ValueError(f"Card rank must be between {MIN_RANK} and {MAX_RANK}, got {self.rank}.")

    @property
    def kind(self) -> CardKind:
        return SUIT_KINDS[self.suit]

    @property
    def value(self) -> int:
        """Damage, attack power or heal amount depending on the card kind."""
        return self.rank

    def is_monster(self) -> bool:
        return self.kind is CardKind.MONSTER

    def is_weapon(self) -> bool:
        return self.kind is CardKind.WEAPON

    def is_potion(self) -> bool:
        return self.kind is CardKind.POTION


def rank_label(rank: int) -> str:
    return FACE_LABELS.get(rank, str(rank))


def card_label(card: Card) -> str:
    return f"{rank_label(card.rank)}{SUIT_SYMBOLS[card.suit]}"


def card_effect_text(card: Card) -> str:
    if card.is_monster():
        return f"Take {card.value} damage"
    if card.is_weapon():
        return f"{card.value} attack power"
    return f"Heal {card.value} HP"


def serialize_card(card: Card) -> dict[str, Union[str, int]]:
    return {"suit": card.suit.name.lower(), "rank": card.rank}


def deserialize_card(payload: Mapping[str, Union[str, int]]) -> Card:
    suit_name = str(payload["suit"]).upper()
    return Card(Suit[suit_name], int(payload["rank"]))
