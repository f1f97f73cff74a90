"""Core rules engine package for Scoundrel."""

__all__ = [
    "cards",
    "deck",
    "player",
    "combat",
    "room",
    "game",
    "config",
    "service",
]
