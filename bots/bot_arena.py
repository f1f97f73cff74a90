"""Simple bot arena for Scoundrel."""

from __future__ import annotations

import argparse
from typing import Dict, Iterable

from scoundrel.game import DungeonGame, GameStatus

from .base import BotStrategy
from .baseline_greedy import GreedyBot
from .random_bot import RandomBot

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "greedy": GreedyBot,
    "random": RandomBot,
}

# Upper bound on commands per game; skips can only alternate with plays.
MAX_COMMANDS = 500


def play_game(game: DungeonGame, bot: BotStrategy) -> GameStatus:
    bot.on_game_start(game)
    for _ in range(MAX_COMMANDS):
        if game.is_over():
            return game.status
        if bot.should_skip(game):
            game.submit_skip()
            continue
        index, use_weapon = bot.choose_play(game)
        game.submit_play(index, use_weapon=use_weapon)
    raise RuntimeError(f"Bot {bot.name} did not finish the game within {MAX_COMMANDS} commands.")


def run_games(bot: BotStrategy, *, n_games: int = 10, seed: int | None = None) -> dict:
    history = []
    for idx in range(n_games):
        game_seed = None if seed is None else seed + idx
        game = DungeonGame(seed=game_seed)
        status = play_game(game, bot)
        history.append(
            {
                "seed": game.seed,
                "status": str(status),
                "health": game.player.health,
                "turns": game.turn_number,
                "deck_remaining": len(game.deck),
            }
        )
    wins = sum(1 for entry in history if entry["status"] == "won")
    return {"wins": wins, "losses": len(history) - wins, "history": history}


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot through several dungeons.")
    parser.add_argument("--bot", default="greedy", choices=BOT_REGISTRY.keys())
    parser.add_argument("--n", type=int, default=10, help="Number of games to play.")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args(argv)

    bot = BOT_REGISTRY[args.bot]()
    results = run_games(bot, n_games=args.n, seed=args.seed)

    print(f"{bot.name} won {results['wins']}/{args.n} games")
    survivors = [entry["health"] for entry in results["history"] if entry["status"] == "won"]
    if survivors:
        print(f"Average health on escape: {sum(survivors) / len(survivors):.2f}")


if __name__ == "__main__":
    main()
