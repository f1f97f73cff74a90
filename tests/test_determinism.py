from bots.baseline_greedy import GreedyBot
from bots.bot_arena import play_game
from scoundrel.cards import Card, Suit
from scoundrel.deck import Deck
from scoundrel.game import DungeonGame


def run_fixed_game(seed: int):
    game = DungeonGame(seed=seed)
    play_game(game, GreedyBot())
    return game.log_entries, game.current_view()


def test_same_seed_same_game():
    log1, view1 = run_fixed_game(seed=42)
    log2, view2 = run_fixed_game(seed=42)
    assert log1 == log2
    assert view1 == view2


def test_seed_recorded_in_view():
    game = DungeonGame(seed=1234)
    assert game.current_view().seed == 1234
    assert DungeonGame(seed=1234).room.cards == game.room.cards


def test_unseeded_game_picks_a_seed():
    game = DungeonGame()
    assert isinstance(game.seed, int)


def test_supplied_deck_does_not_invent_a_seed():
    deck = Deck([Card(Suit.SPADES, 2), Card(Suit.HEARTS, 3)])
    game = DungeonGame(deck=deck)
    assert game.seed is None
    assert game.current_view().seed is None
