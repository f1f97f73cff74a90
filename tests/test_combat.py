import pytest

from scoundrel.cards import Card, Suit
from scoundrel.combat import Effect, resolve_card
from scoundrel.player import MAX_HEALTH, PlayerState, Weapon


def monster(rank):
    return Card(Suit.SPADES, rank)


def weapon(rank):
    return Card(Suit.DIAMONDS, rank)


def potion(rank):
    return Card(Suit.HEARTS, rank)


def test_monster_without_weapon_deals_full_damage():
    result = resolve_card(PlayerState(), monster(10))
    assert result.effect is Effect.BAREHANDED
    assert result.damage == 10
    assert result.player.health == 10


def test_fresh_weapon_kills_any_rank_then_degrades():
    player = PlayerState(weapon=Weapon(card=weapon(5)))
    result = resolve_card(player, monster(14))
    assert result.effect is Effect.WEAPON_KILL
    assert result.damage == 9
    assert result.player.weapon.ceiling == 14

    same_rank = resolve_card(result.player, monster(14))
    assert same_rank.effect is Effect.BAREHANDED
    assert same_rank.damage == 14
    assert same_rank.player.weapon.ceiling == 14

    lower = resolve_card(result.player, monster(13))
    assert lower.effect is Effect.WEAPON_KILL
    assert lower.damage == 8
    assert lower.player.weapon.ceiling == 13


def test_weapon_stronger_than_monster_takes_no_damage():
    player = PlayerState(weapon=Weapon(card=weapon(9)))
    result = resolve_card(player, monster(6))
    assert result.damage == 0
    assert result.player.health == MAX_HEALTH


def test_barehanded_choice_keeps_weapon_sharp():
    player = PlayerState(weapon=Weapon(card=weapon(7)))
    result = resolve_card(player, monster(3), use_weapon=False)
    assert result.effect is Effect.BAREHANDED
    assert result.damage == 3
    assert result.player.weapon.ceiling is None


def test_new_weapon_replaces_degraded_one():
    old = Weapon(card=weapon(8), ceiling=4)
    result = resolve_card(PlayerState(weapon=old), weapon(3))
    assert result.effect is Effect.EQUIPPED
    assert result.replaced_weapon == old
    assert result.player.weapon == Weapon(card=weapon(3))
    assert result.player.weapon.ceiling is None


def test_second_potion_in_room_is_wasted():
    first = resolve_card(PlayerState(health=5), potion(6))
    assert first.effect is Effect.HEALED
    assert first.player.health == 11
    assert first.player.potion_used_this_turn

    second = resolve_card(first.player, potion(9))
    assert second.effect is Effect.POTION_WASTED
    assert second.healed == 0
    assert second.player.health == 11


def test_heal_is_capped():
    result = resolve_card(PlayerState(health=17), potion(10))
    assert result.healed == 3
    assert result.player.health == MAX_HEALTH


def test_damage_floors_at_zero():
    result = resolve_card(PlayerState(health=4), monster(12))
    assert result.player.health == 0
    assert not result.player.is_alive


def test_resolution_does_not_mutate_input():
    player = PlayerState(health=12, weapon=Weapon(card=weapon(4)))
    resolve_card(player, monster(9))
    assert player.health == 12
    assert player.weapon.ceiling is None


def test_player_health_bounds_enforced():
    with pytest.raises(ValueError):
        PlayerState(health=21)
    with pytest.raises(ValueError):
        PlayerState(health=-1)


def test_weapon_durability_text():
    assert Weapon(card=weapon(5)).durability_text() == "Full"
    assert Weapon(card=weapon(5), ceiling=8).durability_text() == "Hits up to 7"
    assert Weapon(card=weapon(5), ceiling=2).durability_text() == "Broken"
