import pytest

from skirmish.battle import BattleAction, BattleResult, BattleSystem, StatusEffect
from skirmish.enemy import Enemy
from skirmish.entity import Entity
from skirmish.items import Item
from skirmish.user import User


class FixedRng:
    """Returns the same roll for every call."""

    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        return max(low, min(self.value, high))

    def randrange(self, stop):
        return min(self.value, stop - 1)


def scripted(*answers):
    it = iter(answers)
    return lambda prompt="": next(it)


def make_battle(player_damage=10, battle_roll=0, inputs=(), enemy_roll=0):
    player = User("Hero", 100, player_damage, 5, rng=FixedRng(0))
    enemy = Enemy.goblin()
    enemy.rng = FixedRng(enemy_roll)
    battle = BattleSystem(
        player, enemy, rng=FixedRng(battle_roll), input_func=scripted(*inputs), delay=0
    )
    return battle


def test_new_battle_is_in_progress():
    battle = make_battle()
    assert battle.result is BattleResult.IN_PROGRESS
    assert battle.turn_count == 0
    assert battle.battle_ended is False


def test_attack_reduces_enemy_health_by_damage_minus_defense():
    battle = make_battle(player_damage=10)
    before = battle.enemy.health
    assert battle.execute_player_action(BattleAction.ATTACK) is True
    assert battle.enemy.health == before - (10 - battle.enemy.defense)


def test_check_battle_end_victory():
    battle = make_battle()
    battle.enemy.health = 0
    battle.check_battle_end()
    assert battle.result is BattleResult.PLAYER_VICTORY
    assert battle.battle_ended is True


def test_check_battle_end_defeat():
    battle = make_battle()
    battle.player.health = 0
    battle.check_battle_end()
    assert battle.result is BattleResult.PLAYER_DEFEAT


def test_action_rejected_after_battle_ended():
    battle = make_battle()
    battle.battle_ended = True
    health = battle.enemy.health
    assert battle.execute_player_action(BattleAction.ATTACK) is False
    assert battle.enemy.health == health


def test_run_succeeds_on_low_roll():
    battle = make_battle(battle_roll=0)
    battle.execute_player_action(BattleAction.RUN)
    assert battle.result is BattleResult.ESCAPED
    assert battle.battle_ended is True


def test_run_fails_on_high_roll(capsys):
    battle = make_battle(battle_roll=99)
    battle.execute_player_action(BattleAction.RUN)
    assert battle.result is BattleResult.IN_PROGRESS
    assert "Couldn't escape!" in capsys.readouterr().out


def test_bomb_is_used_on_enemy_and_removed():
    battle = make_battle()
    battle.player.inventory = [Item.bomb()]
    before = battle.enemy.health
    battle.execute_player_action(BattleAction.USE_ITEM, 0)
    assert battle.enemy.health == max(before - (30 - battle.enemy.defense), 0)
    assert battle.player.inventory == []


def test_potion_heals_player():
    battle = make_battle()
    battle.player.inventory = [Item.small_potion()]
    battle.player.health = 50
    battle.execute_player_action(BattleAction.USE_ITEM, 0)
    assert battle.player.health == 70


def test_missing_item_selection(capsys):
    battle = make_battle()
    battle.execute_player_action(BattleAction.USE_ITEM)
    assert "No item selected." in capsys.readouterr().out


def test_missing_ability_selection(capsys):
    battle = make_battle()
    battle.execute_player_action(BattleAction.USE_ABILITY)
    assert "No ability selected." in capsys.readouterr().out


def test_poison_deals_tenth_of_max_health():
    battle = make_battle()
    dummy = Entity("Dummy", 50, 1)
    battle.apply_status_effects(dummy, [StatusEffect("poison", 2)])
    assert dummy.health == 45


def test_freeze_deals_no_damage():
    battle = make_battle()
    dummy = Entity("Dummy", 50, 1)
    battle.apply_status_effects(dummy, [StatusEffect("freeze", 2)])
    assert dummy.health == 50


def test_update_status_effects_counts_down_and_removes(capsys):
    battle = make_battle()
    effects = [StatusEffect("poison", 2), StatusEffect("burn", 1)]
    battle.update_status_effects(effects)
    assert effects == [StatusEffect("poison", 1)]
    assert "burn effect has worn off!" in capsys.readouterr().out


def test_display_battle_status(capsys):
    battle = make_battle()
    battle.enemy_status_effects.append(StatusEffect("burn", 3))
    battle.display_battle_status()
    out = capsys.readouterr().out
    assert "Hero: HP 100/100" in out
    assert "Goblin: HP 30/30" in out
    assert "Goblin's status: burn(3 turns)" in out


def test_display_player_options(capsys):
    battle = make_battle()
    battle.display_player_options()
    assert capsys.readouterr().out.splitlines() == [
        "1. Attack",
        "2. Use Ability",
        "3. Use Item",
        "4. Run",
    ]


def test_start_battle_victory_gives_experience_and_drop():
    battle = make_battle(player_damage=100, inputs=["1"], enemy_roll=0)
    assert battle.start_battle() is BattleResult.PLAYER_VICTORY
    assert battle.player.experience == battle.enemy.experience_value
    assert [item.name for item in battle.player.inventory] == ["Small Potion"]
    assert battle.turn_count == 1


def test_start_battle_invalid_choice_then_escape():
    battle = make_battle(battle_roll=0, inputs=["9", "abc", "4"])
    assert battle.start_battle() is BattleResult.ESCAPED
    assert battle.turn_count == 1


def test_start_battle_going_back_from_ability_menu():
    battle = make_battle(battle_roll=0, inputs=["2", "0", "3", "0", "4"])
    assert battle.start_battle() is BattleResult.ESCAPED
    assert battle.turn_count == 1


def test_start_battle_defeat():
    player = User("Hero", 100, 10, 0, rng=FixedRng(0))
    player.health = 1
    enemy = Enemy.goblin()
    enemy.rng = FixedRng(0)
    battle = BattleSystem(
        player, enemy, rng=FixedRng(99), input_func=scripted("4"), delay=0
    )
    assert battle.start_battle() is BattleResult.PLAYER_DEFEAT
    assert player.is_alive is False
    assert battle.turn_count == 2


def test_process_enemy_turn_applies_and_ages_effects():
    battle = make_battle(enemy_roll=100)
    battle.enemy = Enemy("Dummy", 50, 1, 0, battle.enemy.enemy_type, 5)
    battle.enemy.rng = FixedRng(100)
    battle.enemy_status_effects.append(StatusEffect("burn", 1))
    battle.process_enemy_turn()
    assert battle.enemy.health == 45
    assert battle.enemy_status_effects == []


def test_exhausted_input_raises():
    battle = make_battle(inputs=[])
    with pytest.raises(StopIteration):
        battle.start_battle()