import pytest

from skirmish.abilities import Ability
from skirmish.enemy import Enemy, EnemyType
from skirmish.entity import Entity


class ScriptedRng:
    """Hands out pre-set rolls in order."""

    def __init__(self, *values):
        self.values = list(values)

    def randint(self, low, high):
        return self.values.pop(0)

    def randrange(self, *args):
        return self.values.pop(0)


def hero(defense=0):
    return Entity("Hero", 100, 10, defense)


def test_goblin_stats():
    g = Enemy.goblin()
    assert (g.name, g.health, g.damage, g.defense) == ("Goblin", 30, 5, 2)
    assert g.enemy_type is EnemyType.NORMAL
    assert g.experience_value == 10
    assert g.drop_rate == pytest.approx(0.3)
    assert g.success_rate == 85
    assert g.weaknesses == [("fire", 1.5)]
    assert g.resistances == []


def test_orc_stats():
    o = Enemy.orc()
    assert (o.name, o.max_health, o.damage, o.defense) == ("Orc", 60, 8, 4)
    assert o.weaknesses == [("magic", 1.3)]
    assert o.resistances == [("physical", 0.8)]


def test_dragon_uses_default_success_rate():
    d = Enemy.dragon()
    assert d.enemy_type is EnemyType.FIRE
    assert d.success_rate == 75
    assert d.resistances == [("physical", 0.7), ("fire", 0.1)]


def test_boss_takes_name_and_high_success_rate():
    b = Enemy.boss("Area 5 Boss")
    assert b.name == "Area 5 Boss"
    assert b.enemy_type is EnemyType.BOSS
    assert b.success_rate == 95
    assert b.max_health == 300


def test_weakness_and_resistance_filters():
    e = Enemy("Slime", 10, 1, 0, EnemyType.WATER, 1)
    e.add_weakness("ice", 1.0)
    e.add_weakness("ice", 0.5)
    e.add_resistance("rock", 1.0)
    e.add_resistance("rock", 2.0)
    assert e.weaknesses == []
    assert e.resistances == []


@pytest.mark.parametrize("roll,expected", [(0, True), (29, True), (30, False), (99, False)])
def test_goblin_drop_roll(roll, expected):
    g = Enemy.goblin()
    g.rng = ScriptedRng(roll)
    assert g.calculate_drop() is expected


def test_boss_always_drops():
    b = Enemy.boss("Big")
    b.rng = ScriptedRng(99)
    assert b.calculate_drop() is True


def test_decide_action_against_dead_target():
    g = Enemy.goblin()
    target = hero()
    target.take_damage(1000)
    assert g.decide_action(target) == 0
    assert g.decide_action(None) == 0


def test_decide_action_attack_hits():
    g = Enemy.goblin()
    g.rng = ScriptedRng(10, 0)
    target = hero()
    dealt = g.decide_action(target)
    assert dealt == g.damage
    assert target.health == target.max_health - dealt


def test_decide_action_attack_reduced_by_defense(capsys):
    g = Enemy.goblin()
    g.rng = ScriptedRng(10, 0)
    target = hero(defense=3)
    dealt = g.decide_action(target)
    assert 0 < dealt < g.damage
    assert target.health == target.max_health - dealt
    assert "Hero's defense reduced the damage to" in capsys.readouterr().out


def test_decide_action_attack_misses():
    g = Enemy.goblin()
    g.rng = ScriptedRng(10, 100)
    target = hero()
    assert g.decide_action(target) == 0
    assert target.health == target.max_health


def test_decide_action_uses_ability(capsys):
    g = Enemy.goblin()
    g.learn_ability(Ability.fireball())
    g.rng = ScriptedRng(75, 0, 0, 100)
    target = hero()
    assert g.decide_action(target) == 0
    assert target.health == target.max_health - 25
    assert "Goblin uses a special ability!" in capsys.readouterr().out


def test_decide_action_without_abilities_at_full_health_hesitates(capsys):
    g = Enemy.goblin()
    g.rng = ScriptedRng(75)
    assert g.decide_action(hero()) == 0
    assert "Goblin hesitates and does nothing!" in capsys.readouterr().out


def test_decide_action_heals_when_wounded():
    g = Enemy.goblin()
    g.health = 5
    g.rng = ScriptedRng(90)
    before = g.health
    result = g.decide_action(hero())
    assert result < 0
    assert g.health - before == -result


def test_decide_action_high_roll_hesitates_even_when_wounded():
    g = Enemy.goblin()
    g.health = 5
    g.rng = ScriptedRng(96)
    assert g.decide_action(hero()) == 0
    assert g.health == 5