"""Enemies that fight the player and decide their own actions."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, List, Optional, Tuple

from .entity import Entity


class EnemyType(Enum):
    """Elemental kind of an enemy; bosses are their own kind."""

    NORMAL = auto()
    FIRE = auto()
    WATER = auto()
    EARTH = auto()
    WIND = auto()
    BOSS = auto()


_SUCCESS_RATES = {EnemyType.BOSS: 95, EnemyType.NORMAL: 85}
_DEFAULT_SUCCESS_RATE = 75


class Enemy(Entity):
    """A computer-controlled entity that gives experience and may drop loot."""

    def __init__(
        self,
        name: str,
        health: int,
        damage: int,
        defense: int,
        enemy_type: EnemyType,
        experience_value: int,
        drop_rate: float = 0.3,
        *,
        rng: Optional[Any] = None,
    ) -> None:
        super().__init__(name, health, damage, defense, rng=rng)
        self.enemy_type = enemy_type
        self.experience_value = experience_value
        self.drop_rate = drop_rate
        self.weaknesses: List[Tuple[str, float]] = []
        self.resistances: List[Tuple[str, float]] = []
        self.success_rate = _SUCCESS_RATES.get(enemy_type, _DEFAULT_SUCCESS_RATE)

    def add_weakness(self, damage_type: str, multiplier: float) -> None:
        """Record a weakness; multipliers of 1 or less are ignored."""
        if multiplier > 1.0:
            self.weaknesses.append((damage_type, multiplier))

    def add_resistance(self, damage_type: str, multiplier: float) -> None:
        """Record a resistance; multipliers of 1 or more are ignored."""
        if multiplier < 1.0:
            self.resistances.append((damage_type, multiplier))

    def decide_action(self, target: Optional[Entity]) -> int:
        """Pick and carry out an action against ``target``.

        Returns the damage dealt, or the negated amount healed, or 0.
        """
        if target is None or not target.is_alive:
            return 0

        decision = self.rng.randint(0, 100)

        if decision < 70:
            raw = self.attack()
            if raw > 0:
                before = target.health
                target.take_damage(raw)
                actual = before - target.health
                print(f"{self.name} attacks {target.name} for {raw} damage!")
                if actual < raw:
                    print(f"{target.name}'s defense reduced the damage to {actual}.")
                return actual
            print(f"{self.name}'s attack missed!")
            return 0

        if decision < 85 and self.abilities:
            index = self.rng.randrange(len(self.abilities))
            print(f"{self.name} uses a special ability!")
            self.use_ability(index, target)
            return 0

        if decision < 95 and self.health < self.max_health // 2:
            amount = self.max_health // 10
            self.heal(amount)
            print(f"{self.name} heals for {amount} health!")
            return -amount

        print(f"{self.name} hesitates and does nothing!")
        return 0

    def calculate_drop(self) -> bool:
        """Roll whether this enemy drops an item."""
        return self.rng.randrange(100) < int(self.drop_rate * 100)

    @classmethod
    def goblin(cls) -> "Enemy":
        enemy = cls("Goblin", 30, 5, 2, EnemyType.NORMAL, 10, 0.3)
        enemy.add_weakness("fire", 1.5)
        return enemy

    @classmethod
    def orc(cls) -> "Enemy":
        enemy = cls("Orc", 60, 8, 4, EnemyType.NORMAL, 20, 0.4)
        enemy.add_weakness("magic", 1.3)
        enemy.add_resistance("physical", 0.8)
        return enemy

    @classmethod
    def dragon(cls) -> "Enemy":
        enemy = cls("Dragon", 150, 15, 8, EnemyType.FIRE, 50, 0.6)
        enemy.add_weakness("water", 2.0)
        enemy.add_resistance("physical", 0.7)
        enemy.add_resistance("fire", 0.1)
        return enemy

    @classmethod
    def boss(cls, name: str) -> "Enemy":
        enemy = cls(name, 300, 20, 12, EnemyType.BOSS, 100, 1.0)
        enemy.add_resistance("physical", 0.5)
        enemy.add_resistance("magic", 0.7)
        return enemy