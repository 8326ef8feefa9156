"""The player character, who gains experience and levels up."""

from __future__ import annotations

from typing import Any, Optional

from .entity import Entity


class User(Entity):
    """A player-controlled entity with experience and levels."""

    def __init__(
        self,
        name: str,
        health: int,
        damage: int,
        defense: int = 0,
        *,
        rng: Optional[Any] = None,
    ) -> None:
        super().__init__(name, health, damage, defense, rng=rng)
        self.experience = 0
        self.exp_to_next_level = 100
        self.success_rate = 90

    def gain_experience(self, amount: int) -> None:
        """Add experience, levelling up as many times as it allows."""
        if amount <= 0:
            return
        self.experience += amount
        print(f"{self.name} gained {amount} experience!")
        if self.experience >= self.exp_to_next_level:
            self.level_up()

    def level_up(self) -> bool:
        """Level up while there is enough experience; return whether any level was gained."""
        if self.experience < self.exp_to_next_level:
            return False

        while self.experience >= self.exp_to_next_level:
            self.level += 1
            self.max_health += 10
            self.health = self.max_health
            self.damage += 2
            self.defense += 1
            self.experience -= self.exp_to_next_level
            self.exp_to_next_level = int(self.exp_to_next_level * 1.5)

            print(f"\n*** {self.name} LEVEL UP! ***")
            print(f"Level {self.level} reached!")
            print(f"Max health increased to {self.max_health}!")
            print(f"Damage increased to {self.damage}!")
            print(f"Defense increased to {self.defense}!")

        return True