"""Base class shared by the player and the enemies: health, inventory and abilities."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, List, Optional

if TYPE_CHECKING:
    from .abilities import Ability
    from .items import Item


class Entity:
    """A combatant with health, attack power, defense, items and abilities."""

    def __init__(
        self,
        name: str,
        health: int,
        damage: int,
        defense: int = 0,
        *,
        rng: Optional[Any] = None,
    ) -> None:
        self.name = name
        self.health = health
        self.max_health = health
        self.damage = damage
        self.defense = defense
        self.level = 1
        self.success_rate = 85
        self.inventory: List["Item"] = []
        self.abilities: List["Ability"] = []
        self.rng = rng if rng is not None else random

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, hp={self.health}/{self.max_health})"

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def attack(self, success: bool = False, amount: int = 0) -> int:
        """Return the raw damage of an attack, or 0 if it misses.

        When ``success`` is false the hit is rolled against the success rate.
        A positive ``amount`` overrides the entity's own damage.
        """
        if not success:
            success = self.rng.randint(0, 100) <= self.success_rate

        if success:
            return amount if amount > 0 else self.damage

        print(f"{self.name}'s attack missed!")
        return 0

    def take_damage(self, amount: int) -> int:
        """Take ``amount`` damage reduced by defense; return the damage actually taken."""
        actual = max(amount - self.defense, 0)
        self.health = max(self.health - actual, 0)
        return actual

    def heal(self, amount: int) -> int:
        """Restore up to ``amount`` health, capped at the maximum; return what was gained."""
        old = self.health
        self.health = min(self.health + amount, self.max_health)
        return self.health - old

    def add_item(self, item: Optional["Item"]) -> bool:
        """Put ``item`` in the inventory; return False if there is no item."""
        if item is None:
            return False
        self.inventory.append(item)
        return True

    def use_item(self, index: int, target: Optional["Entity"] = None) -> bool:
        """Use the item at ``index``, optionally on ``target``; drop it once spent."""
        item = self.inventory_item(index)
        if item is None:
            return False
        if not item.use(self, target):
            return False
        if not item.is_usable:
            del self.inventory[index]
        return True

    def inventory_item(self, index: int) -> Optional["Item"]:
        """Return the item at ``index``, or None if the index is out of range."""
        if 0 <= index < len(self.inventory):
            return self.inventory[index]
        return None

    def list_inventory(self) -> None:
        """Print the inventory as a numbered list."""
        if not self.inventory:
            print("Inventory is empty.")
            return
        for number, item in enumerate(self.inventory, start=1):
            print(f"{number}. {item.name} ({item.uses} uses left)")

    def learn_ability(self, ability: Optional["Ability"]) -> bool:
        """Add ``ability`` to the known abilities; return False if there is none."""
        if ability is None:
            return False
        self.abilities.append(ability)
        return True

    def use_ability(self, index: int, target: Optional["Entity"]) -> bool:
        """Use the ability at ``index`` on ``target``; return whether it succeeded."""
        if target is None or not 0 <= index < len(self.abilities):
            return False
        return self.abilities[index].use(self, target, self.rng)

    def list_abilities(self) -> None:
        """Print the known abilities as a numbered list."""
        if not self.abilities:
            print("No abilities learned.")
            return
        for number, ability in enumerate(self.abilities, start=1):
            print(f"{number}. {ability.name} - {ability.description}")