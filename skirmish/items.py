"""Consumable and key items that entities carry in their inventory."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ItemType(Enum):
    """What an item does when used."""

    HEALING = auto()
    MANA = auto()
    DAMAGE = auto()
    BUFF = auto()
    DEBUFF = auto()
    KEY_ITEM = auto()


class ItemRarity(Enum):
    """How rare an item is."""

    COMMON = auto()
    UNCOMMON = auto()
    RARE = auto()
    EPIC = auto()
    LEGENDARY = auto()


@dataclass
class Item:
    """An item with a power value and a number of uses; negative uses means unlimited."""

    name: str
    description: str
    item_type: ItemType
    rarity: ItemRarity
    value: int
    uses: int = 1

    @property
    def is_usable(self) -> bool:
        return self.uses != 0

    def decrement_uses(self) -> None:
        """Spend one use; unlimited and exhausted items are left as they are."""
        if self.uses > 0:
            self.uses -= 1

    def use(self, user, target=None) -> bool:
        """Use the item from ``user``, optionally on ``target``; return whether it was spent."""
        if not self.is_usable:
            print("This item cannot be used anymore.")
            return False

        success = False

        if self.item_type is ItemType.HEALING:
            if user is not None:
                healed = user.heal(self.value)
                print(f"{user.name} used {self.name} and healed for {healed} health!")
                success = True
        elif self.item_type is ItemType.MANA:
            print(f"{user.name} used {self.name} and restored energy!")
            success = True
        elif self.item_type is ItemType.DAMAGE:
            if target is not None and target.is_alive:
                before = target.health
                target.take_damage(self.value)
                actual = before - target.health
                print(f"{user.name} used {self.name} on {target.name} dealing {self.value} damage!")
                if actual < self.value:
                    print(f"{target.name}'s defense reduced the damage to {actual}.")
                success = True
            else:
                print("No valid target for this item.")
        elif self.item_type is ItemType.BUFF:
            print(f"{user.name} used {self.name} and feels stronger!")
            success = True
        elif self.item_type is ItemType.DEBUFF:
            if target is not None and target.is_alive:
                print(f"{user.name} used {self.name} on {target.name} weakening them!")
                success = True
            else:
                print("No valid target for this item.")
        elif self.item_type is ItemType.KEY_ITEM:
            print("This item cannot be used in combat.")

        if success:
            self.decrement_uses()
        return success

    @classmethod
    def small_potion(cls) -> "Item":
        return cls(
            "Small Potion",
            "A small potion that restores a little health",
            ItemType.HEALING,
            ItemRarity.COMMON,
            20,
        )

    @classmethod
    def large_potion(cls) -> "Item":
        return cls(
            "Large Potion",
            "A large potion that restores a significant amount of health",
            ItemType.HEALING,
            ItemRarity.UNCOMMON,
            50,
        )

    @classmethod
    def revive_potion(cls) -> "Item":
        return cls(
            "Revive Potion",
            "A magical potion that can bring an ally back from the brink of death",
            ItemType.HEALING,
            ItemRarity.RARE,
            100,
        )

    @classmethod
    def bomb(cls) -> "Item":
        return cls(
            "Bomb",
            "A small explosive that deals damage to an enemy",
            ItemType.DAMAGE,
            ItemRarity.UNCOMMON,
            30,
        )

    @classmethod
    def strength_elixir(cls) -> "Item":
        return cls(
            "Strength Elixir",
            "A powerful elixir that temporarily increases attack power",
            ItemType.BUFF,
            ItemRarity.RARE,
            5,
            3,
        )