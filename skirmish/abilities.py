"""Combat abilities that entities can learn and use in battle."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional


class AbilityType(Enum):
    """Broad category of an ability, deciding what it does when used."""

    PHYSICAL = auto()
    MAGICAL = auto()
    HEALING = auto()
    BUFF = auto()
    DEBUFF = auto()


class SecondaryEffect(Enum):
    """Status effect an ability may inflict after a successful hit."""

    NONE = auto()
    POISON = auto()
    BURN = auto()
    FREEZE = auto()
    PARALYZE = auto()
    BLIND = auto()
    REGEN = auto()
    STUN = auto()


_EFFECT_MESSAGES = {
    SecondaryEffect.POISON: "{} was poisoned! They'll take damage over time.",
    SecondaryEffect.BURN: "{} was burned! They'll take damage over time.",
    SecondaryEffect.FREEZE: "{} was frozen! They might miss their next turn.",
    SecondaryEffect.PARALYZE: "{} was paralyzed! Their accuracy is reduced.",
    SecondaryEffect.BLIND: "{} was blinded! Their accuracy is severely reduced.",
    SecondaryEffect.STUN: "{} was stunned! They'll miss their next turn.",
    SecondaryEffect.REGEN: "{} feels regenerative energy! They'll heal over time.",
}


def _roll(rng: Optional[Any]) -> int:
    """Return a roll in the inclusive range 0..100."""
    source = rng if rng is not None else random
    return source.randint(0, 100)


@dataclass
class Ability:
    """A skill with a damage value, a cost, a success rate and an optional side effect."""

    name: str
    description: str
    damage: int
    mana_cost: int
    success_rate: int
    ability_type: AbilityType
    is_ranged: bool = False
    secondary_effect: SecondaryEffect = SecondaryEffect.NONE
    secondary_effect_chance: int = 0
    secondary_effect_power: int = 0
    secondary_effect_duration: int = 0

    def use(self, user, target, rng=None) -> bool:
        """Use the ability from ``user`` on ``target``; return whether it succeeded."""
        if user is None or target is None or not target.is_alive:
            return False

        if _roll(rng) > self.success_rate:
            print(f"{user.name} tried to use {self.name} but failed!")
            return False

        if self.ability_type in (AbilityType.PHYSICAL, AbilityType.MAGICAL):
            dealt = target.take_damage(self.damage)
            print(f"{user.name} used {self.name} on {target.name} dealing {dealt} damage!")
            self.apply_secondary_effect(target, rng)
        elif self.ability_type is AbilityType.HEALING:
            healed = user.heal(self.damage)
            print(f"{user.name} used {self.name} and healed for {healed} health!")
        elif self.ability_type is AbilityType.BUFF:
            print(f"{user.name} used {self.name} to boost their stats!")
        elif self.ability_type is AbilityType.DEBUFF:
            print(f"{user.name} used {self.name} to weaken {target.name}!")
            self.apply_secondary_effect(target, rng)

        return True

    def apply_secondary_effect(self, target, rng=None) -> bool:
        """Try to inflict the secondary effect on ``target``; return whether it landed."""
        if self.secondary_effect is SecondaryEffect.NONE or target is None:
            return False

        if _roll(rng) > self.secondary_effect_chance:
            return False

        message = _EFFECT_MESSAGES.get(self.secondary_effect)
        if message is None:
            return False
        print(message.format(target.name))
        return True

    @classmethod
    def fireball(cls) -> "Ability":
        return cls(
            "Fireball",
            "A ball of fire that deals damage and may cause burning",
            25,
            15,
            90,
            AbilityType.MAGICAL,
            True,
            SecondaryEffect.BURN,
            30,
            5,
            3,
        )

    @classmethod
    def heal(cls) -> "Ability":
        return cls(
            "Heal",
            "A healing spell that restores health",
            20,
            20,
            100,
            AbilityType.HEALING,
        )

    @classmethod
    def poison_strike(cls) -> "Ability":
        return cls(
            "Poison Strike",
            "A poisoned blade that deals damage and may poison the target",
            15,
            10,
            85,
            AbilityType.PHYSICAL,
            False,
            SecondaryEffect.POISON,
            40,
            3,
            4,
        )

    @classmethod
    def stun_blow(cls) -> "Ability":
        return cls(
            "Stun Blow",
            "A powerful strike that may stun the target",
            20,
            15,
            75,
            AbilityType.PHYSICAL,
            False,
            SecondaryEffect.STUN,
            25,
            1,
            1,
        )

    @classmethod
    def ice_blast(cls) -> "Ability":
        return cls(
            "Ice Blast",
            "A blast of freezing cold that damages and may freeze the target",
            20,
            20,
            85,
            AbilityType.MAGICAL,
            True,
            SecondaryEffect.FREEZE,
            20,
            1,
            1,
        )