"""Turn-based battle between the player and a single enemy."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Dict, List, Optional

from .enemy import Enemy
from .entity import Entity
from .items import Item, ItemType
from .user import User

_RULE = "----------------------------------------"
_DAMAGE_OVER_TIME = ("poison", "burn")


class BattleResult(Enum):
    """Outcome of a battle."""

    IN_PROGRESS = auto()
    PLAYER_VICTORY = auto()
    PLAYER_DEFEAT = auto()
    ESCAPED = auto()


class BattleAction(Enum):
    """What the player can do on their turn."""

    ATTACK = auto()
    USE_ABILITY = auto()
    USE_ITEM = auto()
    RUN = auto()


_ACTION_LABELS: Dict[BattleAction, str] = {
    BattleAction.ATTACK: "Attack",
    BattleAction.USE_ABILITY: "Use Ability",
    BattleAction.USE_ITEM: "Use Item",
    BattleAction.RUN: "Run",
}


@dataclass
class StatusEffect:
    """A named effect lasting a number of turns."""

    name: str
    turns: int


class BattleSystem:
    """Runs a battle, alternating player and enemy turns until one side wins or the player escapes."""

    def __init__(
        self,
        player: User,
        enemy: Enemy,
        *,
        rng: Optional[Any] = None,
        input_func: Callable[[str], str] = input,
        delay: float = 1.0,
    ) -> None:
        self.player = player
        self.enemy = enemy
        self.result = BattleResult.IN_PROGRESS
        self.turn_count = 0
        self.player_turn = True
        self.battle_ended = False
        self.player_status_effects: List[StatusEffect] = []
        self.enemy_status_effects: List[StatusEffect] = []
        self.rng = rng if rng is not None else random
        self._input = input_func
        self.delay = delay

    def _read_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self._input(prompt).strip())
        except ValueError:
            return None

    def start_battle(self) -> BattleResult:
        """Run the battle to its end and return the result."""
        print(f"\n=== BATTLE START: {self.player.name} vs {self.enemy.name} ===")

        while not self.battle_ended:
            self.display_battle_status()

            if self.player_turn:
                print(f"\n{self.player.name}'s turn. What will you do?")
                self.display_player_options()
                choice = self._read_int("Enter your choice (1-4): ")

                if choice == 1:
                    self.execute_player_action(BattleAction.ATTACK)
                elif choice == 2:
                    self.display_player_abilities()
                    index = self._read_int("Choose ability (or 0 to go back): ")
                    if index is None or index <= 0:
                        continue
                    self.execute_player_action(BattleAction.USE_ABILITY, index - 1)
                elif choice == 3:
                    self.display_player_items()
                    index = self._read_int("Choose item (or 0 to go back): ")
                    if index is None or index <= 0:
                        continue
                    self.execute_player_action(BattleAction.USE_ITEM, index - 1)
                elif choice == 4:
                    self.execute_player_action(BattleAction.RUN)
                else:
                    print("Invalid choice. Try again.")
                    continue
            else:
                print(f"\n{self.enemy.name}'s turn!")
                self.process_enemy_turn()

            self.player_turn = not self.player_turn
            self.turn_count += 1
            self.check_battle_end()

            if self.delay > 0:
                time.sleep(self.delay)

        self._announce_result()
        return self.result

    def _announce_result(self) -> None:
        if self.result is BattleResult.PLAYER_VICTORY:
            print(f"\nVictory! {self.enemy.name} was defeated!")
            self.player.gain_experience(self.enemy.experience_value)
            print(f"{self.player.name} gained {self.enemy.experience_value} experience!")
            if self.enemy.calculate_drop():
                dropped = Item.small_potion()
                self.player.add_item(dropped)
                print(f"{self.enemy.name} dropped a {dropped.name}!")
        elif self.result is BattleResult.PLAYER_DEFEAT:
            print(f"\nDefeat! {self.player.name} was defeated by {self.enemy.name}!")
            print("Game Over!")
        elif self.result is BattleResult.ESCAPED:
            print(f"\n{self.player.name} escaped from the battle!")

    def execute_player_action(self, action: BattleAction, index: Optional[int] = None) -> bool:
        """Carry out a player action; return False if it is not the player's turn or the battle is over."""
        if not self.player_turn or self.battle_ended:
            return False
        self._process_player_action(action, index)
        return True

    def _process_player_action(self, action: BattleAction, index: Optional[int]) -> None:
        selected = index is not None and index >= 0

        if action is BattleAction.ATTACK:
            raw = self.player.attack()
            if raw > 0:
                before = self.enemy.health
                self.enemy.take_damage(raw)
                actual = before - self.enemy.health
                print(f"{self.player.name} attacks {self.enemy.name} for {raw} damage!")
                if actual < raw:
                    print(f"{self.enemy.name}'s defense reduced the damage to {actual}.")
            else:
                print(f"{self.player.name}'s attack missed!")

        elif action is BattleAction.USE_ABILITY:
            if selected:
                self.player.use_ability(index, self.enemy)
            else:
                print("No ability selected.")

        elif action is BattleAction.USE_ITEM:
            if selected:
                item = self.player.inventory_item(index)
                item_type = item.item_type if item is not None else ItemType.HEALING
                if item_type in (ItemType.DAMAGE, ItemType.DEBUFF):
                    if self.player.use_item(index, self.enemy):
                        print(f"Item used successfully on {self.enemy.name}.")
                else:
                    self.player.use_item(index)
            else:
                print("No item selected.")

        elif action is BattleAction.RUN:
            if self.rng.randrange(100) < 50:
                self.result = BattleResult.ESCAPED
                self.battle_ended = True
            else:
                print("Couldn't escape!")

        self.check_battle_end()

    def process_enemy_turn(self) -> None:
        """Apply the enemy's status effects, let it act, then age its effects."""
        self.apply_status_effects(self.enemy, self.enemy_status_effects)
        if self.enemy.is_alive:
            self.enemy.decide_action(self.player)
        self.update_status_effects(self.enemy_status_effects)

    def check_battle_end(self) -> None:
        """End the battle if either side has fallen."""
        if not self.player.is_alive:
            self.result = BattleResult.PLAYER_DEFEAT
            self.battle_ended = True
        elif not self.enemy.is_alive:
            self.result = BattleResult.PLAYER_VICTORY
            self.battle_ended = True

    def apply_status_effects(self, target: Entity, effects: List[StatusEffect]) -> None:
        """Deal damage over time to ``target`` for each poison or burn effect."""
        for effect in effects:
            if effect.name in _DAMAGE_OVER_TIME:
                amount = target.max_health // 10
                target.take_damage(amount)
                print(f"{target.name} takes {amount} damage from {effect.name}!")

    def update_status_effects(self, effects: List[StatusEffect]) -> None:
        """Count every effect down by one turn and remove those that have run out."""
        remaining = []
        for effect in effects:
            effect.turns -= 1
            if effect.turns <= 0:
                print(f"{effect.name} effect has worn off!")
            else:
                remaining.append(effect)
        effects[:] = remaining

    @staticmethod
    def _status_line(owner: Entity, effects: List[StatusEffect]) -> str:
        listed = "".join(f"{e.name}({e.turns} turns) " for e in effects)
        return f"{owner.name}'s status: {listed}"

    def display_battle_status(self) -> None:
        """Print both sides' health and any active status effects."""
        print(f"\n{_RULE}")
        print(f"{self.player.name}: HP {self.player.health}/{self.player.max_health}")
        print(f"{self.enemy.name}: HP {self.enemy.health}/{self.enemy.max_health}")
        print(_RULE)
        if self.player_status_effects:
            print(self._status_line(self.player, self.player_status_effects))
        if self.enemy_status_effects:
            print(self._status_line(self.enemy, self.enemy_status_effects))

    def display_player_options(self) -> List[str]:
        """Print the numbered actions available on the player's turn and return those lines."""
        lines = [
            f"{number}. {_ACTION_LABELS[action]}"
            for number, action in enumerate(BattleAction, start=1)
        ]
        for line in lines:
            print(line)
        return lines

    def display_player_abilities(self) -> None:
        """Print the player's abilities to choose from."""
        print("Choose an ability:")
        self.player.list_abilities()

    def display_player_items(self) -> None:
        """Print the player's items to choose from."""
        print("Choose an item:")
        self.player.list_inventory()