"""The adventure: menus, random events, battles and saving progress."""

from __future__ import annotations

import argparse
import random
from enum import Enum, auto
from pathlib import Path
from typing import Any, Callable, List, Optional, Sequence, Union

from .abilities import Ability
from .battle import BattleResult, BattleSystem
from .enemy import Enemy
from .items import Item
from .user import User

SAVE_FILE = "savegame.json"
_BANNER = "=================================================="


class GameEvent(Enum):
    """What can happen when the player presses on."""

    BATTLE = auto()
    TREASURE = auto()
    HEAL = auto()
    TRAP = auto()
    NOTHING = auto()


class Game:
    """Drives the menus and the random events of an adventure."""

    def __init__(
        self,
        *,
        rng: Optional[Any] = None,
        input_func: Callable[[str], str] = input,
        delay: float = 1.0,
    ) -> None:
        self.player: Optional[User] = None
        self.current_area = 1
        self.event_counter = 0
        self.running = False
        self.rng = rng if rng is not None else random.Random()
        self.delay = delay
        self._input = input_func
        self.all_abilities: List[Ability] = [
            Ability.fireball(),
            Ability.heal(),
            Ability.poison_strike(),
            Ability.stun_blow(),
            Ability.ice_blast(),
        ]
        self.all_items: List[Item] = [
            Item.small_potion(),
            Item.large_potion(),
            Item.revive_potion(),
            Item.bomb(),
            Item.strength_elixir(),
        ]

    def _pause(self, prompt: str = "\nPress Enter to continue...") -> None:
        self._input(prompt)

    def _read_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self._input(prompt).strip())
        except ValueError:
            return None

    def _require_player(self) -> User:
        if self.player is None:
            raise RuntimeError("there is no player")
        return self.player

    def run(self) -> None:
        """Show the title screen and loop through the menus until the player quits."""
        self.running = True
        print(_BANNER)
        print("       WELCOME TO TURN-BASED BATTLE ADVENTURE     ")
        print(_BANNER)
        try:
            self._input("\nPress Enter to start...\n")
            while self.running:
                self._display_main_menu()
                self.process_input()
        except EOFError:
            self.running = False
        print("\nThank you for playing! Goodbye.")

    def create_new_player(self, name: str) -> User:
        """Create a fresh player with the starting abilities and potions."""
        player = User(name, 100, 10, 5, rng=self.rng)
        player.learn_ability(self.all_abilities[0])
        player.learn_ability(self.all_abilities[1])
        player.add_item(Item.small_potion())
        player.add_item(Item.small_potion())
        self.player = player

        print(f"\nPlayer {name} created!")
        print(f"HP: {player.health}/{player.max_health}")
        print(f"Attack: {player.damage}")
        print(f"Defense: {player.defense}")
        return player

    def _display_main_menu(self) -> None:
        print("\n=== MAIN MENU ===")
        if self.player is None:
            print("1. New Game")
            print("2. Load Game")
            print("3. Quit")
        else:
            self._display_game_menu()

    def _display_game_menu(self) -> None:
        player = self._require_player()
        print("\n=== GAME MENU ===")
        print(f"Player: {player.name} (Level {player.level})")
        print(f"HP: {player.health}/{player.max_health}")
        print(f"EXP: {player.experience}/{player.exp_to_next_level}")
        print(f"Area: {self.current_area}")
        print("\n1. Continue Adventure")
        print("2. View Inventory")
        print("3. View Abilities")
        print("4. Save Game")
        print("5. Return to Main Menu")

    def _ask_new_player(self) -> None:
        name = self._input("\nEnter your character's name: ")
        self.create_new_player(name)

    def process_input(self) -> None:
        """Read one menu choice and carry it out."""
        choice = self._read_int("\nEnter your choice: ")

        if self.player is None:
            if choice == 1:
                self._ask_new_player()
            elif choice == 2:
                try:
                    self.load_game(SAVE_FILE)
                except (OSError, ValueError):
                    print("Error: Unable to open save file!")
                    print("Failed to load game. Starting new game...")
                    self._ask_new_player()
            elif choice == 3:
                self.quit_game()
            else:
                print("Invalid choice. Please try again.")
            return

        if choice == 1:
            print("\nYou continue your journey...")
            self._pause("Press Enter to continue...")
            self.handle_event(self.generate_random_event())
        elif choice == 2:
            print("\n=== INVENTORY ===")
            self.player.list_inventory()
            self._pause()
        elif choice == 3:
            print("\n=== ABILITIES ===")
            self.player.list_abilities()
            self._pause()
        elif choice == 4:
            try:
                self.save_game(SAVE_FILE)
            except OSError:
                print("Error: Unable to open save file!")
            else:
                print("Game saved!")
        elif choice == 5:
            self.player = None
            print("Returning to main menu...")
        else:
            print("Invalid choice. Please try again.")

    def generate_random_event(self) -> GameEvent:
        """Roll the next event of the journey."""
        roll = self.rng.randrange(100)
        if roll < 50:
            return GameEvent.BATTLE
        if roll < 70:
            return GameEvent.TREASURE
        if roll < 85:
            return GameEvent.HEAL
        if roll < 95:
            return GameEvent.TRAP
        return GameEvent.NOTHING

    def handle_event(self, event: GameEvent) -> None:
        """Carry out ``event``; every tenth event moves the player to a new area."""
        if event is GameEvent.BATTLE:
            self.start_battle()
        elif event is GameEvent.TREASURE:
            self.find_treasure()
        elif event is GameEvent.HEAL:
            self.find_healing_spring()
        elif event is GameEvent.TRAP:
            self.spring_trap()
        elif event is GameEvent.NOTHING:
            print("You continue walking but nothing interesting happens...")
            self._pause()

        self.event_counter += 1
        if self.event_counter % 10 == 0:
            self.current_area += 1
            print("\n*** You've advanced to a new area! ***")
            print(f"Welcome to Area {self.current_area}!")
            print("Enemies will be stronger here, but rewards will be greater!")

    def _spawn_enemy(self) -> Enemy:
        area = self.current_area
        if area <= 1:
            enemy = Enemy.goblin()
        elif area <= 3:
            enemy = Enemy.orc()
        elif area <= 5:
            enemy = Enemy.dragon()
        elif area % 5 == 0:
            enemy = Enemy.boss(f"Area {area} Boss")
        else:
            enemy = Enemy.dragon()
        enemy.rng = self.rng
        return enemy

    def start_battle(self) -> BattleResult:
        """Fight an enemy suited to the current area; a defeat ends the player's run."""
        player = self._require_player()
        enemy = self._spawn_enemy()

        print(f"\nA wild {enemy.name} appears!")
        self._pause("\nPress Enter to start battle...")

        battle = BattleSystem(
            player, enemy, rng=self.rng, input_func=self._input, delay=self.delay
        )
        result = battle.start_battle()

        if result is BattleResult.PLAYER_DEFEAT:
            print("\nYou have been defeated...")
            print("Game Over")
            self.player = None
        return result

    def find_treasure(self) -> Item:
        """Give the player a random item from a treasure chest."""
        player = self._require_player()
        print("\nYou found a treasure chest!")

        roll = self.rng.randrange(100)
        if roll < 50:
            item = Item.small_potion()
        elif roll < 80:
            item = Item.large_potion()
        elif roll < 95:
            item = Item.bomb()
        else:
            item = Item.revive_potion()

        player.add_item(item)
        print(f"You got a {item.name}!")
        print(item.description)
        self._pause()
        return item

    def find_healing_spring(self) -> None:
        """Heal the player by half of their maximum health."""
        player = self._require_player()
        print("\nYou found a healing spring!")

        amount = player.max_health // 2
        player.heal(amount)

        print("You drink from the spring and feel refreshed.")
        print(f"You recovered {amount} health!")
        print(f"HP: {player.health}/{player.max_health}")
        self._pause()

    def spring_trap(self) -> None:
        """Hurt the player by a tenth of their maximum health; death ends the run."""
        player = self._require_player()
        print("\nOh no! You triggered a trap!")

        amount = player.max_health // 10
        player.take_damage(amount)

        print(f"You take {amount} damage!")
        print(f"HP: {player.health}/{player.max_health}")

        if not player.is_alive:
            print("\nYou have died...")
            print("Game Over")
            self.player = None

        self._pause()

    def save_game(self, filename: Union[str, Path]) -> None:
        """Write the player's stats and the journey's progress to ``filename``."""
        player = self._require_player()
        values = [
            player.name,
            player.health,
            player.max_health,
            player.damage,
            player.defense,
            player.level,
            player.experience,
            player.exp_to_next_level,
            self.current_area,
            self.event_counter,
        ]
        with open(filename, "w", encoding="utf-8") as handle:
            handle.writelines(f"{value}\n" for value in values)
        print(f"Game saved to {filename}")

    def load_game(self, filename: Union[str, Path]) -> User:
        """Restore a player and the journey's progress from ``filename``.

        Raises OSError if the file cannot be read and ValueError if it is malformed.
        """
        with open(filename, encoding="utf-8") as handle:
            name = handle.readline().rstrip("\n")
            fields = handle.read().split()

        if len(fields) < 9:
            raise ValueError(f"save file {filename} is incomplete")
        numbers = [int(field) for field in fields[:9]]
        _health, max_health, damage, defense, _level, _exp, _next = numbers[:7]

        self.current_area, self.event_counter = numbers[7], numbers[8]
        self.player = User(name, max_health, damage, defense, rng=self.rng)
        print(f"Game loaded! Welcome back, {name}!")
        return self.player

    @property
    def is_running(self) -> bool:
        return self.running

    def quit_game(self) -> None:
        """Ask for confirmation and stop the game if the answer is yes."""
        answer = self._input("Are you sure you want to quit? (y/n): ").strip()[:1]
        if answer in ("y", "Y"):
            self.running = False


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive adventure."""
    parser = argparse.ArgumentParser(
        prog="skirmish", description="A turn-based battle adventure."
    )
    parser.parse_args(argv)
    Game().run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())