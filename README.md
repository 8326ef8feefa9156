# skirmish

A turn-based battle adventure for the terminal. You create a hero, travel from area to area and deal with whatever comes up on the way: monsters, treasure chests, healing springs and traps.

## Installing

```
pip install .
```

## Playing

```
skirmish
```

The command takes no options other than `--help`. Press Enter at the title screen. The main menu then lets you start a new game, load a saved one or quit. Quitting asks for confirmation (`y` or `Y`). Closing the input stream (Ctrl-D) also ends the game.

A new hero starts with 100 health, 10 attack and 5 defence, knows Fireball and Heal, and carries two Small Potions.

Once you have a character, the game menu offers these choices:

1. **Continue Adventure**: roll a random event.
   - 50%: a battle
   - 20%: a treasure chest (Small Potion, Large Potion, Bomb or, rarely, a Revive Potion)
   - 15%: a healing spring that restores half your maximum health
   - 10%: a trap that costs a tenth of your maximum health, less your defence
   - 5%: nothing happens
2. **View Inventory**
3. **View Abilities**
4. **Save Game**: writes `savegame.json` in the current directory.
5. **Return to Main Menu**: drops the current hero.

After every ten events you move on to a new area. Goblins are found in area 1, orcs in areas 2–3 and dragons in areas 4–5. Beyond area 5, each area whose number is divisible by five has a boss; every other area has a dragon.

### Battles

On your turn you can attack, use an ability, use an item from your inventory, or try to run away. Running away works half of the time. Damage taken is reduced by the target's defence.

The enemy then acts: most of the time it attacks; otherwise it may heal itself for a tenth of its maximum health when it is below half health, or it hesitates and does nothing.

When you win, you gain the enemy's experience and the enemy may drop a Small Potion. Reaching the experience threshold (100 at first, then half as much again each level) raises your level: +10 maximum health, a full heal, +2 damage and +1 defence. Losing a battle, or dying to a trap, ends that hero's run.

## What the game does not do

- **Status effects and buffs are only announced.** Abilities such as Fireball or Poison Strike print that the target was burned, poisoned, frozen and so on, and buff, debuff and mana items print their message, but none of them change any stats. Ability mana costs are not charged.
- **Weaknesses and resistances are recorded but not applied.** Enemies list them (`Enemy.weaknesses`, `Enemy.resistances`), yet damage is never scaled by them.
- **Saving keeps only part of the state.** Despite its name, `savegame.json` is a plain text file with one value per line: name, health, maximum health, damage, defence, level, experience, experience needed, area and event count. Loading restores the name, maximum health, damage, defence, area and event count; the hero comes back at full health, at level 1 with no experience, and without abilities or items.

## Using the pieces in code

The game's building blocks can be used on their own:

```python
from skirmish.abilities import Ability
from skirmish.battle import BattleAction, BattleResult, BattleSystem
from skirmish.enemy import Enemy
from skirmish.items import Item
from skirmish.user import User

hero = User("Ayla", 100, 10, 5)
hero.learn_ability(Ability.fireball())
hero.add_item(Item.small_potion())

goblin = Enemy.goblin()
battle = BattleSystem(hero, goblin, delay=0)
battle.execute_player_action(BattleAction.ATTACK)
if battle.result is BattleResult.IN_PROGRESS:
    print(goblin.health)
```

- `skirmish.abilities`: `Ability`, `AbilityType`, `SecondaryEffect`, with ready-made abilities `Ability.fireball()`, `heal()`, `poison_strike()`, `stun_blow()` and `ice_blast()`.
- `skirmish.items`: `Item`, `ItemType`, `ItemRarity`, with `Item.small_potion()`, `large_potion()`, `revive_potion()`, `bomb()` and `strength_elixir()`.
- `skirmish.entity`: `Entity`, the base for heroes and enemies (health, attacks, inventory, abilities).
- `skirmish.user`: `User`, the hero, with `gain_experience()` and `level_up()`.
- `skirmish.enemy`: `Enemy` and `EnemyType`, with `Enemy.goblin()`, `orc()`, `dragon()` and `boss(name)`.
- `skirmish.battle`: `BattleSystem`, `BattleAction` and `BattleResult`. `start_battle()` runs an interactive battle; `execute_player_action()` and `process_enemy_turn()` drive it step by step.
- `skirmish.game`: `Game` runs the menus and events; `skirmish.game.main()` is what the `skirmish` command calls.

`Entity`, `User`, `Enemy`, `BattleSystem` and `Game` accept an `rng` keyword (anything with `randint` and `randrange`, such as `random.Random(seed)`) for repeatable play. `BattleSystem` and `Game` also take `input_func`, used in place of `input`, and `delay`, the pause in seconds after each battle turn.

## Running the tests

```
pip install .[test]
pytest
```