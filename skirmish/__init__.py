"""A turn-based battle adventure for the terminal: heroes, enemies, items, abilities and battles."""

__version__ = "1.0.0"
__all__ = ["abilities", "items", "entity", "user", "enemy", "battle", "game"]