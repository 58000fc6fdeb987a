"""Game data models and gameplay logic: items, dialogues, quests, enemies and NPCs."""

__version__ = "0.1.0"
__all__ = ["helpers", "item", "dialogue", "quest", "enemy", "character", "enemy_ai", "npc"]