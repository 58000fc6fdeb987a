"""Base game character with health, damage and death handling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CustomCharacter:
    """A character with hit points that can be hurt and can die."""

    display_name: str = ""
    max_hp: int = 100
    hp: float = 100.0
    dead: bool = False
    forced: bool = False

    def take_damage(self, damage: float) -> float:
        """Apply damage, then call on_dead or on_hurt; return the damage dealt."""
        self.hp -= damage
        if self.hp <= 0:
            self.dead = True
            self.on_dead()
        else:
            self.on_hurt()
        return damage

    def on_hurt(self) -> None:
        """Called after damage that leaves the character alive; subclasses react here."""

    def on_dead(self) -> None:
        """Called when damage brings hit points to zero or below; subclasses react here."""