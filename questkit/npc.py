"""NPC characters with dialogue, a shop and reward items."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from .character import CustomCharacter
from .dialogue import DialogueLine, DialogueList
from .helpers import GameDataError
from .item import GameItem, Inventory, ItemType


def _field(data: Any, key: str, kind: type) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise GameDataError(f"missing field {key!r}")
    value = data[key]
    if not isinstance(value, kind):
        raise GameDataError(f"field {key!r} has the wrong type")
    return value


@dataclass
class NpcCharacter(CustomCharacter):
    """An NPC the player can talk to and trade with."""

    npc_index: int = -1
    interacting: bool = False
    notify_visible: bool = False
    interaction_target: Any = field(default=None, repr=False, compare=False)
    shop_items: Inventory = field(default_factory=Inventory)
    reward_items: list[GameItem] = field(default_factory=list)
    dialogue: DialogueList = field(default_factory=DialogueList)
    dialogue_listener: Callable[[Any, NpcCharacter], None] | None = field(
        default=None, repr=False, compare=False
    )

    @property
    def team_id(self) -> int:
        return 1

    def load_from_json(self, data: dict) -> None:
        """Read the dialogue, shop items and reward items from a JSON object."""
        self.dialogue.dialogues = [
            DialogueLine.from_json(value) for value in _field(data, "Dialogues", list)
        ]
        shop = _field(data, "ShopItems", dict)
        for item_type in ItemType:
            self.shop_items.type_inventory(item_type).items = [
                GameItem.from_json(value) for value in _field(shop, item_type.value, list)
            ]
        self.reward_items = [
            GameItem.from_json(value) for value in _field(data, "RewardItems", list)
        ]

    def notify(self, player: Any) -> None:
        """Show that the player is within interaction range."""
        self.notify_visible = True

    def unnotify(self, player: Any) -> None:
        """Hide the interaction hint."""
        self.notify_visible = False

    def interact(self, player: Any) -> None:
        """Start talking with the player and open the dialogue."""
        self.interaction_target = player
        if self.dialogue_listener is not None:
            self.dialogue_listener(player, self)
        self.interacting = True

    def uninteract(self, player: Any) -> None:
        """End the conversation; the player stops interacting too."""
        self.interacting = False
        self.interaction_target = None
        end = getattr(player, "uninteract", None)
        if end is None:
            raise TypeError("the interacting actor must be able to stop interacting")
        end()