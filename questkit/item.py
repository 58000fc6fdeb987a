"""Item definitions, game items and inventories."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from .helpers import (
    PATH_BLUEPRINT,
    PATH_MESH,
    PATH_SOUND,
    PATH_THUMBNAIL,
    GameDataError,
    asset_path,
)

NUM_INVENTORY_ROW = 4
NUM_INVENTORY_COL = 4
MAX_ITEM_PER_TYPE = 16


def _field(data: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise GameDataError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) and kind is not bool:
        raise GameDataError(f"field {key!r} has the wrong type")
    if not isinstance(value, kind):
        raise GameDataError(f"field {key!r} has the wrong type")
    return value


def _int(data: Any, key: str) -> int:
    return int(_field(data, key, (int, float)))


class ItemType(Enum):
    """Kind of item."""

    CLOTH = "Cloth"
    WEAPON = "Weapon"
    ITEM = "Item"

    @classmethod
    def from_string(cls, text: str) -> ItemType:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"EItemType has no member [{text}]") from None

    def __str__(self) -> str:
        return self.value


class WeaponType(Enum):
    """Kind of weapon, which decides how it attacks."""

    FIST = "Fist"
    RIFLE = "Rifle"

    @classmethod
    def from_string(cls, text: str) -> WeaponType:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"EWeaponType has no member [{text}]") from None

    def __str__(self) -> str:
        return self.value


class ThumbnailType(IntEnum):
    """Thumbnail shown for an item depending on its selection state."""

    NORMAL = 0
    HOVERED = 1
    SELECTED = 2


@dataclass
class WeaponInfo:
    """Weapon details of an item definition."""

    weapon_type: WeaponType | None = None
    damage: float = 0.0
    sound: str = ""
    bullet_bp: str = ""


@dataclass
class ItemInfo:
    """An item definition from the game data."""

    index: int = -1
    item_type: ItemType | None = None
    name: str = ""
    sellable: bool = True
    price: int = 0
    thumbnails: tuple[str, ...] = ()
    item_mesh: str = ""
    weapon: WeaponInfo = field(default_factory=WeaponInfo)

    @classmethod
    def from_json(cls, data: dict) -> ItemInfo:
        info = cls(
            index=_int(data, "Index"),
            item_type=ItemType.from_string(_field(data, "Type", str)),
            name=_field(data, "Name", str),
            sellable=_field(data, "IsSellable", bool),
        )
        if info.sellable:
            info.price = _int(data, "Price")

        names = _field(data, "Thumbnail", list)
        if len(names) < len(ThumbnailType):
            raise GameDataError(f"item {info.name!r} needs {len(ThumbnailType)} thumbnails")
        thumbnails = []
        for name in names[: len(ThumbnailType)]:
            if not isinstance(name, str):
                raise GameDataError("thumbnail names must be strings")
            thumbnails.append(asset_path(PATH_THUMBNAIL, name))
        info.thumbnails = tuple(thumbnails)

        if info.item_type in (ItemType.WEAPON, ItemType.CLOTH):
            info.item_mesh = asset_path(PATH_MESH, _field(data, "Mesh", str))

        if info.item_type is ItemType.WEAPON:
            weapon = _field(data, "WeaponInfo", dict)
            info.weapon = WeaponInfo(
                weapon_type=WeaponType.from_string(_field(weapon, "Type", str)),
                damage=float(_field(weapon, "Damage", (int, float))),
                sound=asset_path(PATH_SOUND, _field(weapon, "Sound", str)),
                bullet_bp=asset_path(PATH_BLUEPRINT + "Actor/", _field(weapon, "Bullet", str)),
            )
        return info


def load_item_infos(path: str | os.PathLike) -> list[ItemInfo]:
    """Load every item definition from an item list JSON file."""
    with open(path, encoding="utf-8") as handle:
        try:
            root = json.load(handle)
        except json.JSONDecodeError as exc:
            raise GameDataError(f"item list is not valid JSON: {exc}") from exc
    return [ItemInfo.from_json(entry) for entry in _field(root, "ItemList", list)]


@dataclass
class GameItem:
    """An item stack that can be given, held or traded in the game."""

    info_index: int = -1
    num: int = 0

    @classmethod
    def from_json(cls, data: dict) -> GameItem:
        return cls(info_index=_int(data, "Index"), num=_int(data, "Num"))


@dataclass
class TypeInventory:
    """Items of a single type."""

    items: list[GameItem] = field(default_factory=list)


@dataclass
class Inventory:
    """Inventory holding one item list per item type."""

    lists: dict[ItemType, TypeInventory] = field(
        default_factory=lambda: {item_type: TypeInventory() for item_type in ItemType}
    )

    def type_inventory(self, item_type: ItemType) -> TypeInventory:
        return self.lists[item_type]