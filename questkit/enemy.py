"""Enemy kinds, labels and enemy definitions from the game data."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .helpers import GameDataError


def _field(data: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise GameDataError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise GameDataError(f"field {key!r} has the wrong type")
    return value


def _int(data: Any, key: str) -> int:
    return int(_field(data, key, (int, float)))


def _load_list(path: str | os.PathLike, key: str) -> list:
    with open(path, encoding="utf-8") as handle:
        try:
            root = json.load(handle)
        except json.JSONDecodeError as exc:
            raise GameDataError(f"{key} is not valid JSON: {exc}") from exc
    return _field(root, key, list)


class EnemyType(Enum):
    """Kind of enemy, which decides what is spawned."""

    SHOOTER = "Shooter"
    MONSTER = "Monster"

    @classmethod
    def from_string(cls, text: str) -> EnemyType:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"EEnemyType has no member [{text}]") from None

    def __str__(self) -> str:
        return self.value


@dataclass
class EnemyLabelInfo:
    """A trait enemies can share, such as a race."""

    name: str = ""

    @classmethod
    def from_json(cls, data: dict) -> EnemyLabelInfo:
        return cls(name=_field(data, "Name", str))


def load_label_infos(path: str | os.PathLike) -> list[EnemyLabelInfo]:
    """Load every enemy label from a label list JSON file."""
    return [EnemyLabelInfo.from_json(entry) for entry in _load_list(path, "LabelList")]


@dataclass
class EnemyInfo:
    """An enemy definition from the game data."""

    index: int = -1
    name: str = ""
    enemy_type: EnemyType | None = None
    hp: int = 0
    damage: int = 0
    labels: list[int] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> EnemyInfo:
        labels = []
        for value in _field(data, "Labels", list):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise GameDataError(f"label {value!r} is not a number")
            labels.append(int(value))
        return cls(
            index=_int(data, "Index"),
            name=_field(data, "Name", str),
            hp=_int(data, "Hp"),
            damage=_int(data, "Damage"),
            labels=labels,
            enemy_type=EnemyType.from_string(_field(data, "Class", str)),
        )


def load_enemy_infos(path: str | os.PathLike) -> list[EnemyInfo]:
    """Load every enemy definition from an enemy list JSON file."""
    return [EnemyInfo.from_json(entry) for entry in _load_list(path, "EnemyInfoList")]