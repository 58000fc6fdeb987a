"""Quest definitions, rewards and quest progress tracking."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .helpers import PATH_FX, GameDataError, Vector, asset_path, json_to_vector
from .item import GameItem


def _field(data: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise GameDataError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise GameDataError(f"field {key!r} has the wrong type")
    return value


def _int(data: Any, key: str) -> int:
    return int(_field(data, key, (int, float)))


class SubQuestType(Enum):
    """Kind of sub-quest."""

    ARRIVAL = "Arrival"
    COLLECT = "Collect"
    HUNT = "Hunt"
    ACTION = "Action"

    @classmethod
    def from_string(cls, text: str) -> SubQuestType:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"Invalid ESubQuestType [{text}]") from None

    def __str__(self) -> str:
        return self.value


class QuestType(Enum):
    """Whether sub-quests are done one after another or all at once."""

    SERIAL = "Serial"
    PARALLEL = "Parallel"

    @classmethod
    def from_string(cls, text: str) -> QuestType:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"Invalid EQuestType Value [{text}]") from None

    def __str__(self) -> str:
        return self.value


class QuestProgress(Enum):
    """How far a quest has come."""

    UNAVAILABLE = "UnAvailable"
    AVAILABLE = "Available"
    IN_PROGRESS = "InProgress"
    COMPLETABLE = "Completable"
    COMPLETED = "Completed"

    @classmethod
    def from_string(cls, text: str) -> QuestProgress:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"Invalid EQuestProgressType Value [{text}]") from None

    def __str__(self) -> str:
        return self.value


class QuestRewardType(Enum):
    """Kind of reward given when a quest is completed."""

    EXP = "Exp"
    ITEM = "Item"
    MONEY = "Money"

    @classmethod
    def from_string(cls, text: str) -> QuestRewardType:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"Invalid EQuestRewardType Value [{text}]") from None

    def __str__(self) -> str:
        return self.value


@dataclass
class QuestReward:
    """A reward: experience, an item stack or gold, depending on its type."""

    reward_type: QuestRewardType | None = None
    exp: int = 0
    item: GameItem | None = None
    money: int = 0

    @classmethod
    def from_json(cls, data: dict) -> QuestReward:
        reward_type = QuestRewardType.from_string(_field(data, "Type", str))
        reward = cls(reward_type=reward_type)
        if reward_type is QuestRewardType.EXP:
            reward.exp = _int(data, "Exp")
        elif reward_type is QuestRewardType.ITEM:
            reward.item = GameItem.from_json(_field(data, "Item", dict))
        else:
            reward.money = _int(data, "Money")
        return reward


@dataclass
class ArrivalInfo:
    """Where an arrival sub-quest ends and the effect shown there."""

    map_index: int = 0
    destination: Vector = field(default_factory=Vector)
    fx: str = ""


@dataclass
class CollectInfo:
    """What and how many to collect or hunt."""

    index: int = 0
    num: int = 0


@dataclass
class ActionInfo:
    """A globally unique code for a special-action sub-quest."""

    code: int = 0


@dataclass
class SubQuest:
    """One step of a quest.

    ``collect`` holds the target for both collect and hunt sub-quests.
    """

    sub_type: SubQuestType | None = None
    explanation: str = ""
    main_quest_index: int = -1
    arrival: ArrivalInfo | None = None
    collect: CollectInfo | None = None
    action: ActionInfo | None = None

    @classmethod
    def from_json(cls, data: dict) -> SubQuest:
        sub_type = SubQuestType.from_string(_field(data, "Type", str))
        sub = cls(sub_type=sub_type, explanation=_field(data, "Explanation", str))
        if sub_type is SubQuestType.ARRIVAL:
            sub.arrival = ArrivalInfo(
                map_index=_int(data, "MapIndex"),
                destination=json_to_vector(_field(data, "Destination", list)),
                fx=asset_path(PATH_FX, _field(data, "FX", str)),
            )
        elif sub_type in (SubQuestType.COLLECT, SubQuestType.HUNT):
            sub.collect = CollectInfo(index=_int(data, "Index"), num=_int(data, "Num"))
        else:
            sub.action = ActionInfo(code=_int(data, "Code"))
        return sub


@dataclass
class Quest:
    """A quest definition from the game data."""

    name: str = ""
    explanation: str = ""
    quest_type: QuestType | None = None
    sub_quests: list[SubQuest] = field(default_factory=list)
    rewards: list[QuestReward] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> Quest:
        return cls(
            name=_field(data, "Name", str),
            explanation=_field(data, "Explanation", str),
            quest_type=QuestType.from_string(_field(data, "Type", str)),
            sub_quests=[SubQuest.from_json(v) for v in _field(data, "SubQuests", list)],
            rewards=[QuestReward.from_json(v) for v in _field(data, "Rewards", list)],
        )


def load_quests(path: str | os.PathLike) -> list[Quest]:
    """Load every quest definition from a quest list JSON file."""
    with open(path, encoding="utf-8") as handle:
        try:
            root = json.load(handle)
        except json.JSONDecodeError as exc:
            raise GameDataError(f"quest list is not valid JSON: {exc}") from exc
    return [Quest.from_json(entry) for entry in _field(root, "QuestList", list)]


@dataclass
class SubQuestStatus:
    """Progress of one sub-quest."""

    sub_type: SubQuestType | None = None
    started: bool = False
    completed: bool = False
    curr_amount: int = 0


@dataclass
class QuestStatus:
    """Progress of a quest.

    ``curr_phase`` is the running sub-quest for serial quests and the number
    of completed sub-quests for parallel ones; ``completed`` reads the same value.
    """

    index: int = -1
    quest_type: QuestType = QuestType.SERIAL
    progress: QuestProgress | None = None
    sub_status: list[SubQuestStatus] = field(default_factory=list)
    curr_phase: int = 0

    @property
    def completed(self) -> int:
        return self.curr_phase

    @completed.setter
    def completed(self, value: int) -> None:
        self.curr_phase = value

    def update_progress(self) -> None:
        """Advance the overall progress after a sub-quest has changed."""
        if self.quest_type is QuestType.SERIAL:
            if self.curr_phase >= len(self.sub_status):
                return
            if self.sub_status[self.curr_phase].completed:
                self.curr_phase += 1
                if self.curr_phase < len(self.sub_status):
                    self.sub_status[self.curr_phase].started = True
                else:
                    self.progress = QuestProgress.COMPLETABLE
        else:
            self.completed = sum(1 for status in self.sub_status if status.completed)
            if self.completed == len(self.sub_status):
                self.progress = QuestProgress.COMPLETABLE
            else:
                self.progress = QuestProgress.IN_PROGRESS