"""NPC dialogue: lines, responses and the events they trigger."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .helpers import GameDataError

MAX_DIALOGUE_RESPONSE = 3


def _field(data: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    if not isinstance(data, dict) or key not in data:
        raise GameDataError(f"missing field {key!r}")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, kind):
        raise GameDataError(f"field {key!r} has the wrong type")
    return value


class DialogueEventType(Enum):
    """What happens when a response is chosen."""

    END = "End"
    JUMP = "Jump"
    COMMIT_QUEST = "CommitQuest"
    COMPLETE_QUEST = "CompleteQuest"
    OPEN_SHOP = "OpenShop"
    GIVE_ITEM = "GiveItem"
    SET_BOOKMARK = "SetBookmark"

    @classmethod
    def from_string(cls, text: str) -> DialogueEventType:
        try:
            return cls(text)
        except ValueError:
            raise GameDataError(f"Invalid DialogueEventType Value [{text}]") from None

    def __str__(self) -> str:
        return self.value


# The JSON key holding the event's argument, for the event types that take one.
_INDEX_KEYS = {
    DialogueEventType.JUMP: "JumpIndex",
    DialogueEventType.COMMIT_QUEST: "QuestIndex",
    DialogueEventType.COMPLETE_QUEST: "QuestIndex",
    DialogueEventType.GIVE_ITEM: "ItemIndex",
    DialogueEventType.SET_BOOKMARK: "BookmarkIndex",
}


@dataclass
class DialogueEvent:
    """An event triggered by a response.

    ``index`` is the dialogue to jump to, the quest to commit or complete,
    the reward item to give or the bookmark to set, depending on the type.
    """

    event_type: DialogueEventType | None = None
    index: int = -1

    @classmethod
    def from_json(cls, data: dict) -> DialogueEvent:
        event_type = DialogueEventType.from_string(_field(data, "Type", str))
        event = cls(event_type=event_type)
        key = _INDEX_KEYS.get(event_type)
        if key is not None:
            event.index = int(_field(data, key, (int, float)))
        return event


@dataclass
class DialogueResponse:
    """A response the player can choose, with the events it triggers."""

    text: str = ""
    events: list[DialogueEvent] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict) -> DialogueResponse:
        return cls(
            text=_field(data, "Text", str),
            events=[DialogueEvent.from_json(e) for e in _field(data, "Events", list)],
        )


def _empty_responses() -> list[DialogueResponse]:
    return [DialogueResponse() for _ in range(MAX_DIALOGUE_RESPONSE)]


@dataclass
class DialogueLine:
    """A spoken line and up to three responses."""

    speaker: str = ""
    text: str = ""
    responses: list[DialogueResponse] = field(default_factory=_empty_responses)

    @classmethod
    def from_json(cls, data: dict) -> DialogueLine:
        line = cls(speaker=_field(data, "Speaker", str), text=_field(data, "Text", str))
        values = _field(data, "Responses", list)
        if len(values) > MAX_DIALOGUE_RESPONSE:
            raise GameDataError(
                f"a dialogue line has at most {MAX_DIALOGUE_RESPONSE} responses"
            )
        for slot, value in enumerate(values):
            line.responses[slot] = DialogueResponse.from_json(value)
        return line


@dataclass
class DialogueList:
    """An NPC's dialogue lines and the line to start from next time."""

    dialogues: list[DialogueLine] = field(default_factory=list)
    bookmark: int = 0

    @classmethod
    def from_json(cls, data: dict) -> DialogueList:
        return cls(
            dialogues=[DialogueLine.from_json(v) for v in _field(data, "Dialogues", list)]
        )