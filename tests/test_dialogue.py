import pytest

from questkit.dialogue import (
    MAX_DIALOGUE_RESPONSE,
    DialogueEvent,
    DialogueEventType,
    DialogueLine,
    DialogueList,
    DialogueResponse,
)
from questkit.helpers import GameDataError


def _line(responses):
    return {"Speaker": "Merchant", "Text": "Welcome.", "Responses": responses}


def _response(text, events):
    return {"Text": text, "Events": events}


@pytest.mark.parametrize("event_type", list(DialogueEventType))
def test_event_type_string_round_trip(event_type):
    assert DialogueEventType.from_string(str(event_type)) is event_type


def test_event_type_uses_data_names():
    assert DialogueEventType.from_string("OpenShop") is DialogueEventType.OPEN_SHOP


def test_event_type_rejects_unknown():
    with pytest.raises(GameDataError):
        DialogueEventType.from_string("Dance")


@pytest.mark.parametrize(
    "data, expected_type, expected_index",
    [
        ({"Type": "Jump", "JumpIndex": 4}, DialogueEventType.JUMP, 4),
        ({"Type": "CommitQuest", "QuestIndex": 2}, DialogueEventType.COMMIT_QUEST, 2),
        ({"Type": "CompleteQuest", "QuestIndex": 5}, DialogueEventType.COMPLETE_QUEST, 5),
        ({"Type": "GiveItem", "ItemIndex": 1}, DialogueEventType.GIVE_ITEM, 1),
        ({"Type": "SetBookmark", "BookmarkIndex": 6}, DialogueEventType.SET_BOOKMARK, 6),
    ],
)
def test_event_reads_its_index(data, expected_type, expected_index):
    event = DialogueEvent.from_json(data)
    assert event.event_type is expected_type
    assert event.index == expected_index


@pytest.mark.parametrize("name", ["End", "OpenShop"])
def test_event_without_argument_keeps_default_index(name):
    event = DialogueEvent.from_json({"Type": name, "JumpIndex": 9})
    assert event.index == DialogueEvent().index


def test_event_missing_index_raises():
    with pytest.raises(GameDataError):
        DialogueEvent.from_json({"Type": "Jump"})


def test_response_from_json_keeps_event_order():
    response = DialogueResponse.from_json(
        _response("Show me.", [{"Type": "OpenShop"}, {"Type": "End"}])
    )
    assert response.text == "Show me."
    assert [e.event_type for e in response.events] == [
        DialogueEventType.OPEN_SHOP,
        DialogueEventType.END,
    ]


def test_line_pads_responses_to_maximum():
    line = DialogueLine.from_json(_line([_response("Bye.", [{"Type": "End"}])]))
    assert line.speaker == "Merchant"
    assert line.text == "Welcome."
    assert len(line.responses) == MAX_DIALOGUE_RESPONSE
    assert line.responses[0].text == "Bye."
    assert line.responses[1:] == [DialogueResponse()] * (MAX_DIALOGUE_RESPONSE - 1)


def test_default_line_has_maximum_empty_responses():
    assert DialogueLine().responses == [DialogueResponse()] * MAX_DIALOGUE_RESPONSE


def test_line_with_too_many_responses_raises():
    responses = [_response(str(i), []) for i in range(MAX_DIALOGUE_RESPONSE + 1)]
    with pytest.raises(GameDataError):
        DialogueLine.from_json(_line(responses))


def test_dialogue_list_from_json():
    data = {
        "Dialogues": [
            _line([_response("Next", [{"Type": "Jump", "JumpIndex": 1}])]),
            {"Speaker": "Merchant", "Text": "Goodbye.", "Responses": []},
        ]
    }
    dialogue = DialogueList.from_json(data)
    assert [line.text for line in dialogue.dialogues] == ["Welcome.", "Goodbye."]
    assert dialogue.dialogues[0].responses[0].events[0].index == 1
    assert dialogue.bookmark == DialogueList().bookmark


def test_dialogue_list_missing_field_raises():
    with pytest.raises(GameDataError):
        DialogueList.from_json({})