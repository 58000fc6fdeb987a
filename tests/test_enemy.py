import json

import pytest

from questkit.enemy import (
    EnemyInfo,
    EnemyLabelInfo,
    EnemyType,
    load_enemy_infos,
    load_label_infos,
)
from questkit.helpers import GameDataError

SHOOTER = {
    "Index": 0,
    "Name": "Bandit",
    "Class": "Shooter",
    "Hp": 80,
    "Damage": 15,
    "Labels": [0, 2],
}


@pytest.mark.parametrize(
    "text, member", [("Shooter", EnemyType.SHOOTER), ("Monster", EnemyType.MONSTER)]
)
def test_enemy_type_from_string(text, member):
    assert EnemyType.from_string(text) is member
    assert str(member) == text


def test_enemy_type_unknown():
    with pytest.raises(GameDataError):
        EnemyType.from_string("Dragon")


def test_label_from_json():
    assert EnemyLabelInfo.from_json({"Name": "Human"}).name == "Human"


def test_enemy_info_from_json():
    info = EnemyInfo.from_json(SHOOTER)
    assert info.index == 0
    assert info.name == "Bandit"
    assert info.enemy_type is EnemyType.SHOOTER
    assert info.hp == 80
    assert info.damage == 15
    assert info.labels == [0, 2]


def test_enemy_info_unknown_class():
    with pytest.raises(GameDataError):
        EnemyInfo.from_json({**SHOOTER, "Class": "Dragon"})


def test_enemy_info_missing_field():
    data = dict(SHOOTER)
    del data["Hp"]
    with pytest.raises(GameDataError):
        EnemyInfo.from_json(data)


def test_enemy_info_bad_label():
    with pytest.raises(GameDataError):
        EnemyInfo.from_json({**SHOOTER, "Labels": ["x"]})


def test_load_enemy_infos(tmp_path):
    monster = {**SHOOTER, "Index": 1, "Name": "Beast", "Class": "Monster"}
    path = tmp_path / "EnemyInfo.json"
    path.write_text(json.dumps({"EnemyInfoList": [SHOOTER, monster]}), encoding="utf-8")
    infos = load_enemy_infos(path)
    assert [i.enemy_type for i in infos] == [EnemyType.SHOOTER, EnemyType.MONSTER]
    assert [i.name for i in infos] == ["Bandit", "Beast"]


def test_load_label_infos(tmp_path):
    path = tmp_path / "EnemyLabelInfo.json"
    path.write_text(json.dumps({"LabelList": [{"Name": "Human"}, {"Name": "Beast"}]}), encoding="utf-8")
    assert load_label_infos(path) == [EnemyLabelInfo("Human"), EnemyLabelInfo("Beast")]


def test_load_label_infos_wrong_root(tmp_path):
    path = tmp_path / "EnemyLabelInfo.json"
    path.write_text(json.dumps({"Other": []}), encoding="utf-8")
    with pytest.raises(GameDataError):
        load_label_infos(path)