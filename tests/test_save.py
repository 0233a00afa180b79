import json

from glowquest.save import (
    QuestSaveData,
    SaveData,
    default_save_path,
    exists,
    load,
    migrate_v1,
    save,
)


def test_default_save_path():
    path = default_save_path()
    assert path.name == "save.json"
    assert path.parent.name == "glowquest"


def test_missing_file(tmp_path):
    target = tmp_path / "none.json"
    assert exists(target) is False
    assert load(target) is None


def test_round_trip(tmp_path):
    target = tmp_path / "nested" / "save.json"
    data = SaveData(
        version=2,
        has_sword=True,
        max_hp=8,
        hp=5,
        rupees=12,
        keys=1,
        collected_items={"8,8_0": True},
        unlocked_doors={"8,8_3,4": True},
        screen_x=8,
        screen_y=7,
        player_x=100.5,
        player_y=40.0,
        in_interior=True,
        interior_id="house",
        sword_level=1,
        button_a=1,
        owned_items=[1, 3],
        quest=QuestSaveData(flags={"game_started": True}, trading_item=2),
    )
    save(data, target)
    assert exists(target)
    assert load(target) == data


def test_save_sets_version(tmp_path):
    target = tmp_path / "save.json"
    data = SaveData()
    save(data, target)
    assert data.version == 2
    assert json.loads(target.read_text())["version"] == 2


def test_empty_optional_fields_omitted():
    out = SaveData(version=2).to_dict()
    for key in ("interior_id", "bombs", "owned_items", "quest", "dungeon_id", "button_a"):
        assert key not in out
    assert out["collected_items"] == {}
    assert out["boss_defeated"] is False


def test_quest_flags_omitted_when_empty():
    out = QuestSaveData().to_dict()
    assert "flags" not in out
    assert out["dungeons_completed"] == [False] * 9


def test_v1_save_migrated_on_load(tmp_path):
    target = tmp_path / "save.json"
    target.write_text(json.dumps({"has_sword": True, "hp": 4}))
    data = load(target)
    assert data.version == 2
    assert data.sword_level == 1
    assert data.owned_items == [1]
    assert data.button_a == 1
    assert data.hp == 4


def test_migrate_keeps_existing_button():
    data = SaveData(version=1, has_sword=True, button_a=3)
    migrate_v1(data)
    assert data.button_a == 3
    assert data.owned_items == [1]


def test_migrate_without_sword():
    data = SaveData(version=1)
    migrate_v1(data)
    assert data.version == 2
    assert data.owned_items == [] and data.sword_level == 0


def test_null_fields_become_defaults(tmp_path):
    target = tmp_path / "save.json"
    target.write_text(json.dumps({"version": 2, "collected_items": None, "quest": None}))
    data = load(target)
    assert data.collected_items == {}
    assert data.quest is None


def test_short_dungeon_list_is_padded():
    quest = QuestSaveData.from_dict({"dungeons_completed": [True]})
    assert quest.dungeons_completed == [True] + [False] * 8


def test_invalid_json_returns_none(tmp_path):
    target = tmp_path / "save.json"
    target.write_text("{not json")
    assert load(target) is None


def test_wrong_shape_returns_none(tmp_path):
    target = tmp_path / "save.json"
    target.write_text("[]")
    assert load(target) is None
    target.write_text(json.dumps({"hp": "full"}))
    assert load(target) is None