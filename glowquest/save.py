"""Saving and loading game progress as JSON."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

DUNGEON_COUNT = 9
_SWORD_ID = 1  # EquipItem.SWORD

PathLike = Union[str, Path]


def _typed(raw: dict, key: str, kind: type, default: Any) -> Any:
    value = raw.get(key)
    if value is None:
        return default
    if kind is bool:
        ok = isinstance(value, bool)
    elif kind is float:
        ok = isinstance(value, (int, float)) and not isinstance(value, bool)
        if ok:
            value = float(value)
    elif kind is int:
        ok = isinstance(value, int) and not isinstance(value, bool)
    else:
        ok = isinstance(value, kind)
    if not ok:
        raise TypeError(f"field {key!r} has the wrong type")
    return value


def _bool_map(raw: dict, key: str) -> dict[str, bool]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict) or not all(isinstance(v, bool) for v in value.values()):
        raise TypeError(f"field {key!r} must map names to booleans")
    return dict(value)


def _sorted_map(mapping: dict[str, bool]) -> dict[str, bool]:
    return dict(sorted(mapping.items()))


@dataclass
class QuestSaveData:
    """Serialisable quest progress."""

    flags: dict[str, bool] = field(default_factory=dict)
    dungeons_completed: list[bool] = field(default_factory=lambda: [False] * DUNGEON_COUNT)
    trading_item: int = 0

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        if self.flags:
            out["flags"] = _sorted_map(self.flags)
        out["dungeons_completed"] = list(self.dungeons_completed)
        out["trading_item"] = self.trading_item
        return out

    @classmethod
    def from_dict(cls, raw: Any) -> "QuestSaveData":
        if not isinstance(raw, dict):
            raise TypeError("quest data must be an object")
        done = raw.get("dungeons_completed") or []
        if not isinstance(done, list) or not all(isinstance(d, bool) for d in done):
            raise TypeError("dungeons_completed must be a list of booleans")
        completed = (list(done) + [False] * DUNGEON_COUNT)[:DUNGEON_COUNT]
        return cls(
            flags=_bool_map(raw, "flags"),
            dungeons_completed=completed,
            trading_item=_typed(raw, "trading_item", int, 0),
        )


@dataclass
class SaveData:
    """Everything written to the save file."""

    version: int = 0
    has_sword: bool = False
    max_hp: int = 0
    hp: int = 0
    rupees: int = 0
    keys: int = 0
    collected_items: dict[str, bool] = field(default_factory=dict)
    unlocked_doors: dict[str, bool] = field(default_factory=dict)
    screen_x: int = 0
    screen_y: int = 0
    player_x: float = 0.0
    player_y: float = 0.0
    in_interior: bool = False
    interior_id: str = ""
    boss_defeated: bool = False

    bombs: int = 0
    arrows: int = 0
    sword_level: int = 0
    shield_level: int = 0
    bracelet_level: int = 0
    button_a: int = 0
    button_b: int = 0
    owned_items: list[int] = field(default_factory=list)
    location_type: int = 0
    dungeon_id: str = ""
    dungeon_room_x: int = 0
    dungeon_room_y: int = 0
    quest: Optional[QuestSaveData] = None

    def to_dict(self) -> dict:
        """JSON-ready mapping; empty optional fields are left out."""
        out: dict[str, Any] = {
            "version": self.version,
            "has_sword": self.has_sword,
            "max_hp": self.max_hp,
            "hp": self.hp,
            "rupees": self.rupees,
            "keys": self.keys,
            "collected_items": _sorted_map(self.collected_items),
            "unlocked_doors": _sorted_map(self.unlocked_doors),
            "screen_x": self.screen_x,
            "screen_y": self.screen_y,
            "player_x": self.player_x,
            "player_y": self.player_y,
            "in_interior": self.in_interior,
        }
        if self.interior_id:
            out["interior_id"] = self.interior_id
        out["boss_defeated"] = self.boss_defeated
        optional = [
            ("bombs", self.bombs),
            ("arrows", self.arrows),
            ("sword_level", self.sword_level),
            ("shield_level", self.shield_level),
            ("bracelet_level", self.bracelet_level),
            ("button_a", self.button_a),
            ("button_b", self.button_b),
            ("owned_items", list(self.owned_items)),
            ("location_type", self.location_type),
            ("dungeon_id", self.dungeon_id),
            ("dungeon_room_x", self.dungeon_room_x),
            ("dungeon_room_y", self.dungeon_room_y),
        ]
        out.update((key, value) for key, value in optional if value)
        if self.quest is not None:
            out["quest"] = self.quest.to_dict()
        return out

    @classmethod
    def from_dict(cls, raw: Any) -> "SaveData":
        """Build from decoded JSON; raises TypeError on malformed data."""
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise TypeError("save data must be an object")
        owned = raw.get("owned_items") or []
        if not isinstance(owned, list) or not all(
            isinstance(i, int) and not isinstance(i, bool) for i in owned
        ):
            raise TypeError("owned_items must be a list of integers")
        quest_raw = raw.get("quest")
        return cls(
            version=_typed(raw, "version", int, 0),
            has_sword=_typed(raw, "has_sword", bool, False),
            max_hp=_typed(raw, "max_hp", int, 0),
            hp=_typed(raw, "hp", int, 0),
            rupees=_typed(raw, "rupees", int, 0),
            keys=_typed(raw, "keys", int, 0),
            collected_items=_bool_map(raw, "collected_items"),
            unlocked_doors=_bool_map(raw, "unlocked_doors"),
            screen_x=_typed(raw, "screen_x", int, 0),
            screen_y=_typed(raw, "screen_y", int, 0),
            player_x=_typed(raw, "player_x", float, 0.0),
            player_y=_typed(raw, "player_y", float, 0.0),
            in_interior=_typed(raw, "in_interior", bool, False),
            interior_id=_typed(raw, "interior_id", str, ""),
            boss_defeated=_typed(raw, "boss_defeated", bool, False),
            bombs=_typed(raw, "bombs", int, 0),
            arrows=_typed(raw, "arrows", int, 0),
            sword_level=_typed(raw, "sword_level", int, 0),
            shield_level=_typed(raw, "shield_level", int, 0),
            bracelet_level=_typed(raw, "bracelet_level", int, 0),
            button_a=_typed(raw, "button_a", int, 0),
            button_b=_typed(raw, "button_b", int, 0),
            owned_items=list(owned),
            location_type=_typed(raw, "location_type", int, 0),
            dungeon_id=_typed(raw, "dungeon_id", str, ""),
            dungeon_room_x=_typed(raw, "dungeon_room_x", int, 0),
            dungeon_room_y=_typed(raw, "dungeon_room_y", int, 0),
            quest=None if quest_raw is None else QuestSaveData.from_dict(quest_raw),
        )


def default_save_path() -> Path:
    """Where the game keeps its save file."""
    return Path.home() / ".config" / "glowquest" / "save.json"


def _resolve(path: Optional[PathLike]) -> Path:
    return Path(path) if path is not None else default_save_path()


def exists(path: Optional[PathLike] = None) -> bool:
    """Whether a save file is present."""
    return _resolve(path).exists()


def load(path: Optional[PathLike] = None) -> Optional[SaveData]:
    """Read a save, upgrading old versions; None if missing or unreadable."""
    try:
        text = _resolve(path).read_text(encoding="utf-8")
    except OSError:
        return None
    try:
        data = SaveData.from_dict(json.loads(text))
    except (ValueError, TypeError):
        return None
    if data.version == 0:
        data.version = 1
    if data.version == 1:
        migrate_v1(data)
    return data


def save(data: SaveData, path: Optional[PathLike] = None) -> None:
    """Write a save file, creating its directory; raises OSError on failure."""
    if data.version == 0:
        data.version = 2
    target = _resolve(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data.to_dict(), indent=2), encoding="utf-8")


def migrate_v1(data: SaveData) -> None:
    """Upgrade a version 1 save: a held sword becomes an owned, equipped item."""
    data.version = 2
    if data.has_sword:
        data.sword_level = 1
        data.owned_items.append(_SWORD_ID)
        if data.button_a == 0:
            data.button_a = _SWORD_ID