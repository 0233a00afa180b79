"""Quest progress and the condition strings that depend on it."""

from dataclasses import dataclass, field
from typing import Callable

from glowquest.inventory import EquipItem, Inventory

DUNGEON_COUNT = 9


@dataclass
class QuestState:
    """All persistent quest progress."""

    flags: dict[str, bool] = field(default_factory=dict)
    dungeons_completed: list[bool] = field(default_factory=lambda: [False] * DUNGEON_COUNT)
    trading_item: int = 0
    seashells_collected: set[str] = field(default_factory=set)
    heart_pieces: set[str] = field(default_factory=set)
    warp_points: set[str] = field(default_factory=set)

    def set_flag(self, key: str) -> None:
        self.flags[key] = True

    def has_flag(self, key: str) -> bool:
        return self.flags.get(key, False)

    def is_dungeon_complete(self, dungeon_num: int) -> bool:
        """Whether dungeon 1..9 is done; other numbers are never complete."""
        if not 1 <= dungeon_num <= DUNGEON_COUNT:
            return False
        return self.dungeons_completed[dungeon_num - 1]

    def complete_dungeon(self, dungeon_num: int) -> None:
        """Mark dungeon 1..9 as done; other numbers are ignored."""
        if 1 <= dungeon_num <= DUNGEON_COUNT:
            self.dungeons_completed[dungeon_num - 1] = True


def _owns(item: EquipItem) -> Callable[[Inventory], bool]:
    return lambda inv: item in inv.owned_items


_ITEM_CHECKS: dict[str, Callable[[Inventory], bool]] = {
    "sword": lambda inv: inv.sword_level > 0,
    "shield": lambda inv: inv.shield_level > 0,
    "bow": _owns(EquipItem.BOW),
    "bombs": _owns(EquipItem.BOMB),
    "rocs_feather": _owns(EquipItem.ROCS_FEATHER),
    "pegasus_boots": _owns(EquipItem.PEGASUS_BOOTS),
    "power_bracelet": lambda inv: inv.bracelet_level > 0,
    "flippers": _owns(EquipItem.FLIPPERS),
    "hookshot": _owns(EquipItem.HOOKSHOT),
    "magic_rod": _owns(EquipItem.MAGIC_ROD),
    "boomerang": _owns(EquipItem.BOOMERANG),
    "ocarina": _owns(EquipItem.OCARINA),
}


def _dungeon_number(text: str) -> int:
    num = 0
    for ch in text:
        if "0" <= ch <= "9":
            num = num * 10 + int(ch)
    return num


def check_condition(cond: str, quest: QuestState, inv: Inventory) -> bool:
    """Evaluate a condition such as "flag:key", "!flag:key", "item:name" or "dungeon:N".

    An empty condition always holds; an unrecognised one never does
    (so its negation always does).
    """
    if cond == "":
        return True
    negate = cond.startswith("!")
    body = cond[1:] if negate else cond

    result = False
    if body.startswith("flag:"):
        result = quest.has_flag(body[len("flag:"):])
    elif body.startswith("item:"):
        check = _ITEM_CHECKS.get(body[len("item:"):])
        result = check(inv) if check is not None else False
    elif body.startswith("dungeon:"):
        result = quest.is_dungeon_complete(_dungeon_number(body[len("dungeon:"):]))

    return not result if negate else result