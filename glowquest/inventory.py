"""Equippable items and the player's inventory."""

from dataclasses import dataclass, field
from enum import IntEnum


class EquipItem(IntEnum):
    """Items that can be bound to the A and B buttons."""

    NONE = 0
    SWORD = 1
    SHIELD = 2
    BOW = 3
    BOMB = 4
    ROCS_FEATHER = 5
    PEGASUS_BOOTS = 6
    POWER_BRACELET = 7
    FLIPPERS = 8
    HOOKSHOT = 9
    MAGIC_ROD = 10
    BOOMERANG = 11
    OCARINA = 12
    SHOVEL = 13
    MAGIC_POWDER = 14


_ITEM_NAMES = {
    EquipItem.SWORD: "Sword",
    EquipItem.SHIELD: "Shield",
    EquipItem.BOW: "Bow",
    EquipItem.BOMB: "Bombs",
    EquipItem.ROCS_FEATHER: "Feather",
    EquipItem.PEGASUS_BOOTS: "Boots",
    EquipItem.POWER_BRACELET: "Bracelet",
    EquipItem.FLIPPERS: "Flippers",
    EquipItem.HOOKSHOT: "Hookshot",
    EquipItem.MAGIC_ROD: "Magic Rod",
    EquipItem.BOOMERANG: "Boomerang",
    EquipItem.OCARINA: "Ocarina",
    EquipItem.SHOVEL: "Shovel",
    EquipItem.MAGIC_POWDER: "Powder",
}


def equip_item_name(item_id: int) -> str:
    """Display name of an item, or an empty string for none or unknown ids."""
    return _ITEM_NAMES.get(item_id, "")


@dataclass
class Inventory:
    """All items, ammunition and equipment the player carries."""

    rupees: int = 0
    keys: int = 0
    bombs: int = 0
    bombs_max: int = 30
    arrows: int = 0
    arrows_max: int = 30

    owned_items: set[EquipItem] = field(default_factory=set)
    button_a: EquipItem = EquipItem.NONE
    button_b: EquipItem = EquipItem.NONE
    sword_level: int = 0
    shield_level: int = 0
    bracelet_level: int = 0

    instruments: list[bool] = field(default_factory=lambda: [False] * 8)
    secret_seashells: int = 0
    trading_item: int = 0
    songs: list[bool] = field(default_factory=lambda: [False] * 3)

    def owned_items_list(self) -> list[EquipItem]:
        """Owned equippable items in id order."""
        return [item for item in EquipItem if item != EquipItem.NONE and item in self.owned_items]