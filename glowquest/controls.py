"""Keyboard state tracking and the effect of using an equipped item."""

from dataclasses import dataclass, field
from enum import IntEnum, auto

from glowquest.entities import Player
from glowquest.inventory import EquipItem


class Key(IntEnum):
    """Keys the game responds to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    W = auto()
    A = auto()
    S = auto()
    D = auto()
    J = auto()
    K = auto()
    M = auto()
    ENTER = auto()
    SPACE = auto()
    ESCAPE = auto()
    TAB = auto()
    EQUAL = auto()
    MINUS = auto()
    F11 = auto()


@dataclass
class InputTracker:
    """Which keys are held, and which went down since the last update."""

    _held: dict[Key, bool] = field(default_factory=dict)
    _just_pressed: set[Key] = field(default_factory=set)

    def key_down(self, key: Key) -> None:
        if not self._held.get(key, False):
            self._just_pressed.add(key)
        self._held[key] = True

    def key_up(self, key: Key) -> None:
        self._held[key] = False
        self._just_pressed.discard(key)

    def is_held(self, key: Key) -> bool:
        return self._held.get(key, False)

    def just_pressed(self, key: Key) -> bool:
        return key in self._just_pressed

    def update(self) -> None:
        """End the frame: forget which keys were just pressed."""
        self._just_pressed.clear()


@dataclass(frozen=True)
class ItemUseResult:
    """What the game should do after an item is used."""

    used_item: EquipItem = EquipItem.NONE
    sword_swing: bool = False


def use_item(item: EquipItem, player: Player) -> ItemUseResult:
    """Work out the action for an equipped item; only the sword does anything yet."""
    if item == EquipItem.SWORD and (player.inventory.sword_level > 0 or player.has_sword):
        return ItemUseResult(used_item=item, sword_swing=True)
    return ItemUseResult()