"""Creating entities from map spawn points, item effects and drops."""

from typing import Iterable, Mapping, Optional

from glowquest.config import TILE_SIZE
from glowquest.enemy_ai import SimpleRNG
from glowquest.entities import (
    NPC,
    Direction,
    Enemy,
    EnemyType,
    Item,
    ItemType,
    Player,
    make_boss,
    make_moblin,
    make_octorok,
    make_stalfos,
)
from glowquest.inventory import EquipItem, Inventory
from glowquest.quest import QuestState, check_condition
from glowquest.screen import EnemySpawn, ItemSpawn, NPCSpawn

_ENEMY_FACTORIES = {
    EnemyType.MOBLIN: make_moblin,
    EnemyType.STALFOS: make_stalfos,
    EnemyType.BOSS: make_boss,
}


def _item_kind(value: int):
    try:
        return ItemType(value)
    except ValueError:
        return value


def _direction(value: int):
    try:
        return Direction(value)
    except ValueError:
        return value


def spawn_enemy(spawn: EnemySpawn) -> Enemy:
    """An enemy placed on its spawn tile; unknown types become Octoroks."""
    x = float(spawn.tile_x * TILE_SIZE) + 1
    y = float(spawn.tile_y * TILE_SIZE) + 1
    factory = _ENEMY_FACTORIES.get(spawn.kind, make_octorok)
    return factory(x, y)


def spawn_items(spawns: Iterable[ItemSpawn], key_prefix: str, collected: Mapping[str, bool]) -> list[Item]:
    """Items for the spawn points whose "<prefix>_<index>" key is not collected."""
    return [
        Item(
            kind=_item_kind(spawn.kind),
            x=float(spawn.tile_x * TILE_SIZE) + 2,
            y=float(spawn.tile_y * TILE_SIZE) + 2,
        )
        for index, spawn in enumerate(spawns)
        if not collected.get(f"{key_prefix}_{index}", False)
    ]


def spawn_npcs(spawns: Iterable[NPCSpawn]) -> list[NPC]:
    """NPCs placed on their spawn tiles."""
    return [
        NPC(
            npc_id=spawn.npc_id,
            x=float(spawn.tile_x * TILE_SIZE) + 1,
            y=float(spawn.tile_y * TILE_SIZE) + 1,
            direction=_direction(spawn.direction),
            name=spawn.name,
            dialogue=spawn.dialogue,
            dialogues=spawn.conditional_dialogues,
        )
        for spawn in spawns
    ]


def apply_item_effect(player: Player, quest: QuestState, item: Item) -> None:
    """Give the player what a picked-up item grants."""
    inv = player.inventory
    if item.kind == ItemType.HEART:
        player.hp = min(player.hp + 2, player.max_hp)
    elif item.kind == ItemType.RUPEE:
        inv.rupees += 1
    elif item.kind == ItemType.KEY:
        inv.keys += 1
    elif item.kind == ItemType.SWORD:
        player.has_sword = True
        inv.owned_items.add(EquipItem.SWORD)
        if inv.sword_level == 0:
            inv.sword_level = 1
        if inv.button_a == EquipItem.NONE:
            inv.button_a = EquipItem.SWORD
        quest.set_flag("got_sword")
    elif item.kind == ItemType.HEART_CONTAINER:
        player.max_hp += 2
        player.hp = player.max_hp


def roll_drop(rng: SimpleRNG, x: float, y: float) -> Optional[Item]:
    """Half the time nothing; otherwise a heart or a rupee in equal measure."""
    roll = rng.next() % 100
    if roll >= 50:
        return None
    kind = ItemType.HEART if roll < 25 else ItemType.RUPEE
    return Item(kind=kind, x=x, y=y)


def active_dialogue(npc: NPC, quest: QuestState, inventory: Inventory) -> list[str]:
    """The first conditional dialogue whose condition holds, else the default."""
    for option in npc.dialogues:
        if check_condition(option.condition, quest, inventory):
            return option.lines
    return npc.dialogue