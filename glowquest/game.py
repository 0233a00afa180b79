"""The game session: state machine, world, entities and persistence."""

import logging
import re
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

from glowquest import config
from glowquest import save as savefile
from glowquest.audio import Engine
from glowquest.config import new_layout
from glowquest.controls import InputTracker, Key
from glowquest.enemy_ai import SimpleRNG, update_enemy_ai
from glowquest.entities import (
    NPC,
    Direction,
    Enemy,
    EnemyType,
    Item,
    ParticlePool,
    Player,
    Projectile,
)
from glowquest.inventory import EquipItem
from glowquest.loader import build_door_links, load_interiors, load_overworld_meta
from glowquest.overworld import Overworld, load_overworld
from glowquest.physics import (
    aabb_overlap,
    apply_knockback,
    check_enemy_player_collision,
    check_projectile_player_collision,
    check_projectile_sword_collision,
    check_sword_hits,
    move_player,
    proximity_check,
    tile_collision,
)
from glowquest.quest import QuestState
from glowquest.screen import DoorLink, InteriorDef, Screen
from glowquest.spawning import (
    active_dialogue,
    apply_item_effect,
    roll_drop,
    spawn_enemy,
    spawn_items,
    spawn_npcs,
)
from glowquest.tiles import Tile
from glowquest.transition import Transition, TransitionType
from glowquest.ui_state import DialogueState, GameState, main_menu

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

_INTERIOR_PREFIX = "interior:"
_DOOR_KEY = re.compile(r"(-?\d+),(-?\d+)_(-?\d+),(-?\d+)")
_NPC_FLAGS = {
    "tarin": "met_tarin",
    "marin": "talked_marin",
    "meowmeow": "met_meowmeow",
    "librarian": "visited_library",
}
_DEATH_COLOURS = {
    EnemyType.OCTOROK: (200, 50, 50),
    EnemyType.MOBLIN: (160, 100, 50),
    EnemyType.STALFOS: (180, 180, 180),
    EnemyType.BOSS: (100, 40, 120),
}
_INVENTORY_COLUMNS = 5
_INVENTORY_ROWS = 3


class LocationType(IntEnum):
    """What kind of area the player is in."""

    OVERWORLD = 0
    INTERIOR = 1
    DUNGEON = 2


def _equip(value: int):
    try:
        return EquipItem(value)
    except ValueError:
        return value


def _tile_of(v: float) -> int:
    return int(int(v) / config.TILE_SIZE)


class Game:
    """One running game: menus, the world, combat and saving."""

    def __init__(
        self,
        maps_dir: PathLike,
        save_path: Optional[PathLike] = None,
        audio: Optional[Engine] = None,
    ) -> None:
        self.maps_dir = Path(maps_dir)
        self.save_path = Path(save_path) if save_path is not None else savefile.default_save_path()

        self.state = GameState.MENU
        self.player: Optional[Player] = None
        self.overworld: Optional[Overworld] = None
        self.input = InputTracker()
        self.layout = new_layout(config.WINDOW_WIDTH * 4, config.WINDOW_HEIGHT * 4)
        self.transition = Transition()
        self.audio = audio if audio is not None else Engine()

        self.enemies: list[Enemy] = []
        self.projectiles: list[Projectile] = []
        self.items: list[Item] = []
        self.npcs: list[NPC] = []
        self.rng = SimpleRNG(42)

        self.dialogue = DialogueState()

        self.collected_items: dict[str, bool] = {}
        self.unlocked_doors: dict[str, bool] = {}

        self.interiors: dict[str, InteriorDef] = {}
        self.door_links: list[DoorLink] = []
        self.in_interior = False
        self.current_interior: Optional[InteriorDef] = None
        self.return_link: Optional[DoorLink] = None

        self.location = LocationType.OVERWORLD
        self.current_dungeon = None
        self.quest = QuestState()

        self.pending_interior: Optional[InteriorDef] = None
        self.pending_door_link: Optional[DoorLink] = None
        self.pending_exit_link: Optional[DoorLink] = None

        self.menu = main_menu(savefile.exists(self.save_path))
        self.game_over_timer = 0.0
        self.victory_timer = 0.0
        self.should_quit = False

        self.particles = ParticlePool()
        self.shake_timer = 0.0
        self.flash_timer = 0.0

        self.boss_defeated = False

        self.inventory_cursor_x = 0
        self.inventory_cursor_y = 0

    # --- world setup ---

    def _init_world(self) -> None:
        self.overworld = load_overworld(self.maps_dir)
        self.interiors = load_interiors(self.maps_dir)
        self.door_links = build_door_links(self.overworld.screens)

    def _reset_session(self) -> None:
        self.collected_items = {}
        self.unlocked_doors = {}
        self.in_interior = False
        self.current_interior = None
        self.return_link = None
        self.pending_interior = None
        self.pending_door_link = None
        self.pending_exit_link = None
        self.location = LocationType.OVERWORLD
        self.current_dungeon = None
        self.boss_defeated = False
        self.quest = QuestState()
        self.particles = ParticlePool()
        self.shake_timer = 0.0
        self.flash_timer = 0.0
        self.transition = Transition()

    def start_new_game(self) -> None:
        """Begin a fresh game at the map's start position."""
        self._init_world()
        meta = load_overworld_meta(self.maps_dir)
        self.player = Player(x=meta.start_pos[0], y=meta.start_pos[1])
        self._reset_session()
        self.state = GameState.PLAYING
        self.quest.set_flag("game_started")

        interior = self.interiors.get(meta.start_interior) if meta.start_interior else None
        if interior is not None:
            self.in_interior = True
            self.location = LocationType.INTERIOR
            self.current_interior = interior
            p = self.player
            p.x = float(config.PLAY_AREA_WIDTH // 2 - p.width // 2)
            p.y = float(config.PLAY_AREA_HEIGHT // 2 - p.height // 2)
            self.return_link = next(
                (dl for dl in self.door_links if dl.interior_id == meta.start_interior), None
            )
            if self.return_link is None:
                exit_link = next(
                    (dl for dl in interior.door_links if dl.interior_id == "overworld"), None
                )
                if exit_link is not None:
                    exit_x, exit_y = exit_link.exit_x, exit_link.exit_y
                    if exit_x == 0 and exit_y == 0:
                        exit_x, exit_y = meta.start_pos
                    self.return_link = DoorLink(
                        screen_x=meta.start_screen[0],
                        screen_y=meta.start_screen[1],
                        door_tile_x=exit_link.door_tile_x,
                        door_tile_y=exit_link.door_tile_y,
                        interior_id=meta.start_interior,
                        spawn_x=p.x,
                        spawn_y=p.y,
                        exit_x=exit_x,
                        exit_y=exit_y,
                    )

        self._spawn_screen_entities()

    def start_continue(self) -> None:
        """Resume from the save file, or start a new game if there is none."""
        data = savefile.load(self.save_path)
        if data is None:
            self.start_new_game()
            return

        self._init_world()
        self._reset_session()

        p = Player(x=data.player_x, y=data.player_y)
        self.player = p
        inv = p.inventory
        p.has_sword = data.has_sword
        p.max_hp = data.max_hp
        p.hp = data.hp
        inv.rupees = data.rupees
        inv.keys = data.keys

        if data.version >= 2:
            inv.bombs = data.bombs
            inv.arrows = data.arrows
            inv.sword_level = data.sword_level
            inv.shield_level = data.shield_level
            inv.bracelet_level = data.bracelet_level
            inv.button_a = _equip(data.button_a)
            inv.button_b = _equip(data.button_b)
            for item_id in data.owned_items:
                inv.owned_items.add(_equip(item_id))
            if data.quest is not None:
                self.quest.flags = dict(data.quest.flags)
                self.quest.dungeons_completed = list(data.quest.dungeons_completed)
                self.quest.trading_item = data.quest.trading_item

        if p.has_sword and EquipItem.SWORD not in inv.owned_items:
            inv.owned_items.add(EquipItem.SWORD)
            if inv.sword_level == 0:
                inv.sword_level = 1
            if inv.button_a == EquipItem.NONE:
                inv.button_a = EquipItem.SWORD

        self.collected_items = dict(data.collected_items)
        self.unlocked_doors = dict(data.unlocked_doors)
        self.boss_defeated = data.boss_defeated

        self.overworld.current_x = data.screen_x
        self.overworld.current_y = data.screen_y

        if data.in_interior and data.interior_id:
            interior = self.interiors.get(data.interior_id)
            if interior is not None:
                self.in_interior = True
                self.current_interior = interior
                self.location = LocationType.INTERIOR
                self.return_link = next(
                    (dl for dl in self.door_links if dl.interior_id == data.interior_id), None
                )

        self.state = GameState.PLAYING
        self._spawn_screen_entities()

    def save_game(self) -> None:
        """Write the current progress to the save file."""
        p = self.player
        inv = p.inventory
        data = savefile.SaveData(
            version=2,
            has_sword=p.has_sword,
            max_hp=p.max_hp,
            hp=p.hp,
            rupees=inv.rupees,
            keys=inv.keys,
            bombs=inv.bombs,
            arrows=inv.arrows,
            sword_level=inv.sword_level,
            shield_level=inv.shield_level,
            bracelet_level=inv.bracelet_level,
            button_a=int(inv.button_a),
            button_b=int(inv.button_b),
            owned_items=sorted(int(i) for i in inv.owned_items),
            collected_items=dict(self.collected_items),
            unlocked_doors=dict(self.unlocked_doors),
            screen_x=self.overworld.current_x,
            screen_y=self.overworld.current_y,
            player_x=p.x,
            player_y=p.y,
            in_interior=self.in_interior,
            boss_defeated=self.boss_defeated,
            quest=savefile.QuestSaveData(
                flags=dict(self.quest.flags),
                dungeons_completed=list(self.quest.dungeons_completed),
                trading_item=self.quest.trading_item,
            ),
        )
        if self.in_interior and self.current_interior is not None:
            data.interior_id = self.current_interior.interior_id
        try:
            savefile.save(data, self.save_path)
        except OSError as err:
            log.warning("save failed: %s", err)

    # --- input and settings ---

    def key_down(self, key: Key) -> None:
        self.input.key_down(key)

    def key_up(self, key: Key) -> None:
        self.input.key_up(key)

    def on_resize(self, w: int, h: int) -> None:
        self.layout = new_layout(w, h)

    def toggle_mute(self) -> None:
        self.audio.toggle_mute()

    def volume_up(self) -> None:
        self.audio.volume_up()

    def volume_down(self) -> None:
        self.audio.volume_down()

    def _pressed(self, *keys: Key) -> bool:
        return any(self.input.just_pressed(k) for k in keys)

    def _held(self, *keys: Key) -> bool:
        return any(self.input.is_held(k) for k in keys)

    # --- frame update ---

    def update(self, dt: float) -> None:
        """Advance the game by dt seconds."""
        handlers = {
            GameState.MENU: lambda: self._update_menu(),
            GameState.PAUSED: lambda: self._update_paused(),
            GameState.GAME_OVER: lambda: self._update_game_over(dt),
            GameState.VICTORY: lambda: self._update_victory(dt),
            GameState.DIALOGUE: lambda: self._update_dialogue(),
            GameState.INVENTORY: lambda: self._update_inventory(),
            GameState.PLAYING: lambda: self._update_playing(dt),
        }
        handler = handlers.get(self.state)
        if handler is not None:
            handler()
        self.input.update()

    def _update_menu(self) -> None:
        if self._pressed(Key.UP, Key.W):
            self.menu.move_up()
            self.audio.play_menu_select()
        if self._pressed(Key.DOWN, Key.S):
            self.menu.move_down()
            self.audio.play_menu_select()
        if self._pressed(Key.ENTER, Key.SPACE):
            if self.menu.options[self.menu.selected_index].disabled:
                return
            self.audio.play_menu_select()
            if self.menu.selected_index == 0:
                self.start_new_game()
            elif self.menu.selected_index == 1:
                self.start_continue()

    def _update_paused(self) -> None:
        if self._pressed(Key.ESCAPE, Key.ENTER):
            self.state = GameState.PLAYING

    def _back_to_menu(self) -> None:
        self.state = GameState.MENU
        self.menu = main_menu(savefile.exists(self.save_path))

    def _update_game_over(self, dt: float) -> None:
        self.game_over_timer += dt
        if self.game_over_timer >= config.GAME_OVER_DELAY and self._pressed(Key.ENTER, Key.SPACE):
            self._back_to_menu()
            self.game_over_timer = 0.0

    def _update_victory(self, dt: float) -> None:
        self.victory_timer += dt
        if self.victory_timer >= config.VICTORY_DELAY and self._pressed(Key.ENTER, Key.SPACE):
            self._back_to_menu()
            self.victory_timer = 0.0

    def _update_dialogue(self) -> None:
        if self._pressed(Key.SPACE, Key.J) and self.dialogue.advance():
            self.state = GameState.PLAYING

    def _update_inventory(self) -> None:
        if self._pressed(Key.TAB, Key.ESCAPE):
            self.state = GameState.PLAYING

        if self._pressed(Key.UP, Key.W):
            self.inventory_cursor_y = max(self.inventory_cursor_y - 1, 0)
        if self._pressed(Key.DOWN, Key.S):
            self.inventory_cursor_y = min(self.inventory_cursor_y + 1, _INVENTORY_ROWS - 1)
        if self._pressed(Key.LEFT, Key.A):
            self.inventory_cursor_x = max(self.inventory_cursor_x - 1, 0)
        if self._pressed(Key.RIGHT, Key.D):
            self.inventory_cursor_x = min(self.inventory_cursor_x + 1, _INVENTORY_COLUMNS - 1)

        idx = self.inventory_cursor_y * _INVENTORY_COLUMNS + self.inventory_cursor_x
        inv = self.player.inventory
        items = inv.owned_items_list()
        if idx < len(items):
            item = items[idx]
            if self._pressed(Key.J):
                inv.button_a = item
            if self._pressed(Key.K):
                inv.button_b = item

    def _update_playing(self, dt: float) -> None:
        if self._pressed(Key.ENTER):
            self.state = GameState.PAUSED
            return
        if self._pressed(Key.TAB):
            self.state = GameState.INVENTORY
            return

        if self.transition.active:
            self.transition.timer += dt
            if self.transition.done():
                self.transition.active = False
                if self.transition.kind == TransitionType.FADE:
                    self._complete_fade_transition()
                self.transition.old_screen = None
            return

        self.shake_timer = max(self.shake_timer - dt, 0.0) if self.shake_timer > 0 else self.shake_timer
        self.flash_timer = max(self.flash_timer - dt, 0.0) if self.flash_timer > 0 else self.flash_timer

        self.particles.update(dt)
        p = self.player
        p.sword.update(dt)
        if p.inv_timer > 0:
            p.inv_timer = max(p.inv_timer - dt, 0.0)

        if self._pressed(Key.SPACE) and (self._try_interact_npc() or self._try_interact_door()):
            return

        if self._pressed(Key.J) and not p.sword.active:
            self._use_equipped_item(p.inventory.button_a)
        if self._pressed(Key.K) and not p.sword.active:
            self._use_equipped_item(p.inventory.button_b)

        if p.sword.active:
            for e in check_sword_hits(p, self.enemies):
                e.hp -= 1
                e.inv_timer = config.ENEMY_INV_TIME
                apply_knockback(e, p.center_x(), p.center_y())
                if e.hp > 0:
                    self.audio.play_enemy_hit()
                    continue
                e.dead = True
                self.audio.play_enemy_die()
                self._try_drop_item(e)
                self._spawn_death_particles(e)
                if e.kind == EnemyType.BOSS:
                    self.boss_defeated = True
                    self.state = GameState.VICTORY
                    self.victory_timer = 0.0
                    self.save_game()
                    return

        for proj in self.projectiles:
            if not proj.dead and proj.from_enemy and check_projectile_sword_collision(p, proj):
                proj.dead = True

        dx = dy = 0.0
        if self._held(Key.UP, Key.W):
            dy = -1.0
            p.direction = Direction.UP
        if self._held(Key.DOWN, Key.S):
            dy = 1.0
            p.direction = Direction.DOWN
        if self._held(Key.LEFT, Key.A):
            dx = -1.0
            p.direction = Direction.LEFT
        if self._held(Key.RIGHT, Key.D):
            dx = 1.0
            p.direction = Direction.RIGHT

        p.moving = dx != 0 or dy != 0
        if p.moving:
            cross_x, cross_y = move_player(p, self._current_screen(), dx, dy, dt)
            if not self.in_interior:
                self._handle_edge_crossing(cross_x, cross_y)
            else:
                self._clamp_player()

        self._check_door_entry()
        self._update_enemies(dt)
        self._update_projectiles(dt)
        for item in self.items:
            if not item.collected:
                item.update(dt)
        self._check_item_pickup()
        self._check_enemy_collisions()
        self._check_projectile_collisions()
        p.update_animation(dt)

    def _use_equipped_item(self, item) -> None:
        p = self.player
        if item == EquipItem.SWORD and (p.has_sword or p.inventory.sword_level > 0):
            p.sword.start(p.direction)
            self.audio.play_sword_swing()

    # --- movement between screens ---

    def _handle_edge_crossing(self, cross_x: int, cross_y: int) -> None:
        if cross_x != 0:
            dir_x, dir_y = cross_x, 0
        elif cross_y != 0:
            dir_x, dir_y = 0, cross_y
        else:
            return

        if not self.overworld.can_move(dir_x, dir_y):
            self._clamp_player()
            return

        old_screen = self.overworld.current_screen()
        self.overworld.move(dir_x, dir_y)
        p = self.player
        if dir_x == 1:
            p.x = 1.0
        elif dir_x == -1:
            p.x = float(config.PLAY_AREA_WIDTH - p.width) - 1
        if dir_y == 1:
            p.y = 1.0
        elif dir_y == -1:
            p.y = float(config.PLAY_AREA_HEIGHT - p.height) - 1

        self.transition.start(dir_x, dir_y, old_screen)
        self._spawn_screen_entities()
        self.save_game()

    def _clamp_player(self) -> None:
        p = self.player
        p.x = min(max(p.x, 0.0), float(config.PLAY_AREA_WIDTH - p.width))
        p.y = min(max(p.y, 0.0), float(config.PLAY_AREA_HEIGHT - p.height))

    def _current_screen(self) -> Screen:
        if self.in_interior and self.current_interior is not None:
            return self.current_interior.screen
        return self.overworld.current_screen()

    def _overworld_key(self) -> str:
        return f"{self.overworld.current_x},{self.overworld.current_y}"

    def _spawn_screen_entities(self) -> None:
        self.enemies = []
        self.projectiles = []

        if self.in_interior and self.current_interior is not None:
            interior = self.current_interior
            self.enemies = [spawn_enemy(es) for es in interior.enemy_spawns]
            self.items = spawn_items(
                interior.item_spawns, f"int_{interior.interior_id}", self.collected_items
            )
            self.npcs = spawn_npcs(interior.npc_spawns)
            return

        screen = self.overworld.current_screen()
        for door_key in self.unlocked_doors:
            match = _DOOR_KEY.match(door_key)
            if match is None:
                continue
            sx, sy, tx, ty = (int(g) for g in match.groups())
            if (sx, sy) != (self.overworld.current_x, self.overworld.current_y):
                continue
            if 0 <= tx < config.SCREEN_GRID_W and 0 <= ty < config.SCREEN_GRID_H:
                screen.tiles[ty][tx] = Tile.DOOR_OPEN

        self.enemies = [spawn_enemy(es) for es in screen.enemy_spawns]
        self.items = spawn_items(screen.item_spawns, self._overworld_key(), self.collected_items)
        self.npcs = spawn_npcs(screen.npc_spawns)

    # --- entities ---

    def _update_enemies(self, dt: float) -> None:
        screen = self._current_screen()
        for e in self.enemies:
            if e.dead:
                continue
            proj = update_enemy_ai(e, self.player, screen, dt, self.rng)
            if proj is not None:
                self.projectiles.append(proj)

    def _update_projectiles(self, dt: float) -> None:
        screen = self._current_screen()
        for proj in self.projectiles:
            proj.update(dt)
            if tile_collision(screen, proj.x, proj.y, proj.width, proj.height):
                proj.dead = True
        self.projectiles = [proj for proj in self.projectiles if not proj.dead]

    def _check_item_pickup(self) -> None:
        px, py, pw, ph = self.player.bbox()
        if self.in_interior and self.current_interior is not None:
            prefix = f"int_{self.current_interior.interior_id}"
        else:
            prefix = self._overworld_key()

        for index, item in enumerate(self.items):
            if item.collected:
                continue
            if aabb_overlap(px, py, pw, ph, item.x, item.y, float(item.width), float(item.height)):
                item.collected = True
                self.collected_items[f"{prefix}_{index}"] = True
                apply_item_effect(self.player, self.quest, item)
                self.audio.play_item_pickup()
                self.flash_timer = config.FLASH_DURATION
                self.save_game()

    def _try_drop_item(self, enemy: Enemy) -> None:
        item = roll_drop(self.rng, enemy.x, enemy.y)
        if item is not None:
            self.items.append(item)

    def _damage_player(self, amount: int) -> None:
        p = self.player
        p.hp -= amount
        self.audio.play_player_hit()
        self.shake_timer = config.SHAKE_DURATION
        if p.hp <= 0:
            p.hp = 0
            self.state = GameState.GAME_OVER
            self.game_over_timer = 0.0
            self.audio.play_game_over()
            return
        p.inv_timer = config.PLAYER_INV_TIME

    def _check_enemy_collisions(self) -> None:
        if self.player.inv_timer > 0:
            return
        for e in self.enemies:
            if not e.dead and check_enemy_player_collision(self.player, e):
                self._damage_player(1)
                return

    def _check_projectile_collisions(self) -> None:
        if self.player.inv_timer > 0:
            return
        for proj in self.projectiles:
            if proj.dead or not proj.from_enemy:
                continue
            if check_projectile_player_collision(self.player, proj):
                proj.dead = True
                self._damage_player(proj.damage)
                return

    def _spawn_death_particles(self, enemy: Enemy) -> None:
        r, g, b = _DEATH_COLOURS.get(enemy.kind, (0, 0, 0))
        velocities = [((self.rng.next() % 200) - 100) / 2.0 for _ in range(12)]
        self.particles.spawn_explosion(enemy.center_x(), enemy.center_y(), 6, r, g, b, velocities)

    # --- interaction and doors ---

    def _try_interact_npc(self) -> bool:
        p = self.player
        for npc in self.npcs:
            if not proximity_check(
                p.center_x(), p.center_y(), npc.center_x(), npc.center_y(), config.INTERACT_RADIUS
            ):
                continue
            lines = active_dialogue(npc, self.quest, p.inventory)
            self.dialogue.start_with_lines(npc, lines)
            self.state = GameState.DIALOGUE
            flag = _NPC_FLAGS.get(npc.npc_id)
            if flag is not None:
                self.quest.set_flag(flag)
            return True
        return False

    def _try_interact_door(self) -> bool:
        if self.in_interior:
            return False
        p = self.player
        tx = _tile_of(p.center_x()) + int(p.direction.dx())
        ty = _tile_of(p.center_y()) + int(p.direction.dy())
        if not (0 <= tx < config.SCREEN_GRID_W and 0 <= ty < config.SCREEN_GRID_H):
            return False
        screen = self.overworld.current_screen()
        if screen.tile_at(tx, ty) != Tile.DOOR_LOCKED or p.inventory.keys <= 0:
            return False
        p.inventory.keys -= 1
        screen.tiles[ty][tx] = Tile.DOOR_OPEN
        self.unlocked_doors[f"{self._overworld_key()}_{tx},{ty}"] = True
        self.audio.play_door_open()
        self.save_game()
        return True

    def _begin_fade(self) -> None:
        self.transition.start_fade()
        self.audio.play_door_open()

    def _check_door_entry(self) -> None:
        if self.transition.active:
            return
        px = _tile_of(self.player.center_x())
        py = _tile_of(self.player.center_y())
        doorways = (Tile.STAIRS, Tile.DOOR_OPEN)

        if self.in_interior:
            tile = self.current_interior.screen.tile_at(px, py)
            if tile not in doorways:
                return
            for dl in self.current_interior.door_links:
                if (dl.door_tile_x, dl.door_tile_y) != (px, py):
                    continue
                target = dl.interior_id
                if len(target) > len(_INTERIOR_PREFIX) and target.startswith(_INTERIOR_PREFIX):
                    target = target[len(_INTERIOR_PREFIX):]
                if target == "overworld":
                    self.pending_exit_link = self.return_link
                    self._begin_fade()
                    return
                interior = self.interiors.get(target)
                if interior is None:
                    continue
                self.pending_interior = interior
                self.pending_door_link = dl
                self._begin_fade()
                return
            if self.return_link is not None:
                self.pending_exit_link = self.return_link
                self._begin_fade()
            return

        tile = self.overworld.current_screen().tile_at(px, py)
        if tile not in doorways:
            return
        here = (self.overworld.current_x, self.overworld.current_y)
        for dl in self.door_links:
            if (dl.screen_x, dl.screen_y) != here or (dl.door_tile_x, dl.door_tile_y) != (px, py):
                continue
            interior = self.interiors.get(dl.interior_id)
            if interior is None:
                continue
            self.pending_interior = interior
            self.pending_door_link = dl
            self._begin_fade()
            return

    def _complete_fade_transition(self) -> None:
        p = self.player
        if self.pending_interior is not None:
            self.in_interior = True
            self.location = LocationType.INTERIOR
            self.current_interior = self.pending_interior
            self.return_link = self.pending_door_link
            p.x = self.pending_door_link.spawn_x
            p.y = self.pending_door_link.spawn_y
            self.pending_interior = None
            self.pending_door_link = None
            self._spawn_screen_entities()
            self.save_game()
        elif self.pending_exit_link is not None:
            self.in_interior = False
            self.location = LocationType.OVERWORLD
            self.current_interior = None
            p.x = self.pending_exit_link.exit_x
            p.y = self.pending_exit_link.exit_y
            self.pending_exit_link = None
            self.return_link = None
            self._spawn_screen_entities()
            self.save_game()