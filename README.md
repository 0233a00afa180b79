# glowquest

This package holds the game logic of a small top-down action adventure.
It is a plain Python library and needs nothing outside the standard
library.

The play area is a grid of 16 × 12 tiles, each 16 pixels square. A
32-pixel HUD sits above it, so the logical window is 256 × 224. The
player walks an overworld made of such screens and enters interiors
through doors and stairs. Along the way they fight Octoroks, Moblins,
Stalfos and a boss with a sword, pick up hearts, rupees, keys, a sword
and heart containers, talk to NPCs, and have their progress saved as
JSON.

## Modules

- `glowquest.config`: the game constants, plus `new_layout(win_w, win_h)`.
  It returns a `Layout` (`scale`, `offset_x`, `offset_y`) that fits the
  logical window into a real window. The scale is never below 1 and the
  result is centred.
- `glowquest.tiles`: the `Tile` kinds, `tile_from_char` for text maps,
  and `tile_props`. `tile_props` returns a `TileProperties` record:
  passable, swimmable, cuttable, liftable, bombable, damaging, slow
  factor, slippery, conveyor and ledge data. Any tile not listed counts
  as solid.
- `glowquest.screen`: `Screen`, with `load_from_string` and `tile_at`.
  Anything outside the grid counts as wall. The module also holds the
  spawn records (`EnemySpawn`, `ItemSpawn`, `NPCSpawn`), `ScreenWarp`,
  `DoorLink` and `InteriorDef`.
- `glowquest.entities`: `Player`, `Enemy`, `Item`, `NPC`,
  `DialogueOption`, `Projectile`, `SwordSwing`, `Particle`,
  `ParticlePool`, `Boss` and the `Direction`, `EnemyType`, `ItemType` and
  `BossID` enums. It also has the factories `make_octorok`,
  `make_moblin`, `make_stalfos`, `make_boss`, `enemy_projectile` and
  `boss_data`.
- `glowquest.inventory`: `EquipItem`, `Inventory` with
  `owned_items_list()`, and `equip_item_name`.
- `glowquest.physics`: AABB overlap, the proximity check, tile collision,
  sword hits, knockback, the enemy, projectile and sword collision
  checks, and `move_player`. `move_player` returns `(cross_x, cross_y)`,
  which is non-zero when the player has walked off a screen edge.
- `glowquest.enemy_ai`: `update_enemy_ai`, which covers wandering,
  shooting Octoroks, chasing Moblins and Stalfos, and the boss's
  wander, charge and burst-fire cycle. The AI draws on `SimpleRNG`, a
  deterministic 32-bit xorshift generator. The module also holds the
  `EnemyDef` table behind `get_enemy_def`.
- `glowquest.controls`: `Key`, `InputTracker`, which tells held keys from
  keys just pressed this frame, and `use_item` with its
  `ItemUseResult`.
- `glowquest.quest`: `QuestState`, holding flags and nine dungeon
  completion slots, and `check_condition`. A condition takes one of the
  forms `flag:key`, `!flag:key`, `item:name` or `dungeon:N`. An empty
  condition always holds.
- `glowquest.loader`: reads maps from a directory of JSON files. It has
  `load_overworld_meta`, `load_overworld_screens`, `load_interiors`,
  `build_door_links`, `resolve_enemy_type`, `resolve_item_type` and the
  `DIALOGUE_TABLE` of NPC lines.
- `glowquest.overworld`: `Overworld` and `load_overworld`, for finding
  and moving between screens.
- `glowquest.ui_state`: `GameState`, the title menu (`main_menu`,
  `MenuState`, `MenuOption`) and `DialogueState`. The dialogue shows
  three lines to a page.
- `glowquest.transition`: `Transition`, which scrolls between screens or
  fades to black and back, and `ease_in_out`.
- `glowquest.save`: `SaveData` and `QuestSaveData`, with their JSON form.
  The module offers `load`, `save`, `exists`, `default_save_path`
  (`~/.config/glowquest/save.json`) and `migrate_v1`. Every function
  takes an optional path.
- `glowquest.synth`: eight sound effects synthesized in code as 16-bit
  mono little-endian PCM at 44.1 kHz.
- `glowquest.audio`: `Engine`, with mute and volume controls (`scaled`
  applies the volume to a buffer).
- `glowquest.spawning`: builds enemies, items and NPCs from spawn points.
  It also holds the item pick-up effects, the random drop on an enemy's
  death, and the choice of which dialogue an NPC speaks.
- `glowquest.game`: `Game`, which ties all of the above together.

## Examples

```python
from glowquest.config import new_layout
from glowquest.inventory import Inventory
from glowquest.quest import QuestState, check_condition
from glowquest.synth import generate_menu_select
from glowquest.transition import ease_in_out

layout = new_layout(1024, 896)          # scale 4.0, no offset

quest = QuestState()
inventory = Inventory()
quest.set_flag("met_tarin")
check_condition("flag:met_tarin", quest, inventory)   # True
check_condition("!flag:met_tarin", quest, inventory)  # False
check_condition("item:sword", quest, inventory)       # False until sword_level > 0

ease_in_out(0.5)                        # 0.5

blip = generate_menu_select()           # 0.05 s of PCM
len(blip)                               # 4410 bytes
```

## Running a game

```python
from glowquest.audio import Engine
from glowquest.controls import Key
from glowquest.game import Game

game = Game("path/to/maps", save_path="save.json", audio=Engine(sink=my_player))
game.key_down(Key.ENTER)
game.update(1 / 60)        # on the title menu: starts a new game
game.key_up(Key.ENTER)
```

Each frame the front end does three things. First it passes key events
to `key_down` and `key_up`. Then it calls `update(dt)`. Then it reads
back the state to show: `state`, `player`, `enemies`, `items`, `npcs`,
`projectiles`, `particles`, `dialogue`, `transition`, `menu`,
`shake_timer`, `flash_timer` and the inventory cursor.

The keys work as follows while playing:

- Arrows or WASD move.
- Space talks to a nearby NPC or unlocks a locked door with a key.
- J uses the item on button A and K uses the item on button B.
- Enter pauses and Tab opens the inventory.

In the inventory, J and K assign the selected item to buttons A and B.
`toggle_mute`, `volume_up`, `volume_down` and `on_resize` are there for
the front end to call. The game saves by itself when the player changes
screen, goes through a door, picks up an item, unlocks a door or beats
the boss. It logs a save failure and carries on.

### Map files

The maps directory holds three kinds of file:

- `overworld.json`: `width`, `height`, `start_screen` `{x, y}`,
  `start_pos` `{x, y}` and an optional `start_interior`.
- `overworld/*.json`: one file per row, `{"row": N, "screens": [...]}`.
  Each screen has a `col`, a `tiles` grid of tile numbers, and
  optionally `enemies`, `items`, `npcs` and `warps`.
- `interiors/*.json`: `{"interiors": [...]}`. Each interior has an `id`,
  `tiles`, `enemies`, `items`, `npcs` and `warps`.

Enemies and items are `{type, x, y}`. The type is a number or a name
such as `"moblin"` or `"heart_container"`. NPCs take `id`, `x`, `y`,
`dir`, `name`, a `dialogue_key` from `DIALOGUE_TABLE` and optional
conditional `dialogues` `[{key, condition}]`. Warps are
`{x, y, target, sx, sy, ex, ey}`. On the overworld the target is
`"interior:ID"`. Inside an interior it is `"overworld"` or another
interior. Files that cannot be read or parsed are logged and skipped.

## What the package does not do

- It draws nothing, opens no window and reads no keyboard. A front end
  must supply all three.
- It ships no map files. `Game` needs a maps directory in the format
  above.
- `Engine` plays nothing by itself. It hands PCM buffers to the `sink`
  callable it is given, and without one it stays silent.
- There is no command to run.
- Dungeons, boss phases and items other than the sword are not part of
  the game rules yet. Using any other item does nothing.