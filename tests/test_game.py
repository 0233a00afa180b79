import json

import pytest

from glowquest import config
from glowquest.config import new_layout
from glowquest.controls import Key
from glowquest.entities import Direction
from glowquest.game import Game, LocationType
from glowquest.inventory import EquipItem
from glowquest.loader import DIALOGUE_TABLE
from glowquest.tiles import Tile
from glowquest.ui_state import GameState


def grid(overrides=None):
    rows = [[0] * config.SCREEN_GRID_W for _ in range(config.SCREEN_GRID_H)]
    for (x, y), value in (overrides or {}).items():
        rows[y][x] = value
    return rows


def make_game(tmp_path, screens, interiors=None, start_screen=(0, 0), start=(100.0, 100.0)):
    maps = tmp_path / "maps"
    (maps / "overworld").mkdir(parents=True)
    (maps / "interiors").mkdir()
    meta = {
        "width": 2,
        "height": 1,
        "start_screen": {"x": start_screen[0], "y": start_screen[1]},
        "start_pos": {"x": start[0], "y": start[1]},
    }
    (maps / "overworld.json").write_text(json.dumps(meta))
    (maps / "overworld" / "row0.json").write_text(json.dumps({"row": 0, "screens": screens}))
    if interiors:
        (maps / "interiors" / "houses.json").write_text(json.dumps({"interiors": interiors}))
    return Game(maps, save_path=tmp_path / "save.json")


def two_screens(first=None):
    screen0 = {"col": 0}
    screen0.update(first or {})
    return [screen0, {"col": 1}]


def press(game, key, dt=0.01):
    game.key_down(key)
    game.update(dt)
    game.key_up(key)


def arm_sword(game):
    inv = game.player.inventory
    game.player.has_sword = True
    inv.sword_level = 1
    inv.owned_items.add(EquipItem.SWORD)
    inv.button_a = EquipItem.SWORD


def test_menu_starts_new_game(tmp_path):
    game = make_game(tmp_path, two_screens())
    assert game.state == GameState.MENU
    assert game.menu.options[1].disabled
    press(game, Key.ENTER)
    assert game.state == GameState.PLAYING
    assert (game.player.x, game.player.y) == (100.0, 100.0)
    assert game.quest.has_flag("game_started")
    assert game.location == LocationType.OVERWORLD


def test_menu_skips_disabled_continue(tmp_path):
    game = make_game(tmp_path, two_screens())
    press(game, Key.DOWN)
    assert game.menu.selected_index == 0


def test_save_and_continue_round_trip(tmp_path):
    game = make_game(tmp_path, two_screens())
    game.start_new_game()
    game.player.inventory.rupees = 42
    game.player.x = 50.0
    game.save_game()

    other = Game(game.maps_dir, save_path=game.save_path)
    assert not other.menu.options[1].disabled
    other.start_continue()
    assert other.state == GameState.PLAYING
    assert other.player.inventory.rupees == 42
    assert other.player.x == 50.0
    assert other.quest.has_flag("game_started")


def test_continue_without_save_starts_new_game(tmp_path):
    game = make_game(tmp_path, two_screens())
    game.start_continue()
    assert game.state == GameState.PLAYING
    assert game.quest.has_flag("game_started")


def test_picking_up_sword(tmp_path):
    game = make_game(tmp_path, two_screens({"items": [{"type": "sword", "x": 6, "y": 6}]}))
    game.start_new_game()
    game.update(0.01)
    inv = game.player.inventory
    assert game.player.has_sword
    assert inv.button_a == EquipItem.SWORD
    assert game.quest.has_flag("got_sword")
    assert game.collected_items == {"0,0_0": True}

    game.start_continue()
    assert game.items == []
    assert game.player.has_sword


def test_enemy_contact_damages_player(tmp_path):
    game = make_game(tmp_path, two_screens({"enemies": [{"type": "octorok", "x": 6, "y": 6}]}))
    game.start_new_game()
    max_hp = game.player.max_hp
    game.update(0.05)
    assert game.player.hp == max_hp - 1
    assert game.player.inv_timer == config.PLAYER_INV_TIME
    assert game.shake_timer == config.SHAKE_DURATION


def test_lethal_damage_ends_game_and_returns_to_menu(tmp_path):
    game = make_game(tmp_path, two_screens({"enemies": [{"type": "octorok", "x": 6, "y": 6}]}))
    game.start_new_game()
    game.player.hp = 1
    game.update(0.05)
    assert game.state == GameState.GAME_OVER
    assert game.player.hp == 0
    press(game, Key.ENTER, dt=config.GAME_OVER_DELAY)
    assert game.state == GameState.MENU


def test_sword_hits_enemy(tmp_path):
    game = make_game(tmp_path, two_screens({"enemies": [{"type": "stalfos", "x": 6, "y": 7}]}))
    game.start_new_game()
    arm_sword(game)
    game.player.direction = Direction.DOWN
    enemy = game.enemies[0]
    press(game, Key.J)
    assert game.player.sword.active
    assert enemy.hp == enemy.max_hp - 1


def test_killing_boss_is_victory(tmp_path):
    game = make_game(tmp_path, two_screens({"enemies": [{"type": "boss", "x": 6, "y": 7}]}))
    game.start_new_game()
    arm_sword(game)
    game.player.direction = Direction.DOWN
    game.enemies[0].hp = 1
    press(game, Key.J)
    assert game.state == GameState.VICTORY
    assert game.boss_defeated
    assert game.enemies[0].dead
    assert game.save_path.exists()


def test_pause_and_resume(tmp_path):
    game = make_game(tmp_path, two_screens())
    game.start_new_game()
    press(game, Key.ENTER)
    assert game.state == GameState.PAUSED
    press(game, Key.ESCAPE)
    assert game.state == GameState.PLAYING


def test_inventory_assigns_b_button(tmp_path):
    game = make_game(tmp_path, two_screens())
    game.start_new_game()
    game.player.inventory.owned_items.add(EquipItem.SWORD)
    press(game, Key.TAB)
    assert game.state == GameState.INVENTORY
    press(game, Key.K)
    assert game.player.inventory.button_b == EquipItem.SWORD
    press(game, Key.TAB)
    assert game.state == GameState.PLAYING


def test_crossing_left_edge_changes_screen(tmp_path):
    game = make_game(tmp_path, two_screens(), start_screen=(1, 0))
    game.start_new_game()
    game.player.x = 0.5
    game.key_down(Key.LEFT)
    game.update(0.05)
    assert game.overworld.current_x == 0
    assert game.player.x == float(config.PLAY_AREA_WIDTH - game.player.width) - 1
    assert game.transition.active
    assert game.save_path.exists()


def test_edge_without_neighbour_clamps(tmp_path):
    game = make_game(tmp_path, two_screens())
    game.start_new_game()
    game.player.x = 0.5
    game.key_down(Key.LEFT)
    game.update(0.05)
    assert game.overworld.current_x == 0
    assert game.player.x == 0.0
    assert not game.transition.active


def test_npc_conversation(tmp_path):
    npc = {
        "id": "tarin",
        "x": 6,
        "y": 7,
        "name": "Tarin",
        "dialogue_key": "tarin_intro",
        "dialogues": [{"key": "tarin_has_sword", "condition": "flag:got_sword"}],
    }
    game = make_game(tmp_path, two_screens({"npcs": [npc]}))
    game.start_new_game()
    press(game, Key.SPACE)
    assert game.state == GameState.DIALOGUE
    assert game.dialogue.lines == DIALOGUE_TABLE["tarin_intro"]
    assert game.quest.has_flag("met_tarin")
    press(game, Key.SPACE)
    assert game.state == GameState.PLAYING

    game.quest.set_flag("got_sword")
    press(game, Key.SPACE)
    assert game.dialogue.lines == DIALOGUE_TABLE["tarin_has_sword"]


def test_unlocking_door_persists(tmp_path):
    screen = {"tiles": grid({(6, 7): int(Tile.DOOR_LOCKED)})}
    game = make_game(tmp_path, two_screens(screen))
    game.start_new_game()
    game.player.direction = Direction.DOWN
    game.player.inventory.keys = 1
    press(game, Key.SPACE)
    assert game.player.inventory.keys == 0
    assert game.overworld.current_screen().tile_at(6, 7) == Tile.DOOR_OPEN
    assert game.unlocked_doors == {"0,0_6,7": True}

    game.start_continue()
    assert game.overworld.current_screen().tile_at(6, 7) == Tile.DOOR_OPEN


def test_locked_door_needs_key(tmp_path):
    screen = {"tiles": grid({(6, 7): int(Tile.DOOR_LOCKED)})}
    game = make_game(tmp_path, two_screens(screen))
    game.start_new_game()
    game.player.direction = Direction.DOWN
    press(game, Key.SPACE)
    assert game.overworld.current_screen().tile_at(6, 7) == Tile.DOOR_LOCKED
    assert game.unlocked_doors == {}


def test_entering_and_leaving_interior(tmp_path):
    screen = {
        "tiles": grid({(6, 6): int(Tile.DOOR_OPEN)}),
        "warps": [
            {"x": 6, "y": 6, "target": "interior:house", "sx": 120, "sy": 150, "ex": 100, "ey": 130}
        ],
    }
    interior = {
        "id": "house",
        "tiles": grid({(7, 9): int(Tile.STAIRS)}),
        "warps": [{"x": 7, "y": 9, "target": "overworld"}],
    }
    game = make_game(tmp_path, two_screens(screen), interiors=[interior])
    game.start_new_game()

    game.update(0.01)
    assert game.transition.active
    game.update(1.0)
    assert game.in_interior
    assert game.location == LocationType.INTERIOR
    assert game.current_interior.interior_id == "house"
    assert (game.player.x, game.player.y) == (120.0, 150.0)

    game.player.x = 112.0
    game.player.y = 144.0
    game.update(0.01)
    assert game.transition.active
    game.update(1.0)
    assert not game.in_interior
    assert game.location == LocationType.OVERWORLD
    assert (game.player.x, game.player.y) == (100.0, 130.0)


def test_resize_and_audio_controls(tmp_path):
    game = make_game(tmp_path, two_screens())
    game.on_resize(800, 600)
    assert game.layout == new_layout(800, 600)
    game.toggle_mute()
    assert game.audio.muted
    game.volume_down()
    assert game.audio.volume == pytest.approx(0.9)
    game.volume_up()
    game.volume_up()
    assert game.audio.volume == 1.0