import pytest

from glowquest.config import KNOCKBACK_DIST, KNOCKBACK_TIME, PLAYER_SPEED
from glowquest.entities import Direction, Player, enemy_projectile, make_moblin
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
    update_knockback,
)
from glowquest.screen import Screen
from glowquest.tiles import Tile


def test_aabb_overlap():
    assert aabb_overlap(0, 0, 10, 10, 5, 5, 10, 10) is True
    assert aabb_overlap(0, 0, 10, 10, 10, 0, 10, 10) is False
    assert aabb_overlap(0, 0, 10, 10, 0, 20, 10, 10) is False


def test_proximity_inclusive():
    assert proximity_check(0, 0, 3, 4, 5) is True
    assert proximity_check(0, 0, 3, 4, 4.9) is False


def test_tile_collision_empty_screen():
    assert tile_collision(Screen(), 100, 100, 14, 14) is False


def test_tile_collision_with_wall():
    screen = Screen()
    screen.tiles[2][2] = Tile.WALL
    assert tile_collision(screen, 32, 32, 14, 14) is True
    assert tile_collision(screen, 16, 32, 16, 16) is False


def test_tile_collision_outside_right_is_wall():
    assert tile_collision(Screen(), 250, 50, 14, 14) is True


def test_sword_hits():
    player = Player(50, 50)
    near = make_moblin(50, 66)
    far = make_moblin(150, 150)
    assert check_sword_hits(player, [near, far]) == []
    player.sword.start(Direction.DOWN)
    assert check_sword_hits(player, [near, far]) == [near]
    near.inv_timer = 0.2
    assert check_sword_hits(player, [near]) == []
    near.inv_timer = 0
    near.dead = True
    assert check_sword_hits(player, [near]) == []


def test_apply_knockback_direction():
    enemy = make_moblin(100, 100)
    apply_knockback(enemy, enemy.center_x() - 10, enemy.center_y())
    assert enemy.knockback_x == pytest.approx(KNOCKBACK_DIST / KNOCKBACK_TIME)
    assert enemy.knockback_y == pytest.approx(0.0)
    assert enemy.knockback_timer == KNOCKBACK_TIME


def test_apply_knockback_coincident_pushes_down():
    enemy = make_moblin(100, 100)
    apply_knockback(enemy, enemy.center_x(), enemy.center_y())
    assert enemy.knockback_x == 0
    assert enemy.knockback_y == pytest.approx(KNOCKBACK_DIST / KNOCKBACK_TIME)


def test_update_knockback_moves_and_ends():
    enemy = make_moblin(100, 100)
    enemy.knockback_x = 10
    enemy.knockback_timer = 0.15
    update_knockback(enemy, 0.1)
    assert enemy.x == pytest.approx(101)
    assert enemy.knockback_timer == pytest.approx(0.05)
    update_knockback(enemy, 0.1)
    assert enemy.x == pytest.approx(102)
    assert enemy.knockback_timer == 0 and enemy.knockback_x == 0


def test_update_knockback_clamps():
    enemy = make_moblin(1, 1)
    enemy.knockback_x = -100
    enemy.knockback_y = -100
    enemy.knockback_timer = 0.15
    update_knockback(enemy, 0.1)
    assert (enemy.x, enemy.y) == (0, 0)


def test_update_knockback_idle_does_nothing():
    enemy = make_moblin(5, 5)
    enemy.knockback_x = 50
    update_knockback(enemy, 0.1)
    assert enemy.x == 5


def test_entity_collisions():
    player = Player(50, 50)
    assert check_enemy_player_collision(player, make_moblin(55, 55)) is True
    assert check_enemy_player_collision(player, make_moblin(100, 100)) is False
    assert check_projectile_player_collision(player, enemy_projectile(52, 52, 0, 1)) is True
    assert check_projectile_player_collision(player, enemy_projectile(0, 0, 0, 1)) is False


def test_projectile_sword_collision():
    player = Player(50, 50)
    proj = enemy_projectile(55, 68, 0, -1)
    assert check_projectile_sword_collision(player, proj) is False
    player.sword.start(Direction.DOWN)
    assert check_projectile_sword_collision(player, proj) is True


def test_move_player_free():
    player = Player(100, 100)
    assert move_player(player, Screen(), 1, 0, 0.1) == (0, 0)
    assert player.x == pytest.approx(100 + PLAYER_SPEED * 0.1)
    assert player.y == 100


def test_move_player_blocked_by_wall():
    screen = Screen()
    screen.tiles[6][7] = Tile.WALL
    player = Player(100, 100)
    move_player(player, screen, 1, 0, 0.1)
    assert player.x == 100


def test_move_player_crosses_edges():
    left = Player(1, 100)
    assert move_player(left, Screen(), -1, 0, 0.1) == (-1, 0)
    top = Player(100, 1)
    assert move_player(top, Screen(), 0, -1, 0.1) == (0, -1)