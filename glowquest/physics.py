"""Collision tests, sword combat and player movement."""

from itertools import product

from glowquest.config import (
    KNOCKBACK_DIST,
    KNOCKBACK_TIME,
    PLAY_AREA_HEIGHT,
    PLAY_AREA_WIDTH,
    TILE_SIZE,
)
from glowquest.entities import Enemy, Player, Projectile
from glowquest.screen import Screen
from glowquest.tiles import tile_props


def aabb_overlap(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Whether two axis-aligned boxes overlap; touching edges do not count."""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def proximity_check(px, py, nx, ny, radius) -> bool:
    """Whether (px, py) lies within ``radius`` of (nx, ny), inclusive."""
    dx = px - nx
    dy = py - ny
    return dx * dx + dy * dy <= radius * radius


def tile_collision(screen: Screen, x: float, y: float, w: int, h: int) -> bool:
    """Whether a box at (x, y) of size w by h touches any impassable tile."""
    fw = float(w)
    fh = float(h)
    ts = float(TILE_SIZE)
    start_x = int(x / ts)
    start_y = int(y / ts)
    end_x = int((x + fw - 0.01) / ts)
    end_y = int((y + fh - 0.01) / ts)
    for gy, gx in product(range(start_y, end_y + 1), range(start_x, end_x + 1)):
        if tile_props(screen.tile_at(gx, gy)).passable:
            continue
        if aabb_overlap(x, y, fw, fh, gx * ts, gy * ts, ts, ts):
            return True
    return False


def check_sword_hits(player: Player, enemies: list[Enemy]) -> list[Enemy]:
    """Living, vulnerable enemies touched by the player's active swing."""
    if not player.sword.active:
        return []
    sx, sy, sw, sh = player.sword.hit_box(player.x, player.y, player.width, player.height)
    return [
        e
        for e in enemies
        if not e.dead
        and e.inv_timer <= 0
        and aabb_overlap(sx, sy, sw, sh, e.x, e.y, float(e.width), float(e.height))
    ]


def _newton_sqrt(x: float) -> float:
    if x <= 0:
        return 0.0
    z = x / 2
    for _ in range(10):
        z = (z + x / z) / 2
    return z


def apply_knockback(enemy: Enemy, from_x: float, from_y: float) -> None:
    """Start pushing an enemy away from the point (from_x, from_y)."""
    dx = enemy.center_x() - from_x
    dy = enemy.center_y() - from_y
    dist = dx * dx + dy * dy
    if dist < 0.01:
        dx = 0.0
        dy = 1.0
    if dist > 0:
        inv = 1.0 / _newton_sqrt(dist)
        dx *= inv
        dy *= inv
    enemy.knockback_x = dx * KNOCKBACK_DIST / KNOCKBACK_TIME
    enemy.knockback_y = dy * KNOCKBACK_DIST / KNOCKBACK_TIME
    enemy.knockback_timer = KNOCKBACK_TIME


def update_knockback(enemy: Enemy, dt: float) -> None:
    """Move an enemy during knockback, keeping it inside the play area."""
    if enemy.knockback_timer <= 0:
        return
    enemy.x += enemy.knockback_x * dt
    enemy.y += enemy.knockback_y * dt
    enemy.knockback_timer -= dt
    if enemy.knockback_timer <= 0:
        enemy.knockback_timer = 0.0
        enemy.knockback_x = 0.0
        enemy.knockback_y = 0.0
    enemy.x = max(enemy.x, 0.0)
    enemy.y = max(enemy.y, 0.0)
    enemy.x = min(enemy.x, float(PLAY_AREA_WIDTH - enemy.width))
    enemy.y = min(enemy.y, float(PLAY_AREA_HEIGHT - enemy.height))


def check_enemy_player_collision(player: Player, enemy: Enemy) -> bool:
    return aabb_overlap(
        player.x, player.y, float(player.width), float(player.height),
        enemy.x, enemy.y, float(enemy.width), float(enemy.height),
    )


def check_projectile_player_collision(player: Player, proj: Projectile) -> bool:
    return aabb_overlap(
        player.x, player.y, float(player.width), float(player.height),
        proj.x, proj.y, float(proj.width), float(proj.height),
    )


def check_projectile_sword_collision(player: Player, proj: Projectile) -> bool:
    """Whether a projectile touches the player's active sword."""
    if not player.sword.active:
        return False
    sx, sy, sw, sh = player.sword.hit_box(player.x, player.y, player.width, player.height)
    return aabb_overlap(sx, sy, sw, sh, proj.x, proj.y, float(proj.width), float(proj.height))


def move_player(player: Player, screen: Screen, dx: float, dy: float, dt: float) -> tuple[int, int]:
    """Move the player one axis at a time and report any screen-edge crossing.

    Returns (0, 0) normally, or -1/1 on an axis whose left/top or right/bottom
    edge was crossed.
    """
    dist = player.speed * dt
    if dx != 0:
        new_x = player.x + dx * dist
        if not tile_collision(screen, new_x, player.y, player.width, player.height):
            player.x = new_x
    if dy != 0:
        new_y = player.y + dy * dist
        if not tile_collision(screen, player.x, new_y, player.width, player.height):
            player.y = new_y

    cross_x = 0
    if player.x < 0:
        cross_x = -1
    elif player.x + player.width > PLAY_AREA_WIDTH:
        cross_x = 1
    cross_y = 0
    if player.y < 0:
        cross_y = -1
    elif player.y + player.height > PLAY_AREA_HEIGHT:
        cross_y = 1
    return cross_x, cross_y