"""Enemy behaviour, the enemy definition table and the game's RNG."""

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from glowquest.config import PLAY_AREA_HEIGHT, PLAY_AREA_WIDTH
from glowquest.entities import Direction, Enemy, EnemyType, Player, Projectile, enemy_projectile
from glowquest.physics import tile_collision, update_knockback
from glowquest.screen import Screen

_MASK32 = 0xFFFFFFFF
_WANDER_DIRS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
_CHARGE_SPEED = 120.0


class SimpleRNG:
    """A 32-bit xorshift pseudo-random number generator."""

    def __init__(self, seed: int) -> None:
        seed &= _MASK32
        self._state = seed if seed != 0 else 12345

    def next(self) -> int:
        s = self._state
        s ^= (s << 13) & _MASK32
        s ^= s >> 17
        s ^= (s << 5) & _MASK32
        self._state = s
        return s


class AIType(IntEnum):
    WANDER = 0
    CHASE = 1
    SHOOTER = 2
    BLADE_TRAP = 3
    SPARK = 4
    BOUNCE = 5
    STATIONARY = 6


@dataclass(frozen=True)
class EnemyDef:
    """Data describing one kind of enemy."""

    kind: EnemyType
    name: str
    width: int
    height: int
    hp: int
    speed: float
    ai: AIType
    chase_range: float = 0.0
    shoot_rate: float = 0.0
    contact_dmg: int = 1


ENEMY_REGISTRY: dict[EnemyType, EnemyDef] = {
    d.kind: d
    for d in (
        EnemyDef(EnemyType.OCTOROK, "Octorok", 14, 14, 2, 30, AIType.SHOOTER, shoot_rate=2.0),
        EnemyDef(EnemyType.MOBLIN, "Moblin", 14, 14, 3, 35, AIType.CHASE, chase_range=80),
        EnemyDef(EnemyType.STALFOS, "Stalfos", 14, 14, 2, 45, AIType.CHASE, chase_range=48),
        EnemyDef(EnemyType.BOSS, "Boss", 20, 20, 10, 25, AIType.WANDER, contact_dmg=2),
        EnemyDef(EnemyType.KEESE, "Keese", 12, 12, 1, 50, AIType.BOUNCE),
        EnemyDef(EnemyType.GEL, "Gel", 10, 10, 1, 20, AIType.CHASE, chase_range=40),
        EnemyDef(EnemyType.ZOL, "Zol", 14, 14, 2, 15, AIType.CHASE, chase_range=48),
        EnemyDef(EnemyType.BLADE_TRAP, "Blade Trap", 16, 16, 99, 120, AIType.BLADE_TRAP, contact_dmg=2),
        EnemyDef(EnemyType.SPARK, "Spark", 12, 12, 99, 30, AIType.SPARK),
    )
}


def get_enemy_def(enemy_type: EnemyType) -> Optional[EnemyDef]:
    """Definition for an enemy type, or None if it has none."""
    return ENEMY_REGISTRY.get(enemy_type)


def update_enemy_ai(
    enemy: Enemy, player: Player, screen: Screen, dt: float, rng: SimpleRNG
) -> Optional[Projectile]:
    """Advance one enemy's behaviour; returns a projectile if it fired one."""
    if enemy.dead:
        return None
    if enemy.inv_timer > 0:
        enemy.inv_timer -= dt
    if enemy.knockback_timer > 0:
        update_knockback(enemy, dt)
        return None

    enemy.ai_timer -= dt
    if enemy.kind == EnemyType.OCTOROK:
        return _update_octorok(enemy, player, screen, dt, rng)
    if enemy.kind == EnemyType.MOBLIN:
        _update_chaser(enemy, player, screen, dt, rng, chase_range=80, fast=False)
    elif enemy.kind == EnemyType.STALFOS:
        _update_chaser(enemy, player, screen, dt, rng, chase_range=48, fast=True)
    elif enemy.kind == EnemyType.BOSS:
        return _update_boss(enemy, player, screen, dt, rng)
    return None


def _update_octorok(e: Enemy, p: Player, screen: Screen, dt: float, rng: SimpleRNG) -> Optional[Projectile]:
    if e.ai_timer <= 0:
        e.ai_timer = 1.0 + (rng.next() % 200) / 100.0
        e.direction = _WANDER_DIRS[rng.next() % 4]
        e.moving = True
    _move_enemy(e, screen, dt)
    e.shoot_timer -= dt
    if e.shoot_timer <= 0:
        e.shoot_timer = 2.0 + (rng.next() % 100) / 100.0
        return _fire_at_player(e, p)
    return None


def _update_chaser(
    e: Enemy, p: Player, screen: Screen, dt: float, rng: SimpleRNG, chase_range: float, fast: bool
) -> None:
    dist = _dist_between(e.center_x(), e.center_y(), p.center_x(), p.center_y())
    if dist < chase_range:
        _chase_player(e, p)
        e.moving = True
    elif e.ai_timer <= 0:
        if fast:
            e.ai_timer = 0.5 + (rng.next() % 150) / 100.0
            e.direction = _WANDER_DIRS[rng.next() % 4]
            e.moving = True
        else:
            e.ai_timer = 1.0 + (rng.next() % 200) / 100.0
            roll = rng.next() % 5
            if roll < 4:
                e.direction = _WANDER_DIRS[roll]
                e.moving = True
            else:
                e.moving = False
    _move_enemy(e, screen, dt)


def _chase_player(e: Enemy, p: Player) -> None:
    dx = p.center_x() - e.center_x()
    dy = p.center_y() - e.center_y()
    if abs(dx) > abs(dy):
        e.direction = Direction.RIGHT if dx > 0 else Direction.LEFT
    else:
        e.direction = Direction.DOWN if dy > 0 else Direction.UP


def _try_step(e: Enemy, screen: Screen, new_x: float, new_y: float) -> None:
    if (
        new_x != e.x
        and new_x >= 0
        and new_x + e.width <= PLAY_AREA_WIDTH
        and not tile_collision(screen, new_x, e.y, e.width, e.height)
    ):
        e.x = new_x
    if (
        new_y != e.y
        and new_y >= 0
        and new_y + e.height <= PLAY_AREA_HEIGHT
        and not tile_collision(screen, e.x, new_y, e.width, e.height)
    ):
        e.y = new_y


def _move_enemy(e: Enemy, screen: Screen, dt: float) -> None:
    if not e.moving:
        e.update_animation(dt)
        return
    dist = e.speed * dt
    _try_step(e, screen, e.x + e.direction.dx() * dist, e.y + e.direction.dy() * dist)
    e.update_animation(dt)


def _fire_at_player(e: Enemy, p: Player) -> Optional[Projectile]:
    dx = p.center_x() - e.center_x()
    dy = p.center_y() - e.center_y()
    dist = math.hypot(dx, dy)
    if dist < 0.01:
        return None
    return enemy_projectile(e.center_x(), e.center_y(), dx / dist, dy / dist)


def _update_boss(e: Enemy, p: Player, screen: Screen, dt: float, rng: SimpleRNG) -> Optional[Projectile]:
    if e.ai_state == 0:
        if e.ai_timer <= 0:
            e.ai_timer = 3.0 + (rng.next() % 100) / 100.0
            dist = _dist_between(e.center_x(), e.center_y(), p.center_x(), p.center_y())
            if dist < 80 and rng.next() % 2 == 0:
                e.ai_state = 1
                e.ai_timer = 1.0
                dx = p.center_x() - e.center_x()
                dy = p.center_y() - e.center_y()
                d = math.hypot(dx, dy)
                if d > 0.01:
                    e.charge_x = dx / d
                    e.charge_y = dy / d
                return None
            if dist < 120:
                e.ai_state = 2
                e.ai_timer = 0.3
                e.burst_count = 0
                return None
            e.direction = _WANDER_DIRS[rng.next() % 4]
            e.moving = True
        _move_enemy(e, screen, dt)

    elif e.ai_state == 1:
        e.ai_timer -= dt
        if e.ai_timer <= 0:
            e.ai_state = 0
            e.ai_timer = 1.0
            e.moving = False
            return None
        _try_step(
            e,
            screen,
            e.x + e.charge_x * _CHARGE_SPEED * dt,
            e.y + e.charge_y * _CHARGE_SPEED * dt,
        )
        e.moving = True
        e.update_animation(dt)

    elif e.ai_state == 2:
        e.ai_timer -= dt
        e.moving = False
        if e.ai_timer <= 0 and e.burst_count < 4:
            e.burst_count += 1
            e.ai_timer = 0.3
            e.update_animation(dt)
            return _fire_at_player(e, p)
        if e.burst_count >= 4:
            e.ai_state = 0
            e.ai_timer = 2.0
        e.update_animation(dt)
    return None


def _dist_between(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)