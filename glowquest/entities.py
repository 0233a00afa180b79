"""Game entities: player, enemies, items, NPCs, projectiles and particles."""

import math
from dataclasses import dataclass, field
from enum import IntEnum
from itertools import islice

from glowquest.config import (
    BOSS_HP,
    BOSS_SIZE,
    BOSS_SPEED,
    ITEM_BOB_AMOUNT,
    ITEM_BOB_SPEED,
    MAX_HP,
    PLAY_AREA_HEIGHT,
    PLAY_AREA_WIDTH,
    PLAYER_SIZE,
    PLAYER_SPEED,
    PROJECTILE_SPEED,
    SWORD_DURATION,
    SWORD_REACH,
    SWORD_WIDTH,
    WALK_FRAME_TIME,
    WALK_FRAMES,
)
from glowquest.inventory import Inventory


class Direction(IntEnum):
    DOWN = 0
    UP = 1
    LEFT = 2
    RIGHT = 3

    def dx(self) -> float:
        """Horizontal unit step for this direction."""
        return {Direction.LEFT: -1.0, Direction.RIGHT: 1.0}.get(self, 0.0)

    def dy(self) -> float:
        """Vertical unit step for this direction."""
        return {Direction.UP: -1.0, Direction.DOWN: 1.0}.get(self, 0.0)


class BossID(IntEnum):
    NONE = 0
    MOLDORM = 1
    GENIE = 2
    SLIME_EYE = 3
    ANGLER_FISH = 4
    SLIME_EEL = 5
    FACADE = 6
    EVIL_EAGLE = 7
    HOT_HEAD = 8
    SHADOW = 9


@dataclass
class Boss:
    """Boss-specific state carried alongside an enemy."""

    boss_id: BossID
    phase: int = 0
    max_phases: int = 1
    phase_hp: list[int] = field(default_factory=list)
    vulnerable: bool = True
    pattern_timer: float = 0.0
    pattern_index: int = 0


def boss_data(boss_id: BossID) -> Boss:
    """Create the boss state for a given boss."""
    hp = 8 if boss_id == BossID.MOLDORM else 10
    return Boss(boss_id=boss_id, max_phases=1, phase_hp=[hp], vulnerable=True)


class EnemyType(IntEnum):
    OCTOROK = 0
    MOBLIN = 1
    STALFOS = 2
    BOSS = 3
    KEESE = 4
    GEL = 5
    ZOL = 6
    BLADE_TRAP = 7
    SPARK = 8
    WIZZROBE = 9
    IRON_MASK = 10
    LIKE_LIKE = 11
    GOOMBA = 12
    PIRANHA = 13
    ZORA = 14
    ARMOS = 15
    LANMOLA = 16


_ENEMY_WALK_FRAME_TIME = 0.15
_ENEMY_WALK_FRAMES = 4


@dataclass
class Enemy:
    kind: EnemyType
    x: float
    y: float
    width: int = 14
    height: int = 14
    direction: Direction = Direction.DOWN
    speed: float = 0.0
    hp: int = 0
    max_hp: int = 0
    inv_timer: float = 0.0
    knockback_x: float = 0.0
    knockback_y: float = 0.0
    knockback_timer: float = 0.0
    ai_timer: float = 0.0
    dead: bool = False
    moving: bool = False
    walk_frame: int = 0
    walk_timer: float = 0.0
    shoot_timer: float = 0.0
    ai_state: int = 0
    charge_x: float = 0.0
    charge_y: float = 0.0
    burst_count: int = 0

    def center_x(self) -> float:
        return self.x + self.width / 2

    def center_y(self) -> float:
        return self.y + self.height / 2

    def update_animation(self, dt: float) -> None:
        """Advance the walk cycle while moving; reset it when standing."""
        if self.moving:
            self.walk_timer += dt
            if self.walk_timer >= _ENEMY_WALK_FRAME_TIME:
                self.walk_timer -= _ENEMY_WALK_FRAME_TIME
                self.walk_frame = (self.walk_frame + 1) % _ENEMY_WALK_FRAMES
        else:
            self.walk_frame = 0
            self.walk_timer = 0.0


def make_octorok(x: float, y: float) -> Enemy:
    return Enemy(EnemyType.OCTOROK, x, y, speed=30, hp=2, max_hp=2, shoot_timer=2.0)


def make_moblin(x: float, y: float) -> Enemy:
    return Enemy(EnemyType.MOBLIN, x, y, speed=35, hp=3, max_hp=3)


def make_stalfos(x: float, y: float) -> Enemy:
    return Enemy(EnemyType.STALFOS, x, y, speed=45, hp=2, max_hp=2)


def make_boss(x: float, y: float) -> Enemy:
    return Enemy(
        EnemyType.BOSS,
        x,
        y,
        width=BOSS_SIZE,
        height=BOSS_SIZE,
        speed=BOSS_SPEED,
        hp=BOSS_HP,
        max_hp=BOSS_HP,
        shoot_timer=3.0,
    )


class ItemType(IntEnum):
    HEART = 0
    RUPEE = 1
    KEY = 2
    SWORD = 3
    HEART_CONTAINER = 4


@dataclass
class Item:
    kind: ItemType
    x: float
    y: float
    width: int = 12
    height: int = 12
    collected: bool = False
    bob_timer: float = 0.0

    def update(self, dt: float) -> None:
        self.bob_timer += dt

    def bob_offset(self) -> float:
        """Vertical bob offset used when drawing."""
        return math.sin(self.bob_timer * ITEM_BOB_SPEED) * ITEM_BOB_AMOUNT


@dataclass
class DialogueOption:
    """Lines an NPC speaks when a condition holds; the first match wins."""

    condition: str
    lines: list[str]


@dataclass
class NPC:
    npc_id: str
    x: float
    y: float
    direction: Direction = Direction.DOWN
    name: str = ""
    dialogue: list[str] = field(default_factory=list)
    dialogues: list[DialogueOption] = field(default_factory=list)
    width: int = 14
    height: int = 14

    def center_x(self) -> float:
        return self.x + self.width / 2

    def center_y(self) -> float:
        return self.y + self.height / 2


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    max_life: float
    size: int
    color: tuple[int, int, int]


@dataclass
class ParticlePool:
    particles: list[Particle] = field(default_factory=list)

    def spawn_explosion(self, x, y, count, r, g, b, velocities) -> None:
        """Spawn up to ``count`` particles, one per (vx, vy) pair in ``velocities``."""
        pairs = zip(velocities[0::2], velocities[1::2])
        for vx, vy in islice(pairs, max(count, 0)):
            self.particles.append(
                Particle(x=x, y=y, vx=vx, vy=vy, life=0.5, max_life=0.5, size=2, color=(r, g, b))
            )

    def update(self, dt: float) -> None:
        """Age particles, drop expired ones and move the rest."""
        alive = []
        for p in self.particles:
            p.life -= dt
            if p.life <= 0:
                continue
            p.x += p.vx * dt
            p.y += p.vy * dt
            alive.append(p)
        self.particles = alive


@dataclass
class SwordSwing:
    active: bool = False
    timer: float = 0.0
    duration: float = 0.0
    direction: Direction = Direction.DOWN

    def start(self, direction: Direction) -> None:
        self.active = True
        self.timer = 0.0
        self.duration = SWORD_DURATION
        self.direction = direction

    def update(self, dt: float) -> None:
        if not self.active:
            return
        self.timer += dt
        if self.timer >= self.duration:
            self.active = False

    def done(self) -> bool:
        return not self.active

    def progress(self) -> float:
        """Fraction of the swing completed, from 0 to 1."""
        if self.duration <= 0:
            return 1.0
        return min(self.timer / self.duration, 1.0)

    def hit_box(self, player_x, player_y, player_w, player_h) -> tuple[float, float, float, float]:
        """The sword's box (x, y, w, h), extending from the player's box."""
        pw = float(player_w)
        ph = float(player_h)
        reach = float(SWORD_REACH)
        width = float(SWORD_WIDTH)
        if self.direction == Direction.UP:
            return player_x + (pw - width) / 2, player_y - reach, width, reach
        if self.direction == Direction.DOWN:
            return player_x + (pw - width) / 2, player_y + ph, width, reach
        if self.direction == Direction.LEFT:
            return player_x - reach, player_y + (ph - width) / 2, reach, width
        if self.direction == Direction.RIGHT:
            return player_x + pw, player_y + (ph - width) / 2, reach, width
        return 0.0, 0.0, 0.0, 0.0


@dataclass
class Player:
    x: float
    y: float
    width: int = PLAYER_SIZE
    height: int = PLAYER_SIZE
    direction: Direction = Direction.DOWN
    speed: float = PLAYER_SPEED
    hp: int = MAX_HP
    max_hp: int = MAX_HP
    moving: bool = False
    walk_frame: int = 0
    walk_timer: float = 0.0
    sword: SwordSwing = field(default_factory=SwordSwing)
    inv_timer: float = 0.0
    has_sword: bool = False
    inventory: Inventory = field(default_factory=Inventory)

    jumping: bool = False
    jump_timer: float = 0.0
    jump_height: float = 0.0
    dashing: bool = False
    dash_timer: float = 0.0
    dash_dir: Direction = Direction.DOWN
    swimming: bool = False
    lifting: bool = False
    pushing: bool = False
    push_timer: float = 0.0
    using_item: bool = False
    item_use_timer: float = 0.0

    def center_x(self) -> float:
        return self.x + self.width / 2

    def center_y(self) -> float:
        return self.y + self.height / 2

    def bbox(self) -> tuple[float, float, float, float]:
        return self.x, self.y, float(self.width), float(self.height)

    def update_animation(self, dt: float) -> None:
        """Advance the walk cycle while moving; reset it when standing."""
        if self.moving:
            self.walk_timer += dt
            if self.walk_timer >= WALK_FRAME_TIME:
                self.walk_timer -= WALK_FRAME_TIME
                self.walk_frame = (self.walk_frame + 1) % WALK_FRAMES
        else:
            self.walk_frame = 0
            self.walk_timer = 0.0


@dataclass
class Projectile:
    x: float
    y: float
    dir_x: float
    dir_y: float
    speed: float = PROJECTILE_SPEED
    damage: int = 1
    from_enemy: bool = False
    width: int = 4
    height: int = 4
    dead: bool = False

    def update(self, dt: float) -> None:
        """Move along the direction; die once well outside the play area."""
        self.x += self.dir_x * self.speed * dt
        self.y += self.dir_y * self.speed * dt
        if (
            self.x < -10
            or self.x > PLAY_AREA_WIDTH + 10
            or self.y < -10
            or self.y > PLAY_AREA_HEIGHT + 10
        ):
            self.dead = True


def enemy_projectile(x: float, y: float, dir_x: float, dir_y: float) -> Projectile:
    return Projectile(x=x, y=y, dir_x=dir_x, dir_y=dir_y, from_enemy=True)