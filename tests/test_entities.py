import math

import pytest

from glowquest.config import (
    BOSS_HP,
    BOSS_SIZE,
    MAX_HP,
    PLAY_AREA_WIDTH,
    PLAYER_SIZE,
    PROJECTILE_SPEED,
    SWORD_DURATION,
    SWORD_REACH,
    SWORD_WIDTH,
    WALK_FRAME_TIME,
    WALK_FRAMES,
)
from glowquest.entities import (
    NPC,
    BossID,
    Direction,
    EnemyType,
    Item,
    ItemType,
    ParticlePool,
    Player,
    SwordSwing,
    boss_data,
    enemy_projectile,
    make_boss,
    make_moblin,
    make_octorok,
    make_stalfos,
)


@pytest.mark.parametrize(
    "direction,dx,dy",
    [
        (Direction.DOWN, 0.0, 1.0),
        (Direction.UP, 0.0, -1.0),
        (Direction.LEFT, -1.0, 0.0),
        (Direction.RIGHT, 1.0, 0.0),
    ],
)
def test_direction_steps(direction, dx, dy):
    assert direction.dx() == dx
    assert direction.dy() == dy


def test_boss_data():
    moldorm = boss_data(BossID.MOLDORM)
    assert moldorm.phase_hp == [8]
    assert moldorm.vulnerable and moldorm.max_phases == 1
    genie = boss_data(BossID.GENIE)
    assert genie.boss_id == BossID.GENIE
    assert genie.phase_hp == [10]


def test_enemy_constructors():
    o = make_octorok(5, 6)
    assert (o.kind, o.x, o.y, o.hp, o.max_hp, o.shoot_timer) == (EnemyType.OCTOROK, 5, 6, 2, 2, 2.0)
    m = make_moblin(0, 0)
    assert (m.kind, m.hp, m.speed) == (EnemyType.MOBLIN, 3, 35)
    s = make_stalfos(0, 0)
    assert (s.kind, s.hp, s.speed) == (EnemyType.STALFOS, 2, 45)
    b = make_boss(0, 0)
    assert b.kind == EnemyType.BOSS
    assert b.hp == BOSS_HP and b.width == BOSS_SIZE


def test_enemy_center():
    e = make_octorok(10, 20)
    assert e.center_x() == 10 + e.width / 2
    assert e.center_y() == 20 + e.height / 2


def test_enemy_animation_cycles_and_resets():
    e = make_moblin(0, 0)
    e.moving = True
    e.update_animation(0.15)
    assert e.walk_frame == 1
    for _ in range(3):
        e.update_animation(0.15)
    assert e.walk_frame == 0
    e.update_animation(0.15)
    e.moving = False
    e.update_animation(0.01)
    assert e.walk_frame == 0 and e.walk_timer == 0


def test_item_bob():
    item = Item(ItemType.RUPEE, 1, 2)
    assert (item.width, item.height) == (12, 12)
    assert item.bob_offset() == 0.0
    item.update(0.3)
    assert item.bob_timer == pytest.approx(0.3)
    assert -1.0 <= item.bob_offset() <= 1.0
    assert item.bob_offset() == pytest.approx(math.sin(item.bob_timer * 4.0))


def test_npc_center():
    npc = NPC("tarin", 3, 4)
    assert npc.center_x() == 3 + npc.width / 2
    assert npc.center_y() == 4 + npc.height / 2


def test_particles_limited_by_velocity_pairs():
    pool = ParticlePool()
    pool.spawn_explosion(10, 10, 6, 200, 50, 50, [1.0, 2.0, 3.0, 4.0, 5.0])
    assert len(pool.particles) == 2
    assert pool.particles[1].vx == 3.0 and pool.particles[1].vy == 4.0
    assert pool.particles[0].color == (200, 50, 50)


def test_particles_limited_by_count():
    pool = ParticlePool()
    pool.spawn_explosion(0, 0, 1, 1, 2, 3, [1.0, 1.0, 2.0, 2.0])
    assert len(pool.particles) == 1


def test_particle_update_moves_and_expires():
    pool = ParticlePool()
    pool.spawn_explosion(10, 10, 1, 0, 0, 0, [2.0, -4.0])
    pool.update(0.25)
    p = pool.particles[0]
    assert p.x == pytest.approx(10.5) and p.y == pytest.approx(9.0)
    pool.update(0.25)
    assert pool.particles == []


def test_player_defaults_and_bbox():
    p = Player(7, 8)
    assert p.hp == MAX_HP and p.max_hp == MAX_HP
    assert p.bbox() == (7, 8, float(PLAYER_SIZE), float(PLAYER_SIZE))
    assert p.center_x() == 7 + PLAYER_SIZE / 2
    assert p.inventory.owned_items == set()


def test_player_animation():
    p = Player(0, 0)
    p.moving = True
    p.update_animation(WALK_FRAME_TIME)
    assert p.walk_frame == 1
    for _ in range(WALK_FRAMES - 1):
        p.update_animation(WALK_FRAME_TIME)
    assert p.walk_frame == 0
    p.update_animation(WALK_FRAME_TIME)
    p.moving = False
    p.update_animation(0.0)
    assert p.walk_frame == 0


def test_projectile_moves_and_dies_out_of_bounds():
    proj = enemy_projectile(100, 50, 1.0, 0.0)
    assert proj.from_enemy and proj.damage == 1 and proj.speed == PROJECTILE_SPEED
    proj.update(0.1)
    assert proj.x == pytest.approx(100 + PROJECTILE_SPEED * 0.1)
    assert not proj.dead
    proj.x = PLAY_AREA_WIDTH + 5
    proj.update(0.1)
    assert proj.dead


def test_sword_swing_lifecycle():
    s = SwordSwing()
    assert s.done()
    assert s.progress() == 1.0
    s.start(Direction.LEFT)
    assert s.active and s.direction == Direction.LEFT
    assert s.duration == SWORD_DURATION
    s.update(SWORD_DURATION / 2)
    assert s.progress() == pytest.approx(0.5)
    assert not s.done()
    s.update(SWORD_DURATION)
    assert s.done()
    assert s.progress() == 1.0


def test_sword_hit_boxes():
    s = SwordSwing()
    s.start(Direction.UP)
    x, y, w, h = s.hit_box(50, 60, 14, 14)
    assert y == 60 - SWORD_REACH and (w, h) == (SWORD_WIDTH, SWORD_REACH)
    assert x + w / 2 == 50 + 14 / 2
    s.start(Direction.DOWN)
    assert s.hit_box(50, 60, 14, 14)[1] == 74
    s.start(Direction.RIGHT)
    x, y, w, h = s.hit_box(50, 60, 14, 14)
    assert x == 64 and (w, h) == (SWORD_REACH, SWORD_WIDTH)
    s.start(Direction.LEFT)
    assert s.hit_box(50, 60, 14, 14)[0] == 50 - SWORD_REACH