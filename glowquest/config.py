"""Game-wide constants and the window layout calculation."""

from dataclasses import dataclass

TILE_SIZE = 16
SCREEN_GRID_W = 16
SCREEN_GRID_H = 12
HUD_HEIGHT = 32

PLAY_AREA_WIDTH = SCREEN_GRID_W * TILE_SIZE
PLAY_AREA_HEIGHT = SCREEN_GRID_H * TILE_SIZE
WINDOW_WIDTH = PLAY_AREA_WIDTH
WINDOW_HEIGHT = PLAY_AREA_HEIGHT + HUD_HEIGHT

PLAYER_SIZE = 14
PLAYER_SPEED = 80.0
MAX_HP = 6  # three full hearts

WALK_FRAME_TIME = 0.12
WALK_FRAMES = 4

TRANSITION_DURATION = 0.5

# Combat
SWORD_DURATION = 0.2
SWORD_REACH = 12
SWORD_WIDTH = 10
KNOCKBACK_DIST = 32.0
KNOCKBACK_TIME = 0.15
PLAYER_INV_TIME = 1.0
ENEMY_INV_TIME = 0.5
PROJECTILE_SPEED = 100.0

# Items
ITEM_BOB_SPEED = 4.0
ITEM_BOB_AMOUNT = 1

# Dialogue
DIALOGUE_BOX_H = 48
INTERACT_RADIUS = 20.0

# Interior transitions
FADE_DURATION = 0.6

# Boss
BOSS_HP = 10
BOSS_SIZE = 20
BOSS_SPEED = 25.0

# Polish
SHAKE_DURATION = 0.2
SHAKE_INTENSITY = 3
FLASH_DURATION = 0.08

# Menu
GAME_OVER_DELAY = 2.0
VICTORY_DELAY = 3.0

# Overworld dimensions; the map loader replaces these.
OVERWORLD_W = 16
OVERWORLD_H = 16


@dataclass(frozen=True)
class Layout:
    """How the logical screen is scaled and centred inside the window."""

    scale: float
    offset_x: int
    offset_y: int


def new_layout(win_w: int, win_h: int) -> Layout:
    """Fit the logical screen into a window, keeping aspect and scale >= 1."""
    scale = max(min(win_w / WINDOW_WIDTH, win_h / WINDOW_HEIGHT), 1.0)
    scaled_w = int(WINDOW_WIDTH * scale)
    scaled_h = int(WINDOW_HEIGHT * scale)
    # Halve towards zero, as integer division does for negative margins.
    offset_x = int((win_w - scaled_w) / 2)
    offset_y = int((win_h - scaled_h) / 2)
    return Layout(scale=scale, offset_x=offset_x, offset_y=offset_y)