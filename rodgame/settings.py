"""Game-wide tuning constants."""

SCREEN_WIDTH = 1230
SCREEN_HEIGHT = 760

SCREEN_SCALE = 10.0

FRAME_RATE_LIMIT = 60.0

GAME_SPEED = 1.0

MIN_COMMON_ENEMY_SPEED = 0.5
MIN_UNCOMMON_ENEMY_SPEED = 5.0
MIN_ELITE_ENEMY_SPEED = 10.0

MAX_COMMON_ENEMY_SPEED = 2.0
MAX_UNCOMMON_ENEMY_SPEED = 8.0
MAX_ELITE_ENEMY_SPEED = 12.5

COMMON_SPRITE_SIZE = 0.3
UNCOMMON_SPRITE_SIZE = 0.6
ELITE_SPRITE_SIZE = 1.0

COMMON_DROP_RATE = 0.02
UNCOMMON_DROP_RATE = 0.04
ELITE_DROP_RATE = 0.06

PWR_DAMAGE_DURATION = 5.0
PWR_INVINCIBILITY_DURATION = 5.0
PWR_FREEZE_DURATION = 5.0

BLOCKER_SPRITE_SIZE = 0.4
BLOCKER_SPEED = 35.0
BLOCKER_LENGTH = 5.0
BLOCKER_VARIATION = 3

RENDER_HITBOX = False
ERROR_LOGGING = False
SIDE_VIEW_SPRITE_TINT = False