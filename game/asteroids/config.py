"""
Game constants and round settings for the asteroid shooter
"""

from .entities import Round

# ==============================================================================
# WINDOW / FIELD LAYOUT
# Coordinates use a bottom-left origin (y grows upward)
# ==============================================================================

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
FIELD_WIDTH = 700  # left side: play field
FIELD_HEIGHT = WINDOW_HEIGHT

# ==============================================================================
# CRAFT / PROJECTILES
# ==============================================================================

CRAFT_Y = 50.0
CRAFT_NOSE_OFFSET = 25.0  # nose height above craft y
CRAFT_HALF_WIDTH = 35.0   # half the wingspan
CRAFT_STEP = 10.0         # lateral move per command

PROJECTILE_SPEED = 300.0  # units/s

# ==============================================================================
# SESSION / SCORING
# ==============================================================================

MAX_LIVES = 3
SCORE_PER_ASTEROID = 10

# ==============================================================================
# ROUNDS (milliseconds)
# ==============================================================================

BASE_ASTEROID_SPEED = 50.0
ROUND1_DURATION_MS = 15000
ROUND2_DURATION_MS = 20000
ROUND3_SPEED_MULTIPLIER = 6
ROUND3_SPEEDUP_INTERVAL_MS = 5000
ROUND3_SPEEDUP_STEP = 50.0
ROUND_TITLE_DURATION_MS = 3000

# speed_multiplier applies to BASE_ASTEROID_SPEED
ROUND_SETTINGS = {
    Round.ROUND_1: {"duration_ms": ROUND1_DURATION_MS, "speed_multiplier": 1,
                    "spawn_interval_ms": 1000, "spawn_count": 1},
    Round.ROUND_2: {"duration_ms": ROUND2_DURATION_MS, "speed_multiplier": 2,
                    "spawn_interval_ms": 500, "spawn_count": 2},
    Round.ROUND_3: {"duration_ms": None, "speed_multiplier": ROUND3_SPEED_MULTIPLIER,
                    "spawn_interval_ms": 300, "spawn_count": 3},
}

# ==============================================================================
# SPAWNING
# ==============================================================================

SPAWN_MARGIN = 10.0       # keep asteroids away from the field edges
SPAWN_HEIGHT_OFFSET = 20.0  # spawn just above the visible top
ASTEROID_RADIUS_RANGE = (10.0, 24.0)

# ==============================================================================
# FRONT END
# ==============================================================================

TICK_INTERVAL = 1 / 60  # seconds

# Keyword overrides for GameSession (see game.asteroids.session)
GAME_CONFIG = {
    "field_width": FIELD_WIDTH,
    "field_height": FIELD_HEIGHT,
    "max_lives": MAX_LIVES,
    "verbose": 0,
}
