"""
Simulation tuning knobs.
"""

# Environment
SCREEN_W, SCREEN_H = 480, 320
FPS = 60
WALL_BAND = 10  # drawn border thickness (cosmetic)

# Runtime pacing
T_SPEED = 0.01  # noise time advanced per tick, independent of frame dt

# Logging
LOG_LEVEL = "INFO"

# Blob (agent)
BLOB_RADIUS = 28.0
FEAR_RADIUS = 140.0
BLOB_ACCEL = 0.28
BLOB_MAX_SPEED = 5.0
BLOB_DAMPING = 0.92
BLOB_JITTER = 1.4
FLEE_BOOST = 2.1
FEAR_EPSILON = 0.001
JITTER_TIME_SCALE = 18.0
JITTER_SEED_X = 300.0
JITTER_SEED_Y = 400.0
BLOB_WALL_PAD = 18.0
BLOB_RESTITUTION = 0.85

# Mischief
STEAL_SIZE = 14.0
STEAL_CHANCE = 0.06
HITBOX_FRACTION = 0.75  # fraction of blob radius used for the overlap test
BUMP_PUSH = 2.0
BUMP_MOMENTUM = 0.3
HELD_LIFE_RANGE = (180, 300)  # ticks, [low, high)
ORBIT_RADIUS_RANGE = (14.0, 24.0)
ORBIT_SPIN = 0.04  # radians per tick
RELEASE_SPEED = 1.0  # released props get velocity in [-RELEASE_SPEED, RELEASE_SPEED)

# Props
PROP_COUNT = 12
PROP_SPAWN_PAD = 30.0
PROP_RADIUS_RANGE = (8.0, 22.0)
PROP_START_SPEED = 0.3
PROP_FRICTION = 0.95
PROP_WALL_PAD = 20.0
PROP_RESTITUTION = 0.9

# Numerical guards
EPS_DIST = 1e-4

# Blob outline (cosmetic)
OUTLINE_POINTS = 48
OUTLINE_WOBBLE = 8.0
OUTLINE_WOBBLE_FREQ = 0.8
