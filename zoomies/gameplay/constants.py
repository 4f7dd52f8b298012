"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# PARK GRID
# =============================================================================
GRID_WIDTH = 40    # cells
GRID_HEIGHT = 30   # cells

# =============================================================================
# POPULATION
# =============================================================================
TREAT_COUNT = 100
POWER_UP_COUNT = 5
WANDERER_COUNT = 4

# =============================================================================
# SCORING
# =============================================================================
TREAT_POINTS = 10
POWER_UP_POINTS = 50

# =============================================================================
# TIMING (all in milliseconds unless noted)
# =============================================================================
TICK_MS = 16                      # one simulation step, ~60 per second
INVINCIBILITY_MS = 5000
SPEED_BOOST_MS = 5000
WANDERER_MOVE_INTERVAL = 10       # ticks per cell
DIRECTION_CHANGE_MIN_MS = 5000
DIRECTION_CHANGE_MAX_MS = 15000
