"""
Game constants - all magic numbers in one place.
NO UI DEPENDENCIES.
"""

# =============================================================================
# GRID (pixels)
# =============================================================================
CELL_WIDTH = 101
CELL_HEIGHT = 83
GRID_COLUMNS = 5
GRID_ROWS = 6                 # row 0 is the water, rows 1-5 are walkable

# =============================================================================
# OBSTACLES
# =============================================================================
OBSTACLE_COUNT = 6
OBSTACLE_LANES = 3            # stone rows 1..3, obstacles cycle through them
OBSTACLE_OFFSCREEN_CELLS = 3  # start/wrap distance beyond each edge
OBSTACLE_MIN_SPEED = 100      # pixels per second
OBSTACLE_MAX_SPEED = 500      # exclusive
OBSTACLE_SPEED_INCREMENT = 50
COLLISION_DISTANCE = 75       # less than one cell width

# =============================================================================
# PLAYER / SESSION
# =============================================================================
PLAYER_LIVES = 3
LEVEL_SCORE = 100

# =============================================================================
# SPRITES
# =============================================================================
OBSTACLE_SPRITE = "images/enemy-bug.png"
PLAYER_SPRITE = "images/char-boy.png"
