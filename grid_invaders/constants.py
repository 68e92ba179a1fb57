"""
Grid Invaders Constants
"""

WIDTH = 800
HEIGHT = 600

FPS = 60

CAPTION = "Grid Invaders"

# Player
PLAYER_WIDTH = 40
PLAYER_HEIGHT = 20
PLAYER_SPEED = 5
PLAYER_BOTTOM_MARGIN = 10

# Projectile
PROJECTILE_WIDTH = 4
PROJECTILE_HEIGHT = 10
PROJECTILE_SPEED = 7

# Formation
ENEMY_ROWS = 5
ENEMY_COLUMNS = 10
ENEMY_WIDTH = 30
ENEMY_HEIGHT = 20
ENEMY_PADDING = 10
ENEMY_OFFSET_TOP = 30
ENEMY_OFFSET_LEFT = 30
ENEMY_DX = 1
ENEMY_DROP = 40

# Colors
BACKGROUND_COLOR = "black"
PLAYER_COLOR = "green"
PROJECTILE_COLOR = "yellow"
ENEMY_COLOR = "red"
OVERLAY_COLOR = (0, 0, 0, 180)
TEXT_COLOR = "white"

# Overlay texts
START_LABEL = "Start Game"
RESTART_LABEL = "Play Again"
WIN_MESSAGE = "You Win!"
LOSE_MESSAGE = "You Lose!"
