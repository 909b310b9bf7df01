import os

# Board configuration
CANVAS_SIZE = 600
TILE_SIZE = 20
GRID_SIZE = CANVAS_SIZE // TILE_SIZE
START_LENGTH = 3
FOOD_REWARD = 10
FOOD_MAX_ATTEMPTS = 64

# Window configuration
HUD_HEIGHT = 56
WINDOW_WIDTH = CANVAS_SIZE
WINDOW_HEIGHT = CANVAS_SIZE + HUD_HEIGHT
FRAME_RATE = 60

# Tick interval in milliseconds per difficulty.
SPEEDS = {
    "slow": 150,
    "normal": 100,
    "fast": 60,
}
DEFAULT_SPEED = "normal"

# Colors (R, G, B)
BG_TOP = (14, 10, 28)
BG_BOTTOM = (6, 4, 14)
GRID_LINE = (26, 22, 48)
HEAD_COLOR = (255, 255, 255)
BODY_START = (0, 255, 136)
BODY_END = (0, 204, 255)
FOOD_COLOR = (255, 0, 85)
WHITE = (240, 240, 240)
DIM = (150, 150, 170)
SEGMENT_RADIUS = 4
HUD_BASE_SIZE = 22

# Audio
SOUND_ENABLED = True
SAMPLE_RATE = 44100

# High score persistence
HIGH_SCORE_KEY = "snakeHighScore"
HIGH_SCORE_FILE = os.path.join(os.path.expanduser("~"), ".neon_snake.json")
