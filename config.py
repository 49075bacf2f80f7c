# config.py - Game configuration settings
"""
Neural Net Wars - Real-time neural steering demo
Configuration file for game settings and constants
"""

# Screen Settings
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Neural Net Wars"
FPS = 60
FRAME_DELAY_MS = 16        # ~60 FPS cap, fixed delay after each frame
VSYNC = True               # Falls back to a plain window if unsupported

# Colors (RGB)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)          # Background
GREEN = (0, 255, 0)        # Unit placeholder
RED = (255, 0, 0)          # Target marker

# Unit Settings
INITIAL_UNITS = 5
UNIT_SIZE = 40
UNIT_START_SPEED = 2.0
UNIT_TOPOLOGY = (4, 6, 2)

# Brain input/output scaling
DISTANCE_SCALE = 800.0
SPEED_SCALE = 5.0

# Target Settings
TARGET_START = (400, 300)
TARGET_SPRITE_SIZE = 40
TARGET_MARKER_SIZE = 10

# Assets (missing files fall back to drawn shapes)
UNIT_SPRITE_PATH = "cat_unit.bmp"
TARGET_SPRITE_PATH = "cat_target.bmp"

# Randomness - None means a fresh seed every run
RANDOM_SEED = None

DEBUG_MODE = False
