"""
Tile Wave - Viewer Constants

All configuration constants for the viewer including layout, colors and
frame pacing.
"""

# UI Layout
TOOLBAR_HEIGHT = 40
STATUS_HEIGHT = 30
CANVAS_OFFSET_X = 0
CANVAS_OFFSET_Y = TOOLBAR_HEIGHT
MIN_WINDOW_WIDTH = 420

# Frame pacing
FPS = 30
STEPS_PER_FRAME = 1
MAX_STEPS_PER_FRAME = 64

# Colors
COLOR_BG = (0, 0, 0)
COLOR_TOOLBAR = (32, 32, 32)
COLOR_STATUS = (32, 32, 32)
COLOR_GRID = (80, 80, 80)
COLOR_TEXT = (255, 255, 255)
COLOR_BUTTON = (64, 64, 64)
COLOR_BUTTON_HOVER = (80, 80, 80)
COLOR_BUTTON_ACTIVE = (100, 100, 200)
COLOR_BUTTON_DISABLED = (44, 44, 44)
COLOR_TEXT_DISABLED = (120, 120, 120)
