"""Layout constants and color definitions."""

# Timing
FPS = 60

# Window
SCREEN_W = 800
TITLE = "Diamond Run"

# Shapes in model space ([-1, 1] square, nose pointing north)
SHIP_SHAPE = [(0.0, 1.0), (-0.7, -1.0), (0.0, -0.5), (0.7, -1.0)]
DIAMOND_SHAPE = [(0.0, 1.0), (0.75, 0.0), (0.0, -1.0), (-0.75, 0.0)]

# Overlay
OVERLAY_POS = (5, 5)
FONT_SIZE = 24

# Colors
BG_COLOR = (12, 12, 24)
SHIP_COLOR = (90, 200, 255)
DIAMOND_COLOR = (255, 215, 90)
OUTLINE_COLOR = (255, 255, 255)
TEXT_COLOR = (230, 230, 240)
VICTORY_COLOR = (120, 255, 140)
