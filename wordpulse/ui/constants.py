"""Layout constants and color definitions."""

# Timing
FPS = 60

# Window
SCREEN_W = 800
SCREEN_H = 600
TITLE = "wordpulse"

# Text
CURRENT_FONT_SIZE = 40
NEXT_FONT_SIZE = 24
HUD_FONT_SIZE = 14
TEXT_PADDING = 5
NEXT_GAP = 8  # vertical gap between current word and preview

# Bubble anchor (centre of the shape)
BUBBLE_X = SCREEN_W // 2
BUBBLE_Y = SCREEN_H // 2 + 40
BUBBLE_OUTLINE_W = 2

# Colors
BG_COLOR = (230, 230, 230)
TYPED_COLOR = (255, 128, 128)
REMAINING_COLOR = (0, 255, 128)
NEXT_COLOR = (120, 120, 140)
HUD_COLOR = (90, 90, 100)
BUBBLE_FILL = (255, 255, 255)
BUBBLE_OUTLINE = (60, 60, 70)
