"""
panic_blob module: render/colors.py

Central color palette.
"""

BG = (240, 240, 240)
WALL = (220, 220, 220)
TEXT = (0, 0, 0)

BLOB = (20, 120, 255)
EYE = (255, 255, 255)
PUPIL = (0, 0, 0)

PROP_FREE = (60, 60, 60)
PROP_HELD = (255, 180, 0)
