"""
EGA asset format constants.
"""


class EGAFormat:
    FULLSCREEN_WIDTH = 320
    FULLSCREEN_HEIGHT = 200
    PLANE_COUNT = 4
    PLANE_SIZE = 8000
    FULLSCREEN_SIZE = PLANE_COUNT * PLANE_SIZE


class SpriteSheetFormat:
    SIZE_FIELD_LEN = 4
    FRAME_HEADER_LEN = 4
    FRAME_INDEX_DIGITS = 2


PALETTE_COLOR_COUNT = 16
PALETTE_CHANNEL_COUNT = 4
