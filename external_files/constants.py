SCALE_FACTOR_WIDTH = 5
SCALE_FACTOR_HEIGHT = 6

IMAGE_EXTENSION = ".png"
