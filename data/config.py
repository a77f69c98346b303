import os

DEBUG = os.environ.get("EGA_EXTRACT_DEBUG", "").lower() in ("1", "true", "yes")

CURRENT_VERSION = "1.0.0"

DEFAULT_OUTPUT_DIR = "png"
