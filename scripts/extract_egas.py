#!/usr/bin/env python3
"""
Extract EGA asset file(s) to upscaled PNG images.

Usage:
    python scripts/extract_egas.py <ega_file>                    # Single file
    python scripts/extract_egas.py path/to/kult/*.ega            # Multiple files
    python scripts/extract_egas.py path/to/kult                  # All .ega files in folder
    python scripts/extract_egas.py <ega_file> -o out             # Custom output folder
"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path for imports
script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))

from generators import ega_transform_process_multiple
from external_files import SCALE_FACTOR_WIDTH, SCALE_FACTOR_HEIGHT
from data import CURRENT_VERSION, DEFAULT_OUTPUT_DIR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract EGA asset file(s) to PNG images",
        epilog=(
            "Will create a folder (default: `png`) in which the output images are placed. "
            f"The extracted PNGs are scaled {SCALE_FACTOR_WIDTH}x in width "
            f"and {SCALE_FACTOR_HEIGHT}x in height."
        ),
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="EGA file(s) or folder containing EGA files",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output folder for PNG files (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {CURRENT_VERSION}",
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.paths:
        parser.print_help()
        return 0

    paths = [Path(p) for p in args.paths]
    ega_transform_process_multiple(paths, Path(args.output_dir))

    return 0


if __name__ == "__main__":
    sys.exit(main())
