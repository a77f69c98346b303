from pathlib import Path
from typing import List

from ega_files import extract_ega, is_fullscreen_ega, InvalidSpriteSheetError
from data import SEPARATOR_LINE_LENGTH, read_file_to_bytes
from .constants import EGA_FILE_SUFFIX


def ega_transform_process_single(path: Path, output_dir: Path) -> bool:
    """Extract a single EGA asset file to PNG image(s).

    Format errors are reported and the file is skipped. I/O errors propagate.

    Args:
        path: Path to the EGA asset file
        output_dir: Existing directory receiving the PNG files

    Returns:
        True if successful, False if the file is not a valid EGA asset
    """
    print(f"Extracting {path}")

    rawdata = read_file_to_bytes(path)
    kind = "full-screen" if is_fullscreen_ega(rawdata) else "sprite sheet"
    print(f"[INFO] Format: {kind} ({len(rawdata)} bytes)")

    try:
        images = extract_ega(rawdata, output_dir, name=path.stem)
    except InvalidSpriteSheetError as e:
        print(f"[ERROR] {e}")
        return False

    for image in images:
        print(f"[INFO] {image.name}: {image.width}x{image.height}")

    return True


def collect_ega_files(paths: List[Path]) -> List[Path]:
    """Expand directories to the EGA files they contain, keeping argument order."""
    files = []

    for path in paths:
        if path.is_dir():
            found = sorted(
                p
                for p in path.iterdir()
                if p.is_file() and p.suffix.lower() == EGA_FILE_SUFFIX
            )
            if not found:
                print(f"[ERROR] No EGA files found in: {path}")
            files.extend(found)
        else:
            files.append(path)

    return files


def ega_transform_process_multiple(paths: List[Path], output_dir: Path) -> int:
    """Extract every given EGA file (or folder of EGA files) in order.

    The output directory is created once before any file is processed.

    Args:
        paths: EGA files or folders containing EGA files
        output_dir: Output directory for PNG files

    Returns:
        Number of files that failed format validation
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    files = collect_ega_files(paths)

    success_count = 0
    failed_items = []

    for idx, file_path in enumerate(files):
        if idx > 0:
            print()

        if ega_transform_process_single(file_path, output_dir):
            success_count += 1
        else:
            failed_items.append(file_path.name)

    if len(files) > 1:
        print()
        print("=" * SEPARATOR_LINE_LENGTH)
        print("[SUMMARY] PROCESSING SUMMARY")
        print("=" * SEPARATOR_LINE_LENGTH)
        print(f"[INFO] Total: {len(files)}")
        print(f"[INFO] Successful: {success_count}")
        print(f"[INFO] Failed: {len(failed_items)}")

        if failed_items:
            print("\n[ERROR] Failed items:")
            for item in failed_items:
                print(f"   - {item}")

        print("=" * SEPARATOR_LINE_LENGTH)

    return len(failed_items)
