"""
Tests for batch extraction and the command line entry point.

Usage:
    pytest tests/test_ega_transform.py
"""

import sys
from pathlib import Path

import pytest
from PIL import Image

script_dir = Path(__file__).parent
if str(script_dir.parent) not in sys.path:
    sys.path.insert(0, str(script_dir.parent))
if str(script_dir.parent / "scripts") not in sys.path:
    sys.path.insert(0, str(script_dir.parent / "scripts"))

import extract_egas
from generators import (
    collect_ega_files,
    ega_transform_process_multiple,
    ega_transform_process_single,
)
from tests.utils import build_frame_record, build_planar, build_sprite_sheet


@pytest.fixture
def ega_dir(tmp_path):
    folder = tmp_path / "kult"
    folder.mkdir()
    (folder / "title.ega").write_bytes(build_planar([0x00, 0xFF, 0x00, 0x00]))
    (folder / "chars.ega").write_bytes(
        build_sprite_sheet([build_frame_record(1, 2), build_frame_record(2, 3)])
    )
    (folder / "broken.ega").write_bytes(bytes([0, 0, 0, 5, 1, 2, 3]))
    (folder / "notes.txt").write_bytes(b"ignored")
    return folder


def test_process_single_fullscreen(ega_dir, tmp_path):
    out = tmp_path / "png"
    out.mkdir()

    assert ega_transform_process_single(ega_dir / "title.ega", out)

    with Image.open(out / "title.png") as img:
        assert img.size == (1600, 1200)


def test_process_single_sprite_sheet(ega_dir, tmp_path, capsys):
    out = tmp_path / "png"
    out.mkdir()

    assert ega_transform_process_single(ega_dir / "chars.ega", out)

    with Image.open(out / "chars-00.png") as img:
        assert img.size == (4 * 5, 2 * 6)
    with Image.open(out / "chars-01.png") as img:
        assert img.size == (8 * 5, 3 * 6)
    assert "[INFO] chars-01: 8x3" in capsys.readouterr().out


def test_process_single_invalid_reports_and_writes_nothing(ega_dir, tmp_path, capsys):
    out = tmp_path / "png"
    out.mkdir()

    assert not ega_transform_process_single(ega_dir / "broken.ega", out)

    assert list(out.iterdir()) == []
    assert "Not a valid sprite sheet, size in header incorrect." in capsys.readouterr().out


def test_process_single_missing_file_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        ega_transform_process_single(tmp_path / "missing.ega", tmp_path)


def test_collect_ega_files_expands_folders(ega_dir, tmp_path):
    extra = tmp_path / "extra.bin"

    files = collect_ega_files([extra, ega_dir])

    assert [f.name for f in files] == ["extra.bin", "broken.ega", "chars.ega", "title.ega"]


def test_process_multiple_continues_after_invalid(ega_dir, tmp_path, capsys):
    out = tmp_path / "out" / "png"

    failed = ega_transform_process_multiple(
        [ega_dir / "broken.ega", ega_dir / "chars.ega"], out
    )

    assert failed == 1
    assert sorted(p.name for p in out.iterdir()) == ["chars-00.png", "chars-01.png"]
    output = capsys.readouterr().out
    assert "[INFO] Failed: 1" in output
    assert output.index("Extracting") < output.index("broken.ega")


def test_process_multiple_stops_on_io_error(ega_dir, tmp_path):
    out = tmp_path / "png"

    with pytest.raises(FileNotFoundError):
        ega_transform_process_multiple(
            [ega_dir / "missing.ega", ega_dir / "chars.ega"], out
        )

    assert out.is_dir()
    assert list(out.iterdir()) == []


def test_cli_without_arguments_prints_usage(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    assert extract_egas.main([]) == 0

    assert "usage:" in capsys.readouterr().out
    assert not (tmp_path / "png").exists()


def test_cli_extracts_to_default_folder(ega_dir, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert extract_egas.main([str(ega_dir)]) == 0

    assert sorted(p.name for p in (tmp_path / "png").iterdir()) == [
        "chars-00.png",
        "chars-01.png",
        "title.png",
    ]


def test_cli_output_dir_option(ega_dir, tmp_path):
    out = tmp_path / "custom"

    extract_egas.main([str(ega_dir / "title.ega"), "-o", str(out)])

    assert (out / "title.png").exists()
