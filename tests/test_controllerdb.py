from pathlib import Path

import pytest

from gamepad_events.controllerdb import (
    filter_mappings,
    main,
    sdl_platform,
    write_filtered,
)

LINUX_LINE = "00000000000000000000000000000000,Test Pad,a:b0,b:b1,platform:Linux,"
WINDOWS_LINE = "00000000000000000000000000000001,Test Pad,a:b0,b:b1,platform:Windows,"
MAC_LINE = "00000000000000000000000000000002,Test Pad,a:b0,platform:Mac OS X"
COMMENT = "# Game Controller DB"


@pytest.mark.parametrize(
    "family, os_name, expected",
    [
        ("unix", "android", "platform:Android"),
        ("unix", "macos", "platform:Mac OS X"),
        ("unix", "linux", "platform:Linux"),
        ("unix", "freebsd", "platform:Linux"),
        ("windows", "windows", "platform:Windows"),
        ("wasm", "unknown", "platform:Web"),
        ("other", "anything", "platform:Unknown"),
    ],
)
def test_sdl_platform(family, os_name, expected):
    assert sdl_platform(family, os_name) == expected


def test_filter_keeps_only_matching_platform():
    lines = [COMMENT, "", LINUX_LINE, WINDOWS_LINE, MAC_LINE]
    assert list(filter_mappings(lines, "platform:Linux")) == [LINUX_LINE]
    assert list(filter_mappings(lines, "platform:Mac OS X")) == [MAC_LINE]


def test_filter_ignores_trailing_commas_and_whitespace():
    line = WINDOWS_LINE + ",,  "
    assert list(filter_mappings([line], "platform:Windows")) == [line]


def test_filter_strips_line_endings():
    result = list(filter_mappings([LINUX_LINE + "\r\n"], "platform:Linux"))
    assert result == [LINUX_LINE]


def test_filter_requires_platform_at_end():
    line = "00000000000000000000000000000003,platform:Linux,a:b0,"
    assert list(filter_mappings([line], "platform:Linux")) == []


def test_write_filtered(tmp_path: Path):
    source = tmp_path / "full.txt"
    source.write_text("\n".join([COMMENT, LINUX_LINE, WINDOWS_LINE]) + "\n", encoding="utf-8")
    destination = tmp_path / "out.txt"

    count = write_filtered(source, destination, "platform:Windows")

    assert count == 1
    assert destination.read_bytes() == (WINDOWS_LINE + "\n").encode("utf-8")


def test_write_filtered_missing_source(tmp_path: Path):
    with pytest.raises(FileNotFoundError, match="SDL_GameControllerDB"):
        write_filtered(tmp_path / "missing.txt", tmp_path / "out.txt", "platform:Linux")


def test_main_writes_output(tmp_path: Path):
    source = tmp_path / "full.txt"
    source.write_text("\n".join([LINUX_LINE, WINDOWS_LINE, MAC_LINE]), encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    status = main(
        [str(out_dir), "--source", str(source), "--family", "unix", "--os", "macos"]
    )

    assert status == 0
    assert (out_dir / "gamecontrollerdb.txt").read_text(encoding="utf-8") == MAC_LINE + "\n"


def test_main_reports_missing_source(tmp_path: Path, capsys):
    status = main([str(tmp_path), "--source", str(tmp_path / "missing.txt")])
    assert status == 1
    assert "SDL_GameControllerDB" in capsys.readouterr().err