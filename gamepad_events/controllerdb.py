"""Reduce an SDL game controller database to the mappings of one platform."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from os import PathLike
from pathlib import Path
from typing import List, Optional, Tuple, Union

DEFAULT_SOURCE = Path("SDL_GameControllerDB") / "gamecontrollerdb.txt"
OUTPUT_NAME = "gamecontrollerdb.txt"

_StrPath = Union[str, "PathLike[str]"]


def sdl_platform(family: str, os_name: str) -> str:
    """Return the ``platform:`` field SDL uses for a target family and OS."""
    if family == "unix":
        name = {"android": "Android", "macos": "Mac OS X"}.get(os_name, "Linux")
    elif family == "windows":
        name = "Windows"
    elif family == "wasm":
        name = "Web"
    else:
        name = "Unknown"
    return "platform:" + name


def filter_mappings(lines: Iterable[str], platform: str) -> Iterator[str]:
    """Yield the mapping lines that belong to ``platform``, without line endings."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.rstrip().rstrip(",").endswith(platform):
            yield line


def write_filtered(source: _StrPath, destination: _StrPath, platform: str) -> int:
    """Copy the mappings for ``platform`` from ``source`` to ``destination``.

    Returns the number of mappings written.
    """
    source_path = Path(source)
    try:
        reader = open(source_path, encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(
            f"Could not open gamecontrollerdb.txt {str(source_path)!r}. Did you forget to "
            "pull the `SDL_GameControllerDB` submodule?"
        ) from exc

    written = 0
    with reader, open(destination, "w", encoding="utf-8", newline="\n") as writer:
        for line in filter_mappings(reader, platform):
            writer.write(line + "\n")
            written += 1
    return written


def _current_target() -> Tuple[str, str]:
    platform = sys.platform
    if platform.startswith("win"):
        return "windows", "windows"
    if platform == "darwin":
        return "unix", "macos"
    if platform in ("emscripten", "wasi"):
        return "wasm", platform
    return "unix", platform


def main(argv: Optional[List[str]] = None) -> int:
    """Write the filtered database for the chosen target into an output directory."""
    family, os_name = _current_target()
    parser = argparse.ArgumentParser(
        description="Keep only the SDL controller mappings of one platform."
    )
    parser.add_argument("out_dir", help="directory that receives gamecontrollerdb.txt")
    parser.add_argument(
        "--source", default=str(DEFAULT_SOURCE), help="path of the full database"
    )
    parser.add_argument("--family", default=family, help="target family (unix, windows, wasm)")
    parser.add_argument("--os", dest="os_name", default=os_name, help="target operating system")
    args = parser.parse_args(argv)

    destination = Path(args.out_dir) / OUTPUT_NAME
    try:
        write_filtered(args.source, destination, sdl_platform(args.family, args.os_name))
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())