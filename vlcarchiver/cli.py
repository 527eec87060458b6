"""Command line for packing and unpacking text files."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from .vlc import decode, encode

PACKED_EXTENSION = "vlc"
UNPACKED_EXTENSION = "txt"


def _stem(path: str) -> str:
    separators = os.sep + (os.altsep or "")
    trimmed = path.rstrip(separators)
    if not trimmed:
        name = os.sep if path else "."
    else:
        name = os.path.basename(trimmed)
    dot = name.rfind(".")
    return name[:dot] if dot >= 0 else name


def packed_file_name(path: str) -> str:
    """Name of the packed file for a source path, in the working directory."""
    return f"{_stem(path)}.{PACKED_EXTENSION}"


def unpacked_file_name(path: str) -> str:
    """Name of the unpacked file for a packed path, in the working directory."""
    return f"{_stem(path)}.{UNPACKED_EXTENSION}"


def _read(path: str) -> str:
    if not path:
        raise ValueError("not found a path to file")
    with open(path, encoding="utf-8", newline="") as handle:
        return handle.read()


def _write(name: str, content: str) -> Path:
    target = Path(name)
    with target.open("w", encoding="utf-8", newline="") as handle:
        handle.write(content)
    return target


def pack(path: str) -> Path:
    """Compress the file at path and return the written file."""
    return _write(packed_file_name(path), encode(_read(path)))


def unpack(path: str) -> Path:
    """Decompress the file at path and return the written file."""
    return _write(unpacked_file_name(path), decode(_read(path)))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Simple archiver")
    commands = parser.add_subparsers(dest="command")
    for name, handler, help_text in (
        ("pack", pack, "pack your file"),
        ("unpack", unpack, "unpack your file"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("path")
        sub.set_defaults(handler=handler)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the archiver command line and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0
    try:
        args.handler(args.path)
    except (OSError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())