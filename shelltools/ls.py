"""List files and directories, optionally in a long format."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import IO, Iterable

try:
    import grp
    import pwd
except ImportError:  # platforms without a user database
    grp = None  # type: ignore[assignment]
    pwd = None  # type: ignore[assignment]


class Owner(Enum):
    """A class of users whose permission bits can be read from a mode."""

    USER = "user"
    GROUP = "group"
    OTHER = "other"

    def masks(self) -> tuple[int, int, int]:
        """Return the read, write and execute bit masks for this owner."""
        return _MASKS[self]


_MASKS = {
    Owner.USER: (0o400, 0o200, 0o100),
    Owner.GROUP: (0o040, 0o020, 0o010),
    Owner.OTHER: (0o004, 0o002, 0o001),
}

# Column alignment and the separator written before each column.
_ALIGN = "<<><<><<"
_SEPARATORS = ("", "", "  ", "  ", "  ", "  ", "  ", "  ")


@dataclass
class Config:
    """Options for a listing run."""

    paths: list[str] = field(default_factory=lambda: ["."])
    long: bool = False
    show_hidden: bool = False


def find_files(paths: Iterable[str], show_hidden: bool = False,
               stderr: IO[str] | None = None) -> list[str]:
    """Expand directories into their entries; missing paths are reported and skipped."""
    stderr = sys.stderr if stderr is None else stderr
    results: list[str] = []
    for name in paths:
        try:
            meta = os.stat(name)
        except OSError as err:
            print(f"{name}: {err.strerror} (os error {err.errno})", file=stderr)
            continue
        if os.path.isdir(name) and meta is not None:
            with os.scandir(name) as entries:
                for entry in entries:
                    if show_hidden or not entry.name.startswith("."):
                        results.append(os.path.join(name, entry.name))
        else:
            results.append(name)
    return results


def _user_name(uid: int) -> str:
    if pwd is None:
        return str(uid)
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def _group_name(gid: int) -> str:
    if grp is None:
        return str(gid)
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def _long_row(path: str) -> tuple[str, ...]:
    meta = os.stat(path)
    modified = datetime.fromtimestamp(meta.st_mtime)
    return (
        "d" if os.path.isdir(path) else "-",
        format_mode(meta.st_mode),
        str(meta.st_nlink),
        _user_name(meta.st_uid),
        _group_name(meta.st_gid),
        str(meta.st_size),
        modified.strftime("%b %d %y %H:%M"),
        path,
    )


def format_output(paths: Iterable[str]) -> str:
    """Render a long listing of the paths as an aligned table, one row per line."""
    rows = [_long_row(path) for path in paths]
    if not rows:
        return ""
    widths = [max(len(row[col]) for row in rows) for col in range(len(_ALIGN))]
    last = len(_ALIGN) - 1
    lines = []
    for row in rows:
        cells = []
        for col, (cell, align, width, sep) in enumerate(zip(row, _ALIGN, widths, _SEPARATORS)):
            if col == last and align == "<":
                padded = cell
            else:
                padded = f"{cell:{align}{width}}"
            cells.append(sep + padded)
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def format_mode(mode: int) -> str:
    """Turn a mode such as 0o751 into a string such as "rwxr-x--x"."""
    return "".join(mk_triple(mode, owner) for owner in Owner)


def mk_triple(mode: int, owner: Owner) -> str:
    """Turn a mode and an owner into a string such as "r-x"."""
    read, write, execute = owner.masks()
    return (
        ("r" if mode & read else "-")
        + ("w" if mode & write else "-")
        + ("x" if mode & execute else "-")
    )


def run(config: Config, stdout: IO[str] | None = None, stderr: IO[str] | None = None) -> None:
    """List the configured paths."""
    stdout = sys.stdout if stdout is None else stdout
    paths = find_files(config.paths, config.show_hidden, stderr)
    if config.long:
        print(format_output(paths), file=stdout)
    else:
        for path in paths:
            print(path, file=stdout)


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a Config from command-line arguments."""
    parser = argparse.ArgumentParser(prog="ls", description="List directory contents")
    parser.add_argument("paths", metavar="PATH", nargs="*", default=["."],
                        help="Files and/or directories")
    parser.add_argument("-l", "--long", action="store_true", help="Long listing")
    parser.add_argument("-a", "--all", dest="show_hidden", action="store_true",
                        help="Show all files")
    args = parser.parse_args(argv)
    return Config(paths=list(args.paths), long=args.long, show_hidden=args.show_hidden)


def main(argv: list[str] | None = None) -> int:
    """Command entry point; returns the exit status."""
    try:
        run(parse_args(argv))
    except OSError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())