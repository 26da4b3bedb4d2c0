"""Print the last lines or bytes of files."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from typing import IO, BinaryIO

_NUM_RE = re.compile(r"^([+-])?([0-9]+)$")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


@dataclass(frozen=True)
class TakeValue:
    """How many lines or bytes to take.

    A negative number counts from the end, a positive one gives the
    1-based starting position; ``plus_zero`` means "+0", the whole input.
    """

    num: int = 0
    plus_zero: bool = False


PLUS_ZERO = TakeValue(0, plus_zero=True)


@dataclass
class Config:
    """Options for a tail run."""

    files: list[str]
    lines: TakeValue = TakeValue(-10)
    bytes: TakeValue | None = None
    quiet: bool = False


def parse_num(val: str) -> TakeValue:
    """Parse a count; unsigned values count from the end. Raises ValueError(val)."""
    match = _NUM_RE.match(val)
    if match is None:
        raise ValueError(val)
    sign = match.group(1) or "-"
    num = int(sign + match.group(2))
    if not _I64_MIN <= num <= _I64_MAX:
        raise ValueError(val)
    if sign == "+" and num == 0:
        return PLUS_ZERO
    return TakeValue(num)


def count_lines_bytes(filename: str) -> tuple[int, int]:
    """Return the number of lines and bytes in a file."""
    num_lines = num_bytes = 0
    with open(filename, "rb") as fh:
        for line in fh:
            num_lines += 1
            num_bytes += len(line)
    return num_lines, num_bytes


def get_start_index(take_val: TakeValue, total: int) -> int | None:
    """Return the 0-based index to start printing from, or None for nothing."""
    if take_val.plus_zero:
        return 0 if total > 0 else None
    num = take_val.num
    if num == 0 or total == 0 or num > total:
        return None
    start = total + num if num < 0 else num - 1
    return max(start, 0)


def print_bytes(file: BinaryIO, num_bytes: TakeValue, total_bytes: int, out: IO[str]) -> None:
    """Write the selected trailing bytes of a binary file to out."""
    start = get_start_index(num_bytes, total_bytes)
    if start is None:
        return
    file.seek(start)
    data = file.read()
    if data:
        out.write(data.decode("utf-8", errors="replace"))


def print_lines(file: BinaryIO, num_lines: TakeValue, total_lines: int, out: IO[str]) -> None:
    """Write the selected trailing lines of a binary file to out."""
    start = get_start_index(num_lines, total_lines)
    if start is None:
        return
    for line_num, line in enumerate(file):
        if line_num >= start:
            out.write(line.decode("utf-8", errors="replace"))


def run(config: Config, stdout: IO[str] | None = None, stderr: IO[str] | None = None) -> None:
    """Print the tail of every configured file; unreadable files are reported and skipped."""
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    num_files = len(config.files)
    for file_num, filename in enumerate(config.files):
        try:
            fh = open(filename, "rb")
        except OSError as err:
            print(f"{filename}: {err.strerror}", file=stderr)
            continue
        with fh:
            if not config.quiet and num_files > 1:
                prefix = "\n" if file_num > 0 else ""
                print(f"{prefix}==> {filename} <==", file=stdout)
            total_lines, total_bytes = count_lines_bytes(filename)
            if config.bytes is not None:
                print_bytes(fh, config.bytes, total_bytes, stdout)
            else:
                print_lines(fh, config.lines, total_lines, stdout)


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a Config from command-line arguments; raises ValueError on bad counts."""
    parser = argparse.ArgumentParser(prog="tail", description="Print the end of files")
    parser.add_argument("files", metavar="FILE", nargs="+", help="Input file(s)")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("-n", "--lines", metavar="LINES", default="10", help="Number of lines")
    group.add_argument("-c", "--bytes", metavar="BYTES", help="Number of bytes")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress headers")
    args = parser.parse_args(argv)

    try:
        lines = parse_num(args.lines)
    except ValueError as err:
        raise ValueError(f"illegal line count -- {err}") from None

    num_bytes = None
    if args.bytes is not None:
        try:
            num_bytes = parse_num(args.bytes)
        except ValueError as err:
            raise ValueError(f"illegal byte count -- {err}") from None

    return Config(files=args.files, lines=lines, bytes=num_bytes, quiet=args.quiet)


def main(argv: list[str] | None = None) -> int:
    """Command entry point; returns the exit status."""
    try:
        run(parse_args(argv))
    except (OSError, ValueError) as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())