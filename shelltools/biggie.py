"""Write a large file of random words."""

from __future__ import annotations

import argparse
import random
import re
import string
import sys
from dataclasses import dataclass
from typing import IO

_ALPHANUMERIC = string.ascii_letters + string.digits
_USIZE_MAX = 2**64 - 1
_UINT_RE = re.compile(r"\+?[0-9]+")


@dataclass
class Config:
    """Where to write and how many lines."""

    outfile: str = "out"
    lines: int = 100000


def parse_positive_int(val: str) -> int:
    """Parse an integer greater than zero; raises ValueError(val) otherwise."""
    if _UINT_RE.fullmatch(val) is None:
        raise ValueError(val)
    num = int(val)
    if not 0 < num <= _USIZE_MAX:
        raise ValueError(val)
    return num


def random_string(rng: random.Random | None = None) -> str:
    """Return a random alphanumeric word of 2 to 7 characters."""
    rng = random.Random() if rng is None else rng
    length = rng.randrange(2, 8)
    return "".join(rng.choice(_ALPHANUMERIC) for _ in range(length))


def random_line(rng: random.Random | None = None) -> str:
    """Return 7 to 14 random words joined by spaces."""
    rng = random.Random() if rng is None else rng
    return " ".join(random_string(rng) for _ in range(rng.randrange(7, 15)))


def run(config: Config, stdout: IO[str] | None = None,
        rng: random.Random | None = None) -> None:
    """Write the random lines to the output file and report what was done."""
    stdout = sys.stdout if stdout is None else stdout
    rng = random.Random() if rng is None else rng
    with open(config.outfile, "w", encoding="utf-8") as fh:
        for _ in range(config.lines):
            fh.write(random_line(rng) + "\n")
    plural = "" if config.lines == 1 else "s"
    print(f'Done, wrote {config.lines:,} line{plural} to "{config.outfile}".', file=stdout)


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a Config from command-line arguments; raises ValueError on a bad count."""
    parser = argparse.ArgumentParser(prog="biggie", description="Make big text files")
    parser.add_argument("-n", "--lines", metavar="LINES", default="100000",
                        help="Number of lines")
    parser.add_argument("-o", "--outfile", metavar="FILE", default="out",
                        help="Output filename")
    args = parser.parse_args(argv)
    try:
        lines = parse_positive_int(args.lines)
    except ValueError as err:
        raise ValueError(f'--lines "{err}" must be greater than 0') from None
    return Config(outfile=args.outfile, lines=lines)


def main(argv: list[str] | None = None) -> int:
    """Command entry point; returns the exit status."""
    try:
        config = parse_args(argv)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    try:
        run(config)
    except OSError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())