"""Print a random fortune, or every fortune matching a pattern."""

from __future__ import annotations

import argparse
import os
import random
import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator, Sequence

_U64_MAX = 2**64 - 1
_U64_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class Fortune:
    """One fortune and the basename of the file it came from."""

    source: str
    text: str


@dataclass
class Config:
    """Options for a fortune run."""

    sources: list[str]
    pattern: re.Pattern[str] | None = None
    seed: int | None = None


def parse_u64(val: str) -> int:
    """Parse an unsigned 64-bit integer; raises ValueError with a readable message."""
    if _U64_RE.fullmatch(val) is None or int(val) > _U64_MAX:
        raise ValueError(f'"{val}" not a valid integer')
    return int(val)


def _walk(path: str) -> Iterator[str]:
    """Yield every regular file under path (or path itself if it is a file)."""
    if os.path.isdir(path):
        for dirpath, _dirnames, filenames in os.walk(path):
            for name in filenames:
                full = os.path.join(dirpath, name)
                if os.path.isfile(full) and not os.path.islink(full):
                    yield full
    elif os.path.isfile(path):
        yield path


def find_files(paths: Iterable[str]) -> list[str]:
    """Collect fortune files from the given files and directories, sorted and unique.

    Files with a ``.dat`` extension are skipped. A missing path raises OSError.
    """
    found: set[str] = set()
    for path in paths:
        try:
            os.stat(path)
        except OSError as err:
            raise OSError(f"{path}: {err.strerror}") from err
        found.update(f for f in _walk(path) if Path(f).suffix != ".dat")
    return sorted(found, key=lambda p: (Path(p).parts, p))


def _read_lines(stream: IO[bytes]) -> Iterator[str]:
    for raw in stream:
        try:
            line = raw.decode("utf-8")
        except UnicodeDecodeError:
            continue
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        yield line


def read_fortunes(paths: Iterable[str | os.PathLike[str]]) -> list[Fortune]:
    """Read the fortunes, separated by lines holding only "%", from each file in order."""
    fortunes: list[Fortune] = []
    buffer: list[str] = []
    for path in paths:
        basename = Path(path).name
        try:
            stream = open(path, "rb")
        except OSError as err:
            raise OSError(f"{os.fspath(path)}: {err.strerror}") from err
        with stream:
            for line in _read_lines(stream):
                if line == "%":
                    if buffer:
                        fortunes.append(Fortune(basename, "\n".join(buffer)))
                        buffer.clear()
                else:
                    buffer.append(line)
    return fortunes


def pick_fortune(fortunes: Sequence[Fortune], seed: int | None = None) -> str | None:
    """Choose the text of one fortune at random; a seed makes the choice repeatable."""
    if not fortunes:
        return None
    rng = random.Random(seed) if seed is not None else random.Random()
    return rng.choice(fortunes).text


def run(config: Config, stdout: IO[str] | None = None, stderr: IO[str] | None = None) -> None:
    """Print matching fortunes, or one random fortune when no pattern is set."""
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr
    fortunes = read_fortunes(find_files(config.sources))

    if config.pattern is not None:
        prev_source: str | None = None
        for fortune in fortunes:
            if not config.pattern.search(fortune.text):
                continue
            if fortune.source != prev_source:
                print(f"({fortune.source})\n%", file=stderr)
                prev_source = fortune.source
            print(f"{fortune.text}\n%", file=stdout)
    else:
        text = pick_fortune(fortunes, config.seed)
        print(text if text is not None else "No fortunes found", file=stdout)


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a Config from command-line arguments; raises ValueError on bad values."""
    parser = argparse.ArgumentParser(prog="fortune", description="Print a fortune")
    parser.add_argument("sources", metavar="FILE", nargs="+",
                        help="Input files or directories")
    parser.add_argument("-m", "--pattern", metavar="PATTERN", help="Pattern")
    parser.add_argument("-i", "--insensitive", action="store_true",
                        help="Case-insensitive pattern matching")
    parser.add_argument("-s", "--seed", metavar="SEED", help="Random seed")
    args = parser.parse_args(argv)

    pattern = None
    if args.pattern is not None:
        flags = re.IGNORECASE if args.insensitive else 0
        try:
            pattern = re.compile(args.pattern, flags)
        except re.error:
            raise ValueError(f'Invalid --pattern "{args.pattern}"') from None

    seed = parse_u64(args.seed) if args.seed is not None else None
    return Config(sources=args.sources, pattern=pattern, seed=seed)


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