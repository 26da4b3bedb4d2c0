"""Compare two sorted files line by line, printing lines unique to each and lines in common."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from dataclasses import dataclass
from enum import Enum
from typing import IO, Iterable, Iterator


class Column(Enum):
    """Which output column a line belongs to."""

    COL1 = 1  # only in the first file
    COL2 = 2  # only in the second file
    COL3 = 3  # in both files


@dataclass
class Config:
    """Options for a comparison run."""

    file1: str
    file2: str
    show_col1: bool = True
    show_col2: bool = True
    show_col3: bool = True
    insensitive: bool = False
    delimiter: str = "\t"


def compare(lines1: Iterable[str], lines2: Iterable[str]) -> Iterator[tuple[Column, str]]:
    """Merge two sorted line sequences, yielding each line with its column."""
    it1, it2 = iter(lines1), iter(lines2)
    line1, line2 = next(it1, None), next(it2, None)
    while line1 is not None or line2 is not None:
        if line2 is None or (line1 is not None and line1 < line2):
            yield Column.COL1, line1
            line1 = next(it1, None)
        elif line1 is None or line1 > line2:
            yield Column.COL2, line2
            line2 = next(it2, None)
        else:
            yield Column.COL3, line1
            line1, line2 = next(it1, None), next(it2, None)


def format_row(column: Column, value: str, config: Config) -> str | None:
    """Render one output row, or None when its column is suppressed."""
    columns: list[str] = []
    if column is Column.COL1:
        if config.show_col1:
            columns.append(value)
    elif column is Column.COL2:
        if config.show_col2:
            if config.show_col1:
                columns.append("")
            columns.append(value)
    elif config.show_col3:
        if config.show_col1:
            columns.append("")
        if config.show_col2:
            columns.append("")
        columns.append(value)
    return config.delimiter.join(columns) if columns else None


def _read_lines(stream: IO) -> Iterator[str]:
    for raw in stream:
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError:
                continue
        if raw.endswith("\n"):
            raw = raw[:-1]
            if raw.endswith("\r"):
                raw = raw[:-1]
        yield raw


def _open(stack: ExitStack, filename: str, stdin: IO) -> IO:
    if filename == "-":
        return stdin
    try:
        return stack.enter_context(open(filename, "rb"))
    except OSError as err:
        raise OSError(f"{filename}: {err.strerror}") from err


def run(config: Config, stdin: IO | None = None, stdout: IO | None = None) -> None:
    """Compare the two configured files and write the columns to stdout."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout

    if config.file1 == "-" and config.file2 == "-":
        raise ValueError('Both input files cannot be STDIN ("-")')

    def case(line: str) -> str:
        return line.lower() if config.insensitive else line

    with ExitStack() as stack:
        stream1 = _open(stack, config.file1, stdin)
        stream2 = _open(stack, config.file2, stdin)
        lines1 = map(case, _read_lines(stream1))
        lines2 = map(case, _read_lines(stream2))
        for column, value in compare(lines1, lines2):
            row = format_row(column, value, config)
            if row is not None:
                print(row, file=stdout)


def parse_args(argv: list[str] | None = None) -> Config:
    """Build a Config from command-line arguments."""
    parser = argparse.ArgumentParser(prog="comm", description="Compare two sorted files")
    parser.add_argument("file1", metavar="FILE1", help="Input file 1")
    parser.add_argument("file2", metavar="FILE2", help="Input file 2")
    parser.add_argument("-1", dest="suppress_col1", action="store_true",
                        help="Suppress printing of column 1")
    parser.add_argument("-2", dest="suppress_col2", action="store_true",
                        help="Suppress printing of column 2")
    parser.add_argument("-3", dest="suppress_col3", action="store_true",
                        help="Suppress printing of column 3")
    parser.add_argument("-i", dest="insensitive", action="store_true",
                        help="Case-insensitive comparison of lines")
    parser.add_argument("-d", "--output-delimiter", dest="delimiter", metavar="DELIM",
                        default="\t", help="Output delimiter")
    args = parser.parse_args(argv)
    return Config(
        file1=args.file1,
        file2=args.file2,
        show_col1=not args.suppress_col1,
        show_col2=not args.suppress_col2,
        show_col3=not args.suppress_col3,
        insensitive=args.insensitive,
        delimiter=args.delimiter,
    )


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