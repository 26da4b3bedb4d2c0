"""Print the printable ASCII table in columns."""

from __future__ import annotations

import argparse
import sys

_FIRST, _LAST = 33, 127
_ROWS, _COLUMNS = 19, 5


def _label(code: int) -> str:
    return "DEL" if code == 127 else chr(code)


def ascii_rows() -> list[str]:
    """Return the table rows: codes 33-127 laid out column by column, tab separated."""
    codes = range(_FIRST, _LAST + 1)
    rows = []
    for row in range(_ROWS):
        cells = (codes[col * _ROWS + row] for col in range(_COLUMNS))
        rows.append("\t".join(f"{code:3}: {_label(code)}" for code in cells))
    return rows


def main(argv: list[str] | None = None) -> int:
    """Command entry point; prints the table and returns the exit status."""
    parser = argparse.ArgumentParser(prog="ascii", description="Print an ASCII table")
    parser.parse_args(argv)
    for row in ascii_rows():
        print(row)
    return 0


if __name__ == "__main__":
    sys.exit(main())