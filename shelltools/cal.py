"""Print a calendar for a month or a whole year."""

from __future__ import annotations

import argparse
import re
import sys
from dataclasses import dataclass
from datetime import date, timedelta
from typing import IO

LINE_WIDTH = 22
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1
_U32_MAX = 2**32 - 1


@dataclass
class Config:
    """What to print: one month of a year, or the whole year when month is None."""

    month: int | None
    year: int
    today: date


def parse_int(val: str) -> int:
    """Parse a decimal integer; raises ValueError with a readable message."""
    if _INT_RE.fullmatch(val) is None:
        raise ValueError(f'Invalid integer "{val}"')
    return int(val)


def parse_year(year: str) -> int:
    """Parse a year between 1 and 9999."""
    num = parse_int(year)
    if not _I32_MIN <= num <= _I32_MAX:
        raise ValueError(f'Invalid integer "{year}"')
    if not 1 <= num <= 9999:
        raise ValueError(f'year "{year}" not in the range 1 through 9999')
    return num


def parse_month(month: str) -> int:
    """Parse a month number (1-12) or a unique prefix of a month name."""
    try:
        num = parse_int(month)
    except ValueError:
        num = None
    if num is not None and 0 <= num <= _U32_MAX:
        if 1 <= num <= 12:
            return num
        raise ValueError(f'month "{month}" not in the range 1 through 12')

    lower = month.lower()
    matches = [i for i, name in enumerate(MONTH_NAMES, 1) if name.lower().startswith(lower)]
    if len(matches) == 1:
        return matches[0]
    raise ValueError(f'Invalid month "{month}"')


def last_day_in_month(year: int, month: int) -> date:
    """Return the date of the last day of the given month."""
    y, m = (year + 1, 1) if month == 12 else (year, month + 1)
    return date(y, m, 1) - timedelta(days=1)


def format_month(year: int, month: int, print_year: bool, today: date) -> list[str]:
    """Render one month as eight lines of 22 columns; today is shown in reverse video."""
    first = date(year, month, 1)
    days = ["  "] * ((first.weekday() + 1) % 7)

    for num in range(1, last_day_in_month(year, month).day + 1):
        cell = f"{num:>2}"
        if (year, month, num) == (today.year, today.month, today.day):
            cell = f"\x1b[7m{cell}\x1b[0m"
        days.append(cell)

    name = MONTH_NAMES[month - 1]
    title = f"{name} {year}" if print_year else name
    lines = [f"{title:^20}  ", "Su Mo Tu We Th Fr Sa  "]
    for start in range(0, len(days), 7):
        week = " ".join(days[start:start + 7])
        lines.append(f"{week:<{LINE_WIDTH - 2}}  ")
    lines.extend(" " * LINE_WIDTH for _ in range(8 - len(lines)))
    return lines


def format_year(year: int, today: date) -> list[str]:
    """Render a whole year: a title line, then the months three abreast."""
    months = [format_month(year, m, False, today) for m in range(1, 13)]
    lines = [f"{year:>32}"]
    for i in range(4):
        lines.extend("".join(row) for row in zip(*months[3 * i:3 * i + 3]))
        if i < 3:
            lines.append("")
    return lines


def run(config: Config, stdout: IO[str] | None = None) -> None:
    """Print the configured month or year."""
    stdout = sys.stdout if stdout is None else stdout
    if config.month is not None:
        lines = format_month(config.year, config.month, True, config.today)
    else:
        lines = format_year(config.year, config.today)
    print("\n".join(lines), file=stdout)


def parse_args(argv: list[str] | None = None, today: date | None = None) -> Config:
    """Build a Config from command-line arguments; raises ValueError on bad values."""
    today = date.today() if today is None else today
    parser = argparse.ArgumentParser(prog="cal", description="Display a calendar")
    parser.add_argument("-m", dest="month", metavar="MONTH",
                        help="Month name or number (1-12)")
    parser.add_argument("-y", "--year", dest="show_current_year", action="store_true",
                        help="Show whole current year")
    parser.add_argument("year", metavar="YEAR", nargs="?", help="Year (1-9999)")
    args = parser.parse_args(argv)

    if args.show_current_year:
        if args.month is not None:
            parser.error("The argument '-m <MONTH>' cannot be used with '--year'")
        if args.year is not None:
            parser.error("The argument '<YEAR>' cannot be used with '--year'")

    month = parse_month(args.month) if args.month is not None else None
    year = parse_year(args.year) if args.year is not None else None

    if args.show_current_year:
        month, year = None, today.year
    elif month is None and year is None:
        month, year = today.month, today.year

    return Config(month=month, year=today.year if year is None else year, today=today)


def main(argv: list[str] | None = None) -> int:
    """Command entry point; returns the exit status."""
    try:
        run(parse_args(argv))
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())