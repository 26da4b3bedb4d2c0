# shelltools

Small command-line utilities modelled on familiar Unix tools, written in
plain Python with no dependencies beyond the standard library.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

Every command returns exit status 1 and prints a message to standard error
when it fails (a missing file, a bad count, an invalid option value).

## Commands

### commr

Compare two sorted files line by line and print three columns: lines only
in the first file, lines only in the second, and lines in both.

    commr file1.txt file2.txt
    commr -12 file1.txt file2.txt          # only the lines in both files
    commr -i -d : file1.txt file2.txt      # case-insensitive, ":" between columns
    commr - file2.txt < file1.txt          # read one file from standard input

`-1`, `-2` and `-3` suppress the matching column; `-d`/`--output-delimiter`
sets the column separator (a tab by default). With `-i`, lines are compared
and printed in lower case. Both files cannot be `-`.

### tailr

Print the end of one or more files.

    tailr file.txt                 # last 10 lines
    tailr -n 3 file.txt            # last 3 lines
    tailr -n +3 file.txt           # from line 3 onward
    tailr -c 8 a.txt b.txt         # last 8 bytes of each file
    tailr -q -n 1 a.txt b.txt      # no "==> name <==" headers

A plain or `-` count is taken from the end; a `+` count is the 1-based
starting position, and `+0` prints everything. `-n` and `-c` cannot be
combined. A file that cannot be opened is reported and skipped.

### fortuner

Print a random fortune from fortune files or directories. Fortunes are
separated by lines holding only `%`; files ending in `.dat` are ignored.

    fortuner ./fortunes
    fortuner ./fortunes --seed 1           # a repeatable choice
    fortuner -i -m "mark twain" ./fortunes

With `-m`/`--pattern` (a regular expression, `-i` for case-insensitive),
every matching fortune is printed to standard output, followed by `%`, and
the name of each source file is printed to standard error.

### calr

Show a calendar.

    calr                  # the current month
    calr -y               # the whole current year
    calr 2020             # the whole year 2020
    calr -m feb 2020      # a month by number or unique name prefix

Years run from 1 to 9999. Today's date is shown in reverse video using ANSI
escape codes. `-y` cannot be combined with `-m` or a year.

### lsr

List files and directories.

    lsr                   # the current directory
    lsr -a some/dir       # include entries starting with "."
    lsr -l file.txt dir   # long listing

The long listing shows type, permissions, link count, owner, group, size,
modification time and path in aligned columns. A path that does not exist
is reported on standard error and the listing goes on. Entries are listed
in the order the file system returns them, not sorted.

### ascii

Print a table of the printable ASCII characters, codes 33 through 127
(shown as `DEL`), in five tab-separated columns.

    ascii

### biggie

Write a file of random alphanumeric words, 7 to 14 words per line, for
testing the other tools on large input.

    biggie                       # 100,000 lines to "out"
    biggie -n 1000 -o out.txt

## Using the modules

Each command lives in its own module (`shelltools.comm`, `shelltools.tail`,
`shelltools.fortune`, `shelltools.cal`, `shelltools.ls`, `shelltools.ascii`,
`shelltools.biggie`). Each has `main(argv=None)`, and most also have
`parse_args(argv)` returning a `Config` dataclass and `run(config, ...)`,
which takes output streams so it can be used without touching the terminal.
Some of the helpers are useful on their own:

    from datetime import date
    from shelltools.cal import format_month
    from shelltools.comm import compare
    from shelltools.tail import parse_num, get_start_index

    print("\n".join(format_month(2020, 2, True, date.today())))
    list(compare(["a", "b"], ["b", "c"]))   # [(COL1, "a"), (COL3, "b"), (COL2, "c")]
    get_start_index(parse_num("3"), 10)      # 7

## Limits

- `tailr` reads only named files; it does not read standard input or follow
  a growing file.
- `lsr` has no sorting, recursion or column layout options. Where the system
  has no user and group database, owners and groups are shown as numbers.
- `fortuner` chooses with Python's `random` module, so a given seed always
  picks the same fortune from the same files, but not the same one as other
  fortune programs.