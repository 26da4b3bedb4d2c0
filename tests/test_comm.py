import io

import pytest

from shelltools.comm import Column, Config, compare, format_row, main, parse_args, run

FILE1 = "a\nb\nc\nd\n"
FILE2 = "B\nc\nd\ne\n"


@pytest.fixture
def files(tmp_path):
    f1 = tmp_path / "file1.txt"
    f2 = tmp_path / "file2.txt"
    empty = tmp_path / "empty.txt"
    blank = tmp_path / "blank.txt"
    f1.write_text(FILE1)
    f2.write_text(FILE2)
    empty.write_text("")
    blank.write_text("\n\n")
    return {"file1": str(f1), "file2": str(f2), "empty": str(empty), "blank": str(blank)}


def _run(argv, stdin_text=""):
    out = io.StringIO()
    run(parse_args(argv), stdin=io.StringIO(stdin_text), stdout=out)
    return out.getvalue()


def test_compare_merges_sorted():
    result = list(compare(["a", "c"], ["b", "c", "d"]))
    assert result == [
        (Column.COL1, "a"),
        (Column.COL2, "b"),
        (Column.COL3, "c"),
        (Column.COL2, "d"),
    ]


def test_format_row_suppressed_column():
    config = Config("x", "y", show_col1=False)
    assert format_row(Column.COL1, "a", config) is None
    assert format_row(Column.COL2, "b", config) == "b"
    assert format_row(Column.COL3, "c", config) == "\tc"


def test_empty_empty(files):
    assert _run([files["empty"], files["empty"]]) == ""


def test_file1_file1(files):
    assert _run([files["file1"], files["file1"]]) == "\t\ta\n\t\tb\n\t\tc\n\t\td\n"


def test_file1_file2(files):
    assert _run([files["file1"], files["file2"]]) == "\tB\na\nb\n\t\tc\n\t\td\n\te\n"


def test_file1_empty(files):
    assert _run([files["file1"], files["empty"]]) == FILE1


def test_empty_file2(files):
    assert _run([files["empty"], files["file2"]]) == "\tB\n\tc\n\td\n\te\n"


@pytest.mark.parametrize(
    "flags, expected",
    [
        (["-1"], "B\n\tc\n\td\ne\n"),
        (["-2"], "a\nb\n\tc\n\td\n"),
        (["-3"], "\tB\na\nb\n\te\n"),
        (["-12"], "c\nd\n"),
        (["-23"], "a\nb\n"),
        (["-13"], "B\ne\n"),
        (["-123"], ""),
    ],
)
def test_suppress_columns(files, flags, expected):
    assert _run(flags + [files["file1"], files["file2"]]) == expected


@pytest.mark.parametrize(
    "flags, expected",
    [
        (["-1"], "\tb\n\tc\n\td\ne\n"),
        (["-2"], "a\n\tb\n\tc\n\td\n"),
        (["-3"], "a\n\te\n"),
        (["-12"], "b\nc\nd\n"),
        (["-23"], "a\n"),
        (["-13"], "e\n"),
        (["-123"], ""),
    ],
)
def test_insensitive(files, flags, expected):
    assert _run(flags + ["-i", files["file1"], files["file2"]]) == expected


def test_insensitive_prints_lowercase(files):
    assert _run(["-i", files["file1"], files["file2"]]) == "a\n\t\tb\n\t\tc\n\t\td\n\te\n"


def test_stdin_file1(files):
    assert _run(["-2", "-", files["file2"]], stdin_text=FILE1) == "a\nb\n\tc\n\td\n"


def test_stdin_file2(files):
    assert _run(["-1", files["file1"], "-"], stdin_text=FILE2) == "B\n\tc\n\td\ne\n"


@pytest.mark.parametrize(
    "flags, expected",
    [
        ([], ":B\na\nb\n::c\n::d\n:e\n"),
        (["-1"], "B\n:c\n:d\ne\n"),
        (["-2"], "a\nb\n:c\n:d\n"),
        (["-3"], ":B\na\nb\n:e\n"),
        (["-12"], "c\nd\n"),
        (["-23"], "a\nb\n"),
        (["-13"], "B\ne\n"),
        (["-123"], ""),
    ],
)
def test_delimiter(files, flags, expected):
    assert _run([files["file1"], files["file2"]] + flags + ["-d", ":"]) == expected


def test_long_delimiter_option(files):
    config = parse_args(["--output-delimiter", ",", files["file1"], files["file2"]])
    assert config.delimiter == ","


def test_blank_file1(files):
    assert _run([files["blank"], files["file1"]]) == "\n\n\ta\n\tb\n\tc\n\td\n"


def test_crlf_stripped(tmp_path, files):
    crlf = tmp_path / "crlf.txt"
    crlf.write_bytes(b"a\r\nb\r\n")
    assert _run(["-12", str(crlf), files["file1"]]) == "a\nb\n"


def test_both_stdin_raises():
    with pytest.raises(ValueError, match=r'Both input files cannot be STDIN \("-"\)'):
        run(Config("-", "-"), stdin=io.StringIO(), stdout=io.StringIO())


def test_dies_no_args():
    with pytest.raises(SystemExit):
        parse_args([])


def test_dies_bad_file1(tmp_path, files, capsys):
    bad = str(tmp_path / "missing")
    assert main([bad, files["file1"]]) == 1
    assert capsys.readouterr().err.startswith(f"{bad}: ")


def test_dies_bad_file2(tmp_path, files, capsys):
    bad = str(tmp_path / "missing")
    assert main([files["file1"], bad]) == 1
    assert capsys.readouterr().err.startswith(f"{bad}: ")


def test_main_both_stdin(capsys):
    assert main(["-", "-"]) == 1
    assert 'Both input files cannot be STDIN ("-")' in capsys.readouterr().err


def test_main_success(files, capsys):
    assert main(["-3", files["file1"], files["file2"]]) == 0
    assert capsys.readouterr().out == "\tB\na\nb\n\te\n"