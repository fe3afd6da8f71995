# tests/test_tokenizer.py

from __future__ import annotations

import pytest

from vamsa_gedcom.core.exceptions import ParseError
from vamsa_gedcom.loader import tokenize_file, tokenize_line, tokenize_text


def test_tokenize_line_simple_head() -> None:
    line = tokenize_line("0 HEAD", lineno=1)
    assert line.lineno == 1
    assert line.level == 0
    assert line.xref is None
    assert line.tag == "HEAD"
    assert line.value == ""
    assert line.pointer is None


def test_tokenize_line_with_xref_and_tag_only() -> None:
    line = tokenize_line("0 @I1@ INDI", lineno=1)
    assert line.level == 0
    assert line.xref == "@I1@"
    assert line.tag == "INDI"
    assert line.value == ""


def test_tokenize_line_with_value() -> None:
    raw = "1 NOTE This is a test note"
    line = tokenize_line(raw, lineno=10)
    assert line.level == 1
    assert line.tag == "NOTE"
    assert line.value == "This is a test note"
    assert line.raw == raw


def test_tokenize_line_pointer_value() -> None:
    line = tokenize_line("3 SOUR @S1@", lineno=4)
    assert line.pointer == "@S1@"
    assert line.pointer_id == "S1"
    assert line.value == ""


def test_value_with_inner_at_sign_is_text() -> None:
    line = tokenize_line("1 NOTE Family Portrait @ 1985", lineno=1)
    assert line.pointer is None
    assert line.value == "Family Portrait @ 1985"


def test_value_whitespace_is_preserved() -> None:
    line = tokenize_line("2 CONC  spaced  out ", lineno=1)
    assert line.value == " spaced  out "


def test_tag_is_upper_cased() -> None:
    assert tokenize_line("1 name John /Doe/", lineno=1).tag == "NAME"


def test_tokenize_line_with_bom_on_first_line() -> None:
    line = tokenize_line("\ufeff0 HEAD", lineno=1)
    assert line.level == 0
    assert line.tag == "HEAD"


def test_leading_indentation_is_ignored() -> None:
    line = tokenize_line("    2 DATE 1900", lineno=1)
    assert line.level == 2
    assert line.tag == "DATE"


@pytest.mark.parametrize(
    "raw",
    [
        "X HEAD",
        "HEAD",
        "0",
        "0 ",
        "0 @I1 INDI",
        "0 @I1@",
    ],
)
def test_tokenize_line_invalid_raises(raw: str) -> None:
    with pytest.raises(ParseError):
        tokenize_line(raw, lineno=7)


def test_parse_error_carries_line_number() -> None:
    with pytest.raises(ParseError) as excinfo:
        tokenize_line("A HEAD", lineno=12)
    assert excinfo.value.lineno == 12
    assert "Line 12" in str(excinfo.value)


def test_tokenize_text_skips_blank_lines_but_keeps_numbering() -> None:
    lines = list(tokenize_text("0 HEAD\n\n1 CHAR UTF-8\r\n0 TRLR"))
    assert [l.tag for l in lines] == ["HEAD", "CHAR", "TRLR"]
    assert [l.lineno for l in lines] == [1, 3, 4]


def test_tokenize_text_handles_old_mac_line_endings() -> None:
    lines = list(tokenize_text("0 HEAD\r1 CHAR UTF-8\r0 TRLR"))
    assert len(lines) == 3


def test_tokenize_file_reads_fixture(data_dir) -> None:
    lines = list(tokenize_file(data_dir / "simple_person.ged"))
    assert lines[0].tag == "HEAD"
    assert lines[-1].tag == "TRLR"


def test_tokenize_file_missing_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        list(tokenize_file(tmp_path / "nope.ged"))
