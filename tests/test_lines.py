from __future__ import annotations

import pytest

from pchtxt.lines import (
    BodyLine,
    CheatHeaderLine,
    CommentLine,
    EchoLine,
    TagLine,
    cheat_name,
    classify_line,
    split_name_author,
)


def test_tag_line_is_folded_and_keeps_value_case() -> None:
    line = classify_line("@FLAG NsoBid AbCdEf // trailing\n")

    assert isinstance(line, TagLine)
    assert line.name == "@flag"
    assert line.rest == "NsoBid AbCdEf"
    assert line.code == "@FLAG NsoBid AbCdEf"


def test_tag_modifier_is_the_next_token() -> None:
    line = classify_line("@enabled HEAP")

    assert isinstance(line, TagLine)
    assert line.modifier == "heap"
    assert classify_line("@enabled").modifier == ""  # type: ignore[union-attr]


def test_echo_line_keeps_raw_text() -> None:
    line = classify_line("# Game v1.0 // not stripped\r\n")

    assert line == EchoLine(raw="# Game v1.0 // not stripped")


def test_cheat_header_name_uses_outer_brackets() -> None:
    line = classify_line("[Max Money / Items]\n")

    assert isinstance(line, CheatHeaderLine)
    assert line.name == "Max Money / Items"


def test_comment_line_content() -> None:
    line = classify_line("//  Remove HUD [bob] ")

    assert line == CommentLine(raw="//  Remove HUD [bob] ", text="Remove HUD [bob]")


@pytest.mark.parametrize("raw", ["004B2C30 1F2003D5", "", "   @enabled", "\n"])
def test_other_lines_are_body_lines(raw: str) -> None:
    assert isinstance(classify_line(raw), BodyLine)


def test_body_line_blank_detection() -> None:
    assert classify_line("   \n").is_blank  # type: ignore[union-attr]
    assert not classify_line("  // note").is_blank  # type: ignore[union-attr]
    assert classify_line("  // note").code == ""  # type: ignore[union-attr]


def test_cheat_name_without_closing_bracket() -> None:
    assert cheat_name("[Unclosed name") == "Unclosed name"
    assert cheat_name("[ Spaced ]") == "Spaced"


@pytest.mark.parametrize(
    ("comment", "expected"),
    [
        ("60 FPS [alice]", ("60 FPS", "alice")),
        ("Name [a] and [b]", ("Name", "a] and [b")),
        ("No author", ("No author", "")),
        ("Broken ] order [", ("Broken ] order [", "")),
        ("", ("", "")),
    ],
)
def test_split_name_author(comment: str, expected: tuple[str, str]) -> None:
    assert split_name_author(comment) == expected


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("[Moon Jump] // see [wiki]", "Moon Jump"),
        ("[60/30 FPS]", "60/30 FPS"),
        ("[Max Money / Items]  // by [eve]", "Max Money / Items"),
        ("[Outer [inner] name]", "Outer [inner] name"),
    ],
)
def test_cheat_name_stops_before_trailing_comment(line: str, expected: str) -> None:
    assert cheat_name(line) == expected
