"""Classify raw Patch Text lines into tagged structures.

Every line is looked at once, by its first (untrimmed) character, and turned
into one of :class:`TagLine`, :class:`EchoLine`, :class:`CheatHeaderLine`,
:class:`CommentLine` or :class:`BodyLine`. The parser then matches on the
class instead of re-slicing strings in every branch.
"""

from __future__ import annotations

from dataclasses import dataclass

from pchtxt.text import comment_content, comment_position, first_token, fold, ltrim, strip_comment, trim

TAG_MARKER = "@"
ECHO_MARKER = "#"
CHEAT_OPEN = "["
CHEAT_CLOSE = "]"
AUTHOR_OPEN = "["
AUTHOR_CLOSE = "]"


@dataclass(frozen=True)
class TagLine:
    """``@tag rest``. *name* is case-folded, *rest* keeps the original case."""

    raw: str
    code: str
    name: str
    rest: str

    @property
    def modifier(self) -> str:
        """Case-folded token right after the tag, or ``""``."""
        return fold(first_token(self.rest))


@dataclass(frozen=True)
class EchoLine:
    raw: str


@dataclass(frozen=True)
class CheatHeaderLine:
    raw: str
    name: str


@dataclass(frozen=True)
class CommentLine:
    raw: str
    text: str


@dataclass(frozen=True)
class BodyLine:
    raw: str
    code: str

    @property
    def is_blank(self) -> bool:
        return not trim(self.raw)


ParsedLine = TagLine | EchoLine | CheatHeaderLine | CommentLine | BodyLine


def cheat_name(line: str) -> str:
    """Text between the first ``[`` and its closing ``]`` of *line*, trimmed.

    The closing bracket is the first ``]`` followed by nothing but whitespace
    or a comment, so ``[Name] // see [wiki]`` gives ``Name`` while
    ``[60/30 FPS]`` keeps its slash. Failing that, the last ``]`` is used.
    """
    start = line.find(CHEAT_OPEN)
    if start == -1:
        return trim(line)
    end = line.find(CHEAT_CLOSE, start + 1)
    while end != -1:
        tail = ltrim(line[end + 1 :])
        if not tail or comment_position(tail) == 0:
            break
        end = line.find(CHEAT_CLOSE, end + 1)
    if end == -1:
        end = line.rfind(CHEAT_CLOSE)
    if end <= start:
        return trim(line[start + 1 :])
    return trim(line[start + 1 : end])


def split_name_author(comment: str) -> tuple[str, str]:
    """Split ``Patch name [author]`` into its name and author.

    Without a bracket pair the whole comment is the name and the author is
    empty.
    """
    start = comment.find(AUTHOR_OPEN)
    end = comment.rfind(AUTHOR_CLOSE)
    if start == -1 or end <= start:
        return trim(comment), ""
    return trim(comment[:start]), trim(comment[start + 1 : end])


def classify_line(raw: str) -> ParsedLine:
    line = raw.rstrip("\r\n")
    code = strip_comment(line)
    lead = line[:1]

    if lead == TAG_MARKER:
        token = first_token(code)
        return TagLine(raw=line, code=code, name=fold(token), rest=trim(code[len(token) :]))
    if lead == ECHO_MARKER:
        return EchoLine(raw=line)
    if lead == CHEAT_OPEN:
        return CheatHeaderLine(raw=line, name=cheat_name(line))
    if lead == "/":
        return CommentLine(raw=line, text=comment_content(line))
    return BodyLine(raw=line, code=code)
