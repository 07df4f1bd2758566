"""Patch pass: turn a Patch Text into a :class:`~pchtxt.models.Document`.

The parser keeps everything it knows in one :class:`ParserState` record and
hands it to a handler per line kind. Each handler returns a :class:`Step`
telling the loop whether to go on, stop because of ``@stop``, or halt because
of a fatal error. Malformed input never raises; it is reported through the
diagnostic sink and the document parsed so far is returned.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TextIO

from pchtxt.contents import decode_content
from pchtxt.diagnostics import Diagnostic, DiagnosticSink, NullDiagnosticSink
from pchtxt.lines import (
    BodyLine,
    CheatHeaderLine,
    CommentLine,
    EchoLine,
    ParsedLine,
    TagLine,
    classify_line,
    split_name_author,
)
from pchtxt.meta import META_FIELDS, STOP_TAG, extract_meta
from pchtxt.models.enums import PatchType, Severity, TargetType
from pchtxt.models.patch import Document, Patch, PatchCollection, PatchContent
from pchtxt.options import ParseOptions
from pchtxt.text import first_token, fold, is_hex, trim

logger = logging.getLogger(__name__)

ENABLED_TAG = "@enabled"
DISABLED_TAG = "@disabled"
HEAP_TAG = "@heap"
FLAG_TAG = "@flag"
LEGACY_NSOBID_TAG = "@nsobid"

HEAP_MODIFIER = "heap"
CHEAT_MODIFIER = "cheat"

BIG_ENDIAN_FLAG = "be"
LITTLE_ENDIAN_FLAG = "le"
NSOBID_FLAG = "nsobid"
NROBID_FLAG = "nrobid"
OFFSET_SHIFT_FLAG = "offset_shift"
DEBUG_INFO_FLAG = "debug_info"
LEGACY_DEBUG_INFO_FLAG = "print_values"

# Tags consumed by the meta pass.
KNOWN_META_TAGS = frozenset(META_FIELDS)

_BUILD_ID_FLAGS = {NSOBID_FLAG: TargetType.NSO, NROBID_FLAG: TargetType.NRO}


class Step(StrEnum):
    CONTINUE = "continue"
    DONE = "done"
    HALT = "halt"


@dataclass
class ParserState:
    """Everything the patch pass carries from one line to the next."""

    sink: DiagnosticSink
    options: ParseOptions
    line_num: int = 1
    patch: Patch = field(default_factory=Patch)
    collection: PatchCollection = field(default_factory=PatchCollection)
    collections: list[PatchCollection] = field(default_factory=list)
    last_comment: str = ""
    big_endian: bool = False
    offset_shift: int = 0
    verbose: bool = False
    accepting_body: bool = False
    stopped: bool = False
    halt_reason: str | None = None

    def report(self, message: str, severity: Severity = Severity.INFO) -> None:
        self.sink.emit(Diagnostic(message, line=self.line_num, severity=severity))

    def debug(self, message: str) -> None:
        if self.verbose:
            self.report(message, Severity.DEBUG)

    def halt(self, reason: str) -> Step:
        self.report(reason, Severity.ERROR)
        self.stopped = True
        self.halt_reason = reason
        return Step.HALT

    def flush_patch(self, label: str = "patch read") -> None:
        """Attach the current patch to the collection if it has contents."""
        if self.patch.is_complete:
            self.collection.patches.append(self.patch)
            self.report(f"{label}: {self.patch.name}")

    def flush_collection(self) -> None:
        """Attach the current collection to the document if it has patches."""
        if self.collection.patches:
            self.collections.append(self.collection)
            self.report(f"parsing completed for {self.collection.build_id}")

    def close_patch(self, label: str = "patch read") -> None:
        self.flush_patch(label)
        self.patch = Patch()

    def close_collection(self) -> None:
        self.flush_collection()
        self.collection = PatchCollection()

    @property
    def in_cheat(self) -> bool:
        return self.accepting_body and self.patch.type is PatchType.CHEAT_SCRIPT


def _require_build_id(state: ParserState, where: str) -> Step | None:
    if state.collection.build_id:
        return None
    return state.halt(f"missing build id, abort parsing at {where}")


def _start_patch(state: ParserState, line: TagLine) -> Step:
    halted = _require_build_id(state, line.name)
    if halted is not None:
        return halted

    state.close_patch()
    name, author = split_name_author(state.last_comment)
    patch_type = PatchType.BINARY
    if line.modifier == HEAP_MODIFIER:
        patch_type = PatchType.HEAP
    elif line.modifier == CHEAT_MODIFIER:
        patch_type = PatchType.CHEAT_SCRIPT
    state.patch = Patch(name=name, author=author, enabled=line.name == ENABLED_TAG, type=patch_type)
    state.accepting_body = True
    state.debug(f"parsing patch: {name}")
    return Step.CONTINUE


def _parse_offset_shift(value: str) -> int:
    return int(value, 0)


def _handle_flag(state: ParserState, line: TagLine) -> Step:
    flag_name = fold(first_token(line.rest))
    flag_value = trim(line.rest[len(flag_name) :])

    if flag_name == BIG_ENDIAN_FLAG:
        state.big_endian = True
    elif flag_name == LITTLE_ENDIAN_FLAG:
        state.big_endian = False
    elif flag_name in _BUILD_ID_FLAGS:
        state.close_patch()
        state.close_collection()
        state.collection = PatchCollection(build_id=flag_value, target_type=_BUILD_ID_FLAGS[flag_name])
        state.accepting_body = False
        state.debug(f"parsing started for {flag_value}")
    elif flag_name == OFFSET_SHIFT_FLAG:
        try:
            state.offset_shift = _parse_offset_shift(flag_value)
        except ValueError:
            state.report(f"ignored invalid offset shift: {flag_value}", Severity.WARNING)
        else:
            state.debug(f"offset shift set to {state.offset_shift:#x}")
    elif flag_name in (DEBUG_INFO_FLAG, LEGACY_DEBUG_INFO_FLAG):
        state.verbose = True
        state.report("additional debug info enabled")
    else:
        state.report(f"ignored unrecognized flag type: {flag_name}", Severity.WARNING)
    return Step.CONTINUE


def _handle_legacy_build_id(state: ParserState, line: TagLine) -> Step:
    build_id = trim(line.code[len(LEGACY_NSOBID_TAG) :])
    if not build_id:
        return state.halt(f"missing value for {LEGACY_NSOBID_TAG}, abort parsing")
    state.collection.target_type = TargetType.NSO
    state.collection.build_id = build_id
    state.debug(f"parsing started for {build_id} (legacy style bid)")
    return Step.CONTINUE


def _handle_tag(state: ParserState, line: TagLine) -> Step:
    if state.in_cheat:
        state.report(f"cheat [{state.patch.name}] ended because parsing reached a tag", Severity.WARNING)
        state.close_patch("cheat read")
        state.accepting_body = False

    if line.name == STOP_TAG:
        state.report("done parsing patches (reached tag @stop)")
        state.stopped = True
        return Step.DONE
    if line.name in (ENABLED_TAG, DISABLED_TAG):
        return _start_patch(state, line)
    if line.name == HEAP_TAG:
        state.patch.type = PatchType.HEAP
        return Step.CONTINUE
    if line.name == FLAG_TAG:
        return _handle_flag(state, line)
    if fold(line.code).startswith(LEGACY_NSOBID_TAG):
        return _handle_legacy_build_id(state, line)
    if line.name not in KNOWN_META_TAGS:
        state.report(f"ignored unrecognized tag: {line.name}", Severity.WARNING)
    return Step.CONTINUE


def _handle_echo(state: ParserState, line: EchoLine) -> Step:
    state.report(line.raw)
    return Step.CONTINUE


def _handle_cheat_header(state: ParserState, line: CheatHeaderLine) -> Step:
    halted = _require_build_id(state, f"[{line.name}]")
    if halted is not None:
        return halted

    state.close_patch()
    state.patch = Patch(name=line.name, enabled=True, type=PatchType.CHEAT_SCRIPT)
    state.accepting_body = True
    state.debug(f"parsing cheat: {line.name}")
    return Step.CONTINUE


def _handle_comment(state: ParserState, line: CommentLine) -> Step:
    state.last_comment = line.text
    return Step.CONTINUE


def _handle_cheat_body(state: ParserState, line: BodyLine) -> None:
    if line.is_blank:
        state.close_patch("cheat read")
        state.accepting_body = False
    elif line.code:
        state.patch.contents.append(PatchContent(offset=0, value=line.code.encode("utf-8")))


def _handle_patch_body(state: ParserState, line: BodyLine) -> None:
    if not line.code:
        return
    token = first_token(line.code)
    if not is_hex(token):
        if state.verbose:
            state.report(f"invalid offset: {token}", Severity.WARNING)
        return
    if not state.options.decode_contents:
        return
    try:
        content = decode_content(line.code)
    except ValueError as exc:
        state.report(f"ignored patch line: {exc}", Severity.WARNING)
        return
    state.patch.contents.append(content)
    state.debug(f"{content.offset:08X}: {content.value.hex().upper()}")


def _handle_body(state: ParserState, line: BodyLine) -> Step:
    if not state.accepting_body:
        return Step.CONTINUE
    if state.patch.type is PatchType.CHEAT_SCRIPT:
        _handle_cheat_body(state, line)
    else:
        _handle_patch_body(state, line)
    return Step.CONTINUE


def _dispatch(state: ParserState, line: ParsedLine) -> Step:
    match line:
        case TagLine():
            return _handle_tag(state, line)
        case EchoLine():
            return _handle_echo(state, line)
        case CheatHeaderLine():
            return _handle_cheat_header(state, line)
        case CommentLine():
            return _handle_comment(state, line)
        case _:
            return _handle_body(state, line)


def _finalize(state: ParserState) -> None:
    state.flush_patch()
    state.flush_collection()


class PatchTextParser:
    """Two-pass Patch Text parser.

    The stream must be seekable: the meta pass and the patch pass both start
    at the position the stream had when :meth:`parse` was called. After a
    parse, :attr:`state` holds the final parser state (flags, halt reason).
    """

    def __init__(self, sink: DiagnosticSink | None = None, options: ParseOptions | None = None) -> None:
        self._sink = sink or NullDiagnosticSink()
        self._options = options or ParseOptions()
        self.state: ParserState | None = None

    def parse(self, stream: TextIO) -> Document:
        start = stream.tell()
        meta = extract_meta(stream, self._sink)
        stream.seek(start)

        state = ParserState(sink=self._sink, options=self._options, verbose=self._options.verbose)
        self.state = state

        while True:
            raw = stream.readline()
            if not raw:
                state.report("done parsing patches")
                break
            if _dispatch(state, classify_line(raw)) is not Step.CONTINUE:
                break
            state.line_num += 1

        _finalize(state)
        logger.debug(
            "patch pass finished at line %d: %d collection(s), halted=%s",
            state.line_num,
            len(state.collections),
            state.halt_reason is not None,
        )
        return Document(meta=meta, collections=state.collections)


def parse_pchtxt(
    stream: TextIO, sink: DiagnosticSink | None = None, options: ParseOptions | None = None
) -> Document:
    """Parse a seekable Patch Text stream into a :class:`Document`."""
    return PatchTextParser(sink=sink, options=options).parse(stream)


def parse_text(text: str, sink: DiagnosticSink | None = None, options: ParseOptions | None = None) -> Document:
    return parse_pchtxt(io.StringIO(text), sink=sink, options=options)
