"""Meta pass: read the header block of a Patch Text."""

from __future__ import annotations

import logging
from typing import TextIO

from pchtxt.diagnostics import Diagnostic, DiagnosticSink, NullDiagnosticSink
from pchtxt.lines import ECHO_MARKER, TAG_MARKER
from pchtxt.models.patch import Meta
from pchtxt.text import first_token, fold, ltrim, strip_comment, trim, unquote

logger = logging.getLogger(__name__)

TITLE_TAG = "@title"
PROGRAM_ID_TAG = "@program"
URL_TAG = "@url"
STOP_TAG = "@stop"

META_FIELDS = {
    TITLE_TAG: "title",
    PROGRAM_ID_TAG: "program_id",
    URL_TAG: "url",
}


def extract_meta(stream: TextIO, sink: DiagnosticSink | None = None) -> Meta:
    """Read meta tags from the current position of *stream*.

    The scan ends at the first blank line, at ``@stop`` or at the end of the
    stream. Unknown tags are skipped without a warning; the patch pass
    reports them.

    If no ``@title`` tag is present, the text of the last ``#`` echo line is
    used as the title (the legacy convention).
    """
    sink = sink or NullDiagnosticSink()
    values: dict[str, str] = {}
    legacy_title = ""
    line_num = 1

    while True:
        raw = stream.readline()
        if not raw:
            sink.emit(Diagnostic("meta parsing reached end of file"))
            break

        line = trim(raw)
        if not line:
            sink.emit(Diagnostic("done parsing meta", line=line_num))
            break

        line = strip_comment(line)

        if line.startswith(TAG_MARKER):
            tag = fold(first_token(line))
            if tag == STOP_TAG:
                sink.emit(Diagnostic("done parsing meta (reached tag @stop)", line=line_num))
                break
            field = META_FIELDS.get(tag)
            if field is not None:
                value = unquote(trim(line[len(tag) :]))
                values[field] = value
                sink.emit(Diagnostic(f"meta: {tag}={value}", line=line_num))
        elif line.startswith(ECHO_MARKER):
            sink.emit(Diagnostic(line, line=line_num))
            legacy_title = ltrim(line[len(ECHO_MARKER) :])

        line_num += 1

    meta = Meta(**values)
    if not meta.title and legacy_title:
        meta.title = legacy_title
        sink.emit(Diagnostic(f'using "{legacy_title}" as legacy style title'))

    logger.debug("meta pass finished after %d line(s): %s", line_num, meta)
    return meta
