"""Public API surface for pchtxt."""

__version__ = "0.3.0"

from pchtxt.diagnostics import (
    Diagnostic,
    DiagnosticSink,
    ListDiagnosticSink,
    LoggingDiagnosticSink,
    NullDiagnosticSink,
    StreamDiagnosticSink,
)
from pchtxt.exceptions import OptionsError, PatchTextError, PatchTextLoadError, RemoteFetchError
from pchtxt.loader import load_meta, load_pchtxt
from pchtxt.meta import extract_meta
from pchtxt.models import (
    Document,
    Meta,
    Patch,
    PatchCollection,
    PatchContent,
    PatchType,
    Severity,
    TargetType,
)
from pchtxt.options import ParseOptions, load_options
from pchtxt.parser import ParserState, PatchTextParser, parse_pchtxt, parse_text
from pchtxt.remote import UpdateCheck, check_for_update, fetch_remote_text

__all__ = [
    "Diagnostic",
    "DiagnosticSink",
    "Document",
    "ListDiagnosticSink",
    "LoggingDiagnosticSink",
    "Meta",
    "NullDiagnosticSink",
    "OptionsError",
    "ParseOptions",
    "ParserState",
    "Patch",
    "PatchCollection",
    "PatchContent",
    "PatchTextError",
    "PatchTextLoadError",
    "PatchTextParser",
    "PatchType",
    "RemoteFetchError",
    "Severity",
    "StreamDiagnosticSink",
    "TargetType",
    "UpdateCheck",
    "__version__",
    "check_for_update",
    "extract_meta",
    "fetch_remote_text",
    "load_meta",
    "load_options",
    "load_pchtxt",
    "parse_pchtxt",
    "parse_text",
]
