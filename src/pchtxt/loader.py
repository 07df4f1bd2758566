"""Load a Patch Text from disk."""

from __future__ import annotations

from pathlib import Path

from pchtxt.diagnostics import DiagnosticSink
from pchtxt.exceptions import PatchTextLoadError
from pchtxt.meta import extract_meta
from pchtxt.models.patch import Document, Meta
from pchtxt.options import ParseOptions
from pchtxt.parser import PatchTextParser


def load_pchtxt(
    path: str | Path,
    sink: DiagnosticSink | None = None,
    options: ParseOptions | None = None,
) -> Document:
    """Read and parse a Patch Text file.

    Args:
        path: Path to the ``.pchtxt`` file.
        sink: Receives parser diagnostics. Defaults to discarding them.
        options: Parse options; ``options.encoding`` selects the file encoding.

    Returns:
        The parsed Document.

    Raises:
        PatchTextLoadError: If the file is missing, unreadable, or not valid
            text in the selected encoding.
    """
    options = options or ParseOptions()
    pchtxt_path = Path(path)
    if not pchtxt_path.is_file():
        raise PatchTextLoadError(f"missing Patch Text file: {pchtxt_path}")
    try:
        with pchtxt_path.open(encoding=options.encoding) as stream:
            return PatchTextParser(sink=sink, options=options).parse(stream)
    except UnicodeDecodeError as exc:
        raise PatchTextLoadError(f"cannot decode {pchtxt_path} as {options.encoding}: {exc}") from exc
    except OSError as exc:
        raise PatchTextLoadError(f"failed to read Patch Text file: {exc}") from exc


def read_pchtxt_text(path: str | Path, encoding: str = "utf-8") -> str:
    """Return the raw text of a Patch Text file.

    Raises:
        PatchTextLoadError: Same conditions as :func:`load_pchtxt`.
    """
    pchtxt_path = Path(path)
    if not pchtxt_path.is_file():
        raise PatchTextLoadError(f"missing Patch Text file: {pchtxt_path}")
    try:
        return pchtxt_path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise PatchTextLoadError(f"cannot decode {pchtxt_path} as {encoding}: {exc}") from exc
    except OSError as exc:
        raise PatchTextLoadError(f"failed to read Patch Text file: {exc}") from exc


def load_meta(
    path: str | Path,
    sink: DiagnosticSink | None = None,
    options: ParseOptions | None = None,
) -> Meta:
    """Read only the meta block of a Patch Text file.

    Raises:
        PatchTextLoadError: Same conditions as :func:`load_pchtxt`.
    """
    options = options or ParseOptions()
    pchtxt_path = Path(path)
    if not pchtxt_path.is_file():
        raise PatchTextLoadError(f"missing Patch Text file: {pchtxt_path}")
    try:
        with pchtxt_path.open(encoding=options.encoding) as stream:
            return extract_meta(stream, sink)
    except UnicodeDecodeError as exc:
        raise PatchTextLoadError(f"cannot decode {pchtxt_path} as {options.encoding}: {exc}") from exc
    except OSError as exc:
        raise PatchTextLoadError(f"failed to read Patch Text file: {exc}") from exc
