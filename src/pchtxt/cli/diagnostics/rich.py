"""Rich-based diagnostic display."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.text import Text

from pchtxt.diagnostics import Diagnostic, DiagnosticSink
from pchtxt.models.enums import Severity


class RichDiagnosticSink(DiagnosticSink):
    """Prints diagnostics to a Rich console (stderr by default), coloured by severity."""

    _STYLES: ClassVar[dict[Severity, str]] = {
        Severity.DEBUG: "dim",
        Severity.INFO: "",
        Severity.WARNING: "yellow",
        Severity.ERROR: "bold red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(stderr=True)

    def emit(self, diagnostic: Diagnostic) -> None:
        self._console.print(Text(diagnostic.format(), style=self._STYLES[diagnostic.severity]), highlight=False)
