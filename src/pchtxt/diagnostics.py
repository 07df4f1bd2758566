"""Diagnostic sinks for the parsing passes.

The parser writes one :class:`Diagnostic` per notable event (tag read, patch
closed, unrecognized flag, ...). Sinks only receive; nothing the parser does
depends on what a sink does with a record. Consumers (the CLI's Rich console,
a test collecting lines, the ``logging`` tree) implement
:class:`DiagnosticSink` to render them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TextIO

from pchtxt.models.enums import Severity

_LOGGING_LEVELS = {
    Severity.DEBUG: logging.DEBUG,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class Diagnostic:
    """One advisory message. *line* is the 1-based source line, if any."""

    message: str
    line: int | None = None
    severity: Severity = Severity.INFO

    def format(self) -> str:
        text = self.message
        if self.severity in (Severity.WARNING, Severity.ERROR):
            text = f"{self.severity.value}: {text}"
        if self.line is None:
            return text
        return f"L{self.line}: {text}"

    def __str__(self) -> str:
        return self.format()


class DiagnosticSink(ABC):
    """Observer interface for parser diagnostics."""

    @abstractmethod
    def emit(self, diagnostic: Diagnostic) -> None:
        """Receive one diagnostic."""
        ...  # pragma: no cover


class NullDiagnosticSink(DiagnosticSink):
    """No-op implementation used when no sink is given."""

    def emit(self, diagnostic: Diagnostic) -> None:
        pass


class ListDiagnosticSink(DiagnosticSink):
    """Keeps every diagnostic in memory, in emission order."""

    def __init__(self) -> None:
        self.diagnostics: list[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    @property
    def lines(self) -> list[str]:
        return [diagnostic.format() for diagnostic in self.diagnostics]

    def by_severity(self, severity: Severity) -> list[Diagnostic]:
        return [diagnostic for diagnostic in self.diagnostics if diagnostic.severity is severity]


class StreamDiagnosticSink(DiagnosticSink):
    """Writes formatted diagnostics, one per line, to a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def emit(self, diagnostic: Diagnostic) -> None:
        self._stream.write(diagnostic.format() + "\n")


class LoggingDiagnosticSink(DiagnosticSink):
    """Forwards diagnostics to a :mod:`logging` logger at the matching level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger("pchtxt.diagnostics")

    def emit(self, diagnostic: Diagnostic) -> None:
        self._logger.log(_LOGGING_LEVELS[diagnostic.severity], "%s", diagnostic.format())
