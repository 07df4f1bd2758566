"""Terminal renderers for parser diagnostics."""

from pchtxt.cli.diagnostics.rich import RichDiagnosticSink

__all__ = ["RichDiagnosticSink"]
