"""Custom exception hierarchy for pchtxt.

All pchtxt exceptions inherit from :class:`PatchTextError`, making it easy
to catch any library error with a single ``except`` clause while still allowing
callers to handle specific failure modes.

Malformed Patch Text never raises: the parser reports it through the
diagnostic sink and returns whatever it parsed up to that point. These
exceptions cover the surfaces around the parser.
"""

from __future__ import annotations


class PatchTextError(Exception):
    """Base exception for all pchtxt errors."""


class PatchTextLoadError(PatchTextError):
    """Raised when a Patch Text file cannot be read or decoded."""


class OptionsError(PatchTextError):
    """Raised when parse options cannot be read or fail validation."""


class RemoteFetchError(PatchTextError):
    """Raised when a remote Patch Text cannot be downloaded.

    Attributes:
        url: The URL that was requested.
        status_code: HTTP status of the response, if one was received.
    """

    def __init__(self, message: str, *, url: str, status_code: int | None = None) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(message)
