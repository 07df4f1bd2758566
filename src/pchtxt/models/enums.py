"""Enumerated types used across pchtxt."""

from __future__ import annotations

from enum import StrEnum


class PatchType(StrEnum):
    """How a patch's body lines are interpreted."""

    BINARY = "BINARY"
    HEAP = "HEAP"
    CHEAT_SCRIPT = "CHEAT_SCRIPT"


class TargetType(StrEnum):
    """Kind of executable a patch collection targets."""

    NSO = "NSO"
    NRO = "NRO"


class Severity(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
