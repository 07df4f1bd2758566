"""Shared test fixtures for pchtxt tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pchtxt.diagnostics import ListDiagnosticSink

SAMPLE_PCHTXT = """\
@title "Sample Game"
@program 0100ABCD00000000
@url "https://example.com/patches/sample.pchtxt"

#Sample Game 1.0.0
@flag nsobid 0123456789ABCDEF0123456789ABCDEF
@flag offset_shift 0x100

// 60 FPS [alice]
@enabled
004B2C30 1F2003D5

// Disable blur
@disabled
00112233 00000000

[Infinite Money]
04000000 00123456 0098967F

@flag nrobid FEDCBA9876543210
[Moon Jump]
80000040
04000000 00ABCDEF 00000001
20000000

@stop
@flag nsobid AAAA
[Ignored]
04000000 00000000 00000000
"""


@pytest.fixture
def sink() -> ListDiagnosticSink:
    return ListDiagnosticSink()


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_PCHTXT


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write the sample Patch Text to disk and return its path."""
    path = tmp_path / "sample.pchtxt"
    path.write_text(SAMPLE_PCHTXT, encoding="utf-8")
    return path
