"""Shared CLI formatting helpers."""

from __future__ import annotations

import argparse

from pchtxt.options import ParseOptions


def format_or_none(value: str) -> str:
    return value if value else "none"


def format_count(count: int, singular: str, plural: str | None = None) -> str:
    if count == 1:
        return f"1 {singular}"
    return f"{count} {plural or singular + 's'}"


def options_from_args(args: argparse.Namespace) -> ParseOptions:
    """Load ``--config`` if given, else the default options."""
    import pchtxt.cli as cli

    return cli.load_options(args.config) if args.config else ParseOptions()
