"""Meta command formatting."""

from __future__ import annotations

import argparse

from pchtxt import Meta
from pchtxt.cli.common import format_or_none, options_from_args


def format_meta(meta: Meta) -> str:
    return "\n".join(
        [
            f"title:      {format_or_none(meta.title)}",
            f"program id: {format_or_none(meta.program_id)}",
            f"url:        {format_or_none(meta.url)}",
        ]
    )


def run_meta(args: argparse.Namespace) -> Meta:
    import pchtxt.cli as cli

    meta = cli.load_meta(args.file, options=options_from_args(args))
    print(format_meta(meta))
    return meta


__all__ = ["format_meta", "run_meta"]
