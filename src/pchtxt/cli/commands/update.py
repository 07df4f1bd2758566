"""Update command formatting."""

from __future__ import annotations

import argparse
from pathlib import Path

from pchtxt import UpdateCheck
from pchtxt.cli.common import format_or_none, options_from_args


def format_update_summary(check: UpdateCheck, *, path: str, dry_run: bool, written: bool) -> str:
    mode = "dry-run" if dry_run else "apply"
    lines = [
        "",
        f"pchtxt - update check ({mode})",
        "",
        f"  File:        {path}",
        f"  Source:      {check.url}",
        f"  Program ID:  {format_or_none(check.local_meta.program_id)} (remote: "
        f"{format_or_none(check.remote_meta.program_id)})",
    ]
    if not check.same_program:
        lines.append("  Status:      remote file is for a different program, not updating")
    elif not check.changed:
        lines.append("  Status:      already up to date")
    elif written:
        lines.append("  Status:      updated")
    else:
        lines.append("  Status:      update available")

    if dry_run and check.update_available:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


def run_update(args: argparse.Namespace) -> UpdateCheck:
    import pchtxt.cli as cli

    options = options_from_args(args)
    local_text = cli.read_pchtxt_text(args.file, encoding=options.encoding)
    check = cli.check_for_update(local_text, timeout=args.timeout)

    written = False
    if args.apply and check.update_available:
        Path(args.file).write_text(check.remote_text, encoding=options.encoding)
        written = True

    print(cli._format_update_summary(check, path=args.file, dry_run=args.dry_run, written=written))
    return check


__all__ = ["format_update_summary", "run_update"]
