"""Parse command formatting."""

from __future__ import annotations

import argparse

from pchtxt import Document, NullDiagnosticSink, ParseOptions, PatchType
from pchtxt.cli.common import format_count, format_or_none, options_from_args
from pchtxt.cli.diagnostics.rich import RichDiagnosticSink
from pchtxt.diagnostics import DiagnosticSink


def format_parse_summary(document: Document, path: str) -> str:
    meta = document.meta
    lines = [
        "",
        f"pchtxt - {path}",
        "",
        f"  Title:       {format_or_none(meta.title)}",
        f"  Program ID:  {format_or_none(meta.program_id)}",
        f"  URL:         {format_or_none(meta.url)}",
        "",
        "  Collections: {} ({})".format(
            len(document.collections),
            format_count(document.patch_count, "patch", "patches"),
        ),
    ]
    for collection in document.collections:
        lines.append("")
        lines.append(f"  [{collection.target_type.value}] {collection.build_id}")
        for patch in collection.patches:
            state = "on " if patch.enabled else "off"
            kind = "" if patch.type is PatchType.BINARY else f" ({patch.type.value.lower()})"
            author = f" by {patch.author}" if patch.author else ""
            size = format_count(len(patch.contents), "line" if patch.type is PatchType.CHEAT_SCRIPT else "edit")
            lines.append(f"    {state}  {patch.name}{author}{kind} - {size}")

    if not document.collections:
        lines.append("  Status:      no complete patches found")

    lines.append("")
    return "\n".join(lines)


def resolve_options(args: argparse.Namespace) -> ParseOptions:
    options = options_from_args(args)
    update: dict[str, bool] = {}
    if args.decode:
        update["decode_contents"] = True
    if args.verbose:
        update["verbose"] = True
    return options.model_copy(update=update) if update else options


def run_parse(args: argparse.Namespace) -> Document:
    import pchtxt.cli as cli

    options = resolve_options(args)
    sink: DiagnosticSink = NullDiagnosticSink() if args.quiet else RichDiagnosticSink()
    document = cli.load_pchtxt(args.file, sink=sink, options=options)

    if args.json:
        print(document.model_dump_json(indent=2))
    else:
        print(cli._format_parse_summary(document, args.file))
    return document


__all__ = ["format_parse_summary", "resolve_options", "run_parse"]
