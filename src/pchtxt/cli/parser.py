"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("pchtxt")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pchtxt")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_parser = subparsers.add_parser("parse", help="Parse a Patch Text file and summarize it")
    parse_parser.add_argument("file", help="Path to the .pchtxt file")
    parse_parser.add_argument("--config", default=None, help="Path to a JSON parse options file")
    parse_parser.add_argument("--json", action="store_true", help="Print the parsed document as JSON")
    parse_parser.add_argument(
        "--decode",
        action="store_true",
        help="Decode offset/value lines of binary and heap patches",
    )
    parse_parser.add_argument("--quiet", "-q", action="store_true", help="Do not print parser diagnostics")
    parse_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    meta_parser = subparsers.add_parser("meta", help="Print the meta block of a Patch Text file")
    meta_parser.add_argument("file", help="Path to the .pchtxt file")
    meta_parser.add_argument("--config", default=None, help="Path to a JSON parse options file")
    meta_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    update_parser = subparsers.add_parser("update", help="Compare a Patch Text file with its @url source")
    update_parser.add_argument("file", help="Path to the .pchtxt file")
    update_parser.add_argument("--config", default=None, help="Path to a JSON parse options file")
    update_parser.add_argument("--timeout", type=float, default=10.0, help="HTTP timeout in seconds")
    mode = update_parser.add_mutually_exclusive_group(required=True)
    mode.add_argument("--dry-run", action="store_true", help="Preview mode")
    mode.add_argument("--apply", action="store_true", help="Overwrite the local file when an update is found")
    update_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
