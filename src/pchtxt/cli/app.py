"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from pchtxt import OptionsError, PatchTextLoadError, RemoteFetchError


def main(argv: list[str] | None = None) -> int:
    import pchtxt.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "parse":
            cli._run_parse(args)
        elif args.command == "meta":
            cli._run_meta(args)
        elif args.command == "update":
            cli._run_update(args)
        return 0
    except (OptionsError, PatchTextLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except RemoteFetchError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
