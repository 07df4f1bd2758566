"""Command-line interface for pchtxt."""

from __future__ import annotations

import logging as logging

from pchtxt import check_for_update as check_for_update
from pchtxt import load_meta as load_meta
from pchtxt import load_options as load_options
from pchtxt import load_pchtxt as load_pchtxt
from pchtxt.cli.app import main as main
from pchtxt.cli.commands import meta as meta_command
from pchtxt.cli.commands import parse as parse_command
from pchtxt.cli.commands import update as update_command
from pchtxt.cli.parser import build_parser as build_parser
from pchtxt.loader import read_pchtxt_text as read_pchtxt_text

_format_parse_summary = parse_command.format_parse_summary
_format_meta = meta_command.format_meta
_format_update_summary = update_command.format_update_summary

_run_parse = parse_command.run_parse
_run_meta = meta_command.run_meta
_run_update = update_command.run_update
