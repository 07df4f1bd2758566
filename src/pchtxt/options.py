"""Parse options and their JSON loader."""

from __future__ import annotations

import codecs
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from pchtxt.exceptions import OptionsError


class ParseOptions(BaseModel):
    """Settings for one parse.

    Attributes:
        verbose: Start with debug diagnostics on, as if the text began with
            ``@flag debug_info``.
        decode_contents: Decode ``offset value`` body lines of binary and heap
            patches into :class:`~pchtxt.models.PatchContent` entries. Off by
            default: body lines are then only checked for a valid offset.
        encoding: Text encoding used when reading files.
    """

    verbose: bool = False
    decode_contents: bool = False
    encoding: str = "utf-8"

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value


def load_options(path: str | Path) -> ParseOptions:
    options_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(options_path.read_text(encoding="utf-8"))
        return ParseOptions.model_validate(raw_payload)
    except OSError as exc:
        raise OptionsError(f"failed reading options file: {options_path}") from exc
    except json.JSONDecodeError as exc:
        raise OptionsError(f"invalid JSON in options file: {options_path}") from exc
    except ValidationError as exc:
        raise OptionsError(f"invalid options: {exc}") from exc
