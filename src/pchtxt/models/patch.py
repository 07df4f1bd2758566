"""Pydantic models for parsed Patch Text: contents, patches, collections.

A parse produces one :class:`Document`. Patches and collections are built up
while the parser walks the text and are only attached to their parent once
they hold something, so a finished document never contains an empty patch or
an empty collection.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_serializer

from pchtxt.models.enums import PatchType, TargetType

MAX_OFFSET = 0xFFFFFFFF


class PatchContent(BaseModel):
    """One edit: write *value* at *offset*.

    Cheat-script lines are stored with ``offset == 0`` and the line text as
    the value.
    """

    offset: int = Field(default=0, ge=0, le=MAX_OFFSET)
    value: bytes = b""

    @field_serializer("value", when_used="json")
    def _value_as_hex(self, value: bytes) -> str:
        return value.hex().upper()


class Patch(BaseModel):
    """A named, individually toggleable group of edits."""

    name: str = ""
    author: str = ""
    enabled: bool = False
    type: PatchType = PatchType.BINARY
    contents: list[PatchContent] = Field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return bool(self.contents)


class PatchCollection(BaseModel):
    """All patches for one binary, identified by its build id."""

    build_id: str = ""
    target_type: TargetType = TargetType.NSO
    patches: list[Patch] = Field(default_factory=list)


class Meta(BaseModel):
    """Header information of a Patch Text. Empty strings mean absent."""

    title: str = ""
    program_id: str = ""
    url: str = ""


class Document(BaseModel):
    """Complete result of parsing one Patch Text."""

    meta: Meta = Field(default_factory=Meta)
    collections: list[PatchCollection] = Field(default_factory=list)

    @property
    def patch_count(self) -> int:
        return sum(len(collection.patches) for collection in self.collections)
