"""Domain models for pchtxt.

Re-exports all public model classes for convenient access::

    from pchtxt.models import Document, Patch, PatchCollection
"""

from pchtxt.models.enums import PatchType, Severity, TargetType
from pchtxt.models.patch import MAX_OFFSET, Document, Meta, Patch, PatchCollection, PatchContent

__all__ = [
    "MAX_OFFSET",
    "Document",
    "Meta",
    "Patch",
    "PatchCollection",
    "PatchContent",
    "PatchType",
    "Severity",
    "TargetType",
]
