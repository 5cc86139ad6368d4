"""
Type definitions and dataclasses for pdfmetax.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional, Union

MetadataValue = Union[str, datetime]
MetadataDictionary = Dict[str, MetadataValue]


@dataclass(frozen=True)
class DocumentSlot:
    """
    A loaded document waiting to take part in a transfer.

    Attributes:
        filename: Name of the file the bytes were loaded from
        data: Raw document bytes
        metadata: Metadata read from ``data`` when the slot was loaded
    """
    filename: str
    data: bytes
    metadata: MetadataDictionary = field(default_factory=dict)


@dataclass(frozen=True)
class TransferOptions:
    """Options controlling a metadata transfer."""

    filename_stem: str = "translated-metadata"
    default_extension: str = "dat"
    target_password: Optional[str] = None


@dataclass
class TransferResult:
    """
    Result of a metadata transfer.

    Attributes:
        metadata: Target metadata as re-read after the transfer
        data: Serialized target document
        filename: Suggested filename for saving ``data``
    """
    metadata: MetadataDictionary
    data: bytes
    filename: str

    def write(self, destination: Union[str, Path]) -> Path:
        """Persist the transferred document to ``destination``."""
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wb") as handle:
            handle.write(self.data)
        return path
