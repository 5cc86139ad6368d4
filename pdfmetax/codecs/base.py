"""Codec protocol for document metadata operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from ..types import MetadataDictionary


@dataclass
class DocumentHandle:
    """Represents a parsed, mutable document owned by a single transfer."""

    raw_bytes: bytes
    num_pages: int


class DocumentCodec(Protocol):
    """Protocol defining parse, metadata access and serialization of documents."""

    def parse(self, data: bytes, password: Optional[str] = None) -> DocumentHandle:
        """Parse raw bytes into a document handle."""

    def read_metadata(self, handle: DocumentHandle) -> MetadataDictionary:
        """Return every metadata entry the document exposes."""

    def set_title(self, handle: DocumentHandle, value: str) -> None:
        ...

    def set_author(self, handle: DocumentHandle, value: str) -> None:
        ...

    def set_subject(self, handle: DocumentHandle, value: str) -> None:
        ...

    def set_keywords(self, handle: DocumentHandle, value: str) -> None:
        ...

    def set_creator(self, handle: DocumentHandle, value: str) -> None:
        ...

    def set_producer(self, handle: DocumentHandle, value: str) -> None:
        ...

    def set_creation_date(self, handle: DocumentHandle, value: datetime) -> None:
        ...

    def set_modification_date(self, handle: DocumentHandle, value: datetime) -> None:
        ...

    def set_generic_field(self, handle: DocumentHandle, key: str, value: str) -> None:
        """Create or overwrite an arbitrary metadata entry named ``key``."""

    def serialize(self, handle: DocumentHandle) -> bytes:
        """Write the handle back to raw bytes."""
