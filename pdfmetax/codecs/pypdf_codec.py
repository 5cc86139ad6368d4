"""pypdf codec implementation for pdfmetax."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import (
    CodecFailureError,
    CorruptDocumentError,
    EncryptedDocumentError,
    SerializationFailureError,
)
from ..types import MetadataDictionary
from ..utils import format_pdf_date, parse_date_value
from .base import DocumentCodec, DocumentHandle

LOGGER = logging.getLogger(__name__)

DATE_KEYS = frozenset({"CreationDate", "ModDate"})


@dataclass
class PypdfHandle(DocumentHandle):
    writer: PdfWriter


class PypdfCodec(DocumentCodec):
    """Codec implementation that uses `pypdf` under the hood."""

    def parse(self, data: bytes, password: Optional[str] = None) -> PypdfHandle:
        try:
            reader = PdfReader(io.BytesIO(data))
        except PdfReadError as exc:
            raise CorruptDocumentError(f"Corrupted or invalid PDF document. Error: {exc}") from exc
        except Exception as exc:
            raise CorruptDocumentError(f"Unexpected error reading PDF document. Error: {exc}") from exc

        if reader.is_encrypted:
            if password:
                if reader.decrypt(password) == 0:
                    raise EncryptedDocumentError("Failed to decrypt PDF with supplied password.")
            else:
                raise EncryptedDocumentError("PDF is encrypted. Supply a password to process this file.")

        try:
            writer = PdfWriter(clone_from=reader)
            num_pages = len(writer.pages)
        except Exception as exc:
            raise CorruptDocumentError(f"Unable to load PDF document structure. Error: {exc}") from exc

        LOGGER.debug("Parsed PDF document: %d bytes, %d pages", len(data), num_pages)
        return PypdfHandle(raw_bytes=data, num_pages=num_pages, writer=writer)

    def read_metadata(self, handle: PypdfHandle) -> MetadataDictionary:
        try:
            info = handle.writer.metadata
        except Exception as exc:
            raise CodecFailureError(f"Unable to read document information. Error: {exc}") from exc

        metadata: MetadataDictionary = {}
        if not info:
            return metadata

        for key, value in info.items():
            name = str(key)
            if name.startswith("/"):
                name = name[1:]
            if hasattr(value, "get_object"):
                value = value.get_object()
            text = str(value)

            if name in DATE_KEYS:
                try:
                    metadata[name] = parse_date_value(text)
                except ValueError:
                    LOGGER.warning("Stored %s is not a valid date, keeping raw text: %r", name, text)
                    metadata[name] = text
            else:
                metadata[name] = text
        return metadata

    def set_title(self, handle: PypdfHandle, value: str) -> None:
        self._set_entry(handle, "Title", value)

    def set_author(self, handle: PypdfHandle, value: str) -> None:
        self._set_entry(handle, "Author", value)

    def set_subject(self, handle: PypdfHandle, value: str) -> None:
        self._set_entry(handle, "Subject", value)

    def set_keywords(self, handle: PypdfHandle, value: str) -> None:
        self._set_entry(handle, "Keywords", value)

    def set_creator(self, handle: PypdfHandle, value: str) -> None:
        self._set_entry(handle, "Creator", value)

    def set_producer(self, handle: PypdfHandle, value: str) -> None:
        self._set_entry(handle, "Producer", value)

    def set_creation_date(self, handle: PypdfHandle, value: datetime) -> None:
        self._set_entry(handle, "CreationDate", format_pdf_date(value))

    def set_modification_date(self, handle: PypdfHandle, value: datetime) -> None:
        self._set_entry(handle, "ModDate", format_pdf_date(value))

    def set_generic_field(self, handle: PypdfHandle, key: str, value: str) -> None:
        self._set_entry(handle, key, value)

    def serialize(self, handle: PypdfHandle) -> bytes:
        buffer = io.BytesIO()
        try:
            handle.writer.write(buffer)
        except Exception as exc:
            raise SerializationFailureError(f"Unable to write PDF document. Error: {exc}") from exc
        return buffer.getvalue()

    def _set_entry(self, handle: PypdfHandle, key: str, value: str) -> None:
        try:
            handle.writer.add_metadata({f"/{key}": value})
        except Exception as exc:
            raise CodecFailureError(f"Unable to set metadata field '{key}'. Error: {exc}") from exc
