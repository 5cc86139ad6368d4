"""Metadata transfer engine built around the :class:`DocumentCodec` protocol."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Mapping, Optional, Tuple

from .codecs.base import DocumentCodec, DocumentHandle
from .exceptions import (
    CodecFailureError,
    InvalidDateValueError,
    PDFMetaxException,
    TransferCancelledError,
)
from .types import MetadataDictionary, MetadataValue
from .utils import format_pdf_date, parse_date_value

LOGGER = logging.getLogger(__name__)

DATE_SETTERS = {
    "CreationDate": "set_creation_date",
    "ModDate": "set_modification_date",
}

TEXT_SETTERS = {
    "Title": "set_title",
    "Author": "set_author",
    "Subject": "set_subject",
    "Keywords": "set_keywords",
    "Creator": "set_creator",
    "Producer": "set_producer",
}

CancelCheck = Callable[[], bool]


@dataclass(frozen=True)
class FieldWrite:
    """A single planned write into the target document."""

    key: str
    value: MetadataValue
    setter: Optional[str] = None

    @property
    def is_generic(self) -> bool:
        return self.setter is None

    def apply(self, codec: DocumentCodec, handle: DocumentHandle) -> None:
        if self.setter is None:
            codec.set_generic_field(handle, self.key, self.value)
        else:
            getattr(codec, self.setter)(handle, self.value)


def _as_text(value: MetadataValue) -> str:
    if isinstance(value, datetime):
        return format_pdf_date(value)
    return str(value)


def plan_transfer(source: Mapping[str, MetadataValue]) -> List[FieldWrite]:
    """
    Turn ``source`` into the ordered list of writes a transfer performs.

    Reserved date fields are parsed here, so an invalid date is reported before
    any target document is modified.

    Raises:
        InvalidDateValueError: If ``CreationDate`` or ``ModDate`` is not a date.
    """
    writes: List[FieldWrite] = []
    for key, value in source.items():
        if key in DATE_SETTERS:
            try:
                parsed = parse_date_value(value)
            except ValueError as exc:
                raise InvalidDateValueError(key, value) from exc
            writes.append(FieldWrite(key, parsed, DATE_SETTERS[key]))
        elif key in TEXT_SETTERS:
            writes.append(FieldWrite(key, _as_text(value), TEXT_SETTERS[key]))
        else:
            writes.append(FieldWrite(key, _as_text(value)))
    return writes


def transfer(
    source: Mapping[str, MetadataValue],
    target: DocumentHandle,
    codec: DocumentCodec,
    *,
    cancel_check: Optional[CancelCheck] = None,
) -> Tuple[MetadataDictionary, bytes]:
    """
    Apply ``source`` metadata onto ``target`` and serialize the result.

    Returns the target's metadata as re-read after the writes together with the
    serialized document. An empty ``source`` leaves the document untouched and
    returns its original bytes.
    """
    if not source:
        LOGGER.info("Source metadata is empty; returning target unchanged")
        return _call(codec.read_metadata, target), target.raw_bytes

    writes = plan_transfer(source)
    LOGGER.info("Transferring %d metadata field(s)", len(writes))

    for write in writes:
        LOGGER.debug(
            "Setting %s via %s",
            write.key,
            "generic field" if write.is_generic else write.setter,
        )
        _call(write.apply, codec, target)

    if cancel_check is not None and cancel_check():
        raise TransferCancelledError()

    metadata = _call(codec.read_metadata, target)
    data = _call(codec.serialize, target)
    LOGGER.info("Serialized target document: %d bytes", len(data))
    return metadata, data


def _call(func: Callable, *args):
    try:
        return func(*args)
    except PDFMetaxException:
        raise
    except Exception as exc:
        raise CodecFailureError(f"Document codec failed: {exc}") from exc


__all__ = ["DATE_SETTERS", "TEXT_SETTERS", "FieldWrite", "plan_transfer", "transfer"]
