"""High level helpers for loading documents and translating metadata between them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from .codecs import PypdfCodec
from .codecs.base import DocumentCodec
from .engine import CancelCheck, transfer
from .exceptions import CorruptDocumentError
from .types import DocumentSlot, TransferOptions, TransferResult
from .utils import time_block

LOGGER = logging.getLogger(__name__)


def load_slot(
    data: bytes,
    filename: str,
    *,
    codec: Optional[DocumentCodec] = None,
    password: Optional[str] = None,
) -> DocumentSlot:
    """Parse ``data`` and capture its metadata in a fresh :class:`DocumentSlot`."""
    codec = codec or PypdfCodec()
    LOGGER.info("Loading %s (%d bytes)", filename, len(data))
    handle = codec.parse(data, password=password)
    metadata = codec.read_metadata(handle)
    return DocumentSlot(filename=filename, data=data, metadata=metadata)


def load_slot_from_path(
    path: Union[str, Path],
    *,
    codec: Optional[DocumentCodec] = None,
    password: Optional[str] = None,
) -> DocumentSlot:
    """Read ``path`` from disk and load it into a :class:`DocumentSlot`."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise CorruptDocumentError(f"Unable to read file: {path}. Error: {exc}") from exc
    return load_slot(data, path.name, codec=codec, password=password)


def suggested_filename(target_filename: str, options: Optional[TransferOptions] = None) -> str:
    """Return ``translated-metadata.<ext>`` using the target's extension when it has one."""
    options = options or TransferOptions()
    extension = Path(target_filename).suffix.lstrip(".") or options.default_extension
    return f"{options.filename_stem}.{extension}"


def translate(
    source: DocumentSlot,
    target: DocumentSlot,
    *,
    codec: Optional[DocumentCodec] = None,
    options: Optional[TransferOptions] = None,
    cancel_check: Optional[CancelCheck] = None,
) -> TransferResult:
    """
    Copy ``source`` metadata onto the document held in ``target``.

    The target bytes are parsed into a new handle for this call only; neither
    slot is modified.
    """
    codec = codec or PypdfCodec()
    options = options or TransferOptions()

    with time_block(LOGGER, f"Metadata transfer {source.filename} -> {target.filename}"):
        handle = codec.parse(target.data, password=options.target_password)
        metadata, data = transfer(source.metadata, handle, codec, cancel_check=cancel_check)

    return TransferResult(
        metadata=metadata,
        data=data,
        filename=suggested_filename(target.filename, options),
    )


__all__ = ["load_slot", "load_slot_from_path", "suggested_filename", "translate"]
