"""
pdfmetax - Copy document metadata from one PDF to another.

Metadata (title, author, subject, keywords, creator, producer, creation and
modification dates, and any custom key/value field) is read from a source
document and written onto a target document. Fields only present in the
target are left untouched.

Quick Start:
    >>> from pdfmetax import load_slot_from_path, translate
    >>> source = load_slot_from_path('source.pdf')
    >>> target = load_slot_from_path('target.pdf')
    >>> result = translate(source, target)
    >>> result.write(result.filename)

Main Functions:
    - transfer: Apply a metadata dictionary onto a parsed document handle
    - translate: Transfer metadata between two loaded document slots
    - load_slot / load_slot_from_path: Load a document and its metadata

Exceptions:
    - PDFMetaxException: Base exception
    - CodecFailureError: Document codec failure
    - CorruptDocumentError: Unparseable document bytes
    - EncryptedDocumentError: Encrypted document without usable password
    - SerializationFailureError: Updated document cannot be written
    - InvalidDateValueError: Reserved date field is not a date
    - TransferCancelledError: Transfer cancelled before serialization

For CLI usage, use the 'pdfmetax' command after installation.
"""

__version__ = "1.0.0"

# Core functions
from pdfmetax.engine import plan_transfer, transfer
from pdfmetax.translator import load_slot, load_slot_from_path, suggested_filename, translate

# Codecs
from pdfmetax.codecs import DocumentCodec, DocumentHandle, PypdfCodec

# Data types
from pdfmetax.types import DocumentSlot, MetadataDictionary, TransferOptions, TransferResult

# Exceptions
from pdfmetax.exceptions import (
    PDFMetaxException,
    CodecFailureError,
    CorruptDocumentError,
    EncryptedDocumentError,
    SerializationFailureError,
    InvalidDateValueError,
    TransferCancelledError,
)

__author__ = "pdfmetax Contributors"
__license__ = "MIT"

__all__ = [
    # Core functions
    "transfer",
    "plan_transfer",
    "translate",
    "load_slot",
    "load_slot_from_path",
    "suggested_filename",
    # Codecs
    "DocumentCodec",
    "DocumentHandle",
    "PypdfCodec",
    # Data types
    "DocumentSlot",
    "MetadataDictionary",
    "TransferOptions",
    "TransferResult",
    # Exceptions
    "PDFMetaxException",
    "CodecFailureError",
    "CorruptDocumentError",
    "EncryptedDocumentError",
    "SerializationFailureError",
    "InvalidDateValueError",
    "TransferCancelledError",
    # Version info
    "__version__",
]
