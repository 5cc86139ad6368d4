"""
Custom exceptions for pdfmetax.

This module defines all custom exceptions used throughout the library.
"""

from typing import Any


class PDFMetaxException(Exception):
    """Base exception for all pdfmetax errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown metadata transfer error occurred."


class CodecFailureError(PDFMetaxException):
    """Raised when the document codec fails to read, update or write a document."""

    @property
    def default_message(self) -> str:
        return "The document codec failed to process the document."


class CorruptDocumentError(CodecFailureError):
    """Raised when document bytes cannot be parsed."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted document."


class EncryptedDocumentError(CodecFailureError):
    """Raised when a document is encrypted and cannot be opened."""

    @property
    def default_message(self) -> str:
        return "Document is encrypted and cannot be processed without a password."


class SerializationFailureError(CodecFailureError):
    """Raised when an updated document cannot be written back to bytes."""

    @property
    def default_message(self) -> str:
        return "Unable to serialize the updated document."


class InvalidDateValueError(PDFMetaxException):
    """Raised when a reserved date field holds a value that is not a date."""

    def __init__(self, key: str, value: Any, message: str = "") -> None:
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid date value for '{key}': {value!r}")

    @property
    def default_message(self) -> str:
        return "Invalid date value."


class TransferCancelledError(PDFMetaxException):
    """Raised when a transfer is cancelled before serialization."""

    @property
    def default_message(self) -> str:
        return "Metadata transfer was cancelled."
