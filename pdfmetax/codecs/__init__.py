"""Document codecs for pdfmetax."""

from .base import DocumentCodec, DocumentHandle
from .pypdf_codec import PypdfCodec, PypdfHandle

__all__ = [
    "DocumentCodec",
    "DocumentHandle",
    "PypdfCodec",
    "PypdfHandle",
]
