from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from pdfmetax.codecs import PypdfCodec, PypdfHandle
from pdfmetax.exceptions import (
    CorruptDocumentError,
    EncryptedDocumentError,
    SerializationFailureError,
)


def test_parse_returns_handle(target_pdf):
    data = target_pdf.read_bytes()
    handle = PypdfCodec().parse(data)

    assert isinstance(handle, PypdfHandle)
    assert handle.num_pages == 3
    assert handle.raw_bytes == data


@pytest.mark.parametrize("data", [b"", b"not a pdf at all"])
def test_parse_rejects_corrupt_bytes(data):
    with pytest.raises(CorruptDocumentError):
        PypdfCodec().parse(data)


def test_read_metadata_strips_names_and_parses_dates(source_pdf):
    codec = PypdfCodec()
    metadata = codec.read_metadata(codec.parse(source_pdf.read_bytes()))

    assert metadata["Title"] == "Quarterly Report"
    assert metadata["Department"] == "Accounting"
    assert metadata["CreationDate"] == datetime(2023, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=1)))
    assert metadata["ModDate"] == datetime(2023, 5, 2, 13, 0, tzinfo=timezone(timedelta(hours=1)))
    assert not any(key.startswith("/") for key in metadata)


def test_read_metadata_keeps_unparseable_stored_date_as_text(pdf_factory, caplog):
    path = pdf_factory("bad-date.pdf", {"/CreationDate": "yesterday"})
    codec = PypdfCodec()

    with caplog.at_level("WARNING"):
        metadata = codec.read_metadata(codec.parse(path.read_bytes()))

    assert metadata["CreationDate"] == "yesterday"
    assert "CreationDate" in caplog.text


def test_setters_write_information_entries(blank_pdf):
    codec = PypdfCodec()
    handle = codec.parse(blank_pdf.read_bytes())
    created = datetime(2022, 12, 31, 23, 59, 58, tzinfo=timezone(timedelta(hours=-5, minutes=-30)))

    codec.set_title(handle, "T")
    codec.set_author(handle, "A")
    codec.set_subject(handle, "S")
    codec.set_keywords(handle, "K")
    codec.set_creator(handle, "C")
    codec.set_producer(handle, "P")
    codec.set_creation_date(handle, created)
    codec.set_modification_date(handle, datetime(2023, 1, 1))
    codec.set_generic_field(handle, "Custom", "value")

    metadata = codec.read_metadata(codec.parse(codec.serialize(handle)))
    assert metadata["Title"] == "T"
    assert metadata["Author"] == "A"
    assert metadata["Subject"] == "S"
    assert metadata["Keywords"] == "K"
    assert metadata["Creator"] == "C"
    assert metadata["Producer"] == "P"
    assert metadata["CreationDate"] == created
    assert metadata["ModDate"] == datetime(2023, 1, 1, tzinfo=timezone.utc)
    assert metadata["Custom"] == "value"


def test_set_generic_field_overwrites_existing_entry(target_pdf):
    codec = PypdfCodec()
    handle = codec.parse(target_pdf.read_bytes())

    codec.set_generic_field(handle, "TargetOnly", "replaced")

    assert codec.read_metadata(handle)["TargetOnly"] == "replaced"


def test_encrypted_document_requires_password(pdf_factory):
    path = pdf_factory("locked.pdf", {"/Title": "Secret"}, password="s3cret")
    codec = PypdfCodec()

    with pytest.raises(EncryptedDocumentError):
        codec.parse(path.read_bytes())
    with pytest.raises(EncryptedDocumentError):
        codec.parse(path.read_bytes(), password="wrong")

    handle = codec.parse(path.read_bytes(), password="s3cret")
    assert codec.read_metadata(handle)["Title"] == "Secret"


def test_serialize_failure_is_wrapped(blank_pdf, monkeypatch):
    codec = PypdfCodec()
    handle = codec.parse(blank_pdf.read_bytes())

    def _fail(stream):
        raise OSError("disk on fire")

    monkeypatch.setattr(handle.writer, "write", _fail)

    with pytest.raises(SerializationFailureError) as excinfo:
        codec.serialize(handle)
    assert "disk on fire" in str(excinfo.value)
