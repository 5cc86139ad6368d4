from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional
import sys

import pytest
from pypdf import PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

PdfFactory = Callable[..., Path]


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> PdfFactory:
    def _create(
        filename: str,
        metadata: Optional[Dict[str, str]] = None,
        *,
        pages: int = 1,
        password: Optional[str] = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=200, height=200)
        if metadata:
            writer.add_metadata(metadata)
        if password is not None:
            writer.encrypt(password)
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def source_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory(
        "source.pdf",
        {
            "/Title": "Quarterly Report",
            "/Author": "Jane Doe",
            "/Subject": "Finance",
            "/Keywords": "q1,finance",
            "/Creator": "pytest",
            "/Producer": "pdfmetax-tests",
            "/CreationDate": "D:20230501120000+01'00'",
            "/ModDate": "D:20230502130000+01'00'",
            "/Department": "Accounting",
        },
    )


@pytest.fixture()
def target_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory(
        "target.pdf",
        {"/Title": "Old Title", "/TargetOnly": "keep me"},
        pages=3,
    )


@pytest.fixture()
def blank_pdf(pdf_factory: PdfFactory) -> Path:
    return pdf_factory("blank.pdf")
