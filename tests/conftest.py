"""
Shared fixtures: in-memory PDFs built with PyMuPDF and a stub fetcher.
"""

from typing import List, Optional

import fitz  # PyMuPDF
import pytest
from fastapi.testclient import TestClient

from features.extract_text.application.use_cases import (
    ExtractAllTextUseCase,
    ExtractPageRangeTextUseCase,
)
from features.extract_text.domain.interfaces import IDocumentFetcher
from features.extract_text.infrastructure.pdf_text_extractor_pymupdf import PyMuPdfPageReader
from features.extract_text.presentation.api import (
    build_extract_all_text_use_case,
    build_extract_page_range_use_case,
)
from main import app


PDF_URL = "https://x/doc.pdf"


def build_pdf(pages: List[List[str]], user_pw: Optional[str] = None) -> bytes:
    """Create a PDF where each inner list holds the lines of one page; encrypted when user_pw is given."""
    doc = fitz.open()
    try:
        for lines in pages:
            page = doc.new_page()
            for i, line in enumerate(lines):
                page.insert_text((72, 72 + i * 20), line)
        if user_pw is not None:
            return doc.tobytes(
                encryption=fitz.PDF_ENCRYPT_AES_256,
                owner_pw=user_pw + "-owner",
                user_pw=user_pw,
            )
        return doc.tobytes()
    finally:
        doc.close()


class StubFetcher(IDocumentFetcher):
    """Returns fixed bytes or raises a fixed error; records requested URLs."""

    def __init__(self, data: bytes = b"", error: Exception = None):
        self.data = data
        self.error = error
        self.calls: List[str] = []

    def fetch(self, url: str) -> bytes:
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return self.data


@pytest.fixture
def five_page_pdf() -> bytes:
    return build_pdf([[f"Page {n} first line", f"Page {n} second line"] for n in range(1, 6)])


@pytest.fixture
def stub_fetcher(five_page_pdf) -> StubFetcher:
    return StubFetcher(data=five_page_pdf)


@pytest.fixture
def client(stub_fetcher):
    reader = PyMuPdfPageReader()
    app.dependency_overrides[build_extract_page_range_use_case] = lambda: ExtractPageRangeTextUseCase(
        fetcher=stub_fetcher, reader=reader
    )
    app.dependency_overrides[build_extract_all_text_use_case] = lambda: ExtractAllTextUseCase(
        fetcher=stub_fetcher, reader=reader
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
