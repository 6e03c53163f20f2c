"""
Page-by-page text fragment extraction with PyMuPDF.

The document is opened from memory and read lazily; each page yields the text
spans of its text lines in block -> line -> span order. Image blocks are
ignored. Reading stops after ``max_pages`` pages, so a document shorter than
that is read to its last page without error.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

import fitz  # PyMuPDF

from features.extract_text.application.page_range import parse_page_range
from features.extract_text.application.use_cases import join_pages
from features.extract_text.domain.entities import PageFragments
from features.extract_text.domain.errors import DocumentParseError, InvalidPageRangeError
from features.extract_text.domain.interfaces import IPageReader


logger = logging.getLogger(__name__)


def _page_fragments(page: "fitz.Page") -> List[str]:
    """Collect span texts of a page in structural order."""
    fragments: List[str] = []
    layout = page.get_text("dict") or {}

    for block in layout.get("blocks", []):
        # 0 = text block according to PyMuPDF
        if block.get("type") != 0:
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                fragments.append(span.get("text", ""))

    return fragments


def _open_document(data: bytes) -> "fitz.Document":
    try:
        doc = fitz.open(stream=data, filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise DocumentParseError(str(e) or "Unable to parse PDF") from e

    if doc.needs_pass:
        doc.close()
        raise DocumentParseError("Document is password protected")
    if doc.page_count == 0:
        doc.close()
        raise DocumentParseError("Document has no pages")
    return doc


class PyMuPdfPageReader(IPageReader):
    """IPageReader adapter over PyMuPDF."""

    def iter_pages(self, data: bytes, max_pages: Optional[int] = None) -> Iterator[PageFragments]:
        doc = _open_document(data)
        try:
            total = doc.page_count
            limit = total if max_pages is None else min(total, max_pages)
            logger.debug(f"iter_pages: reading {limit} of {total} pages")

            for index in range(limit):
                try:
                    page = doc.load_page(index)
                    fragments = _page_fragments(page)
                except (RuntimeError, ValueError) as e:
                    raise DocumentParseError(str(e) or f"Unable to read page {index + 1}") from e
                yield PageFragments(page_number=index + 1, fragments=fragments)
        finally:
            doc.close()


def extract_text_from_file(
    pdf_path: str,
    min_page: Optional[str] = None,
    max_page: Optional[str] = None,
) -> str:
    """
    Convenience helper: extract the trimmed text of a local PDF.

    Without bounds the whole document is read. With either bound the values
    go through the same parsing and validation as the HTTP route (defaults
    1 and 100).

    Raises:
        InvalidPageRangeError: for unusable bounds
    """
    page_range = None
    if min_page is not None or max_page is not None:
        page_range = parse_page_range(min_page, max_page)

    with open(pdf_path, "rb") as f:
        data = f.read()

    reader = PyMuPdfPageReader()
    max_pages = page_range.max_page if page_range is not None else None
    return join_pages(reader.iter_pages(data, max_pages=max_pages), page_range)


if __name__ == "__main__":
    # Minimal CLI entry point for ad-hoc runs:
    #   python -m features.extract_text.infrastructure.pdf_text_extractor_pymupdf file.pdf 2 5
    import argparse
    import os

    parser = argparse.ArgumentParser(description="Extract plain text from a local PDF.")
    parser.add_argument("pdf_path", type=str, help="Path to the input PDF.")
    parser.add_argument("min_page", type=str, nargs="?", default=None, help="First page (1-indexed, default 1).")
    parser.add_argument("max_page", type=str, nargs="?", default=None, help="Last page (inclusive, default 100).")

    args = parser.parse_args()

    if not os.path.exists(args.pdf_path):
        raise SystemExit(f"PDF not found: {args.pdf_path}")

    try:
        print(extract_text_from_file(args.pdf_path, args.min_page, args.max_page))
    except InvalidPageRangeError as e:
        raise SystemExit(str(e))
