"""
Application use cases for the PDF text extraction feature.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List

from features.extract_text.domain.entities import PageFragments, PageRange
from features.extract_text.domain.interfaces import IDocumentFetcher, IPageReader
from .dtos import (
    ExtractAllTextRequestDTO,
    ExtractPageRangeRequestDTO,
    ExtractTextResponseDTO,
)
from .page_range import parse_page_range


logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


def join_pages(pages: Iterable[PageFragments], page_range: PageRange | None = None) -> str:
    """
    Concatenate page texts in order and trim the result.

    Pages outside ``page_range`` contribute nothing. Within a page, fragments
    are joined with a single space; pages are separated by a blank line.
    """
    parts: List[str] = []
    for page in pages:
        if page_range is not None and not page_range.includes(page.page_number):
            continue
        parts.append(page.text())
    return PAGE_SEPARATOR.join(parts).strip()


@dataclass
class ExtractPageRangeTextUseCase:
    """
    Fetch a remote PDF and extract the text of pages [min, max].

    The range is validated before anything is downloaded. The reader stops
    after max pages, so a shorter document is simply read to its end.
    """

    fetcher: IDocumentFetcher
    reader: IPageReader

    def execute(self, request: ExtractPageRangeRequestDTO) -> ExtractTextResponseDTO:
        page_range = parse_page_range(request.min_page, request.max_page)

        data = self.fetcher.fetch(request.pdf_url)

        pages = self.reader.iter_pages(data, max_pages=page_range.max_page)
        text = join_pages(pages, page_range)

        logger.info(
            f"ExtractPageRangeTextUseCase: pages {page_range.min_page}-{page_range.max_page} "
            f"of {request.pdf_url} -> {len(text)} chars"
        )
        return ExtractTextResponseDTO(text=text)


@dataclass
class ExtractAllTextUseCase:
    """Fetch a remote PDF and extract the text of every page."""

    fetcher: IDocumentFetcher
    reader: IPageReader

    def execute(self, request: ExtractAllTextRequestDTO) -> ExtractTextResponseDTO:
        data = self.fetcher.fetch(request.pdf_url)

        text = join_pages(self.reader.iter_pages(data))

        logger.info(f"ExtractAllTextUseCase: {request.pdf_url} -> {len(text)} chars")
        return ExtractTextResponseDTO(text=text)
