"""
Interface for reading a PDF page by page.

Adapters (e.g. PyMuPdfPageReader) expose the document as a sequence of
pages with their text fragments; range filtering happens in the use cases.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional

from features.extract_text.domain.entities import PageFragments


class IPageReader(ABC):
    """Port for iterating the pages of an in-memory PDF."""

    @abstractmethod
    def iter_pages(self, data: bytes, max_pages: Optional[int] = None) -> Iterator[PageFragments]:
        """
        Yield the pages of ``data`` in order, stopping after ``max_pages`` pages.

        Args:
            data: Raw PDF bytes
            max_pages: Upper bound on pages read; None reads the whole document

        Raises:
            DocumentParseError: if the bytes are not a readable PDF
        """
        raise NotImplementedError
