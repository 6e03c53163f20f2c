"""
Domain entities for the PDF text extraction feature.
"""

from dataclasses import dataclass, field
from typing import List


DEFAULT_MIN_PAGE = 1
DEFAULT_MAX_PAGE = 100


@dataclass(frozen=True)
class PageRange:
    """Inclusive, 1-indexed range of pages to extract."""

    min_page: int = DEFAULT_MIN_PAGE
    max_page: int = DEFAULT_MAX_PAGE

    def includes(self, page_number: int) -> bool:
        return self.min_page <= page_number <= self.max_page


@dataclass
class PageFragments:
    """Text fragments of a single page, in structural order."""

    page_number: int
    fragments: List[str] = field(default_factory=list)

    def text(self) -> str:
        return " ".join(self.fragments)
