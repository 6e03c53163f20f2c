"""
DTO for ranged text extraction request.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class ExtractPageRangeRequestDTO:
    """
    Input for extracting text from a page range of a remote PDF.

    min_page / max_page hold the raw query values; the use case parses and
    validates them (None or empty means "use the default").
    """

    pdf_url: str
    min_page: Optional[str] = None
    max_page: Optional[str] = None
