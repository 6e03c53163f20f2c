"""
DTOs (Data Transfer Objects) used by the PDF text extraction use cases and API.
"""

from .extract_page_range_request_dto import ExtractPageRangeRequestDTO
from .extract_all_text_request_dto import ExtractAllTextRequestDTO
from .extract_text_response_dto import ExtractTextResponseDTO

__all__ = [
    "ExtractPageRangeRequestDTO",
    "ExtractAllTextRequestDTO",
    "ExtractTextResponseDTO",
]
