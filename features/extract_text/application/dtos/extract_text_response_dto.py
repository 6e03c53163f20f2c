"""
DTO for text extraction response.
"""

from dataclasses import dataclass


@dataclass
class ExtractTextResponseDTO:
    """Extracted text, trimmed of leading/trailing whitespace."""

    text: str
