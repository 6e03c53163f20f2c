"""
DTO for whole-document text extraction request.
"""

from dataclasses import dataclass


@dataclass
class ExtractAllTextRequestDTO:
    pdf_url: str
